# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""GNSS Time Representation and Calendar Conversions"""

from datetime import datetime, timedelta
from typing import List, Union

from .constants import (
    BDT0,
    GPST0,
    GST0,
    J2000_EPOCH,
    MJD_J2000,
    SECONDS_PER_DAY,
    SECONDS_PER_WEEK,
)

_REFERENCE_EPOCHS = {
    'GPS': GPST0,
    'GAL': GST0,
    'BDS': BDT0,
}


class GNSSTime:
    """GNSS Time representation with type safety

    Times are held as week number and time of week in one time system.
    Arithmetic between two times is only allowed inside the same system.
    """

    def __init__(self, week: int = 0, tow: float = 0.0, time_sys: str = 'GPS'):
        """
        Initialize GNSS time

        Parameters:
        -----------
        week : int
            Week number
        tow : float
            Time of week in seconds
        time_sys : str
            Time system ('GPS', 'GAL', 'BDS')
        """
        self.week = int(week)
        self.tow = float(tow)
        self.time_sys = time_sys.upper()

        if self.time_sys not in _REFERENCE_EPOCHS:
            raise ValueError(
                f"Invalid time system: {time_sys}. Must be one of {list(_REFERENCE_EPOCHS)}")

        # Normalize TOW to [0, 604800)
        extra_weeks = int(self.tow // SECONDS_PER_WEEK)
        self.week += extra_weeks
        self.tow -= extra_weeks * SECONDS_PER_WEEK

    @classmethod
    def from_datetime(cls, dt: datetime, time_sys: str = 'GPS') -> 'GNSSTime':
        """Create GNSSTime from a calendar datetime in the same time scale"""
        ref_date = _reference_datetime(time_sys)
        delta = dt - ref_date
        weeks = delta.days // 7
        tow = (delta.days % 7) * SECONDS_PER_DAY + delta.seconds + delta.microseconds * 1e-6
        return cls(weeks, tow, time_sys)

    @classmethod
    def from_gps_seconds(cls, gps_seconds: float, time_sys: str = 'GPS') -> 'GNSSTime':
        """Create GNSSTime from seconds since the system epoch"""
        week = int(gps_seconds // SECONDS_PER_WEEK)
        tow = gps_seconds - week * SECONDS_PER_WEEK
        return cls(week, tow, time_sys)

    def to_datetime(self) -> datetime:
        """Convert to datetime object"""
        return _reference_datetime(self.time_sys) + timedelta(weeks=self.week, seconds=self.tow)

    def to_mjd(self) -> float:
        """Convert to Modified Julian Day"""
        return time2mjd(self)

    def to_seconds(self) -> float:
        """Seconds since the system epoch"""
        return self.week * SECONDS_PER_WEEK + self.tow

    def __add__(self, seconds: float) -> 'GNSSTime':
        if isinstance(seconds, (int, float)):
            return GNSSTime(self.week, self.tow + seconds, self.time_sys)
        raise TypeError(f"Cannot add {type(seconds)} to GNSSTime")

    def __sub__(self, other: Union['GNSSTime', float]) -> Union[float, 'GNSSTime']:
        """Subtract time (returns seconds) or seconds (returns time)"""
        if isinstance(other, GNSSTime):
            return timediff(self, other)
        elif isinstance(other, (int, float)):
            return self + (-other)
        raise TypeError(f"Cannot subtract {type(other)} from GNSSTime")

    def _check_comparable(self, other: 'GNSSTime'):
        if self.time_sys != other.time_sys:
            raise ValueError(
                f"Cannot compare times with different systems: {self.time_sys} and {other.time_sys}")

    def __lt__(self, other: 'GNSSTime') -> bool:
        if not isinstance(other, GNSSTime):
            return NotImplemented
        self._check_comparable(other)
        return (self.week, self.tow) < (other.week, other.tow)

    def __le__(self, other: 'GNSSTime') -> bool:
        if not isinstance(other, GNSSTime):
            return NotImplemented
        self._check_comparable(other)
        return (self.week, self.tow) <= (other.week, other.tow)

    def __eq__(self, other: 'GNSSTime') -> bool:
        if not isinstance(other, GNSSTime):
            return NotImplemented
        return self.time_sys == other.time_sys and self.week == other.week and abs(self.tow - other.tow) < 1e-9

    def __hash__(self):
        # tow equality is tolerant, so it cannot take part in the hash
        return hash((self.time_sys, self.week))

    def __str__(self):
        return f"{self.time_sys} Week: {self.week}, TOW: {self.tow:.3f}"

    def __repr__(self):
        return f"GNSSTime({self.week}, {self.tow}, '{self.time_sys}')"


TimeLike = Union[GNSSTime, datetime]


def _reference_datetime(time_sys: str) -> datetime:
    try:
        return datetime(*_REFERENCE_EPOCHS[time_sys.upper()])
    except KeyError:
        raise ValueError(f"Unknown time system: {time_sys}") from None


def as_gnss_time(time: TimeLike, time_sys: str = 'GPS') -> GNSSTime:
    """Accept a GNSSTime or a naive datetime (in the time system's own scale)"""
    if isinstance(time, GNSSTime):
        return time
    if isinstance(time, datetime):
        return GNSSTime.from_datetime(time, time_sys)
    raise TypeError(f"Expected GNSSTime or datetime, got {type(time).__name__}")


def epoch2time(ep: List[float], time_sys: str = 'GPS') -> GNSSTime:
    """Convert calendar epoch [year, month, day, hour, min, sec] to time"""
    year, month, day, hour, minute = (int(v) for v in ep[:5])
    sec = float(ep[5]) if len(ep) > 5 else 0.0
    dt = datetime(year, month, day, hour, minute) + timedelta(seconds=sec)
    return GNSSTime.from_datetime(dt, time_sys)


def time2epoch(time: TimeLike) -> List[float]:
    """Convert time to calendar epoch [year, month, day, hour, min, sec]"""
    dt = as_gnss_time(time).to_datetime()
    sec = dt.second + dt.microsecond * 1e-6
    return [dt.year, dt.month, dt.day, dt.hour, dt.minute, sec]


def timediff(t1: TimeLike, t2: TimeLike) -> float:
    """Compute time difference t1 - t2 in seconds"""
    t1 = as_gnss_time(t1)
    t2 = as_gnss_time(t2, t1.time_sys)
    if t1.time_sys != t2.time_sys:
        raise ValueError(
            f"Time systems must match for difference: {t1.time_sys} and {t2.time_sys}")
    return (t1.week - t2.week) * SECONDS_PER_WEEK + (t1.tow - t2.tow)


def time2doy(time: TimeLike) -> float:
    """Day of year, fractional and 1-based (Jan 1 00:00 is 1.0)

    Parameters:
    -----------
    time : GNSSTime or datetime
        Time to convert

    Returns:
    --------
    float
        Day of year including the fraction of the current day
    """
    time = as_gnss_time(time)
    ep = time2epoch(time)
    year_start = epoch2time([ep[0], 1, 1, 0, 0, 0], time.time_sys)
    return timediff(time, year_start) / SECONDS_PER_DAY + 1.0


def time2mjd(time: TimeLike) -> float:
    """Modified Julian date counted from the J2000.0 epoch"""
    time = as_gnss_time(time)
    j2000 = epoch2time(J2000_EPOCH, time.time_sys)
    return MJD_J2000 + timediff(time, j2000) / SECONDS_PER_DAY
