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

"""Core data structures for troposphere evaluation"""

from dataclasses import dataclass
from typing import NamedTuple

import numpy as np

from .constants import PI, R2D


@dataclass(frozen=True)
class GeodeticPosition:
    """Receiver geodetic position.

    Attributes
    ----------
    lat : float
        Geodetic latitude in radians, positive north
    lon : float
        Longitude in radians, positive east
    height : float
        Ellipsoidal height in meters

    Notes
    -----
    The height is not range checked here. Each evaluator rejects heights
    outside its own domain on every call.
    """
    lat: float
    lon: float
    height: float

    @classmethod
    def from_array(cls, llh) -> 'GeodeticPosition':
        """Create from [lat, lon, height] (rad, rad, m)"""
        llh = np.asarray(llh, dtype=float).ravel()
        if llh.size != 3:
            raise ValueError(f"Position must have 3 elements [lat, lon, h], got {llh.size}")
        return cls(float(llh[0]), float(llh[1]), float(llh[2]))

    def to_array(self) -> np.ndarray:
        return np.array([self.lat, self.lon, self.height])

    @property
    def lat_deg(self) -> float:
        return self.lat * R2D

    @property
    def lon_deg(self) -> float:
        return self.lon * R2D


@dataclass(frozen=True)
class LookDirection:
    """Line of sight from receiver to satellite.

    Attributes
    ----------
    azimuth : float
        Azimuth in radians, clockwise from north (not used by the models)
    elevation : float
        Elevation above the horizon in radians; <= 0 is degenerate
    """
    azimuth: float
    elevation: float

    @classmethod
    def from_array(cls, azel) -> 'LookDirection':
        """Create from [azimuth, elevation] (rad)"""
        azel = np.asarray(azel, dtype=float).ravel()
        if azel.size != 2:
            raise ValueError(f"Direction must have 2 elements [az, el], got {azel.size}")
        return cls(float(azel[0]), float(azel[1]))

    @property
    def zenith_angle(self) -> float:
        return PI / 2.0 - self.elevation


@dataclass(frozen=True)
class AtmosphericState:
    """Surface meteorology derived from the standard atmosphere.

    Attributes
    ----------
    pressure : float
        Total pressure in hPa
    temperature : float
        Temperature in Kelvin
    vapor_pressure : float
        Partial pressure of water vapor in hPa
    """
    pressure: float
    temperature: float
    vapor_pressure: float


class MappingFactors(NamedTuple):
    """Dry (hydrostatic) and wet mapping factors"""
    dry: float
    wet: float

    @classmethod
    def zero(cls) -> 'MappingFactors':
        """Sentinel for "no mapping applicable" """
        return cls(0.0, 0.0)


def as_position(pos) -> GeodeticPosition:
    """Accept a GeodeticPosition or an array-like [lat, lon, h]"""
    if isinstance(pos, GeodeticPosition):
        return pos
    return GeodeticPosition.from_array(pos)


def as_direction(azel) -> LookDirection:
    """Accept a LookDirection or an array-like [az, el]"""
    if isinstance(azel, LookDirection):
        return azel
    return LookDirection.from_array(azel)
