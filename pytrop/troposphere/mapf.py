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

"""Troposphere mapping function selection.

The mapping model is chosen once, when a ``MappingFunction`` is built, and
every later call goes through the same strategy:

- ``MappingModel.NMF``: Niell mapping function (default, self-contained)
- ``MappingModel.GMF``: an injected high-precision routine such as the
  Global Mapping Function, fed with modified Julian date, sea level height
  and zenith angle

Both strategies return ``MappingFactors(dry, wet)`` and both return zeros for
elevations at or below the horizon.
"""

from enum import Enum
from typing import Callable, Optional, Protocol, Tuple

from ..coordinate.height_conversion import GeoidLookup, ellipsoidal_to_orthometric, geoid_height
from ..core.constants import MAPF_HGT_MAX, MAPF_HGT_MIN, PI, R2D
from ..core.data_structures import MappingFactors, as_direction, as_position
from ..core.time import time2mjd
from ..logger import get_logger
from .niell import niell_mapping

logger = get_logger(__name__)

# (mjd, lat, lon, hgt_msl, zenith_angle) -> (dry, wet)
HighPrecisionRoutine = Callable[[float, float, float, float, float], Tuple[float, float]]


class MappingModel(Enum):
    """Available mapping models"""
    NMF = "nmf"
    GMF = "gmf"

    @classmethod
    def from_name(cls, name) -> 'MappingModel':
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).lower())
        except ValueError:
            raise ValueError(
                f"Unknown mapping model: {name}. Must be one of {[m.value for m in cls]}") from None


class MappingStrategy(Protocol):
    def __call__(self, time, pos, azel) -> MappingFactors:
        ...


class NiellStrategy:
    """Niell mapping function with ellipsoidal height"""

    model = MappingModel.NMF

    def __call__(self, time, pos, azel) -> MappingFactors:
        return niell_mapping(time, pos, azel)


class HighPrecisionStrategy:
    """Delegate to an external mapping routine.

    Parameters
    ----------
    routine : callable
        ``routine(mjd, lat, lon, hgt, zd) -> (dry, wet)`` with latitude,
        longitude and zenith angle in radians and height above sea level in
        meters
    geoid : callable, optional
        Geoid height lookup keyed by position, defaults to ``geoid_height``
    """

    model = MappingModel.GMF

    def __init__(self, routine: HighPrecisionRoutine, geoid: Optional[GeoidLookup] = None):
        if not callable(routine):
            raise TypeError("High-precision mapping routine must be callable")
        self.routine = routine
        self.geoid = geoid if geoid is not None else geoid_height

    def __call__(self, time, pos, azel) -> MappingFactors:
        pos = as_position(pos)
        el = as_direction(azel).elevation

        if el <= 0.0:
            return MappingFactors.zero()

        mjd = time2mjd(time)
        hgt = ellipsoidal_to_orthometric(pos, self.geoid)
        zd = PI / 2.0 - el

        dry, wet = self.routine(mjd, pos.lat, pos.lon, hgt, zd)
        return MappingFactors(float(dry), float(wet))


class MappingFunction:
    """Troposphere mapping function bound to one strategy.

    Parameters
    ----------
    strategy : callable, optional
        Mapping strategy; defaults to ``NiellStrategy``
    """

    def __init__(self, strategy: Optional[MappingStrategy] = None):
        self.strategy = strategy if strategy is not None else NiellStrategy()

    @property
    def model(self) -> Optional[MappingModel]:
        return getattr(self.strategy, 'model', None)

    def __call__(self, time, pos, azel) -> MappingFactors:
        """
        Dry and wet mapping factors.

        Args:
            time: Observation time (GNSSTime or datetime)
            pos: Receiver position [lat, lon, h] (rad, rad, m)
            azel: Azimuth/elevation [az, el] (rad)

        Returns:
            MappingFactors(dry, wet); zeros when the height is outside
            [-1000, 20000] m or the elevation is <= 0
        """
        pos = as_position(pos)
        azel = as_direction(azel)

        logger.trace("tropmapf: pos=%10.6f %11.6f %6.1f azel=%5.1f %4.1f",
                     pos.lat * R2D, pos.lon * R2D, pos.height,
                     azel.azimuth * R2D, azel.elevation * R2D)

        # chained comparison also rejects NaN heights
        if not MAPF_HGT_MIN <= pos.height <= MAPF_HGT_MAX:
            return MappingFactors.zero()

        return self.strategy(time, pos, azel)


def build_mapping_function(config) -> MappingFunction:
    """Build the mapping function selected by a configuration.

    Parameters
    ----------
    config : TroposphereConfig
        Must provide ``mapping_model``, ``gmf_routine`` and ``geoid``

    Returns
    -------
    MappingFunction

    Raises
    ------
    ValueError
        If the GMF model is selected without a routine
    """
    model = MappingModel.from_name(config.mapping_model)

    if model == MappingModel.NMF:
        strategy = NiellStrategy()
    else:
        if config.gmf_routine is None:
            raise ValueError("Mapping model 'gmf' requires a gmf_routine")
        strategy = HighPrecisionStrategy(config.gmf_routine, config.geoid)

    logger.debug(f"Troposphere mapping model: {model.value}")
    return MappingFunction(strategy)


_default_mapping = MappingFunction()


def tropmapf(time, pos, azel) -> MappingFactors:
    """Troposphere mapping function using the default (Niell) model"""
    return _default_mapping(time, pos, azel)
