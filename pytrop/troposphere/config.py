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

"""Troposphere model configuration.

Example config:
{
    'mapping_model': 'nmf',
    'humidity': 0.7,
}
"""

from dataclasses import dataclass, fields
from typing import Optional

from ..coordinate.height_conversion import GeoidLookup
from ..core.constants import REL_HUMI
from ..core.data_structures import MappingFactors
from .mapf import HighPrecisionRoutine, MappingModel, build_mapping_function
from .saastamoinen import tropmodel


@dataclass
class TroposphereConfig:
    """Troposphere model options.

    Attributes
    ----------
    mapping_model : MappingModel
        Mapping model selected when the ``Troposphere`` is built
    humidity : float
        Relative humidity (0-1) used when a call does not supply one
    gmf_routine : callable, optional
        High-precision mapping routine, required for ``MappingModel.GMF``
    geoid : callable, optional
        Geoid height lookup for the high-precision routine
    """
    mapping_model: MappingModel = MappingModel.NMF
    humidity: float = REL_HUMI
    gmf_routine: Optional[HighPrecisionRoutine] = None
    geoid: Optional[GeoidLookup] = None

    def __post_init__(self):
        self.mapping_model = MappingModel.from_name(self.mapping_model)

    @classmethod
    def from_dict(cls, config: dict) -> 'TroposphereConfig':
        """Configure from dictionary; unknown keys raise ValueError"""
        known = {f.name for f in fields(cls)}
        unknown = set(config) - known
        if unknown:
            raise ValueError(f"Unknown troposphere options: {sorted(unknown)}")
        return cls(**config)


class Troposphere:
    """Delay and mapping function evaluators built from one configuration"""

    def __init__(self, config: Optional[TroposphereConfig] = None):
        self.config = config if config is not None else TroposphereConfig()
        self.mapping_function = build_mapping_function(self.config)

    def delay(self, time, pos, azel, humi: Optional[float] = None) -> float:
        """Slant delay (m) by standard atmosphere and Saastamoinen model"""
        if humi is None:
            humi = self.config.humidity
        return tropmodel(time, pos, azel, humi)

    def mapf(self, time, pos, azel) -> MappingFactors:
        """Dry and wet mapping factors from the configured model"""
        return self.mapping_function(time, pos, azel)
