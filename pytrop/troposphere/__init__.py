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

"""Tropospheric delay and mapping functions.

Tropospheric Models:
- Standard atmosphere with the Saastamoinen zenith delay model
- Niell mapping functions (dry and wet) with height correction
- Injectable high-precision mapping routine (e.g. GMF)

Functions:
    tropmodel: Slant delay by standard atmosphere and Saastamoinen model
    zenith_delays: Zenith hydrostatic and wet delays
    tropmapf: Dry and wet mapping factors (Niell)
    niell_mapping: Niell mapping function
    build_mapping_function: Mapping function selected by configuration

Notes:
    All delay outputs are in meters.
    Angles are in radians, heights are ellipsoidal in meters and relative
    humidity is a fraction (0-1).
    Out-of-domain inputs return zeros instead of raising.
"""

from .config import Troposphere, TroposphereConfig
from .mapf import (
    HighPrecisionStrategy,
    MappingFunction,
    MappingModel,
    NiellStrategy,
    build_mapping_function,
    tropmapf,
)
from .mapping import interpolate_latitude, mapping_function_form
from .niell import niell_mapping
from .saastamoinen import standard_atmosphere, tropmodel, zenith_delays

__all__ = [
    'Troposphere', 'TroposphereConfig',
    'HighPrecisionStrategy', 'MappingFunction', 'MappingModel', 'NiellStrategy',
    'build_mapping_function', 'tropmapf',
    'interpolate_latitude', 'mapping_function_form',
    'niell_mapping',
    'standard_atmosphere', 'tropmodel', 'zenith_delays',
]
