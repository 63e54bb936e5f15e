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

"""
pytrop - Tropospheric Delay and Mapping Functions for GNSS

Standard atmosphere + Saastamoinen zenith delay and the Niell mapping
function, as pure stateless evaluators for satellite positioning.
Inspired by RTKLIB.
"""

__version__ = "1.0.0"
__author__ = "pytrop Development Team"
__title__ = "pytrop"
__description__ = "Tropospheric delay and mapping functions for GNSS"

from .core import *
from .coordinate import *
from .troposphere import *
