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

"""Core Module.

Fundamental components shared by the troposphere models:

- **Constants**: unit conversions, time epochs, standard atmosphere values and
  the height domains of the delay and mapping evaluators
- **Data Structures**: geodetic position, look direction, atmospheric state
  and mapping factor types
- **Time Systems**: GNSS time representation with day-of-year, epoch
  difference and modified Julian date conversions

Example Usage:
    >>> from pytrop.core import *
    >>>
    >>> pos = GeodeticPosition(np.radians(45.0), 0.0, 100.0)
    >>> t = epoch2time([2024, 7, 1, 12, 0, 0])
    >>> time2doy(t)
    183.5
"""

from .constants import *
from .data_structures import *
from .time import *
