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

"""Troposphere Model Constants and Domain Limits"""

import numpy as np

# Unit conversions
PI = np.pi                     # pi
R2D = 180.0 / np.pi            # radians to degrees
D2R = np.pi / 180.0            # degrees to radians

# Time System Parameters
GPST0 = [1980, 1, 6, 0, 0, 0]  # GPS time reference epoch
GST0 = [1999, 8, 22, 0, 0, 0]  # Galileo time reference epoch
BDT0 = [2006, 1, 1, 0, 0, 0]   # BeiDou time reference epoch
J2000_EPOCH = [2000, 1, 1, 12, 0, 0]  # J2000.0 epoch
MJD_J2000 = 51544.5            # modified Julian date of J2000.0
SECONDS_PER_DAY = 86400.0
SECONDS_PER_WEEK = 604800.0
DAYS_PER_YEAR = 365.25         # Julian year (days)

# Standard atmosphere at sea level
PRES0_HPA = 1013.25            # pressure (hPa)
TEMP0_C = 15.0                 # temperature (deg C)
KELVIN_OFFSET = 273.16         # deg C to K as used by the standard atmosphere
REL_HUMI = 0.7                 # default relative humidity

# Saastamoinen delay height domain (m, ellipsoidal)
TROP_HGT_MIN = -100.0
TROP_HGT_MAX = 1E4

# Mapping function height domain (m, ellipsoidal)
MAPF_HGT_MIN = -1000.0
MAPF_HGT_MAX = 2E4

# Niell mapping function annual harmonic
NMF_DOY_PHASE = 28.0           # phase origin of the annual term (day of year)
NMF_SOUTH_SHIFT = 0.5          # half year shift for southern latitudes
