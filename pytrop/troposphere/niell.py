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

"""Niell mapping function (NMF).

References
----------
Niell, A.E. (1996), "Global mapping functions for the atmosphere delay at
radio wavelengths", J. Geophys. Res., 101(B2), 3227-3246. The equations (4)
and (5) of the printed paper contain errors; the corrected version is
distributed by the MIT Haystack Observatory.
"""

import numpy as np

from ..core.constants import DAYS_PER_YEAR, NMF_DOY_PHASE, NMF_SOUTH_SHIFT, PI
from ..core.data_structures import MappingFactors, as_direction, as_position
from ..core.time import time2doy
from .coefficients import HYDRO_AMP, HYDRO_AVG, NMF_HEIGHT_COEF, WET
from .mapping import interpolate_latitude, mapping_function_form


def niell_mapping(time, pos, azel):
    """
    Niell dry and wet mapping factors.

    Args:
        time: Observation time (GNSSTime or datetime)
        pos: Receiver position [lat, lon, h] (rad, rad, m)
        azel: Azimuth/elevation [az, el] (rad)

    Returns:
        MappingFactors(dry, wet); both 0.0 when the elevation is <= 0
    """
    pos = as_position(pos)
    el = as_direction(azel).elevation

    if el <= 0.0:
        return MappingFactors.zero()

    lat_deg = pos.lat_deg

    # year from doy 28, added half a year for southern latitudes
    y = (time2doy(time) - NMF_DOY_PHASE) / DAYS_PER_YEAR
    if lat_deg < 0.0:
        y += NMF_SOUTH_SHIFT

    cosy = np.cos(2.0 * PI * y)
    lat_deg = abs(lat_deg)

    ah = [interpolate_latitude(HYDRO_AVG[i], lat_deg)
          - interpolate_latitude(HYDRO_AMP[i], lat_deg) * cosy for i in range(3)]
    aw = [interpolate_latitude(WET[i], lat_deg) for i in range(3)]

    # ellipsoidal height stands in for height above sea level
    dm = (1.0 / np.sin(el) - mapping_function_form(el, *NMF_HEIGHT_COEF)) * pos.height / 1E3

    dry = mapping_function_form(el, ah[0], ah[1], ah[2]) + dm
    wet = mapping_function_form(el, aw[0], aw[1], aw[2])
    return MappingFactors(float(dry), float(wet))
