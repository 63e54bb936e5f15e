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

"""Standard atmosphere and Saastamoinen tropospheric delay model.

References
----------
Saastamoinen, J. (1972), "Atmospheric correction for the troposphere and
stratosphere in radio ranging of satellites", The Use of Artificial
Satellites for Geodesy, Geophys. Monogr. Ser. 15, 247-251.
"""

from typing import Tuple

import numpy as np

from ..core.constants import (
    KELVIN_OFFSET,
    PI,
    PRES0_HPA,
    TEMP0_C,
    TROP_HGT_MAX,
    TROP_HGT_MIN,
)
from ..core.data_structures import AtmosphericState, as_direction, as_position


def standard_atmosphere(height, humi):
    """Surface pressure, temperature and water vapor pressure.

    Parameters
    ----------
    height : float
        Ellipsoidal height in meters; heights below 0 are treated as sea level
    humi : float
        Relative humidity (0-1)

    Returns
    -------
    AtmosphericState
        Pressure (hPa), temperature (K) and water vapor pressure (hPa)
    """
    hgt = 0.0 if height < 0.0 else height

    pres = PRES0_HPA * (1.0 - 2.2557E-5 * hgt) ** 5.2568
    temp = TEMP0_C - 6.5E-3 * hgt + KELVIN_OFFSET
    e = 6.108 * humi * np.exp((17.15 * temp - 4684.0) / (temp - 38.45))

    return AtmosphericState(float(pres), float(temp), float(e))


def _zenith_components(lat, height, humi) -> Tuple[float, float]:
    state = standard_atmosphere(height, humi)

    zhd = 0.0022768 * state.pressure / (
        1.0 - 0.00266 * np.cos(2.0 * lat) - 0.00028 * height / 1E3)
    zwd = 0.002277 * (1255.0 / state.temperature + 0.05) * state.vapor_pressure
    return float(zhd), float(zwd)


def _in_domain(height) -> bool:
    # false for NaN as well
    return TROP_HGT_MIN <= height <= TROP_HGT_MAX


def zenith_delays(pos, humi) -> Tuple[float, float]:
    """Zenith hydrostatic and wet delays.

    Parameters
    ----------
    pos : GeodeticPosition or array_like
        Receiver position [lat, lon, h] (rad, rad, m)
    humi : float
        Relative humidity (0-1)

    Returns
    -------
    tuple of float
        (zhd, zwd) in meters; (0.0, 0.0) when the height is outside
        [-100, 10000] m
    """
    pos = as_position(pos)
    if not _in_domain(pos.height):
        return 0.0, 0.0
    return _zenith_components(pos.lat, pos.height, humi)


def tropmodel(time, pos, azel, humi):
    """Tropospheric delay by standard atmosphere and Saastamoinen model.

    Parameters
    ----------
    time : GNSSTime or datetime
        Observation time (not used by this model)
    pos : GeodeticPosition or array_like
        Receiver position [lat, lon, h] (rad, rad, m)
    azel : LookDirection or array_like
        Azimuth/elevation [az, el] (rad)
    humi : float
        Relative humidity (0-1)

    Returns
    -------
    float
        Slant tropospheric delay in meters. 0.0 when the height is outside
        [-100, 10000] m or the elevation is <= 0.

    Notes
    -----
    Pressure and temperature use the height clamped to sea level while the
    hydrostatic term uses the raw height. The 1/cos(z) slant factor is not
    limited near the horizon, so delays grow without bound as the elevation
    approaches zero.
    """
    pos = as_position(pos)
    el = as_direction(azel).elevation

    if not _in_domain(pos.height) or el <= 0.0:
        return 0.0

    zhd, zwd = _zenith_components(pos.lat, pos.height, humi)

    z = PI / 2.0 - el
    cos_z = np.cos(z)
    return float(zhd / cos_z + zwd / cos_z)
