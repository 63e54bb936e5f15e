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
Continued fraction mapping form and latitude interpolation kernels.

Both kernels are scalar and compiled with Numba; they are shared by the Niell
mapping function for its hydrostatic, wet and height correction terms.

References:
    Niell, A.E. (1996), "Global mapping functions for the atmosphere delay
    at radio wavelengths", J. Geophys. Res., 101(B2), 3227-3246
"""

import numpy as np
from numba import njit


@njit(cache=True, fastmath=True)
def mapping_function_form(elevation, a, b, c):
    """
    Common continued fraction form of the mapping functions.

    m(e) = (1 + a/(1 + b/(1 + c))) / (sin(e) + a/(sin(e) + b/(sin(e) + c)))

    Parameters
    ----------
    elevation : float
        Elevation angle in radians
    a, b, c : float
        Continued fraction coefficients

    Returns
    -------
    float
        Mapping factor; 1.0 at zenith
    """
    sin_el = np.sin(elevation)

    numerator = 1.0 + a / (1.0 + b / (1.0 + c))
    denominator = sin_el + a / (sin_el + b / (sin_el + c))

    return numerator / denominator


@njit(cache=True)
def interpolate_latitude(coef, lat_deg):
    """
    Interpolate a coefficient row sampled every 15 degrees of latitude.

    Parameters
    ----------
    coef : ndarray, shape (5,)
        Coefficient values at 15, 30, 45, 60 and 75 degrees
    lat_deg : float
        Absolute latitude in degrees

    Returns
    -------
    float
        Coefficient at ``lat_deg``; held constant below 15 and above 75
        degrees
    """
    i = int(lat_deg / 15.0)
    if i < 1:
        return coef[0]
    elif i > 4:
        return coef[4]
    return coef[i - 1] * (1.0 - lat_deg / 15.0 + i) + coef[i] * (lat_deg / 15.0 - i)
