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
Geoid height lookup for converting ellipsoidal heights to sea level heights.

Ellipsoidal height (h): Height above the reference ellipsoid (WGS84)
Orthometric height (H): Height above the geoid (mean sea level)
Geoid height (N): Height of the geoid above the ellipsoid

Relationship: h = H + N
"""

from typing import Callable, Optional

import numpy as np

from ..core.data_structures import GeodeticPosition, as_position

GeoidLookup = Callable[[GeodeticPosition], float]


class EGM96:
    """Simple EGM96 geoid model approximation

    Notes
    -----
    Regional approximations only, accurate to a few tens of meters. For
    precise work inject a real geoid model (for example a grid from PROJ or
    pygeodesy) wherever a ``GeoidLookup`` callable is accepted.
    """

    def get_geoid_height(self, lat: float, lon: float) -> float:
        """Get geoid height (N) at specified location

        Parameters
        ----------
        lat : float
            Latitude in degrees (-90 to 90)
        lon : float
            Longitude in degrees (-180 to 180)

        Returns
        -------
        float
            Geoid height in meters (positive when geoid is above ellipsoid)
        """
        # Normalize longitude to [-180, 180)
        lon = ((lon + 180) % 360) - 180

        if 30 <= lat <= 45 and 130 <= lon <= 145:  # Japan region
            return -35.0 + 2.0 * np.sin(np.radians(lat - 35))
        elif 30 <= lat <= 42 and -125 <= lon <= -115:  # California region
            return -30.0 + 3.0 * np.sin(np.radians(lat - 36))
        else:
            return -30.0 + 20.0 * np.sin(np.radians(lat))


# Global instance
_egm96 = EGM96()


def geoid_height(pos) -> float:
    """Geoid height (m) at a geodetic position given in radians"""
    pos = as_position(pos)
    return float(_egm96.get_geoid_height(pos.lat_deg, pos.lon_deg))


def ellipsoidal_to_orthometric(pos, geoid: Optional[GeoidLookup] = None) -> float:
    """Convert the ellipsoidal height of a position to height above sea level

    Parameters
    ----------
    pos : GeodeticPosition or array_like
        Position [lat, lon, h] (rad, rad, m)
    geoid : callable, optional
        Geoid height lookup keyed by position; defaults to ``geoid_height``

    Returns
    -------
    float
        Orthometric height H = h - N in meters
    """
    pos = as_position(pos)
    lookup = geoid if geoid is not None else geoid_height
    return pos.height - lookup(pos)
