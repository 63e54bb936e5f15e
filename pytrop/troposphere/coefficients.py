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

"""Niell mapping function coefficients.

Niell, A.E. (1996), "Global mapping functions for the atmosphere delay at
radio wavelengths", J. Geophys. Res., 101(B2), table 3.

Rows are hydrostatic average a, b, c; hydrostatic amplitude a, b, c; wet
a, b, c. Columns are the reference latitudes 15, 30, 45, 60 and 75 degrees.
All arrays are read-only.
"""

import numpy as np

NMF_LATITUDES = (15.0, 30.0, 45.0, 60.0, 75.0)

NMF_COEF = np.array([
    [1.2769934E-3, 1.2683230E-3, 1.2465397E-3, 1.2196049E-3, 1.2045996E-3],
    [2.9153695E-3, 2.9152299E-3, 2.9288445E-3, 2.9022565E-3, 2.9024912E-3],
    [62.610505E-3, 62.837393E-3, 63.721774E-3, 63.824265E-3, 64.258455E-3],

    [0.0000000E-0, 1.2709626E-5, 2.6523662E-5, 3.4000452E-5, 4.1202191E-5],
    [0.0000000E-0, 2.1414979E-5, 3.0160779E-5, 7.2562722E-5, 11.723375E-5],
    [0.0000000E-0, 9.0128400E-5, 4.3497037E-5, 84.795348E-5, 170.37206E-5],

    [5.8021897E-4, 5.6794847E-4, 5.8118019E-4, 5.9727542E-4, 6.1641693E-4],
    [1.4275268E-3, 1.5138625E-3, 1.4572752E-3, 1.5007428E-3, 1.7599082E-3],
    [4.3472961E-2, 4.6729510E-2, 4.3908931E-2, 4.4626982E-2, 5.4736038E-2],
])
NMF_COEF.flags.writeable = False

HYDRO_AVG = NMF_COEF[0:3]
HYDRO_AMP = NMF_COEF[3:6]
WET = NMF_COEF[6:9]

# Height correction a, b, c
NMF_HEIGHT_COEF = np.array([2.53E-5, 5.49E-3, 1.14E-3])
NMF_HEIGHT_COEF.flags.writeable = False
