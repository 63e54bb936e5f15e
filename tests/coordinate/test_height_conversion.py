#!/usr/bin/env python3
"""Test suite for geoid height lookup"""

import unittest
import numpy as np
from pytrop.coordinate.height_conversion import EGM96, geoid_height, ellipsoidal_to_orthometric
from pytrop.core.data_structures import GeodeticPosition


class TestGeoidHeight(unittest.TestCase):
    """Test the approximate geoid model"""

    def test_japan_region(self):
        n = EGM96().get_geoid_height(35.0, 139.0)
        self.assertAlmostEqual(n, -35.0, places=10)

    def test_longitude_wrapping(self):
        egm = EGM96()
        self.assertAlmostEqual(egm.get_geoid_height(10.0, 190.0), egm.get_geoid_height(10.0, -170.0))

    def test_position_in_radians(self):
        pos = GeodeticPosition(np.radians(35.0), np.radians(139.0), 100.0)
        self.assertAlmostEqual(geoid_height(pos), -35.0, places=6)

    def test_ellipsoidal_to_orthometric(self):
        pos = [np.radians(35.0), np.radians(139.0), 100.0]
        self.assertAlmostEqual(ellipsoidal_to_orthometric(pos), 135.0, places=6)

    def test_custom_geoid(self):
        pos = GeodeticPosition(0.0, 0.0, 100.0)
        self.assertEqual(ellipsoidal_to_orthometric(pos, geoid=lambda p: 40.0), 60.0)


if __name__ == '__main__':
    unittest.main()
