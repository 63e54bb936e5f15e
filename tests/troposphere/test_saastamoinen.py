#!/usr/bin/env python3
"""Test suite for the standard atmosphere and Saastamoinen delay"""

import unittest
import numpy as np
from pytrop.core.data_structures import GeodeticPosition, LookDirection
from pytrop.core.time import epoch2time
from pytrop.troposphere.saastamoinen import standard_atmosphere, tropmodel, zenith_delays

D2R = np.pi / 180.0


class TestStandardAtmosphere(unittest.TestCase):
    """Test pressure, temperature and vapor pressure"""

    def test_sea_level(self):
        state = standard_atmosphere(0.0, 0.0)
        self.assertAlmostEqual(state.pressure, 1013.25, places=10)
        self.assertAlmostEqual(state.temperature, 288.16, places=10)
        self.assertEqual(state.vapor_pressure, 0.0)

    def test_negative_height_clamped(self):
        """Heights below the ellipsoid use sea level meteorology"""
        self.assertEqual(standard_atmosphere(-80.0, 0.5), standard_atmosphere(0.0, 0.5))

    def test_decreases_with_height(self):
        low = standard_atmosphere(0.0, 0.5)
        high = standard_atmosphere(2000.0, 0.5)
        self.assertLess(high.pressure, low.pressure)
        self.assertAlmostEqual(high.temperature, 288.16 - 13.0, places=10)

    def test_vapor_pressure_scales_with_humidity(self):
        half = standard_atmosphere(100.0, 0.5)
        full = standard_atmosphere(100.0, 1.0)
        self.assertAlmostEqual(full.vapor_pressure, 2.0 * half.vapor_pressure, places=10)
        # saturation pressure at ~15 deg C is about 17 hPa
        self.assertGreater(full.vapor_pressure, 15.0)
        self.assertLess(full.vapor_pressure, 19.0)


class TestTropModel(unittest.TestCase):
    """Test slant tropospheric delay"""

    def setUp(self):
        self.time = epoch2time([2024, 3, 15, 0, 0, 0])
        self.pos = GeodeticPosition(45.0 * D2R, 0.0, 0.0)

    def test_zenith_dry_scenario(self):
        """45 deg latitude, sea level, zenith, dry air"""
        delay = tropmodel(self.time, self.pos, [0.0, 90.0 * D2R], 0.0)
        expected = 0.0022768 * 1013.25 / (1.0 - 0.00266 * np.cos(90.0 * D2R))
        self.assertAlmostEqual(delay, expected, places=9)
        self.assertAlmostEqual(delay, 2.30, delta=0.01)

    def test_wet_component(self):
        dry = tropmodel(self.time, self.pos, [0.0, 90.0 * D2R], 0.0)
        wet = tropmodel(self.time, self.pos, [0.0, 90.0 * D2R], 0.7)
        self.assertGreater(wet - dry, 0.05)
        self.assertLess(wet - dry, 0.3)

    def test_elevation_at_or_below_horizon(self):
        for el in (0.0, -1e-9, -0.5):
            self.assertEqual(tropmodel(self.time, self.pos, [0.0, el], 0.5), 0.0)

    def test_height_bounds(self):
        azel = LookDirection(0.0, 30.0 * D2R)
        self.assertEqual(tropmodel(self.time, [0.0, 0.0, 10000.0001], azel, 0.5), 0.0)
        self.assertEqual(tropmodel(self.time, [0.0, 0.0, -100.0001], azel, 0.5), 0.0)
        self.assertGreater(tropmodel(self.time, [0.0, 0.0, 10000.0], azel, 0.5), 0.0)
        self.assertGreater(tropmodel(self.time, [0.0, 0.0, -100.0], azel, 0.5), 0.0)

    def test_nan_height(self):
        pos = [0.0, 0.0, float('nan')]
        self.assertEqual(tropmodel(self.time, pos, [0.0, 30.0 * D2R], 0.5), 0.0)
        self.assertEqual(zenith_delays(pos, 0.5), (0.0, 0.0))

    def test_negative_height_asymmetry(self):
        """Meteorology is clamped at sea level but the hydrostatic term is not"""
        azel = [0.0, 90.0 * D2R]
        at_zero = tropmodel(self.time, [45.0 * D2R, 0.0, 0.0], azel, 0.0)
        below = tropmodel(self.time, [45.0 * D2R, 0.0, -50.0], azel, 0.0)
        expected = 0.0022768 * 1013.25 / (1.0 - 0.00266 * np.cos(90.0 * D2R) + 0.00028 * 0.05)
        self.assertAlmostEqual(below, expected, places=9)
        self.assertLess(below, at_zero)

    def test_zenith_is_minimum(self):
        zenith = tropmodel(self.time, self.pos, [0.0, 90.0 * D2R], 0.6)
        for el_deg in np.arange(1.0, 90.0, 1.0):
            self.assertGreater(tropmodel(self.time, self.pos, [0.0, el_deg * D2R], 0.6), zenith)

    def test_increases_toward_horizon(self):
        delays = [tropmodel(self.time, self.pos, [0.0, el * D2R], 0.6)
                  for el in (90.0, 60.0, 30.0, 10.0, 5.0, 1.0)]
        self.assertTrue(all(np.diff(delays) > 0))

    def test_near_horizon_is_large_but_finite(self):
        delay = tropmodel(self.time, self.pos, [0.0, 1e-6], 0.6)
        self.assertTrue(np.isfinite(delay))
        self.assertGreater(delay, 1e5)

    def test_deterministic(self):
        args = (self.time, self.pos, [1.0, 0.3], 0.55)
        self.assertEqual(tropmodel(*args), tropmodel(*args))

    def test_azimuth_unused(self):
        a = tropmodel(self.time, self.pos, [0.0, 0.3], 0.5)
        b = tropmodel(self.time, self.pos, [2.0, 0.3], 0.5)
        self.assertEqual(a, b)


class TestZenithDelays(unittest.TestCase):
    """Test zenith hydrostatic and wet delays"""

    def test_matches_zenith_slant(self):
        pos = [30.0 * D2R, 1.0, 500.0]
        zhd, zwd = zenith_delays(pos, 0.7)
        slant = tropmodel(None, pos, [0.0, 90.0 * D2R], 0.7)
        self.assertAlmostEqual(zhd + zwd, slant, places=9)
        self.assertGreater(zhd, zwd)

    def test_out_of_domain(self):
        self.assertEqual(zenith_delays([0.0, 0.0, 12000.0], 0.7), (0.0, 0.0))


if __name__ == '__main__':
    unittest.main()
