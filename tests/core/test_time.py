#!/usr/bin/env python3
"""Test suite for GNSS time conversions"""

import unittest
from datetime import datetime
from pytrop.core.time import (
    GNSSTime, epoch2time, time2epoch, timediff, time2doy, time2mjd
)


class TestGNSSTime(unittest.TestCase):
    """Test GNSSTime representation"""

    def test_gps_epoch(self):
        t = GNSSTime.from_datetime(datetime(1980, 1, 6))
        self.assertEqual(t.week, 0)
        self.assertEqual(t.tow, 0.0)

    def test_tow_normalization(self):
        t = GNSSTime(100, 604800.0 + 10.0)
        self.assertEqual(t.week, 101)
        self.assertAlmostEqual(t.tow, 10.0)

        t = GNSSTime(100, -10.0)
        self.assertEqual(t.week, 99)
        self.assertAlmostEqual(t.tow, 604790.0)

    def test_invalid_time_system(self):
        with self.assertRaises(ValueError):
            GNSSTime(0, 0.0, 'XYZ')

    def test_arithmetic(self):
        t1 = GNSSTime(2300, 1000.0)
        t2 = t1 + 3600.0
        self.assertAlmostEqual(t2 - t1, 3600.0)
        self.assertEqual(t2 - 3600.0, t1)
        self.assertLess(t1, t2)

    def test_equal_times_hash_equal(self):
        a = GNSSTime(2300, 100.0000000004)
        b = GNSSTime(2300, 100.0000000006)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(len({a, b}), 1)
        self.assertEqual({a: 'x'}[b], 'x')

    def test_datetime_roundtrip(self):
        dt = datetime(2024, 2, 29, 6, 30, 15)
        self.assertEqual(GNSSTime.from_datetime(dt).to_datetime(), dt)


class TestCalendarConversions(unittest.TestCase):
    """Test epoch, day of year and MJD conversions"""

    def test_epoch_roundtrip(self):
        ep = [2023, 11, 5, 13, 45, 30.5]
        out = time2epoch(epoch2time(ep))
        self.assertEqual(out[:5], ep[:5])
        self.assertAlmostEqual(out[5], ep[5], places=6)

    def test_doy_start_of_year(self):
        self.assertAlmostEqual(time2doy(epoch2time([2024, 1, 1, 0, 0, 0])), 1.0)

    def test_doy_fractional_leap_year(self):
        self.assertAlmostEqual(time2doy(epoch2time([2024, 7, 1, 12, 0, 0])), 183.5)

    def test_doy_from_datetime(self):
        self.assertAlmostEqual(time2doy(datetime(2023, 3, 1)), 60.0)

    def test_mjd(self):
        self.assertAlmostEqual(time2mjd(epoch2time([2000, 1, 1, 12, 0, 0])), 51544.5)
        self.assertAlmostEqual(time2mjd(epoch2time([2024, 1, 1, 0, 0, 0])), 60310.0)
        self.assertAlmostEqual(GNSSTime.from_datetime(datetime(2024, 1, 1, 6)).to_mjd(), 60310.25)

    def test_timediff(self):
        t1 = epoch2time([2024, 1, 2, 0, 0, 0])
        t2 = epoch2time([2024, 1, 1, 0, 0, 0])
        self.assertAlmostEqual(timediff(t1, t2), 86400.0)
        self.assertAlmostEqual(timediff(t2, t1), -86400.0)

    def test_timediff_mixed_systems(self):
        with self.assertRaises(ValueError):
            timediff(GNSSTime(2000, 0.0, 'GPS'), GNSSTime(2000, 0.0, 'GAL'))

    def test_rejects_other_types(self):
        with self.assertRaises(TypeError):
            time2doy(12345.0)


if __name__ == '__main__':
    unittest.main()
