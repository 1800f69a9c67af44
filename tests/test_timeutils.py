"""
Tests for duration decomposition, formatting and parsing
"""
import unittest

from utilbelt.core import timeutils
from utilbelt.core.timeutils import (
    Duration,
    MORE_THAN_A_DAY,
    ms_to_time,
    ms_to_unit,
    ms_to_time_string,
    parse_time_string,
)

# 2 days, 3 hours, 4 minutes, 5 seconds and 6 ms
SAMPLE_MS = 2 * 86_400_000 + 3 * 3_600_000 + 4 * 60_000 + 5 * 1000 + 6


class TestMsToTime(unittest.TestCase):
    """Decomposition into a Duration and into single-unit totals"""

    def test_one_hour(self):
        self.assertEqual(ms_to_time(3_600_000), Duration(0, 1, 0, 0))

    def test_mixed_units_drop_sub_second_part(self):
        self.assertEqual(ms_to_time(SAMPLE_MS), Duration(days=2, hours=3, minutes=4, seconds=5))

    def test_zero(self):
        self.assertEqual(ms_to_time(0), Duration(0, 0, 0, 0))
        self.assertEqual(ms_to_time(999), Duration(0, 0, 0, 0))

    def test_unit_totals(self):
        self.assertEqual(ms_to_unit(3_600_000, 's'), 3600)
        self.assertEqual(ms_to_unit(3_600_000, 'm'), 60)
        self.assertEqual(ms_to_unit(3_600_000, 'h'), 1)
        self.assertEqual(ms_to_unit(86_400_000, 'd'), 1)

    def test_unit_totals_are_not_remainders(self):
        self.assertEqual(ms_to_unit(SAMPLE_MS, 'd'), 2)
        self.assertEqual(ms_to_unit(SAMPLE_MS, 'h'), 51)
        self.assertEqual(ms_to_unit(SAMPLE_MS, 'm'), 3064)
        self.assertEqual(ms_to_unit(SAMPLE_MS, 's'), 183845)

    def test_long_unit_names(self):
        self.assertEqual(ms_to_unit(7_200_000, 'hours'), 2)
        self.assertEqual(ms_to_unit(7_200_000, 'minutes'), 120)

    def test_unknown_unit_raises(self):
        with self.assertRaises(ValueError):
            ms_to_unit(1000, 'w')

    def test_fractional_input_is_floored(self):
        self.assertEqual(ms_to_time(1999.9), Duration(0, 0, 0, 1))
        self.assertEqual(ms_to_unit(1999.9, 's'), 1)

    def test_negative_input_follows_floor_division(self):
        """Remainders stay within their modulus for negative input"""
        self.assertEqual(ms_to_time(-1), Duration(-1, 23, 59, 59))
        self.assertEqual(ms_to_unit(-1, 's'), -1)

    def test_reconstruction_invariant(self):
        for ms in (0, 1, 59_999, 61_000, 3_599_999, SAMPLE_MS, 10 ** 12 + 123, 10 ** 18 + 999, -90_061_500):
            d = ms_to_time(ms)
            self.assertTrue(0 <= d.hours < 24)
            self.assertTrue(0 <= d.minutes < 60)
            self.assertTrue(0 <= d.seconds < 60)
            total = ((d.days * 24 + d.hours) * 60 + d.minutes) * 60 + d.seconds
            self.assertEqual(total, ms // 1000)

    def test_large_integers_stay_exact(self):
        ms = 2 ** 60 + 999
        self.assertEqual(ms_to_unit(ms, 's'), ms // 1000)
        self.assertEqual(ms_to_unit(ms, 'd'), ms // 86_400_000)
        self.assertEqual(ms_to_time(10 ** 18 + 999).seconds, (10 ** 18 // 1000) % 60)

    def test_nan_raises(self):
        with self.assertRaises(ValueError):
            ms_to_time(float('nan'))


class TestMsToTimeString(unittest.TestCase):
    """Simple and detailed rendering"""

    def test_simple_less_than_a_day(self):
        self.assertEqual(ms_to_time_string(Duration(0, 0, 0, 5), True), '0:05')
        self.assertEqual(ms_to_time_string(Duration(0, 0, 5, 5), True), '5:05')
        self.assertEqual(ms_to_time_string(Duration(0, 5, 5, 5), True), '5:05:05')
        self.assertEqual(ms_to_time_string(Duration(0, 2, 3, 4), simple=True), '2:03:04')
        self.assertEqual(ms_to_time_string(Duration(0, 0, 12, 0), simple=True), '12:00')

    def test_simple_more_than_a_day(self):
        self.assertEqual(ms_to_time_string(Duration(1, 0, 0, 0), True), MORE_THAN_A_DAY)
        self.assertEqual(ms_to_time_string(Duration(2, 0, 0, 0), True), 'MORE_THAN_A_DAY')
        self.assertEqual(ms_to_time_string(Duration(1, 5, 5, 5), True), 'MORE_THAN_A_DAY')

    def test_simple_zero(self):
        self.assertEqual(ms_to_time_string(Duration(0, 0, 0, 0), True), '0:00')

    def test_detailed_less_than_a_day(self):
        self.assertEqual(ms_to_time_string(Duration(0, 0, 0, 5)), '5 secs')
        self.assertEqual(ms_to_time_string(Duration(0, 0, 5, 5)), '5 mins, 5 secs')
        self.assertEqual(ms_to_time_string(Duration(0, 5, 5, 5)), '5 hrs, 5 mins, 5 secs')
        self.assertEqual(ms_to_time_string(Duration(0, 1, 1, 1)), '1 hr, 1 min, 1 sec')

    def test_detailed_more_than_a_day(self):
        self.assertEqual(ms_to_time_string(Duration(1, 0, 0, 0)), '1 day')
        self.assertEqual(ms_to_time_string(Duration(2, 0, 0, 0)), '2 days')
        self.assertEqual(ms_to_time_string(Duration(1, 5, 5, 5)), '1 day, 5 hrs, 5 mins, 5 secs')

    def test_detailed_skips_zero_units(self):
        self.assertEqual(ms_to_time_string(Duration(3, 0, 1, 0)), '3 days, 1 min')

    def test_detailed_zero_duration(self):
        self.assertEqual(ms_to_time_string(Duration(0, 0, 0, 0)), '0 secs')

    def test_accepts_plain_tuple(self):
        self.assertEqual(ms_to_time_string((0, 0, 2, 30), simple=True), '2:30')


class TestParseTimeString(unittest.TestCase):
    """Parsing of <number><unit> tokens"""

    def test_single_units(self):
        self.assertEqual(parse_time_string('1s'), 1000)
        self.assertEqual(parse_time_string('1m'), 60000)
        self.assertEqual(parse_time_string('1h'), 3600000)
        self.assertEqual(parse_time_string('1d'), 86400000)

    def test_multiple_units(self):
        self.assertEqual(parse_time_string('1h1m1s'), 3661000)
        self.assertEqual(parse_time_string('2d3h4m5s'), 183845000)
        self.assertEqual(parse_time_string('1h 1m 1s'), 3661000)

    def test_repeated_units_accumulate(self):
        self.assertEqual(parse_time_string('2s2s'), 4000)
        self.assertEqual(parse_time_string('3m3m3m'), 540000)

    def test_no_units(self):
        self.assertEqual(parse_time_string('0'), 0)
        self.assertEqual(parse_time_string(''), 0)
        self.assertEqual(parse_time_string('soon'), 0)

    def test_noise_is_ignored(self):
        self.assertEqual(parse_time_string('foo 1s bar'), 1000)
        self.assertEqual(parse_time_string('in 10m, please'), 600000)

    def test_digits_without_adjacent_unit_are_dropped(self):
        self.assertEqual(parse_time_string('5 s'), 0)
        self.assertEqual(parse_time_string('1h30'), 3600000)
        self.assertEqual(parse_time_string('12x3s'), 3000)

    def test_units_are_case_sensitive(self):
        self.assertEqual(parse_time_string('1H'), 0)

    def test_unit_letter_inside_word_counts_once_digits_precede_it(self):
        self.assertEqual(parse_time_string('5 mins 3secs'), 3000)

    def test_round_trip_through_compact_form(self):
        """Formatting then parsing returns the input floored to seconds"""
        for ms in (1000, 61_000, 3_661_500, 183_845_006, 90_000_000):
            d = ms_to_time(ms)
            compact = ''.join(
                f"{value}{unit}"
                for value, unit in zip(d, ('d', 'h', 'm', 's'))
                if value
            )
            self.assertEqual(parse_time_string(compact), ms // 1000 * 1000)

    def test_unit_constants(self):
        self.assertEqual(timeutils.MS_PER_MINUTE, 60_000)
        self.assertEqual(timeutils.MS_PER_HOUR, 3_600_000)
        self.assertEqual(timeutils.MS_PER_DAY, 86_400_000)


if __name__ == '__main__':
    unittest.main()
