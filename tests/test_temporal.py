import unittest
from datetime import date

from deedguide.core.temporal import (
    add_years,
    before,
    before_or_equal,
    calendar_age,
    exact_age,
    format_date,
    parse_date,
)


class ParseDateTests(unittest.TestCase):
    def test_accepts_iso_strings_and_dates(self):
        self.assertEqual(parse_date('2024-03-05'), date(2024, 3, 5))
        self.assertEqual(parse_date(date(2024, 3, 5)), date(2024, 3, 5))

    def test_empty_values_are_unset(self):
        self.assertIsNone(parse_date(None))
        self.assertIsNone(parse_date(''))
        self.assertIsNone(parse_date('   '))

    def test_malformed_date_raises(self):
        with self.assertRaises(ValueError):
            parse_date('2024-13-01')
        with self.assertRaises(ValueError):
            parse_date('05/03/2024')


class AddYearsTests(unittest.TestCase):
    def test_keeps_day_and_month(self):
        self.assertEqual(add_years('2010-01-02', 18), date(2028, 1, 2))
        self.assertEqual(add_years(date(1990, 7, 31), 9), date(1999, 7, 31))

    def test_leap_day_rolls_to_first_of_march(self):
        self.assertEqual(add_years(date(2000, 2, 29), 1), date(2001, 3, 1))
        self.assertEqual(add_years(date(2000, 2, 29), 4), date(2004, 2, 29))

    def test_years_past_calendar_range_clamp(self):
        self.assertEqual(add_years(date(9990, 5, 5), 18), date.max)
        self.assertEqual(add_years(date(9996, 2, 29), 9), date.max)
        self.assertTrue(before('2024-01-01', add_years(date(9990, 5, 5), 18)))

    def test_unset_passes_through(self):
        self.assertIsNone(add_years('', 18))
        self.assertIsNone(add_years(None, 18))


class OrderingTests(unittest.TestCase):
    def test_before_is_strict(self):
        self.assertTrue(before('2020-01-01', '2020-01-02'))
        self.assertFalse(before('2020-01-02', '2020-01-02'))
        self.assertFalse(before('2020-01-03', '2020-01-02'))

    def test_before_or_equal_includes_equality(self):
        self.assertTrue(before_or_equal('2020-01-02', '2020-01-02'))
        self.assertTrue(before_or_equal(date(2020, 1, 1), '2020-01-02'))
        self.assertFalse(before_or_equal('2020-01-03', '2020-01-02'))

    def test_unset_dates_never_compare(self):
        for compare in (before, before_or_equal):
            self.assertFalse(compare('', '2020-01-01'))
            self.assertFalse(compare('2020-01-01', None))
            self.assertFalse(compare(None, None))


class DisplayTests(unittest.TestCase):
    def test_exact_age_uses_fractional_years(self):
        # 3653 days / 365.25
        self.assertEqual(exact_age('2000-01-01', '2010-01-01'), '10.00')
        self.assertEqual(exact_age('2000-01-01', '2000-07-02'), '0.50')

    def test_exact_age_unset(self):
        self.assertEqual(exact_age('', '2024-01-01'), '0')

    def test_calendar_age_counts_completed_years(self):
        self.assertEqual(calendar_age('2010-01-02', '2024-01-01'), 13)
        self.assertEqual(calendar_age('2010-01-01', '2024-01-01'), 14)
        self.assertEqual(calendar_age(None, '2024-01-01'), 0)

    def test_format_date(self):
        self.assertEqual(format_date('2024-03-05'), '05/03/2024')
        self.assertEqual(format_date(None), '')


if __name__ == '__main__':
    unittest.main()
