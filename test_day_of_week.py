import calendar
from datetime import date
import unittest
from unittest import mock

import day_of_week
from day_of_week import DayOfWeek, from_python_weekday, from_raw, next_day, of_date, rest

SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY = DayOfWeek


class DayOfWeekTests(unittest.TestCase):
    def test_from_raw(self):
        self.assertIs(from_raw(1), SUNDAY)
        self.assertIs(from_raw(2), MONDAY)
        self.assertIs(from_raw(4), WEDNESDAY)
        self.assertIs(from_raw(7), SATURDAY)

    def test_from_raw_rejects_out_of_range(self):
        for value in (0, 8, -1):
            with self.assertRaises(ValueError):
                from_raw(value)

    def test_rest_wraps_around(self):
        self.assertEqual(
            rest(WEDNESDAY),
            [WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY, MONDAY, TUESDAY],
        )
        self.assertEqual(
            rest(MONDAY),
            [MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY],
        )
        self.assertEqual(rest(SUNDAY), list(DayOfWeek))

    def test_rest_properties_hold_for_every_start(self):
        for start in DayOfWeek:
            days = rest(start)
            self.assertEqual(len(days), 7)
            self.assertEqual(set(days), set(DayOfWeek))
            self.assertIs(days[0], start)
            # restartable
            self.assertEqual(days, rest(start))

    def test_next_day(self):
        self.assertIs(next_day(SUNDAY), MONDAY)
        self.assertIs(next_day(FRIDAY), SATURDAY)
        self.assertIs(next_day(SATURDAY), SUNDAY)
        for day in DayOfWeek:
            self.assertIs(next_day(day), rest(day)[1])

    def test_python_weekday_conversion(self):
        self.assertIs(from_python_weekday(calendar.MONDAY), MONDAY)
        self.assertIs(from_python_weekday(calendar.SATURDAY), SATURDAY)
        self.assertIs(from_python_weekday(calendar.SUNDAY), SUNDAY)
        with self.assertRaises(ValueError):
            from_python_weekday(7)

    def test_of_date(self):
        self.assertIs(of_date(date(2019, 1, 1)), TUESDAY)
        self.assertIs(of_date(date(2019, 2, 1)), FRIDAY)
        self.assertIs(of_date(date(1995, 7, 28)), FRIDAY)

    def test_default_first_day_follows_calendar_module(self):
        with mock.patch("day_of_week.calendar.firstweekday", return_value=calendar.SUNDAY):
            self.assertIs(day_of_week.default_first_day_of_week(), SUNDAY)
        with mock.patch("day_of_week.calendar.firstweekday", return_value=calendar.MONDAY):
            self.assertIs(day_of_week.default_first_day_of_week(), MONDAY)


if __name__ == "__main__":
    unittest.main()
