import unittest
from datetime import date

from views.helpers import format_date, image_url, month_options, shift_month


class TestViewHelpers(unittest.TestCase):
    def test_image_url(self):
        self.assertEqual(
            image_url("https://image.tmdb.org/t/p/", "/abc.jpg", "w200"),
            "https://image.tmdb.org/t/p/w200/abc.jpg",
        )
        self.assertEqual(
            image_url("https://image.tmdb.org/t/p", None),
            "/api/placeholder/300/450",
        )

    def test_month_options_window(self):
        options = month_options(today=date(2025, 1, 15))

        self.assertEqual(len(options), 15)
        self.assertEqual(options[0], ("2024-11", "November 2024"))
        self.assertEqual(options[2], ("2025-01", "January 2025"))
        self.assertEqual(options[-1], ("2026-01", "January 2026"))

    def test_shift_month(self):
        self.assertEqual(shift_month(date(2025, 12, 31), 1), date(2026, 1, 1))
        self.assertEqual(shift_month(date(2025, 1, 31), -1), date(2024, 12, 1))

    def test_format_date(self):
        self.assertEqual(format_date("2025-03-07"), "Mar 7, 2025")
        self.assertEqual(format_date("2025-03-07", with_weekday=True), "Fri, Mar 7, 2025")
        self.assertEqual(format_date(""), "")


if __name__ == "__main__":
    unittest.main()
