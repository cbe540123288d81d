import unittest

from nullperf._formatter import (format_seconds, format_timedelta,
                                 format_timedeltas, format_number,
                                 format_float)


class TestFormatter(unittest.TestCase):
    def test_format_seconds(self):
        self.assertEqual(format_seconds(0),
                         "0 sec")
        self.assertEqual(format_seconds(316e-4),
                         "31.6 ms")
        self.assertEqual(format_seconds(1),
                         "1.0 sec")
        self.assertEqual(format_seconds(15.9),
                         "15.9 sec")
        self.assertEqual(format_seconds(3 * 60 + 15.9),
                         "3 min 15.9 sec")
        self.assertEqual(format_seconds(2 * 3600 + 5 * 60 + 1),
                         "2 hour 5 min")

    def test_format_timedelta(self):
        fmt_delta = format_timedelta

        self.assertEqual(fmt_delta(555222), "555222 sec")

        self.assertEqual(fmt_delta(1e0), "1.00 sec")
        self.assertEqual(fmt_delta(1e-3), "1.00 ms")
        self.assertEqual(fmt_delta(1e-6), "1.00 us")
        self.assertEqual(fmt_delta(1e-9), "1.00 ns")

        self.assertEqual(fmt_delta(316e-3), "316 ms")
        self.assertEqual(fmt_delta(316e-4), "31.6 ms")
        self.assertEqual(fmt_delta(316e-5), "3.16 ms")

    def test_format_timedeltas(self):
        self.assertEqual(format_timedeltas((102e-3, 3e-3)),
                         ("102 ms", "3 ms"))

    def test_format_number(self):
        # plural
        self.assertEqual(format_number(0, 'call'), '0 calls')
        self.assertEqual(format_number(1, 'call'), '1 call')
        self.assertEqual(format_number(2, 'call'), '2 calls')
        self.assertEqual(format_number(123, 'call'), '123 calls')

        # powers of 10
        self.assertEqual(format_number(10 ** 3, 'call'),
                         '1000 calls')
        self.assertEqual(format_number(10 ** 4, 'call'),
                         '10^4 calls')
        self.assertEqual(format_number(10 ** 4 + 1, 'call'),
                         '10001 calls')
        self.assertEqual(format_number(10 ** 4),
                         '10^4')

    def test_format_float(self):
        self.assertEqual(format_float(200), '200.000')
        self.assertEqual(format_float(1.0 / 3), '0.333')
        self.assertEqual(format_float(float('inf')), 'inf')


if __name__ == "__main__":
    unittest.main()
