import unittest

import nullperf
from nullperf import _utils as utils


class MiscTests(unittest.TestCase):
    def test_version_tuple(self):
        self.assertIsInstance(nullperf.VERSION, tuple)
        self.assertTrue(all(isinstance(part, int) for part in nullperf.VERSION),
                        nullperf.VERSION)

    def test_version_str(self):
        self.assertIsInstance(nullperf.__version__, str)
        self.assertEqual(nullperf.__version__,
                         '.'.join(str(part) for part in nullperf.VERSION))

    def test_all(self):
        for name in nullperf.__all__:
            self.assertTrue(hasattr(nullperf, name), name)
        self.assertEqual(len(set(nullperf.__all__)), len(nullperf.__all__))
        self.assertNotIn('perf_counter', nullperf.__all__)
        self.assertFalse(hasattr(nullperf, 'perf_counter'))

    def test_setup_version(self):
        import setup
        self.assertEqual(nullperf.__version__, setup.VERSION)

    def test_comma_separated(self):
        self.assertEqual(utils.comma_separated('a,b'), ['a', 'b'])
        self.assertEqual(utils.comma_separated(' a , ,b,'), ['a', 'b'])
        self.assertEqual(utils.comma_separated(''), [])

    def test_unique(self):
        self.assertEqual(utils.unique(['b', 'a', 'b', 'c', 'a']),
                         ['b', 'a', 'c'])

    def test_find_program(self):
        self.assertIsNone(utils.find_program('/nonexistent/program'))
        self.assertIsNone(utils.find_program('nullperf-missing-program'))


if __name__ == "__main__":
    unittest.main()
