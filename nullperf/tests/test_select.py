import unittest

import nullperf
from nullperf import _select as select
from nullperf.tests.test_registry import create_registry


class SelectTests(unittest.TestCase):
    def test_defaults(self):
        registry = create_registry()
        selection = nullperf.resolve(-1, None, registry)
        self.assertEqual(selection.count, -1)
        self.assertEqual(set(selection.names), set(registry.names()))
        self.assertTrue(selection.is_time_budget())

        selection = nullperf.resolve(None, None, registry)
        self.assertEqual(selection.count, select.DEFAULT_COUNT)

    def test_langs_order(self):
        registry = create_registry()
        selection = nullperf.resolve(10, 'A,B', registry)
        self.assertEqual(selection.count, 10)
        self.assertEqual(selection.names, ['A', 'B'])
        self.assertFalse(selection.is_time_budget())

        selection = nullperf.resolve(3, 'c,python', registry)
        self.assertEqual(selection.names, ['c', 'python'])

    def test_langs_syntax(self):
        registry = create_registry()
        # tolerate spaces and empty items
        selection = nullperf.resolve(1, ' c , python,', registry)
        self.assertEqual(selection.names, ['c', 'python'])

        # duplicates are ignored
        selection = nullperf.resolve(1, 'python,c,python', registry)
        self.assertEqual(selection.names, ['python', 'c'])

    def test_unknown_names_are_kept(self):
        # resolve() doesn't check names, the registry does
        selection = nullperf.resolve(1, 'cobol', create_registry())
        self.assertEqual(selection.names, ['cobol'])

    def test_usage_errors(self):
        registry = create_registry()
        for langs in ('', ',', ' , '):
            with self.subTest(langs=langs):
                with self.assertRaises(nullperf.UsageError):
                    nullperf.resolve(1, langs, registry)

        with self.assertRaises(nullperf.UsageError):
            nullperf.resolve('10', None, registry)
        with self.assertRaises(nullperf.UsageError):
            nullperf.resolve(1.5, None, registry)
        with self.assertRaises(nullperf.UsageError):
            nullperf.resolve(1, ['c'], registry)


if __name__ == "__main__":
    unittest.main()
