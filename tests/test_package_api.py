import unittest
from unittest import TestCase

import ndcell


class TestPublicApi(TestCase):
    def test_all_names_exist(self):
        for name in ndcell.__all__:
            with self.subTest(name=name):
                self.assertTrue(hasattr(ndcell, name))

    def test_factories_build_arrays(self):
        self.assertIsInstance(ndcell.array([1, 2]), ndcell.Array)
        self.assertIsInstance(ndcell.zeros(2), ndcell.Array)
        self.assertEqual(ndcell.ones(2).tolist(), [1.0, 1.0])

    def test_error_families(self):
        self.assertTrue(issubclass(ndcell.ScalarIndexError, IndexError))
        self.assertTrue(issubclass(ndcell.ScalarIndexError, TypeError))
        self.assertTrue(issubclass(ndcell.BroadcastError, ValueError))


if __name__ == "__main__":
    unittest.main()
