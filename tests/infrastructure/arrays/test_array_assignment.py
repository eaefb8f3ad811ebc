import unittest
from unittest import TestCase

import numpy as np

import ndcell as nc
from ndcell.domain._errors import BroadcastError


class TestAssign(TestCase):
    def test_assign_returns_self_and_keeps_cells(self):
        a = nc.zeros((2, 3))
        before = a.cells
        out = a.assign(5)
        self.assertIs(out, a)
        self.assertTrue(all(x is y for x, y in zip(before, a.cells)))
        self.assertEqual(a.tolist(), [[5.0] * 3] * 2)

    def test_setitem_row_from_list(self):
        a = nc.zeros((2, 3), dtype=int)
        a[0] = [1, 2, 3]
        self.assertEqual(a.tolist(), [[1, 2, 3], [0, 0, 0]])

    def test_setitem_column_broadcasts_scalar(self):
        a = nc.zeros((3, 3), dtype=int)
        a[:, 1] = 7
        self.assertEqual(a.tolist(), [[0, 7, 0], [0, 7, 0], [0, 7, 0]])

    def test_setitem_from_numpy(self):
        a = nc.zeros((2, 2), dtype=int)
        a[...] = np.array([[1, 2], [3, 4]])
        self.assertEqual(a.tolist(), [[1, 2], [3, 4]])

    def test_source_stretches_to_target(self):
        a = nc.zeros((2, 3), dtype=int)
        a.assign(nc.array([[1], [2]]))
        self.assertEqual(a.tolist(), [[1, 1, 1], [2, 2, 2]])

    def test_matches_numpy_assignment(self):
        ref = np.zeros((3, 4, 5), dtype=int)
        a = nc.zeros((3, 4, 5), dtype=int)
        src = np.arange(4).reshape(4, 1)
        ref[1:, :, 2:4] = src
        a[1:, :, 2:4] = src
        self.assertEqual(a.tolist(), ref.tolist())

    def test_target_never_stretches(self):
        a = nc.zeros((1, 3))
        with self.assertRaises(BroadcastError) as cm:
            a.assign(nc.zeros((2, 3)))
        self.assertTrue(cm.exception.assignment)
        self.assertIn("could not broadcast input array", str(cm.exception))

    def test_mismatch_raises_value_error(self):
        a = nc.zeros((2, 3))
        with self.assertRaises(ValueError):
            a[0] = [1, 2]

    def test_values_cast_to_target_dtype(self):
        a = nc.arange(3)
        a[0] = 2.7
        self.assertEqual(a[0].item(), 2)
        self.assertIs(type(a[0].item()), int)

        f = nc.zeros(2)
        f[1] = 3
        self.assertIs(type(f[1].item()), float)

    def test_overlapping_views_read_before_write(self):
        a = nc.arange(5)
        a[1:] = a[:-1]
        ref = np.arange(5)
        ref[1:] = ref[:-1].copy()
        self.assertEqual(a.tolist(), ref.tolist())

    def test_fill(self):
        a = nc.arange(4).reshape(2, 2)
        view = a[1]
        self.assertIs(view.fill(9), view)
        self.assertEqual(a.tolist(), [[0, 1], [9, 9]])


class TestThreadSafeCells(TestCase):
    def test_views_share_locked_cells(self):
        from ndcell.infrastructure.cells._cell import LockedCell

        with nc.config_override(thread_safe=True):
            a = nc.arange(4)
        self.assertTrue(all(type(c) is LockedCell for c in a.cells))

        v = a[1:3]
        v[0] = 10
        self.assertEqual(a.tolist(), [0, 10, 2, 3])

        # broadcast replicas keep the cell flavour
        b = a[:1].broadcast_to((3,))
        self.assertTrue(all(type(c) is LockedCell for c in b.cells))


if __name__ == "__main__":
    unittest.main()
