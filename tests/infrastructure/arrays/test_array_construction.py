import unittest
import warnings
from unittest import TestCase

import numpy as np

import ndcell as nc
from ndcell import Array
from ndcell.domain._errors import (
    RaggedArrayWarning,
    RaggedShapeError,
    ScalarConversionError,
    UnsizedArrayError,
)
from ndcell.infrastructure._config import config_override


class TestArrayLiteral(TestCase):
    def test_flat_literal(self):
        a = nc.array([1, 2, 3])
        self.assertEqual(a.shape, (3,))
        self.assertEqual(a.ndim, 1)
        self.assertEqual(a.size, 3)
        self.assertIs(a.dtype, int)
        self.assertEqual(a.tolist(), [1, 2, 3])

    def test_nested_literal(self):
        a = nc.array([[1, 2], [3, 4], [5, 6]])
        self.assertEqual(a.shape, (3, 2))
        self.assertEqual(a.tolist(), [[1, 2], [3, 4], [5, 6]])

    def test_bare_scalar_is_zero_dim(self):
        a = nc.array(5)
        self.assertEqual(a.shape, ())
        self.assertEqual(a.size, 1)
        self.assertEqual(a.item(), 5)

    def test_string_is_a_leaf(self):
        a = nc.array("abc")
        self.assertEqual(a.shape, ())
        self.assertEqual(a.item(), "abc")

    def test_empty_literal_is_void(self):
        a = nc.array([])
        self.assertEqual(a.shape, (0,))
        self.assertEqual(a.size, 0)
        self.assertEqual(a.tolist(), [])

    def test_dtype_casts_leaves(self):
        a = nc.array([1, 2], dtype=float)
        self.assertIs(a.dtype, float)
        self.assertEqual(a.tolist(), [1.0, 2.0])
        self.assertTrue(all(type(v) is float for v in a.tolist()))

    def test_mixed_numbers_widen(self):
        self.assertIs(nc.array([1, 2.5]).dtype, float)
        self.assertIs(nc.array([True, 1]).dtype, int)

    def test_from_numpy_literal(self):
        ref = np.arange(6).reshape(2, 3)
        a = nc.array(ref)
        self.assertEqual(a.shape, (2, 3))
        self.assertEqual(a.tolist(), ref.tolist())

    def test_sequence_of_arrays_aliases_elements(self):
        x = nc.arange(3)
        y = nc.array([x, x])
        self.assertEqual(y.shape, (2, 3))
        self.assertIs(y.cells[0], x.cells[0])
        self.assertIs(y.cells[3], x.cells[0])

        x[0] = 9
        self.assertEqual(y.tolist(), [[9, 1, 2], [9, 1, 2]])


class TestRaggedLiteral(TestCase):
    def test_ragged_warns_and_returns_void(self):
        with config_override(strict_ragged=False):
            with self.assertWarns(RaggedArrayWarning):
                a = nc.array([[1, 2], [3]])
        self.assertEqual(a.shape, (0,))
        self.assertEqual(a.size, 0)

    def test_ragged_strict_argument_raises(self):
        with self.assertRaises(RaggedShapeError) as cm:
            nc.array([[1, 2], [3]], strict=True)
        self.assertIsInstance(cm.exception, ValueError)
        self.assertEqual(cm.exception.expected, (2,))
        self.assertEqual(cm.exception.got, (1,))

    def test_ragged_strict_config_raises(self):
        with config_override(strict_ragged=True):
            with self.assertRaises(RaggedShapeError):
                nc.array([1, [2, 3]])

    def test_strict_argument_overrides_config(self):
        with config_override(strict_ragged=True):
            with warnings.catch_warnings():
                warnings.simplefilter("ignore", RaggedArrayWarning)
                a = nc.array([[1], [2, 3]], strict=False)
        self.assertEqual(a.shape, (0,))


class TestFactories(TestCase):
    def test_arange(self):
        self.assertEqual(nc.arange(5).tolist(), [0, 1, 2, 3, 4])
        self.assertEqual(nc.arange(3, start=2).tolist(), [2, 3, 4])
        self.assertEqual(nc.arange(0).shape, (0,))

    def test_arange_negative_length(self):
        with self.assertRaises(ValueError):
            nc.arange(-1)

    def test_full(self):
        a = nc.full((2, 3), 7)
        self.assertEqual(a.shape, (2, 3))
        self.assertEqual(a.tolist(), [[7, 7, 7], [7, 7, 7]])
        self.assertEqual(len({id(c) for c in a.cells}), 6)

    def test_full_size_matches_shape(self):
        for shape in [(4,), (4, 1, 5), (2, 0, 3), ()]:
            with self.subTest(shape=shape):
                a = nc.full(shape, 1.5)
                self.assertEqual(a.size, nc.shape_size(shape))
                self.assertTrue(all(c.read() == 1.5 for c in a.cells))

    def test_full_int_shape(self):
        self.assertEqual(nc.full(3, 0).shape, (3,))

    def test_full_rejects_negative(self):
        with self.assertRaises(ValueError):
            nc.full((2, -1), 0)

    def test_zeros_ones(self):
        self.assertEqual(nc.zeros(2).tolist(), [0.0, 0.0])
        self.assertIs(nc.zeros(2).dtype, float)
        self.assertEqual(nc.ones((2, 2), dtype=int).tolist(), [[1, 1], [1, 1]])

    def test_scalar(self):
        s = nc.scalar(3)
        self.assertEqual(s.shape, ())
        self.assertEqual(s.item(), 3)
        f = nc.scalar(3, dtype=float)
        self.assertIsInstance(f.item(), float)

    def test_from_numpy_copies(self):
        ref = np.array([[1.5, 2.5]], dtype=np.float32)
        a = nc.from_numpy(ref)
        self.assertEqual(a.shape, (1, 2))
        self.assertIs(a.dtype, float)
        ref[0, 0] = 100.0
        self.assertEqual(a.tolist(), [[1.5, 2.5]])

    def test_factories_return_array_instances(self):
        for a in [nc.arange(2), nc.full(2, 0), nc.scalar(1), nc.array([1])]:
            self.assertIsInstance(a, Array)

    def test_constructor_validates_cell_count(self):
        with self.assertRaises(ValueError):
            Array((2, 2), nc.arange(3).cells)


class TestAccessorsAndConversion(TestCase):
    def test_len(self):
        self.assertEqual(len(nc.arange(20).reshape(4, 1, 5)), 4)

    def test_len_of_scalar_raises(self):
        with self.assertRaises(UnsizedArrayError) as cm:
            len(nc.scalar(1))
        self.assertIsInstance(cm.exception, TypeError)

    def test_cells_is_tuple(self):
        self.assertIsInstance(nc.arange(3).cells, tuple)

    def test_scalar_coercion(self):
        self.assertEqual(int(nc.array([[3]])), 3)
        self.assertEqual(float(nc.scalar(2)), 2.0)
        self.assertEqual(complex(nc.scalar(1)), 1 + 0j)
        self.assertFalse(bool(nc.scalar(0)))

    def test_scalar_coercion_requires_single_element(self):
        with self.assertRaises(ScalarConversionError):
            float(nc.arange(2))
        with self.assertRaises(TypeError):
            bool(nc.arange(2))
        with self.assertRaises(ScalarConversionError):
            nc.array([]).item()


class TestValueConversion(TestCase):
    def test_astype_never_aliases(self):
        a = nc.arange(3)
        for dtype in [float, int, "float32"]:
            with self.subTest(dtype=dtype):
                b = a.astype(dtype)
                self.assertFalse(nc.shares_cells(a, b))
                b[0] = 42
                self.assertEqual(a[0].item(), 0)

    def test_astype_casts(self):
        b = nc.arange(3).astype(float)
        self.assertIs(b.dtype, float)
        self.assertEqual(b.tolist(), [0.0, 1.0, 2.0])

    def test_clone(self):
        a = nc.arange(4).reshape(2, 2)
        b = a.clone()
        self.assertEqual(b.shape, a.shape)
        self.assertEqual(b.tolist(), a.tolist())
        self.assertFalse(nc.shares_cells(a, b))

    def test_to_numpy(self):
        a = nc.arange(6).reshape(2, 3)
        out = a.to_numpy()
        np.testing.assert_array_equal(out, np.arange(6).reshape(2, 3))
        out[0, 0] = 99
        self.assertEqual(a[0, 0].item(), 0)

    def test_to_numpy_float32(self):
        out = nc.arange(3).astype("float32").to_numpy()
        self.assertEqual(out.dtype, np.float32)

    def test_asarray(self):
        a = nc.arange(4).reshape(2, 2)
        np.testing.assert_array_equal(np.asarray(a), np.arange(4).reshape(2, 2))

    def test_tolist_of_scalar_is_bare_value(self):
        self.assertEqual(nc.scalar(7).tolist(), 7)


if __name__ == "__main__":
    unittest.main()
