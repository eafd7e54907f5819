import unittest

import numpy as np

from src.numru.domain._dtype import DType
from src.numru.domain._errors import (
    DtypeMismatchError,
    IndexOutOfBoundsError,
    InvalidShapeError,
    RaggedArrayError,
    ShapeMismatchError,
)
from src.numru.domain._array import IArray
from src.numru.domain._shape_index import ShapeIndex
from src.numru.infrastructure.array import Array
from src.numru.infrastructure.storage import NumericStorage


class TestArrayFromLiteral(unittest.TestCase):
    def test_rank_one_literal(self):
        a = Array.from_literal([42, -17, 256, 3, 99, -8])
        self.assertEqual(a.shape, (6,))
        self.assertEqual(a.ndim, 1)
        self.assertEqual(a.numel(), 6)
        self.assertIs(a.dtype, DType.INT64)

    def test_nested_literal_infers_shape_and_float_kind(self):
        a = Array.from_literal([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        self.assertEqual(a.shape, (2, 3))
        self.assertEqual(a.strides, (3, 1))
        self.assertIs(a.dtype, DType.FLOAT64)
        self.assertEqual(a.shape_index, ShapeIndex.from_extents([2, 3]))

    def test_mixed_literal_promotes_to_float(self):
        a = Array.from_literal([1, 2.5, 3])
        self.assertIs(a.dtype, DType.FLOAT64)
        self.assertEqual(a.tolist(), [1.0, 2.5, 3.0])

    def test_explicit_dtype(self):
        a = Array.from_literal([1, 2, 3], dtype="float64")
        self.assertIs(a.dtype, DType.FLOAT64)

        with self.assertRaises(DtypeMismatchError):
            Array.from_literal([1.5, 2.0], dtype=DType.INT64)

    def test_round_trip_through_coordinates(self):
        literal = [
            [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]],
            [[13, 14, 15, 16], [17, 18, 19, 20], [21, 22, 23, 24]],
        ]
        a = Array.from_literal(literal)
        self.assertEqual(a.shape, (2, 3, 4))
        self.assertEqual(a.numel(), 24)
        for i, j, k in a.coordinates():
            self.assertEqual(a[i, j, k], literal[i][j][k])
        self.assertEqual(a.tolist(), literal)

    def test_ragged_literal_fails(self):
        with self.assertRaises(RaggedArrayError):
            Array.from_literal([[1, 2], [3]])

    def test_scalar_and_empty_literals_are_invalid_shapes(self):
        for literal in (5, [], [[], []]):
            with self.subTest(literal=literal):
                with self.assertRaises(InvalidShapeError):
                    Array.from_literal(literal)

    def test_non_numeric_elements_fail(self):
        with self.assertRaises(TypeError):
            Array.from_literal([1, "two", 3])
        with self.assertRaises(TypeError):
            Array.from_literal([True, False])

    def test_satisfies_protocol(self):
        self.assertIsInstance(Array.from_literal([1, 2]), IArray)


class TestArrayConstructor(unittest.TestCase):
    def test_default_allocation_is_float_zeros(self):
        a = Array((2, 2))
        self.assertIs(a.dtype, DType.FLOAT64)
        np.testing.assert_array_equal(a.to_numpy(), np.zeros((2, 2)))

    def test_storage_must_match_shape(self):
        storage = NumericStorage(DType.INT64, [1, 2, 3, 4, 5])
        with self.assertRaises(ShapeMismatchError):
            Array((2, 3), DType.INT64, storage=storage)

    def test_storage_must_match_dtype(self):
        storage = NumericStorage(DType.INT64, [1, 2, 3, 4, 5, 6])
        with self.assertRaises(DtypeMismatchError):
            Array((2, 3), DType.FLOAT64, storage=storage)

    def test_invalid_shape(self):
        with self.assertRaises(InvalidShapeError):
            Array((2, 0))

    def test_repr(self):
        a = Array.from_literal([[1, 2, 3], [4, 5, 6]])
        self.assertEqual(repr(a), "Array(shape=(2, 3), dtype=int64)")


class TestArrayFactories(unittest.TestCase):
    def test_zeros_and_ones(self):
        z = Array.zeros((2, 3))
        o = Array.ones((2, 3), dtype=DType.INT64)
        np.testing.assert_array_equal(z.to_numpy(), np.zeros((2, 3)))
        self.assertIs(o.dtype, DType.INT64)
        self.assertEqual(o.tolist(), [[1, 1, 1], [1, 1, 1]])

    def test_full_infers_kind_from_value(self):
        self.assertIs(Array.full((2,), 7).dtype, DType.INT64)
        self.assertIs(Array.full((2,), 7.5).dtype, DType.FLOAT64)
        self.assertEqual(Array.full((3,), -1).tolist(), [-1, -1, -1])

    def test_fill_in_place(self):
        a = Array.from_literal([[1, 2], [3, 4]])
        a.fill(0)
        self.assertEqual(a.tolist(), [[0, 0], [0, 0]])

    def test_rejected_fill_leaves_array_unchanged(self):
        a = Array.from_literal([1, 2, 3])
        with self.assertRaises(DtypeMismatchError):
            a.fill(0.5)
        self.assertEqual(a.tolist(), [1, 2, 3])

    def test_clone_is_independent(self):
        a = Array.from_literal([1.0, 2.0])
        b = a.clone()
        b[0] = 10.0
        self.assertEqual(a[0], 1.0)
        self.assertEqual(b[0], 10.0)

    def test_numpy_interop(self):
        src = np.arange(6, dtype=np.int32).reshape(2, 3)
        a = Array.from_numpy(src)
        self.assertIs(a.dtype, DType.INT64)
        self.assertEqual(a.shape, (2, 3))

        out = a.to_numpy()
        self.assertEqual(out.dtype, np.int64)
        np.testing.assert_array_equal(out, src)

        out[0, 0] = 100
        self.assertEqual(a[0, 0], 0)

        self.assertIs(Array.from_literal(np.array([0.5, 1.5])).dtype, DType.FLOAT64)

        with self.assertRaises(DtypeMismatchError):
            Array.from_numpy(np.array([1 + 1j]))


class TestArrayIndexing(unittest.TestCase):
    def test_get_and_set_by_coordinate(self):
        a = Array.from_literal([[1, 2, 3], [4, 5, 6]])
        self.assertEqual(a[1, 2], 6)
        a[0, 1] = 20
        self.assertEqual(a.tolist(), [[1, 20, 3], [4, 5, 6]])

    def test_rank_one_accepts_bare_int(self):
        a = Array.from_literal([7, 8, 9])
        self.assertEqual(a[2], 9)
        a[0] = -7
        self.assertEqual(a[0], -7)

    def test_out_of_bounds(self):
        a = Array.from_literal([[1, 2, 3], [4, 5, 6]])
        for coord in ((2, 0), (0, 3), (-1, 0), (0,)):
            with self.subTest(coord=coord):
                with self.assertRaises(IndexOutOfBoundsError):
                    a[coord]

    def test_set_validates_kind(self):
        a = Array.from_literal([1, 2, 3])
        with self.assertRaises(DtypeMismatchError):
            a[0] = 1.5


if __name__ == "__main__":
    unittest.main()
