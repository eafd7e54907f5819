import unittest

from src.numru.domain._errors import (
    IndexOutOfBoundsError,
    InvalidShapeError,
    ShapeOverflowError,
)
from src.numru.domain._shape_index import ShapeIndex


class TestShapeIndexConstruction(unittest.TestCase):
    def test_from_extents_keeps_extents(self):
        s = ShapeIndex.from_extents([2, 3, 4])
        self.assertEqual(s.extents, (2, 3, 4))
        self.assertEqual(s.rank, 3)
        self.assertEqual(len(s), 3)
        self.assertEqual(list(s), [2, 3, 4])
        self.assertEqual(s[1], 3)

    def test_empty_shape_is_rejected(self):
        with self.assertRaises(InvalidShapeError):
            ShapeIndex.from_extents([])

    def test_zero_and_negative_extents_are_rejected(self):
        for extents in ([0], [2, 0], [3, -1]):
            with self.subTest(extents=extents):
                with self.assertRaises(InvalidShapeError) as ctx:
                    ShapeIndex.from_extents(extents)
                self.assertEqual(ctx.exception.extents, tuple(extents))

    def test_non_integer_extents_are_rejected(self):
        for extents in ([2.0], [True, 2], ["3"]):
            with self.subTest(extents=extents):
                with self.assertRaises(InvalidShapeError):
                    ShapeIndex.from_extents(extents)

    def test_invalid_shape_is_a_value_error(self):
        with self.assertRaises(ValueError):
            ShapeIndex.from_extents([0])

    def test_element_count_overflow_raises(self):
        with self.assertRaises(ShapeOverflowError):
            ShapeIndex.from_extents([2**32, 2**32])

        with self.assertRaises(OverflowError):
            ShapeIndex.from_extents([2**63])

    def test_largest_count_is_accepted(self):
        s = ShapeIndex.from_extents([2**63 - 1])
        self.assertEqual(s.element_count(), 2**63 - 1)


class TestShapeIndexArithmetic(unittest.TestCase):
    def test_row_major_strides(self):
        self.assertEqual(ShapeIndex.from_extents([2, 3, 4]).strides(), (12, 4, 1))
        self.assertEqual(ShapeIndex.from_extents([5]).strides(), (1,))
        self.assertEqual(ShapeIndex.from_extents([3, 1, 2]).strides(), (2, 2, 1))

    def test_element_count(self):
        self.assertEqual(ShapeIndex.from_extents([2, 3, 4]).element_count(), 24)
        self.assertEqual(ShapeIndex.from_extents([7]).element_count(), 7)

    def test_linear_offset(self):
        s = ShapeIndex.from_extents([2, 3, 4])
        self.assertEqual(s.linear_offset((0, 0, 0)), 0)
        self.assertEqual(s.linear_offset((1, 2, 3)), 23)
        self.assertEqual(s.linear_offset([1, 0, 2]), 14)

    def test_linear_offset_out_of_bounds(self):
        s = ShapeIndex.from_extents([2, 3])
        for coord in ((2, 0), (0, 3), (-1, 0), (0,), (0, 0, 0)):
            with self.subTest(coord=coord):
                with self.assertRaises(IndexOutOfBoundsError):
                    s.linear_offset(coord)

    def test_linear_offset_out_of_bounds_is_an_index_error(self):
        with self.assertRaises(IndexError):
            ShapeIndex.from_extents([2]).linear_offset((5,))

    def test_coordinate_of_inverts_linear_offset(self):
        s = ShapeIndex.from_extents([3, 4, 2])
        for offset in range(s.element_count()):
            self.assertEqual(s.linear_offset(s.coordinate_of(offset)), offset)

        with self.assertRaises(IndexOutOfBoundsError):
            s.coordinate_of(24)

    def test_coordinate_of_rejects_non_integer_offsets(self):
        s = ShapeIndex.from_extents([3, 4, 2])
        for offset in (1.0, True, "1", None):
            with self.subTest(offset=offset):
                with self.assertRaises(IndexOutOfBoundsError):
                    s.coordinate_of(offset)

    def test_coordinates_are_row_major(self):
        s = ShapeIndex.from_extents([2, 3])
        coords = list(s.coordinates())
        self.assertEqual(
            coords, [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]
        )
        self.assertEqual([s.linear_offset(c) for c in coords], list(range(6)))

    def test_without_axis(self):
        s = ShapeIndex.from_extents([2, 3, 4])
        self.assertEqual(s.without_axis(0).extents, (3, 4))
        self.assertEqual(s.without_axis(1).extents, (2, 4))
        self.assertEqual(s.without_axis(2).extents, (2, 3))


class TestShapeIndexValueSemantics(unittest.TestCase):
    def test_equality_and_hash(self):
        a = ShapeIndex.from_extents([2, 3])
        b = ShapeIndex.from_extents((2, 3))
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(a, (2, 3))
        self.assertNotEqual(a, ShapeIndex.from_extents([3, 2]))

    def test_repr(self):
        self.assertEqual(repr(ShapeIndex.from_extents([2, 3])), "ShapeIndex((2, 3))")


if __name__ == "__main__":
    unittest.main()
