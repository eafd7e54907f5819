import unittest

from src.numru.domain._errors import (
    InvalidShapeError,
    RaggedArrayError,
    ShapeMismatchError,
)
from src.numru.domain._literal import describe_literal, validate_literal


class TestDescribeLiteral(unittest.TestCase):
    def test_flat_sequence_is_rank_one(self):
        desc = describe_literal([42, -17, 256])
        self.assertEqual(desc.extents, (3,))
        self.assertEqual(desc.values, (42, -17, 256))

    def test_nested_sequence_is_flattened_row_major(self):
        desc = describe_literal([[1, 2, 3], [4, 5, 6]])
        self.assertEqual(desc.extents, (2, 3))
        self.assertEqual(desc.values, (1, 2, 3, 4, 5, 6))

    def test_rank_three_and_tuples(self):
        desc = describe_literal((((1, 2),), ((3, 4),), ((5, 6),)))
        self.assertEqual(desc.extents, (3, 1, 2))
        self.assertEqual(desc.values, (1, 2, 3, 4, 5, 6))

    def test_bare_scalar_has_no_extents(self):
        desc = describe_literal(5)
        self.assertEqual(desc.extents, ())
        self.assertEqual(desc.values, (5,))

    def test_ragged_rows_raise(self):
        with self.assertRaises(RaggedArrayError) as ctx:
            describe_literal([[1, 2], [3]])
        self.assertEqual(ctx.exception.depth, 1)
        self.assertEqual(ctx.exception.expected, (2,))
        self.assertEqual(ctx.exception.actual, (1,))

    def test_ragged_deeper_level_raises(self):
        with self.assertRaises(RaggedArrayError) as ctx:
            describe_literal([[[1, 2], [3, 4]], [[5, 6], [7]]])
        self.assertEqual(ctx.exception.depth, 2)

    def test_scalar_next_to_sequence_is_ragged(self):
        with self.assertRaises(RaggedArrayError):
            describe_literal([[1, 2], 3])

    def test_ragged_is_a_value_error(self):
        with self.assertRaises(ValueError):
            describe_literal([[1], [2, 3]])


class TestValidateLiteral(unittest.TestCase):
    def test_matching_count_returns_shape(self):
        shape = validate_literal([1, 2, 3, 4, 5, 6], [3, 2])
        self.assertEqual(shape.extents, (3, 2))

    def test_count_mismatch_raises(self):
        with self.assertRaises(ShapeMismatchError):
            validate_literal([1, 2, 3, 4, 5], [2, 3])

    def test_empty_extents_raise(self):
        with self.assertRaises(InvalidShapeError):
            validate_literal([5], [])

    def test_empty_sequence_is_an_invalid_shape(self):
        desc = describe_literal([])
        with self.assertRaises(InvalidShapeError):
            validate_literal(desc.values, desc.extents)


if __name__ == "__main__":
    unittest.main()
