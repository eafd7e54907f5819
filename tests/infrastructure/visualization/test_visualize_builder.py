import contextlib
import io
import unittest

from src.numru.domain._dtype import DType
from src.numru.infrastructure.array import Array
from src.numru.infrastructure.storage import NumericStorage
from src.numru.infrastructure.visualization import VisualizeBuilder, print_options


class CountingStorage(NumericStorage):
    def __init__(self, dtype, values):
        super().__init__(dtype, values)
        self.reads = 0

    def get(self, offset):
        self.reads += 1
        return super().get(offset)

    def read_all(self):
        self.reads += 1
        return super().read_all()


FLOAT_3X3 = [
    [6.283, -3.14159, 1.618],
    [2.718, 1.0, -7.389],
    [10.5, 4.6692, 0.3],
]


class TestVisualizeLayout(unittest.TestCase):
    def test_rank_one_is_a_single_row(self):
        a = Array.from_literal([42, -17, 256, 3, 99, -8])
        self.assertEqual(a.visualize().render(), "[42, -17, 256, 3, 99, -8]")

    def test_rank_two_float_columns_are_aligned(self):
        a = Array.from_literal(FLOAT_3X3)
        text = a.visualize().decimal_points(1).render()
        self.assertEqual(
            text,
            "[\n"
            "   [6.3 , -3.1, 1.6 ]\n"
            "   [2.7 , 1.0 , -7.4]\n"
            "   [10.5, 4.7 , 0.3 ]\n"
            "]",
        )

    def test_every_value_in_a_column_has_the_same_width(self):
        a = Array.from_literal(FLOAT_3X3)
        rows = [
            line.strip()[1:-1].split(", ")
            for line in a.visualize().decimal_points(3).render().splitlines()[1:-1]
        ]
        self.assertEqual(len(rows), 3)
        for col in range(3):
            widths = {len(row[col]) for row in rows}
            self.assertEqual(len(widths), 1)

    def test_rank_three_nests_brackets(self):
        a = Array.from_literal([[[1, 2], [3, 4]], [[5, 6], [7, 80]]])
        self.assertEqual(
            a.visualize().render(),
            "[\n"
            "   [\n"
            "      [1, 2 ]\n"
            "      [3, 4 ]\n"
            "   ]\n"
            "   [\n"
            "      [5, 6 ]\n"
            "      [7, 80]\n"
            "   ]\n"
            "]",
        )

    def test_int_arrays_ignore_decimal_points(self):
        a = Array.from_literal([[1, -20], [300, 4]])
        self.assertEqual(
            a.visualize().decimal_points(3).render(),
            "[\n   [1  , -20]\n   [300, 4  ]\n]",
        )

    def test_default_float_form_and_non_finite_values(self):
        a = Array.from_literal([1.5, 2.0, float("nan"), float("inf")])
        self.assertEqual(a.visualize().render(), "[1.5, 2.0, nan, inf]")

        b = Array.from_literal([0.5, float("-inf")])
        self.assertEqual(b.visualize().decimal_points(2).render(), "[0.50, -inf]")

    def test_str_is_the_rendering(self):
        a = Array.from_literal([[1, 2], [3, 4]])
        self.assertEqual(str(a), a.visualize().render())


class TestVisualizeExecution(unittest.TestCase):
    def test_execute_prints_and_returns_identical_text(self):
        a = Array.from_literal(FLOAT_3X3)
        builder = a.visualize().decimal_points(2)

        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            first = builder.execute()
            second = builder.execute()

        self.assertEqual(first, second)
        self.assertEqual(buf.getvalue(), first + "\n" + second + "\n")

    def test_render_does_not_print(self):
        a = Array.from_literal([1, 2, 3])
        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            a.visualize().render()
        self.assertEqual(buf.getvalue(), "")

    def test_no_reads_before_execute(self):
        storage = CountingStorage(DType.FLOAT64, [1.0, 2.0, 3.0, 4.0])
        a = Array((2, 2), DType.FLOAT64, storage=storage)

        builder = a.visualize().decimal_points(2)
        self.assertEqual(storage.reads, 0)

        builder.render()
        self.assertEqual(storage.reads, 1)
        self.assertEqual(a.tolist(), [[1.0, 2.0], [3.0, 4.0]])

    def test_builder_configuration(self):
        a = Array.from_literal([1.0])
        base = a.visualize()
        configured = base.decimal_points(4)
        self.assertIsInstance(base, VisualizeBuilder)
        self.assertIsNone(base.precision)
        self.assertEqual(configured.precision, 4)
        self.assertIs(configured.source, a)
        self.assertIs(configured.dtype, DType.FLOAT64)

    def test_decimal_points_validation(self):
        builder = Array.from_literal([1.0]).visualize()
        with self.assertRaises(ValueError):
            builder.decimal_points(-1)
        with self.assertRaises(TypeError):
            builder.decimal_points(1.5)
        with self.assertRaises(TypeError):
            builder.decimal_points(True)


class TestVisualizeWithPrintOptions(unittest.TestCase):
    def test_indent_and_separator(self):
        a = Array.from_literal([[1, 2], [3, 4]])
        with print_options(indent=2, separator=" "):
            text = a.visualize().render()
        self.assertEqual(text, "[\n  [1 2]\n  [3 4]\n]")

    def test_global_decimal_points(self):
        a = Array.from_literal([1.0, 2.5])
        with print_options(decimal_points=2):
            self.assertEqual(a.visualize().render(), "[1.00, 2.50]")

    def test_builder_precision_overrides_global(self):
        a = Array.from_literal([1.0, 2.7])
        with print_options(decimal_points=2):
            self.assertEqual(a.visualize().decimal_points(0).render(), "[1, 3]")

    def test_options_are_read_at_execution_time(self):
        a = Array.from_literal([1.0, 2.5])
        builder = a.visualize()
        with print_options(decimal_points=3):
            inside = builder.render()
        self.assertEqual(inside, "[1.000, 2.500]")
        self.assertEqual(builder.render(), "[1.0, 2.5]")


if __name__ == "__main__":
    unittest.main()
