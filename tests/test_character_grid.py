"""Tests for CharacterGrid construction and lookups."""

import unittest

from chargrid import CharacterGrid
from chargrid.config import PADDING_CHAR


class TestConstruction(unittest.TestCase):
    def test_whitespace_is_stripped(self) -> None:
        grid = CharacterGrid(" a b\tc\nd\r\ne\v\ff ", 2)
        self.assertEqual(grid.items, ("a", "b", "c", "d", "e", "f"))
        self.assertEqual(len(grid), 6)

    def test_zero_columns_is_clamped_with_warning(self) -> None:
        with self.assertLogs("chargrid", level="WARNING") as cm:
            grid = CharacterGrid("abc", 0)
        self.assertEqual(grid.column_count, 1)
        self.assertEqual(grid.total_rows(), 3)
        self.assertTrue(any("Defaulting to 1" in msg for msg in cm.output))

    def test_negative_columns_is_clamped(self) -> None:
        with self.assertLogs("chargrid", level="WARNING"):
            grid = CharacterGrid("abc", -4)
        self.assertEqual(grid.column_count, 1)

    def test_empty_source_gives_empty_grid(self) -> None:
        with self.assertLogs("chargrid", level="WARNING") as cm:
            grid = CharacterGrid(" \n\t ", 3)
        self.assertTrue(grid.is_empty())
        self.assertEqual(grid.total_rows(), 0)
        self.assertEqual(grid.row_count, 0)
        self.assertIn("no non-whitespace", cm.output[0])

    def test_bytes_and_chunks(self) -> None:
        self.assertEqual(CharacterGrid(b"a b\nc", 2).items, ("a", "b", "c"))
        self.assertEqual(CharacterGrid([b"a ", b" b", b"\nc"], 2).items, ("a", "b", "c"))

    def test_typed_text_is_split_into_bytes(self) -> None:
        grid = CharacterGrid("日 本", 2)
        self.assertEqual(len(grid), 6)
        self.assertEqual("".join(grid.items).encode("latin-1"), "日本".encode("utf-8"))
        self.assertEqual(grid.items, CharacterGrid("日本".encode("utf-8"), 2).items)

    def test_custom_padding_char(self) -> None:
        grid = CharacterGrid("abc", 2, padding_char=".")
        self.assertEqual(grid.get_element_at(1, 1), ".")


class TestLookups(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = CharacterGrid("abcdef", 2)

    def test_example_six_by_two(self) -> None:
        self.assertEqual(self.grid.total_rows(), 3)
        self.assertEqual(self.grid.get_element_at(1, 1), "d")
        self.assertEqual(self.grid.index_to_coordinates(5), (2, 1))
        self.assertEqual(self.grid.coordinates_to_index(2, 1), 5)

    def test_out_of_bounds_coordinates(self) -> None:
        for r, c in [(-1, 0), (0, -1), (3, 0), (0, 2), (10, 10)]:
            self.assertIsNone(self.grid.get_element_at(r, c))
            self.assertIsNone(self.grid.coordinates_to_index(r, c))

    def test_out_of_bounds_index(self) -> None:
        for i in (-1, 6, 100):
            self.assertIsNone(self.grid.get_element_at_index(i))
            self.assertIsNone(self.grid.index_to_coordinates(i))
        self.assertEqual(self.grid.get_element_at_index(0), "a")
        self.assertEqual(self.grid.get_element_at_index(5), "f")

    def test_padding_cell_in_last_row(self) -> None:
        grid = CharacterGrid("abc", 4)
        self.assertEqual(grid.total_rows(), 1)
        self.assertEqual(grid.get_element_at(0, 3), PADDING_CHAR)
        self.assertEqual(grid.coordinates_to_index(0, 3), 3)
        # the padded cell has no item behind it
        self.assertIsNone(grid.get_element_at_index(3))

    def test_index_round_trip(self) -> None:
        for cols in (1, 2, 3, 5, 7, 20):
            grid = CharacterGrid("the quick brown fox jumps", cols)
            for i in range(len(grid)):
                r, c = grid.index_to_coordinates(i)
                self.assertEqual(grid.coordinates_to_index(r, c), i)
                self.assertEqual(grid.get_element_at(r, c), grid.items[i])

    def test_every_in_bounds_cell_is_valid(self) -> None:
        grid = CharacterGrid("abcdefghij", 4)
        for r in range(grid.row_count):
            for c in range(grid.column_count):
                self.assertIsNotNone(grid.get_element_at(r, c))

    def test_empty_grid_rejects_everything(self) -> None:
        with self.assertLogs("chargrid", level="WARNING"):
            grid = CharacterGrid("", 3)
        self.assertIsNone(grid.get_element_at(0, 0))
        self.assertIsNone(grid.get_element_at_index(0))
        self.assertIsNone(grid.index_to_coordinates(0))
        self.assertIsNone(grid.coordinates_to_index(0, 0))


class TestIndexOverflow(unittest.TestCase):
    class SmallIndexGrid(CharacterGrid):
        max_index = 5

    def test_index_past_limit_is_rejected(self) -> None:
        grid = self.SmallIndexGrid("abcdefgh", 3)
        self.assertEqual(grid.coordinates_to_index(1, 2), 5)
        self.assertIsNone(grid.coordinates_to_index(2, 0))
        self.assertIsNone(grid.coordinates_to_index(2, 1))
        # lookups by coordinate are not affected by the limit
        self.assertEqual(grid.get_element_at(2, 1), "h")

    def test_default_limit_is_int32_max(self) -> None:
        self.assertEqual(CharacterGrid.max_index, 2**31 - 1)

    def test_default_limit_rejects_index_past_int32(self) -> None:
        grid = CharacterGrid("a", 2**31 + 1)
        self.assertEqual(grid.total_rows(), 1)
        self.assertEqual(grid.coordinates_to_index(0, 2**31 - 1), 2**31 - 1)
        self.assertIsNone(grid.coordinates_to_index(0, 2**31))
        # the cell itself is still in bounds and shows padding
        self.assertEqual(grid.get_element_at(0, 2**31), PADDING_CHAR)


class TestInfo(unittest.TestCase):
    def test_info(self) -> None:
        info = CharacterGrid("abcde", 2).info()
        self.assertEqual(info.total_items, 5)
        self.assertEqual(info.columns, 2)
        self.assertEqual(info.rows, 3)
        self.assertEqual(info.padding_char, PADDING_CHAR)

    def test_format_info(self) -> None:
        lines = CharacterGrid("abcde", 2).format_info()
        self.assertEqual(lines[0], "Grid Information:")
        self.assertIn("  Total items: 5", lines)
        self.assertIn("  Rows: 3", lines)
        self.assertIn("  Padding character: '-'", lines)


if __name__ == "__main__":
    unittest.main()
