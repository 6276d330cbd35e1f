import random
import unittest

from value_grid import CellRecord, ValueGrid


class ValueGridTests(unittest.TestCase):
    def test_cells_start_empty(self):
        grid = ValueGrid(2, 3)
        self.assertEqual(grid.get(1, 2), "")
        self.assertTrue(grid.is_empty())

    def test_append_and_backspace(self):
        grid = ValueGrid(1, 1)
        grid.append(0, 0, "a")
        grid.append(0, 0, "b")
        self.assertEqual(grid.get(0, 0), "ab")
        self.assertEqual(grid.backspace(0, 0), "a")
        self.assertFalse(grid.is_empty())

    def test_backspace_on_empty_cell_is_noop(self):
        grid = ValueGrid(1, 2)
        self.assertEqual(grid.backspace(0, 1), "")
        self.assertEqual(grid.get(0, 1), "")

    def test_edits_match_plain_string_buffer(self):
        rng = random.Random(7)
        grid = ValueGrid(1, 1)
        buf = ""
        for _ in range(200):
            if rng.random() < 0.4:
                grid.backspace(0, 0)
                buf = buf[:-1]
            else:
                ch = rng.choice("xyz019 ")
                grid.append(0, 0, ch)
                buf += ch
            self.assertEqual(grid.get(0, 0), buf)

    def test_flat_result_covers_every_pair(self):
        grid = ValueGrid(2, 2)
        grid.append(0, 1, "7")
        self.assertEqual(
            grid.to_flat(["A", "B"], ["X", "Y"]),
            {"A_X": "", "A_Y": "7", "B_X": "", "B_Y": ""},
        )

    def test_flat_result_keeps_row_major_order(self):
        grid = ValueGrid(2, 2)
        self.assertEqual(
            list(grid.to_flat(["A", "B"], ["X", "Y"])),
            ["A_X", "A_Y", "B_X", "B_Y"],
        )

    def test_records(self):
        grid = ValueGrid(1, 2)
        grid.append(0, 0, "hi")
        self.assertEqual(
            grid.records(["r"], ["a", "b"]),
            [CellRecord("r", "a", "hi"), CellRecord("r", "b", "")],
        )

    def test_to_frame_labels_rows_and_columns(self):
        grid = ValueGrid(2, 2)
        grid.append(1, 0, "q")
        df = grid.to_frame(["A", "B"], ["X", "Y"])
        self.assertEqual(list(df.index), ["A", "B"])
        self.assertEqual(list(df.columns), ["X", "Y"])
        self.assertEqual(df.loc["B", "X"], "q")
        self.assertEqual(df.loc["A", "Y"], "")

    def test_snapshot_is_a_copy(self):
        grid = ValueGrid(1, 1)
        snap = grid.snapshot()
        grid.append(0, 0, "z")
        self.assertEqual(snap[0, 0], "")

    def test_label_count_mismatch_raises(self):
        grid = ValueGrid(2, 2)
        with self.assertRaises(ValueError):
            grid.to_flat(["A"], ["X", "Y"])


if __name__ == "__main__":
    unittest.main()
