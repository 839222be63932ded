import unittest

from grid_model import Grid
from grid_pane import GridPane
from table_ops import toggle_header


class DummyWin:
    def __init__(self, h=24, w=120):
        self._h = h
        self._w = w

    def getmaxyx(self):
        return self._h, self._w


class GridPaneViewportTests(unittest.TestCase):
    def test_col_width_counts_header_and_caps(self):
        grid = Grid.from_records([["ab", "x" * 100]])
        toggle_header(grid)
        pane = GridPane(grid)

        self.assertEqual(pane.get_col_width(0), 4)
        self.assertEqual(pane.get_col_width(1), GridPane.MAX_COL_WIDTH)

    def test_adjust_col_viewport_scrolls_to_last_column(self):
        grid = Grid.from_records([[f"c{i}" for i in range(50)]])
        pane = GridPane(grid)
        win = DummyWin(24, 80)

        pane.adjust_col_viewport(49, win)

        self.assertGreater(pane.col_offset, 0)
        self.assertLessEqual(pane.col_offset, 49)

        pane.adjust_col_viewport(0, win)
        self.assertEqual(pane.col_offset, 0)

    def test_adjust_row_viewport_keeps_cursor_visible(self):
        grid = Grid.from_records([[str(i)] for i in range(100)])
        toggle_header(grid)
        pane = GridPane(grid)

        pane.adjust_row_viewport(60, body_h=20)
        self.assertEqual(pane.row_offset, 40)

        pane.adjust_row_viewport(1, body_h=20)
        self.assertEqual(pane.row_offset, 0)


if __name__ == "__main__":
    unittest.main()
