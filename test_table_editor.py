import curses
import unittest

from app_state import AppState
from confirm_prompt import ConfirmPrompt
from file_type_handler import grid_from_csv_text
from table_ops import toggle_header
from table_editor import TableEditor


class DummySplitPrompt:
    def __init__(self):
        self.started = False

    def start(self):
        self.started = True


class TableEditorTests(unittest.TestCase):
    def _editor(self, csv_text="a,b,c\nd,e,f\n", header=True):
        grid = grid_from_csv_text(csv_text)
        if header:
            toggle_header(grid)
        state = AppState(grid, None, None)
        messages = []
        alerts = []
        set_status = lambda m, _: messages.append(m)
        confirm = ConfirmPrompt(set_status)
        editor = TableEditor(
            state, set_status, lambda: alerts.append(True), DummySplitPrompt(), confirm
        )
        return editor, state, messages, alerts

    def test_cursor_never_lands_on_header(self):
        editor, state, _, _ = self._editor()
        self.assertEqual((state.selection.row, state.selection.col), (1, 0))

        editor.handle_key(ord("k"))
        self.assertEqual(state.selection.row, 1)

        editor.handle_key(curses.KEY_DOWN)
        editor.handle_key(ord("j"))
        self.assertEqual(state.selection.row, 2)

        editor.handle_key(ord("l"))
        editor.handle_key(curses.KEY_RIGHT)
        editor.handle_key(ord("l"))
        self.assertEqual(state.selection.col, 2)

    def test_move_column_right_then_left(self):
        editor, state, _, alerts = self._editor()

        editor.handle_key(ord("R"))
        self.assertEqual(state.grid.rows, [["B", "A", "C"], ["b", "a", "c"], ["e", "d", "f"]])
        self.assertEqual(state.selection.col, 1)

        editor.handle_key(ord("L"))
        self.assertEqual(state.grid.rows, [["A", "B", "C"], ["a", "b", "c"], ["d", "e", "f"]])
        self.assertEqual(state.selection.col, 0)
        self.assertEqual(alerts, [])

    def test_move_column_past_edge_alerts(self):
        editor, state, _, alerts = self._editor()
        before = state.grid.rows

        editor.handle_key(ord("L"))
        state.selection.col = 2
        editor.handle_key(ord("R"))

        self.assertEqual(alerts, [True, True])
        self.assertEqual(state.grid.rows, before)

    def test_toggle_header_key(self):
        editor, state, messages, _ = self._editor(header=False)
        self.assertEqual(state.selection.row, 0)

        editor.handle_key(ord("H"))

        self.assertTrue(state.grid.has_header)
        self.assertEqual(state.selection.row, 1)
        self.assertEqual(messages[-1], "Header on")

        editor.handle_key(ord("H"))
        self.assertFalse(state.grid.has_header)
        self.assertEqual(state.selection.row, 0)

    def test_split_key_opens_prompt(self):
        editor, _, _, _ = self._editor()

        editor.handle_key(ord("s"))

        self.assertTrue(editor.split_prompt.started)

    def test_delete_column_asks_first(self):
        editor, state, messages, _ = self._editor()
        state.selection.col = 1

        editor.handle_key(ord("d"))
        self.assertTrue(editor.confirm_prompt.active)
        self.assertEqual(editor.confirm_prompt.question, 'Really delete column "B"?')

        editor.confirm_prompt.handle_key(ord("n"))
        self.assertEqual(state.grid.column_count, 3)

        editor.handle_key(ord("d"))
        editor.confirm_prompt.handle_key(ord("y"))
        self.assertEqual(state.grid.rows, [["A", "C"], ["a", "c"], ["d", "f"]])
        self.assertEqual(messages[-1], 'Deleted column "B"')

    def test_delete_only_column_alerts(self):
        editor, state, _, alerts = self._editor("a\nb\n")

        editor.handle_key(ord("d"))

        self.assertFalse(editor.confirm_prompt.active)
        self.assertEqual(alerts, [True])
        self.assertEqual(state.grid.column_count, 1)


if __name__ == "__main__":
    unittest.main()
