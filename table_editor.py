import curses

from table_ops import delete_column, swap_columns, toggle_header


class TableEditor:
    """Handles table-mode keys: cursor movement and structural edits."""

    def __init__(self, state, set_status_cb, alert_cb, split_prompt, confirm_prompt):
        self.state = state
        self._set_status = set_status_cb
        self._alert = alert_cb
        self.split_prompt = split_prompt
        self.confirm_prompt = confirm_prompt

    @property
    def grid(self):
        return self.state.grid

    @property
    def selection(self):
        return self.state.selection

    def handle_key(self, ch):
        if ch in (curses.KEY_LEFT, ord("h")):
            self.move(0, -1)
        elif ch in (curses.KEY_RIGHT, ord("l")):
            self.move(0, 1)
        elif ch in (curses.KEY_UP, ord("k")):
            self.move(-1, 0)
        elif ch in (curses.KEY_DOWN, ord("j")):
            self.move(1, 0)
        elif ch == ord("H"):
            self.toggle_header()
        elif ch == ord("L"):
            self.move_column(-1)
        elif ch == ord("R"):
            self.move_column(1)
        elif ch == ord("s"):
            self.split_prompt.start()
        elif ch == ord("d"):
            self.confirm_delete_column()

    # ---------- navigation ----------
    def move(self, d_row, d_col):
        sel = self.selection
        row = sel.row + d_row
        col = sel.col + d_col
        if not self.grid.selectable(row, col):
            return
        sel.row = row
        sel.col = col

    # ---------- structure ----------
    def toggle_header(self):
        toggle_header(self.grid, self.selection)
        self.state.clamp_selection()
        self._set_status("Header on" if self.grid.has_header else "Header off", 2)

    def move_column(self, direction):
        col = self.selection.col
        target = col + direction
        if target < 0 or target >= self.grid.column_count:
            self._alert()
            return
        left, right = sorted((col, target))
        swap_columns(self.grid, left, right, self.selection)

    def confirm_delete_column(self):
        if self.grid.column_count <= 1:
            self._alert()
            self._set_status("Cannot delete the only column", 3)
            return
        col = self.selection.col
        label = self.state.current_label()

        def _delete():
            delete_column(self.grid, col, self.selection)
            self._set_status(f'Deleted column "{label}"', 3)

        self.confirm_prompt.start(f'Really delete column "{label}"?', _delete)
