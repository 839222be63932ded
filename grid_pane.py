import curses


class GridPane:
    PAIR_CELL_TEXT = 1
    PAIR_HEADER = 2
    MAX_COL_WIDTH = 40

    def __init__(self, grid):
        self.grid = grid
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_CELL_TEXT, curses.COLOR_WHITE, -1)
            curses.init_pair(self.PAIR_HEADER, curses.COLOR_CYAN, -1)
        except curses.error:
            pass

        self.row_offset = 0
        self.col_offset = 0

    def get_col_width(self, col_idx):
        if col_idx < 0 or col_idx >= self.grid.column_count:
            return self.MAX_COL_WIDTH
        max_len = max(
            [len(v) for v in self.grid.column_values(col_idx, include_header=True)]
            + [1]
        )
        return min(self.MAX_COL_WIDTH, max_len + 2)

    def _row_label_width(self):
        return max(3, len(str(max(self.grid.row_count - 1, 0))) + 1)

    def _visible_count(self, widths, avail_w):
        count = 0
        used = 0
        for cw in widths[self.col_offset :]:
            if used + cw + 1 > avail_w:
                break
            used += cw + 1
            count += 1
        return max(1, count)

    def adjust_col_viewport(self, curr_col, win=None):
        """Shift col_offset so curr_col is on screen."""
        if self.grid.column_count == 0:
            self.col_offset = 0
            return

        if win is not None:
            _, w = win.getmaxyx()
        else:
            w = 120

        avail_w = max(20, w - (self._row_label_width() + 1))
        widths = [self.get_col_width(c) for c in range(self.grid.column_count)]
        visible_count = self._visible_count(widths, avail_w)

        if curr_col < self.col_offset:
            self.col_offset = curr_col
        elif curr_col >= self.col_offset + visible_count:
            self.col_offset = curr_col - visible_count + 1

        max_possible_offset = max(0, self.grid.column_count - visible_count)
        self.col_offset = max(0, min(self.col_offset, max_possible_offset))

    def adjust_row_viewport(self, curr_row, body_h):
        first_body = self.grid.data_start
        body_h = max(1, body_h)
        if curr_row - first_body < self.row_offset:
            self.row_offset = curr_row - first_body
        elif curr_row - first_body >= self.row_offset + body_h:
            self.row_offset = curr_row - first_body - body_h + 1
        self.row_offset = max(0, self.row_offset)

    # ---------- rendering ----------
    def draw(self, win, selection, active=True):
        win.erase()
        try:
            win.bkgd(" ", curses.color_pair(self.PAIR_CELL_TEXT))
        except curses.error:
            pass
        h, w = win.getmaxyx()
        grid = self.grid

        row_w = self._row_label_width()
        header_rows = 1 if grid.has_header else 0
        body_h = max(1, h - header_rows)

        self.adjust_col_viewport(selection.col, win)
        self.adjust_row_viewport(selection.row, body_h)

        widths = [self.get_col_width(c) for c in range(grid.column_count)]
        avail_w = w - (row_w + 1)
        visible_cols = range(
            self.col_offset,
            min(grid.column_count, self.col_offset + self._visible_count(widths, avail_w)),
        )

        y = 0
        if grid.has_header and grid.row_count > 0:
            x = row_w + 1
            attr = curses.A_BOLD | curses.color_pair(self.PAIR_HEADER)
            for c in visible_cols:
                cw = min(widths[c], max(1, w - x - 1))
                label = grid.cell(0, c)[:cw].center(cw)
                try:
                    win.addnstr(y, x, label, cw, attr)
                except curses.error:
                    pass
                x += cw + 1
            y += 1

        first = grid.data_start + self.row_offset
        for r in range(first, grid.row_count):
            if y >= h:
                break
            try:
                win.addnstr(y, 0, str(r - grid.data_start).rjust(row_w), row_w, curses.A_DIM)
            except curses.error:
                pass
            x = row_w + 1
            for c in visible_cols:
                cw = min(widths[c], max(1, w - x - 1))
                text = grid.cell(r, c).replace("\n", " ")
                attr = curses.color_pair(self.PAIR_CELL_TEXT)
                if active and r == selection.row and c == selection.col:
                    attr |= curses.A_REVERSE
                try:
                    win.addnstr(y, x, text[:cw].ljust(cw), cw, attr)
                except curses.error:
                    pass
                x += cw + 1
            y += 1

        win.refresh()
