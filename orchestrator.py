import curses
import time

from alerts import alert
from confirm_prompt import ConfirmPrompt
from file_type_handler import FileTypeHandler
from grid_pane import GridPane
from line_prompt import read_key
from overlay import OverlayView
from save_prompt import SavePrompt
from screen_layout import ScreenLayout
from shortcut_help_handler import ShortcutHelpHandler
from split_prompt import SplitPrompt
from status_bar import render_status
from table_editor import TableEditor

TITLE = "Stupid Table Utility (stu)"


class Orchestrator:
    def __init__(self, stdscr, app_state):
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        curses.raw()
        self.stdscr.keypad(True)
        self.stdscr.nodelay(False)
        self.stdscr.timeout(100)

        self.state = app_state
        self.layout = ScreenLayout(stdscr)
        self.grid_pane = GridPane(app_state.grid)

        self.overlay = OverlayView(self.layout)
        self.save_prompt = SavePrompt(self.state, FileTypeHandler, self._set_status)
        self.split_prompt = SplitPrompt(self.state, self._set_status, self._alert)
        self.confirm_prompt = ConfirmPrompt(self._set_status)
        self.table_editor = TableEditor(
            self.state,
            self._set_status,
            self._alert,
            self.split_prompt,
            self.confirm_prompt,
        )
        self.exit_requested = False

        # ---- status ----
        self.status_msg = None
        self.status_msg_until = 0

    # ---------------- helpers ----------------

    def _set_status(self, msg, seconds=3):
        self.status_msg = msg
        self.status_msg_until = time.time() + seconds

    def _alert(self):
        if self.state.bell_enabled:
            alert()

    def _request_exit(self):
        self.exit_requested = True

    def _line_prompt_active(self):
        return self.split_prompt.active or self.save_prompt.active

    # ---------------- UI ----------------

    def redraw(self):
        try:
            curses.curs_set(1 if self._line_prompt_active() else 0)
        except curses.error:
            pass

        if self.overlay.visible:
            self.overlay.draw()
            return

        tw = self.layout.title_win
        tw.erase()
        try:
            tw.addnstr(0, 0, TITLE.ljust(self.layout.W - 1), self.layout.W - 1, curses.A_BOLD)
        except curses.error:
            pass
        tw.refresh()

        self.grid_pane.grid = self.state.grid
        self.grid_pane.draw(self.layout.table_win, self.state.selection)

        hw = self.layout.help_win
        if hw is not None:
            hw.erase()
            for idx, line in enumerate(ShortcutHelpHandler.get_summary_lines()):
                try:
                    hw.addnstr(idx, 1, line, self.layout.help_w - 2)
                except curses.error:
                    pass
            hw.refresh()

        sw = self.layout.status_win
        sw.erase()
        _, w = sw.getmaxyx()

        if self.confirm_prompt.active:
            self.confirm_prompt.draw(sw)
        elif self.split_prompt.active:
            self.split_prompt.draw(sw)
        elif self.save_prompt.active:
            self.save_prompt.draw(sw)
        else:
            grid = self.state.grid
            context = {
                "status_msg": self.status_msg,
                "status_until": self.status_msg_until,
                "file_path": self.state.file_path,
                "grid_shape": (grid.data_row_count, grid.column_count),
                "has_header": grid.has_header,
                "cursor_label": self.state.current_label() + ":",
                "cursor_row": self.state.selection.row - grid.data_start,
            }
            try:
                sw.addnstr(0, 0, render_status(context, w - 1), w - 1)
            except curses.error:
                pass
            sw.refresh()

    # ---------------- saving ----------------

    def _save_grid(self, save_and_exit=False):
        handler = getattr(self.state, "file_handler", None)
        if handler is None:
            self.save_prompt.start(self.state.file_path, save_and_exit=save_and_exit)
            return False

        try:
            handler.save(self.state.grid)
        except OSError as e:
            msg = f"Save failed: {e}"[: self.layout.W - 2]
            self._set_status(msg, 4)
            return False

        fname = self.state.file_path or ""
        self._set_status(f"Saved {fname}" if fname else "Saved", 3)
        if save_and_exit:
            self.exit_requested = True
        return True

    # ---------------- main loop ----------------

    def handle_key(self, ch):
        if self.overlay.visible:
            self.overlay.handle_key(ch)
            return

        if self.confirm_prompt.active:
            self.confirm_prompt.handle_key(ch)
            return

        if self.split_prompt.active:
            self.split_prompt.handle_key(ch)
            return

        if self.save_prompt.active:
            self.save_prompt.handle_key(ch)
            if self.save_prompt.exit_requested:
                self.exit_requested = True
            return

        if ch == -1:
            return

        if ch == ord("w"):
            self._save_grid(save_and_exit=True)
        elif ch == ord("q"):
            self.confirm_prompt.start("Really quit?", self._request_exit)
        elif ch == ord("?"):
            self.overlay.open(ShortcutHelpHandler.get_lines())
        else:
            self.table_editor.handle_key(ch)

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        self.redraw()

        while True:
            ch = read_key(self.stdscr)

            if ch == 3:  # Ctrl+C
                break

            if ch == curses.KEY_RESIZE:
                self.layout = ScreenLayout(self.stdscr)
                self.overlay.layout = self.layout
                self.stdscr.clear()
                self.stdscr.refresh()
            else:
                self.handle_key(ch)

            self.redraw()

            if self.exit_requested:
                break
