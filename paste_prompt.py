import curses

from line_prompt import key_text, read_key


class PastePrompt:
    """Multi-line text area shown when no file is given.

    Enter starts a new line, Ctrl+D accepts the text, Esc quits.
    """

    TITLE = "Paste or type rows, one per line. Ctrl+D to load, Esc to quit."

    def __init__(self, stdscr=None):
        self.stdscr = stdscr
        self.lines: list[str] = [""]
        self.done = False
        self.canceled = False
        self._after_cr = False

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def handle_key(self, ch):
        if self.done or ch == -1:
            return

        # CRLF is one line break
        after_cr, self._after_cr = self._after_cr, ch == 13
        if ch == 10 and after_cr:
            return

        if ch == 4:  # Ctrl+D
            self.done = True
            return

        if ch == 27:  # Esc
            self.done = True
            self.canceled = True
            return

        if ch in (10, 13, curses.KEY_ENTER):
            self.lines.append("")
            return

        if ch in (curses.KEY_BACKSPACE, 127, 8):
            if self.lines[-1]:
                self.lines[-1] = self.lines[-1][:-1]
            elif len(self.lines) > 1:
                self.lines.pop()
            return

        if ch == 9:
            self.lines[-1] += "\t"
            return

        text = key_text(ch)
        if text is not None:
            self.lines[-1] += text

    def draw(self):
        win = self.stdscr
        win.erase()
        h, w = win.getmaxyx()
        try:
            win.addnstr(0, 0, self.TITLE.ljust(w - 1), w - 1, curses.A_BOLD)
        except curses.error:
            pass

        body_h = max(1, h - 2)
        visible = self.lines[-body_h:]
        for idx, line in enumerate(visible):
            try:
                win.addnstr(1 + idx, 0, line.replace("\t", " ")[-(w - 1):], w - 1)
            except curses.error:
                pass
        cursor_y = 1 + len(visible) - 1
        cursor_x = min(len(visible[-1]), w - 2)
        try:
            win.move(cursor_y, cursor_x)
        except curses.error:
            pass
        win.refresh()

    def run(self) -> str | None:
        try:
            curses.curs_set(1)
        except curses.error:
            pass
        curses.raw()
        self.stdscr.keypad(True)
        self.draw()
        while not self.done:
            ch = read_key(self.stdscr)
            if ch == 3:  # Ctrl+C
                self.canceled = True
                break
            self.handle_key(ch)
            self.draw()
        return None if self.canceled else self.text
