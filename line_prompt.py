import curses


def read_key(win):
    """Next key from ``get_wch``.

    ASCII characters come back as their code so key bindings can compare
    against ``ord("x")``; other text stays a one-character ``str`` and
    function keys stay curses ints. A timeout gives -1.
    """
    try:
        ch = win.get_wch()
    except curses.error:
        return -1
    if isinstance(ch, str) and ord(ch) < 128:
        return ord(ch)
    return ch


def key_text(ch):
    """Text a key inserts, or None for control and function keys."""
    if isinstance(ch, str):
        return ch if ch.isprintable() else None
    if 32 <= ch <= 126:
        return chr(ch)
    return None


class LinePrompt:
    """Single-line text entry drawn in the status bar."""

    def __init__(self):
        self.active = False
        self.buffer = ""
        self.cursor = 0
        self.hscroll = 0

    def set_buffer(self, text: str):
        self.buffer = text or ""
        self.cursor = len(self.buffer)
        self.hscroll = 0

    def clear(self):
        self.buffer = ""
        self.cursor = 0
        self.hscroll = 0

    def edit_key(self, ch) -> bool:
        """Apply a line-editing key; returns False if the key is not an edit key."""
        if ch in (curses.KEY_BACKSPACE, 127, 8):
            if self.cursor > 0:
                self.buffer = self.buffer[: self.cursor - 1] + self.buffer[self.cursor :]
                self.cursor -= 1
            return True

        if ch == curses.KEY_DC:
            self.buffer = self.buffer[: self.cursor] + self.buffer[self.cursor + 1 :]
            return True

        if ch == curses.KEY_LEFT:
            self.cursor = max(0, self.cursor - 1)
            return True

        if ch == curses.KEY_RIGHT:
            self.cursor = min(len(self.buffer), self.cursor + 1)
            return True

        if ch in (curses.KEY_HOME, 1):  # Home / Ctrl+A
            self.cursor = 0
            return True

        if ch in (curses.KEY_END, 5):  # End / Ctrl+E
            self.cursor = len(self.buffer)
            return True

        if ch == 21:  # Ctrl+U
            self.buffer = self.buffer[self.cursor :]
            self.cursor = 0
            return True

        text = key_text(ch)
        if text is not None:
            self.buffer = self.buffer[: self.cursor] + text + self.buffer[self.cursor :]
            self.cursor += len(text)
            return True

        return False

    def prompt_text(self) -> str:
        return ""

    def draw(self, win):
        if not self.active:
            return

        prompt = self.prompt_text()
        _, w = win.getmaxyx()
        text_w = max(1, w - len(prompt) - 1)

        if self.cursor < self.hscroll:
            self.hscroll = self.cursor
        elif self.cursor > self.hscroll + text_w:
            self.hscroll = self.cursor - text_w

        visible = self.buffer[self.hscroll : self.hscroll + text_w]

        try:
            win.addnstr(0, 0, prompt, len(prompt))
            win.addnstr(0, len(prompt), visible, text_w)
            win.move(0, len(prompt) + (self.cursor - self.hscroll))
        except curses.error:
            pass
        win.refresh()
