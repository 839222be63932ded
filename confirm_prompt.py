import curses
from typing import Callable, Optional


class ConfirmPrompt:
    """Yes/no question in the status bar; runs on_yes when confirmed."""

    def __init__(self, set_status_cb: Callable[[str, int], None]):
        self._set_status = set_status_cb
        self.active = False
        self.question = ""
        self._on_yes: Optional[Callable[[], None]] = None

    def start(self, question: str, on_yes: Callable[[], None]):
        self.active = True
        self.question = question
        self._on_yes = on_yes

    def handle_key(self, ch):
        if not self.active:
            return
        if ch in (ord("y"), ord("Y")):
            on_yes = self._on_yes
            self._reset()
            if on_yes is not None:
                on_yes()
            return
        if ch in (ord("n"), ord("N"), 27):
            self._reset()
            self._set_status("Canceled", 2)

    def draw(self, win):
        if not self.active:
            return
        _, w = win.getmaxyx()
        text = f"{self.question} (y/n)"
        try:
            win.addnstr(0, 0, text.ljust(w - 1), w - 1, curses.A_BOLD)
        except curses.error:
            pass
        win.refresh()

    def _reset(self):
        self.active = False
        self.question = ""
        self._on_yes = None
