import curses


class ScreenLayout:
    HELP_W = 20

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.H, self.W = stdscr.getmaxyx()

        # layout: title (1 line), table + key summary, status bar (1 line)
        self.title_h = 1
        self.status_h = 1
        self.table_h = max(1, self.H - self.title_h - self.status_h)

        # drop the key summary on narrow terminals
        self.help_w = self.HELP_W if self.W >= self.HELP_W * 3 else 0
        self.table_w = max(1, self.W - self.help_w)

        self.title_win = curses.newwin(self.title_h, self.W, 0, 0)
        self.title_win.leaveok(True)

        self.table_win = curses.newwin(self.table_h, self.table_w, self.title_h, 0)
        # grid pane must never own cursor
        self.table_win.leaveok(True)

        self.help_win = None
        if self.help_w:
            self.help_win = curses.newwin(
                self.table_h, self.help_w, self.title_h, self.table_w
            )
            self.help_win.leaveok(True)

        self.status_win = curses.newwin(
            self.status_h, self.W, self.title_h + self.table_h, 0
        )
