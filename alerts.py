import curses


def alert():
    """Ring the terminal bell once for a rejected action."""
    try:
        curses.beep()
    except curses.error:
        pass
