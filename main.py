import sys
import os
import curses

import config_paths
from app_state import AppState
from file_type_handler import FileTypeHandler, MalformedInput, ingest

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")
from orchestrator import Orchestrator
from paste_prompt import PastePrompt

try:
    from _version import __version__
except Exception:
    __version__ = "0.0.0"


USAGE = (
    "stu - stupid table utility\n\n"
    "Usage:\n"
    "  stu [path]\n"
    "  stu --no-header [path]\n"
    "  stu --first-row-header [path]\n"
    "  stu -v\n"
)


def parse_args(args):
    """Returns (options, error); options is a dict, error a message or None."""
    options = {
        "help": False,
        "version": False,
        "header": None,
        "first_row_header": False,
        "path": None,
    }
    paths = []
    for arg in args:
        if arg == "-h" or arg == "--help":
            options["help"] = True
        elif arg in ("-v", "-V", "--version"):
            options["version"] = True
        elif arg == "--no-header":
            options["header"] = False
        elif arg == "--first-row-header":
            options["first_row_header"] = True
        elif arg.startswith("-"):
            return options, f"Unknown option: {arg}"
        else:
            paths.append(arg)

    if len(paths) > 1:
        return options, "Only one input file may be given"
    if paths:
        options["path"] = paths[0]
    return options, None


def main():
    options, error = parse_args(sys.argv[1:])
    if error:
        print(error, file=sys.stderr)
        print(USAGE, file=sys.stderr)
        sys.exit(2)

    if options["version"]:
        print(__version__)
        return

    if options["help"]:
        print(USAGE)
        return

    config = config_paths.load_config()
    header = options["header"]
    if header is None:
        header = config["HEADER_ON_LOAD"]

    path = options["path"]
    handler = FileTypeHandler(path) if path else None

    grid = None
    if path:
        try:
            grid = ingest(
                path=path,
                header=header,
                first_row_header=options["first_row_header"],
            )
        except (OSError, MalformedInput) as e:
            print(f"Load failed: {e}", file=sys.stderr)
            sys.exit(1)

    def curses_main(stdscr):
        nonlocal grid
        if grid is None:
            text = PastePrompt(stdscr).run()
            if text is None:
                return
            grid = ingest(
                text=text,
                header=header,
                first_row_header=options["first_row_header"],
            )
        state = AppState(grid, path, handler, config=config)
        Orchestrator(stdscr, state).run()

    curses.wrapper(curses_main)


if __name__ == "__main__":
    main()
