class ShortcutHelpHandler:
    KEYS = [
        ("s", "split"),
        ("H", "toggle header"),
        ("L", "move left"),
        ("R", "move right"),
        ("d", "delete column"),
        ("w", "write CSV"),
        ("q", "quit"),
        ("?", "help"),
    ]

    @classmethod
    def get_summary_lines(cls):
        return [f"({key}) {desc}" for key, desc in cls.KEYS]

    @staticmethod
    def get_lines():
        return [
            "stu - keys",
            "",
            "Table",
            "  arrows / h j k l   move the cursor",
            "  s                  split the current column on a string",
            "  H                  toggle the A, B, C ... header row",
            "  L / R              move the current column left / right",
            "  d                  delete the current column (asks first)",
            "  w                  write CSV and quit (asks for a path if none)",
            "  q                  quit without writing (asks first)",
            "  Ctrl+C             quit immediately",
            "  ?                  this help",
            "",
            "Split prompt",
            "  Enter              next field / split",
            "  Esc                cancel",
            "  Maximum fields 0   split on every occurrence",
            "  Maximum fields N   at most N fields; the last keeps the rest",
            "",
            "Help",
            "  j / k              scroll",
            "  q / Esc / ?        close",
        ]
