LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def column_label(col: int) -> str:
    """Spreadsheet-style name for a zero-based column index (0 -> A, 26 -> AA)."""
    if col < 0:
        raise ValueError(f"Column index must be non-negative, got {col}")
    letters: list[str] = []
    n = col + 1
    while n > 0:
        n, rem = divmod(n - 1, 26)
        letters.append(LETTERS[rem])
    return "".join(reversed(letters))


def column_labels(count: int) -> list[str]:
    return [column_label(c) for c in range(max(0, count))]
