import csv
import io

from grid_model import Grid
from table_ops import promote_header, toggle_header


class MalformedInput(ValueError):
    """Source text is not valid CSV."""


def _bare_quote_line(text: str) -> int | None:
    """Line number of the first quote inside an unquoted field, if any."""
    line = 1
    quoted = False
    field_start = True
    i = 0
    while i < len(text):
        ch = text[i]
        if quoted:
            if ch == '"':
                if text[i + 1 : i + 2] == '"':
                    i += 1
                else:
                    quoted = False
            elif ch == "\n":
                line += 1
        elif ch == '"':
            if not field_start:
                return line
            quoted = True
        else:
            field_start = ch in ",\r\n"
            if ch == "\n":
                line += 1
            i += 1
            continue
        field_start = False
        i += 1
    return None


def grid_from_csv_text(text: str) -> Grid:
    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    records = []
    try:
        for record in reader:
            # blank lines carry no record
            if record:
                records.append(record)
    except csv.Error as exc:
        raise MalformedInput(f"line {reader.line_num}: {exc}") from exc
    line = _bare_quote_line(text)
    if line is not None:
        raise MalformedInput(f'line {line}: bare " in non-quoted field')
    return Grid.from_records(records, min_width=1)


def split_lines(text: str) -> list[str]:
    lines = io.StringIO(text, newline=None).read().split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def grid_from_plain_text(text: str) -> Grid:
    return Grid.from_records([[line] for line in split_lines(text)], min_width=1)


def serialize(grid: Grid) -> bytes:
    # a promoted header is file content and goes back out; a synthetic one does not
    start = grid.data_start if grid.header_synthetic else 0
    text = grid.df.iloc[start:].to_csv(header=False, index=False, lineterminator="\n")
    return text.encode("utf-8")


def ingest(
    path: str | None = None,
    text: str | None = None,
    header: bool = True,
    first_row_header: bool = False,
) -> Grid:
    if (path is None) == (text is None):
        raise ValueError("Provide exactly one of path or text")

    if path is not None:
        grid = FileTypeHandler(path).load()
    else:
        grid = grid_from_plain_text(text)

    if first_row_header and grid.row_count > 0:
        promote_header(grid)
    elif header:
        toggle_header(grid)
    return grid


class FileTypeHandler:
    def __init__(self, path: str):
        self.path = path
        self.is_csv = path.lower().endswith("csv")

    def load(self) -> Grid:
        with open(self.path, "rb") as f:
            raw = f.read()
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedInput(f"{self.path} is not UTF-8 text: {exc}") from exc

        if self.is_csv:
            return grid_from_csv_text(text)
        return grid_from_plain_text(text)

    def save(self, grid: Grid) -> None:
        data = serialize(grid)
        with open(self.path, "wb") as f:
            f.write(data)
