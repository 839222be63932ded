import tempfile
from pathlib import Path

import pytest

from file_type_handler import (
    FileTypeHandler,
    MalformedInput,
    grid_from_csv_text,
    grid_from_plain_text,
    ingest,
    serialize,
)
from grid_model import Grid
from table_ops import toggle_header


def test_csv_records_are_quote_aware():
    grid = grid_from_csv_text('a,"b,c"\n"say ""hi""","two\nlines"\n')
    assert grid.rows == [["a", "b,c"], ['say "hi"', "two\nlines"]]


def test_csv_ragged_rows_are_padded_to_widest():
    grid = grid_from_csv_text("a,b\nc\nd,e,f\n")
    assert grid.column_count == 3
    assert grid.rows == [["a", "b", ""], ["c", "", ""], ["d", "e", "f"]]


def test_csv_blank_lines_are_skipped():
    grid = grid_from_csv_text("a\r\n\r\nb\r\n")
    assert grid.rows == [["a"], ["b"]]


@pytest.mark.parametrize(
    "text",
    [
        'a,"unterminated\n',
        '"ab"c,d\n',
        'a"b,c\n',
        '"ok",x\ny,z"\n',
    ],
)
def test_malformed_csv_raises(text):
    with pytest.raises(MalformedInput):
        grid_from_csv_text(text)


def test_bare_quote_error_names_the_line():
    with pytest.raises(MalformedInput, match="line 2"):
        grid_from_csv_text('"a,b",c\nd,e"f\n')


def test_quotes_inside_quoted_fields_are_accepted():
    grid = grid_from_csv_text('"",x\n"""q""",y\n')
    assert grid.rows == [["", "x"], ['"q"', "y"]]


def test_plain_text_one_row_per_line_any_line_ending():
    grid = grid_from_plain_text("10\r\n20\r30\n40")
    assert grid.column_count == 1
    assert grid.rows == [["10"], ["20"], ["30"], ["40"]]


def test_plain_text_does_not_split_on_commas():
    grid = grid_from_plain_text("a,b\nc,d\n")
    assert grid.rows == [["a,b"], ["c,d"]]


def test_plain_text_empty_input_has_one_column():
    grid = grid_from_plain_text("")
    assert grid.row_count == 0
    assert grid.column_count == 1


def test_end_to_end_plain_text_with_header():
    grid = ingest(text="10\n20\n30\n")
    assert grid.rows == [["A"], ["10"], ["20"], ["30"]]
    assert serialize(grid) == b"10\n20\n30\n"


def test_serialize_quotes_where_needed():
    grid = Grid.from_records([["a,b", 'q"t', "plain"], ["line\nbreak", "", "x"]])
    assert serialize(grid) == b'"a,b","q""t",plain\n"line\nbreak",,x\n'


def test_round_trip_reproduces_headerless_grid():
    grid = Grid.from_records(
        [
            ["id", "note", "empty"],
            ["1", 'he said "no"', ""],
            ["2", "a, b\nand c", " padded "],
        ]
    )
    again = grid_from_csv_text(serialize(grid).decode("utf-8"))
    assert again.column_count == grid.column_count
    assert again.rows == grid.rows


def test_serialize_writes_promoted_header_back():
    grid = ingest(text="name\nada\n", first_row_header=True)
    assert grid.has_header and not grid.header_synthetic
    assert serialize(grid) == b"name\nada\n"


def test_serialize_excludes_synthetic_header_after_toggle():
    grid = Grid.from_records([["x", "y"]])
    toggle_header(grid)
    assert serialize(grid) == b"x,y\n"


def test_ingest_without_header():
    grid = ingest(text="a\nb\n", header=False)
    assert not grid.has_header
    assert grid.rows == [["a"], ["b"]]


def test_ingest_requires_exactly_one_source():
    with pytest.raises(ValueError):
        ingest()
    with pytest.raises(ValueError):
        ingest(path="x.csv", text="a")


def test_file_handler_reads_csv_by_suffix_and_overwrites_on_save():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "data.csv"
        path.write_text('a,"b,c"\nd,e\n', encoding="utf-8")

        grid = ingest(path=str(path))
        assert grid.rows == [["A", "B"], ["a", "b,c"], ["d", "e"]]

        grid.set_cell(1, 0, "z")
        FileTypeHandler(str(path)).save(grid)
        assert path.read_bytes() == b'z,"b,c"\nd,e\n'


def test_file_handler_reads_other_suffixes_as_plain_text():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "notes.txt"
        path.write_text("a,b\nc\n", encoding="utf-8")

        grid = FileTypeHandler(str(path)).load()
        assert grid.rows == [["a,b"], ["c"]]


def test_missing_file_raises_oserror():
    with tempfile.TemporaryDirectory() as tmp:
        with pytest.raises(OSError):
            ingest(path=str(Path(tmp) / "missing.csv"))


def test_non_utf8_file_is_malformed():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "bad.csv"
        path.write_bytes(b"\xff\xfe\x00a")
        with pytest.raises(MalformedInput):
            FileTypeHandler(str(path)).load()
