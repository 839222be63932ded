"""Structural edits on a Grid: column swap, header toggle, split and delete.

Every function mutates the grid in place and, when handed the caller's
Selection, moves the cursor so it keeps pointing at the cell the user was on.
"""

from column_labels import column_labels
from grid_model import Grid, Selection


class SplitUnderflow(ValueError):
    """A split was rejected; the grid has not been modified."""


def reset_header_labels(grid: Grid):
    for col, label in enumerate(column_labels(grid.column_count)):
        grid.set_cell(0, col, label)


def swap_columns(
    grid: Grid,
    left: int,
    right: int,
    selection: Selection | None = None,
    move_labels: bool = True,
):
    for idx in (left, right):
        if not 0 <= idx < grid.column_count:
            raise IndexError(f"Column {idx} out of range")

    # with move_labels the header label travels with its column,
    # otherwise the header row keeps its positional labels
    start = 0 if move_labels else grid.data_start
    grid.swap_cells(range(start, grid.row_count), left, right)

    if selection is not None:
        if selection.col == left:
            selection.col = right
        elif selection.col == right:
            selection.col = left


def toggle_header(grid: Grid, selection: Selection | None = None):
    if grid.has_header:
        removed = grid.header_synthetic
        if removed:
            grid.remove_row(0)
        grid.has_header = False
        grid.header_synthetic = False
        if selection is not None and removed:
            selection.row = max(0, selection.row - 1)
        return

    grid.insert_row(0, column_labels(grid.column_count))
    grid.has_header = True
    grid.header_synthetic = True
    if selection is not None:
        selection.row += 1


def promote_header(grid: Grid):
    """Treat the current first row as the header row."""
    if grid.has_header:
        raise ValueError("Grid already has a header row")
    if grid.row_count == 0:
        raise ValueError("No row to use as header")
    grid.has_header = True
    grid.header_synthetic = False


def split_fields(text: str, delimiter: str, max_fields: int = 0) -> list[str]:
    if max_fields > 0:
        return text.split(delimiter, max_fields - 1)
    return text.split(delimiter)


def split_column(
    grid: Grid,
    col: int,
    delimiter: str,
    max_fields: int = 0,
    selection: Selection | None = None,
) -> int:
    """Split ``col`` on ``delimiter`` into new columns; returns how many columns it now spans.

    The whole column is split and checked before anything is written, so a
    rejected split leaves the grid untouched.
    """
    if max_fields < 0:
        raise ValueError(f"max_fields must be >= 0, got {max_fields}")
    if not 0 <= col < grid.column_count:
        raise IndexError(f"Column {col} out of range")
    if not delimiter:
        raise SplitUnderflow("Delimiter is empty")

    rows = grid.data_rows()
    if len(rows) == 0:
        raise SplitUnderflow("No data rows to split")

    split_rows = []
    ncols = None
    for row in rows:
        parts = split_fields(grid.cell(row, col), delimiter, max_fields)
        if len(parts) == 1:
            raise SplitUnderflow(f"Delimiter {delimiter!r} not found in row {row}")
        if max_fields and len(parts) < max_fields:
            raise SplitUnderflow(
                f"Row {row} has {len(parts)} fields, fewer than {max_fields}"
            )
        if ncols is None:
            ncols = len(parts)
        elif len(parts) != ncols:
            raise SplitUnderflow(
                f"Row {row} has {len(parts)} fields, expected {ncols}"
            )
        split_rows.append((row, parts))

    source_label = grid.cell(0, col) if grid.has_header else None

    grid.insert_columns(col, ncols - 1)
    for row, parts in split_rows:
        for i, text in enumerate(parts):
            grid.set_cell(row, col + i, text)

    if grid.has_header:
        if grid.header_synthetic:
            reset_header_labels(grid)
        else:
            for i in range(ncols):
                grid.set_cell(0, col + i, f"{source_label}.{i + 1}")

    if selection is not None:
        selection.col = col
    return ncols


def delete_column(grid: Grid, col: int, selection: Selection | None = None):
    if not 0 <= col < grid.column_count:
        raise IndexError(f"Column {col} out of range")
    if grid.column_count == 1:
        raise ValueError("Cannot delete the only column")
    grid.remove_column(col)
    if selection is not None:
        selection.col = min(selection.col, grid.column_count - 1)
