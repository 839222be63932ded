from dataclasses import dataclass

import pandas as pd


@dataclass
class Selection:
    row: int = 0
    col: int = 0


class Grid:
    """
    Owns the table cells as a DataFrame of strings.
    Columns and index are always positional (0..n-1); row 0 is the header
    row while has_header is set. No rendering or input logic.
    """

    def __init__(self, df: pd.DataFrame | None = None):
        self.df = self._normalize(df if df is not None else pd.DataFrame())
        self.has_header = False
        self.header_synthetic = False

    @classmethod
    def from_records(cls, records, min_width: int = 0) -> "Grid":
        records = [list(r) for r in records]
        width = max([len(r) for r in records] + [min_width])
        padded = [r + [""] * (width - len(r)) for r in records]
        df = pd.DataFrame(padded, columns=range(width), dtype=object)
        return cls(df)

    @staticmethod
    def _normalize(df: pd.DataFrame) -> pd.DataFrame:
        df = df.astype(object).fillna("")
        df.columns = pd.RangeIndex(df.shape[1])
        df.index = pd.RangeIndex(len(df))
        return df

    # ---------- shape ----------
    @property
    def row_count(self) -> int:
        return len(self.df)

    @property
    def column_count(self) -> int:
        return self.df.shape[1]

    @property
    def data_start(self) -> int:
        return 1 if self.has_header else 0

    def data_rows(self) -> range:
        return range(self.data_start, self.row_count)

    @property
    def data_row_count(self) -> int:
        return len(self.data_rows())

    # ---------- cells ----------
    def cell(self, row: int, col: int) -> str:
        return self.df.iat[row, col]

    def set_cell(self, row: int, col: int, text: str):
        self.df.iat[row, col] = "" if text is None else str(text)

    def selectable(self, row: int, col: int) -> bool:
        if not (0 <= row < self.row_count and 0 <= col < self.column_count):
            return False
        return not (self.has_header and row == 0)

    def row_values(self, row: int) -> list[str]:
        return list(self.df.iloc[row])

    def column_values(self, col: int, include_header: bool = False) -> list[str]:
        start = 0 if include_header else self.data_start
        return list(self.df.iloc[start:, col])

    def header_labels(self) -> list[str]:
        if not self.has_header or self.row_count == 0:
            return []
        return self.row_values(0)

    @property
    def rows(self) -> list[list[str]]:
        return self.df.values.tolist()

    # ---------- row structure ----------
    def _conform(self, values) -> list[str]:
        values = ["" if v is None else str(v) for v in values]
        if len(values) > self.column_count:
            raise ValueError(
                f"Row has {len(values)} cells but the grid has {self.column_count} columns"
            )
        return values + [""] * (self.column_count - len(values))

    def append_row(self, values):
        if self.row_count == 0 and self.column_count == 0:
            values = list(values)
            self.df = self._normalize(
                pd.DataFrame([values], columns=range(len(values)), dtype=object)
            )
            return
        self.df.loc[len(self.df)] = self._conform(values)

    def insert_row(self, index: int, values):
        index = max(0, min(index, self.row_count))
        new_row = pd.DataFrame(
            [self._conform(values)], columns=self.df.columns, dtype=object
        )
        self.df = self._normalize(
            pd.concat(
                [self.df.iloc[:index], new_row, self.df.iloc[index:]],
                ignore_index=True,
            )
        )

    def remove_row(self, index: int):
        self.df = self.df.drop(self.df.index[index]).reset_index(drop=True)

    # ---------- column structure ----------
    def insert_columns(self, index: int, count: int = 1):
        if count <= 0:
            return
        index = max(0, min(index, self.column_count))
        blank = pd.DataFrame(
            "", index=self.df.index, columns=range(count), dtype=object
        )
        self.df = self._normalize(
            pd.concat(
                [self.df.iloc[:, :index], blank, self.df.iloc[:, index:]], axis=1
            )
        )

    def remove_column(self, index: int):
        self.df = self._normalize(self.df.drop(columns=self.df.columns[index]))

    def swap_cells(self, rows: range, left: int, right: int):
        if left == right or len(rows) == 0:
            return
        block = self.df.iloc[rows.start : rows.stop, [right, left]].to_numpy()
        self.df.iloc[rows.start : rows.stop, [left, right]] = block
