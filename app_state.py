from column_labels import column_label
from grid_model import Grid, Selection


class AppState:
    """Session context shared by the prompts and the key handlers."""

    def __init__(self, grid: Grid, file_path, file_handler, config=None):
        config = config or {}
        self.grid = grid
        self.file_path = file_path
        self.file_handler = file_handler
        self.selection = Selection(row=grid.data_start, col=0)

        # remembered between split prompts
        self.split_delimiter: str = config.get("SPLIT_DELIMITER", "")
        self.split_max_fields: int = config.get("SPLIT_MAX_FIELDS", 0)

        self.bell_enabled: bool = config.get("BELL", True)

    def clamp_selection(self):
        grid = self.grid
        last_row = max(grid.data_start, grid.row_count - 1)
        self.selection.row = max(grid.data_start, min(self.selection.row, last_row))
        self.selection.col = max(0, min(self.selection.col, grid.column_count - 1))

    def current_label(self) -> str:
        col = self.selection.col
        if self.grid.has_header and self.grid.row_count > 0:
            return self.grid.cell(0, col)
        return column_label(col)
