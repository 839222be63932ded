from typing import Callable, Optional

from line_prompt import LinePrompt
from table_ops import SplitUnderflow, split_column


class SplitPrompt(LinePrompt):
    """Two-step prompt: delimiter, then maximum field count, then split."""

    def __init__(
        self,
        state,
        set_status_cb: Callable[[str, int], None],
        alert_cb: Callable[[], None],
    ):
        super().__init__()
        self.state = state
        self._set_status = set_status_cb
        self._alert = alert_cb
        self.step: Optional[str] = None  # delimiter | max_fields
        self.pending_delimiter: Optional[str] = None

    def start(self):
        self.active = True
        self.step = "delimiter"
        self.pending_delimiter = None
        self.set_buffer(self.state.split_delimiter)

    def handle_key(self, ch):
        if not self.active:
            return

        if ch in (10, 13):  # Enter
            self._handle_enter()
            return

        if ch == 27:  # Esc
            self._set_status("Split canceled", 3)
            self._reset()
            return

        self.edit_key(ch)

    def prompt_text(self) -> str:
        if self.step == "max_fields":
            return "Maximum fields (0 to disable): "
        return "Split on string: "

    def _handle_enter(self):
        if self.step == "delimiter":
            if self.buffer == "":
                self._set_status("Delimiter required", 3)
                self._alert()
                return
            self.pending_delimiter = self.buffer
            self.step = "max_fields"
            self.set_buffer(str(self.state.split_max_fields))
            return

        text = self.buffer.strip() or "0"
        try:
            max_fields = int(text)
        except ValueError:
            max_fields = -1
        if max_fields < 0:
            self._set_status("Maximum fields must be a whole number >= 0", 3)
            self._alert()
            return

        delimiter = self.pending_delimiter
        self.state.split_delimiter = delimiter
        self.state.split_max_fields = max_fields
        self._reset()
        self._apply(delimiter, max_fields)

    def _apply(self, delimiter: str, max_fields: int):
        try:
            ncols = split_column(
                self.state.grid,
                self.state.selection.col,
                delimiter,
                max_fields,
                self.state.selection,
            )
        except SplitUnderflow as exc:
            self._alert()
            self._set_status(f"Split failed: {exc}", 3)
            return
        self._set_status(f"Split into {ncols} columns", 3)

    def _reset(self):
        self.active = False
        self.step = None
        self.pending_delimiter = None
        self.clear()
