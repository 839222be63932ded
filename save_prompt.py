from typing import Optional, Callable

from line_prompt import LinePrompt


class SavePrompt(LinePrompt):
    def __init__(self, state, file_type_handler_cls, set_status_cb: Callable[[str, int], None]):
        super().__init__()
        self.state = state
        self.FileTypeHandler = file_type_handler_cls
        self._set_status = set_status_cb

        self.save_and_exit = False
        self.exit_requested = False

    def start(self, current_path: Optional[str], save_and_exit: bool = False):
        self.active = True
        self.set_buffer(current_path or "")
        self.save_and_exit = save_and_exit
        self.exit_requested = False

    def prompt_text(self) -> str:
        return "Save as: "

    def handle_key(self, ch):
        if not self.active:
            return

        if ch in (10, 13):  # Enter
            path = self.buffer.strip()
            if not path:
                self._set_status("Path required", 3)
                return
            try:
                handler = self.FileTypeHandler(path)
                handler.save(self.state.grid)
            except OSError as e:
                self._set_status(f"Save failed: {e}", 4)
                return
            self.state.file_handler = handler
            self.state.file_path = path
            self._set_status(f"Saved {path}", 3)
            self.active = False
            self.clear()
            if self.save_and_exit:
                self.exit_requested = True
            self.save_and_exit = False
            return

        if ch == 27:  # Esc
            self.active = False
            self.save_and_exit = False
            self.clear()
            self._set_status("Save canceled", 3)
            return

        self.edit_key(ch)
