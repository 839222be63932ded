import os
import time


def render_status(context, width):
    """
    context keys: status_msg, status_until, file_path, grid_shape,
                   has_header, cursor_label, cursor_row
    """
    now = time.time()
    if context.get("status_msg") and now < context.get("status_until", 0):
        text = f" {context['status_msg']}"
    else:
        fname = context.get("file_path") or "[pasted]"
        fname = os.path.basename(fname)
        rows, cols = context.get("grid_shape", (0, 0))
        header = "header" if context.get("has_header") else "no header"
        cursor = f"{context.get('cursor_label', '')}{context.get('cursor_row', 0)}"
        text = f" {fname} | {rows}x{cols} | {header} | {cursor}"

    return text.ljust(width)[:width]
