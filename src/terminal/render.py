"""Text rendering of a mine field."""
from game import Field


def render_field(field: Field) -> str:
    """
    Render the field as fixed-width text.

    Every cell takes three columns: the cell under the cursor is drawn
    as ``[g]``, all others as `` g ``.
    """
    cursor_x, cursor_y = field.cursor
    lines = []
    for row in field.rows():
        parts = []
        for cell in row:
            if (cell.col, cell.row) == (cursor_x, cursor_y):
                parts.append(f"[{cell.glyph}]")
            else:
                parts.append(f" {cell.glyph} ")
        lines.append("".join(parts))
    return "\n".join(lines)
