"""
Unit tests for field rendering.
"""
from game import Direction, Field, FieldConfig
from terminal import render_field


class TestRenderField:
    """Test the text frame drawn for a field."""

    def test_hidden_field_with_cursor_at_origin(self) -> None:
        """Cursor cell is bracketed, others padded with spaces."""
        field = Field(FieldConfig(columns=3, rows=2, coverage=0))
        assert render_field(field) == "[.] .  . \n .  .  . "

    def test_cursor_follows_moves(self) -> None:
        """Brackets move with the cursor."""
        field = Field(FieldConfig(columns=2, rows=2, coverage=0))
        field.move_cursor(Direction.RIGHT)
        field.move_cursor(Direction.DOWN)
        assert render_field(field).splitlines()[1] == " . [.]"

    def test_fixed_width_rows(self) -> None:
        """Every row is three characters per cell wide."""
        field = Field(FieldConfig(columns=5, rows=4, coverage=0))
        for line in render_field(field).split("\n"):
            assert len(line) == 15

    def test_revealed_glyphs(self, make_field) -> None:
        """Counts, blanks and mines are drawn after reveal."""
        field = make_field(["*..", "...", "..."])
        field.reveal_cell(1, 0)
        field.reveal_cell(2, 2)
        field.reveal_cell(0, 0)
        lines = render_field(field).split("\n")
        assert lines[0] == "[@] 1  . "
        assert lines[2] == " .  .    "
