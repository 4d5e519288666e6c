"""Tests for tickline.render.render_line."""

from __future__ import annotations

import pytest

from tickline.line_input import LineInput
from tickline.render import CURSOR_OFF, CURSOR_ON, SELECT_OFF, SELECT_ON, render_line, selection_indices
from tickline.utils import visible_width


def make_field(text: str) -> LineInput:
    field = LineInput()
    field.set_text(text)
    return field


class TestRenderLine:
    """Prompt, padding and the cursor cell."""

    def test_short_text_is_padded(self) -> None:
        out = render_line(make_field("hello"), 20)
        assert out.startswith("> hello")
        assert visible_width(out) == 20

    def test_cursor_at_end_gets_a_cell(self) -> None:
        out = render_line(make_field("hi"), 10)
        assert f"{CURSOR_ON} {CURSOR_OFF}" in out

    def test_cursor_inside_text(self) -> None:
        field = make_field("hello")
        field.move_cursor(-2)
        out = render_line(field, 20)
        assert f"{CURSOR_ON}l{CURSOR_OFF}" in out

    def test_custom_prompt(self) -> None:
        out = render_line(make_field("x"), 10, prompt="$ ")
        assert out.startswith("$ x")

    def test_too_narrow_returns_prompt(self) -> None:
        assert render_line(make_field("hello"), 2) == "> "


class TestScrolling:
    """Long text scrolls to keep the cursor visible."""

    def test_cursor_at_end_shows_tail(self) -> None:
        out = render_line(make_field("abcdefghij"), 7)
        assert "ghij" in out
        assert "abc" not in out
        assert visible_width(out) == 7

    def test_cursor_at_start_shows_head(self) -> None:
        field = make_field("abcdefghij")
        field.move_cursor(-10)
        out = render_line(field, 7)
        assert f"{CURSOR_ON}a{CURSOR_OFF}" in out
        assert "j" not in out


class TestSelection:
    """Selected characters are underlined."""

    def test_selection_indices_are_characters(self) -> None:
        field = make_field("ñab")
        field.select(0, 3)
        assert selection_indices(field) == (0, 2)

    def test_no_selection(self) -> None:
        assert selection_indices(make_field("abc")) is None

    def test_selected_characters_underlined(self) -> None:
        field = make_field("hello")
        field.select(0, 2)
        out = render_line(field, 20)
        assert f"{SELECT_ON}h{SELECT_OFF}" in out
        assert f"{SELECT_ON}e{SELECT_OFF}" in out
        assert f"{CURSOR_ON}l{CURSOR_OFF}" in out


class TestWideCharacters:
    """Double-width characters scroll and pad by terminal columns."""

    CJK = "日本語日本語日本語"

    @pytest.mark.parametrize("width", range(4, 24))
    def test_cursor_at_end_fills_width(self, width: int) -> None:
        out = render_line(make_field(self.CJK), width)
        assert visible_width(out) == width
        assert f"{CURSOR_ON} {CURSOR_OFF}" in out

    @pytest.mark.parametrize("width", range(4, 24))
    def test_cursor_at_start_fills_width(self, width: int) -> None:
        field = make_field(self.CJK)
        field.move_cursor(-9)
        out = render_line(field, width)
        assert visible_width(out) == width
        assert f"{CURSOR_ON}日{CURSOR_OFF}" in out

    def test_cursor_in_middle_stays_visible(self) -> None:
        field = make_field(self.CJK)
        field.move_cursor(-5)
        out = render_line(field, 10)
        assert visible_width(out) == 10
        assert f"{CURSOR_ON}本{CURSOR_OFF}" in out

    def test_wide_cursor_character_in_one_column(self) -> None:
        field = make_field(self.CJK)
        field.move_cursor(-9)
        out = render_line(field, 3)
        assert out == f"> {CURSOR_ON} {CURSOR_OFF}"
        assert visible_width(out) == 3

    def test_mixed_width_text(self) -> None:
        out = render_line(make_field("ab日本cd"), 30)
        assert out.startswith("> ab日本cd")
        assert visible_width(out) == 30
