"""Tests for tickline.clipboard.Clipboard -- cut, copy and paste."""

from __future__ import annotations

from tickline.buffer import EditBuffer
from tickline.clipboard import Clipboard


def make_buffer(text: str, **kwargs) -> EditBuffer:
    buf = EditBuffer(**kwargs)
    buf.set_text(text)
    return buf


class TestCopy:
    """copy stores the selected span."""

    def test_copy_selection(self) -> None:
        buf = make_buffer("hello world")
        clip = Clipboard()
        buf.select(0, 5)
        assert clip.copy(buf)
        assert clip.content == "hello"
        assert buf.text == "hello world"

    def test_copy_without_selection_is_noop(self) -> None:
        buf = make_buffer("hello")
        clip = Clipboard()
        clip.set("keep")
        assert not clip.copy(buf)
        assert clip.content == "keep"

    def test_copy_clamps_to_floor(self) -> None:
        buf = make_buffer("/ban", min_cursor_position=1)
        clip = Clipboard()
        buf.select_all()
        clip.copy(buf)
        assert clip.content == "ban"

    def test_copy_multibyte(self) -> None:
        buf = make_buffer("añb")
        clip = Clipboard()
        buf.select(1, 3)
        clip.copy(buf)
        assert clip.content == "ñ"


class TestCut:
    """cut copies and deletes."""

    def test_cut_removes_span(self) -> None:
        seen: list[str] = []
        buf = make_buffer("hello world", on_change=seen.append)
        clip = Clipboard()
        buf.select(5, 11)
        assert clip.cut(buf)
        assert clip.content == " world"
        assert buf.text == "hello"
        assert buf.cursor_position == 5
        assert seen[-1] == "hello"

    def test_cut_without_selection_is_noop(self) -> None:
        seen: list[str] = []
        buf = make_buffer("hello", on_change=seen.append)
        seen.clear()
        clip = Clipboard()
        assert not clip.cut(buf)
        assert buf.text == "hello"
        assert seen == []

    def test_cut_keeps_protected_prefix(self) -> None:
        buf = make_buffer("/ban", min_cursor_position=1)
        clip = Clipboard()
        buf.select_all()
        clip.cut(buf)
        assert buf.text == "/"


class TestPaste:
    """paste goes through insert."""

    def test_paste_at_cursor(self) -> None:
        buf = make_buffer("ac")
        buf.move_cursor(-1)
        clip = Clipboard()
        clip.set("b")
        assert clip.paste(buf)
        assert buf.text == "abc"

    def test_paste_replaces_selection(self) -> None:
        buf = make_buffer("hello world")
        clip = Clipboard()
        clip.set("there")
        buf.select(6, 11)
        clip.paste(buf)
        assert buf.text == "hello there"

    def test_paste_empty_clipboard_is_noop(self) -> None:
        seen: list[str] = []
        buf = make_buffer("hello", on_change=seen.append)
        seen.clear()
        assert not Clipboard().paste(buf)
        assert seen == []

    def test_oversized_paste_is_rejected(self) -> None:
        buf = make_buffer("hello", max_length=8)
        clip = Clipboard()
        clip.set("world")
        assert not clip.paste(buf)
        assert buf.text == "hello"

    def test_clipboard_is_per_instance(self) -> None:
        first = Clipboard()
        second = Clipboard()
        first.set("x")
        assert not second
        assert second.content == ""
