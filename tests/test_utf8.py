"""Tests for tickline.utf8 -- UTF-8 character boundary helpers."""

from __future__ import annotations

from tickline.utf8 import (
    char_length,
    decode,
    next_boundary,
    next_char,
    prev_boundary,
    prev_char_length,
    truncate,
)

# "a" (1 byte), "é" (2), "€" (3), "😀" (4)
MIXED = "aé€😀".encode("utf-8")


class TestCharLength:
    """Lead-byte classification."""

    def test_ascii_is_one_byte(self) -> None:
        assert char_length(ord("a")) == 1

    def test_thresholds(self) -> None:
        assert char_length(0xC3) == 2
        assert char_length(0xE2) == 3
        assert char_length(0xF0) == 4

    def test_continuation_byte_counts_as_one(self) -> None:
        assert char_length(0x80) == 1


class TestNextChar:
    """next_char returns the bytes of the character at an offset."""

    def test_each_width(self) -> None:
        assert next_char(MIXED, 0) == b"a"
        assert next_char(MIXED, 1) == "é".encode()
        assert next_char(MIXED, 3) == "€".encode()
        assert next_char(MIXED, 6) == "😀".encode()

    def test_out_of_range_is_none(self) -> None:
        assert next_char(MIXED, len(MIXED)) is None
        assert next_char(MIXED, -1) is None
        assert next_char(b"", 0) is None

    def test_truncated_sequence_stops_at_end(self) -> None:
        data = "€".encode()[:2]
        assert next_char(data, 0) == data


class TestPrevCharLength:
    """prev_char_length scans backward for a lead byte."""

    def test_each_width(self) -> None:
        assert prev_char_length(MIXED, 1) == 1
        assert prev_char_length(MIXED, 3) == 2
        assert prev_char_length(MIXED, 6) == 3
        assert prev_char_length(MIXED, 10) == 4

    def test_at_start_is_zero(self) -> None:
        assert prev_char_length(MIXED, 0) == 0

    def test_out_of_range_is_zero(self) -> None:
        assert prev_char_length(MIXED, len(MIXED) + 1) == 0

    def test_orphan_continuation_byte_is_one(self) -> None:
        assert prev_char_length(b"a\x80", 2) == 1

    def test_lead_byte_that_does_not_match_distance_is_one(self) -> None:
        # A 3-byte lead followed by a single continuation byte
        assert prev_char_length(b"\xe2\x82", 2) == 1


class TestBoundaries:
    """Offsets of neighbouring boundaries."""

    def test_next_boundary_walks_whole_characters(self) -> None:
        offsets = [0]
        while offsets[-1] < len(MIXED):
            offsets.append(next_boundary(MIXED, offsets[-1]))
        assert offsets == [0, 1, 3, 6, 10]

    def test_prev_boundary_walks_whole_characters(self) -> None:
        offsets = [len(MIXED)]
        while offsets[-1] > 0:
            offsets.append(prev_boundary(MIXED, offsets[-1]))
        assert offsets == [10, 6, 3, 1, 0]

    def test_boundaries_at_edges_stay_put(self) -> None:
        assert next_boundary(MIXED, len(MIXED)) == len(MIXED)
        assert prev_boundary(MIXED, 0) == 0


class TestTruncate:
    """truncate never splits a character."""

    def test_short_data_is_unchanged(self) -> None:
        assert truncate(b"abc", 5) == b"abc"

    def test_cuts_before_partial_character(self) -> None:
        data = "a€".encode()
        assert truncate(data, 3) == b"a"

    def test_cuts_on_boundary(self) -> None:
        data = "a€b".encode()
        assert truncate(data, 4) == "a€".encode()


class TestDecode:
    def test_malformed_bytes_are_replaced(self) -> None:
        assert decode(b"a\xe2\x82") == "a\ufffd"
