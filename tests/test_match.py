"""Tests for line matching and filter-out."""

import re

import pytest

from tbp.blocks import (
    Block,
    match_in_block,
    remove_from_block,
    slice_match_in_block,
    solo_match_in_block,
)


class TestMatchInBlock:
    def test_collects_groups_per_matching_line(self):
        result = match_in_block(["a=1", "b", "a=2"], r"a=(\d)")
        assert result.found is True
        assert result.captures == [["1"], ["2"]]

    def test_non_participating_group_is_empty_string(self):
        """Indices stay aligned even when an optional group does not take part."""
        result = match_in_block(["5", "6x"], r"(\d)(x)?")
        assert result.captures == [["5", ""], ["6", "x"]]

    def test_no_match_is_not_an_error(self):
        result = match_in_block(["foo", "bar"], r"baz")
        assert result.found is False
        assert result.captures == []

    def test_pattern_without_groups(self):
        result = match_in_block(["foo", "bar"], r"^f")
        assert result.found is True
        assert result.captures == [[]]

    def test_searches_anywhere_in_line(self):
        result = match_in_block(["  Gi0/1 up"], re.compile(r"(Gi\S+)"))
        assert result.captures == [["Gi0/1"]]

    def test_accepts_block(self):
        block = Block(lines=["x=1", "x=2"])
        assert match_in_block(block, r"x=(\d)").captures == [["1"], ["2"]]

    def test_invalid_pattern_string_raises(self):
        with pytest.raises(re.error):
            match_in_block(["x"], "(")


class TestSoloMatch:
    def test_first_capture_of_first_match(self):
        lines = ["Hostname: core-1", "Hostname: core-2"]
        assert solo_match_in_block(lines, r"Hostname: (\S+)") == (True, "core-1")

    def test_no_match(self):
        assert solo_match_in_block(["nothing here"], r"Hostname: (\S+)") == (False, "")

    def test_pattern_without_groups(self):
        assert solo_match_in_block(["abc"], r"b") == (True, "")


class TestSliceMatch:
    def test_first_capture_per_line(self):
        lines = ["Gi0/1 up", "header", "Gi0/2 down"]
        assert slice_match_in_block(lines, r"^(\S+) (up|down)") == (True, ["Gi0/1", "Gi0/2"])

    def test_no_match(self):
        assert slice_match_in_block(["header"], r"^(Gi\S+)") == (False, [])


class TestRemoveFromBlock:
    def test_filters_out_matching_lines(self):
        matched, block = remove_from_block(["a", "b", "a"], r"a")
        assert matched is True
        assert block.lines == ["b"]

    def test_nothing_removed(self):
        lines = ["a", "b"]
        matched, block = remove_from_block(lines, r"z")
        assert matched is False
        assert block.lines == lines

    def test_result_is_a_copy(self):
        lines = ["a", "b"]
        _, block = remove_from_block(lines, r"z")
        block.lines.append("c")
        assert lines == ["a", "b"]
