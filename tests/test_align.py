"""Tests for tagtable.align -- org-style column alignment."""

from __future__ import annotations

from tagtable.align import align_table


class TestAlignTable:
    """Padding pipe tables so columns line up."""

    def test_pads_to_widest_cell(self) -> None:
        text = "|a|bbb|\n|--|\n|cc||"
        assert align_table(text) == "| a  | bbb |\n|----+-----|\n| cc |     |"

    def test_rule_spans_every_column(self) -> None:
        lines = align_table("|a|b|c|\n|--|").split("\n")
        assert lines[1] == "|---+---+---|"

    def test_short_rows_filled(self) -> None:
        text = "|a|b|\n|x|"
        assert align_table(text) == "| a | b |\n| x |   |"

    def test_existing_padding_is_normalised(self) -> None:
        text = "|  a |b|\n| x   |   y |"
        assert align_table(text) == "| a | b |\n| x | y |"

    def test_wide_characters_aligned_by_display_width(self) -> None:
        text = "|Name|\n|世界|\n|ab|"
        assert align_table(text) == "| Name |\n| 世界 |\n| ab   |"

    def test_trailing_newline_kept(self) -> None:
        assert align_table("|a|\n|--|\n") == "| a |\n|---|\n"

    def test_non_table_lines_pass_through(self) -> None:
        text = "#+caption: Board\n|a|\n|b|"
        assert align_table(text) == "#+caption: Board\n| a |\n| b |"

    def test_text_without_rows_unchanged(self) -> None:
        assert align_table("|--|") == "|--|"
        assert align_table("") == ""

    def test_already_aligned_is_stable(self) -> None:
        aligned = "| a  | bbb |\n|----+-----|\n| cc |     |"
        assert align_table(aligned) == aligned
