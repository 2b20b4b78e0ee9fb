"""
Unit tests for text_normalization module.

Tests the normalizer and the list-decoration cleaner with realistic pasted blurbs.
"""

import pytest
from app.core.text_normalization import (
    extract_clean_lines,
    normalize_text,
    split_numbered_tokens,
    strip_list_markers,
)


RUN_ON = "1. Kevin VanderWal 2. K3VO 3. 619k3vo@gmail.com 4. 760-5951290 5. @sd.k3vo"


class TestNormalizeText:

    def test_crlf_and_blank_lines(self):
        assert normalize_text("SAUL\r\n\r\n  Jonathan   Weinstein ") == "SAUL\nJonathan Weinstein"

    def test_bare_carriage_returns(self):
        assert normalize_text("FIA\rSophia ward") == "FIA\nSophia ward"

    def test_unicode_line_separator(self):
        assert normalize_text("FIA\u2028Sophia ward") == "FIA\nSophia ward"

    def test_tabs_and_nbsp(self):
        assert normalize_text("Kevin\t\u00a0VanderWal") == "Kevin VanderWal"

    def test_whitespace_only(self):
        assert normalize_text("   \n\t \r\n") == ""

    def test_already_normalized_is_unchanged(self):
        text = "SAUL\nJonathan Weinstein"
        assert normalize_text(text) == text


class TestStripListMarkers:

    @pytest.mark.parametrize("line, expected", [
        ("1. Kevin VanderWal", "Kevin VanderWal"),
        ("12) Kevin VanderWal", "Kevin VanderWal"),
        ("4 - 760-595-1290", "760-595-1290"),
        ("• SAUL", "SAUL"),
        ("- SAUL", "SAUL"),
        ("* SAUL", "SAUL"),
        ("+ SAUL", "SAUL"),
        ("a. FIA", "FIA"),
        ("B) FIA", "FIA"),
        ("• b) SAUL", "SAUL"),
    ])
    def test_markers_removed(self, line, expected):
        assert strip_list_markers(line) == expected

    @pytest.mark.parametrize("line", [
        "760-595-1290",
        "512.712.2689",
        "(858) 692-1601",
        "8054537433 (phone)",
        "DJ SUNSET",
        "SAUL",
        "@sd.k3vo",
        "A. J. Smith",
    ])
    def test_content_left_alone(self, line):
        """Phone numbers starting a line keep their leading digits."""
        assert strip_list_markers(line) == line

    def test_letter_markers_can_be_kept(self):
        assert strip_list_markers("1. J. Cole", letter_markers=False) == "J. Cole"
        assert strip_list_markers("• J. Cole") == "Cole"
        assert strip_list_markers("• J. Cole", letter_markers=False) == "J. Cole"


class TestSplitNumberedTokens:

    def test_run_on_paragraph(self):
        preamble, tokens = split_numbered_tokens(RUN_ON)
        assert preamble == ""
        assert tokens == [
            (1, "Kevin VanderWal"),
            (2, "K3VO"),
            (3, "619k3vo@gmail.com"),
            (4, "760-5951290"),
            (5, "@sd.k3vo"),
        ]

    def test_preamble_kept(self):
        preamble, tokens = split_numbered_tokens("Here's my info: 1. Kevin 2. K3VO")
        assert preamble == "Here's my info:"
        assert tokens == [(1, "Kevin"), (2, "K3VO")]

    def test_no_markers(self):
        assert split_numbered_tokens("SAUL") == ("SAUL", [])

    def test_dotted_phone_is_not_split(self):
        _, tokens = split_numbered_tokens("1. 760.595.1290 2. FIA")
        assert tokens == [(1, "760.595.1290"), (2, "FIA")]


class TestExtractCleanLines:

    def test_numbered_multi_line(self):
        text = "1. Sophia ward (DJ Full Name)\n2. FIA (DJ Name)"
        assert extract_clean_lines(text) == ["Sophia ward (DJ Full Name)", "FIA (DJ Name)"]

    def test_run_on_is_split(self):
        assert extract_clean_lines(RUN_ON) == [
            "Kevin VanderWal",
            "K3VO",
            "619k3vo@gmail.com",
            "760-5951290",
            "@sd.k3vo",
        ]

    def test_single_marker_line_is_not_split(self):
        assert extract_clean_lines("1. Kevin VanderWal") == ["Kevin VanderWal"]

    def test_order_preserved(self):
        text = "- SAUL\n- Jonathan Weinstein\n- (858) 692-1601"
        assert extract_clean_lines(text) == ["SAUL", "Jonathan Weinstein", "(858) 692-1601"]

    def test_initials_kept(self):
        assert extract_clean_lines("A. J. Smith\n- DJ Nova") == ["A. J. Smith", "DJ Nova"]

    def test_empty(self):
        assert extract_clean_lines("") == []

    @pytest.mark.parametrize("text", [
        RUN_ON,
        "- a) 1. Foo\n• Bar",
        "Here's my info: 1. Kevin 2. K3VO",
        "1. Sophia ward (DJ Full Name)\n2. FIA (DJ Name)\n3. 512-712-2689 (phone)",
        "a.\n1)",
        "A. J. Smith\n2. J. Cole",
    ])
    def test_cleaning_is_idempotent(self, text):
        lines = extract_clean_lines(text)
        assert [strip_list_markers(line) for line in lines] == lines
        assert extract_clean_lines("\n".join(lines)) == lines
