"""
Tests for source line and operand parsing.
"""

import pytest

from minicpu_asm.parser import (
    is_blank,
    split_line,
    tokenize_operands,
    expect_operands,
    parse_address,
    parse_mode,
)
from minicpu_asm.errors import ParseError, AddressFormatError


class TestSplitLine:
    """Tests for split_line function."""

    def test_mnemonic_and_operands(self):
        assert split_line("mov r1,r0") == ("mov", "r1,r0")

    def test_operand_text_kept_unsplit(self):
        assert split_line("lad 1 2A,r2") == ("lad", "1 2A,r2")

    def test_no_operands(self):
        assert split_line("halt") == ("halt", "")

    def test_leading_whitespace(self):
        assert split_line("   out 7F,r3  ") == ("out", "7F,r3  ")

    def test_operand_text_not_stripped(self):
        assert split_line("lad  1 2A , r2 ") == ("lad", "1 2A , r2 ")

    def test_tab_separator(self):
        assert split_line("in\tr1,F0") == ("in", "r1,F0")

    @pytest.mark.parametrize("line", ["", "   ", "\t \t"])
    def test_blank_line(self, line):
        assert is_blank(line)
        assert split_line(line) is None


class TestTokenizeOperands:
    """Tests for tokenize_operands function."""

    def test_comma_separated(self):
        assert tokenize_operands("r1,r0") == ["r1", "r0"]

    def test_whitespace_stripped(self):
        assert tokenize_operands(" r1 ,  r0 ") == ["r1", "r0"]

    def test_mixed_separators(self):
        assert tokenize_operands("1 2A,r2", " ,") == ["1", "2A", "r2"]

    def test_empty_tokens_dropped(self):
        assert tokenize_operands("1  2A,, r2", " ,") == ["1", "2A", "r2"]

    def test_empty_text(self):
        assert tokenize_operands("") == []


class TestExpectOperands:
    """Tests for expect_operands function."""

    def test_accepted_count(self):
        expect_operands("mov", ["r1", "r0"], (2,), "rd, rs")

    def test_missing_operand(self):
        """Test that a short operand list raises instead of reading past it."""
        with pytest.raises(ParseError, match=r"mov requires operands \(rd, rs\), got 1"):
            expect_operands("mov", ["r1"], (2,), "rd, rs")


class TestParseAddress:
    """Tests for parse_address function."""

    @pytest.mark.parametrize("text", ["2A", "2a", "0x2A", "0X2a", " 2A "])
    def test_hex_case_insensitive(self, text):
        assert parse_address(text) == 0x2A

    def test_truncated_to_8_bits(self):
        assert parse_address("1FF") == 0xFF
        assert parse_address("100") == 0x00

    @pytest.mark.parametrize("text", ["zz", "", "0x", "2G", "-1", "12 34"])
    def test_invalid_address(self, text):
        with pytest.raises(AddressFormatError, match="Address format error"):
            parse_address(text)


class TestParseMode:
    """Tests for parse_mode function."""

    @pytest.mark.parametrize("text,mode", [("0", 0), ("1", 1), ("2", 2), ("3", 3)])
    def test_valid_modes(self, text, mode):
        assert parse_mode(text) == mode

    @pytest.mark.parametrize("text", ["4", "9", "x", "01", ""])
    def test_invalid_mode(self, text):
        with pytest.raises(ParseError, match="Invalid addressing mode"):
            parse_mode(text)
