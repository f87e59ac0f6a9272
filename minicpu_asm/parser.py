"""
Assembly source line parser.

Handles splitting a line into mnemonic and operand text, operand tokenization,
and parsing of hexadecimal addresses and addressing-mode digits.
"""

import re
from typing import List, Optional, Tuple

from .errors import ParseError, AddressFormatError

# Optional 0x prefix followed by hex digits
HEX_PATTERN = re.compile(r"^(0[xX])?([0-9A-Fa-f]+)$")


def is_blank(line: str) -> bool:
    """Check if a line has nothing but whitespace."""
    return not line.strip()


def split_line(line: str) -> Optional[Tuple[str, str]]:
    """
    Split a source line into its mnemonic and raw operand text.

    Examples:
    - "mov r1,r0" -> ("mov", "r1,r0")
    - "lad 1 2A,r2" -> ("lad", "1 2A,r2")
    - "halt" -> ("halt", "")

    The operand text is returned as written; leading whitespace after the
    mnemonic is dropped but trailing whitespace is kept.

    Returns:
        Tuple of (mnemonic, operand_text), or None for a blank line
    """
    parts = line.split(None, 1)
    if not parts:
        return None
    mnemonic = parts[0]
    operand_text = parts[1] if len(parts) > 1 else ""
    return mnemonic, operand_text


def tokenize_operands(operand_str: str, separators: str = ",") -> List[str]:
    """
    Split operand text into individual operands.

    Every character in separators acts as a delimiter. Surrounding whitespace is
    stripped and empty tokens are dropped.
    """
    pattern = "[" + re.escape(separators) + "]"
    return [tok.strip() for tok in re.split(pattern, operand_str) if tok.strip()]


def expect_operands(mnemonic: str, operands: List[str], counts: Tuple[int, ...], usage: str) -> None:
    """
    Check the operand count for an instruction.

    Args:
        mnemonic: Instruction mnemonic, for the error message
        operands: Tokenized operands
        counts: Accepted operand counts
        usage: Operand syntax, e.g. "rd, rs"

    Raises:
        ParseError: If the number of operands is not one of counts
    """
    if len(operands) not in counts:
        raise ParseError(
            f"{mnemonic} requires operands ({usage}), got {len(operands)}"
        )


def parse_address(value_str: str) -> int:
    """
    Parse a hexadecimal address.

    Supports:
    - Bare hex: 2A, 2a, ff
    - Prefixed hex: 0x2A

    Returns:
        Address truncated to 8 bits
    """
    match = HEX_PATTERN.match(value_str.strip())
    if not match:
        raise AddressFormatError(f"Address format error: '{value_str.strip()}'")
    return int(match.group(2), 16) & 0xFF


def parse_mode(value_str: str) -> int:
    """
    Parse an addressing-mode digit.

    The mode is a single decimal digit taken at face value; it must fit the
    2-bit first field.
    """
    mode = value_str.strip()
    if len(mode) != 1 or mode not in "0123":
        raise ParseError(f"Invalid addressing mode '{mode}' (expected 0-3)")
    return int(mode)
