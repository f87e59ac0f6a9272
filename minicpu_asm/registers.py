"""
MiniCPU register definitions and name mappings.

The CPU has four general purpose registers, r0-r3, each addressed by a 2-bit code.
"""

from .errors import UnknownRegisterError

# Register name to 2-bit code
REGISTER_MAP = {
    "r0": 0b00,
    "r1": 0b01,
    "r2": 0b10,
    "r3": 0b11,
}

# Reverse mapping (code to name)
REG_NAMES = {code: name for name, code in REGISTER_MAP.items()}


def parse_register(name: str) -> int:
    """
    Parse a register name and return its code.

    Args:
        name: Register name (e.g., "r0", "r3"); surrounding whitespace is ignored

    Returns:
        Register code (0-3)

    Raises:
        UnknownRegisterError: If the register name is invalid
    """
    reg = name.strip()
    if reg in REGISTER_MAP:
        return REGISTER_MAP[reg]
    raise UnknownRegisterError(f"Unknown register name '{reg}'")


def is_valid_register(name: str) -> bool:
    """Check if a string is a valid register name."""
    return name.strip() in REGISTER_MAP


def get_register_name(code: int) -> str:
    """Get the name for a register code."""
    if code not in REG_NAMES:
        raise ValueError(f"Invalid register code: {code}")
    return REG_NAMES[code]
