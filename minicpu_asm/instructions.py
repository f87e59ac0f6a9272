"""
MiniCPU instruction definitions.

This module defines every supported mnemonic with its 4-bit opcode and its
format family. Opcodes are unique within a family but may repeat across
families; the table entry, not the value, decides how a line is encoded.
"""

from dataclasses import dataclass
from typing import List, Optional
from enum import Enum, auto

from .errors import UnknownOperatorError


class InstructionFormat(Enum):
    """MiniCPU instruction format families."""

    RR = auto()  # Register-register operations
    RS = auto()  # Register/memory with addressing mode
    IO = auto()  # Register <-> address transfers
    OTHER = auto()  # No operands


@dataclass(frozen=True)
class Instruction:
    """
    Definition of a MiniCPU instruction.

    Attributes:
        opcode: 4-bit opcode field
        format: Instruction format family
        unary: RR only; the source operand is not encoded
        address_first: IO only; operands are written as "addr, reg"
    """

    opcode: int
    format: InstructionFormat
    unary: bool = False
    address_first: bool = False


# =============================================================================
# MiniCPU Instruction Set
# =============================================================================

INSTRUCTIONS = {
    # -------------------------------------------------------------------------
    # RR Instructions (Register-Register): op rd, rs
    # -------------------------------------------------------------------------
    "add": Instruction(opcode=0b0000, format=InstructionFormat.RR),
    "and": Instruction(opcode=0b0001, format=InstructionFormat.RR),
    "mov": Instruction(opcode=0b0100, format=InstructionFormat.RR),
    "inc": Instruction(opcode=0b0111, format=InstructionFormat.RR, unary=True),
    "sub": Instruction(opcode=0b1000, format=InstructionFormat.RR),
    "or": Instruction(opcode=0b1001, format=InstructionFormat.RR),
    "rr": Instruction(opcode=0b1010, format=InstructionFormat.RR),
    # -------------------------------------------------------------------------
    # RS Instructions (Memory): op mode addr [, reg]
    # -------------------------------------------------------------------------
    "lad": Instruction(opcode=0b1100, format=InstructionFormat.RS),
    "sta": Instruction(opcode=0b1101, format=InstructionFormat.RS),
    "jmp": Instruction(opcode=0b1110, format=InstructionFormat.RS),
    "bzc": Instruction(opcode=0b1111, format=InstructionFormat.RS),
    # -------------------------------------------------------------------------
    # IO Instructions: op reg, addr  (out: op addr, reg)
    # -------------------------------------------------------------------------
    "in": Instruction(opcode=0b0010, format=InstructionFormat.IO),
    "out": Instruction(opcode=0b0011, format=InstructionFormat.IO, address_first=True),
    "ldi": Instruction(opcode=0b0110, format=InstructionFormat.IO),
    # -------------------------------------------------------------------------
    # Other Instructions
    # -------------------------------------------------------------------------
    "halt": Instruction(opcode=0b0101, format=InstructionFormat.OTHER),
}


def get_instruction(mnemonic: str) -> Optional[Instruction]:
    """
    Look up an instruction by mnemonic.

    Args:
        mnemonic: Instruction mnemonic (case-sensitive)

    Returns:
        Instruction object if found, None otherwise
    """
    return INSTRUCTIONS.get(mnemonic)


def is_valid_instruction(mnemonic: str) -> bool:
    """Check if a mnemonic is a valid instruction."""
    return mnemonic in INSTRUCTIONS


def resolve(mnemonic: str) -> Instruction:
    """
    Resolve a mnemonic to its instruction definition.

    Raises:
        UnknownOperatorError: If the mnemonic is not in any opcode table
    """
    instr = get_instruction(mnemonic)
    if instr is None:
        raise UnknownOperatorError(f"Unknown operator '{mnemonic}'")
    return instr


def get_mnemonics(fmt: InstructionFormat) -> List[str]:
    """Get the mnemonics belonging to one format family."""
    return [name for name, instr in INSTRUCTIONS.items() if instr.format == fmt]
