"""
Instruction word layout.

An instruction is one opcode byte, optionally followed by an extension byte
carrying an 8-bit address or immediate:

    byte 0: [op(4) | first(2) | end(2)]
    byte 1: [extend(8)]              (only when extend_enable is set)
"""

from dataclasses import dataclass


@dataclass
class InstructionWord:
    """
    A packed MiniCPU instruction.

    Attributes:
        end: 2-bit register field
        first: 2-bit register or addressing-mode field
        op: 4-bit opcode
        extend: 8-bit extension byte
        extend_enable: True if the extension byte is part of the instruction
    """

    end: int = 0
    first: int = 0
    op: int = 0
    extend: int = 0
    extend_enable: bool = False

    @property
    def low_byte(self) -> int:
        """Opcode byte: op in bits 7-4, first in bits 3-2, end in bits 1-0."""
        return ((self.op & 0xF) << 4) | ((self.first & 0x3) << 2) | (self.end & 0x3)

    @property
    def high_byte(self) -> int:
        return self.extend & 0xFF

    @property
    def size(self) -> int:
        """Number of bytes this instruction occupies in the object file."""
        return 2 if self.extend_enable else 1

    def to_bytes(self) -> bytes:
        if self.extend_enable:
            return bytes([self.low_byte, self.high_byte])
        return bytes([self.low_byte])

    @classmethod
    def from_bytes(cls, data: bytes) -> "InstructionWord":
        """
        Rebuild an instruction word from its encoded bytes.

        Args:
            data: One byte, or two when the extension byte is present

        Returns:
            InstructionWord with its fields unpacked
        """
        if len(data) not in (1, 2):
            raise ValueError(f"Instruction must be 1 or 2 bytes, got {len(data)}")
        low = data[0]
        word = cls(end=low & 0x3, first=(low >> 2) & 0x3, op=(low >> 4) & 0xF)
        if len(data) == 2:
            word.extend = data[1]
            word.extend_enable = True
        return word
