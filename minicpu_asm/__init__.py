"""
MiniCPU Assembler - A single-pass assembler for the MiniCPU 8-bit processor.

This package translates MiniCPU assembly into an annotated hex-text object file.
"""

__version__ = "1.0.0"

from .assembler import Assembler
from .config import AssemblerConfig, load_config
from .word import InstructionWord
from .errors import (
    AssemblerError,
    ParseError,
    AddressFormatError,
    EncodingError,
    UnknownOperatorError,
    UnknownRegisterError,
    SourceFileError,
    ConfigError,
)

__all__ = [
    "Assembler",
    "AssemblerConfig",
    "load_config",
    "InstructionWord",
    "AssemblerError",
    "ParseError",
    "AddressFormatError",
    "EncodingError",
    "UnknownOperatorError",
    "UnknownRegisterError",
    "SourceFileError",
    "ConfigError",
]
