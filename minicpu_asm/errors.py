"""
Custom exception types for the MiniCPU assembler.

Every error is fatal to an assembly run; the translator stops at the first one
and reports the source line it came from.
"""


class AssemblerError(Exception):
    """Base exception for assembler errors."""

    def __init__(self, message: str, line_num: int = None, line_text: str = None):
        self.message = message
        self.line_num = line_num
        self.line_text = line_text
        if line_num is not None:
            if line_text:
                message = f"Line {line_num}: {message}\n  {line_text}"
            else:
                message = f"Line {line_num}: {message}"
        super().__init__(message)

    def with_location(self, line_num: int, line_text: str = None) -> "AssemblerError":
        """Return a copy of this error tagged with a source location."""
        return type(self)(self.message, line_num, line_text)


class ParseError(AssemblerError):
    """Exception raised for malformed or missing operands."""

    pass


class AddressFormatError(ParseError):
    """Exception raised when an address operand is not hexadecimal."""

    pass


class EncodingError(AssemblerError):
    """Exception raised for instruction encoding errors."""

    pass


class UnknownOperatorError(EncodingError):
    """Exception raised for a mnemonic missing from the opcode tables."""

    pass


class UnknownRegisterError(EncodingError):
    """Exception raised for an operand that names no register."""

    pass


class SourceFileError(AssemblerError):
    """Exception raised when the source file cannot be opened."""

    pass


class ConfigError(AssemblerError):
    """Exception raised for an invalid configuration file."""

    pass
