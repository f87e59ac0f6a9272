"""
MiniCPU instruction encoder.

Encodes an instruction's operand text into an InstructionWord according to its
format family. Each family has one encode function; encode_instruction picks
the right one.
"""

from .instructions import Instruction, InstructionFormat, resolve
from .parser import tokenize_operands, expect_operands, parse_address, parse_mode
from .registers import parse_register
from .word import InstructionWord
from .errors import EncodingError


def encode_rr_type(instr: Instruction, mnemonic: str, operand_text: str) -> InstructionWord:
    """
    Encode an RR-type instruction.

    Syntax: op rd, rs   (inc: op rd [, rs], rs not encoded)
    Format: [op(4) | first=rs(2) | end=rd(2)]
    """
    word = InstructionWord(op=instr.opcode)
    operands = tokenize_operands(operand_text, ",")

    if instr.unary:
        expect_operands(mnemonic, operands, (1, 2), "rd")
        word.end = parse_register(operands[0])
    else:
        expect_operands(mnemonic, operands, (2,), "rd, rs")
        word.end = parse_register(operands[0])
        word.first = parse_register(operands[1])
    return word


def encode_rs_type(instr: Instruction, mnemonic: str, operand_text: str) -> InstructionWord:
    """
    Encode an RS-type instruction.

    Syntax: op mode addr [, reg]
    Format: [op(4) | first=mode(2) | end=reg(2)] [addr(8)]

    The register defaults to r0 when omitted.
    """
    word = InstructionWord(op=instr.opcode)
    operands = tokenize_operands(operand_text, " \t,")
    expect_operands(mnemonic, operands, (2, 3), "mode addr [, reg]")

    word.first = parse_mode(operands[0])
    word.extend = parse_address(operands[1])
    word.end = parse_register(operands[2]) if len(operands) == 3 else 0
    word.extend_enable = True
    return word


def encode_io_type(instr: Instruction, mnemonic: str, operand_text: str) -> InstructionWord:
    """
    Encode an IO-type instruction.

    Syntax: op reg, addr   (out: op addr, reg)
    Format: [op(4) | first(2) | end(2)] [addr(8)]

    Input direction puts the register in end; output direction puts it in first.
    """
    word = InstructionWord(op=instr.opcode)
    operands = tokenize_operands(operand_text, ",")

    if instr.address_first:
        expect_operands(mnemonic, operands, (2,), "addr, reg")
        addr, reg = operands
        word.first = parse_register(reg)
    else:
        expect_operands(mnemonic, operands, (2,), "reg, addr")
        reg, addr = operands
        word.end = parse_register(reg)

    word.extend = parse_address(addr)
    word.extend_enable = True
    return word


def encode_other_type(instr: Instruction, mnemonic: str, operand_text: str) -> InstructionWord:
    """
    Encode an instruction that takes no operands.

    Format: [op(4) | 0(2) | 0(2)]

    Any text after the mnemonic is ignored.
    """
    return InstructionWord(op=instr.opcode)


def encode_instruction(mnemonic: str, operand_text: str = "") -> InstructionWord:
    """
    Encode an instruction based on its format.

    Args:
        mnemonic: Instruction mnemonic
        operand_text: Raw operand text following the mnemonic

    Returns:
        Encoded InstructionWord

    Raises:
        UnknownOperatorError: If the mnemonic is not supported
    """
    instr = resolve(mnemonic)
    fmt = instr.format

    if fmt == InstructionFormat.RR:
        return encode_rr_type(instr, mnemonic, operand_text)
    elif fmt == InstructionFormat.RS:
        return encode_rs_type(instr, mnemonic, operand_text)
    elif fmt == InstructionFormat.IO:
        return encode_io_type(instr, mnemonic, operand_text)
    elif fmt == InstructionFormat.OTHER:
        return encode_other_type(instr, mnemonic, operand_text)
    else:
        raise EncodingError(f"Unknown instruction format: {fmt}")
