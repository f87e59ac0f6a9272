"""
Hex-text object file records.

Each emitted byte becomes one line:

    $P 00 41 ;mov r1,r0
    $P 01 C6 ;lad 1 2A,r2
    $P 02 2A

The first byte of an instruction carries the source line as a comment; an
extension byte does not.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, TextIO

DEFAULT_TAG = "$P"


@dataclass
class OutputRecord:
    """
    One byte of the object file.

    Attributes:
        index: Zero-based output line index
        value: Byte value
        comment: Original source line (first byte of an instruction only)
    """

    index: int
    value: int
    comment: Optional[str] = None


def format_record(record: OutputRecord, tag: str = DEFAULT_TAG, annotate: bool = True) -> str:
    """Format a record as "<tag> <index> <value>[ ;<comment>]"."""
    text = f"{tag} {record.index:02X} {record.value & 0xFF:02X}"
    if annotate and record.comment is not None:
        text += f" ;{record.comment}"
    return text


def write_records(
    records: Iterable[OutputRecord],
    stream: TextIO,
    tag: str = DEFAULT_TAG,
    annotate: bool = True,
) -> None:
    for record in records:
        stream.write(format_record(record, tag, annotate) + "\n")
