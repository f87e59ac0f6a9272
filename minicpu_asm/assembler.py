"""
Main assembler implementation.

Single-pass assembler for MiniCPU assembly to hex-text object files.
"""

from typing import Iterable, List, Optional, TextIO, Tuple

from .config import AssemblerConfig
from .encoder import encode_instruction
from .output import OutputRecord, format_record, write_records
from .parser import split_line
from .errors import AssemblerError, EncodingError, SourceFileError


class Assembler:
    """
    Single-pass MiniCPU assembler.

    Each source line is encoded and written out before the next one is read.
    No symbols are kept between lines; the only running state is the output
    index, which advances once per emitted byte.
    """

    def __init__(self, config: AssemblerConfig = None, verbose: bool = False):
        """
        Initialize the assembler.

        Args:
            config: Assembler settings (defaults if omitted)
            verbose: If True, print detailed assembly information
        """
        self.config = config or AssemblerConfig()
        self.verbose = verbose or self.config.verbose
        self.records: List[OutputRecord] = []
        self.source_map: List[Tuple[int, str, int]] = []  # (index, original_line, line_num)
        self.output_index: int = 0
        self.current_line: int = 0

    def log(self, message: str) -> None:
        """Print message if verbose mode is enabled."""
        if self.verbose:
            print(message)

    def reset(self) -> None:
        self.records = []
        self.source_map = []
        self.output_index = 0
        self.current_line = 0

    def assemble_file(self, input_path: str, output_path: str = None) -> List[OutputRecord]:
        """
        Assemble a source file into an object file.

        Args:
            input_path: Path to the source file
            output_path: Path to the object file (config.output_path if omitted)

        Returns:
            List of emitted output records
        """
        output_path = output_path or self.config.output_path
        self.log(f"Assembling: {input_path}")

        # Undecodable bytes reach the encoder as surrogates and round-trip to the output
        with open(output_path, "w", encoding="utf-8", errors="surrogateescape") as out:
            try:
                source = open(input_path, "r", encoding="utf-8", errors="surrogateescape")
            except OSError as e:
                raise SourceFileError(f"Cannot open source file '{input_path}': {e.strerror}")

            with source:
                self.assemble_lines(source, out)

        self.log(f"Output written to: {output_path}")
        return self.records

    def assemble_string(self, source: str) -> List[OutputRecord]:
        """
        Assemble from a string.

        Args:
            source: Assembly source code

        Returns:
            List of emitted output records
        """
        return self.assemble_lines(source.splitlines())

    def assemble_lines(self, lines: Iterable[str], out: Optional[TextIO] = None) -> List[OutputRecord]:
        """
        Assemble source lines one at a time.

        Records are written to out as soon as each line is encoded, so output
        for lines before a failure is kept.

        Raises:
            AssemblerError: On the first failing line, tagged with its location
        """
        self.reset()

        for line in lines:
            line = line.rstrip("\r\n")
            self.current_line += 1
            records = self.translate_line(line, self.current_line)
            if out is not None:
                write_records(records, out, self.config.record_tag, self.config.annotate)

        self.log(f"\n  Total bytes: {self.output_index}")
        return self.records

    def translate_line(self, line: str, line_num: int) -> List[OutputRecord]:
        """
        Translate one source line into output records.

        Args:
            line: Source line text
            line_num: Source line number for error reporting

        Returns:
            One record, two when the instruction has an extension byte, or none
            for a blank line
        """
        parts = split_line(line)
        if parts is None:
            return []
        mnemonic, operand_text = parts

        try:
            word = encode_instruction(mnemonic, operand_text)
        except AssemblerError as e:
            raise e.with_location(line_num, line) from e
        except Exception as e:
            raise EncodingError(f"Unexpected error: {e}", line_num, line) from e

        records = [self._emit(word.low_byte, line)]
        if word.extend_enable:
            records.append(self._emit(word.high_byte))

        self.source_map.append((records[0].index, line, line_num))
        self.log(
            f"  {records[0].index:02X}: "
            f"{' '.join(f'{r.value:02X}' for r in records):<6} {line.strip()}"
        )
        return records

    def _emit(self, value: int, comment: str = None) -> OutputRecord:
        record = OutputRecord(self.output_index, value, comment)
        self.records.append(record)
        self.output_index += 1
        return record

    def get_hex_string(self) -> str:
        """
        Get the assembled object file as a string.

        Returns:
            String with one record per line
        """
        return "\n".join(
            format_record(r, self.config.record_tag, self.config.annotate) for r in self.records
        )

    def get_bytes(self) -> bytes:
        """Get the assembled program as raw bytes."""
        return bytes(r.value for r in self.records)

    def get_listing(self) -> str:
        """
        Get an assembly listing showing indices, encodings, and source.

        Returns:
            Formatted listing string
        """
        lines = []
        lines.append("Index  Code    Line  Source")
        lines.append("-" * 60)

        for i, (index, source, line_num) in enumerate(self.source_map):
            next_index = self.source_map[i + 1][0] if i + 1 < len(self.source_map) else len(self.records)
            code = " ".join(f"{r.value:02X}" for r in self.records[index:next_index])
            lines.append(f"{index:02X}     {code:<6}  {line_num:<4}  {source.strip()}")

        return "\n".join(lines)
