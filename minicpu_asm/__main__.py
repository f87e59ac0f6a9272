#!/usr/bin/env python3
"""
MiniCPU Assembler - Command Line Interface

Usage:
    python3 -m minicpu_asm program.asm
    python3 -m minicpu_asm program.asm -o program.txt -v
    python3 -m minicpu_asm program.asm --config asm.yaml --listing
"""

import argparse
import sys

from . import __version__
from .assembler import Assembler
from .config import AssemblerConfig, load_config
from .errors import AssemblerError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minicpu-asm",
        description="MiniCPU Assembler",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s programs/count.asm
  %(prog)s programs/count.asm -o programs/count.txt -v
  %(prog)s programs/count.asm --config asm.yaml --listing
        """,
    )

    parser.add_argument(
        "input",
        type=str,
        help="Input assembly file",
    )

    parser.add_argument(
        "-o",
        "--output",
        type=str,
        help="Output object file (default: build.txt, or output_path from the config file)",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="YAML configuration file",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    parser.add_argument(
        "-l",
        "--listing",
        action="store_true",
        help="Print assembly listing",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    asm = None

    try:
        config = load_config(args.config) if args.config else AssemblerConfig()
        if args.output:
            config.output_path = args.output

        asm = Assembler(config=config, verbose=args.verbose)
        asm.assemble_file(args.input)

        # Print listing if requested
        if args.listing:
            print("\n" + asm.get_listing())

        if asm.verbose:
            print(f"\nAssembly successful: {len(asm.records)} bytes")

    except AssemblerError as e:
        print(f"error: {_printable(e.message)}", file=sys.stderr)
        print(f"at line {_failing_line(e, asm)}", file=sys.stderr)
        sys.exit(1)
    except Exception:
        print("unknown mistake", file=sys.stderr)
        print(f"at line {_failing_line(None, asm)}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)


def _printable(text: str) -> str:
    # Source bytes that were not valid UTF-8 are shown as escapes
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


def _failing_line(error, asm) -> int:
    if error is not None and error.line_num is not None:
        return error.line_num
    return asm.current_line if asm is not None else 0


if __name__ == "__main__":
    main()
