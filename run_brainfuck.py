#!/usr/bin/env python3
"""
Brainfuck interpreter command line.

Pass it the code or a file to interpret. If there are no arguments, it reads
programs from the standard input, one per line, all sharing one machine.
"""

import argparse
import sys

from brainfuck import BrainfuckError, Machine
from brainfuck_debugger import BrainfuckDebugger
from core.config import load_config
from core.source import resolve_programs


def build_parser(config):
    ap = argparse.ArgumentParser(
        prog="brainfuck",
        description="Brainfuck interpreter. Pass it the code or a file to run. "
                    "If there are no arguments, it reads from the standard input.",
    )
    ap.add_argument("input", nargs="?", default=None, help="Program code or file to run")
    ap.add_argument("-d", "--debug", action="store_true", default=config.debug,
                    help="Pause after every instruction and print the internal state")
    ap.add_argument("--tape-length", type=int, default=config.tape_length,
                    help="Number of memory cells (default: %(default)s)")
    ap.add_argument("--memory-window", type=int, default=config.memory_window,
                    help="Cells of tape shown around the pointer in debug reports (0 = off)")
    return ap


def build_machine(args):
    if args.memory_window > 0:
        return BrainfuckDebugger(args.tape_length, args.debug, show_memory_range=args.memory_window)
    return Machine(args.tape_length, args.debug)


def main(argv=None) -> int:
    try:
        config = load_config()
    except ValueError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 2

    args = build_parser(config).parse_args(argv)
    announce = print if args.debug else None

    try:
        machine = build_machine(args)
        for program in resolve_programs(args.input, announce=announce):
            machine.interpret(program)
    except (BrainfuckError, ValueError) as e:
        sys.stdout.flush()
        print(f"\n❌ Error: {e}", file=sys.stderr)
        return 1
    finally:
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
