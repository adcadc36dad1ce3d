from pathlib import Path
from typing import Callable, Iterator, Optional
import sys

from brainfuck import BrainfuckError


class SourceError(BrainfuckError):
    """A program source could not be read."""


def resolve_programs(
    argument: Optional[str],
    stdin=None,
    announce: Optional[Callable[[str], None]] = None,
) -> Iterator[str]:
    """Yield the programs to run.
    - argument naming an existing file: the file contents, once
    - any other argument: the argument itself, as program code
    - no argument: one program per line of standard input
    """
    announce = announce or (lambda message: None)

    if argument is not None:
        path = Path(argument)
        try:
            is_file = path.is_file()
        except (OSError, ValueError):
            # e.g. a long program is not a usable file name
            is_file = False
        if is_file:
            announce(f"Loading file: {path}")
            try:
                program = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise SourceError(f"Can not read file: {argument}, {e}") from e
            yield program
        else:
            announce(f"Interpreting: {argument}")
            yield argument
        return

    # Lines come from the same buffered stream that ',' reads bytes from
    stream = stdin if stdin is not None else sys.stdin.buffer
    for raw in iter(stream.readline, b""):
        line = raw.decode("utf-8", errors="replace").rstrip("\r\n")
        announce(f"Interpreting line: {line}")
        yield line
