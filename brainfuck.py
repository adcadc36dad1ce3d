#!/usr/bin/env python3
"""
Brainfuck Machine

Brainfuck is an esoteric programming language with only 8 commands:
    >   Move the pointer to the right
    <   Move the pointer to the left
    +   Increment the memory cell at the pointer
    -   Decrement the memory cell at the pointer
    .   Output the character signified by the cell at the pointer
    ,   Input a character and store it in the cell at the pointer
    [   Jump past the matching ] if the cell at the pointer is 0
    ]   Jump back to the matching [ if the cell at the pointer is nonzero
    #   Print the pointer and the value of its cell (debugging aid)

All other characters are treated as comments and ignored.

The tape is bounded: moving the pointer off either end is fatal, while
cell values wrap around modulo 256.
"""

import sys
from typing import Callable, List, Optional, Union

import numpy as np

MEM_SIZE = 40_000


class BrainfuckError(RuntimeError):
    """Base class for fatal machine errors."""


class MemoryOverflowError(BrainfuckError):
    """The pointer was moved outside the tape."""

    def __init__(self, pointer: int):
        super().__init__(f"Memory overflow (pointer={pointer})")
        self.pointer = pointer


class UnmatchedBracketError(BrainfuckError):
    """A loop bracket has no partner in the program."""

    def __init__(self, position: int, message: str = "Matching bracket not found!"):
        super().__init__(message)
        self.position = position


class Machine:
    """A Brainfuck machine with a fixed-length byte tape.

    The tape and the pointer persist across calls to interpret(), so
    several programs (e.g. successive lines of standard input) can work on
    the same memory. Each call starts with an empty loop-entry stack.
    """

    def __init__(
        self,
        tape_length: int = MEM_SIZE,
        debug: bool = False,
        input_stream=None,
        output_stream=None,
        diagnostics=None,
        pause: Optional[Callable[[], None]] = None,
    ):
        if tape_length < 1:
            raise ValueError(f"tape_length must be at least 1, got {tape_length}")
        self.debug = debug
        self.memory = np.zeros(tape_length, dtype=np.uint8)
        self.pointer = 0
        self.stack: List[int] = []

        self.input_stream = input_stream if input_stream is not None else sys.stdin.buffer
        self.output_stream = output_stream if output_stream is not None else sys.stdout
        self.diagnostics = diagnostics if diagnostics is not None else sys.stdout
        self._pause = pause

        self.input_reads = 0
        self.input_errors = 0
        self.output_writes = 0
        self.steps = 0

    @property
    def cell(self) -> int:
        """Value of the cell under the pointer."""
        return int(self.memory[self.pointer])

    def interpret(self, program: Union[str, bytes]) -> None:
        """Run a program to completion against this machine's memory."""
        if isinstance(program, (bytes, bytearray)):
            program = program.decode("latin-1")

        self.stack.clear()
        i = 0
        while i < len(program):
            cmd = program[i]
            next_i = i + 1

            if cmd == '>':
                if self.pointer < len(self.memory) - 1:
                    self.pointer += 1
                else:
                    raise MemoryOverflowError(self.pointer + 1)

            elif cmd == '<':
                if self.pointer > 0:
                    self.pointer -= 1
                else:
                    raise MemoryOverflowError(self.pointer - 1)

            elif cmd == '+':
                self.memory[self.pointer] = (self.cell + 1) % 256

            elif cmd == '-':
                self.memory[self.pointer] = (self.cell - 1) % 256

            elif cmd == '.':
                self.output_stream.write(chr(self.cell))
                self.output_writes += 1

            elif cmd == ',':
                self.memory[self.pointer] = self.read_char()

            elif cmd == '[':
                if self.cell == 0:
                    # Skip the loop body entirely
                    next_i = self.matching_bracket(program, i + 1) + 1
                else:
                    self.stack.append(i)

            elif cmd == ']':
                if self.cell != 0:
                    if not self.stack:
                        raise UnmatchedBracketError(i, f"Unmatched ']' at position {i}")
                    next_i = self.stack[-1] + 1
                elif self.stack:
                    self.stack.pop()

            elif cmd == '#':
                self.print_state()

            self.steps += 1

            if self.debug and next_i < len(program):
                print(f"\nCurrent: {cmd}, next: {program[next_i]}", file=self.diagnostics)
                self.print_state()
                self.pause()

            i = next_i

    def matching_bracket(self, program: str, start: int) -> int:
        """Find the ']' closing a loop whose body begins at position start."""
        depth = 1
        for j in range(start, len(program)):
            if program[j] == '[':
                depth += 1
            elif program[j] == ']':
                depth -= 1
            if depth == 0:
                return j
        raise UnmatchedBracketError(start - 1)

    def read_char(self) -> int:
        """Read one byte of input. Returns 0 and reports an error on EOF."""
        self.output_stream.flush()
        data = self.input_stream.read(1)
        if not data:
            print("Error reading character", file=self.diagnostics)
            self.input_errors += 1
            return 0
        self.input_reads += 1
        return data[0] if isinstance(data, (bytes, bytearray)) else ord(data) % 256

    def print_state(self) -> None:
        print(f"Ptr: {self.pointer}, value: {self.cell}", file=self.diagnostics)

    def pause(self) -> None:
        """Block until one byte of acknowledgment arrives on the input stream."""
        if self._pause is not None:
            self._pause()
            return
        # Keep the cursor at the end of the prompt line
        self.diagnostics.write("Press return to continue.")
        self.output_stream.flush()
        self.diagnostics.flush()
        self.input_stream.read(1)
