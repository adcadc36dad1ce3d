#!/usr/bin/env python3
"""
Brainfuck Step-by-Step Debugger

Extends the machine's state report with a view of the memory tape around
the pointer, so each paused step shows the neighbouring cells as well as
the current one.
"""

from brainfuck import Machine, MEM_SIZE


class BrainfuckDebugger(Machine):
    """Machine whose state report draws a window of the tape."""

    def __init__(self, tape_length=MEM_SIZE, debug=True, show_memory_range=10, **kwargs):
        super().__init__(tape_length, debug, **kwargs)
        self.show_memory_range = max(1, show_memory_range)

    def memory_window(self):
        """Return the (start, end) slice of the tape centred on the pointer."""
        start = max(0, self.pointer - self.show_memory_range // 2)
        end = min(len(self.memory), start + self.show_memory_range)

        # Adjust start if we're near the end
        if end - start < self.show_memory_range:
            start = max(0, end - self.show_memory_range)
        return start, end

    def print_state(self):
        super().print_state()
        start, end = self.memory_window()

        memory_vals = []
        memory_ptrs = []
        memory_addrs = []
        for i, value in enumerate(self.memory[start:end], start):
            memory_vals.append(f"{int(value):3d}")
            memory_ptrs.append(" ^ " if i == self.pointer else "   ")
            memory_addrs.append(f"{i:3d}")

        print("Memory:   [" + "|".join(memory_vals) + "]", file=self.diagnostics)
        print("Pointer:   " + " ".join(memory_ptrs), file=self.diagnostics)
        print("Address:   " + " ".join(memory_addrs), file=self.diagnostics)
