from typing import Union
import io

from brainfuck import Machine, MEM_SIZE


def run_program(code: str, input_data: Union[bytes, str] = b"", tape_length: int = MEM_SIZE) -> str:
    """Execute BF code against in-memory input, return everything it printed.
    Uses a fresh machine each time (stateless). Fatal errors propagate.
    """
    if isinstance(input_data, str):
        input_data = input_data.encode("latin-1")
    output = io.StringIO()
    itp = Machine(
        tape_length,
        input_stream=io.BytesIO(input_data),
        output_stream=output,
        diagnostics=io.StringIO(),
        pause=lambda: None,
    )
    itp.interpret(code)
    return output.getvalue()
