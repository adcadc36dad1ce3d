from dataclasses import dataclass
from typing import Optional
import os

from dotenv import find_dotenv, load_dotenv

from brainfuck import MEM_SIZE

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class MachineConfig:
    tape_length: int = MEM_SIZE
    debug: bool = False
    memory_window: int = 0


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_config(env_file: Optional[str] = None) -> MachineConfig:
    """Build a MachineConfig from the environment.
    Values from a .env file (default: the nearest one above the working
    directory) are loaded first but never override variables
    that are already set.
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))

    tape_length = _int_from_env("BF_TAPE_LENGTH", MEM_SIZE)
    if tape_length < 1:
        raise ValueError(f"BF_TAPE_LENGTH must be at least 1, got {tape_length}")

    memory_window = _int_from_env("BF_MEMORY_WINDOW", 0)
    if memory_window < 0:
        raise ValueError(f"BF_MEMORY_WINDOW must not be negative, got {memory_window}")

    debug = os.environ.get("BF_DEBUG", "").strip().lower() in _TRUE_VALUES
    return MachineConfig(tape_length=tape_length, debug=debug, memory_window=memory_window)
