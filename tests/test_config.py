import pytest

from core.config import MachineConfig, load_config

ENV_VARS = ("BF_TAPE_LENGTH", "BF_DEBUG", "BF_MEMORY_WINDOW")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        # setenv first so monkeypatch also removes values load_dotenv adds
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    # An empty .env keeps load_dotenv from searching parent directories
    env_file = tmp_path / ".env"
    env_file.write_text("")
    return env_file


def test_defaults(clean_env):
    assert load_config(str(clean_env)) == MachineConfig(tape_length=40_000, debug=False, memory_window=0)


def test_environment_overrides(clean_env, monkeypatch):
    monkeypatch.setenv("BF_TAPE_LENGTH", "128")
    monkeypatch.setenv("BF_DEBUG", "Yes")
    monkeypatch.setenv("BF_MEMORY_WINDOW", "8")
    cfg = load_config(str(clean_env))
    assert cfg.tape_length == 128
    assert cfg.debug is True
    assert cfg.memory_window == 8


@pytest.mark.parametrize("value", ["0", "false", "no", ""])
def test_debug_false_values(clean_env, monkeypatch, value):
    monkeypatch.setenv("BF_DEBUG", value)
    assert load_config(str(clean_env)).debug is False


def test_values_from_env_file(clean_env, monkeypatch):
    clean_env.write_text("BF_TAPE_LENGTH=64\nBF_DEBUG=1\n")
    cfg = load_config(str(clean_env))
    assert cfg.tape_length == 64
    assert cfg.debug is True


def test_environment_wins_over_env_file(clean_env, monkeypatch):
    clean_env.write_text("BF_TAPE_LENGTH=64\n")
    monkeypatch.setenv("BF_TAPE_LENGTH", "32")
    assert load_config(str(clean_env)).tape_length == 32


def test_invalid_integer(clean_env, monkeypatch):
    monkeypatch.setenv("BF_TAPE_LENGTH", "lots")
    with pytest.raises(ValueError, match="BF_TAPE_LENGTH"):
        load_config(str(clean_env))


def test_tape_length_must_be_positive(clean_env, monkeypatch):
    monkeypatch.setenv("BF_TAPE_LENGTH", "0")
    with pytest.raises(ValueError, match="at least 1"):
        load_config(str(clean_env))


def test_negative_memory_window(clean_env, monkeypatch):
    monkeypatch.setenv("BF_MEMORY_WINDOW", "-1")
    with pytest.raises(ValueError, match="BF_MEMORY_WINDOW"):
        load_config(str(clean_env))


def test_env_file_found_from_working_directory(clean_env, monkeypatch):
    clean_env.write_text("BF_TAPE_LENGTH=64\n")
    monkeypatch.chdir(clean_env.parent)
    assert load_config().tape_length == 64
