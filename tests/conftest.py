import io

import pytest
from rich.console import Console

from utils import CONFIG, ENV_VARS


class ScriptedReader:
    """Stands in for ``Console.input``: replays lines, then hits end of input."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def output(console):
    return lambda: console.file.getvalue()


@pytest.fixture
def config(tmp_path):
    return dict(CONFIG, pause=0, exit_delay=0, log_file=str(tmp_path / "cyberbot.log"))


@pytest.fixture
def clean_env(monkeypatch):
    # set-then-delete so variables loaded from a .env file are removed afterwards
    for env_var in ENV_VARS.values():
        monkeypatch.setenv(env_var, "")
        monkeypatch.delenv(env_var)
