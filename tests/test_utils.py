import logging

import pytest

import utils
from utils import CONFIG, load_config


@pytest.fixture
def missing_env_file(tmp_path):
    return str(tmp_path / "missing.env")


def test_defaults(clean_env, missing_env_file):
    assert load_config(missing_env_file) == CONFIG


def test_environment_overrides(clean_env, monkeypatch, missing_env_file):
    monkeypatch.setenv("CYBERBOT_LOG_FILE", "/tmp/bot.log")
    monkeypatch.setenv("CYBERBOT_LOG_LEVEL", "debug")
    monkeypatch.setenv("CYBERBOT_PAUSE", "0")
    monkeypatch.setenv("CYBERBOT_EXIT_DELAY", "0.25")

    config = load_config(missing_env_file)

    assert config == {"log_file": "/tmp/bot.log", "log_level": "debug", "pause": 0.0, "exit_delay": 0.25}


def test_env_file_is_loaded(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("CYBERBOT_EXIT_DELAY=0.5\n")

    assert load_config(str(env_file))["exit_delay"] == 0.5


@pytest.mark.parametrize("value", ["soon", "-1"])
def test_bad_numbers_fall_back_to_default(clean_env, monkeypatch, missing_env_file, caplog, value):
    monkeypatch.setenv("CYBERBOT_PAUSE", value)

    with caplog.at_level(logging.WARNING):
        config = load_config(missing_env_file)

    assert config["pause"] == CONFIG["pause"]
    assert "CYBERBOT_PAUSE" in caplog.text


def test_pause_skips_sleep_for_zero(monkeypatch):
    calls = []
    monkeypatch.setattr(utils.time, "sleep", calls.append)

    utils.pause(0)
    utils.pause(1.5)

    assert calls == [1.5]
