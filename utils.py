import os
import logging
import time

from dotenv import load_dotenv

# Defaults, overridden by CYBERBOT_* environment variables (or a .env file)
CONFIG = {
    "log_file": "cyberbot.log",
    "log_level": "INFO",
    "pause": 1.0,
    "exit_delay": 2.0,
}

ENV_VARS = {
    "log_file": "CYBERBOT_LOG_FILE",
    "log_level": "CYBERBOT_LOG_LEVEL",
    "pause": "CYBERBOT_PAUSE",
    "exit_delay": "CYBERBOT_EXIT_DELAY",
}


def load_config(env_file=None):
    """Builds the runtime configuration from the defaults and the environment"""
    load_dotenv(env_file)
    config = dict(CONFIG)
    for key, env_var in ENV_VARS.items():
        value = os.getenv(env_var)
        if value is None or not value.strip():
            continue
        if isinstance(CONFIG[key], float):
            try:
                value = float(value)
            except ValueError:
                logging.warning(f"Invalid value for {env_var}: {value!r}, using {CONFIG[key]}")
                continue
            if value < 0:
                logging.warning(f"Negative value for {env_var}: {value}, using {CONFIG[key]}")
                continue
        config[key] = value
    return config


def setup_logging(log_file=CONFIG["log_file"], level=CONFIG["log_level"]):
    """Configures the logging system"""
    logging.basicConfig(filename=log_file, level=getattr(logging, str(level).upper(), logging.INFO),
                        format='%(asctime)s - %(message)s')
    logging.info("Starting CyberSecurity Chatbot...")


def log_action(action):
    """Records an action in the log"""
    logging.info(action)


def pause(seconds):
    if seconds > 0:
        time.sleep(seconds)
