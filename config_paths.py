import json
import logging
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "gridprompt")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "gridprompt.log")

# default settings
PAGE_SIZE_DEFAULT = 5
SHOW_INSTRUCTIONS_DEFAULT = True
LOG_LEVEL_DEFAULT = "WARNING"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

logger = logging.getLogger(__name__)


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)


def load_config():
    cfg = {
        "PAGE_SIZE": PAGE_SIZE_DEFAULT,
        "SHOW_INSTRUCTIONS": SHOW_INSTRUCTIONS_DEFAULT,
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_JSON, exc)
        return cfg

    if not isinstance(data, dict):
        return cfg

    page_size = data.get("page_size")
    # bool is an int subclass; reject it explicitly
    if isinstance(page_size, int) and not isinstance(page_size, bool) and page_size > 0:
        cfg["PAGE_SIZE"] = page_size

    show = data.get("show_instructions")
    if isinstance(show, bool):
        cfg["SHOW_INSTRUCTIONS"] = show

    level = data.get("log_level")
    if isinstance(level, str) and level.strip().upper() in _LOG_LEVELS:
        cfg["LOG_LEVEL"] = level.strip().upper()

    return cfg
