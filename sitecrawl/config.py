import os
import logging
from pathlib import Path

from dotenv import load_dotenv

loaded = load_dotenv()
if not loaded and Path(".env").exists():
    raise RuntimeError(".env file present but failed to load")

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def get_str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    return raw


def get_int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logging.exception("Invalid %s: %r", name, raw)
        return default


def get_float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logging.exception("Invalid %s: %r", name, raw)
        return default


def get_bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logging.warning("Invalid %s: %r", name, raw)
    return default


USER_AGENT = get_str_env("USER_AGENT", "SiteCrawl/0.1")
HTTP_TIMEOUT = get_int_env("HTTP_TIMEOUT", 10)
CRAWL_DELAY = get_float_env("CRAWL_DELAY", 0.25)
FETCHER_COUNT = get_int_env("FETCHER_COUNT", 2)
DEFAULT_DEPTH = get_int_env("DEFAULT_DEPTH", 2)
GRACE_INTERVAL = get_float_env("SITECRAWL_GRACE_INTERVAL", 2.0)
POLL_INTERVAL = get_float_env("SITECRAWL_POLL_INTERVAL", 0.05)
QUIESCENCE = get_str_env("SITECRAWL_QUIESCENCE", "in_flight").strip().lower()
VERBOSE = get_bool_env("SITECRAWL_VERBOSE", True)
