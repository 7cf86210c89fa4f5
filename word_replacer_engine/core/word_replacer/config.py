"""
Runtime configuration.

Values come from the environment, after loading `.env.local` and then `.env`
from the working directory. Variables already set in the environment win
over both files.

    WORD_REPLACER_LOG_LEVEL      logging level name (default WARNING)
    WORD_REPLACER_ENCODING       encoding of the rules and input files (default utf-8)
    WORD_REPLACER_STRICT_RULES   reject rule lines without a separator (default false)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .exceptions import UsageError
from .file_loader import DEFAULT_ENCODING

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class WordReplacerConfig:
    log_level: str = DEFAULT_LOG_LEVEL
    encoding: str = DEFAULT_ENCODING
    strict_rules: bool = False


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


def load_config(env_dir: Optional[Path] = None) -> WordReplacerConfig:
    """
    Build the configuration from .env files and the environment.

    Args:
        env_dir: Directory holding the .env files (default: working directory)
    """
    base = Path(env_dir) if env_dir is not None else Path.cwd()
    load_dotenv(base / ".env.local")
    load_dotenv(base / ".env")

    return WordReplacerConfig(
        log_level=(os.getenv("WORD_REPLACER_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        encoding=os.getenv("WORD_REPLACER_ENCODING") or DEFAULT_ENCODING,
        strict_rules=_env_flag("WORD_REPLACER_STRICT_RULES"),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """
    Send log records to stderr so that stdout carries only the substituted text.

    Raises:
        UsageError: if level is not a logging level name
    """
    numeric_level = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric_level, int):
        raise UsageError(f"Error: Invalid log level '{level}' received.")
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, force=True)
