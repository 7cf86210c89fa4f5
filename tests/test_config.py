"""
Tests for environment-driven configuration.
"""

import logging

import pytest

from word_replacer_engine.core.word_replacer.config import configure_logging, load_config
from word_replacer_engine.core.word_replacer.exceptions import UsageError

ENV_VARS = ["WORD_REPLACER_LOG_LEVEL", "WORD_REPLACER_ENCODING", "WORD_REPLACER_STRICT_RULES"]


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so teardown also removes whatever load_dotenv writes
    for name in ENV_VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    return monkeypatch


def test_defaults(clean_env, tmp_path):
    config = load_config(env_dir=tmp_path)
    assert config.log_level == "WARNING"
    assert config.encoding == "utf-8"
    assert config.strict_rules is False


def test_values_from_env_file(clean_env, tmp_path):
    (tmp_path / ".env").write_text(
        "WORD_REPLACER_LOG_LEVEL=info\n"
        "WORD_REPLACER_ENCODING=latin-1\n"
        "WORD_REPLACER_STRICT_RULES=yes\n",
        encoding="utf-8",
    )
    config = load_config(env_dir=tmp_path)
    assert config.log_level == "INFO"
    assert config.encoding == "latin-1"
    assert config.strict_rules is True


def test_env_local_takes_precedence_over_env(clean_env, tmp_path):
    (tmp_path / ".env.local").write_text("WORD_REPLACER_ENCODING=cp1252\n", encoding="utf-8")
    (tmp_path / ".env").write_text("WORD_REPLACER_ENCODING=latin-1\n", encoding="utf-8")
    assert load_config(env_dir=tmp_path).encoding == "cp1252"


def test_environment_wins_over_files(clean_env, tmp_path):
    (tmp_path / ".env").write_text("WORD_REPLACER_LOG_LEVEL=ERROR\n", encoding="utf-8")
    clean_env.setenv("WORD_REPLACER_LOG_LEVEL", "debug")
    assert load_config(env_dir=tmp_path).log_level == "DEBUG"


@pytest.mark.parametrize("value, expected", [("1", True), ("TRUE", True), ("on", True), ("0", False), ("no", False)])
def test_strict_flag_values(clean_env, tmp_path, value, expected):
    clean_env.setenv("WORD_REPLACER_STRICT_RULES", value)
    assert load_config(env_dir=tmp_path).strict_rules is expected


def test_configure_logging_sets_root_level():
    configure_logging("debug")
    assert logging.getLogger().level == logging.DEBUG
    configure_logging("warning")
    assert logging.getLogger().level == logging.WARNING


def test_configure_logging_rejects_unknown_level():
    configure_logging("info")
    with pytest.raises(UsageError, match="Invalid log level 'not-a-level'"):
        configure_logging("not-a-level")
    assert logging.getLogger().level == logging.INFO
