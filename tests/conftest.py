import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_cli_logging():
    """The CLI installs a stderr handler on the root logger; drop it after every test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)
