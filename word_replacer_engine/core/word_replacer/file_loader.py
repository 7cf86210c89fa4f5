"""
Line-oriented loading of the rules file and the input text file.

Opening and reading are separate failures: a file that cannot be opened
raises FileAccessError, a read that fails on an opened file (including a
decoding error) raises InputReadError.
"""

import logging
from pathlib import Path
from typing import List, Union

from .exceptions import FileAccessError, InputReadError
from .utils import split_lines

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"

PathLike = Union[str, Path]


def ensure_readable(file_path: PathLike, encoding: str = DEFAULT_ENCODING) -> Path:
    """
    Check that file_path can be opened for reading.

    Returns:
        file_path as a Path

    Raises:
        FileAccessError: if the file is missing, a directory, or not readable
    """
    path = Path(file_path)
    try:
        with open(path, "r", encoding=encoding):
            pass
    except OSError as e:
        logger.debug("Cannot open %s: %s", path, e)
        raise FileAccessError(str(file_path)) from e
    return path


def read_lines(file_path: PathLike, encoding: str = DEFAULT_ENCODING) -> List[str]:
    """
    Read a whole file and split it into lines, terminators removed.

    Raises:
        FileAccessError: if the file cannot be opened
        InputReadError: if reading or decoding fails after opening
    """
    path = Path(file_path)
    try:
        f = open(path, "r", encoding=encoding, newline="")
    except OSError as e:
        logger.debug("Cannot open %s: %s", path, e)
        raise FileAccessError(str(file_path)) from e

    with f:
        try:
            text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Error reading %s: %s", path, e)
            raise InputReadError(str(file_path), reason=str(e)) from e

    lines = split_lines(text)
    logger.info("Loaded %d lines from %s", len(lines), path)
    return lines
