"""
Error taxonomy for the word replacer.

Every error raised by the parsing, resolution and substitution stages derives
from WordReplacerError. None of them is recovered inside the stages: they
propagate to the command-line entry point, which prints the message to stderr
and exits with status 1.
"""

from typing import Optional

USAGE_MESSAGE = "Usage: word-replacer <input text file> <word replacements file> <bst|rbt|hash>"


class WordReplacerError(Exception):
    """Base class for all fatal word replacer errors."""

    exit_code = 1

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UsageError(WordReplacerError):
    """Wrong argument count or unknown backend selector."""

    def __init__(self, message: str = USAGE_MESSAGE):
        super().__init__(message)

    @classmethod
    def invalid_backend(cls, selector: str) -> "UsageError":
        return cls(f"Error: Invalid data structure '{selector}' received.")


class FileAccessError(WordReplacerError):
    """A named file cannot be opened for reading."""

    def __init__(self, path: str):
        super().__init__(f"Error: Cannot open file '{path}' for input.")
        self.path = path


class InputReadError(WordReplacerError):
    """A read failed on a file that was opened successfully."""

    def __init__(self, path: str, reason: Optional[str] = None):
        super().__init__(f"Error: An I/O error occurred reading '{path}'.")
        self.path = path
        self.reason = reason


class CycleError(WordReplacerError):
    """A rule chain maps a word transitively back to itself."""

    def __init__(self, source: str, target: str):
        super().__init__(
            f"Error: Cycle detected when trying to add replacement rule: {source} -> {target}"
        )
        self.source = source
        self.target = target


class RuleSyntaxError(WordReplacerError):
    """A rule line has no separator (strict parsing only)."""

    def __init__(self, line_number: int, line: str):
        super().__init__(f"Error: Invalid replacement rule on line {line_number}: '{line}'")
        self.line_number = line_number
        self.line = line
