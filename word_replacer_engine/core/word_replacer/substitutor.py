"""
Text substitution component.
"""

import logging
from typing import Iterable, List

from .ordered_map import OrderedMap
from .utils import split_lines

logger = logging.getLogger(__name__)


class TextSubstitutor:
    """
    Rewrites text word by word against a resolved rule map.

    A word is a maximal run of alphabetic characters (str.isalpha). Each line
    is scanned with two states: accumulating a word, or passing characters
    through. A non-letter flushes the pending word (its replacement if the
    word is a key of the map, the word itself otherwise) and is then copied
    unchanged, so digits, punctuation and whitespace keep their positions.
    The end of a line flushes too.

    Matching is exact and case-sensitive: with a rule for "cat", "Cat" and
    "cats" are left alone.
    """

    def __init__(self, resolved_map: OrderedMap):
        """
        Initialize the substitutor.

        Args:
            resolved_map: Map from word to its final replacement, chain-free
        """
        self.resolved_map = resolved_map
        self.words_seen = 0
        self.words_replaced = 0
        self.lines_processed = 0

    def _flush(self, word: List[str], output: List[str]) -> None:
        token = "".join(word)
        word.clear()
        self.words_seen += 1
        replacement = self.resolved_map.get(token)
        if replacement is None:
            output.append(token)
        else:
            self.words_replaced += 1
            output.append(replacement)

    def substitute_line(self, line: str) -> str:
        """Substitute the words of a single line (no terminator is added)."""
        output: List[str] = []
        word: List[str] = []
        for ch in line:
            if ch.isalpha():
                word.append(ch)
                continue
            if word:
                self._flush(word, output)
            output.append(ch)

        if word:
            self._flush(word, output)
        self.lines_processed += 1
        return "".join(output)

    def substitute_lines(self, lines: Iterable[str]) -> str:
        """
        Substitute every line and join the results.

        Each processed line is followed by exactly one "\\n", the last one
        included.
        """
        result = "".join(self.substitute_line(line) + "\n" for line in lines)
        logger.info(
            "Substituted %d of %d words over %d lines",
            self.words_replaced, self.words_seen, self.lines_processed,
        )
        return result

    def substitute_text(self, text: str) -> str:
        """Split text into lines and substitute them; see substitute_lines."""
        return self.substitute_lines(split_lines(text))
