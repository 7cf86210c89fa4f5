"""
Data models for the word replacer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


# --- Enums ---

class MapBackend(Enum):
    """
    Interchangeable map implementations backing rule storage and lookup.

    - BST: plain binary search tree, keys iterated in sorted order.
    - RBT: left-leaning red-black tree, keys iterated in sorted order.
    - HASH: separate-chaining hash table, keys iterated in bucket order.
    """
    BST = "bst"
    RBT = "rbt"
    HASH = "hash"


# --- Records ---

@dataclass(frozen=True)
class Rule:
    """A single `source -> target` replacement rule as written in the rules file."""
    source: str
    target: str
    line_number: int = 0
    malformed: bool = False  # True when the line had no separator


@dataclass
class ReplacementResult:
    """
    Output of a full word replacement run.

    The output text always ends with a newline when at least one input line
    was processed; an empty input yields an empty string.
    """
    output_text: str
    backend: MapBackend
    rules_parsed: int = 0
    malformed_rules: int = 0
    resolved_rules: int = 0
    lines_processed: int = 0
    words_seen: int = 0
    words_replaced: int = 0
    source_files: Dict[str, Optional[str]] = field(default_factory=dict)

    def to_dict(self) -> Dict:
        return {
            "backend": self.backend.value,
            "rules_parsed": self.rules_parsed,
            "malformed_rules": self.malformed_rules,
            "resolved_rules": self.resolved_rules,
            "lines_processed": self.lines_processed,
            "words_seen": self.words_seen,
            "words_replaced": self.words_replaced,
            "replacement_rate": (self.words_replaced / self.words_seen) if self.words_seen else 0.0,
            "source_files": dict(self.source_files),
        }
