"""
Word replacer module.

Rewrites every word of a text that has a replacement rule with the final word
of its rule chain ("cat -> dog", "dog -> wolf" turns "cat" into "wolf"),
rejecting rule sets whose chains loop back on themselves.

The main entry point is the WordReplacementPipeline class in pipeline.py; the
command-line interface lives in cli.py.
"""

# Rule map contract and backends
from word_replacer_engine.core.word_replacer.ordered_map import OrderedMap
from word_replacer_engine.core.word_replacer.bst_map import BSTreeMap
from word_replacer_engine.core.word_replacer.rbt_map import RBTreeMap
from word_replacer_engine.core.word_replacer.hash_map import HashTableMap
from word_replacer_engine.core.word_replacer.backends import available_backends, create_map, parse_backend

# Core pipeline components
from word_replacer_engine.core.word_replacer.rule_parser import RuleParser
from word_replacer_engine.core.word_replacer.resolver import TransitiveResolver, find, union
from word_replacer_engine.core.word_replacer.substitutor import TextSubstitutor

# Main pipeline entry point
from word_replacer_engine.core.word_replacer.pipeline import WordReplacementPipeline

# Data models and errors
from word_replacer_engine.core.word_replacer.models import MapBackend, ReplacementResult, Rule
from word_replacer_engine.core.word_replacer.exceptions import (
    WordReplacerError,
    UsageError,
    FileAccessError,
    InputReadError,
    CycleError,
    RuleSyntaxError,
)

__all__ = [
    # Main pipeline entry point
    'WordReplacementPipeline',

    # Rule maps
    'OrderedMap',
    'BSTreeMap',
    'RBTreeMap',
    'HashTableMap',
    'available_backends',
    'create_map',
    'parse_backend',

    # Core components
    'RuleParser',
    'TransitiveResolver',
    'TextSubstitutor',
    'find',
    'union',

    # Data models
    'MapBackend',
    'ReplacementResult',
    'Rule',

    # Errors
    'WordReplacerError',
    'UsageError',
    'FileAccessError',
    'InputReadError',
    'CycleError',
    'RuleSyntaxError',
]
