"""
Pipeline for running a word replacement end to end.

Stages run strictly in sequence, each consuming the complete output of the
previous one:

1. RuleParser - parses rule lines into the raw rule map
2. TransitiveResolver - flattens rule chains into the resolved rule map, rejecting cycles
3. TextSubstitutor - rewrites the input text against the resolved rule map

Errors are not handled here; they propagate to the caller unchanged.
"""

import logging
import time
from pathlib import Path
from typing import Dict, List, Optional, Union

from .backends import create_map, parse_backend
from .file_loader import DEFAULT_ENCODING, read_lines
from .models import MapBackend, ReplacementResult, Rule
from .ordered_map import OrderedMap
from .resolver import TransitiveResolver
from .rule_parser import RuleParser
from .substitutor import TextSubstitutor
from .utils import split_lines

logger = logging.getLogger(__name__)


class WordReplacementPipeline:
    """
    Orchestrates rule parsing, resolution and substitution for one run.

    Both rule maps are created from the same backend, live only as long as
    the pipeline, and are never persisted.
    """

    def __init__(self, backend: Union[str, MapBackend] = MapBackend.BST, strict_rules: bool = False):
        """
        Initialize the pipeline.

        Args:
            backend: Map backend for both rule maps ("bst", "rbt" or "hash")
            strict_rules: Reject rule lines without a separator instead of
                reading them as a word with an empty replacement

        Raises:
            UsageError: if backend is not a known selector
        """
        self.backend = parse_backend(backend)
        self.rule_parser = RuleParser(strict=strict_rules)
        self.resolver = TransitiveResolver()

        # Pipeline inputs
        self.rule_lines: Optional[List[str]] = None
        self.input_lines: Optional[List[str]] = None
        self.source_files: Dict[str, Optional[str]] = {"rules": None, "input": None}

        # Stage outputs
        self.rules: List[Rule] = []
        self.raw_map: Optional[OrderedMap] = None
        self.resolved_map: Optional[OrderedMap] = None
        self.result: Optional[ReplacementResult] = None

    def load_rules(self, lines: Union[str, List[str]]) -> None:
        """Load rule lines, or a whole rules text to be split into lines."""
        self.rule_lines = split_lines(lines) if isinstance(lines, str) else list(lines)
        logger.info("Loaded %d rule lines", len(self.rule_lines))

    def load_rules_from_file(self, file_path: Union[str, Path], encoding: str = DEFAULT_ENCODING) -> None:
        """
        Raises:
            FileAccessError: if the file cannot be opened
            InputReadError: if the file cannot be read
        """
        self.load_rules(read_lines(file_path, encoding))
        self.source_files["rules"] = str(file_path)

    def load_input_text(self, lines: Union[str, List[str]]) -> None:
        """Load input lines, or a whole input text to be split into lines."""
        self.input_lines = split_lines(lines) if isinstance(lines, str) else list(lines)
        logger.info("Loaded %d input lines", len(self.input_lines))

    def load_input_text_from_file(self, file_path: Union[str, Path], encoding: str = DEFAULT_ENCODING) -> None:
        """
        Raises:
            FileAccessError: if the file cannot be opened
            InputReadError: if the file cannot be read
        """
        self.load_input_text(read_lines(file_path, encoding))
        self.source_files["input"] = str(file_path)

    def step_1_parse_rules(self) -> OrderedMap:
        """
        Step 1: Parse the loaded rule lines into the raw rule map.

        Raises:
            ValueError: if no rules have been loaded
            RuleSyntaxError: in strict mode, on a line without a separator
        """
        if self.rule_lines is None:
            raise ValueError("No rules loaded. Call load_rules() first.")

        logger.info("Step 1: Parsing rules into a %s map...", self.backend.value)
        self.raw_map = create_map(self.backend)
        self.rules = self.rule_parser.parse(self.rule_lines, self.raw_map)
        return self.raw_map

    def step_2_resolve_rules(self) -> OrderedMap:
        """
        Step 2: Flatten rule chains into the resolved rule map.

        Raises:
            ValueError: if the rules have not been parsed yet
            CycleError: if a rule chain loops back on itself
        """
        if self.raw_map is None:
            raise ValueError("No parsed rules. Call step_1_parse_rules() first.")

        logger.info("Step 2: Resolving rule chains...")
        resolved_map = create_map(self.backend)
        self.resolved_map = self.resolver.resolve(self.raw_map, resolved_map)
        return self.resolved_map

    def step_3_substitute(self) -> ReplacementResult:
        """
        Step 3: Rewrite the loaded input text.

        Raises:
            ValueError: if the rules are not resolved or no input is loaded
        """
        if self.resolved_map is None:
            raise ValueError("No resolved rules. Call step_2_resolve_rules() first.")
        if self.input_lines is None:
            raise ValueError("No input text loaded. Call load_input_text() first.")

        logger.info("Step 3: Substituting %d lines...", len(self.input_lines))
        substitutor = TextSubstitutor(self.resolved_map)
        output_text = substitutor.substitute_lines(self.input_lines)

        self.result = ReplacementResult(
            output_text=output_text,
            backend=self.backend,
            rules_parsed=len(self.rules),
            malformed_rules=sum(1 for rule in self.rules if rule.malformed),
            resolved_rules=len(self.resolved_map),
            lines_processed=substitutor.lines_processed,
            words_seen=substitutor.words_seen,
            words_replaced=substitutor.words_replaced,
            source_files=dict(self.source_files),
        )
        return self.result

    def run_full_pipeline(self) -> ReplacementResult:
        """Run steps 1 to 3 on the loaded rules and input text."""
        start_time = time.time()
        self.step_1_parse_rules()
        self.step_2_resolve_rules()
        result = self.step_3_substitute()
        logger.info("Pipeline complete in %.3fs", time.time() - start_time)
        return result

    def get_summary(self) -> Dict:
        """Statistics of the last run, or of the stages completed so far."""
        if self.result is not None:
            return self.result.to_dict()
        return {
            "backend": self.backend.value,
            "rules_parsed": len(self.rules),
            "resolved_rules": len(self.resolved_map) if self.resolved_map is not None else 0,
            "source_files": dict(self.source_files),
        }
