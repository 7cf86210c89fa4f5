"""
Rule parser: turns `word -> replacement` lines into rule map entries.
"""

import logging
from typing import Iterable, List

from .exceptions import RuleSyntaxError
from .models import Rule
from .ordered_map import OrderedMap

logger = logging.getLogger(__name__)

# Space, hyphen, greater-than. Only the first occurrence on a line counts.
SEPARATOR = " ->"


class RuleParser:
    """
    Line-oriented parser for replacement rules.

    Format: `<source> -> <target>`. Everything before the first separator is
    the source, everything after it is the target; both are stripped. The
    target may itself contain the separator ("a -> b -> c" maps "a" to
    "b -> c").

    Lines without a separator:
    - lenient mode (default): the whole stripped line becomes the source and
      the target is "". Resolving and substituting such a rule deletes the
      word from the output. A warning is logged for each such line.
    - strict mode: RuleSyntaxError is raised.

    Whitespace-only lines are skipped in both modes. Taken literally they
    would give the rule "" -> "", which maps a word to itself.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def parse_line(self, line: str, line_number: int = 0) -> Rule:
        """
        Parse a single rule line (without its line terminator).

        Raises:
            RuleSyntaxError: in strict mode, if the line has no separator
        """
        source, separator, target = line.partition(SEPARATOR)
        if not separator:
            if self.strict:
                raise RuleSyntaxError(line_number, line)
            logger.warning(
                "Rule line %d has no '%s' separator, treating '%s' as a word with an empty replacement",
                line_number, SEPARATOR, line.strip(),
            )
            return Rule(source=line.strip(), target="", line_number=line_number, malformed=True)

        return Rule(source=source.strip(), target=target.strip(), line_number=line_number)

    def parse(self, lines: Iterable[str], rule_map: OrderedMap) -> List[Rule]:
        """
        Parse every line and store each rule in rule_map.

        A source defined more than once keeps its last target.

        Args:
            lines: Rule lines, terminators already removed
            rule_map: Raw rule map to fill

        Returns:
            The parsed rules in file order, duplicates included
        """
        rules: List[Rule] = []
        for line_number, line in enumerate(lines, 1):
            if not line.strip():
                logger.debug("Skipping blank rule line %d", line_number)
                continue

            rule = self.parse_line(line, line_number)
            previous = rule_map.get(rule.source)
            if previous is not None and previous != rule.target:
                logger.debug(
                    "Rule for '%s' on line %d overrides '%s' with '%s'",
                    rule.source, line_number, previous, rule.target,
                )
            rule_map.put(rule.source, rule.target)
            rules.append(rule)

        logger.info("Parsed %d rules (%d distinct sources)", len(rules), len(rule_map))
        return rules
