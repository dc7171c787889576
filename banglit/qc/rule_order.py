"""Ordering checks for the rule table."""

import logging
from dataclasses import dataclass, field

from banglit.models import RuleTable


@dataclass
class ShadowedRule:
    """A rule that can never match because an earlier rule always wins."""

    index: int
    find: str
    shadowed_by_index: int
    shadowed_by: str


@dataclass
class RuleOrderResult:
    """Result of a rule order check."""

    total_rules: int
    shadowed: list[ShadowedRule] = field(default_factory=list)
    duplicates: list[ShadowedRule] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.shadowed and not self.duplicates


def check_rule_order(table: RuleTable, logger: logging.Logger | None = None) -> RuleOrderResult:
    """
    Find rules listed after a shorter rule that is their prefix.

    The scanner takes the first literal match in table order, so a rule
    after one of its own prefixes (or after an identical literal) is dead.

    Args:
        table: Rule table to check
        logger: Logger instance

    Returns:
        Rule order check result
    """
    logger = logger or logging.getLogger(__name__)
    result = RuleOrderResult(total_rules=len(table))

    first_seen: dict[str, int] = {}
    for idx, rule in enumerate(table):
        if rule.find in first_seen:
            earlier = first_seen[rule.find]
            result.duplicates.append(ShadowedRule(idx, rule.find, earlier, rule.find))
            continue

        for length in range(1, len(rule.find)):
            prefix = rule.find[:length]
            if prefix in first_seen:
                result.shadowed.append(ShadowedRule(idx, rule.find, first_seen[prefix], prefix))
                break

        first_seen[rule.find] = idx

    logger.info(
        f"Checked {result.total_rules} rules: {len(result.shadowed)} shadowed, "
        f"{len(result.duplicates)} duplicate"
    )
    return result
