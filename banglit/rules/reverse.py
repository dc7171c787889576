"""Inverted rule table for Bengali to romanized conversion."""

from functools import lru_cache

from banglit.models import ReverseRule, ReverseRuleTable, RuleTable
from banglit.rules.table import get_rule_table


# "o" is the inherent vowel: its default output is empty, and an empty
# literal cannot be matched.
ELISION_LITERAL = "o"


def build_reverse(table: RuleTable) -> ReverseRuleTable:
    """
    Invert a rule table.

    Rules with an empty side and the elision rule are left out. The result
    is ordered longest literal first; ties keep table order, so the first
    rule producing a given output is the one it maps back to.

    Args:
        table: Forward rule table

    Returns:
        Reverse rule table
    """
    inverted = [
        ReverseRule(find=rule.replace, replace=rule.find, rules=rule.rules)
        for rule in table
        if rule.find and rule.replace and rule.find != ELISION_LITERAL
    ]
    # sorted() is stable
    return tuple(sorted(inverted, key=lambda r: len(r.find), reverse=True))


@lru_cache(maxsize=None)
def get_reverse_table() -> ReverseRuleTable:
    """Return the reverse of the bundled rule table, built on first use."""
    return build_reverse(get_rule_table())
