"""Loading the phonetic rule table from its YAML data file."""

import logging
from functools import lru_cache
from importlib.resources import files
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from banglit.models import Condition, ConditionalRule, Position, Rule, RuleTable, Scope
from banglit.utils.io import read_yaml
from banglit.utils.schema import validate_rule


logger = logging.getLogger(__name__)


def parse_condition(raw: Any) -> Condition:
    """
    Parse one "matches" entry into a Condition.

    Args:
        raw: Mapping with "type", "scope" (optionally "!"-prefixed) and "value"

    Returns:
        Parsed condition

    Raises:
        ValueError: If the entry is not a well-formed condition
    """
    if not isinstance(raw, dict):
        raise ValueError(f"condition must be a mapping, got {type(raw).__name__}")

    scope_name = raw.get("scope")
    if not isinstance(scope_name, str):
        raise ValueError(f"condition scope must be a string, got {scope_name!r}")

    negate = scope_name.startswith("!")
    if negate:
        scope_name = scope_name[1:]

    try:
        position = Position(raw.get("type"))
        scope = Scope(scope_name)
    except ValueError as e:
        raise ValueError(f"unknown condition {raw!r}") from e

    literal = None
    if scope is Scope.EXACT:
        literal = raw.get("value")
        if not isinstance(literal, str) or not literal:
            raise ValueError(f"exact condition needs a non-empty value, got {literal!r}")

    return Condition(position=position, scope=scope, negate=negate, literal=literal)


def parse_conditional_rule(raw: Any) -> ConditionalRule:
    """
    Parse one entry of a rule's "rules" list.

    Raises:
        ValueError: If the entry or any of its conditions is malformed
    """
    if not isinstance(raw, dict):
        raise ValueError(f"conditional rule must be a mapping, got {type(raw).__name__}")

    replace = raw.get("replace")
    if not isinstance(replace, str):
        raise ValueError(f"conditional rule replace must be a string, got {replace!r}")

    matches = raw.get("matches")
    if not isinstance(matches, list) or not matches:
        raise ValueError("conditional rule needs at least one match")

    return ConditionalRule(
        conditions=tuple(parse_condition(m) for m in matches),
        replace=replace,
    )


def parse_rule(raw: Any) -> Rule | None:
    """
    Parse a raw table entry into a Rule.

    Entries that fail schema validation are skipped. A malformed conditional
    rule can never be satisfied, so it is dropped and the rest of the rule
    is kept.

    Args:
        raw: Entry as loaded from the table file

    Returns:
        Parsed rule, or None if the entry is unusable
    """
    errors = validate_rule(raw)
    if errors:
        logger.warning(f"Skipping malformed rule {raw!r}: {'; '.join(errors)}")
        return None

    conditional_rules = []
    for idx, raw_conditional in enumerate(raw.get("rules") or []):
        try:
            conditional_rules.append(parse_conditional_rule(raw_conditional))
        except ValueError as e:
            logger.warning(f"Dropping conditional rule {idx} of {raw['find']!r}: {e}")

    return Rule(find=raw["find"], replace=raw["replace"], rules=tuple(conditional_rules))


def parse_rule_table(entries: Any) -> RuleTable:
    """
    Build a rule table from raw entries, preserving their order.

    Args:
        entries: List of raw rule mappings

    Returns:
        Immutable rule table

    Raises:
        ValueError: If entries is not a list
    """
    if not isinstance(entries, list):
        raise ValueError(f"rule table must be a list, got {type(entries).__name__}")

    table = tuple(rule for rule in map(parse_rule, entries) if rule is not None)

    skipped = len(entries) - len(table)
    if skipped:
        logger.warning(f"Skipped {skipped} malformed rule(s) of {len(entries)}")
    logger.debug(f"Loaded {len(table)} rules")

    return table


def load_rule_table(path: Path | None = None) -> RuleTable:
    """
    Load a rule table file.

    Args:
        path: YAML table file (default: the bundled banglit/data/rules.yaml)

    Returns:
        Immutable rule table
    """
    if path is None:
        resource = files("banglit") / "data" / "rules.yaml"
        entries = yaml.safe_load(resource.read_text(encoding="utf-8"))
    else:
        entries = read_yaml(Path(path))
    return parse_rule_table(entries)


@lru_cache(maxsize=None)
def get_rule_table() -> RuleTable:
    """Return the bundled rule table, loading it on first use."""
    return load_rule_table()
