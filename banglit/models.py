"""Data models for the phonetic rule table."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Position(str, Enum):
    """Side of the matched span a condition inspects."""

    PREFIX = "prefix"
    SUFFIX = "suffix"


class Scope(str, Enum):
    """Character class a condition tests for."""

    VOWEL = "vowel"
    CONSONANT = "consonant"
    PUNCTUATION = "punctuation"
    EXACT = "exact"


class Mode(str, Enum):
    """Transliteration direction."""

    FORWARD = "avro"  # romanized -> Bengali
    REVERSE = "orva"  # Bengali -> romanized, lossy
    BANGLISH = "banglish"
    LISHBANG = "lishbang"

    @classmethod
    def _missing_(cls, value: object) -> "Mode | None":
        aliases = {"forward": cls.FORWARD, "reverse": cls.REVERSE}
        if isinstance(value, str):
            key = value.lower()
            return cls._value2member_map_.get(key) or aliases.get(key)
        return None


@dataclass(frozen=True)
class Condition:
    """A context test on the text around a matched literal."""

    position: Position
    scope: Scope
    negate: bool = False
    literal: str | None = None


@dataclass(frozen=True)
class ConditionalRule:
    """Override output used when every condition holds."""

    conditions: tuple[Condition, ...]
    replace: str


@dataclass(frozen=True)
class Rule:
    """A literal rewrite with optional context-dependent overrides."""

    find: str
    replace: str
    rules: tuple[ConditionalRule, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ReverseRule:
    """An inverted rule: Bengali output back to its romanized literal.

    Conditional rules are carried over from the forward rule but the reverse
    scanner never evaluates them.
    """

    find: str
    replace: str
    rules: tuple[ConditionalRule, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"find": self.find, "replace": self.replace}


RuleTable = tuple[Rule, ...]
ReverseRuleTable = tuple[ReverseRule, ...]
