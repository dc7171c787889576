"""Romanized to Bengali conversion (Avro phonetic)."""

from banglit.models import Condition, Position, RuleTable, Scope
from banglit.normalize.casefold import fix_case
from banglit.normalize.classify import is_consonant, is_exact, is_punctuation, is_vowel
from banglit.rules.table import get_rule_table


def condition_holds(condition: Condition, text: str, start: int, end: int) -> bool:
    """
    Evaluate one context condition around the match text[start:end].

    Args:
        condition: Condition to test
        text: Case-fixed input
        start: Match start (inclusive)
        end: Match end (exclusive)

    Returns:
        True if the condition is satisfied
    """
    if condition.scope is Scope.EXACT:
        # An exact test without a literal is malformed and never holds
        if not condition.literal:
            return False
        literal = condition.literal
        if condition.position is Position.PREFIX:
            return is_exact(literal, text, start - len(literal), start, condition.negate)
        return is_exact(literal, text, end, end + len(literal), condition.negate)

    index = start - 1 if condition.position is Position.PREFIX else end
    in_bounds = 0 <= index < len(text)

    if condition.scope is Scope.PUNCTUATION:
        # Text edges count as punctuation
        found = not in_bounds or is_punctuation(text[index])
    elif condition.scope is Scope.VOWEL:
        found = in_bounds and is_vowel(text[index])
    elif condition.scope is Scope.CONSONANT:
        found = in_bounds and is_consonant(text[index])
    else:
        return False

    return found != condition.negate


def avro(text: str, table: RuleTable | None = None) -> str:
    """
    Transliterate romanized text to Bengali.

    The first rule in table order whose literal matches at the cursor wins;
    its conditional rules pick an alternative output from the surrounding
    characters. Characters no rule matches are copied through.

    Args:
        text: Romanized input
        table: Rule table (default: the bundled table)

    Returns:
        Bengali text
    """
    if table is None:
        table = get_rule_table()

    fixed = fix_case(text)
    output: list[str] = []
    cur = 0

    while cur < len(fixed):
        start = cur
        matched = False

        for rule in table:
            end = start + len(rule.find)
            if end > len(fixed) or fixed[start:end] != rule.find:
                continue

            replace = rule.replace
            for conditional in rule.rules:
                if all(condition_holds(c, fixed, start, end) for c in conditional.conditions):
                    replace = conditional.replace
                    break

            output.append(replace)
            cur = end - 1
            matched = True
            break

        if not matched:
            output.append(fixed[start])
        cur += 1

    return "".join(output)
