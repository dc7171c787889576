"""Bengali to romanized conversion, the lossy inverse of avro."""

import logging
from dataclasses import dataclass

from banglit.models import ReverseRuleTable
from banglit.rules.reverse import get_reverse_table


logger = logging.getLogger(__name__)

# Marks with no romanized counterpart
STRIPPED_MARKS = (
    "`",  # Avro literal-break marker
    "\u09cd",  # Hasanta (virama)
    "\u200d",  # Zero-width joiner
    "\u09bc",  # Nukta
)

# Independent vowels the reverse table cannot reach
VOWEL_FALLBACKS = {
    "আ": "a",
    "অ": "o",
    "ই": "i",
    "ঈ": "e",
    "উ": "u",
    "এ": "e",
}


@dataclass
class ReverseScan:
    """Result of a reverse scan."""

    output: str
    iterations: int
    truncated: bool = False


def cleanup(text: str) -> str:
    """Strip unmappable marks and approximate leftover independent vowels."""
    for mark in STRIPPED_MARKS:
        text = text.replace(mark, "")
    for vowel, latin in VOWEL_FALLBACKS.items():
        text = text.replace(vowel, latin)
    return text


def scan_reverse(text: str, table: ReverseRuleTable | None = None) -> ReverseScan:
    """
    Scan Bengali text against the reverse table.

    Conditional rules carried over from the forward table are ignored. The
    scan gives up after 2 * len(text) iterations; the cursor advances on
    every pass so this never happens, but if it did the unscanned remainder
    would be dropped.

    Args:
        text: Bengali input
        table: Reverse rule table (default: reverse of the bundled table)

    Returns:
        Cleaned-up output and scan statistics
    """
    if table is None:
        table = get_reverse_table()

    output: list[str] = []
    cur = 0
    iterations = 0
    max_iterations = len(text) * 2
    truncated = False

    while cur < len(text):
        iterations += 1
        if iterations > max_iterations:
            logger.error(
                f"Reverse scan exceeded {max_iterations} iterations at offset {cur}, "
                f"dropping {len(text) - cur} unscanned characters"
            )
            truncated = True
            break

        matched = False
        for rule in table:
            end = cur + len(rule.find)
            if end <= len(text) and text[cur:end] == rule.find:
                output.append(rule.replace)
                cur = end - 1
                matched = True
                break

        if not matched:
            output.append(text[cur])
        cur += 1

    return ReverseScan(output=cleanup("".join(output)), iterations=iterations, truncated=truncated)


def orva(text: str, table: ReverseRuleTable | None = None) -> str:
    """
    Transliterate Bengali text back to romanized form.

    The result is an approximation: several romanized spellings produce the
    same Bengali, and the first one in table order is chosen.

    Args:
        text: Bengali input
        table: Reverse rule table (default: reverse of the bundled table)

    Returns:
        Romanized text
    """
    return scan_reverse(text, table).output
