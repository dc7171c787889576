"""Transliteration between romanized and Bengali text."""

import logging

from banglit.engine.forward import avro
from banglit.engine.reverse import orva
from banglit.models import Mode, ReverseRuleTable, RuleTable


logger = logging.getLogger(__name__)


def banglish(text: str) -> str:
    """Banglish to Bengali (not implemented, returns text unchanged)."""
    logger.warning("Banglish transliteration is not implemented yet")
    return text


def lishbang(text: str) -> str:
    """Bengali to Banglish (not implemented, returns text unchanged)."""
    logger.warning("Lishbang transliteration is not implemented yet")
    return text


def resolve_mode(mode: Mode | str) -> Mode | None:
    """
    Resolve a mode identifier.

    Args:
        mode: Mode member, mode value ("avro", "orva", ...) or alias
            ("forward", "reverse")

    Returns:
        Mode, or None if the identifier is not recognized
    """
    try:
        return Mode(mode)
    except ValueError:
        return None


def transliterate(
    text: str,
    mode: Mode | str = Mode.FORWARD,
    table: RuleTable | None = None,
    reverse_table: ReverseRuleTable | None = None,
) -> str:
    """
    Transliterate text in the given direction.

    Never raises for a bad mode: unknown modes log a warning and return the
    text unchanged.

    Args:
        text: Input text
        mode: Transliteration mode
        table: Rule table for the forward direction (default: bundled)
        reverse_table: Rule table for the reverse direction (default:
            reverse of the bundled table)

    Returns:
        Transliterated text
    """
    resolved = resolve_mode(mode)
    if resolved is None:
        available = ", ".join(f"'{m.value}'" for m in Mode)
        logger.warning(f"Unsupported mode {mode!r}. Available modes are: {available}")
        return text

    match resolved:
        case Mode.FORWARD:
            return avro(text, table)
        case Mode.REVERSE:
            return orva(text, reverse_table)
        case Mode.BANGLISH:
            return banglish(text)
        case Mode.LISHBANG:
            return lishbang(text)
