"""Character classification used by conditional rules."""


VOWELS = frozenset("aeiou")
CONSONANTS = frozenset("bcdfghjklmnpqrstvwxyz")


def is_vowel(char: str) -> bool:
    """Check if a character is a romanized vowel (any case)."""
    return char.lower() in VOWELS


def is_consonant(char: str) -> bool:
    """Check if a character is a romanized consonant (any case)."""
    return char.lower() in CONSONANTS


def is_punctuation(char: str) -> bool:
    """
    Check if a character is neither vowel nor consonant.

    Digits, whitespace, symbols and letters outside the romanization
    alphabet all count as punctuation.
    """
    return not is_vowel(char) and not is_consonant(char)


def is_exact(needle: str, haystack: str, start: int, end: int, negate: bool = False) -> bool:
    """
    Compare a window of the haystack against a literal.

    A window reaching past either end of the haystack never contains the
    literal, so it satisfies a negated test and fails a plain one.

    Args:
        needle: Literal to look for
        haystack: Text being scanned
        start: Window start (inclusive)
        end: Window end (exclusive)
        negate: Invert the result

    Returns:
        Whether the window equals the needle, XOR negate
    """
    if start < 0 or end > len(haystack):
        return negate
    return (haystack[start:end] == needle) != negate
