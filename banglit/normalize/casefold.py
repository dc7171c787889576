"""Case folding for romanized input."""


# Letters whose capital form is a distinct phoneme (e.g. "T" retroflex vs
# "t" dental). These keep the case they were typed in.
CASE_SENSITIVE = frozenset("oiudgjnrstyz")


def fix_case(text: str) -> str:
    """
    Lowercase every character except the case-significant letters.

    Args:
        text: Raw romanized input

    Returns:
        Canonical text, same length as the input
    """
    fixed = []
    for char in text:
        lower = char.lower()
        # Some code points lowercase to several (e.g. U+0130); keep those as-is
        if lower in CASE_SENSITIVE or len(lower) != 1:
            fixed.append(char)
        else:
            fixed.append(lower)
    return "".join(fixed)
