"""Pending-word buffer for a phonetic keyboard."""

from dataclasses import dataclass

from banglit.models import Mode, RuleTable
from banglit.transliteration import transliterate


@dataclass(frozen=True)
class Edit:
    """Text field edit: delete characters before the cursor, then insert."""

    delete: int
    insert: str


class KeystrokeBuffer:
    """
    Collect romanized keystrokes until a word boundary.

    Typed characters are shown as-is in the text field and remembered here.
    On commit (space, punctuation or an explicit commit key) the caller
    applies the returned Edit to swap the typed word for its Bengali form.
    """

    def __init__(self, table: RuleTable | None = None):
        self.table = table
        self._pending: list[str] = []

    @property
    def pending(self) -> str:
        """Characters typed since the last commit or discard."""
        return "".join(self._pending)

    def type(self, text: str) -> None:
        """Record typed characters."""
        self._pending.extend(text)

    def backspace(self) -> None:
        """Forget the last typed character, if any."""
        if self._pending:
            self._pending.pop()

    def discard(self) -> None:
        """Drop the pending word without converting it (newline, emoji, ...)."""
        self._pending.clear()

    def commit(self) -> Edit | None:
        """
        Convert the pending word.

        Returns:
            Edit replacing the typed characters, or None if nothing is pending
        """
        if not self._pending:
            return None

        word = self.pending
        self._pending.clear()
        return Edit(delete=len(word), insert=transliterate(word, Mode.FORWARD, table=self.table))
