"""Phonetic transliteration between romanized and Bengali text."""

from banglit.engine.forward import avro
from banglit.engine.reverse import orva
from banglit.models import Mode
from banglit.transliteration import transliterate


__version__ = "0.1.0"

__all__ = ["Mode", "avro", "orva", "transliterate"]
