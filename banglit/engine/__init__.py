"""Forward and reverse transliteration scanners."""
