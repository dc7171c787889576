"""Quality checks for rule tables."""
