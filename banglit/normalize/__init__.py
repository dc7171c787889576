"""Romanized and Bengali input normalization."""
