"""Tests for mode dispatch."""

import logging

import pytest

from banglit import transliterate
from banglit.models import Mode
from banglit.transliteration import resolve_mode


@pytest.mark.parametrize("mode", [Mode.FORWARD, Mode.REVERSE, "avro", "orva"])
def test_empty_input(mode):
    assert transliterate("", mode) == ""


def test_forward_and_reverse():
    assert transliterate("ka", Mode.FORWARD) == "কা"
    assert transliterate("কা", Mode.REVERSE) == "ka"


def test_default_mode_is_forward():
    assert transliterate("ami") == "আমি"


def test_aliases():
    assert transliterate("ka", "forward") == "কা"
    assert transliterate("কা", "reverse") == "ka"
    assert resolve_mode("Forward") is Mode.FORWARD
    assert resolve_mode("orva") is Mode.REVERSE


@pytest.mark.parametrize(
    ("mode", "expected"),
    [
        ("AVRO", Mode.FORWARD),
        ("Orva", Mode.REVERSE),
        ("BangLish", Mode.BANGLISH),
        ("REVERSE", Mode.REVERSE),
    ],
)
def test_mode_names_ignore_case(mode, expected):
    assert resolve_mode(mode) is expected


def test_uppercase_mode_dispatches():
    assert transliterate("ka", "AVRO") == "কা"
    assert transliterate("কা", "Orva") == "ka"


@pytest.mark.parametrize("mode", ["klingon", "", "AVRO ", None, 3])
def test_unsupported_mode_returns_input(mode, caplog):
    """Unknown modes never raise and return the text verbatim."""
    text = "ami banglay gan gai"

    with caplog.at_level(logging.WARNING):
        assert transliterate(text, mode) == text

    assert "Unsupported mode" in caplog.text
    assert "'avro'" in caplog.text


@pytest.mark.parametrize("mode", [Mode.BANGLISH, Mode.LISHBANG, "banglish", "lishbang"])
def test_stub_modes_are_identity(mode, caplog):
    with caplog.at_level(logging.WARNING):
        assert transliterate("ami", mode) == "ami"

    assert "not implemented" in caplog.text


def test_custom_tables(small_table):
    assert transliterate("kha", Mode.FORWARD, table=small_table) == "খা"
