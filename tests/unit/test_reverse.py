"""Tests for the reverse table and Bengali to romanized conversion."""

import pytest

from banglit.engine.forward import avro
from banglit.engine.reverse import cleanup, orva, scan_reverse
from banglit.models import Rule
from banglit.rules.reverse import ELISION_LITERAL, build_reverse, get_reverse_table


class TestBuildReverse:
    """Reverse table derivation."""

    def test_inverts_and_filters(self, small_table):
        reverse = build_reverse(small_table)

        assert [r.find for r in reverse] == ["খ", "ক", "ক", "া"]
        assert [r.replace for r in reverse] == ["kh", "k", "q", "a"]

    def test_conditional_rules_are_carried(self, small_table):
        reverse = build_reverse(small_table)
        assert len(reverse[-1].rules) == 1

    def test_longest_find_first(self):
        table = (Rule("k", "ক"), Rule("kkh", "ক্ষ"), Rule("kh", "খ"))
        reverse = build_reverse(table)

        assert reverse[0].find == "ক্ষ"
        assert [len(r.find) for r in reverse] == [3, 1, 1]
        # Ties keep table order
        assert [r.replace for r in reverse[1:]] == ["k", "kh"]

    def test_bundled_reverse_table(self, rule_table):
        reverse = get_reverse_table()

        assert reverse
        assert all(r.find and r.replace for r in reverse)
        assert all(r.replace != ELISION_LITERAL for r in reverse)
        lengths = [len(r.find) for r in reverse]
        assert lengths == sorted(lengths, reverse=True)
        assert len(reverse) < len(rule_table)

    def test_cached(self):
        assert get_reverse_table() is get_reverse_table()


class TestOrva:
    """Reverse scanning."""

    def test_empty_input(self):
        assert orva("") == ""

    def test_canonical_pair(self):
        """Forward 'ka' gives one syllable and reversing it gives 'ka' back."""
        assert avro("ka") == "কা"
        assert orva("কা") == "ka"

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("আমি", "ami"),
            ("বাংলা", "bangla"),
            ("খ", "kh"),
            ("১২৩", "123"),
        ],
    )
    def test_words(self, text, expected):
        assert orva(text) == expected

    def test_lossy(self):
        """The inherent vowel is lost on the way back."""
        assert avro("ko") == "ক"
        assert orva(avro("ko")) == "k"

    @pytest.mark.parametrize("text", ["😀", "\x07", "hello", "€"])
    def test_unknown_characters_pass_through(self, text):
        assert orva(text) == text

    def test_custom_table(self, small_table):
        reverse = build_reverse(small_table)
        assert orva("খাক", reverse) == "khak"


def test_cleanup():
    """Marks are stripped and independent vowels approximated."""
    assert cleanup("a`") == "a"
    assert cleanup("\u0995\u09cd\u200d\u09b7") == "\u0995\u09b7"
    assert cleanup("\u09af\u09bc") == "\u09af"
    assert cleanup("আঅইঈউএ") == "aoieue"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "কা",
        "ক্ষ্ণ",
        "আমি বাংলায় গান গাই",
        "hello, world 😀",
        "্্্",
        "\u09b0\u200d\u09cd\u09af",
    ],
)
def test_iteration_ceiling_unreachable(text):
    """The cursor advances every pass, so iterations never exceed len(text)."""
    scan = scan_reverse(text)

    assert scan.iterations <= len(text)
    assert not scan.truncated


def test_iteration_ceiling_unreachable_on_forward_output():
    for word in ["ami", "bangla", "kkhm", "rri", "ShTh", "ngOU", "2024", "rZ"]:
        bengali = avro(word)
        scan = scan_reverse(bengali)
        assert scan.iterations <= len(bengali)
        assert not scan.truncated
