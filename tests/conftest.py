"""Pytest fixtures for banglit tests."""

import logging

import pytest

from banglit.models import Condition, ConditionalRule, Position, Rule, Scope
from banglit.rules.table import get_rule_table
from banglit.utils.log import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers installed by setup_logging (the CLI calls it)."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def rule_table():
    """The bundled rule table."""
    return get_rule_table()


@pytest.fixture
def small_table():
    """A hand-built table covering prefix ordering and a conditional rule."""
    return (
        Rule(find="kh", replace="খ"),
        Rule(find="k", replace="ক"),
        Rule(find="q", replace="ক"),
        Rule(
            find="a",
            replace="া",
            rules=(
                ConditionalRule(
                    conditions=(Condition(Position.PREFIX, Scope.PUNCTUATION),),
                    replace="আ",
                ),
            ),
        ),
        Rule(find="o", replace=""),
        Rule(find="`", replace=""),
    )


@pytest.fixture
def sample_rules_yaml(tmp_path):
    """A small rule table file, including malformed entries."""
    path = tmp_path / "rules.yaml"
    path.write_text(
        "\n".join(
            [
                '- find: "kh"',
                '  replace: "খ"',
                '- find: "k"',
                '  replace: "ক"',
                '- find: ""',
                '  replace: "x"',
                '- replace: "no find"',
                '- find: "a"',
                '  replace: "া"',
                "  rules:",
                "    - matches:",
                '        - {type: prefix, scope: punctuation}',
                '      replace: "আ"',
                "",
            ]
        ),
        encoding="utf-8",
    )
    return path
