"""JSON Schema validation utilities."""

import json
from functools import lru_cache
from importlib.resources import files
from typing import Any, cast

from jsonschema import Draft7Validator


@lru_cache(maxsize=None)
def load_schema(name: str) -> dict[str, Any]:
    """
    Load a bundled JSON schema.

    Args:
        name: Schema file name under banglit/data/schemas

    Returns:
        Parsed schema dict
    """
    resource = files("banglit") / "data" / "schemas" / name
    return cast(dict[str, Any], json.loads(resource.read_text(encoding="utf-8")))


def validate_against_schema(
    data: Any,
    schema: dict[str, Any],
) -> list[str]:
    """
    Validate data against JSON schema.

    Args:
        data: Data to validate
        schema: JSON schema

    Returns:
        List of validation error messages (empty if valid)
    """
    validator = Draft7Validator(schema)
    errors = []

    for error in sorted(validator.iter_errors(data), key=str):
        path = ".".join(str(p) for p in error.path) if error.path else "root"
        errors.append(f"{path}: {error.message}")

    return errors


def validate_rule(data: Any) -> list[str]:
    """Validate a raw rule entry against the rule schema."""
    return validate_against_schema(data, load_schema("rule.schema.json"))
