"""I/O utilities with atomic writes."""

import json
import shutil
import tempfile
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]


def atomic_write(
    path: Path,
    write_func: Callable[[Path], None],
) -> None:
    """
    Atomically write to a file using temp file and move.

    Args:
        path: Destination path
        write_func: Function that writes to a given path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    # Temp file in the same directory keeps the move on one filesystem
    with tempfile.NamedTemporaryFile(
        mode="wb",
        dir=path.parent,
        delete=False,
        prefix=f".tmp.{path.name}.",
    ) as tmp_file:
        tmp_path = Path(tmp_file.name)

    try:
        write_func(tmp_path)
        shutil.move(str(tmp_path), str(path))
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise


def write_lines(path: Path, lines: Iterable[str]) -> int:
    """
    Write text lines atomically.

    Args:
        path: Destination path
        lines: Lines without trailing newlines

    Returns:
        Number of lines written
    """
    count = 0

    def _write(tmp_path: Path) -> None:
        nonlocal count
        with tmp_path.open("w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
                count += 1

    atomic_write(path, _write)
    return count


def write_json(path: Path, data: Any, indent: int = 2) -> None:
    """
    Write JSON file atomically.

    Args:
        path: Destination path
        data: Data to serialize
        indent: JSON indentation
    """

    def _write(tmp_path: Path) -> None:
        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=indent)

    atomic_write(path, _write)


def read_yaml(path: Path) -> Any:
    """
    Read YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Parsed YAML data
    """
    with Path(path).open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)
