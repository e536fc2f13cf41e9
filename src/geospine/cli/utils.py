"""
CLI utility helpers - document I/O and console output.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

from rich.console import Console

console = Console()
err_console = Console(stderr=True)


class InputFormatError(ValueError):
    """Input could not be read as JSON documents."""


def read_text(path: str) -> str:
    """Read ``path``, or stdin when ``path`` is ``-``."""
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def parse_documents(text: str, *, lines: bool = False) -> tuple[list[dict[str, Any]], bool]:
    """
    Parse input text into documents.

    Returns:
        (documents, single) where ``single`` is True when the input was one
        JSON object rather than an array or a stream of lines.
    """
    if lines:
        documents = []
        for number, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                value = json.loads(line)
            except json.JSONDecodeError as e:
                raise InputFormatError(f"line {number}: {e}") from e
            if not isinstance(value, dict):
                raise InputFormatError(f"line {number}: expected a JSON object, got {type(value).__name__}")
            documents.append(value)
        return documents, False

    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise InputFormatError(str(e)) from e

    if isinstance(value, dict):
        return [value], True
    if isinstance(value, list):
        for index, item in enumerate(value):
            if not isinstance(item, dict):
                raise InputFormatError(f"item {index}: expected a JSON object, got {type(item).__name__}")
        return value, False
    raise InputFormatError(f"expected a JSON object or array, got {type(value).__name__}")


def format_documents(documents: list[dict[str, Any]], *, single: bool, lines: bool) -> str:
    """Render documents in the same shape they were read in."""
    if lines:
        return "\n".join(json.dumps(doc) for doc in documents)
    if single:
        return json.dumps(documents[0], indent=2) if documents else ""
    return json.dumps(documents, indent=2)
