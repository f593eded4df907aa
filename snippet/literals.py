"""Literal and option-object parsing for snippet arguments."""

from __future__ import annotations

import re
from typing import Any

_QUOTES = ("'", '"')
_INTEGER_RE = re.compile(r"-?[0-9]+")


def strip_quotes(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        return value[1:-1]
    return value


def parse_literal(value: str) -> Any:
    """Parse the right-hand side of an assignment or comparison.

    Unrecognized text is passed through unchanged.
    """
    value = value.strip()
    if value in {"[]", "[ ]"}:
        return []
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if value == "null":
        return None
    if _INTEGER_RE.fullmatch(value):
        return int(value)
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        return value[1:-1]
    return value


def parse_options(text: str) -> dict[str, bool]:
    """Parse ``{announce: true, force: false}`` into a flag mapping."""
    text = text.strip()
    if text.startswith("{") and text.endswith("}"):
        text = text[1:-1]
    options: dict[str, bool] = {}
    for segment in text.split(","):
        if not segment.strip():
            continue
        if ":" not in segment:
            raise ValueError(f"Option {segment.strip()!r} has no value")
        key, value = (item.strip() for item in segment.split(":", 1))
        options[strip_quotes(key)] = value.lower() == "true"
    return options


def split_call_arguments(inside: str) -> tuple[str, dict[str, bool]]:
    """Split ``first, {options}`` into the first argument text and its options."""
    parts = [part.strip() for part in inside.split(",", 1)]
    options: dict[str, bool] = {}
    if len(parts) > 1 and parts[1]:
        options = parse_options(parts[1])
    return parts[0], options
