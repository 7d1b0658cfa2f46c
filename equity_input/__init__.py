"""
Validation and normalization of equity simulation inputs.

Typical use::

    from equity_input import resolve_input

    resolved = resolve_input({"numPlayers": 3, "board": "As,Kd"})
"""

from __future__ import annotations

from typing import Any, Mapping

from equity_input.game.errors import ValidationError
from equity_input.game.inputs import ByExplicitHands, ByHandCount, RawInput, parse_input
from equity_input.game.normalization import ResolvedInput, normalize_input
from equity_input.game.validation import validate_input
from equity_input.shared.config import InputDefaults
from equity_input.utils.sequences import dedupe_by, shuffle


def resolve_input(data: Mapping[str, Any], defaults: InputDefaults | None = None) -> ResolvedInput:
    """Parse, validate and normalize a caller-supplied input in one call."""
    raw = parse_input(data)
    validate_input(raw, defaults)
    return normalize_input(raw, defaults)


__all__ = [
    "ByExplicitHands",
    "ByHandCount",
    "RawInput",
    "ResolvedInput",
    "ValidationError",
    "dedupe_by",
    "normalize_input",
    "parse_input",
    "resolve_input",
    "shuffle",
    "validate_input",
]
