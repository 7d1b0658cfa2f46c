"""
Raw equity inputs as supplied by callers.

An input either lists explicit hole-card hands (``ByExplicitHands``) or only
says how many players take part (``ByHandCount``). Field values are kept
exactly as received; type and range checks happen in
:mod:`equity_input.game.validation`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

from equity_input.game.errors import ValidationError

# Caller-facing field name -> dataclass attribute
FIELD_NAMES: dict[str, str] = {
    "numPlayers": "num_players",
    "hands": "hands",
    "board": "board",
    "boardSize": "board_size",
    "handSize": "hand_size",
    "numDecks": "num_decks",
    "iterations": "iterations",
    "returnHandStats": "return_hand_stats",
    "returnTieHandStats": "return_tie_hand_stats",
}
ATTRIBUTE_FIELDS: dict[str, str] = {attr: name for name, attr in FIELD_NAMES.items()}


@dataclass(frozen=True, kw_only=True)
class _CommonFields:
    """Optional fields shared by both input shapes; ``None`` means absent."""

    board: Any = None
    board_size: Any = None
    hand_size: Any = None
    num_decks: Any = None
    iterations: Any = None
    return_hand_stats: Any = None
    return_tie_hand_stats: Any = None


@dataclass(frozen=True, kw_only=True)
class ByHandCount(_CommonFields):
    """Input naming only the number of players; every hand is dealt at random."""

    num_players: Any


@dataclass(frozen=True, kw_only=True)
class ByExplicitHands(_CommonFields):
    """Input listing hole cards per player; extra players may be added via num_players."""

    hands: Any
    num_players: Any = None


RawInput = Union[ByHandCount, ByExplicitHands]


def parse_input(data: Mapping[str, Any]) -> RawInput:
    """
    Build a raw input from a loosely-typed mapping.

    Keys may use the caller-facing camelCase names (``numPlayers``) or their
    snake_case spelling (``num_players``). Keys mapped to ``None`` are treated
    as absent.

    Raises:
        ValidationError: If ``data`` is not a mapping, carries neither
            ``numPlayers`` nor ``hands``, spells one field both ways, or has
            unknown keys
    """
    if not isinstance(data, Mapping):
        raise ValidationError("input", data, "Input must be a mapping of field names to values.")

    values: dict[str, Any] = {}
    seen: set[str] = set()
    repeated: list[tuple[str, Any]] = []
    unknown: list[str] = []
    for key, value in data.items():
        attr = FIELD_NAMES.get(key, key if key in ATTRIBUTE_FIELDS else None)
        if attr is None:
            unknown.append(key)
            continue
        if attr in seen:
            repeated.append((attr, value))
        seen.add(attr)
        if value is not None:
            values[attr] = value

    if "num_players" not in values and "hands" not in values:
        raise ValidationError(
            "numPlayers", None, 'Either "numPlayers" or "hands" must be provided.'
        )

    # camelCase and snake_case spellings of one field must not both appear
    if repeated:
        attr, value = repeated[0]
        name = ATTRIBUTE_FIELDS[attr]
        raise ValidationError(name, value, f'Field "{name}" given more than once.')

    if unknown:
        key = unknown[0]
        raise ValidationError(str(key), data[key], f'Unknown field "{key}".')

    if "hands" in values:
        return ByExplicitHands(**values)
    return ByHandCount(**values)
