"""
Normalization of validated equity inputs.

Fills every absent field with its configured default and produces the
immutable :class:`ResolvedInput` handed to the simulation engine.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

from equity_input.game.inputs import ByExplicitHands, ByHandCount, RawInput, parse_input
from equity_input.shared.config import InputDefaults
from equity_input.shared.config_loader import get_config

logger = logging.getLogger(__name__)


class ResolvedInput(BaseModel):
    """Fully populated equity input; dumps with caller-facing camelCase names."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    board: str
    board_size: int = Field(alias="boardSize")
    hand_size: int = Field(alias="handSize")
    hands: tuple[str, ...]
    iterations: int
    num_decks: int = Field(alias="numDecks")
    num_players: int = Field(alias="numPlayers")
    return_hand_stats: bool = Field(alias="returnHandStats")
    return_tie_hand_stats: bool = Field(alias="returnTieHandStats")

    def to_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys and hands as a list (JSON-ready)."""
        data = self.model_dump(by_alias=True)
        data["hands"] = list(self.hands)
        return data


def _pick(value: Any, default: Any) -> Any:
    return default if value is None else value


def normalize_input(
    raw: RawInput | Mapping[str, Any], defaults: InputDefaults | None = None
) -> ResolvedInput:
    """
    Resolve a validated input into a complete configuration.

    Must be called after :func:`validate_input`; no checks are repeated here.
    ``numPlayers`` is taken as given when present and otherwise derived from
    the number of hands.

    Args:
        raw: Parsed input, or a mapping that is parsed first
        defaults: Defaults for absent fields; the process-wide config defaults
            when omitted

    Returns:
        Frozen ResolvedInput
    """
    if not isinstance(raw, (ByHandCount, ByExplicitHands)):
        raw = parse_input(raw)
    if defaults is None:
        defaults = get_config().defaults

    hands: tuple[str, ...] = tuple(raw.hands) if isinstance(raw, ByExplicitHands) else ()
    num_players = len(hands) if raw.num_players is None else raw.num_players

    resolved = ResolvedInput(
        board=_pick(raw.board, defaults.board),
        board_size=int(_pick(raw.board_size, defaults.board_size)),
        hand_size=int(_pick(raw.hand_size, defaults.hand_size)),
        hands=hands,
        iterations=int(_pick(raw.iterations, defaults.iterations)),
        num_decks=int(_pick(raw.num_decks, defaults.num_decks)),
        num_players=int(num_players),
        return_hand_stats=_pick(raw.return_hand_stats, defaults.return_hand_stats),
        return_tie_hand_stats=_pick(raw.return_tie_hand_stats, defaults.return_tie_hand_stats),
    )
    logger.debug(
        f"Resolved input: {resolved.num_players} players, "
        f"{len(resolved.hands)} fixed hands, {resolved.iterations} iterations"
    )
    return resolved
