"""
Configuration schema: single source of truth.

Defaults are defined as Pydantic field defaults. YAML files provide overrides only.
Validation constraints live here, next to each field.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from equity_input.constants import (
    DEFAULT_BOARD,
    DEFAULT_BOARD_SIZE,
    DEFAULT_HAND_SIZE,
    DEFAULT_ITERATIONS,
    DEFAULT_NUMBER_OF_DECKS,
)
from equity_input.game.cards import CardGroup
from equity_input.shared.dicts import deep_merge_dicts

# ---------------------------------------------------------------------------
# Shared type aliases for common constraints
# ---------------------------------------------------------------------------

PositiveInt = Annotated[int, Field(gt=0)]
NonNegInt = Annotated[int, Field(ge=0)]


class StrictFrozenModel(BaseModel):
    """Base for all config models: immutable, extra keys forbidden."""

    model_config = ConfigDict(frozen=True, extra="forbid")


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------


class InputDefaults(StrictFrozenModel):
    """Values substituted for fields an equity input leaves out."""

    board: str = Field(default=DEFAULT_BOARD)
    board_size: NonNegInt = Field(default=DEFAULT_BOARD_SIZE)
    hand_size: NonNegInt = Field(default=DEFAULT_HAND_SIZE)
    iterations: PositiveInt = Field(default=DEFAULT_ITERATIONS)
    num_decks: PositiveInt = Field(default=DEFAULT_NUMBER_OF_DECKS)
    return_hand_stats: bool = Field(default=False)
    return_tie_hand_stats: bool = Field(default=False)

    @model_validator(mode="after")
    def board_fits_board_size(self) -> "InputDefaults":
        # CardGroup raises our ValidationError, a ValueError pydantic reports as-is
        board = CardGroup(self.board, field="board")
        if len(board) > self.board_size:
            raise ValueError(
                f"default board ({self.board!r}) has more than board_size ({self.board_size}) cards"
            )
        return self


class SystemConfig(StrictFrozenModel):
    """System-level configuration."""

    seed: int | None = Field(default=None)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")


class ApiConfig(StrictFrozenModel):
    """HTTP server configuration."""

    host: str = Field(default="127.0.0.1")
    port: Annotated[int, Field(ge=1, le=65535)] = Field(default=8000)


# ---------------------------------------------------------------------------
# Root config
# ---------------------------------------------------------------------------


class Config(StrictFrozenModel):
    """
    Complete configuration.

    All defaults are defined here in Python. YAML files provide only overrides.
    """

    defaults: InputDefaults = Field(default_factory=InputDefaults)
    system: SystemConfig = Field(default_factory=SystemConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)

    def to_dict(self) -> dict[str, Any]:
        """Serialize config to a plain dict (for JSON, logging, etc.)."""
        return self.model_dump()

    @classmethod
    def default(cls) -> "Config":
        """Return a Config populated with all defaults."""
        return cls()

    def merge(self, overrides: dict[str, Any]) -> "Config":
        """Return a new Config with the provided overrides merged in."""
        merged = deep_merge_dicts(self.model_dump(), overrides)
        return Config.model_validate(merged)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "Config":
        """Create Config from a dict merged over defaults."""
        return cls.default().merge(config_dict)
