"""
Input validation for equity computations.

Checks run in a fixed order and stop at the first failure, so an input that
breaks several rules always reports the same field:

    1. numPlayers / hands discriminator (see :func:`parse_input`)
    2. returnHandStats, returnTieHandStats
    3. numPlayers
    4. boardSize
    5. numDecks
    6. board
    7. iterations
    8. handSize
    9. hands
   10. card uniqueness across hands and board
"""

from __future__ import annotations

import logging
import numbers
from typing import Any, Callable, Mapping

from equity_input.constants import MAX_SAFE_INTEGER
from equity_input.game.cards import CardGroup, split_card_list
from equity_input.game.errors import ValidationError
from equity_input.game.inputs import ByExplicitHands, ByHandCount, RawInput, parse_input
from equity_input.shared.config import InputDefaults
from equity_input.shared.config_loader import get_config

logger = logging.getLogger(__name__)


def is_safe_integer(value: Any) -> bool:
    """True for integers (or integral floats) a JSON client can represent exactly."""
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Integral):
        return abs(int(value)) <= MAX_SAFE_INTEGER
    if isinstance(value, numbers.Real):
        number = float(value)
        return number.is_integer() and abs(number) <= MAX_SAFE_INTEGER
    return False


def _check_integer(field: str, value: Any, minimum: int, reason: str) -> None:
    if value is None:
        return
    if not is_safe_integer(value) or value < minimum:
        raise ValidationError(field, value, reason)


def _effective_board(raw: RawInput, defaults: InputDefaults) -> str:
    return defaults.board if raw.board is None else raw.board


def _check_flags(raw: RawInput, defaults: InputDefaults) -> None:
    for field, value in (
        ("returnHandStats", raw.return_hand_stats),
        ("returnTieHandStats", raw.return_tie_hand_stats),
    ):
        if value is not None and not isinstance(value, bool):
            raise ValidationError(field, value, f'"{field}" must be a boolean.')


def _check_num_players(raw: RawInput, defaults: InputDefaults) -> None:
    _check_integer(
        "numPlayers", raw.num_players, 1, '"numPlayers" must be an integer greater than 0.'
    )
    if (
        isinstance(raw, ByExplicitHands)
        and raw.num_players is not None
        and isinstance(raw.hands, (list, tuple))
        and raw.num_players < len(raw.hands)
    ):
        raise ValidationError(
            "numPlayers",
            raw.num_players,
            f'"numPlayers" must be equal to or greater than the number of hands ({len(raw.hands)}).',
        )


def _check_board_size(raw: RawInput, defaults: InputDefaults) -> None:
    _check_integer(
        "boardSize", raw.board_size, 0, '"boardSize" must be a non-negative integer.'
    )


def _check_num_decks(raw: RawInput, defaults: InputDefaults) -> None:
    _check_integer("numDecks", raw.num_decks, 1, '"numDecks" must be an integer greater than 0.')


def _check_board(raw: RawInput, defaults: InputDefaults) -> None:
    board = _effective_board(raw, defaults)
    if not isinstance(board, str):
        raise ValidationError("board", board, '"board" must be a string.')

    board_size = defaults.board_size if raw.board_size is None else raw.board_size
    if len(CardGroup(board, field="board")) > board_size:
        raise ValidationError(
            "board", board, f'"board" cannot contain more than {int(board_size)} cards.'
        )


def _check_iterations(raw: RawInput, defaults: InputDefaults) -> None:
    _check_integer(
        "iterations", raw.iterations, 1, '"iterations" must be an integer greater than 0.'
    )


def _check_hand_size(raw: RawInput, defaults: InputDefaults) -> None:
    _check_integer("handSize", raw.hand_size, 0, '"handSize" must be a non-negative integer.')


def _check_hands(raw: RawInput, defaults: InputDefaults) -> None:
    if not isinstance(raw, ByExplicitHands):
        return

    hands = raw.hands
    if not isinstance(hands, (list, tuple)) or not all(isinstance(h, str) for h in hands):
        raise ValidationError(
            "hands", hands, '"hands" must be a list of strings like ["5c,Th"].'
        )
    if not hands and raw.num_players is None:
        raise ValidationError(
            "hands", hands, '"hands" must contain at least one hand when "numPlayers" is absent.'
        )

    hand_size = defaults.hand_size if raw.hand_size is None else raw.hand_size
    for hand in hands:
        if len(CardGroup(hand, field="hands")) > hand_size:
            raise ValidationError(
                "hands", hand, f"Each hand must specify at most {int(hand_size)} cards."
            )


def _check_unique_cards(raw: RawInput, defaults: InputDefaults) -> None:
    # Compares raw tokens, so "As" and "as" count as different cards.
    # Empty tokens are skipped: ["", ""] means two unspecified hands, not a
    # repeated card, although a plain split-and-compare would reject it.
    sources: list[tuple[str, str]] = []
    if isinstance(raw, ByExplicitHands):
        sources.extend(("hands", hand) for hand in raw.hands)
    sources.append(("board", _effective_board(raw, defaults)))

    seen: set[str] = set()
    for field, card_list in sources:
        for token in split_card_list(card_list):
            if token in seen:
                raise ValidationError(field, token, "Input cards must be unique.")
            seen.add(token)


_CHECKS: tuple[Callable[[RawInput, InputDefaults], None], ...] = (
    _check_flags,
    _check_num_players,
    _check_board_size,
    _check_num_decks,
    _check_board,
    _check_iterations,
    _check_hand_size,
    _check_hands,
    _check_unique_cards,
)


def validate_input(
    raw: RawInput | Mapping[str, Any], defaults: InputDefaults | None = None
) -> None:
    """
    Validate an equity input, failing on the first broken rule.

    Args:
        raw: Parsed input, or a mapping that is parsed first
        defaults: Defaults used for absent ``boardSize``/``handSize``/``board``;
            the process-wide config defaults when omitted

    Raises:
        ValidationError: Describing the first failing field
    """
    if not isinstance(raw, (ByHandCount, ByExplicitHands)):
        raw = parse_input(raw)
    if defaults is None:
        defaults = get_config().defaults

    try:
        for check in _CHECKS:
            check(raw, defaults)
    except ValidationError as exc:
        logger.debug(f"Rejected input on {exc.field}: {exc.reason}")
        raise

    logger.debug(f"Validated {type(raw).__name__} input")
