"""
Card parsing for equity inputs.

Wraps the treys card encoding and turns comma-separated card lists such as
``"As,Kd"`` into ordered groups of cards.
"""

from __future__ import annotations

import logging
from typing import Iterator

import numpy as np
from treys import Card as TreysCard

from equity_input.constants import CARD_DELIMITER, RANKS, SUITS
from equity_input.game.errors import ValidationError
from equity_input.utils.sequences import shuffle

logger = logging.getLogger(__name__)

# Module-level caches
_CARD_CACHE: dict[str, "Card"] = {}
_FULL_DECK_CACHE: list["Card"] | None = None


class Card:
    """
    Card backed by a treys card integer.

    Card objects are cached: ``Card.new("As")`` always returns the same object.
    """

    def __init__(self, card_int: int):
        self.card_int = card_int

    @classmethod
    def new(cls, card_str: str) -> "Card":
        """
        Create a card from its two-character notation (e.g. 'As', 'Th', '2d').

        Raises:
            KeyError: If the rank or suit character is unknown
        """
        if card_str not in _CARD_CACHE:
            _CARD_CACHE[card_str] = cls(TreysCard.new(card_str))
        return _CARD_CACHE[card_str]

    @classmethod
    def get_full_deck(cls) -> list["Card"]:
        """Return a copy of the 52-card deck."""
        global _FULL_DECK_CACHE

        if _FULL_DECK_CACHE is None:
            _FULL_DECK_CACHE = [cls.new(f"{rank}{suit}") for rank in RANKS for suit in SUITS]

        return _FULL_DECK_CACHE.copy()

    def __str__(self) -> str:
        return TreysCard.int_to_pretty_str(self.card_int)

    def __repr__(self) -> str:
        return TreysCard.int_to_str(self.card_int)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return False
        return self.card_int == other.card_int

    def __hash__(self) -> int:
        return hash(self.card_int)


def split_card_list(card_list: str) -> list[str]:
    """
    Split a card list into its raw tokens.

    Surrounding whitespace is stripped and empty tokens are dropped, so
    ``""`` yields no tokens and ``"As, Kd"`` yields ``["As", "Kd"]``.
    Tokens are not otherwise normalized (``"as"`` stays ``"as"``).
    """
    tokens = (token.strip() for token in card_list.split(CARD_DELIMITER))
    return [token for token in tokens if token]


def parse_card(token: str, field: str = "cards") -> Card:
    """
    Parse a single card token.

    Args:
        token: Two-character card such as 'Kd'
        field: Input field the token came from, used in the error

    Raises:
        ValidationError: If the token is not a valid card
    """
    if len(token) != 2:
        raise ValidationError(field, token, f'"{field}" contains a malformed card.')
    try:
        return Card.new(token)
    except KeyError as exc:
        raise ValidationError(field, token, f'"{field}" contains an unknown card.') from exc


class CardGroup:
    """
    Ordered group of cards parsed from a card list string.

    Examples:
        >>> group = CardGroup("As,Kd")
        >>> len(group)
        2
        >>> group.cards
        (As, Kd)
    """

    def __init__(self, card_list: str, field: str = "cards"):
        self.source = card_list
        self.cards: tuple[Card, ...] = tuple(
            parse_card(token, field) for token in split_card_list(card_list)
        )

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __repr__(self) -> str:
        return f"CardGroup({self.source!r})"


def build_deck(
    num_decks: int = 1,
    rng: np.random.Generator | None = None,
    shuffled: bool = True,
) -> list[Card]:
    """
    Build the card pool for ``num_decks`` standard decks.

    Args:
        num_decks: Number of 52-card decks to combine
        rng: Random generator used for shuffling
        shuffled: Whether to shuffle the pool in place before returning it

    Returns:
        List of ``52 * num_decks`` cards

    Raises:
        ValidationError: If num_decks is smaller than 1
    """
    if isinstance(num_decks, bool) or not isinstance(num_decks, int) or num_decks < 1:
        raise ValidationError(
            "numDecks", num_decks, '"numDecks" must be an integer greater than 0.'
        )

    deck = Card.get_full_deck() * num_decks
    if shuffled:
        shuffle(deck, rng)
    logger.debug(f"Built {'shuffled' if shuffled else 'ordered'} pool of {num_decks} deck(s)")
    return deck
