"""
Tests for card parsing and deck building.
"""

from collections import Counter

import numpy as np
import pytest

from equity_input.game.cards import Card, CardGroup, build_deck, parse_card, split_card_list
from equity_input.game.errors import ValidationError


class TestCard:
    def test_cached(self):
        assert Card.new("As") is Card.new("As")

    def test_repr(self):
        assert repr(Card.new("Th")) == "Th"

    def test_equality(self):
        assert Card.new("Kd") == Card(Card.new("Kd").card_int)
        assert Card.new("Kd") != Card.new("Kh")
        assert Card.new("Kd") != "Kd"

    def test_full_deck(self):
        deck = Card.get_full_deck()
        assert len(deck) == 52
        assert len(set(deck)) == 52

    def test_full_deck_is_a_copy(self):
        deck = Card.get_full_deck()
        deck.pop()
        assert len(Card.get_full_deck()) == 52


class TestSplitCardList:
    def test_split(self):
        assert split_card_list("As,Kd") == ["As", "Kd"]

    def test_empty(self):
        assert split_card_list("") == []

    def test_strips_whitespace_and_empty_tokens(self):
        assert split_card_list(" As , Kd,,") == ["As", "Kd"]

    def test_keeps_case(self):
        assert split_card_list("as,AS") == ["as", "AS"]


class TestCardGroup:
    def test_parse(self):
        group = CardGroup("As,Kd")
        assert len(group) == 2
        assert group.cards == (Card.new("As"), Card.new("Kd"))
        assert list(group) == [Card.new("As"), Card.new("Kd")]

    def test_empty(self):
        assert len(CardGroup("")) == 0

    def test_order_preserved(self):
        assert [repr(c) for c in CardGroup("2c,Ah,7d")] == ["2c", "Ah", "7d"]

    @pytest.mark.parametrize("card_list", ["Xs", "A", "10h", "As,K"])
    def test_malformed(self, card_list):
        with pytest.raises(ValidationError) as exc_info:
            CardGroup(card_list, field="board")
        assert exc_info.value.field == "board"

    def test_parse_card_reports_token(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_card("Qx", field="hands")
        assert exc_info.value.value == "Qx"
        assert exc_info.value.field == "hands"


class TestBuildDeck:
    def test_single_deck(self):
        deck = build_deck()
        assert len(deck) == 52
        assert set(deck) == set(Card.get_full_deck())

    def test_multiple_decks(self):
        deck = build_deck(3)
        counts = Counter(deck)
        assert len(deck) == 156
        assert set(counts.values()) == {3}

    def test_unshuffled(self):
        assert build_deck(shuffled=False) == Card.get_full_deck()

    def test_seeded(self):
        first = build_deck(rng=np.random.default_rng(42))
        second = build_deck(rng=np.random.default_rng(42))
        assert first == second
        assert first != Card.get_full_deck()

    @pytest.mark.parametrize("num_decks", [0, -1, 1.5, True])
    def test_invalid_num_decks(self, num_decks):
        with pytest.raises(ValidationError) as exc_info:
            build_deck(num_decks)
        assert exc_info.value.field == "numDecks"
