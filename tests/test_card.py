"""Tests for the card models."""

import pytest

from casino_odds.models.card import Card, Rank, Suit, parse_cards


class TestSuit:
    """Tests for Suit parsing."""

    def test_from_symbol_accepts_letters_symbols_and_names(self):
        assert Suit.from_symbol("s") is Suit.SPADES
        assert Suit.from_symbol("♥") is Suit.HEARTS
        assert Suit.from_symbol("Diamonds") is Suit.DIAMONDS
        assert Suit.from_symbol("C") is Suit.CLUBS

    def test_unknown_suit(self):
        with pytest.raises(ValueError, match="Unknown suit"):
            Suit.from_symbol("x")

    def test_letter(self):
        assert Suit.SPADES.letter == "s"
        assert Suit.CLUBS.letter == "c"


class TestRank:
    """Tests for Rank labels."""

    def test_labels(self):
        assert Rank.ACE.label == "A"
        assert Rank.KING.label == "K"
        assert Rank.TEN.label == "10"
        assert Rank.TWO.label == "2"

    def test_from_char(self):
        assert Rank.from_char("t") is Rank.TEN
        assert Rank.from_char("10") is Rank.TEN
        assert Rank.from_char("q") is Rank.QUEEN
        assert Rank.from_char("7") is Rank.SEVEN

    def test_unknown_rank(self):
        with pytest.raises(ValueError, match="Unknown rank"):
            Rank.from_char("1")


class TestCard:
    """Tests for the Card value type."""

    def test_parse(self):
        card = Card.parse("Ah")
        assert card.rank == 14
        assert card.suit is Suit.HEARTS

    def test_parse_ten_forms(self):
        assert Card.parse("10♦") == Card.parse("Td") == Card(10, Suit.DIAMONDS)

    def test_parse_rejects_garbage(self):
        with pytest.raises(ValueError):
            Card.parse("A")
        with pytest.raises(ValueError):
            Card.parse("Zz")

    def test_invalid_rank(self):
        with pytest.raises(ValueError, match="Invalid rank"):
            Card(1, Suit.SPADES)
        with pytest.raises(ValueError, match="Invalid rank"):
            Card(15, Suit.SPADES)

    def test_equality_and_hash(self):
        assert Card(14, Suit.SPADES) == Card(Rank.ACE, Suit.SPADES)
        assert Card(14, Suit.SPADES) != Card(14, Suit.HEARTS)
        assert len({Card(14, Suit.SPADES), Card(14, Suit.SPADES), Card(13, Suit.SPADES)}) == 2

    def test_immutable(self):
        card = Card(2, Suit.CLUBS)
        with pytest.raises(AttributeError):
            card.rank = 3

    def test_string_forms(self):
        card = Card(12, Suit.SPADES)
        assert str(card) == "Q♠"
        assert card.short == "Qs"
        assert Card(10, Suit.HEARTS).short == "Th"
        assert str(Card(10, Suit.HEARTS)) == "10♥"

    def test_parse_cards(self):
        cards = parse_cards("As Kh, 10d")
        assert cards == [Card(14, Suit.SPADES), Card(13, Suit.HEARTS), Card(10, Suit.DIAMONDS)]
        assert parse_cards("") == []
