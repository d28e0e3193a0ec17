"""
Unit tests for the suit catalog.

Covers catalog contents, lookups by code and text, and ordering.
"""

import pytest

from simple_cards import Suit, SuitColor, get_all_suits


@pytest.mark.unit
@pytest.mark.fast
class TestSuitCatalog:
    """Catalog contents"""

    def test_suit_counts(self):
        """The catalog holds exactly five suits"""
        assert len(Suit.all_suits()) == 5

    def test_catalog_order(self):
        """Suits come in construction order"""
        assert Suit.all_suits() == [
            Suit.NONE, Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES
        ]
        assert [suit.code for suit in get_all_suits()] == [0, 1, 2, 3, 4]

    def test_get_all_suits_returns_copy(self):
        """Changing the returned list does not change the catalog"""
        suits = get_all_suits()
        suits.clear()
        assert len(get_all_suits()) == 5

    def test_suit_attributes(self):
        """Titles, symbols, colours and emoji prefixes"""
        assert Suit.HEARTS.title == "Hearts"
        assert Suit.HEARTS.dark_symbol == "♥"
        assert Suit.HEARTS.light_symbol == "♡"
        assert Suit.HEARTS.color is SuitColor.RED
        assert Suit.HEARTS.emoji_prefix == 0x1F0B0

        assert Suit.SPADES.color is SuitColor.BLACK
        assert Suit.CLUBS.color is SuitColor.BLACK
        assert Suit.DIAMONDS.color is SuitColor.RED
        assert Suit.NONE.color is SuitColor.NONE

    def test_acronym_and_str(self):
        assert Suit.CLUBS.acronym == "C"
        assert Suit.NONE.acronym == "-"
        assert str(Suit.DIAMONDS) == "Diamonds"
        assert str(SuitColor.RED) == "Red"

    def test_is_joker(self):
        """Only the placeholder suit is the Joker suit"""
        assert Suit.NONE.is_joker
        assert not any(suit.is_joker for suit in Suit.all_suits()[1:])

    def test_single_instance_per_code(self):
        """Looking a suit up twice yields the same object"""
        assert Suit.from_code(3) is Suit.HEARTS
        assert Suit.from_text("hearts") is Suit.HEARTS
        assert Suit(3) is Suit.HEARTS


@pytest.mark.unit
@pytest.mark.fast
class TestSuitFromCode:
    """Suit.from_code lookups"""

    @pytest.mark.parametrize("suit", list(Suit))
    def test_code_round_trip(self, suit):
        assert Suit.from_code(suit.code) is suit

    @pytest.mark.parametrize("suit", list(Suit))
    def test_symbols(self, suit):
        """Dark and light symbols both resolve"""
        assert Suit.from_code(suit.dark_symbol) is suit
        assert Suit.from_code(suit.light_symbol) is suit

    @pytest.mark.parametrize("value,expected", [
        ("c", Suit.CLUBS), ("C", Suit.CLUBS),
        ("d", Suit.DIAMONDS), ("D", Suit.DIAMONDS),
        ("h", Suit.HEARTS), ("H", Suit.HEARTS),
        ("s", Suit.SPADES), ("S", Suit.SPADES),
        ("-", Suit.NONE),
    ])
    def test_acronyms(self, value, expected):
        assert Suit.from_code(value) is expected

    @pytest.mark.parametrize("value,expected", [
        ("0", Suit.NONE), ("1", Suit.CLUBS), ("2", Suit.DIAMONDS),
        ("3", Suit.HEARTS), ("4", Suit.SPADES),
    ])
    def test_code_digits(self, value, expected):
        assert Suit.from_code(value) is expected

    @pytest.mark.parametrize("value", [99, -1, 5, "x", "Z", "5", "hh", "", None, 1.5, b"h", True, False])
    def test_unknown_values(self, value):
        """Unknown values give None instead of raising"""
        assert Suit.from_code(value) is None


@pytest.mark.unit
@pytest.mark.fast
class TestSuitFromText:
    """Suit.from_text lookups"""

    @pytest.mark.parametrize("suit", list(Suit))
    def test_title_round_trip(self, suit):
        assert Suit.from_text(suit.title) is suit

    @pytest.mark.parametrize("value", ["", "   ", "\t", None])
    def test_blank_is_joker_suit(self, value):
        assert Suit.from_text(value) is Suit.NONE

    @pytest.mark.parametrize("value,expected", [
        ("hearts", Suit.HEARTS),
        ("HEARTS", Suit.HEARTS),
        ("  Diamonds ", Suit.DIAMONDS),
        ("sPaDeS", Suit.SPADES),
    ])
    def test_title_ignores_case(self, value, expected):
        assert Suit.from_text(value) is expected

    def test_single_character_is_code(self):
        """One character is resolved like from_code"""
        assert Suit.from_text("h") is Suit.HEARTS
        assert Suit.from_text("♣") is Suit.CLUBS
        assert Suit.from_text(" 4 ") is Suit.SPADES

    @pytest.mark.parametrize("value", ["Stars", "Heart", "Clubs!", "x"])
    def test_unknown_text(self, value):
        assert Suit.from_text(value) is None


@pytest.mark.unit
@pytest.mark.fast
class TestSuitOrdering:
    """Comparison by code"""

    def test_compare_with_none(self):
        """None sorts before any suit"""
        assert Suit.compare(None, None) == 0
        assert Suit.compare(None, Suit.NONE) == -1
        assert Suit.compare(Suit.NONE, None) == 1

    def test_compare_by_code(self):
        assert Suit.compare(Suit.CLUBS, Suit.SPADES) == -1
        assert Suit.compare(Suit.SPADES, Suit.CLUBS) == 1
        assert Suit.compare(Suit.HEARTS, Suit.HEARTS) == 0

    def test_rich_comparison(self):
        assert Suit.NONE < Suit.CLUBS < Suit.DIAMONDS < Suit.HEARTS < Suit.SPADES
        assert Suit.SPADES >= Suit.HEARTS
        assert Suit.HEARTS <= Suit.HEARTS
        assert max(Suit) is Suit.SPADES

    def test_sorting(self):
        assert sorted(reversed(Suit.all_suits())) == Suit.all_suits()

    def test_compare_with_other_types(self):
        with pytest.raises(TypeError):
            Suit.CLUBS < 2
