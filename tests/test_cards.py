import pytest

from showdown.cards import Card, Suit, cards_to_labels, parse_cards, parse_label


def test_parse_label_reads_symbols_and_digits():
    assert parse_label("4c") == Card(4, Suit.CLUBS)
    assert parse_label("Th") == Card(10, Suit.HEARTS)
    assert parse_label("10h") == Card(10, Suit.HEARTS)
    assert parse_label("Js") == Card(11, Suit.SPADES)
    assert parse_label("qd") == Card(12, Suit.DIAMONDS)
    assert parse_label("Ah") == Card(14, Suit.HEARTS)


def test_labels_round_trip_through_card_label():
    labels = ["2c", "9d", "Th", "Ks", "Ac"]
    assert cards_to_labels(parse_cards(labels)) == labels


def test_card_validation_rejects_invalid_values():
    with pytest.raises(ValueError, match="Invalid rank"):
        Card(1, Suit.HEARTS)
    with pytest.raises(ValueError, match="Invalid rank"):
        Card(15, Suit.HEARTS)
    with pytest.raises(ValueError, match="Invalid suit"):
        Card(14, "x")  # type: ignore[arg-type]


def test_parse_label_rejects_malformed_labels():
    with pytest.raises(ValueError, match="Invalid card label"):
        parse_label("A")
    with pytest.raises(ValueError, match="Invalid rank"):
        parse_label("Xh")
    with pytest.raises(ValueError, match="Invalid rank"):
        parse_label("1h")
    with pytest.raises(ValueError, match="Invalid suit"):
        parse_label("Ax")


def test_cards_are_immutable_and_hashable():
    card = Card(9, Suit.SPADES)
    with pytest.raises(AttributeError):
        card.rank = 10  # type: ignore[misc]
    assert len({card, Card(9, Suit.SPADES)}) == 1
