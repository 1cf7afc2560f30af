import pytest

from ranker.cards import Card, deal
from ranker.errors import DuplicateCard, InvalidHandSize, ParseError
from ranker.evaluator import best_of, classify
from ranker.models import HandCategory
from ranker.showdown import resolve_round


def test_error_types_are_value_errors():
    for error in (ParseError, InvalidHandSize, DuplicateCard):
        assert issubclass(error, ValueError)


def test_failed_evaluation_does_not_affect_the_next_one():
    with pytest.raises(ParseError):
        classify("As Ks Qs Js Zs")
    with pytest.raises(InvalidHandSize):
        best_of("As Ks Qs Js 10s")
    assert classify("As Ks Qs Js 10s").category == HandCategory.ROYAL_FLUSH


def test_empty_hand_is_a_parse_error_not_a_high_card():
    with pytest.raises(ParseError, match="Empty hand"):
        classify([])


def test_round_with_bad_token_fails_fast():
    with pytest.raises(ParseError, match="Invalid suit"):
        resolve_round(["As", "Ks", "Qs", "Js", "10x"], [("Alice", ["2h", "3h"])])


def test_deal_raises_when_deck_exhausted():
    deck = [Card(14, "h"), Card(13, "d")]
    deal(deck, 2)
    with pytest.raises(ValueError, match="Not enough cards"):
        deal(deck, 1)
