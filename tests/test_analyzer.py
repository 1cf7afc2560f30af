import pytest

from ranker.analyzer import NO_HAND_ADVICE, advice_for, analyze_hand
from ranker.errors import InvalidHandSize, ParseError
from ranker.models import UNEVALUABLE, HandCategory, RankResult


def test_monster_hand_advice():
    analysis = analyze_hand("As Ks Qs Js 10s")
    assert analysis.evaluable
    assert analysis.rank_name == "Royal Flush"
    assert analysis.strength == 9
    assert "monster" in analysis.advice
    assert [card.label for card in analysis.cards] == ["As", "Ks", "Qs", "Js", "10s"]


def test_straight_and_flush_warn_to_be_cautious():
    assert "be cautious" in analyze_hand("9h 8d 7c 6s 5h").advice
    assert "be cautious" in analyze_hand("Ah Jh 9h 6h 2h").advice


def test_weak_hand_advice():
    analysis = analyze_hand(["As", "Kd", "Jh", "9c", "4d"])
    assert analysis.result.category == HandCategory.HIGH_CARD
    assert analysis.strength == 0
    assert analysis.advice.startswith("Very weak")


@pytest.mark.parametrize("empty", ["", "   ", [], None])
def test_empty_input_is_not_a_high_card(empty):
    analysis = analyze_hand(empty)
    assert analysis.result is UNEVALUABLE
    assert not analysis.evaluable
    assert analysis.rank_name == "N/A"
    assert analysis.strength is None
    assert analysis.advice == NO_HAND_ADVICE
    assert analysis.cards == ()


def test_advice_covers_every_category():
    for category in HandCategory:
        assert advice_for(RankResult(category=category, kicker_order=(14,)))
    assert advice_for(UNEVALUABLE) == NO_HAND_ADVICE


def test_bad_input_still_raises():
    with pytest.raises(ParseError):
        analyze_hand("As Ks Qs Js Xs")
    with pytest.raises(InvalidHandSize):
        analyze_hand("As Ks")


def test_analyses_do_not_leak_between_calls():
    first = analyze_hand("As Ks Qs Js 10s")
    analyze_hand("")
    second = analyze_hand("2c 7d 9h Js Kd")
    assert first.rank_name == "Royal Flush"
    assert second.rank_name == "High Card"
