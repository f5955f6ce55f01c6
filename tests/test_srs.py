from __future__ import annotations

import json
from datetime import date, timedelta

import pytest

from src.study.srs import (
    MIN_EASE_FACTOR,
    ReviewCard,
    is_due,
    new_card,
    normalize_key,
    schedule_review,
)


def _card(today: date, **overrides) -> ReviewCard:
    values = dict(
        key="λόγος",
        due_date=today,
        interval=1,
        repetition=1,
        ease_factor=2.5,
        last_reviewed=today - timedelta(days=1),
    )
    values.update(overrides)
    return ReviewCard(**values)


def test_new_card_starts_due_today(today: date) -> None:
    card = new_card("καί", today)

    assert card.key == "καί"
    assert card.interval == 0
    assert card.repetition == 0
    assert card.ease_factor == 2.5
    assert card.due_date == today
    assert card.last_reviewed is None


def test_compound_headwords_collapse_to_first_form(today: date) -> None:
    assert normalize_key("ὁ, ἡ, τό") == "ὁ"
    assert normalize_key("  λόγος ") == "λόγος"
    assert new_card("ὁ, ἡ, τό", today).key == "ὁ"


def test_is_due_compares_calendar_days(today: date) -> None:
    assert is_due(_card(today, due_date=today), today)
    assert is_due(_card(today, due_date=today - timedelta(days=3)), today)
    assert not is_due(_card(today, due_date=today + timedelta(days=1)), today)


def test_is_due_is_repeatable(today: date) -> None:
    card = _card(today, due_date=today + timedelta(days=2))
    later = today + timedelta(days=2)

    assert {is_due(card, later) for _ in range(5)} == {True}
    assert {is_due(card, today) for _ in range(5)} == {False}


def test_successful_reviews_follow_sm2_intervals(today: date) -> None:
    card = new_card("λύω", today)
    intervals = [card.interval]
    for _ in range(4):
        card = schedule_review(card, 4, today)
        intervals.append(card.interval)

    assert intervals[:4] == [0, 1, 6, 15]
    assert intervals == sorted(intervals)
    assert card.repetition == 4
    assert card.ease_factor == pytest.approx(2.5)


def test_failed_review_resets_progress(today: date) -> None:
    card = _card(today, repetition=4, interval=12, ease_factor=2.2)
    result = schedule_review(card, 2, today)

    assert result.repetition == 0
    assert result.interval == 1
    assert result.due_date == today + timedelta(days=1)
    assert result.ease_factor < 2.2


@pytest.mark.parametrize("quality", range(0, 6))
def test_ease_factor_never_drops_below_floor(today: date, quality: int) -> None:
    card = _card(today, ease_factor=MIN_EASE_FACTOR)
    for _ in range(3):
        card = schedule_review(card, quality, today)
        assert card.ease_factor >= MIN_EASE_FACTOR


def test_ease_factor_moves_with_quality(today: date) -> None:
    card = _card(today)

    assert schedule_review(card, 5, today).ease_factor == pytest.approx(2.6)
    assert schedule_review(card, 4, today).ease_factor == pytest.approx(2.5)
    assert schedule_review(card, 3, today).ease_factor == pytest.approx(2.36)
    assert schedule_review(card, 1, today).ease_factor == pytest.approx(1.96)


def test_interval_rounds_half_up(today: date) -> None:
    card = _card(today, repetition=2, interval=5, ease_factor=2.5)

    assert schedule_review(card, 4, today).interval == 13


def test_review_sets_due_and_last_reviewed_dates(today: date) -> None:
    card = _card(today, repetition=2, interval=6, ease_factor=2.5)
    result = schedule_review(card, 4, today)

    assert result.due_date == today + timedelta(days=15)
    assert result.last_reviewed == today
    assert result.key == card.key
    assert card.interval == 6  # original card is untouched


def test_out_of_range_quality_is_clamped(today: date) -> None:
    card = _card(today, repetition=3, interval=10)

    assert schedule_review(card, 9, today) == schedule_review(card, 5, today)
    assert schedule_review(card, -2, today) == schedule_review(card, 0, today)


def test_store_survives_json_round_trip(today: date) -> None:
    store = {
        "λόγος": _card(today, ease_factor=3),
        "ὁ": schedule_review(new_card("ὁ", today), 4, today),
        "καί": new_card("καί", today),
    }

    encoded = json.dumps({key: card.to_dict() for key, card in store.items()})
    decoded = {key: ReviewCard.from_dict(raw) for key, raw in json.loads(encoded).items()}

    assert decoded == store
    assert all(isinstance(card.ease_factor, float) for card in decoded.values())
    assert decoded["καί"].last_reviewed is None


def test_from_dict_rejects_incomplete_payload() -> None:
    with pytest.raises(ValueError):
        ReviewCard.from_dict({"interval": 1})
    with pytest.raises(ValueError):
        ReviewCard.from_dict({"key": "λόγος", "due_date": "not-a-date"})
    with pytest.raises(ValueError):
        ReviewCard.from_dict({"key": "λόγος", "due_date": "2025-03-10", "interval": None})
    with pytest.raises(ValueError):
        ReviewCard.from_dict({"key": "λόγος", "due_date": "2025-03-10", "last_reviewed": 5})
