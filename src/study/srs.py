"""Spaced-repetition scheduling helpers for study cards (SM-2)."""

from __future__ import annotations

import math
import unicodedata
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Any, Mapping, Optional


DEFAULT_EASE_FACTOR = 2.5
MIN_EASE_FACTOR = 1.3
MIN_QUALITY = 0
MAX_QUALITY = 5
PASSING_QUALITY = 3

QUALITY_CORRECT = 4
QUALITY_INCORRECT = 1


@dataclass(frozen=True, slots=True)
class ReviewCard:
    """Scheduling state for a single study key."""

    key: str
    due_date: date
    interval: int = 0
    repetition: int = 0
    ease_factor: float = DEFAULT_EASE_FACTOR
    last_reviewed: Optional[date] = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation of the card."""
        return {
            "key": self.key,
            "interval": self.interval,
            "repetition": self.repetition,
            "ease_factor": float(self.ease_factor),
            "due_date": self.due_date.isoformat(),
            "last_reviewed": self.last_reviewed.isoformat() if self.last_reviewed else "",
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> ReviewCard:
        """Build a card from its serialized form, raising ValueError on bad data."""
        key = payload.get("key")
        if not isinstance(key, str) or not key:
            raise ValueError(f"Invalid review card key: {key!r}")

        try:
            raw_last = payload.get("last_reviewed") or ""
            return cls(
                key=key,
                due_date=date.fromisoformat(payload["due_date"]),
                interval=int(payload.get("interval", 0)),
                repetition=int(payload.get("repetition", 0)),
                ease_factor=float(payload.get("ease_factor", DEFAULT_EASE_FACTOR)),
                last_reviewed=date.fromisoformat(raw_last) if raw_last else None,
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"Invalid review card payload: {payload!r}") from exc


def normalize_key(lemma: str) -> str:
    """Collapse a dictionary headword to the lemma used as a card key.

    Compound headwords such as ``"ὁ, ἡ, τό"`` keep only their first form so
    that keys stay stable across vocabulary data revisions.
    """
    head = lemma.split(",", 1)[0]
    return unicodedata.normalize("NFC", head.strip())


def new_card(key: str, today: date) -> ReviewCard:
    """Return a fresh card that is due immediately."""
    return ReviewCard(key=normalize_key(key), due_date=today)


def is_due(card: ReviewCard, today: date) -> bool:
    return card.due_date <= today


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def next_ease_factor(ease_factor: float, quality: int) -> float:
    """Apply the SM-2 ease update, bounded below by ``MIN_EASE_FACTOR``."""
    penalty = MAX_QUALITY - quality
    updated = ease_factor + 0.1 - penalty * (0.08 + penalty * 0.02)
    return max(MIN_EASE_FACTOR, updated)


def schedule_review(card: ReviewCard, quality: int, today: date) -> ReviewCard:
    """Return the card that results from reviewing ``card`` with ``quality``.

    ``quality`` follows SM-2 (0-5); anything below 3 counts as a lapse.
    Values outside that range are clamped.
    """
    quality = max(MIN_QUALITY, min(MAX_QUALITY, quality))
    interval = card.interval
    repetition = card.repetition

    if quality < PASSING_QUALITY:
        repetition = 0
        interval = 1
    else:
        if repetition == 0:
            interval = 1
        elif repetition == 1:
            interval = 6
        else:
            interval = _round_half_up(interval * card.ease_factor)
        repetition += 1

    return replace(
        card,
        interval=interval,
        repetition=repetition,
        ease_factor=next_ease_factor(card.ease_factor, quality),
        due_date=today + timedelta(days=interval),
        last_reviewed=today,
    )
