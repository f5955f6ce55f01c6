"""Daily study counters and streak tracking."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Any, Mapping, Optional


STREAK_THRESHOLD = 10


def _parse_date(raw: Any) -> Optional[date]:
    if not raw:
        return None
    return date.fromisoformat(raw)


def _format_date(value: Optional[date]) -> str:
    return value.isoformat() if value else ""


@dataclass(frozen=True, slots=True)
class StudyStats:
    """Aggregated study activity for one learner."""

    streak: int = 0
    last_streak_date: Optional[date] = None
    cards_studied_today: int = 0
    last_study_date: Optional[date] = None
    total_reviewed: int = 0
    total_correct: int = 0

    @property
    def accuracy(self) -> float:
        if not self.total_reviewed:
            return 0.0
        return self.total_correct / self.total_reviewed

    def to_dict(self) -> dict[str, Any]:
        return {
            "streak": self.streak,
            "last_streak_date": _format_date(self.last_streak_date),
            "cards_studied_today": self.cards_studied_today,
            "last_study_date": _format_date(self.last_study_date),
            "total_reviewed": self.total_reviewed,
            "total_correct": self.total_correct,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> StudyStats:
        """Build stats from a possibly partial payload; missing fields use defaults."""
        try:
            return cls(
                streak=int(payload.get("streak", 0)),
                last_streak_date=_parse_date(payload.get("last_streak_date")),
                cards_studied_today=int(payload.get("cards_studied_today", 0)),
                last_study_date=_parse_date(payload.get("last_study_date")),
                total_reviewed=int(payload.get("total_reviewed", 0)),
                total_correct=int(payload.get("total_correct", 0)),
            )
        except (TypeError, AttributeError) as exc:
            raise ValueError(f"Invalid study stats payload: {payload!r}") from exc


def _streak_alive(last_streak_date: Optional[date], today: date) -> bool:
    return last_streak_date in (today - timedelta(days=1), today)


def roll_over(stats: StudyStats, today: date) -> StudyStats:
    """Reset the daily counter, and a lapsed streak, when a new day starts."""
    if stats.last_study_date == today:
        return stats
    streak = stats.streak if _streak_alive(stats.last_streak_date, today) else 0
    return replace(stats, cards_studied_today=0, streak=streak)


def record_review(prev: StudyStats, correct: bool, today: date) -> StudyStats:
    """Return stats updated with one more review on ``today``.

    The streak grows at most once per day, on the review that brings the
    day's count to ``STREAK_THRESHOLD``.
    """
    yesterday = today - timedelta(days=1)
    is_new_day = prev.last_study_date != today
    cards_today = (0 if is_new_day else prev.cards_studied_today) + 1

    streak = prev.streak
    last_streak_date = prev.last_streak_date

    if is_new_day and not _streak_alive(last_streak_date, today):
        streak = 0

    if cards_today == STREAK_THRESHOLD:
        if last_streak_date is None or last_streak_date == yesterday:
            streak += 1
        elif last_streak_date != today:
            streak = 1
        last_streak_date = today

    return StudyStats(
        streak=streak,
        last_streak_date=last_streak_date,
        cards_studied_today=cards_today,
        last_study_date=today,
        total_reviewed=prev.total_reviewed + 1,
        total_correct=prev.total_correct + (1 if correct else 0),
    )
