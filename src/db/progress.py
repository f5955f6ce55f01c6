"""Persistence of a learner's review cards and study stats."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict

from sqlalchemy.ext.asyncio import AsyncSession

from src.study.session import StudySession
from src.study.srs import ReviewCard, normalize_key
from src.study.stats import StudyStats, roll_over

from .blobs import VersionedBlob, delete_blob, read_blob, write_blob


LOGGER = logging.getLogger(__name__)

_CAMEL_CARD_FIELDS = {
    "easeFactor": "ease_factor",
    "dueDate": "due_date",
    "lastReviewed": "last_reviewed",
}
_CAMEL_STATS_FIELDS = {
    "lastStreakDate": "last_streak_date",
    "cardsStudiedToday": "cards_studied_today",
    "lastStudyDate": "last_study_date",
    "totalReviewed": "total_reviewed",
    "totalCorrect": "total_correct",
}


def _rename_fields(record: Dict[str, Any], names: Dict[str, str]) -> Dict[str, Any]:
    return {names.get(name, name): value for name, value in record.items()}


def collapse_card_keys(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Version 1 -> 2: re-key cards by canonical lemma, keeping the first duplicate."""
    migrated: Dict[str, Any] = {}
    for raw_key, raw_card in payload.items():
        key = normalize_key(raw_key)
        if key in migrated:
            LOGGER.debug("Dropping duplicate card %r (collapsed to %r).", raw_key, key)
            continue
        card = _rename_fields(dict(raw_card), _CAMEL_CARD_FIELDS)
        card["key"] = key
        migrated[key] = card
    return migrated


def rename_stats_fields(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Version 1 -> 2: switch stats to the current field names."""
    return _rename_fields(dict(payload), _CAMEL_STATS_FIELDS)


def merge_cards(current: Any, legacy: Any) -> Any:
    """Add legacy cards whose keys the current store does not have yet."""
    if not isinstance(current, dict) or not isinstance(legacy, dict):
        return current
    merged = dict(current)
    for key, card in legacy.items():
        merged.setdefault(key, card)
    return merged


REVIEW_STORE = VersionedBlob(
    key="greek-tools-srs",
    version=2,
    migrations={1: collapse_card_keys},
    legacy_keys={"greek-tools-srs-v1": 1},
    merge=merge_cards,
)
STATS_STORE = VersionedBlob(
    key="greek-tools-stats",
    version=2,
    migrations={1: rename_stats_fields},
    legacy_keys={"greek-tools-stats-v1": 1},
)


async def load_review_store(session: AsyncSession) -> Dict[str, ReviewCard]:
    """Return every stored card keyed by its canonical key."""
    payload = await read_blob(session, REVIEW_STORE)
    if not isinstance(payload, dict):
        return {}

    cards: Dict[str, ReviewCard] = {}
    for raw_key, raw_card in payload.items():
        if not isinstance(raw_card, dict):
            LOGGER.warning("Skipping malformed review card %r.", raw_key)
            continue
        try:
            card = ReviewCard.from_dict(raw_card)
        except ValueError:
            LOGGER.warning("Skipping malformed review card %r.", raw_key)
            continue
        cards[card.key] = card
    return cards


async def save_review_store(session: AsyncSession, cards: Dict[str, ReviewCard]) -> None:
    """Replace the stored review cards with ``cards``."""
    await write_blob(session, REVIEW_STORE, {key: card.to_dict() for key, card in cards.items()})


async def load_stats(session: AsyncSession, today: date) -> StudyStats:
    """Return stats as of ``today`` (the daily counter resets on a new day)."""
    payload = await read_blob(session, STATS_STORE)
    if not isinstance(payload, dict):
        return StudyStats()
    try:
        stats = StudyStats.from_dict(payload)
    except ValueError:
        LOGGER.warning("Stored study stats are malformed; starting from empty stats.")
        return StudyStats()
    return roll_over(stats, today)


async def save_stats(session: AsyncSession, stats: StudyStats) -> None:
    """Replace the stored study stats."""
    await write_blob(session, STATS_STORE, stats.to_dict())


async def load_study_session(session: AsyncSession, today: date) -> StudySession:
    """Load cards and stats into an in-memory session for ``today``."""
    return StudySession(
        cards=await load_review_store(session),
        stats=await load_stats(session, today),
    )


async def save_study_session(session: AsyncSession, study: StudySession) -> None:
    """Persist the session's cards and stats in the current transaction."""
    await save_review_store(session, study.cards)
    await save_stats(session, study.stats)


async def reset_progress(session: AsyncSession) -> None:
    """Discard all cards and stats."""
    await delete_blob(session, REVIEW_STORE)
    await delete_blob(session, STATS_STORE)
    LOGGER.info("Study progress has been reset.")
