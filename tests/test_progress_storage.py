from __future__ import annotations

import json
import logging
from datetime import date, timedelta

import pytest
from sqlalchemy import select

from src.db import StoredBlob
from src.db.blobs import VersionedBlob, read_blob, write_blob
from src.db.progress import (
    REVIEW_STORE,
    STATS_STORE,
    load_review_store,
    load_stats,
    load_study_session,
    reset_progress,
    save_study_session,
)
from src.study.session import StudySession
from src.study.stats import StudyStats


async def _put_row(session_factory, key: str, value: str, version: int = 1) -> None:
    async with session_factory() as session:
        async with session.begin():
            session.add(StoredBlob(key=key, version=version, value=value))


async def _rows(session_factory) -> dict[str, StoredBlob]:
    async with session_factory() as session:
        result = await session.execute(select(StoredBlob))
        return {row.key: row for row in result.scalars()}


@pytest.mark.asyncio
async def test_empty_database_yields_empty_progress(session_factory, today: date) -> None:
    async with session_factory() as session:
        async with session.begin():
            study = await load_study_session(session, today)

    assert study.cards == {}
    assert study.stats == StudyStats()


@pytest.mark.asyncio
async def test_progress_round_trip(session_factory, today: date) -> None:
    study = StudySession()
    study.answer_form("λόγος", "λόγος", "λόγος", today)
    study.answer_form("ὁ, ἡ, τό", "ο", "ὁ", today)

    async with session_factory() as session:
        async with session.begin():
            await save_study_session(session, study)

    async with session_factory() as session:
        async with session.begin():
            loaded = await load_study_session(session, today)

    assert loaded.cards == study.cards
    assert loaded.stats == study.stats

    rows = await _rows(session_factory)
    assert set(rows) == {REVIEW_STORE.key, STATS_STORE.key}
    assert rows[REVIEW_STORE.key].version == REVIEW_STORE.version
    assert "λόγος" in rows[REVIEW_STORE.key].value


@pytest.mark.asyncio
async def test_saving_twice_keeps_last_write(session_factory, today: date) -> None:
    study = StudySession()
    study.review("λόγος", True, today)

    async with session_factory() as session:
        async with session.begin():
            await save_study_session(session, study)

    study.review("καί", False, today)
    async with session_factory() as session:
        async with session.begin():
            await save_study_session(session, study)

    async with session_factory() as session:
        async with session.begin():
            loaded = await load_study_session(session, today)

    assert set(loaded.cards) == {"λόγος", "καί"}
    assert loaded.stats.total_reviewed == 2


@pytest.mark.asyncio
async def test_malformed_json_is_treated_as_empty(session_factory, today: date, caplog) -> None:
    await _put_row(session_factory, REVIEW_STORE.key, "{not json", version=2)
    await _put_row(session_factory, STATS_STORE.key, "[1, 2", version=2)

    caplog.set_level(logging.WARNING)
    async with session_factory() as session:
        async with session.begin():
            study = await load_study_session(session, today)

    assert study.cards == {}
    assert study.stats == StudyStats()
    assert "not valid JSON" in caplog.text


@pytest.mark.asyncio
async def test_malformed_card_is_skipped(session_factory, today: date) -> None:
    payload = {
        "λόγος": {
            "key": "λόγος",
            "interval": 6,
            "repetition": 2,
            "ease_factor": 2.5,
            "due_date": today.isoformat(),
            "last_reviewed": "",
        },
        "καί": {"interval": 1},
        "ὁ": "broken",
    }
    await _put_row(session_factory, REVIEW_STORE.key, json.dumps(payload), version=2)

    async with session_factory() as session:
        async with session.begin():
            cards = await load_review_store(session)

    assert list(cards) == ["λόγος"]
    assert cards["λόγος"].interval == 6


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "bad_field",
    [
        {"interval": None},
        {"repetition": None},
        {"ease_factor": None},
        {"ease_factor": "steep"},
        {"last_reviewed": 5},
        {"due_date": None},
    ],
)
async def test_card_with_bad_field_is_skipped(session_factory, today: date, bad_field) -> None:
    valid = {
        "key": "καί",
        "interval": 1,
        "repetition": 1,
        "ease_factor": 2.5,
        "due_date": today.isoformat(),
        "last_reviewed": "",
    }
    payload = {"λόγος": {**valid, "key": "λόγος", **bad_field}, "καί": valid}
    await _put_row(session_factory, REVIEW_STORE.key, json.dumps(payload), version=2)

    async with session_factory() as session:
        async with session.begin():
            cards = await load_review_store(session)

    assert list(cards) == ["καί"]


@pytest.mark.asyncio
async def test_legacy_keys_are_migrated(session_factory, today: date) -> None:
    legacy_cards = {
        "ὁ, ἡ, τό": {
            "key": "ὁ, ἡ, τό",
            "interval": 6,
            "repetition": 2,
            "easeFactor": 2.6,
            "dueDate": "2025-03-09",
            "lastReviewed": "2025-03-03",
        },
        "ὁ": {
            "key": "ὁ",
            "interval": 1,
            "repetition": 1,
            "easeFactor": 2.5,
            "dueDate": "2025-03-20",
            "lastReviewed": "2025-03-08",
        },
    }
    legacy_stats = {
        "streak": 3,
        "lastStreakDate": "2025-03-09",
        "cardsStudiedToday": 11,
        "lastStudyDate": "2025-03-09",
        "totalReviewed": 50,
        "totalCorrect": 41,
    }
    await _put_row(session_factory, "greek-tools-srs-v1", json.dumps(legacy_cards))
    await _put_row(session_factory, "greek-tools-stats-v1", json.dumps(legacy_stats))

    async with session_factory() as session:
        async with session.begin():
            study = await load_study_session(session, today)

    assert list(study.cards) == ["ὁ"]
    card = study.cards["ὁ"]
    assert card.interval == 6
    assert card.ease_factor == pytest.approx(2.6)
    assert card.due_date == date(2025, 3, 9)

    assert study.stats.streak == 3
    assert study.stats.total_correct == 41
    assert study.stats.cards_studied_today == 0

    rows = await _rows(session_factory)
    assert set(rows) == {REVIEW_STORE.key, STATS_STORE.key}
    assert all(row.version == 2 for row in rows.values())

    async with session_factory() as session:
        async with session.begin():
            again = await load_study_session(session, today)
    assert again.cards == study.cards
    assert again.stats == study.stats


@pytest.mark.asyncio
async def test_legacy_rows_merge_into_existing_store(session_factory, today: date, caplog) -> None:
    current_card = {
        "key": "λόγος",
        "interval": 6,
        "repetition": 2,
        "ease_factor": 2.5,
        "due_date": "2025-03-12",
        "last_reviewed": "2025-03-06",
    }
    legacy_cards = {
        "ὁ, ἡ, τό": {"key": "ὁ, ἡ, τό", "interval": 1, "easeFactor": 2.5, "dueDate": "2025-03-09"},
        "λόγος": {"key": "λόγος", "interval": 1, "easeFactor": 2.5, "dueDate": "2025-03-01"},
    }
    await _put_row(session_factory, REVIEW_STORE.key, json.dumps({"λόγος": current_card}), version=2)
    await _put_row(session_factory, "greek-tools-srs-v1", json.dumps(legacy_cards))
    await _put_row(session_factory, STATS_STORE.key, json.dumps({"total_reviewed": 7}), version=2)
    await _put_row(session_factory, "greek-tools-stats-v1", json.dumps({"totalReviewed": 50}))

    caplog.set_level(logging.INFO)
    async with session_factory() as session:
        async with session.begin():
            study = await load_study_session(session, today)

    assert list(study.cards) == ["λόγος", "ὁ"]
    assert study.cards["λόγος"].interval == 6
    assert study.cards["ὁ"].due_date == date(2025, 3, 9)
    assert study.stats.total_reviewed == 7
    assert "Dropping greek-tools-stats-v1" in caplog.text

    rows = await _rows(session_factory)
    assert set(rows) == {REVIEW_STORE.key, STATS_STORE.key}
    assert set(json.loads(rows[REVIEW_STORE.key].value)) == {"λόγος", "ὁ"}


@pytest.mark.asyncio
async def test_outdated_row_is_upgraded_in_place(session_factory, today: date) -> None:
    legacy_stats = {"streak": 1, "lastStreakDate": today.isoformat(), "totalReviewed": 10}
    await _put_row(session_factory, STATS_STORE.key, json.dumps(legacy_stats), version=1)

    async with session_factory() as session:
        async with session.begin():
            stats = await load_stats(session, today)

    assert stats.streak == 1
    assert stats.total_reviewed == 10

    rows = await _rows(session_factory)
    assert rows[STATS_STORE.key].version == 2
    assert json.loads(rows[STATS_STORE.key].value)["total_reviewed"] == 10


@pytest.mark.asyncio
async def test_stats_roll_over_on_next_day(session_factory, today: date) -> None:
    study = StudySession()
    for index in range(12):
        study.review(f"word-{index}", True, today)

    async with session_factory() as session:
        async with session.begin():
            await save_study_session(session, study)

    async with session_factory() as session:
        async with session.begin():
            next_day = await load_stats(session, today + timedelta(days=1))
            much_later = await load_stats(session, today + timedelta(days=5))

    assert next_day.cards_studied_today == 0
    assert next_day.streak == 1
    assert much_later.streak == 0
    assert much_later.total_reviewed == 12


@pytest.mark.asyncio
async def test_reset_progress_removes_everything(session_factory, today: date) -> None:
    study = StudySession()
    study.review("λόγος", True, today)
    async with session_factory() as session:
        async with session.begin():
            await save_study_session(session, study)
    await _put_row(session_factory, "greek-tools-srs-v1", "{}")

    async with session_factory() as session:
        async with session.begin():
            await reset_progress(session)

    assert await _rows(session_factory) == {}


@pytest.mark.asyncio
async def test_multi_step_migrations_run_in_order(session_factory) -> None:
    store = VersionedBlob(
        key="custom",
        version=3,
        migrations={
            1: lambda payload: {"items": payload},
            2: lambda payload: {**payload, "count": len(payload["items"])},
        },
    )
    await _put_row(session_factory, "custom", json.dumps(["a", "b"]), version=1)

    async with session_factory() as session:
        async with session.begin():
            payload = await read_blob(session, store)

    assert payload == {"items": ["a", "b"], "count": 2}
    assert (await _rows(session_factory))["custom"].version == 3


@pytest.mark.asyncio
async def test_missing_migration_is_treated_as_empty(session_factory, caplog) -> None:
    store = VersionedBlob(key="custom", version=3, migrations={2: lambda payload: payload})
    await _put_row(session_factory, "custom", json.dumps({"a": 1}), version=1)

    caplog.set_level(logging.WARNING)
    async with session_factory() as session:
        async with session.begin():
            assert await read_blob(session, store) is None

    assert "Could not migrate custom" in caplog.text
    assert (await _rows(session_factory))["custom"].version == 1


@pytest.mark.asyncio
async def test_newer_version_is_returned_unchanged(session_factory, caplog) -> None:
    store = VersionedBlob(key="custom", version=2)
    async with session_factory() as session:
        async with session.begin():
            await write_blob(session, store, {"a": 1})

    future = VersionedBlob(key="custom", version=5)
    async with session_factory() as session:
        async with session.begin():
            await write_blob(session, future, {"a": 2})

    caplog.set_level(logging.WARNING)
    async with session_factory() as session:
        async with session.begin():
            assert await read_blob(session, store) == {"a": 2}

    assert "newer than supported" in caplog.text
