"""Bootstrap logic for the study tools."""

from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.app.settings import AppSettings
from src.db import get_session_factory, run_migrations_if_needed
from src.db.progress import load_study_session
from src.study.session import StudySession


LOGGER = logging.getLogger(__name__)


def _configure_logging(log_level: str) -> None:
    """Set up project-wide logging configuration."""
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        level=log_level,
    )


async def summarize_progress(
    session_factory: async_sessionmaker[AsyncSession],
    today: Optional[date] = None,
    preview_size: int = 0,
) -> StudySession:
    """Load the learner's progress and log what is waiting for review."""
    if today is None:
        today = date.today()

    async with session_factory() as session:
        async with session.begin():
            study = await load_study_session(session, today)

    due = sorted(study.due_keys(study.cards, today), key=lambda key: study.cards[key].due_date)
    stats = study.stats
    LOGGER.info(
        "%d cards tracked, %d due today; streak %d day(s), %d/%d reviews correct.",
        len(study.cards),
        len(due),
        stats.streak,
        stats.total_correct,
        stats.total_reviewed,
    )
    if due and preview_size:
        LOGGER.info("Next up: %s", ", ".join(due[:preview_size]))
    return study


def run_status(settings: AppSettings) -> None:
    """Prepare the database and report the learner's study status."""
    _configure_logging(settings.log_level)
    LOGGER.info("%s is running in %s mode.", settings.app_name, settings.app_env)

    try:
        run_migrations_if_needed()
    except Exception:
        LOGGER.exception("Database migrations failed. Aborting startup.")
        raise

    asyncio.run(
        summarize_progress(get_session_factory(), preview_size=settings.due_preview_size)
    )
