"""In-memory study session tying grading, scheduling and stats together."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Optional

from src.study.drill_pool import DrillWord
from src.study.grading import AnswerResult, check_answer, check_gloss, quality_for
from src.study.parsing import ParseSelection, check_parse
from src.study.srs import (
    QUALITY_CORRECT,
    QUALITY_INCORRECT,
    ReviewCard,
    is_due,
    new_card,
    normalize_key,
    schedule_review,
)
from src.study.stats import StudyStats, record_review, roll_over


LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ReviewOutcome:
    """Result of reviewing a single study key."""

    card: ReviewCard
    stats: StudyStats
    correct: bool
    result: Optional[AnswerResult] = None


@dataclass(slots=True)
class StudySession:
    """Review store and stats for one learner.

    The session mutates only its own mappings; cards and stats themselves
    are replaced, never edited in place. Persisting the session is the
    caller's job (see ``src.db.progress``).
    """

    cards: Dict[str, ReviewCard] = field(default_factory=dict)
    stats: StudyStats = field(default_factory=StudyStats)

    def card_for(self, key: str, today: date) -> ReviewCard:
        """Return the stored card for ``key`` or a new one (not stored yet)."""
        normalized = normalize_key(key)
        return self.cards.get(normalized) or new_card(normalized, today)

    def review(
        self,
        key: str,
        correct: bool,
        today: date,
        *,
        quality: Optional[int] = None,
        schedule: bool = True,
    ) -> ReviewOutcome:
        """Record a review outcome for ``key``.

        ``schedule=False`` counts the review in the stats without touching
        the card, as in free browsing of the whole deck.
        """
        card = self.card_for(key, today)
        if schedule:
            if quality is None:
                quality = QUALITY_CORRECT if correct else QUALITY_INCORRECT
            card = schedule_review(card, quality, today)
            self.cards[card.key] = card

        self.stats = record_review(roll_over(self.stats, today), correct, today)
        LOGGER.debug(
            "Reviewed %s (correct=%s); next due %s, streak %s.",
            card.key,
            correct,
            card.due_date,
            self.stats.streak,
        )
        return ReviewOutcome(card=card, stats=self.stats, correct=correct)

    def answer_form(self, key: str, user_input: str, correct_answer: str, today: date) -> ReviewOutcome:
        """Grade a typed Greek form, then schedule ``key`` with the verdict."""
        result = check_answer(user_input, correct_answer)
        correct = result is AnswerResult.CORRECT
        outcome = self.review(key, correct, today, quality=quality_for(result))
        outcome.result = result
        return outcome

    def answer_gloss(self, key: str, user_input: str, gloss: str, today: date) -> ReviewOutcome:
        """Grade a typed English meaning for the card ``key``."""
        return self.review(key, check_gloss(user_input, gloss), today)

    def answer_parse(self, word: DrillWord, selection: ParseSelection, today: date) -> ReviewOutcome:
        """Grade a parsing drill answer and schedule the word's lemma."""
        correct = check_parse(word.parsing, word.pos, selection)
        return self.review(word.lemma, correct, today)

    def due_keys(self, keys: Iterable[str], today: date) -> List[str]:
        """Return the keys whose stored card is due on ``today``, in input order."""
        due = []
        for key in keys:
            card = self.cards.get(normalize_key(key))
            if card is not None and is_due(card, today):
                due.append(key)
        return due

    def new_keys(self, keys: Iterable[str]) -> List[str]:
        """Return the keys that have no stored card yet."""
        return [key for key in keys if normalize_key(key) not in self.cards]

    def build_queue(
        self,
        keys: Iterable[str],
        today: date,
        rng: Optional[random.Random] = None,
    ) -> List[str]:
        """Order keys for study: due cards first, then unseen ones, each shuffled.

        Cards that are scheduled for a later day are left out.
        """
        rng = rng or random.Random()
        keys = list(keys)
        due = self.due_keys(keys, today)
        fresh = self.new_keys(keys)
        rng.shuffle(due)
        rng.shuffle(fresh)
        return due + fresh

    def reset(self) -> None:
        """Discard all cards and stats."""
        self.cards = {}
        self.stats = StudyStats()
