"""Paradigm quiz tables: cell flattening, blank selection and scoring."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List, Mapping, Optional, Sequence

from src.study.grading import AnswerResult, check_answer


class Density(str, Enum):
    """Share of a table's cells that are blanked for an attempt."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def ratio(self) -> float:
        return DENSITY_RATIO[self]


DENSITY_RATIO: Dict[Density, float] = {
    Density.EASY: 0.25,
    Density.MEDIUM: 0.5,
    Density.HARD: 1.0,
}


@dataclass(frozen=True, slots=True)
class TableRow:
    label: str
    # ``None`` marks a form that does not exist and is never blanked.
    answers: Sequence[Optional[str]]


@dataclass(frozen=True, slots=True)
class TableModel:
    """A paradigm table in quiz form."""

    id: str
    label: str
    category: str
    cols: Sequence[str]
    rows: Sequence[TableRow]
    col_groups: Sequence[str] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class QuizCell:
    """A scoreable table cell; ``index`` is ``row_index * len(cols) + col_index``."""

    index: int
    row_index: int
    col_index: int
    answer: str
    is_blank: bool = False


@dataclass(frozen=True, slots=True)
class QuizScore:
    correct: int
    accent_only: int
    wrong: int

    @property
    def total(self) -> int:
        return self.correct + self.accent_only + self.wrong

    @property
    def is_perfect(self) -> bool:
        return self.total > 0 and self.correct == self.total


def get_quiz_cells(table: TableModel) -> List[QuizCell]:
    """Flatten a table into quiz cells, skipping missing forms."""
    width = len(table.cols)
    cells: List[QuizCell] = []
    for row_index, row in enumerate(table.rows):
        for col_index, answer in enumerate(row.answers):
            if answer is None:
                continue
            cells.append(
                QuizCell(
                    index=row_index * width + col_index,
                    row_index=row_index,
                    col_index=col_index,
                    answer=answer,
                )
            )
    return cells


def blank_count(total: int, density: Density | str) -> int:
    """Number of cells to blank: the density share, never less than one."""
    if total <= 0:
        return 0
    ratio = Density(density).ratio
    return max(1, int(math.floor(total * ratio + 0.5)))


def _shuffled(items: Sequence[int], rng: random.Random) -> List[int]:
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def apply_density(
    cells: Sequence[QuizCell],
    density: Density | str,
    rng: Optional[random.Random] = None,
) -> List[QuizCell]:
    """Return copies of ``cells`` with a random subset marked blank.

    The input sequence is not modified.
    """
    if not cells:
        return []
    rng = rng or random.Random()
    count = blank_count(len(cells), density)
    blank_indices = set(_shuffled([cell.index for cell in cells], rng)[:count])
    return [replace(cell, is_blank=cell.index in blank_indices) for cell in cells]


def grade_cells(
    cells: Sequence[QuizCell],
    answers: Mapping[int, str],
) -> Dict[int, AnswerResult]:
    """Grade the student's input for every blank cell, keyed by cell index.

    Blank cells without an entry in ``answers`` are graded as empty input.
    """
    return {
        cell.index: check_answer(answers.get(cell.index, ""), cell.answer)
        for cell in cells
        if cell.is_blank
    }


def score(results: Mapping[int, AnswerResult]) -> QuizScore:
    values = list(results.values())
    return QuizScore(
        correct=values.count(AnswerResult.CORRECT),
        accent_only=values.count(AnswerResult.ACCENT_ONLY),
        wrong=values.count(AnswerResult.WRONG),
    )
