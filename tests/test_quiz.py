from __future__ import annotations

import random

import pytest

from src.study.grading import AnswerResult
from src.study.quiz import (
    Density,
    TableModel,
    TableRow,
    apply_density,
    blank_count,
    get_quiz_cells,
    grade_cells,
    score,
)


@pytest.fixture
def article_table() -> TableModel:
    return TableModel(
        id="article",
        label="Definite article",
        category="article",
        cols=["M", "F", "N"],
        rows=[
            TableRow("Nom. sg.", ["ὁ", "ἡ", "τό"]),
            TableRow("Gen. sg.", ["τοῦ", "τῆς", "τοῦ"]),
            TableRow("Voc. sg.", [None, None, None]),
            TableRow("Nom. pl.", ["οἱ", "αἱ", "τά"]),
        ],
    )


def test_get_quiz_cells_skips_missing_forms(article_table: TableModel) -> None:
    cells = get_quiz_cells(article_table)

    assert len(cells) == 9
    assert [cell.index for cell in cells[:3]] == [0, 1, 2]
    assert cells[6].index == 9
    assert (cells[6].row_index, cells[6].col_index) == (3, 0)
    assert cells[6].answer == "οἱ"
    assert not any(cell.is_blank for cell in cells)


@pytest.mark.parametrize(
    ("total", "density", "expected"),
    [
        (0, Density.HARD, 0),
        (1, Density.EASY, 1),
        (3, Density.EASY, 1),
        (6, Density.EASY, 2),
        (10, Density.EASY, 3),
        (7, Density.MEDIUM, 4),
        (9, "hard", 9),
    ],
)
def test_blank_count(total: int, density: Density, expected: int) -> None:
    assert blank_count(total, density) == expected


def test_unknown_density_is_rejected() -> None:
    with pytest.raises(ValueError):
        blank_count(4, "brutal")


def test_apply_density_blanks_the_expected_share(article_table: TableModel) -> None:
    cells = get_quiz_cells(article_table)

    result = apply_density(cells, Density.MEDIUM, random.Random(3))

    assert len(result) == len(cells)
    assert sum(cell.is_blank for cell in result) == 5
    assert [cell.index for cell in result] == [cell.index for cell in cells]
    assert not any(cell.is_blank for cell in cells)


def test_hard_density_blanks_everything(article_table: TableModel) -> None:
    cells = get_quiz_cells(article_table)

    assert all(cell.is_blank for cell in apply_density(cells, Density.HARD))


def test_apply_density_is_reproducible_with_seed(article_table: TableModel) -> None:
    cells = get_quiz_cells(article_table)

    first = apply_density(cells, Density.EASY, random.Random(42))
    second = apply_density(cells, Density.EASY, random.Random(42))

    assert first == second


def test_apply_density_on_empty_table() -> None:
    assert apply_density([], Density.HARD) == []


def test_grade_and_score_blank_cells(article_table: TableModel) -> None:
    cells = apply_density(get_quiz_cells(article_table), Density.HARD)

    results = grade_cells(
        cells,
        {
            0: "ὁ",
            1: "η",
            2: "τόν",
            3: "  τοῦ ",
            4: "τῆσ",
            5: "τοῦ",
            9: "οἱ",
            10: "αἱ",
        },
    )

    assert results[0] is AnswerResult.CORRECT
    assert results[1] is AnswerResult.ACCENT_ONLY
    assert results[2] is AnswerResult.WRONG
    assert results[4] is AnswerResult.CORRECT
    assert results[11] is AnswerResult.WRONG

    summary = score(results)
    assert (summary.correct, summary.accent_only, summary.wrong) == (6, 1, 2)
    assert summary.total == 9
    assert not summary.is_perfect


def test_grade_cells_ignores_prefilled_cells(article_table: TableModel) -> None:
    cells = apply_density(get_quiz_cells(article_table), Density.EASY, random.Random(1))
    blank = [cell for cell in cells if cell.is_blank]

    results = grade_cells(cells, {cell.index: cell.answer for cell in cells})

    assert set(results) == {cell.index for cell in blank}
    assert score(results).is_perfect


def test_empty_score_is_not_perfect() -> None:
    assert not score({}).is_perfect
