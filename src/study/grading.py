"""Answer comparison for typed Greek forms and English glosses."""

from __future__ import annotations

import re
import unicodedata
from enum import Enum
from typing import List

from src.study.srs import QUALITY_CORRECT, QUALITY_INCORRECT


MOVABLE_NU = "(ν)"

# Characters after which a lowercase sigma is word-final.
_WORD_BOUNDARY = (
    r"\s"
    r".,:;!?"
    "\u00b7\u0387\u037e"  # middle dot, ano teleia, Greek question mark
    r"\-"
    "\u2013\u2014"  # en and em dash
    "\"'\u201c\u201d\u2018\u2019\u00ab\u00bb"
)
_FINAL_SIGMA_RE = re.compile(f"σ(?=[{_WORD_BOUNDARY}]|$)")
_GLOSS_SEPARATORS_RE = re.compile(r"[,/]")


class AnswerResult(str, Enum):
    """Verdict for a typed answer."""

    CORRECT = "correct"
    ACCENT_ONLY = "accent-only"
    WRONG = "wrong"


def apply_final_sigma(text: str) -> str:
    """Replace word-final ``σ`` with ``ς``; medial sigma is left alone."""
    return _FINAL_SIGMA_RE.sub("ς", text)


def normalize_answer(text: str) -> str:
    """Drop the movable-nu marker, trim and NFC-normalize."""
    return unicodedata.normalize("NFC", text.replace(MOVABLE_NU, "").strip())


def _expand_movable_nu(text: str) -> str:
    return unicodedata.normalize("NFC", text.replace(MOVABLE_NU, "ν").strip())


def strip_diacritics(text: str) -> str:
    """Remove accents, breathings and iota subscripts, keeping base letters."""
    decomposed = unicodedata.normalize("NFD", text)
    bare = "".join(ch for ch in decomposed if not unicodedata.category(ch).startswith("M"))
    return unicodedata.normalize("NFC", bare)


def check_answer(user_input: str, correct_answer: str) -> AnswerResult:
    """Grade a typed Greek form against the expected one.

    ``correct_answer`` may carry ``(ν)``; both the short form and the form
    with the nu are accepted. Matching letters with different diacritics
    yields ``ACCENT_ONLY``.
    """
    user = normalize_answer(apply_final_sigma(user_input.strip()))
    if not user:
        return AnswerResult.WRONG

    short_form = normalize_answer(correct_answer)
    long_form = _expand_movable_nu(correct_answer)
    if user in (short_form, long_form):
        return AnswerResult.CORRECT

    bare_user = strip_diacritics(user)
    if bare_user in (strip_diacritics(short_form), strip_diacritics(long_form)):
        return AnswerResult.ACCENT_ONLY
    return AnswerResult.WRONG


def quality_for(result: AnswerResult) -> int:
    """Map a verdict onto the SM-2 quality score used for scheduling."""
    if result is AnswerResult.CORRECT:
        return QUALITY_CORRECT
    return QUALITY_INCORRECT


def levenshtein(first: str, second: str) -> int:
    """Edit distance between two strings."""
    if len(first) < len(second):
        first, second = second, first

    distances = list(range(len(second) + 1))
    for i, c1 in enumerate(first):
        new_distances = [i + 1]
        for j, c2 in enumerate(second):
            if c1 == c2:
                new_distances.append(distances[j])
            else:
                new_distances.append(1 + min(distances[j], distances[j + 1], new_distances[-1]))
        distances = new_distances
    return distances[-1]


def _normalize_gloss(text: str) -> str:
    return text.lower().replace("(", "").replace(")", "").strip()


def check_gloss(user_input: str, gloss: str) -> bool:
    """Accept an English answer that matches any comma/slash separated sense.

    Prefixes of four or more letters and single-letter typos on longer
    senses are accepted.
    """
    answer = _normalize_gloss(user_input)
    if not answer:
        return False

    parts: List[str] = [
        part for part in (_normalize_gloss(raw) for raw in _GLOSS_SEPARATORS_RE.split(gloss)) if part
    ]
    for part in parts:
        if part == answer:
            return True
        if len(answer) >= 4 and part.startswith(answer):
            return True
        if len(part) > 3 and levenshtein(part, answer) <= 1:
            return True
    return False
