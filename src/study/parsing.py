"""Grading of morphological parse selections against MorphGNT parse codes.

A parse code has eight fixed positions::

    [0] person   1 2 3 -
    [1] tense    P I F A X Y -
    [2] voice    A M P -
    [3] mood     I D S O N P -   (N = infinitive, P = participle)
    [4] case     N G D A V -
    [5] number   S P -
    [6] gender   M F N -
    [7] degree   C S -

A hyphen means the category does not apply to the form.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Dict, List, Optional, Tuple


PARSE_CODE_LENGTH = 8
NOT_APPLICABLE = "-"

VERB_POS = "V-"
NOMINAL_POS = frozenset({"N-", "A-", "RA", "RP", "RR", "RD", "RI", "RX"})

INFINITIVE_MOOD = "N"
PARTICIPLE_MOOD = "P"

FIELD_POSITIONS: Dict[str, int] = {
    "person": 0,
    "tense": 1,
    "voice": 2,
    "mood": 3,
    "case": 4,
    "number": 5,
    "gender": 6,
}

FIELD_LABELS: Dict[str, Dict[str, str]] = {
    "person": {"1": "1st", "2": "2nd", "3": "3rd"},
    "tense": {
        "P": "present",
        "I": "imperfect",
        "F": "future",
        "A": "aorist",
        "X": "perfect",
        "Y": "pluperfect",
    },
    "voice": {"A": "active", "M": "middle", "P": "passive"},
    "mood": {
        "I": "indicative",
        "D": "imperative",
        "S": "subjunctive",
        "O": "optative",
        "N": "infinitive",
        "P": "participle",
    },
    "case": {"N": "nominative", "G": "genitive", "D": "dative", "A": "accusative", "V": "vocative"},
    "number": {"S": "singular", "P": "plural"},
    "gender": {"M": "masculine", "F": "feminine", "N": "neuter"},
}


@dataclass(frozen=True, slots=True)
class ParseSelection:
    """Categories a student picked for a drill word; unset fields are ``None``."""

    case: Optional[str] = None
    number: Optional[str] = None
    gender: Optional[str] = None
    person: Optional[str] = None
    tense: Optional[str] = None
    voice: Optional[str] = None
    mood: Optional[str] = None


class ParseKind(Enum):
    """How a drill word is graded, with the categories each kind checks."""

    NOMINAL = ("case", "number", "gender")
    INFINITIVE = ("tense", "voice")
    PARTICIPLE = ("tense", "voice", "case", "number", "gender")
    FINITE_VERB = ("person", "tense", "voice", "mood", "number")
    UNSUPPORTED = ()

    @property
    def checked_fields(self) -> Tuple[str, ...]:
        return self.value

    @classmethod
    def resolve(cls, pos: str, mood: Optional[str]) -> ParseKind:
        """Pick the kind from the part of speech and mood character."""
        if pos in NOMINAL_POS:
            return cls.NOMINAL
        if pos != VERB_POS:
            return cls.UNSUPPORTED
        if mood == INFINITIVE_MOOD:
            return cls.INFINITIVE
        if mood == PARTICIPLE_MOOD:
            return cls.PARTICIPLE
        return cls.FINITE_VERB


def classify(code: str, pos: str) -> ParseKind:
    """Return the grading kind for a parse code."""
    mood = code[FIELD_POSITIONS["mood"]] if len(code) > FIELD_POSITIONS["mood"] else None
    return ParseKind.resolve(pos, mood)


def _expected(code: str, field_name: str) -> Optional[str]:
    position = FIELD_POSITIONS[field_name]
    return code[position] if position < len(code) else None


def mismatched_fields(code: str, pos: str, selection: ParseSelection) -> List[str]:
    """List the checked categories where the selection disagrees with ``code``.

    Unsupported parts of speech and malformed codes report every category
    as wrong so they can never pass.
    """
    kind = classify(code, pos)
    if kind is ParseKind.UNSUPPORTED or len(code) != PARSE_CODE_LENGTH:
        return [field.name for field in fields(ParseSelection)]
    return [
        name
        for name in kind.checked_fields
        if getattr(selection, name) != _expected(code, name)
    ]


def check_parse(code: str, pos: str, selection: ParseSelection) -> bool:
    """Return ``True`` when every category relevant to the word matches."""
    return not mismatched_fields(code, pos, selection)


def is_selection_complete(code: str, pos: str, selection: ParseSelection) -> bool:
    """Whether the student has filled every category the word is graded on.

    For verbs the mood the student picked decides which categories are
    needed, falling back to the code's mood until one is chosen.
    """
    if len(code) != PARSE_CODE_LENGTH:
        return False
    if pos == VERB_POS:
        if not selection.mood:
            return False
        kind = ParseKind.resolve(pos, selection.mood)
    else:
        kind = classify(code, pos)
        if kind is ParseKind.UNSUPPORTED:
            mood = _expected(code, "mood")
            if mood == INFINITIVE_MOOD:
                kind = ParseKind.INFINITIVE
            elif mood == PARTICIPLE_MOOD:
                kind = ParseKind.PARTICIPLE
            else:
                return False
    return all(getattr(selection, name) for name in kind.checked_fields)


def build_student_parse_code(code: str, pos: str, selection: ParseSelection) -> str:
    """Overlay the student's choices on ``code`` to show what they answered."""
    chars = list(code)
    if pos in NOMINAL_POS:
        names: Tuple[str, ...] = ("case", "number", "gender")
    elif pos == VERB_POS:
        names = ("person", "tense", "voice", "case", "number", "gender")
        chars[FIELD_POSITIONS["mood"]] = selection.mood or _expected(code, "mood") or NOT_APPLICABLE
    else:
        return code

    for name in names:
        value = getattr(selection, name)
        if value:
            chars[FIELD_POSITIONS[name]] = value
    return "".join(chars)


def describe_parse(code: str) -> str:
    """Render a parse code as readable text, e.g. ``aorist active indicative``."""
    parts = []
    for name, position in FIELD_POSITIONS.items():
        if position >= len(code):
            continue
        label = FIELD_LABELS[name].get(code[position])
        if label:
            parts.append(label)
    return " ".join(parts)
