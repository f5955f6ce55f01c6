"""Curated paradigm tables for the fill-in-the-blank quiz.

Nouns, adjectives and pronouns are laid out by case; verb tables follow
λύω through the indicative, subjunctive and imperative, plus one table each
for infinitives and participles.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from src.study.quiz import TableModel, TableRow


CASES = ("nom", "gen", "dat", "acc", "voc")
NUMBERS = ("sg", "pl")
GENDERS = ("m", "f", "n")
PERSONS = ("1sg", "2sg", "3sg", "1pl", "2pl", "3pl")

CASE_LABELS: Dict[str, str] = {"nom": "Nom", "gen": "Gen", "dat": "Dat", "acc": "Acc", "voc": "Voc"}
NUMBER_LABELS: Dict[str, str] = {"sg": "Singular", "pl": "Plural"}
GENDER_LABELS: Dict[str, str] = {"m": "Masc.", "f": "Fem.", "n": "Neut."}
PERSON_LABELS: Dict[str, str] = {
    "1sg": "1st sg",
    "2sg": "2nd sg",
    "3sg": "3rd sg",
    "1pl": "1st pl",
    "2pl": "2nd pl",
    "3pl": "3rd pl",
}

CATEGORY_LABELS: Dict[str, str] = {
    "noun": "Nouns",
    "adjective": "Adjectives",
    "verb": "Verbs",
    "pronoun": "Pronouns",
}
ALL_CATEGORIES: Tuple[str, ...] = tuple(CATEGORY_LABELS)

GenderedForms = Tuple[str, str, str]


@dataclass(frozen=True, slots=True)
class NounParadigm:
    """Forms by case as ``(singular, plural)``."""

    id: str
    name: str
    forms: Mapping[str, Tuple[str, str]]


@dataclass(frozen=True, slots=True)
class GenderedParadigm:
    """Forms by case as ``((m, f, n) singular, (m, f, n) plural)``."""

    id: str
    name: str
    forms: Mapping[str, Tuple[GenderedForms, GenderedForms]]


@dataclass(frozen=True, slots=True)
class VerbParadigm:
    """Forms by person; a missing person has no form (1st person imperatives)."""

    id: str
    label: str
    group: str
    forms: Mapping[str, str]


NOUN_PARADIGMS: Tuple[NounParadigm, ...] = (
    NounParadigm(
        "1f-alpha-pure",
        "1st Decl. Feminine: ἡμέρα (α-pure)",
        {
            "nom": ("ἡμέρα", "ἡμέραι"),
            "gen": ("ἡμέρας", "ἡμερῶν"),
            "dat": ("ἡμέρᾳ", "ἡμέραις"),
            "acc": ("ἡμέραν", "ἡμέρας"),
            "voc": ("ἡμέρα", "ἡμέραι"),
        },
    ),
    NounParadigm(
        "1f-alpha-impure",
        "1st Decl. Feminine: δόξα (α-impure)",
        {
            "nom": ("δόξα", "δόξαι"),
            "gen": ("δόξης", "δοξῶν"),
            "dat": ("δόξῃ", "δόξαις"),
            "acc": ("δόξαν", "δόξας"),
            "voc": ("δόξα", "δόξαι"),
        },
    ),
    NounParadigm(
        "1m-as",
        "1st Decl. Masculine: νεανίας",
        {
            "nom": ("νεανίας", "νεανίαι"),
            "gen": ("νεανίου", "νεανιῶν"),
            "dat": ("νεανίᾳ", "νεανίαις"),
            "acc": ("νεανίαν", "νεανίας"),
            "voc": ("νεανία", "νεανίαι"),
        },
    ),
    NounParadigm(
        "2m-os",
        "2nd Decl. Masculine: λόγος",
        {
            "nom": ("λόγος", "λόγοι"),
            "gen": ("λόγου", "λόγων"),
            "dat": ("λόγῳ", "λόγοις"),
            "acc": ("λόγον", "λόγους"),
            "voc": ("λόγε", "λόγοι"),
        },
    ),
    NounParadigm(
        "2n-on",
        "2nd Decl. Neuter: ἔργον",
        {
            "nom": ("ἔργον", "ἔργα"),
            "gen": ("ἔργου", "ἔργων"),
            "dat": ("ἔργῳ", "ἔργοις"),
            "acc": ("ἔργον", "ἔργα"),
            "voc": ("ἔργον", "ἔργα"),
        },
    ),
    NounParadigm(
        "3-mute",
        "3rd Decl. Mute Stem: σάρξ (κ-stem)",
        {
            "nom": ("σάρξ", "σάρκες"),
            "gen": ("σαρκός", "σαρκῶν"),
            "dat": ("σαρκί", "σαρξί(ν)"),
            "acc": ("σάρκα", "σάρκας"),
            "voc": ("σάρξ", "σάρκες"),
        },
    ),
    NounParadigm(
        "3-i-stem",
        "3rd Decl. i-Stem: πίστις",
        {
            "nom": ("πίστις", "πίστεις"),
            "gen": ("πίστεως", "πίστεων"),
            "dat": ("πίστει", "πίστεσι(ν)"),
            "acc": ("πίστιν", "πίστεις"),
            "voc": ("πίστι", "πίστεις"),
        },
    ),
    NounParadigm(
        "3-u-stem",
        "3rd Decl. υ-Stem: βασιλεύς",
        {
            "nom": ("βασιλεύς", "βασιλεῖς"),
            "gen": ("βασιλέως", "βασιλέων"),
            "dat": ("βασιλεῖ", "βασιλεῦσι(ν)"),
            "acc": ("βασιλέα", "βασιλεῖς"),
            "voc": ("βασιλεῦ", "βασιλεῖς"),
        },
    ),
    NounParadigm(
        "3-s-stem",
        "3rd Decl. Neuter s-Stem: γένος",
        {
            "nom": ("γένος", "γένη"),
            "gen": ("γένους", "γενῶν"),
            "dat": ("γένει", "γένεσι(ν)"),
            "acc": ("γένος", "γένη"),
            "voc": ("γένος", "γένη"),
        },
    ),
)

ADJECTIVE_PARADIGMS: Tuple[GenderedParadigm, ...] = (
    GenderedParadigm(
        "2-1-2",
        "2-1-2 Adjective: ἀγαθός, -ή, -όν",
        {
            "nom": (("ἀγαθός", "ἀγαθή", "ἀγαθόν"), ("ἀγαθοί", "ἀγαθαί", "ἀγαθά")),
            "gen": (("ἀγαθοῦ", "ἀγαθῆς", "ἀγαθοῦ"), ("ἀγαθῶν", "ἀγαθῶν", "ἀγαθῶν")),
            "dat": (("ἀγαθῷ", "ἀγαθῇ", "ἀγαθῷ"), ("ἀγαθοῖς", "ἀγαθαῖς", "ἀγαθοῖς")),
            "acc": (("ἀγαθόν", "ἀγαθήν", "ἀγαθόν"), ("ἀγαθούς", "ἀγαθάς", "ἀγαθά")),
            "voc": (("ἀγαθέ", "ἀγαθή", "ἀγαθόν"), ("ἀγαθοί", "ἀγαθαί", "ἀγαθά")),
        },
    ),
    GenderedParadigm(
        "3-1-3",
        "3-1-3 Adjective: πᾶς, πᾶσα, πᾶν",
        {
            "nom": (("πᾶς", "πᾶσα", "πᾶν"), ("πάντες", "πᾶσαι", "πάντα")),
            "gen": (("παντός", "πάσης", "παντός"), ("πάντων", "πασῶν", "πάντων")),
            "dat": (("παντί", "πάσῃ", "παντί"), ("πᾶσι(ν)", "πάσαις", "πᾶσι(ν)")),
            "acc": (("πάντα", "πᾶσαν", "πᾶν"), ("πάντας", "πάσας", "πάντα")),
            "voc": (("πᾶς", "πᾶσα", "πᾶν"), ("πάντες", "πᾶσαι", "πάντα")),
        },
    ),
)

VERB_PARADIGMS: Tuple[VerbParadigm, ...] = (
    VerbParadigm(
        "pres-act-ind",
        "Present Active Indicative",
        "indicative",
        {"1sg": "λύω", "2sg": "λύεις", "3sg": "λύει", "1pl": "λύομεν", "2pl": "λύετε", "3pl": "λύουσι(ν)"},
    ),
    VerbParadigm(
        "pres-mid-ind",
        "Present Middle/Passive Indicative",
        "indicative",
        {"1sg": "λύομαι", "2sg": "λύῃ", "3sg": "λύεται", "1pl": "λυόμεθα", "2pl": "λύεσθε", "3pl": "λύονται"},
    ),
    VerbParadigm(
        "impf-act-ind",
        "Imperfect Active Indicative",
        "indicative",
        {"1sg": "ἔλυον", "2sg": "ἔλυες", "3sg": "ἔλυε(ν)", "1pl": "ἐλύομεν", "2pl": "ἐλύετε", "3pl": "ἔλυον"},
    ),
    VerbParadigm(
        "impf-mid-ind",
        "Imperfect Middle/Passive Indicative",
        "indicative",
        {"1sg": "ἐλυόμην", "2sg": "ἐλύου", "3sg": "ἐλύετο", "1pl": "ἐλυόμεθα", "2pl": "ἐλύεσθε", "3pl": "ἐλύοντο"},
    ),
    VerbParadigm(
        "fut-act-ind",
        "Future Active Indicative",
        "indicative",
        {"1sg": "λύσω", "2sg": "λύσεις", "3sg": "λύσει", "1pl": "λύσομεν", "2pl": "λύσετε", "3pl": "λύσουσι(ν)"},
    ),
    VerbParadigm(
        "fut-mid-ind",
        "Future Middle Indicative",
        "indicative",
        {"1sg": "λύσομαι", "2sg": "λύσῃ", "3sg": "λύσεται", "1pl": "λυσόμεθα", "2pl": "λύσεσθε", "3pl": "λύσονται"},
    ),
    VerbParadigm(
        "aor-act-ind",
        "Aorist Active Indicative",
        "indicative",
        {"1sg": "ἔλυσα", "2sg": "ἔλυσας", "3sg": "ἔλυσε(ν)", "1pl": "ἐλύσαμεν", "2pl": "ἐλύσατε", "3pl": "ἔλυσαν"},
    ),
    VerbParadigm(
        "aor-mid-ind",
        "Aorist Middle Indicative",
        "indicative",
        {"1sg": "ἐλυσάμην", "2sg": "ἐλύσω", "3sg": "ἐλύσατο", "1pl": "ἐλυσάμεθα", "2pl": "ἐλύσασθε", "3pl": "ἐλύσαντο"},
    ),
    VerbParadigm(
        "aor-pass-ind",
        "Aorist Passive Indicative",
        "indicative",
        {"1sg": "ἐλύθην", "2sg": "ἐλύθης", "3sg": "ἐλύθη", "1pl": "ἐλύθημεν", "2pl": "ἐλύθητε", "3pl": "ἐλύθησαν"},
    ),
    VerbParadigm(
        "perf-act-ind",
        "Perfect Active Indicative",
        "indicative",
        {"1sg": "λέλυκα", "2sg": "λέλυκας", "3sg": "λέλυκε(ν)", "1pl": "λελύκαμεν", "2pl": "λελύκατε", "3pl": "λελύκασι(ν)"},
    ),
    VerbParadigm(
        "pres-act-subj",
        "Present Active Subjunctive",
        "subjunctive",
        {"1sg": "λύω", "2sg": "λύῃς", "3sg": "λύῃ", "1pl": "λύωμεν", "2pl": "λύητε", "3pl": "λύωσι(ν)"},
    ),
    VerbParadigm(
        "pres-pass-subj",
        "Present Passive Subjunctive",
        "subjunctive",
        {"1sg": "λύωμαι", "2sg": "λύῃ", "3sg": "λύηται", "1pl": "λυώμεθα", "2pl": "λύησθε", "3pl": "λύωνται"},
    ),
    VerbParadigm(
        "aor-act-subj",
        "Aorist Active Subjunctive",
        "subjunctive",
        {"1sg": "λύσω", "2sg": "λύσῃς", "3sg": "λύσῃ", "1pl": "λύσωμεν", "2pl": "λύσητε", "3pl": "λύσωσι(ν)"},
    ),
    VerbParadigm(
        "aor-pass-subj",
        "Aorist Passive Subjunctive",
        "subjunctive",
        {"1sg": "λυθῶ", "2sg": "λυθῇς", "3sg": "λυθῇ", "1pl": "λυθῶμεν", "2pl": "λυθῆτε", "3pl": "λυθῶσι(ν)"},
    ),
    VerbParadigm(
        "pres-act-imp",
        "Present Active Imperative",
        "imperative",
        {"2sg": "λῦε", "3sg": "λυέτω", "2pl": "λύετε", "3pl": "λυόντων"},
    ),
    VerbParadigm(
        "pres-pass-imp",
        "Present Middle/Passive Imperative",
        "imperative",
        {"2sg": "λύου", "3sg": "λυέσθω", "2pl": "λύεσθε", "3pl": "λυέσθωσαν"},
    ),
    VerbParadigm(
        "aor-act-imp",
        "Aorist Active Imperative",
        "imperative",
        {"2sg": "λῦσον", "3sg": "λυσάτω", "2pl": "λύσατε", "3pl": "λυσάντων"},
    ),
    VerbParadigm(
        "aor-pass-imp",
        "Aorist Passive Imperative",
        "imperative",
        {"2sg": "λύθητι", "3sg": "λυθήτω", "2pl": "λύθητε", "3pl": "λυθήτωσαν"},
    ),
)

# (label, form) for λύω
INFINITIVE_FORMS: Tuple[Tuple[str, str], ...] = (
    ("Present Active", "λύειν"),
    ("Present Mid./Pass.", "λύεσθαι"),
    ("Future Active", "λύσειν"),
    ("Future Middle", "λύσεσθαι"),
    ("Aorist Active", "λῦσαι"),
    ("Aorist Middle", "λύσασθαι"),
    ("Aorist Passive", "λυθῆναι"),
    ("Perfect Active", "λελυκέναι"),
)

# (label, masculine, feminine, neuter) for λύω
PARTICIPLE_ROWS: Tuple[Tuple[str, str, str, str], ...] = (
    ("Present Active", "λύων", "λύουσα", "λῦον"),
    ("Present Mid./Pass.", "λυόμενος", "λυομένη", "λυόμενον"),
    ("Aorist Active", "λύσας", "λύσασα", "λῦσαν"),
    ("Aorist Middle", "λυσάμενος", "λυσαμένη", "λυσάμενον"),
    ("Aorist Passive", "λυθείς", "λυθεῖσα", "λυθέν"),
    ("Perfect Active", "λελυκώς", "λελυκυῖα", "λελυκός"),
)

PERSONAL_PRONOUNS: Tuple[NounParadigm, ...] = (
    NounParadigm(
        "ego",
        "ἐγώ: 1st Person",
        {
            "nom": ("ἐγώ", "ἡμεῖς"),
            "gen": ("ἐμοῦ / μου", "ἡμῶν"),
            "dat": ("ἐμοί / μοι", "ἡμῖν"),
            "acc": ("ἐμέ / με", "ἡμᾶς"),
        },
    ),
    NounParadigm(
        "su",
        "σύ: 2nd Person",
        {
            "nom": ("σύ", "ὑμεῖς"),
            "gen": ("σοῦ / σου", "ὑμῶν"),
            "dat": ("σοί / σοι", "ὑμῖν"),
            "acc": ("σέ / σε", "ὑμᾶς"),
        },
    ),
)

GENDERED_PRONOUNS: Tuple[GenderedParadigm, ...] = (
    GenderedParadigm(
        "autos",
        "αὐτός: 3rd Person / Intensive",
        {
            "nom": (("αὐτός", "αὐτή", "αὐτό"), ("αὐτοί", "αὐταί", "αὐτά")),
            "gen": (("αὐτοῦ", "αὐτῆς", "αὐτοῦ"), ("αὐτῶν", "αὐτῶν", "αὐτῶν")),
            "dat": (("αὐτῷ", "αὐτῇ", "αὐτῷ"), ("αὐτοῖς", "αὐταῖς", "αὐτοῖς")),
            "acc": (("αὐτόν", "αὐτήν", "αὐτό"), ("αὐτούς", "αὐτάς", "αὐτά")),
        },
    ),
    GenderedParadigm(
        "outos",
        "οὗτος: Near Demonstrative (this)",
        {
            "nom": (("οὗτος", "αὕτη", "τοῦτο"), ("οὗτοι", "αὗται", "ταῦτα")),
            "gen": (("τούτου", "ταύτης", "τούτου"), ("τούτων", "τούτων", "τούτων")),
            "dat": (("τούτῳ", "ταύτῃ", "τούτῳ"), ("τούτοις", "ταύταις", "τούτοις")),
            "acc": (("τοῦτον", "ταύτην", "τοῦτο"), ("τούτους", "ταύτας", "ταῦτα")),
        },
    ),
    GenderedParadigm(
        "ekeinos",
        "ἐκεῖνος: Far Demonstrative (that)",
        {
            "nom": (("ἐκεῖνος", "ἐκείνη", "ἐκεῖνο"), ("ἐκεῖνοι", "ἐκεῖναι", "ἐκεῖνα")),
            "gen": (("ἐκείνου", "ἐκείνης", "ἐκείνου"), ("ἐκείνων", "ἐκείνων", "ἐκείνων")),
            "dat": (("ἐκείνῳ", "ἐκείνῃ", "ἐκείνῳ"), ("ἐκείνοις", "ἐκείναις", "ἐκείνοις")),
            "acc": (("ἐκεῖνον", "ἐκείνην", "ἐκεῖνο"), ("ἐκείνους", "ἐκείνας", "ἐκεῖνα")),
        },
    ),
    GenderedParadigm(
        "hos",
        "ὅς: Relative Pronoun (who, which, that)",
        {
            "nom": (("ὅς", "ἥ", "ὅ"), ("οἵ", "αἵ", "ἅ")),
            "gen": (("οὗ", "ἧς", "οὗ"), ("ὧν", "ὧν", "ὧν")),
            "dat": (("ᾧ", "ᾗ", "ᾧ"), ("οἷς", "αἷς", "οἷς")),
            "acc": (("ὅν", "ἥν", "ὅ"), ("οὕς", "ἅς", "ἅ")),
        },
    ),
    GenderedParadigm(
        "tis",
        "τίς / τις: Interrogative / Indefinite",
        {
            "nom": (("τίς / τις", "τίς / τις", "τί / τι"), ("τίνες / τινές", "τίνες / τινές", "τίνα / τινά")),
            "gen": (("τίνος / τινός", "τίνος / τινός", "τίνος / τινός"), ("τίνων / τινῶν", "τίνων / τινῶν", "τίνων / τινῶν")),
            "dat": (("τίνι / τινί", "τίνι / τινί", "τίνι / τινί"), ("τίσι(ν)", "τίσι(ν)", "τίσι(ν)")),
            "acc": (("τίνα / τινά", "τίνα / τινά", "τί / τι"), ("τίνας / τινάς", "τίνας / τινάς", "τίνα / τινά")),
        },
    ),
)


def _case_table(paradigm: NounParadigm, table_id: str, category: str) -> TableModel:
    return TableModel(
        id=table_id,
        label=paradigm.name,
        category=category,
        cols=[NUMBER_LABELS[number] for number in NUMBERS],
        rows=[
            TableRow(CASE_LABELS[case], list(paradigm.forms[case]))
            for case in CASES
            if case in paradigm.forms
        ],
    )


def _gendered_table(paradigm: GenderedParadigm, table_id: str, category: str) -> TableModel:
    return TableModel(
        id=table_id,
        label=paradigm.name,
        category=category,
        col_groups=[NUMBER_LABELS[number] for number in NUMBERS],
        cols=[GENDER_LABELS[gender] for _ in NUMBERS for gender in GENDERS],
        rows=[
            TableRow(CASE_LABELS[case], [form for forms in paradigm.forms[case] for form in forms])
            for case in CASES
            if case in paradigm.forms
        ],
    )


def _conjugation_table(paradigm: VerbParadigm) -> TableModel:
    answers: List[Tuple[str, Optional[str]]] = [
        (person, paradigm.forms.get(person)) for person in PERSONS
    ]
    return TableModel(
        id=f"verb-{paradigm.id}",
        label=paradigm.label,
        category="verb",
        cols=["Form"],
        rows=[
            TableRow(PERSON_LABELS[person], [form])
            for person, form in answers
            if form is not None or paradigm.group != "imperative"
        ],
    )


def _noun_tables() -> List[TableModel]:
    return [_case_table(p, f"noun-{p.id}", "noun") for p in NOUN_PARADIGMS]


def _adjective_tables() -> List[TableModel]:
    return [_gendered_table(p, f"adj-{p.id}", "adjective") for p in ADJECTIVE_PARADIGMS]


def _verb_tables() -> List[TableModel]:
    tables = [_conjugation_table(p) for p in VERB_PARADIGMS]
    tables.append(
        TableModel(
            id="verb-infinitives",
            label="Infinitives (λύω)",
            category="verb",
            cols=["Form"],
            rows=[TableRow(label, [form]) for label, form in INFINITIVE_FORMS],
        )
    )
    tables.append(
        TableModel(
            id="verb-participles",
            label="Participles (λύω)",
            category="verb",
            cols=[GENDER_LABELS[gender] for gender in GENDERS],
            rows=[TableRow(label, [m, f, n]) for label, m, f, n in PARTICIPLE_ROWS],
        )
    )
    return tables


def _pronoun_tables() -> List[TableModel]:
    personal = [_case_table(p, f"pronoun-{p.id}", "pronoun") for p in PERSONAL_PRONOUNS]
    gendered = [_gendered_table(p, f"pronoun-{p.id}", "pronoun") for p in GENDERED_PRONOUNS]
    return personal + gendered


_BUILDERS = {
    "noun": _noun_tables,
    "adjective": _adjective_tables,
    "verb": _verb_tables,
    "pronoun": _pronoun_tables,
}


def build_table_models(categories: Optional[Iterable[str]] = None) -> List[TableModel]:
    """Return the quiz tables, optionally limited to the given categories.

    Tables come out in ``ALL_CATEGORIES`` order regardless of the order the
    categories are passed in. Unknown categories raise ``ValueError``.
    """
    wanted = set(ALL_CATEGORIES if categories is None else categories)
    unknown = wanted.difference(ALL_CATEGORIES)
    if unknown:
        raise ValueError(f"Unknown paradigm categories: {sorted(unknown)}")

    tables: List[TableModel] = []
    for category in ALL_CATEGORIES:
        if category in wanted:
            tables.extend(_BUILDERS[category]())
    return tables
