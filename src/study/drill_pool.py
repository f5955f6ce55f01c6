"""Curated MorphGNT forms used for parsing drills."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True, slots=True)
class DrillWord:
    """A Greek New Testament form with its lemma, POS and 8-character parse code."""

    word: str
    lemma: str
    pos: str
    parsing: str
    gloss: str


DRILL_POOL: Tuple[DrillWord, ...] = (
    # Nouns
    DrillWord("κυρίων", "κύριος", "N-", "----GPM-", "lord"),
    DrillWord("λόγος", "λόγος", "N-", "----NSM-", "word"),
    DrillWord("λόγου", "λόγος", "N-", "----GSM-", "word"),
    DrillWord("λόγῳ", "λόγος", "N-", "----DSM-", "word"),
    DrillWord("λόγον", "λόγος", "N-", "----ASM-", "word"),
    DrillWord("λόγοι", "λόγος", "N-", "----NPM-", "word"),
    DrillWord("λόγων", "λόγος", "N-", "----GPM-", "word"),
    DrillWord("λόγοις", "λόγος", "N-", "----DPM-", "word"),
    DrillWord("ζωή", "ζωή", "N-", "----NSF-", "life"),
    DrillWord("ζωῆς", "ζωή", "N-", "----GSF-", "life"),
    DrillWord("ζωῇ", "ζωή", "N-", "----DSF-", "life"),
    DrillWord("ζωήν", "ζωή", "N-", "----ASF-", "life"),
    DrillWord("ἀγάπη", "ἀγάπη", "N-", "----NSF-", "love"),
    DrillWord("πίστις", "πίστις", "N-", "----NSF-", "faith"),
    DrillWord("πίστεως", "πίστις", "N-", "----GSF-", "faith"),
    DrillWord("πίστει", "πίστις", "N-", "----DSF-", "faith"),
    DrillWord("πίστιν", "πίστις", "N-", "----ASF-", "faith"),
    DrillWord("πνεῦμα", "πνεῦμα", "N-", "----NSN-", "spirit"),
    DrillWord("πνεύματος", "πνεῦμα", "N-", "----GSN-", "spirit"),
    DrillWord("πνεύματι", "πνεῦμα", "N-", "----DSN-", "spirit"),
    DrillWord("τέκνον", "τέκνον", "N-", "----NSN-", "child"),
    DrillWord("τέκνου", "τέκνον", "N-", "----GSN-", "child"),
    DrillWord("τέκνῳ", "τέκνον", "N-", "----DSN-", "child"),
    DrillWord("τέκνα", "τέκνον", "N-", "----NPN-", "child"),

    # Adjectives
    DrillWord("ἅγιος", "ἅγιος", "A-", "----NSM-", "holy"),
    DrillWord("ἁγίου", "ἅγιος", "A-", "----GSM-", "holy"),
    DrillWord("ἁγίῳ", "ἅγιος", "A-", "----DSM-", "holy"),
    DrillWord("ἅγιον", "ἅγιος", "A-", "----NSN-", "holy"),
    DrillWord("ἁγίου", "ἅγιος", "A-", "----GSN-", "holy"),
    DrillWord("ἁγίᾳ", "ἅγιος", "A-", "----DSF-", "holy"),
    DrillWord("ἁγίας", "ἅγιος", "A-", "----GSF-", "holy"),
    DrillWord("ἅγιοι", "ἅγιος", "A-", "----NPM-", "holy"),
    DrillWord("ἁγίων", "ἅγιος", "A-", "----GPM-", "holy"),
    DrillWord("καλός", "καλός", "A-", "----NSM-", "good"),
    DrillWord("καλοῦ", "καλός", "A-", "----GSM-", "good"),
    DrillWord("καλόν", "καλός", "A-", "----NSN-", "good"),
    DrillWord("καλῆς", "καλός", "A-", "----GSF-", "good"),
    DrillWord("πιστός", "πιστός", "A-", "----NSM-", "faithful"),
    DrillWord("πιστοῦ", "πιστός", "A-", "----GSM-", "faithful"),
    DrillWord("πιστόν", "πιστός", "A-", "----ASM-", "faithful"),

    # Finite verbs
    DrillWord("λέγω", "λέγω", "V-", "1PAI-S--", "say"),
    DrillWord("λέγεις", "λέγω", "V-", "2PAI-S--", "say"),
    DrillWord("λέγει", "λέγω", "V-", "3PAI-S--", "say"),
    DrillWord("λέγομεν", "λέγω", "V-", "1PAI-P--", "say"),
    DrillWord("λέγετε", "λέγω", "V-", "2PAI-P--", "say"),
    DrillWord("λέγουσιν", "λέγω", "V-", "3PAI-P--", "say"),
    DrillWord("πιστεύω", "πιστεύω", "V-", "1PAI-S--", "believe"),
    DrillWord("πιστεύεις", "πιστεύω", "V-", "2PAI-S--", "believe"),
    DrillWord("πιστεύει", "πιστεύω", "V-", "3PAI-S--", "believe"),
    DrillWord("πιστεύετε", "πιστεύω", "V-", "2PAI-P--", "believe"),
    DrillWord("πιστεύουσιν", "πιστεύω", "V-", "3PAI-P--", "believe"),
    DrillWord("ἔλεγεν", "λέγω", "V-", "3IAI-S--", "say"),
    DrillWord("ἔλεγον", "λέγω", "V-", "3IAI-P--", "say"),
    DrillWord("ἐπίστευον", "πιστεύω", "V-", "3IAI-P--", "believe"),
    DrillWord("εἶχεν", "ἔχω", "V-", "3IAI-S--", "have"),
    DrillWord("ἤκουεν", "ἀκούω", "V-", "3IAI-S--", "hear"),
    DrillWord("εἶπεν", "λέγω", "V-", "3AAI-S--", "say"),
    DrillWord("εἶπον", "λέγω", "V-", "3AAI-P--", "say"),
    DrillWord("ἐπίστευσεν", "πιστεύω", "V-", "3AAI-S--", "believe"),
    DrillWord("ἐπίστευσαν", "πιστεύω", "V-", "3AAI-P--", "believe"),
    DrillWord("ἤκουσεν", "ἀκούω", "V-", "3AAI-S--", "hear"),
    DrillWord("ἤκουσαν", "ἀκούω", "V-", "3AAI-P--", "hear"),
    DrillWord("ἐλεύσεται", "ἔρχομαι", "V-", "3FMI-S--", "come"),
    DrillWord("πιστεύσουσιν", "πιστεύω", "V-", "3FAI-P--", "believe"),
    DrillWord("γέγραπται", "γράφω", "V-", "3XPI-S--", "write"),
    DrillWord("πεπίστευκεν", "πιστεύω", "V-", "3XAI-S--", "believe"),
    DrillWord("γέγονεν", "γίνομαι", "V-", "3XAI-S--", "become"),
    DrillWord("γίνεται", "γίνομαι", "V-", "3PMI-S--", "become"),
    DrillWord("γίνονται", "γίνομαι", "V-", "3PMI-P--", "become"),
    DrillWord("ἀποκρίνεται", "ἀποκρίνομαι", "V-", "3PMI-S--", "answer"),
    DrillWord("ἐγένετο", "γίνομαι", "V-", "3AMI-S--", "become"),
    DrillWord("ἐγένοντο", "γίνομαι", "V-", "3AMI-P--", "become"),
    DrillWord("πιστεύῃ", "πιστεύω", "V-", "3PAS-S--", "believe"),
    DrillWord("ἔχῃ", "ἔχω", "V-", "3PAS-S--", "have"),
    DrillWord("ἀγαπᾷ", "ἀγαπάω", "V-", "3PAS-S--", "love"),
    DrillWord("γίνηται", "γίνομαι", "V-", "3PMS-S--", "become"),
    DrillWord("πιστεύσητε", "πιστεύω", "V-", "2AAS-P--", "believe"),
    DrillWord("εἴπῃ", "λέγω", "V-", "3AAS-S--", "say"),
    DrillWord("ἀκούσῃ", "ἀκούω", "V-", "3AAS-S--", "hear"),
    DrillWord("ἄκουε", "ἀκούω", "V-", "2PAD-S--", "hear"),
    DrillWord("βλέπετε", "βλέπω", "V-", "2PAD-P--", "see"),
    DrillWord("ἀγαπᾶτε", "ἀγαπάω", "V-", "2PAD-P--", "love"),
    DrillWord("πιστεύετε", "πιστεύω", "V-", "2PAD-P--", "believe"),
    DrillWord("εἰπέ", "λέγω", "V-", "2AAD-S--", "say"),
    DrillWord("ἄκουσον", "ἀκούω", "V-", "2AAD-S--", "hear"),
    DrillWord("πίστευσον", "πιστεύω", "V-", "2AAD-S--", "believe"),

    # Infinitives
    DrillWord("λέγειν", "λέγω", "V-", "-PAN----", "say"),
    DrillWord("πιστεύειν", "πιστεύω", "V-", "-PAN----", "believe"),
    DrillWord("ἔχειν", "ἔχω", "V-", "-PAN----", "have"),
    DrillWord("ἀκούειν", "ἀκούω", "V-", "-PAN----", "hear"),
    DrillWord("εἶναι", "εἰμί", "V-", "-PAN----", "be"),
    DrillWord("γίνεσθαι", "γίνομαι", "V-", "-PMN----", "become"),
    DrillWord("εἰπεῖν", "λέγω", "V-", "-AAN----", "say"),
    DrillWord("ἀκοῦσαι", "ἀκούω", "V-", "-AAN----", "hear"),
    DrillWord("λαβεῖν", "λαμβάνω", "V-", "-AAN----", "take"),
    DrillWord("ἐλθεῖν", "ἔρχομαι", "V-", "-AAN----", "come"),
    DrillWord("πιστεῦσαι", "πιστεύω", "V-", "-AAN----", "believe"),
    DrillWord("γενέσθαι", "γίνομαι", "V-", "-AMN----", "become"),
    DrillWord("σωθῆναι", "σῴζω", "V-", "-APN----", "save"),
    DrillWord("βαπτισθῆναι", "βαπτίζω", "V-", "-APN----", "baptize"),

    # Participles
    DrillWord("λέγων", "λέγω", "V-", "-PAPNSM-", "say"),
    DrillWord("λέγοντος", "λέγω", "V-", "-PAPGSM-", "say"),
    DrillWord("λέγοντι", "λέγω", "V-", "-PAPDSM-", "say"),
    DrillWord("λέγοντα", "λέγω", "V-", "-PAPASM-", "say"),
    DrillWord("λέγοντες", "λέγω", "V-", "-PAPNPM-", "say"),
    DrillWord("λέγουσα", "λέγω", "V-", "-PAPNSF-", "say"),
    DrillWord("λεγούσης", "λέγω", "V-", "-PAPGSF-", "say"),
    DrillWord("λέγον", "λέγω", "V-", "-PAPNSN-", "say"),
    DrillWord("πιστεύων", "πιστεύω", "V-", "-PAPNSM-", "believe"),
    DrillWord("πιστεύοντος", "πιστεύω", "V-", "-PAPGSM-", "believe"),
    DrillWord("πιστεύοντα", "πιστεύω", "V-", "-PAPASM-", "believe"),
    DrillWord("ἔχων", "ἔχω", "V-", "-PAPNSM-", "have"),
    DrillWord("ἔχοντος", "ἔχω", "V-", "-PAPGSM-", "have"),
    DrillWord("ἔχοντα", "ἔχω", "V-", "-PAPASM-", "have"),
    DrillWord("ἔχοντες", "ἔχω", "V-", "-PAPNPM-", "have"),
    DrillWord("ἀκούων", "ἀκούω", "V-", "-PAPNSM-", "hear"),
    DrillWord("ἀκούοντες", "ἀκούω", "V-", "-PAPNPM-", "hear"),
    DrillWord("γινόμενος", "γίνομαι", "V-", "-PMPNSM-", "become"),
    DrillWord("εἰπών", "λέγω", "V-", "-AAPNSM-", "say"),
    DrillWord("εἰπόντος", "λέγω", "V-", "-AAPGSM-", "say"),
    DrillWord("εἰπόντα", "λέγω", "V-", "-AAPASM-", "say"),
    DrillWord("ἀκούσας", "ἀκούω", "V-", "-AAPNSM-", "hear"),
    DrillWord("ἀκούσαντος", "ἀκούω", "V-", "-AAPGSM-", "hear"),
    DrillWord("ἐλθών", "ἔρχομαι", "V-", "-AAPNSM-", "come"),
    DrillWord("ἐλθόντος", "ἔρχομαι", "V-", "-AAPGSM-", "come"),
    DrillWord("λαβών", "λαμβάνω", "V-", "-AAPNSM-", "take"),
    DrillWord("πιστεύσας", "πιστεύω", "V-", "-AAPNSM-", "believe"),
    DrillWord("πιστεύσαντος", "πιστεύω", "V-", "-AAPGSM-", "believe"),
    DrillWord("γραφείς", "γράφω", "V-", "-APPNSM-", "write"),
    DrillWord("βαπτισθείς", "βαπτίζω", "V-", "-APPNSM-", "baptize"),
    DrillWord("σωθείς", "σῴζω", "V-", "-APPNSM-", "save"),
    DrillWord("σωθέντος", "σῴζω", "V-", "-APPGSM-", "save"),
    DrillWord("σωθεῖσα", "σῴζω", "V-", "-APPNSF-", "save"),
    DrillWord("πεπιστευκώς", "πιστεύω", "V-", "-XAPNSM-", "believe"),
    DrillWord("γεγραφώς", "γράφω", "V-", "-XAPNSM-", "write"),
    DrillWord("γεγραμμένος", "γράφω", "V-", "-XPPNSM-", "write"),
    DrillWord("γεγραμμένον", "γράφω", "V-", "-XPPNSN-", "write"),
    DrillWord("γεγραμμένη", "γράφω", "V-", "-XPPNSF-", "write"),
)


def sample_drill_pool(count: int, rng: Optional[random.Random] = None) -> List[DrillWord]:
    """Return up to ``count`` distinct words drawn uniformly from the pool."""
    rng = rng or random.Random()
    pool = list(DRILL_POOL)
    count = max(0, min(count, len(pool)))
    for i in range(count):
        j = rng.randint(i, len(pool) - 1)
        pool[i], pool[j] = pool[j], pool[i]
    return pool[:count]
