"""Second declension: feminine, masculine and common nouns in -а/-я (гора, дядя, сирота)."""
from functools import cached_property
from types import MappingProxyType

from russian_case import RussianCase
from utils import RUSSIAN_SIBILANTS, ends_with_any, initial, is_vowel, last, last_two_chars, syllable_count
from noun_declension.rules import Rule, always, apply_rules
from noun_declension.stem import get_noun_stem
from noun_declension.stress import RussianStress, stress_for, stressed_variants


SURNAME_ENDINGS = ("ова", "ева", "ина")
# Common nouns that look like surnames: щетина, скотина.
SURNAME_FALSE_ENDINGS = ("стина",)


class SecondDeclensionNoun:

    def __init__(self, lemma, stress=None):
        self.lemma = lemma
        self.word = lemma.text
        self.lc_word = lemma.lc_text
        self.stress_settings = stress

    @cached_property
    def stem(self):
        return get_noun_stem(self.lemma)

    @cached_property
    def lc_stem(self):
        return self.stem.lower()

    @cached_property
    def head(self):
        return initial(self.word)

    @property
    def soft(self):
        return last(self.lc_word) == "я"

    @property
    def sibilant_stem(self):
        return last(self.lc_stem) in ("ц", "ч", "ж", "ш", "щ")

    @property
    def aya_word(self):
        """Adjectives and participles used as nouns: столовая, чистая. Not свая, whose stem has no vowel."""
        return (
            self.lc_word.endswith("ая")
            and syllable_count(self.stem) > 0
            and not (len(self.word) < 3 or is_vowel(last(self.stem)))
        )

    @property
    def aya_sibilant_word(self):
        return self.aya_word and last(self.lc_stem) in RUSSIAN_SIBILANTS

    @property
    def surname_like(self):
        return (
            self.lemma.surname
            and ends_with_any(self.lc_word, SURNAME_ENDINGS)
            and not ends_with_any(self.lc_word, SURNAME_FALSE_ENDINGS)
        )

    def stress(self, case):
        return stress_for(self.stress_settings, case)


def feminine_instrumental(base, stress):
    """-ей/-ею after an unstressed ending, -ой/-ою after a stressed one."""
    if stress is None or stress == RussianStress.STEM:
        return [base + "ей", base + "ею"]
    if stress == RussianStress.ENDING:
        return [base + "ой", base + "ою"]
    return stressed_variants(stress, base + "ей", base + "ой", default=())


def _aya_sibilant_form(n, case):
    return stressed_variants(n.stress(case), n.stem + "ей", n.stem + "ой", default=[n.stem + "ей"])


SECOND_DECLENSION_RULES = MappingProxyType({
    RussianCase.GEN: (
        Rule("aya_sibilant", lambda n: n.aya_sibilant_word, lambda n: _aya_sibilant_form(n, RussianCase.GEN)),
        Rule("aya", lambda n: n.aya_word, lambda n: n.stem + "ой"),
        Rule("surname", lambda n: n.surname_like, lambda n: n.head + "ой"),
        Rule(
            "soft_sibilant_or_velar",
            lambda n: n.soft or last(n.lc_stem) in ("ч", "ж", "ш", "щ", "г", "к", "х"),
            lambda n: n.head + "и",
        ),
        Rule("default", always, lambda n: n.head + "ы"),
    ),
    RussianCase.DAT: (
        Rule("aya_sibilant", lambda n: n.aya_sibilant_word, lambda n: _aya_sibilant_form(n, RussianCase.DAT)),
        Rule("aya", lambda n: n.aya_word, lambda n: n.stem + "ой"),
        Rule("surname", lambda n: n.surname_like, lambda n: n.head + "ой"),
        Rule("iya", lambda n: last_two_chars(n.lc_word) == "ия", lambda n: n.head + "и"),
        Rule("default", always, lambda n: n.head + "е"),
    ),
    RussianCase.ACC: (
        Rule("aya", lambda n: n.aya_word, lambda n: n.stem + "ую"),
        Rule("soft", lambda n: n.soft, lambda n: n.head + "ю"),
        Rule("default", always, lambda n: n.head + "у"),
    ),
    RussianCase.INST: (
        Rule(
            "aya_sibilant",
            lambda n: n.aya_sibilant_word,
            lambda n: feminine_instrumental(n.stem, n.stress(RussianCase.INST)),
        ),
        Rule("aya", lambda n: n.aya_word, lambda n: n.stem + "ой"),
        Rule(
            "head_in_i",
            lambda n: (n.soft or n.sibilant_stem) and last(n.head).lower() == "и",
            lambda n: n.head + "ей",
        ),
        Rule(
            "sibilant",
            lambda n: n.sibilant_stem and not n.soft,
            lambda n: feminine_instrumental(n.head, n.stress(RussianCase.INST)),
        ),
        Rule("soft", lambda n: n.soft, lambda n: [n.head + "ей", n.head + "ею"]),
        Rule("default", always, lambda n: [n.head + "ой", n.head + "ою"]),
    ),
    RussianCase.PREP: (
        Rule("aya_sibilant", lambda n: n.aya_sibilant_word, lambda n: _aya_sibilant_form(n, RussianCase.PREP)),
        Rule("aya", lambda n: n.aya_word, lambda n: n.stem + "ой"),
        Rule("surname", lambda n: n.surname_like, lambda n: n.head + "ой"),
        Rule("iya", lambda n: last_two_chars(n.lc_word) == "ия", lambda n: n.head + "и"),
        Rule("default", always, lambda n: n.head + "е"),
    ),
})


def decline2(lemma, case, stress=None):
    if case == RussianCase.NOM:
        return [lemma.text]
    if case == RussianCase.LOC:
        return decline2(lemma, RussianCase.PREP, stress)
    return apply_rules(SECOND_DECLENSION_RULES[case], SecondDeclensionNoun(lemma, stress))
