"""Plural case forms.

The endings are layered on an already known nominative plural (see
plural.pluralize), so callers that cache the plural never recompute it.
"""
from functools import cached_property
from types import MappingProxyType

from russian_case import RussianCase
from russian_gender import RussianGender
from russian_word import concat
from utils import (
    RUSSIAN_SIBILANTS,
    RUSSIAN_VELARS,
    ends_with_any,
    is_consonant,
    is_vowel,
    last,
    last_of_n_initial,
)
from noun_declension.classifier import get_declension
from noun_declension.declension2 import SURNAME_FALSE_ENDINGS
from noun_declension.rules import Rule, always, apply_rules
from noun_declension.stress import stress_for, stressed_variants


IRREGULAR_GENITIVES = MappingProxyType({
    "люди": "людей",
    "дети": "детей",
    "пути": "путей",
    "друзья": "друзей",
    "сыновья": "сыновей",
    "князья": "князей",
    "мужья": "мужей",
    "деньги": "денег",
    "чудеса": "чудес",
    "уши": "ушей",
    "очи": "очей",
    "глаза": "глаз",
    "солдаты": "солдат",
    "сапоги": "сапог",
    "чулки": "чулок",
    "очки": "очков",
    "облака": "облаков",
    "кольца": "колец",
    "платья": "платьев",
    "семена": "семян",
    "донья": "доньев",
})

IRREGULAR_INSTRUMENTALS = MappingProxyType({
    "люди": ("людьми",),
    "дети": ("детьми",),
    "лошади": ("лошадьми", "лошадями"),
    "дочери": ("дочерьми", "дочерями"),
})

# Consonant pairs that take a fleeting vowel in the genitive plural: окно - окон, сестра - сестер.
FLEETING_VOWEL_CLUSTERS = frozenset((
    "кн", "кл", "сл", "см", "сн", "тр", "др", "бр", "вн", "тн", "рн", "чн", "шн",
))

ADJECTIVE_PLURAL_ENDINGS = ("ые", "ие")

# Possessive surnames decline adjectivally in the plural: Ивановы - Ивановых.
SURNAME_ENDINGS = ("ов", "ев", "ёв", "ин", "ын", "ова", "ева", "ёва", "ина", "ына")

OBLIQUE_ENDINGS = MappingProxyType({
    RussianCase.DAT: "ям",
    RussianCase.INST: "ями",
    RussianCase.PREP: "ях",
})

ADJECTIVE_OBLIQUE_ENDINGS = MappingProxyType({
    RussianCase.DAT: "м",
    RussianCase.INST: "ми",
    RussianCase.PREP: "х",
})

SURNAME_OBLIQUE_ENDINGS = MappingProxyType({
    RussianCase.GEN: "ых",
    RussianCase.DAT: "ым",
    RussianCase.INST: "ыми",
    RussianCase.PREP: "ых",
})


def _keep_initial(form, replacement):
    return form[0] + replacement[1:]


def insert_fleeting_vowel(base):
    """окн - окон, девушк - девушек, копейк - копеек, письм - писем."""
    lc_base = base.lower()
    if len(lc_base) < 2 or not is_consonant(last(lc_base)) or last(lc_base) == "й":
        return base

    before = last_of_n_initial(lc_base, 1)
    if before in ("й", "ь"):
        return base[:-2] + "е" + base[-1]
    if not is_consonant(before):
        return base

    if last(lc_base) == "к" or lc_base[-2:] in FLEETING_VOWEL_CLUSTERS:
        if before in RUSSIAN_VELARS or (last(lc_base) == "к" and before not in RUSSIAN_SIBILANTS):
            vowel = "о"
        else:
            vowel = "е"
        return base[:-1] + vowel + base[-1]

    return base


class PluralCaseNoun:

    def __init__(self, lemma, plural_form, stress=None):
        self.lemma = lemma
        self.form = plural_form
        self.lc_form = plural_form.lower()
        self.lc_word = lemma.lc_text
        self.stress_settings = stress

    @cached_property
    def declension(self):
        if self.lemma.gender is None or self.lemma.plurale_tantum:
            return None
        return get_declension(self.lemma)

    @property
    def base(self):
        """The plural without its final vowel."""
        if is_vowel(last(self.lc_form)):
            return self.form[:-1]
        return self.form

    @property
    def masculine(self):
        return self.lemma.gender == RussianGender.M and self.declension == 1

    @property
    def neuter(self):
        return self.lemma.gender == RussianGender.N and self.declension == 1

    @property
    def adjective(self):
        return ends_with_any(self.lc_form, ADJECTIVE_PLURAL_ENDINGS)

    @property
    def surname(self):
        return (
            self.lemma.surname
            and self.lc_form.endswith("ы")
            and ends_with_any(self.lc_word, SURNAME_ENDINGS)
            and not ends_with_any(self.lc_word, SURNAME_FALSE_ENDINGS)
        )

    def stress(self, case):
        return stress_for(self.stress_settings, case, plural=True)

    def ts_stress(self):
        """Plural genitive stress, else the singular instrumental one: пальцем - пальцев, отцом - отцов."""
        stress = self.stress(RussianCase.GEN)
        if stress is None:
            stress = stress_for(self.stress_settings, RussianCase.INST)
        return stress


def _masculine_ts_genitive(n):
    return stressed_variants(
        n.ts_stress(),
        n.base + "ев",
        n.base + "ов",
        default=[n.base + "ев"],
    )


GENITIVE_RULES = (
    Rule(
        "irregular",
        lambda n: n.lc_form in IRREGULAR_GENITIVES,
        lambda n: _keep_initial(n.form, IRREGULAR_GENITIVES[n.lc_form]),
    ),
    Rule("surname", lambda n: n.surname, lambda n: n.base + SURNAME_OBLIQUE_ENDINGS[RussianCase.GEN]),
    Rule("adjective", lambda n: n.adjective, lambda n: n.form[:-1] + "х"),
    Rule(
        "yata",
        lambda n: n.lemma.gender == RussianGender.M and ends_with_any(n.lc_form, ("ята", "ата")),
        lambda n: n.form[:-1],
    ),
    Rule("anin", lambda n: ends_with_any(n.lc_form, ("ане", "яне")), lambda n: n.form[:-1]),
    Rule(
        "neuter_ye",
        lambda n: n.lc_form.endswith("ья") and ends_with_any(n.lc_word, ("ье", "ьё")),
        lambda n: n.form[:-2] + "ий",
    ),
    Rule("ya_soft", lambda n: n.lc_form.endswith("ья"), lambda n: n.form[:-1] + "ев"),
    Rule("iya", lambda n: n.lc_form.endswith("ия"), lambda n: n.form[:-1] + "й"),
    Rule(
        "ii",
        lambda n: n.lc_form.endswith("ии"),
        lambda n: n.form[:-1] + ("ев" if n.lemma.gender == RussianGender.M else "й"),
    ),
    Rule("ena", lambda n: n.lc_form.endswith("ена"), lambda n: n.form[:-1]),
    Rule("masculine_y", lambda n: n.masculine and last(n.lc_word) == "й", lambda n: n.base + "ев"),
    Rule(
        "masculine_soft",
        lambda n: n.masculine and (last(n.lc_word) == "ь" or last(n.lc_word) in RUSSIAN_SIBILANTS),
        lambda n: n.base + "ей",
    ),
    Rule("masculine_ts", lambda n: n.masculine and last(n.lc_word) == "ц", _masculine_ts_genitive),
    Rule("masculine", lambda n: n.masculine, lambda n: n.base + "ов"),
    Rule("neuter_soft", lambda n: n.neuter and n.lc_form.endswith("я"), lambda n: n.base + "ей"),
    Rule("soft_i", lambda n: n.lc_form.endswith("ьи"), lambda n: n.form[:-2] + "ей"),
    Rule("third", lambda n: n.declension == 3, lambda n: n.base + "ей"),
    Rule(
        "soft_ya_after_vowel",
        lambda n: n.declension == 2 and last(n.lc_word) == "я" and is_vowel(last_of_n_initial(n.lc_word, 1)),
        lambda n: n.base + "й",
    ),
    Rule("soft_ya", lambda n: n.declension == 2 and last(n.lc_word) == "я", lambda n: n.base + "ь"),
    Rule(
        "plurale_tantum_soft",
        lambda n: (
            n.lemma.plurale_tantum
            and n.lc_form.endswith("и")
            and last_of_n_initial(n.lc_form, 1) not in RUSSIAN_VELARS
        ),
        lambda n: n.base + "ей",
    ),
    Rule("default", always, lambda n: insert_fleeting_vowel(n.base)),
)


def _oblique(n, case):
    soft_ending = OBLIQUE_ENDINGS[case]
    if n.surname:
        return n.base + SURNAME_OBLIQUE_ENDINGS[case]
    if n.adjective:
        return n.form[:-1] + ADJECTIVE_OBLIQUE_ENDINGS[case]
    if n.lc_form.endswith("я"):
        return n.base + soft_ending
    if n.lc_form.endswith("и"):
        return concat(n.base, soft_ending)
    return n.base + "а" + soft_ending[1:]


def decline_plural(lemma, case, plural_form, stress=None):
    """Plural forms of the lemma in the case, built on the nominative plural `plural_form`."""
    case = RussianCase.parse(case)
    n = PluralCaseNoun(lemma, plural_form, stress)

    if case == RussianCase.NOM:
        return [plural_form]
    if case == RussianCase.ACC:
        if lemma.is_animate:
            return decline_plural(lemma, RussianCase.GEN, plural_form, stress)
        return [plural_form]
    if case == RussianCase.GEN:
        return apply_rules(GENITIVE_RULES, n)
    if case == RussianCase.LOC:
        return decline_plural(lemma, RussianCase.PREP, plural_form, stress)

    if case == RussianCase.INST and n.lc_form in IRREGULAR_INSTRUMENTALS:
        return [_keep_initial(plural_form, f) for f in IRREGULAR_INSTRUMENTALS[n.lc_form]]
    return [_oblique(n, case)]
