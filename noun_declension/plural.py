"""Nominative plural.

Each declension class has its own cascade; the oblique plural cases are
built on top of the result by plural_cases.
"""
from functools import cached_property
from types import MappingProxyType

from russian_errors import UnsupportedForm
from russian_gender import RussianGender
from russian_word import concat
from utils import (
    ends_with_any,
    initial,
    is_upper,
    is_vowel,
    last,
    last_of_n_initial,
    last_two_chars,
    n_initial,
    re_yo,
    syllable_count,
    un_yo,
)
from noun_declension.classifier import INDECLINABLE, get_declension
from noun_declension.declension3 import EXTENDED_STEM_WORDS, extended_stem_text
from noun_declension.morphemes import ok_word, soft_d1, ts_stem, ts_word
from noun_declension.rules import Rule, always, apply_rules
from noun_declension.stem import get_noun_stem


# Plurals in -ья/-я from a softened stem: брат - братья, друг - друзья.
SOFT_YA_WORDS = frozenset((
    "зять",
    "друг",
    "брат", "собрат",
    "лист", "стул",
    "брус",
    "обод", "полоз",
    "струп",
    "подмастерье",

    "перо",
    "шило",
))

# Both -ы/-и and -ья: прутья/пруты.
SOFT_YA_SECONDARY_WORDS = frozenset((
    "лоскут",
    "повод",
    "прут",
    "сук",
))

# Stressed -а/-я plurals: дома, города.
A_WORDS = frozenset((
    "адрес",
    "берег", "бок",
    "век",
    "вес",
    "вечер",
    "лес", "снег",
    "глаз",
    "город",
    "дом",
    "детдом",
    "счет", "счёт",
))

A_WORD_ENDINGS = (
    "поезд",
    "цех",
)

# -а/-я plural with the -ы/-и one as a second variant: года/годы.
A_SECONDARY_WORDS = frozenset((
    "год",
    "вексель",
    "ветер",
))

ANIN_WORDS = frozenset((
    "барин", "боярин",
))

YONOK_FALSE_ENDINGS = ("коленок", "стенок", "венок", "ценок")

ADJECTIVE_PLURAL_ENDINGS = ("щий", "чий", "жний", "шний", "ший", "жий", "ский", "цкий")

# Stressed adjectives after velars and sibilants: лихой - лихие.
VELAR_ADJECTIVE_ENDINGS = ("хой", "жой", "шой", "ской", "цкой")

NEUTER_KO_FALSE_ENDINGS = ("войско", "облако")

NEUTER_YA_ENDINGS = ("дерево", "звено", "крыло")

# Neuters whose е turns into ё in the plural: стекло - стёкла.
NEUTER_YO_WORDS = frozenset((
    "тесло", "стекло",
    "бедро", "берцо",
    "чело", "стегно", "стебло",
))

IRREGULAR_PLURALS = MappingProxyType({
    "ухо": ("уши",),
    "око": ("очи",),
    "дно": ("донья",),
    "чудо": ("чудеса", "чуда"),
    "заря": ("зори",),
    "путь": ("пути",),
})


class PluralNoun:

    def __init__(self, lemma):
        self.lemma = lemma
        self.word = lemma.text
        self.lc_word = lemma.lc_text
        self.gender = lemma.gender

    @cached_property
    def stem(self):
        return get_noun_stem(self.lemma)

    @cached_property
    def lc_stem(self):
        return self.stem.lower()

    @cached_property
    def simple_first_part(self):
        if (last(self.lc_word) == "й" or is_vowel(last(self.word))) and is_vowel(last(initial(self.word))):
            return initial(self.word)
        return self.stem

    @cached_property
    def soft_stem(self):
        """друг - друзь-, сук - сучь-, брат - брать-."""
        if last(self.lc_stem) == "ь":
            return self.stem
        if last(self.lc_stem) == "к":
            return initial(self.stem) + "чь"
        if last(self.lc_stem) == "г":
            return initial(self.stem) + "зь"
        return self.stem + "ь"

    @property
    def soft_patronymic(self):
        return ends_with_any(self.lc_word, ("евич", "евна")) and "ье" in self.lc_word

    def soft_patronymic_form2(self):
        """Васильевич - Василиевич."""
        part = self.simple_first_part
        index = part.lower().index("ье")
        r = "И" if is_upper(part[index]) else "и"
        return part[:index] + r + part[index + 1:]


def y_or_i(n):
    """The default plural: -и after velars, sibilants and soft endings, -ы elsewhere."""
    if (
        last(n.lc_stem) in ("г", "х", "ч", "ж", "ш", "щ", "к")
        or last(n.lc_word) in ("я", "й", "ь")
    ):
        ending = "и"
    elif ts_word(n.lc_word):
        return [ts_stem(n.word) + "цы"]
    else:
        ending = "ы"

    if n.soft_patronymic:
        return [n.soft_patronymic_form2() + ending, n.simple_first_part + ending]
    return [n.simple_first_part + ending]


def _irregular(n):
    return list(IRREGULAR_PLURALS[n.lc_word])


def _a_word_plural(n):
    s = un_yo(n.stem)
    result = [s + "я" if soft_d1(n.lc_word) else s + "а"]
    if n.lc_word in A_SECONDARY_WORDS:
        result.extend(y_or_i(n))
    return result


def _neuter_ye_plural(n):
    w = n_initial(n.word, 2)
    result = []
    if last(n.lc_word) == "е":
        result.append(w + "ия")
    result.append(w + "ья")
    return result


MASCULINE_PLURAL_RULES = (
    Rule("son", lambda n: n.lc_word == "сын", lambda n: ["сыновья"] + y_or_i(n)),
    Rule("person", lambda n: n.lc_word == "человек", lambda n: ["люди"] + y_or_i(n)),
    Rule(
        "soft_ya_secondary",
        lambda n: n.lc_word in SOFT_YA_SECONDARY_WORDS,
        lambda n: y_or_i(n) + [n.soft_stem + "я"],
    ),
    Rule(
        "stressed_a",
        lambda n: (
            n.lc_word in A_WORDS
            or ends_with_any(n.lc_word, A_WORD_ENDINGS)
            or n.lc_word in A_SECONDARY_WORDS
        ),
        _a_word_plural,
    ),
    Rule(
        "anin",
        lambda n: n.lc_word.endswith("анин") or n.lc_word.endswith("янин") or n.lc_word in ANIN_WORDS,
        lambda n: n_initial(n.word, 2) + "е",
    ),
    Rule("gypsy", lambda n: n.lc_word == "цыган", lambda n: n.word + "е"),
    Rule(
        "yonok",
        lambda n: (
            (n.lc_word.endswith("ёнок") or n.lc_word.endswith("енок"))
            and not ends_with_any(n.lc_word, YONOK_FALSE_ENDINGS)
        ),
        lambda n: n_initial(n.word, 4) + "ята",
    ),
    Rule("yonochek", lambda n: n.lc_word.endswith("ёночек"), lambda n: n_initial(n.word, 6) + "ятки"),
    Rule(
        "onok",
        lambda n: (
            n.lc_word.endswith("онок")
            and last_of_n_initial(n.lc_word, 4) in ("ч", "ж", "ш")
            and not n.lc_word.endswith("бочонок")
        ),
        lambda n: n_initial(n.word, 4) + "ата",
    ),
    Rule("ok", lambda n: ok_word(n.lc_word), lambda n: n.word[:-2] + "ки"),
    Rule(
        "adjective",
        lambda n: n.lc_word.endswith("ый") or ends_with_any(n.lc_word, ADJECTIVE_PLURAL_ENDINGS),
        lambda n: initial(n.word) + "е",
    ),
    Rule(
        "velar_adjective",
        lambda n: ends_with_any(n.lc_word, VELAR_ADJECTIVE_ENDINGS),
        lambda n: n_initial(n.word, 2) + "ие",
    ),
    Rule(
        "stressed_adjective",
        lambda n: (
            (n.lc_word.endswith("вой") and syllable_count(n_initial(n.word, 3)) >= 2)
            or (n.lc_word.endswith("ной") and len(n.word) >= 6)
        ),
        lambda n: n_initial(n.word, 2) + "ые",
    ),
    Rule("ego", lambda n: n.lc_word.endswith("его"), lambda n: n_initial(n.word, 3) + "ие"),
    Rule(
        "surname_adjective",
        lambda n: n.lemma.surname and n.lc_word.endswith("ой"),
        lambda n: concat(n_initial(n.word, 2), "ые"),
    ),
    Rule("default", always, y_or_i),
)


NEUTER_PLURAL_RULES = (
    Rule("irregular", lambda n: n.lc_word in ("ухо", "око"), _irregular),
    Rule(
        "ko",
        lambda n: ends_with_any(n.lc_word, ("ко", "чо")) and not ends_with_any(n.lc_word, NEUTER_KO_FALSE_ENDINGS),
        lambda n: initial(n.word) + "и",
    ),
    Rule("imoe", lambda n: n.lc_word.endswith("имое"), lambda n: n.stem + "ые"),
    Rule("ee", lambda n: n.lc_word.endswith("ее"), lambda n: n.stem + "ие"),
    Rule(
        "oe",
        lambda n: n.lc_word.endswith("ое"),
        lambda n: n.stem + ("ие" if ends_with_any(n.lc_stem, ("г", "к", "ж", "ш")) else "ые"),
    ),
    Rule("ie", lambda n: ends_with_any(n.lc_word, ("ие", "иё")), lambda n: n_initial(n.word, 2) + "ия"),
    Rule("ye", lambda n: ends_with_any(n.lc_word, ("ье", "ьё")), _neuter_ye_plural),
    Rule("ya_words", lambda n: ends_with_any(n.lc_word, NEUTER_YA_ENDINGS), lambda n: n.stem + "ья"),
    Rule("irregular_late", lambda n: n.lc_word in ("дно", "чудо"), _irregular),
    Rule("le_re", lambda n: ends_with_any(n.lc_word, ("ле", "ре")), lambda n: n.stem + "я"),
    Rule("yo", lambda n: n.lc_word in NEUTER_YO_WORDS, lambda n: re_yo(n.stem) + "а"),
    Rule("default", always, lambda n: n.stem + "а"),
)


def _pluralize0(n):
    if n.lc_word == "путь":
        return _irregular(n)
    if n.lc_word.endswith("дитя"):
        return [n_initial(n.word, 3) + "ети"]
    raise UnsupportedForm(f"No irregular plural is known for {n.word!r}.")


def _pluralize1(n):
    if n.lc_word in SOFT_YA_WORDS:
        return [n.soft_stem + "я"]
    if n.gender == RussianGender.M:
        return apply_rules(MASCULINE_PLURAL_RULES, n)
    if n.gender == RussianGender.N:
        return apply_rules(NEUTER_PLURAL_RULES, n)
    return [n.stem + "и"]


SECOND_DECLENSION_PLURAL_RULES = (
    Rule("irregular", lambda n: n.lc_word == "заря", _irregular),
    Rule(
        "aya",
        lambda n: n.lc_word.endswith("ая") and syllable_count(n.stem) > 0,
        lambda n: n.stem + (
            "ие"
            if last(n.lc_stem) in ("ж", "ш") or ends_with_any(n.lc_stem, ("ск", "цк"))
            else "ые"
        ),
    ),
    Rule("default", always, y_or_i),
)


def _extended_stem_plural(n):
    return initial(extended_stem_text(n.word)) + "и"


THIRD_DECLENSION_PLURAL_RULES = (
    Rule("mya", lambda n: last_two_chars(n.lc_word) == "мя", lambda n: n.stem + "ена"),
    Rule("extended_stem", lambda n: n.lc_word in EXTENDED_STEM_WORDS, _extended_stem_plural),
    Rule("feminine", lambda n: n.gender == RussianGender.F, lambda n: n.simple_first_part + "и"),
    Rule(
        "default",
        always,
        lambda n: n.simple_first_part + ("я" if last(n.simple_first_part) == "и" else "а"),
    ),
)


def pluralize(lemma):
    """Nominative plural forms of the lemma, preferred form first."""
    if lemma.plurale_tantum:
        return [lemma.text]

    n = PluralNoun(lemma)
    declension = get_declension(lemma)

    if declension == INDECLINABLE:
        return [lemma.text]
    elif declension == 0:
        return _pluralize0(n)
    elif declension == 1:
        return _pluralize1(n)
    elif declension == 2:
        return apply_rules(SECOND_DECLENSION_PLURAL_RULES, n)
    else:
        return apply_rules(THIRD_DECLENSION_PLURAL_RULES, n)
