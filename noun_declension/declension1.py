"""First declension: masculine and neuter nouns without an ending (стол, конь, окно, поле).

Also covers adjectives and participles used as nouns (лесничий, мороженое),
surnames in -ин/-ов/-ев and half-compounds (полминуты, полпути).
"""
from functools import cached_property
from types import MappingProxyType

from russian_case import RussianCase
from russian_gender import RussianGender
from russian_word import concat
from utils import ends_with_any, initial, last, last_two_chars, syllable_count
from noun_declension.declension0 import decline0
from noun_declension.declension2 import decline2
from noun_declension.declension3 import decline3
from noun_declension.morphemes import half_something, ok_word, soft_d1, ts_stem, ts_word
from noun_declension.rules import Rule, always, apply_rules
from noun_declension.stem import get_noun_stem
from noun_declension.stress import stress_for, stressed_variants


HALF_PREFIX = "пол"
HALF_FULL_PREFIX = "полу"

# Half-compounds that keep пол- in oblique cases.
HALF_KEEP_PREFIX_WORDS = frozenset((
    "полминуты",
))

ADJECTIVE_ENDINGS = ("ое", "нький", "ский", "евой", "овой")

# Stressed adjectives after velars and sibilants: лихой, большой, городской.
VELAR_ADJECTIVE_ENDINGS = ("хой", "жой", "шой", "ской", "цкой")

# Soft participles and adjectives used as nouns: адаптировавший, лесничий, прохожий.
PARTICIPLE_ENDINGS = ("ший", "щий", "чий", "жий", "жний", "шний")

SURNAME_ENDINGS = ("ин", "ов", "ев")

# Locatives that change the stem: во лбу, на льду.
IRREGULAR_LOCATIVES = MappingProxyType({
    "ветер": "ветру",
    "лоб": "лбу",
    "лёд": "льду",
    "лед": "льду",
    "мох": "мху",
    "угол": "углу",
})

# Nouns with a stressed -у/-ю locative: в лесу, на краю.
U_LOCATIVE_WORDS = frozenset((
    "ад", "бок", "бор", "бред", "быт", "верх", "вид",
    "глаз", "горб", "гроб",
    "долг", "дым", "зад", "клей", "край", "круг", "лад",
    "лес", "луг", "мёд", "мед", "мел", "мех",
    "мозг", "низ", "нос", "плен", "пол", "полк", "порт", "пух",
    "рай", "род", "сад", "снег", "строй", "тыл", "ход", "шкаф",
    "яр",
))


class FirstDeclensionNoun:

    def __init__(self, lemma, stress=None):
        self.lemma = lemma
        self.word = lemma.text
        self.lc_word = lemma.lc_text
        self.half = half_something(self.lc_word)
        self.stress_settings = stress

    @cached_property
    def lc_stem(self):
        return get_noun_stem(self.lemma).lower()

    @cached_property
    def stem(self):
        stem = get_noun_stem(self.lemma)
        if self.half:
            return HALF_FULL_PREFIX + stem[len(HALF_PREFIX):]
        return stem

    @cached_property
    def head(self):
        head = initial(self.word)
        if self.half:
            return HALF_FULL_PREFIX + head[len(HALF_PREFIX):]
        return head

    @property
    def soft(self):
        return (self.half and self.lc_word.endswith("я")) or soft_d1(self.lc_word)

    @property
    def iy_word(self):
        return last(self.lc_word) == "й" or last_two_chars(self.lc_word) in ("ий", "ие", "иё")

    @property
    def sch_word(self):
        return last(self.lc_stem) in ("ч", "щ")

    @property
    def sibilant_stem(self):
        return last(self.lc_stem) in ("ж", "ч", "ш", "щ")

    @property
    def surname_type1(self):
        return self.lemma.surname and ends_with_any(self.lc_word, SURNAME_ENDINGS)

    @property
    def iyoy(self):
        return (
            last_two_chars(self.lc_word) == "ый"
            or (self.lc_word.endswith("ной") and syllable_count(self.word) >= 2)
        )

    @property
    def hard_adjective(self):
        return (
            (self.iy_word and self.lemma.surname)
            or self.iyoy
            or ends_with_any(self.lc_word, ADJECTIVE_ENDINGS)
        )

    @property
    def velar_adjective(self):
        return self.lemma.gender == RussianGender.M and ends_with_any(self.lc_word, VELAR_ADJECTIVE_ENDINGS)

    @property
    def participle(self):
        return (
            self.lemma.gender == RussianGender.M
            and not self.lemma.surname
            and ends_with_any(self.lc_word, PARTICIPLE_ENDINGS)
        )

    @property
    def ts(self):
        return ts_word(self.lc_word)

    @property
    def ok(self):
        return ok_word(self.lc_word)

    @property
    def ok_head(self):
        """кусок - кус-, мешочек - мешоч-."""
        return self.word[:-2]

    def stress(self, case):
        return stress_for(self.stress_settings, case)


def _sibilant_instrumental(n):
    return stressed_variants(
        n.stress(RussianCase.INST),
        n.stem + "ем",
        n.stem + "ом",
        default=[n.stem + "ем"],
    )


def _ts_instrumental(n):
    head = ts_stem(n.word)
    return stressed_variants(n.stress(RussianCase.INST), head + "цем", head + "цом", default=[head + "цем"])


FIRST_DECLENSION_RULES = MappingProxyType({
    RussianCase.GEN: (
        Rule("hard_adjective", lambda n: n.hard_adjective, lambda n: n.stem + "ого"),
        Rule("velar_adjective", lambda n: n.velar_adjective, lambda n: n.stem + "ого"),
        Rule("soft_adjective", lambda n: n.lc_word.endswith("ее"), lambda n: n.stem + "его"),
        Rule("participle", lambda n: n.participle, lambda n: n.stem + "его"),
        Rule("iy", lambda n: n.iy_word, lambda n: n.head + "я"),
        Rule("soft", lambda n: n.soft and not n.sch_word, lambda n: n.stem + "я"),
        Rule("ts", lambda n: n.ts, lambda n: ts_stem(n.word) + "ца"),
        Rule("ok", lambda n: n.ok, lambda n: n.ok_head + "ка"),
        Rule("default", always, lambda n: n.stem + "а"),
    ),
    RussianCase.DAT: (
        Rule("hard_adjective", lambda n: n.hard_adjective, lambda n: n.stem + "ому"),
        Rule("velar_adjective", lambda n: n.velar_adjective, lambda n: n.stem + "ому"),
        Rule("soft_adjective", lambda n: n.lc_word.endswith("ее"), lambda n: n.stem + "ему"),
        Rule("participle", lambda n: n.participle, lambda n: n.stem + "ему"),
        Rule("iy", lambda n: n.iy_word, lambda n: n.head + "ю"),
        Rule("soft", lambda n: n.soft and not n.sch_word, lambda n: n.stem + "ю"),
        Rule("ts", lambda n: n.ts, lambda n: ts_stem(n.word) + "цу"),
        Rule("ok", lambda n: n.ok, lambda n: n.ok_head + "ку"),
        Rule("default", always, lambda n: n.stem + "у"),
    ),
    RussianCase.INST: (
        Rule("soft_adjective", lambda n: n.lc_word.endswith("ее"), lambda n: n.stem + "им"),
        Rule(
            "adjective",
            lambda n: (n.iy_word and n.lemma.surname) or ends_with_any(n.lc_word, ("ое", "нький", "ский")),
            lambda n: concat(n.stem, "ым"),
        ),
        Rule(
            "hard_adjective",
            lambda n: n.iyoy or ends_with_any(n.lc_word, ("евой", "овой")),
            lambda n: n.stem + "ым",
        ),
        Rule("velar_adjective", lambda n: n.velar_adjective, lambda n: n.stem + "им"),
        Rule("participle", lambda n: n.participle, lambda n: n.stem + "им"),
        Rule("iy", lambda n: n.iy_word, lambda n: n.head + "ем"),
        Rule("soft", lambda n: n.soft, lambda n: n.stem + "ем"),
        Rule(
            "sibilant",
            lambda n: n.sibilant_stem and (last(n.lc_stem) != "щ" or n.stress(RussianCase.INST) is not None),
            _sibilant_instrumental,
        ),
        Rule("ts", lambda n: n.ts, _ts_instrumental),
        Rule("tse", lambda n: n.lc_word.endswith("це"), lambda n: n.word + "м"),
        Rule("ok", lambda n: n.ok, lambda n: n.ok_head + "ком"),
        Rule("surname", lambda n: n.surname_type1, lambda n: n.word + "ым"),
        Rule("default", always, lambda n: n.stem + "ом"),
    ),
    RussianCase.PREP: (
        Rule("hard_adjective", lambda n: n.hard_adjective, lambda n: n.stem + "ом"),
        Rule("velar_adjective", lambda n: n.velar_adjective, lambda n: n.stem + "ом"),
        Rule("soft_adjective", lambda n: n.lc_word.endswith("ее"), lambda n: n.stem + "ем"),
        Rule("participle", lambda n: n.participle, lambda n: n.stem + "ем"),
        Rule("iy_ie", lambda n: last_two_chars(n.lc_word) in ("ий", "ие"), lambda n: n.head + "и"),
        Rule(
            "y_or_iyo",
            lambda n: last(n.lc_word) == "й" or last_two_chars(n.lc_word) == "иё",
            lambda n: n.head + "е",
        ),
        Rule("ts", lambda n: n.ts, lambda n: ts_stem(n.word) + "це"),
        Rule("ok", lambda n: n.ok, lambda n: n.ok_head + "ке"),
        Rule("default", always, lambda n: n.stem + "е"),
    ),
})


def _irregular_locative(word):
    form = IRREGULAR_LOCATIVES[word.lower()]
    return word[0] + form[1:]


LOCATIVE_RULES = (
    Rule("irregular", lambda n: n.lc_word in IRREGULAR_LOCATIVES, lambda n: _irregular_locative(n.word)),
    Rule(
        "u_word",
        lambda n: n.lc_word in U_LOCATIVE_WORDS,
        lambda n: n.word[:-1] + "ю" if last(n.lc_word) == "й" else n.word + "у",
    ),
    Rule("prepositional", always, lambda n: decline1(n.lemma, RussianCase.PREP, n.stress_settings)),
)


def _decline_half(lemma, case):
    """полминуты, полпути: oblique cases follow the full word (полуминуты, полупути)."""
    word = lemma.text
    lc_word = lemma.lc_text

    if case in (RussianCase.NOM, RussianCase.ACC):
        return [word]

    w = word
    if lc_word not in HALF_KEEP_PREFIX_WORDS:
        w = HALF_FULL_PREFIX + w[len(HALF_PREFIX):]

    feminine = lemma.replace(gender=RussianGender.F)

    if lc_word == "полпути":
        if case in (RussianCase.PREP, RussianCase.LOC):
            return [word]
        return decline0(feminine.replace(text=initial(w) + "ь"), case)
    elif w.lower().endswith("зни"):
        return decline3(feminine.replace(text=initial(w) + "ь"), case)
    else:
        # полпесни - полупесня, полминуты - полминута.
        e = "я" if last(initial(w)).lower() == "н" else "а"
        return decline2(feminine.replace(text=initial(w) + e), case)


def decline1(lemma, case, stress=None):
    n = FirstDeclensionNoun(lemma, stress)

    if n.half and ends_with_any(n.lc_word, ("и", "ы")):
        return _decline_half(lemma, case)

    if case == RussianCase.NOM:
        return [n.word]

    if case == RussianCase.ACC:
        if lemma.gender != RussianGender.N and lemma.is_animate:
            return decline1(lemma, RussianCase.GEN, stress)
        return [n.word]

    if case == RussianCase.LOC:
        return apply_rules(LOCATIVE_RULES, n)

    return apply_rules(FIRST_DECLENSION_RULES[case], n)
