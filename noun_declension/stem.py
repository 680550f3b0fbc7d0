from typing import NamedTuple, Optional

from russian_gender import RussianGender
from utils import (
    RUSSIAN_CONSONANTS_EXCEPT_J,
    ends_with_any,
    initial,
    is_vowel,
    last,
    last_of_n_initial,
    n_initial,
    syllable_count,
)
from noun_declension.rules import Rule, always, apply_rules, find_rule


# Masculine -ень words that keep the е: ясеня, not ясня.
EN_KEEP_WORDS = (
    "ясень", "бюллетень", "олень", "гордень", "пельмень", "ячмень",
)

FLEETING_VOWEL_WORDS = frozenset((
    "пес", "пёс", "шов",
))


class StemSubject(NamedTuple):
    word: str
    lc_word: str
    gender: Optional[RussianGender]


def get_stem(word):
    """Strip a final vowel, or a vowel/й after another vowel."""
    c = last(word).lower()
    if (c == "й" or is_vowel(c)) and is_vowel(last(initial(word))):
        return n_initial(word, 2)
    if is_vowel(c):
        return initial(word)
    return word


STEM_RULES = (
    Rule(
        "fleeting_vowel_word",
        lambda s: s.lc_word in FLEETING_VOWEL_WORDS,
        lambda s: n_initial(s.word, 2) + last(s.word),
    ),
    Rule(
        "rek_diminutive",
        lambda s: s.lc_word.endswith("рёк") and syllable_count(s.word) >= 2,
        lambda s: n_initial(s.word, 2) + "ьк",
    ),
    Rule(
        "yok_after_vowel",
        lambda s: s.lc_word.endswith("ёк") and is_vowel(last_of_n_initial(s.word, 2)),
        lambda s: n_initial(s.word, 2) + "йк",
    ),
    Rule(
        "hard_consonant",
        lambda s: last(s.lc_word) in RUSSIAN_CONSONANTS_EXCEPT_J,
        lambda s: s.word,
    ),
    Rule(
        "masculine_en",
        lambda s: (
            last(s.lc_word) == "ь"
            and s.lc_word.endswith("ень")
            and s.gender == RussianGender.M
            and not ends_with_any(s.lc_word, EN_KEEP_WORDS)
        ),
        lambda s: s.word[:-3] + "н",
    ),
    Rule(
        "soft_sign",
        lambda s: last(s.lc_word) == "ь",
        lambda s: initial(s.word),
    ),
    Rule(
        "soft_sign_before_last",
        lambda s: last(initial(s.lc_word)) == "ь",
        lambda s: initial(s.word),
    ),
    Rule(
        "o_after_consonant",
        lambda s: last(s.lc_word) == "о" and last(initial(s.lc_word)) in ("л", "м", "н", "т", "х", "в", "с"),
        lambda s: initial(s.word),
    ),
    Rule(
        "general",
        always,
        lambda s: get_stem(s.word),
    ),
)


def _subject(lemma):
    return StemSubject(word=lemma.text, lc_word=lemma.lc_text, gender=lemma.gender)


def get_noun_stem(lemma):
    """The part of the lemma that case and number endings attach to."""
    return apply_rules(STEM_RULES, _subject(lemma))[0]


def stem_rule_name(lemma):
    return find_rule(STEM_RULES, _subject(lemma)).name
