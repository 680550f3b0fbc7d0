from types import MappingProxyType

from russian_case import RussianCase
from utils import last_two_chars
from noun_declension.stem import get_noun_stem


# Words declined from a longer stem outside the nominative and accusative.
EXTENDED_STEM_WORDS = MappingProxyType({
    "дочь": "дочерь",
    "мать": "матерь",
})

MYA_SUFFIXES = MappingProxyType({
    RussianCase.GEN: "ени",
    RussianCase.DAT: "ени",
    RussianCase.INST: "енем",
    RussianCase.PREP: "ени",
})

ZERO_ENDING_SUFFIXES = MappingProxyType({
    RussianCase.GEN: "и",
    RussianCase.DAT: "и",
    RussianCase.INST: "ью",
    RussianCase.PREP: "и",
})


def extended_stem_text(word):
    """дочь -> дочерь, keeping the letter case of the first letter."""
    extended = EXTENDED_STEM_WORDS[word.lower()]
    return word[0] + extended[1:]


def decline3(lemma, case, stress=None):
    """Feminine nouns without an ending (тень, ночь) and neuter nouns in -мя (имя, время)."""
    word = lemma.text
    lc_word = lemma.lc_text

    if case in (RussianCase.NOM, RussianCase.ACC):
        return [word]

    if lc_word in EXTENDED_STEM_WORDS:
        return decline3(lemma.replace(text=extended_stem_text(word)), case, stress)

    if case == RussianCase.LOC:
        return decline3(lemma, RussianCase.PREP, stress)

    stem = get_noun_stem(lemma)
    if last_two_chars(lc_word) == "мя":
        return [stem + MYA_SUFFIXES[case]]
    return [stem + ZERO_ENDING_SUFFIXES[case]]
