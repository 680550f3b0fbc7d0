"""Declension classes.

Numbering follows the academic grammars (Камынина, Современный русский язык.
Морфология, § 36): masculine and neuter nouns without an ending form the
first declension, nouns in -а/-я the second. School textbooks swap the two;
see get_school_declension.
"""
from russian_errors import InvalidLemma, UnsupportedForm
from russian_gender import RussianGender
from utils import last, last_two_chars


INDECLINABLE = -1

DECLENSION_LABELS = {
    0: "разносклоняемые «путь» и «дитя»",
    1: "муж., средний род без окончания",
    2: "слова на «а», «я» (м., ж. и общий род)",
    3: "жен. род без окончания, слова на «мя»",
}

CLASS_0_NEUTER_WORDS = frozenset((
    "дитя", "полудитя",
))


def get_declension(lemma):
    """Declension class of the lemma: 0, 1, 2, 3, or -1 for indeclinable words."""
    if lemma.indeclinable:
        return INDECLINABLE

    if lemma.gender is None:
        if lemma.plurale_tantum:
            raise UnsupportedForm(f"{lemma.text!r} is plurale tantum and has no singular declension.")
        raise InvalidLemma(f"A grammatical gender is required for {lemma.text!r}.")

    lc_word = lemma.lc_text
    t = last(lc_word)

    gender = lemma.gender
    if gender == RussianGender.F:
        return 2 if t in ("а", "я") else 3
    elif gender == RussianGender.M:
        if t in ("а", "я"):
            return 2
        return 0 if lc_word == "путь" else 1
    elif gender == RussianGender.N:
        if lc_word in CLASS_0_NEUTER_WORDS:
            return 0
        return 3 if last_two_chars(lc_word) == "мя" else 1
    elif gender == RussianGender.C:
        if t in ("а", "я"):
            return 2
        elif t == "и":
            return INDECLINABLE
        else:
            return 1
    else:
        raise InvalidLemma(f"Bad grammatical gender for {lemma.text!r}: {gender!r}.")


def get_school_declension(lemma):
    """Class as taught at school: вода is first, стол and окно second. -1 for indeclinable words."""
    d = get_declension(lemma)
    if d == 1:
        return 2
    elif d == 2:
        return 1
    else:
        return d
