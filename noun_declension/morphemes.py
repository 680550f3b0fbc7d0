"""Lexical and morphological predicates shared by the generators and the pluralizer.

Predicates take the lower-cased word unless noted otherwise.
"""
import re

from utils import (
    RUSSIAN_CONSONANTS,
    ends_with_any,
    initial,
    is_vowel,
    last,
    last_n,
    last_of_n_initial,
    n_initial,
    syllable_count,
)


# -ок words that keep their о in oblique cases: поток - потока.
OK_FIXED_WORDS = (
    "поток", "приток", "переток", "проток", "биоток", "электроток",
    "восток", "водосток", "водоток", "воток",
    "знаток",
)

# -ок words that lose the о although the general test misses them: желток - желтка.
OK_FLEETING_WORDS = (
    "лапоток", "желток",
)

_FIRST_LETTER = re.compile(r"[а-яА-ЯёЁ]")


def ts_word(w):
    return last(w) == "ц"


def ts_stem(word):
    """Stem of a word in -ц before the ending: отец - отц-, боец - бойц-, палец - пальц-.

    Takes the word in its original letter case.
    """
    lc_word = word.lower()
    head = initial(word)
    lc_head = head.lower()

    if last(lc_head) == "а":
        return head
    elif lc_word == "близнец":
        return head
    elif last_n(lc_head, 2) == "ле":
        before_le = last_of_n_initial(lc_head, 2)
        if is_vowel(before_le) or before_le == "л":
            return initial(head) + "ь"
        else:
            return head
    elif len(word) >= 2 and is_vowel(word[-2]) and lc_word[-2] != "и":
        if len(word) >= 3 and is_vowel(word[-3]):
            return n_initial(word, 2) + "й"
        else:
            return n_initial(word, 2)
    else:
        return head


def ok_word(w):
    """True for -ок/-ек diminutives whose vowel drops: кусок - куска, мешочек - мешочка."""
    return (
        (ends_with_any(w, ("чек", "шек")) and len(w) >= 6)
        or ends_with_any(w, OK_FLEETING_WORDS)
        or (
            w.endswith("ок")
            and not w.endswith("шок")
            and w != "урок"
            and not ends_with_any(w, OK_FIXED_WORDS)
            and not is_vowel(last_of_n_initial(w, 2))
            and (is_vowel(last_of_n_initial(w, 3)) or ends_with_any(n_initial(w, 2), ("ст", "рт")))
            and len(w) >= 4
        )
    )


def soft_d1(w):
    """Soft masculine/neuter ending: конь, поле (but not солнце)."""
    return last(w) == "ь" or (last(w) in ("е", "ё") and not w.endswith("це"))


def half_something(w):
    """Half-compounds like полминуты, полпути: пол- followed by a consonant."""
    if not (w.startswith("пол") and last(w) in ("и", "ы", "а", "я", "ь") and syllable_count(w) >= 2):
        return False

    sub_word = w[3:]
    # Hyphens may follow пол-.
    match = _FIRST_LETTER.search(sub_word)
    return match is not None and match.group().lower() in RUSSIAN_CONSONANTS
