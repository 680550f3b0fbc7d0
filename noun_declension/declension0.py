from russian_case import RussianCase
from russian_errors import UnsupportedForm
from utils import initial
from noun_declension.declension3 import decline3


def decline0(lemma, case, stress=None):
    """Irregular nouns: путь (and its compounds) and дитя."""
    word = lemma.text
    lc_word = lemma.lc_text

    if lc_word.endswith("путь"):
        if case == RussianCase.INST:
            return [initial(word) + "ем"]
        return decline3(lemma, case, stress)

    if lc_word.endswith("дитя"):
        if case in (RussianCase.NOM, RussianCase.ACC):
            return [word]
        if case == RussianCase.INST:
            return [word + "тей", word + "тею"]
        return [word + "ти"]

    raise UnsupportedForm(f"No irregular paradigm is known for {word!r}.")
