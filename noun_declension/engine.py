"""Public entry points of the declension engine.

    >>> engine = Engine()
    >>> engine.decline({"text": "гора", "gender": "f"}, "inst")
    ['горой', 'горою']
    >>> engine.pluralize({"text": "гора", "gender": "f"})
    ['горы']
    >>> engine.decline({"text": "гора", "gender": "f"}, "gen", "горы")
    ['гор']

Lemmas may be given as RussianLemma values or as mappings accepted by
create_lemma.
"""
from typing import List, Optional

from russian_case import RussianCase
from russian_errors import UnsupportedForm
from russian_logging import engine_logger
from noun_declension import classifier
from noun_declension import plural
from noun_declension.plural_cases import decline_plural
from noun_declension.russian_lemma import create_lemma
from noun_declension.russian_noun import RussianNoun
from noun_declension.singular import decline_singular
from noun_declension.stress import StressDictionary


log = engine_logger()


class Engine:
    """Declension engine with its own stress dictionary.

    `sd` holds the stress overrides registered by the caller; the engine
    only reads it.
    """

    def __init__(self, stress_dictionary: Optional[StressDictionary] = None):
        self.sd = stress_dictionary if stress_dictionary is not None else StressDictionary()

    def classify(self, lemma) -> int:
        return classifier.get_declension(create_lemma(lemma))

    def classify_school(self, lemma) -> int:
        return classifier.get_school_declension(create_lemma(lemma))

    def decline(self, lemma, case, plural_form: Optional[str] = None) -> List[str]:
        """Forms of the lemma in the case, preferred form first.

        Without `plural_form` the singular is returned. With it, the plural
        case form is built on that nominative plural (as returned by
        pluralize).
        """
        lemma = create_lemma(lemma)
        case = RussianCase.parse(case)

        if lemma.indeclinable:
            return [lemma.text]

        settings = self.sd.get(lemma)

        if plural_form is None:
            if lemma.plurale_tantum:
                return [lemma.text]
            log.debug("declining", word=lemma.text, case=case.value)
            try:
                return decline_singular(lemma, case, settings)
            except UnsupportedForm:
                log.debug("unsupported_form", word=lemma.text, case=case.value)
                raise

        return decline_plural(lemma, case, plural_form, settings)

    def pluralize(self, lemma) -> List[str]:
        lemma = create_lemma(lemma)
        try:
            return plural.pluralize(lemma)
        except UnsupportedForm:
            log.debug("unsupported_form", word=lemma.text, case="plural")
            raise

    def paradigm(self, lemma) -> dict:
        """Every declension type (nom_sg ... loc_pl) mapped to its forms."""
        return RussianNoun(create_lemma(lemma), self).paradigm()


_default_engine = Engine()


def get_declension(lemma) -> int:
    return _default_engine.classify(lemma)


def get_school_declension(lemma) -> int:
    return _default_engine.classify_school(lemma)


def decline(lemma, case, plural_form: Optional[str] = None) -> List[str]:
    return _default_engine.decline(lemma, case, plural_form)


def pluralize(lemma) -> List[str]:
    return _default_engine.pluralize(lemma)
