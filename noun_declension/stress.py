"""Stress overrides.

Some endings are spelled after their stress: кринжем (stem stressed) and
кринжом (ending stressed), тучей and свечой. Without stress marks the engine
picks a default from the stem consonant; a StressDictionary lets callers
record, per lemma, where the stress falls.

Settings are written as seven letters for the singular cases, in the order
of RUSSIAN_CASES, optionally followed by "-" and up to seven letters for the
plural, e.g. "SEESESE-EEEEEE":

    S   stem stressed
    E   ending stressed
    s   both in use, stem-stressed variant first
    b   same as s
    e   both in use, ending-stressed variant first
"""
from enum import StrEnum
from typing import NamedTuple, Optional

from russian_case import RussianCase
from russian_logging import engine_logger
from noun_declension.russian_lemma import create_lemma


log = engine_logger()


class RussianStress(StrEnum):
    STEM = "S"
    ENDING = "E"
    BOTH_STEM_FIRST = "s"
    BOTH = "b"
    BOTH_ENDING_FIRST = "e"


_CASE_ORDER = tuple(RussianCase)


class StressSettings(NamedTuple):
    singular: tuple
    plural: tuple

    @classmethod
    def parse(cls, settings):
        if not isinstance(settings, str):
            raise ValueError(f"Stress settings must be a string, got {settings!r}.")

        singular, _, plural = settings.partition("-")
        if len(singular) != len(_CASE_ORDER):
            raise ValueError(
                f"Stress settings need {len(_CASE_ORDER)} singular letters, got {singular!r}."
            )
        if len(plural) > len(_CASE_ORDER):
            raise ValueError(f"Too many plural letters in stress settings: {plural!r}.")

        try:
            return cls(
                singular=tuple(RussianStress(c) for c in singular),
                plural=tuple(RussianStress(c) for c in plural),
            )
        except ValueError as e:
            raise ValueError(f"Bad letter in stress settings {settings!r}.") from e

    def for_case(self, case, plural=False):
        """Stress recorded for the case, or None when the settings do not cover it."""
        letters = self.plural if plural else self.singular
        index = _CASE_ORDER.index(RussianCase.parse(case))
        if index < len(letters):
            return letters[index]
        return None

    def __str__(self):
        s = "".join(self.singular)
        if self.plural:
            s += "-" + "".join(self.plural)
        return s


def stressed_variants(stress, stem_stressed, ending_stressed, default):
    """Order the two spellings of an ending as the stress requires.

    `default` is returned when nothing is recorded for the case.
    """
    if stress is None:
        return list(default)
    if stress == RussianStress.STEM:
        return [stem_stressed]
    if stress == RussianStress.ENDING:
        return [ending_stressed]
    if stress == RussianStress.BOTH_ENDING_FIRST:
        return [ending_stressed, stem_stressed]
    return [stem_stressed, ending_stressed]


class StressDictionary:
    """Side table of stress settings keyed by lemma value.

    The engine reads it and hands the settings to the generators; lemmas are
    never modified.
    """

    def __init__(self):
        self._settings = {}

    def put(self, lemma, settings):
        lemma = create_lemma(lemma)
        parsed = settings if isinstance(settings, StressSettings) else StressSettings.parse(settings)
        self._settings[lemma] = parsed
        log.debug("stress_settings_registered", word=lemma.text, settings=str(parsed))

    def get(self, lemma) -> Optional[StressSettings]:
        return self._settings.get(create_lemma(lemma))

    def remove(self, lemma):
        self._settings.pop(create_lemma(lemma), None)

    def clear(self):
        self._settings.clear()

    def __contains__(self, lemma):
        return create_lemma(lemma) in self._settings

    def __len__(self):
        return len(self._settings)


def stress_for(settings, case, plural=False):
    if settings is None:
        return None
    return settings.for_case(case, plural=plural)
