from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Optional

from russian_errors import InvalidLemma
from russian_gender import RussianGender


@dataclass(frozen=True)
class RussianLemma:
    """A noun in its dictionary form together with its grammatical metadata.

    Lemmas are values: equal lemmas are interchangeable, and the engine never
    changes one in place. Re-routing a word through another declension builds
    a new lemma with `replace`.
    """

    text: str
    gender: Optional[RussianGender] = None
    plurale_tantum: bool = False
    indeclinable: bool = False
    animate: bool = False
    surname: bool = False

    def __post_init__(self):
        if not isinstance(self.text, str) or self.text == "":
            raise InvalidLemma("A lemma needs a non-empty word.")

        if self.gender is None:
            if not self.plurale_tantum:
                raise InvalidLemma(f"A grammatical gender is required for {self.text!r}.")
        else:
            try:
                gender = RussianGender.parse(self.gender)
            except ValueError as e:
                raise InvalidLemma(f"Bad grammatical gender for {self.text!r}: {self.gender!r}.") from e
            object.__setattr__(self, "gender", gender)

    @property
    def lc_text(self):
        return self.text.lower()

    @property
    def is_animate(self):
        return self.animate or self.surname

    def replace(self, **changes):
        return replace(self, **changes)


_FLAG_ALIASES = {
    "plurale_tantum": ("plurale_tantum", "pluralia_tantum", "pluraliaTantum"),
    "indeclinable": ("indeclinable",),
    "animate": ("animate",),
    "surname": ("surname",),
}


def create_lemma(o):
    """Build a lemma from a mapping such as {"text": "гора", "gender": "f"}.

    Lemmas are returned unchanged.
    """
    if isinstance(o, RussianLemma):
        return o
    if not isinstance(o, Mapping):
        raise InvalidLemma(f"Cannot build a lemma from {o!r}.")

    flags = {}
    for flag, aliases in _FLAG_ALIASES.items():
        flags[flag] = any(bool(o.get(alias, False)) for alias in aliases)

    return RussianLemma(
        text=o.get("text", ""),
        gender=o.get("gender") or None,
        **flags,
    )
