from enum import StrEnum
from functools import cached_property

from russian_case import RUSSIAN_CASES
from russian_number import RUSSIAN_NUMBERS, RussianNumber
from utils import list_enum_values


RussianNounDeclensionType = StrEnum(
    "RussianNounDeclensionType",
    {
        f"{case}_{number}".upper(): f"{case}_{number}"
        for case in RUSSIAN_CASES
        for number in RUSSIAN_NUMBERS
    }
)


RUSSIAN_NOUN_DECLENSION_TYPES = list_enum_values(RussianNounDeclensionType)


def split_declension_type(decl_type):
    """"gen_pl" -> ("gen", "pl")."""
    case, number = RussianNounDeclensionType(decl_type).value.split("_")
    return case, RussianNumber(number)


class RussianNoun:
    """A lemma bound to an engine, answering one declension type at a time.

    The nominative plural is computed once and reused for every plural case.
    """

    def __init__(self, lemma, engine):
        self.lemma = lemma
        self.engine = engine

    @cached_property
    def plurals(self):
        return self.engine.pluralize(self.lemma)

    def forms(self, decl_type):
        case, number = split_declension_type(decl_type)

        if number == RussianNumber.SG:
            return self.engine.decline(self.lemma, case)

        forms = []
        for plural in self.plurals:
            for form in self.engine.decline(self.lemma, case, plural):
                if form not in forms:
                    forms.append(form)
        return forms

    def paradigm(self):
        return {
            decl_type: self.forms(decl_type)
            for decl_type in RUSSIAN_NOUN_DECLENSION_TYPES
        }
