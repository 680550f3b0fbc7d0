from types import MappingProxyType

from russian_case import RussianCase
from russian_errors import UnsupportedForm
from noun_declension.classifier import INDECLINABLE, get_declension
from noun_declension.declension0 import decline0
from noun_declension.declension1 import decline1
from noun_declension.declension2 import decline2
from noun_declension.declension3 import decline3


GENERATORS = MappingProxyType({
    0: decline0,
    1: decline1,
    2: decline2,
    3: decline3,
})


def decline_singular(lemma, case, stress=None):
    """Singular forms of the lemma in the case, preferred form first.

    `stress` is the StressSettings recorded for the lemma, if any.
    """
    case = RussianCase.parse(case)

    if lemma.indeclinable:
        return [lemma.text]
    if lemma.plurale_tantum:
        raise UnsupportedForm(f"{lemma.text!r} is plurale tantum and has no singular forms.")

    declension = get_declension(lemma)
    if declension == INDECLINABLE:
        return [lemma.text]
    return GENERATORS[declension](lemma, case, stress)
