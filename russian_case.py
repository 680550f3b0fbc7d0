from enum import StrEnum

from utils import list_enum_values


class RussianCase(StrEnum):
    NOM = "nom"
    GEN = "gen"
    DAT = "dat"
    ACC = "acc"
    INST = "inst"
    PREP = "prep"
    # Differs from PREP in writing only for a closed set of masculine nouns (в снегу, на льду).
    LOC = "loc"

    @classmethod
    def parse(cls, value):
        """Accept a member, its code ("gen"), its name ("GEN", "genitive") or its Russian label."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for case in cls:
            if key in (case.value, case.name.lower(), RUSSIAN_CASE_NAMES[case], RUSSIAN_CASE_LABELS[case]):
                return case
        raise ValueError(f"Unknown grammatical case: {value!r}")


RUSSIAN_CASES = list_enum_values(RussianCase)


RUSSIAN_CASE_NAMES = {
    RussianCase.NOM: "nominative",
    RussianCase.GEN: "genitive",
    RussianCase.DAT: "dative",
    RussianCase.ACC: "accusative",
    RussianCase.INST: "instrumental",
    RussianCase.PREP: "prepositional",
    RussianCase.LOC: "locative",
}


RUSSIAN_CASE_LABELS = {
    RussianCase.NOM: "именительный",
    RussianCase.GEN: "родительный",
    RussianCase.DAT: "дательный",
    RussianCase.ACC: "винительный",
    RussianCase.INST: "творительный",
    RussianCase.PREP: "предложный",
    RussianCase.LOC: "местный",
}
