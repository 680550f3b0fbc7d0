from enum import StrEnum

from utils import list_enum_values


class RussianGender(StrEnum):
    M = "m"
    F = "f"
    N = "n"
    C = "c"  # Common gender: сирота, умница.

    @classmethod
    def parse(cls, value):
        """Accept a member, its code ("m"), its English name ("masculine") or its Russian label ("мужской")."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for gender in cls:
            if key in (gender.value, RUSSIAN_GENDER_NAMES[gender], RUSSIAN_GENDER_LABELS[gender]):
                return gender
        raise ValueError(f"Unknown grammatical gender: {value!r}")


RUSSIAN_GENDERS = list_enum_values(RussianGender)


RUSSIAN_GENDER_NAMES = {
    RussianGender.M: "masculine",
    RussianGender.F: "feminine",
    RussianGender.N: "neuter",
    RussianGender.C: "common",
}


RUSSIAN_GENDER_LABELS = {
    RussianGender.M: "мужской",
    RussianGender.F: "женский",
    RussianGender.N: "средний",
    RussianGender.C: "общий",
}
