from utils import RUSSIAN_SIBILANTS, RUSSIAN_VELARS, last


RULE1_LETTERS = RUSSIAN_VELARS + RUSSIAN_SIBILANTS
RULE2_LETTERS = RUSSIAN_VELARS + RUSSIAN_SIBILANTS + "ц"
RULE3_LETTERS = RUSSIAN_SIBILANTS + "ц"


def concat(stem, suffix, ending_stressed=True):
    """Attach a suffix to a stem following the spelling rules.

    1. ы is written и after velars and sibilants.
    2. я and ю are written а and у after velars, sibilants and ц.
    3. An unstressed о is written е after sibilants and ц.
    """

    if suffix == "" or stem == "":
        return stem + suffix

    lc_last = last(stem).lower()

    if lc_last in RULE1_LETTERS and suffix[0] == "ы":
        suffix = "и" + suffix[1:]

    if lc_last in RULE2_LETTERS and suffix[0] == "я":
        suffix = "а" + suffix[1:]
    if lc_last in RULE2_LETTERS and suffix[0] == "ю":
        suffix = "у" + suffix[1:]

    if lc_last in RULE3_LETTERS and suffix[0] == "о" and not ending_stressed:
        suffix = "е" + suffix[1:]

    return stem + suffix
