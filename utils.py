RUSSIAN_VOWELS = "аеёиоуыэюя"
RUSSIAN_CONSONANTS = "бвгджзйклмнпрстфхцчшщ"

# Consonants other than й: a word ending in one of these is its own stem.
RUSSIAN_CONSONANTS_EXCEPT_J = RUSSIAN_CONSONANTS.replace("й", "")

RUSSIAN_VELARS = "гкх"
RUSSIAN_SIBILANTS = "жчшщ"


def list_enum_values(enum_obj):
    # https://stackoverflow.com/questions/29503339/how-to-get-all-values-from-python-enum-class
    return [
        e.value
        for e in enum_obj
    ]


def is_vowel(char):
    return char != "" and char.lower() in RUSSIAN_VOWELS


def is_consonant(char):
    return char != "" and char.lower() in RUSSIAN_CONSONANTS


def is_upper(s):
    return s == s.upper()


def syllable_count(word):
    return sum(1 for char in word if is_vowel(char))


def last(s):
    return s[-1] if s else ""


def last_n(s, n):
    return s[-n:] if n > 0 else ""


def initial(s):
    """The word without its last letter; empty for words of one letter."""
    if len(s) <= 1:
        return ""
    return s[:-1]


def n_initial(s, n):
    part = s
    for _ in range(n):
        part = initial(part)
    return part


def last_of_n_initial(s, n):
    return last(n_initial(s, n))


def last_two_chars(s):
    if len(s) <= 1:
        return ""
    return s[-2:]


def ends_with_any(word, endings):
    return any(word.endswith(ending) for ending in endings)


def un_yo(s):
    """Replace the first ё with е, keeping the letter case."""
    return s.replace("ё", "е", 1).replace("Ё", "Е", 1)


def re_yo(s):
    """Replace the first е with ё, keeping the letter case."""
    return s.replace("е", "ё", 1).replace("Е", "Ё", 1)


def eval_boolean(val):
    if val is None:
        return False
    val = str(val).strip().lower()
    if val.isdigit():
        return bool(int(val))
    return val in ("true", "yes", "y")
