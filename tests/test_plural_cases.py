import pytest

from noun_declension.plural_cases import GENITIVE_RULES, PluralCaseNoun, decline_plural, insert_fleeting_vowel
from noun_declension.rules import find_rule
from noun_declension.russian_lemma import RussianLemma
from noun_declension.stress import StressSettings


def plural_forms(text, gender, case, plural_form, stress=None, **flags):
    return decline_plural(RussianLemma(text, gender, **flags), case, plural_form, stress)


class TestFleetingVowel:

    @pytest.mark.parametrize("base, expected", [
        ("окн", "окон"),
        ("сестр", "сестер"),
        ("девушк", "девушек"),
        ("лодк", "лодок"),
        ("копейк", "копеек"),
        ("письм", "писем"),
        ("стёкл", "стёкол"),
        ("гор", "гор"),
        ("мест", "мест"),
        ("книг", "книг"),
    ])
    def test_insert(self, base, expected):
        assert insert_fleeting_vowel(base) == expected


class TestGenitivePlural:

    @pytest.mark.parametrize("text, gender, plural_form, expected", [
        ("гора", "f", "горы", ["гор"]),
        ("окно", "n", "окна", ["окон"]),
        ("сестра", "f", "сестры", ["сестер"]),
        ("девушка", "f", "девушки", ["девушек"]),
        ("стол", "m", "столы", ["столов"]),
        ("дом", "m", "дома", ["домов"]),
        ("музей", "m", "музеи", ["музеев"]),
        ("конь", "m", "кони", ["коней"]),
        ("нож", "m", "ножи", ["ножей"]),
        ("месяц", "m", "месяцы", ["месяцев"]),
        ("котёнок", "m", "котята", ["котят"]),
        ("англичанин", "m", "англичане", ["англичан"]),
        ("брат", "m", "братья", ["братьев"]),
        ("друг", "m", "друзья", ["друзей"]),
        ("копьё", "n", "копья", ["копий"]),
        ("здание", "n", "здания", ["зданий"]),
        ("армия", "f", "армии", ["армий"]),
        ("гений", "m", "гении", ["гениев"]),
        ("имя", "n", "имена", ["имен"]),
        ("поле", "n", "поля", ["полей"]),
        ("статья", "f", "статьи", ["статей"]),
        ("ночь", "f", "ночи", ["ночей"]),
        ("шея", "f", "шеи", ["шей"]),
        ("свая", "f", "сваи", ["свай"]),
        ("неделя", "f", "недели", ["недель"]),
        ("мороженое", "n", "мороженые", ["мороженых"]),
        ("лихой", "m", "лихие", ["лихих"]),
        ("человек", "m", "люди", ["людей"]),
        ("путь", "m", "пути", ["путей"]),
    ])
    def test_genitive(self, text, gender, plural_form, expected):
        assert plural_forms(text, gender, "gen", plural_form) == expected

    @pytest.mark.parametrize("text, expected", [
        ("ножницы", ["ножниц"]),
        ("сани", ["саней"]),
        ("сутки", ["суток"]),
        ("деньги", ["денег"]),
    ])
    def test_plurale_tantum(self, text, expected):
        assert plural_forms(text, None, "gen", text, plurale_tantum=True) == expected

    @pytest.mark.parametrize("settings, expected", [
        ("SSSSSSS-SSSSSSS", ["пальцев"]),
        ("SSSSSSS-SESSSSS", ["пальцов"]),
        ("SSSSSSS-SbSSSSS", ["пальцев", "пальцов"]),
    ])
    def test_ts_stress(self, settings, expected):
        assert plural_forms("палец", "m", "gen", "пальцы", StressSettings.parse(settings)) == expected

    @pytest.mark.parametrize("text, plural_form, settings, expected", [
        ("палец", "пальцы", None, ["пальцев"]),
        ("палец", "пальцы", "SSSSSSS", ["пальцев"]),
        ("отец", "отцы", "SSSSESS", ["отцов"]),
        ("отец", "отцы", "SSSSbSS", ["отцев", "отцов"]),
        ("палец", "пальцы", "SSSSESS-SSSSSSS", ["пальцев"]),
    ])
    def test_ts_follows_singular_instrumental(self, text, plural_form, settings, expected):
        stress = StressSettings.parse(settings) if settings else None
        assert plural_forms(text, "m", "gen", plural_form, stress) == expected

    def test_cascade_ends_with_default(self):
        n = PluralCaseNoun(RussianLemma("гора", "f"), "горы")
        assert find_rule(GENITIVE_RULES, n).name == "default"


class TestObliquePlural:

    @pytest.mark.parametrize("text, gender, plural_form, case, expected", [
        ("стол", "m", "столы", "dat", ["столам"]),
        ("стол", "m", "столы", "inst", ["столами"]),
        ("стол", "m", "столы", "prep", ["столах"]),
        ("стол", "m", "столы", "loc", ["столах"]),
        ("гора", "f", "горы", "dat", ["горам"]),
        ("конь", "m", "кони", "dat", ["коням"]),
        ("ночь", "f", "ночи", "inst", ["ночами"]),
        ("книга", "f", "книги", "prep", ["книгах"]),
        ("поле", "n", "поля", "dat", ["полям"]),
        ("брат", "m", "братья", "inst", ["братьями"]),
        ("англичанин", "m", "англичане", "dat", ["англичанам"]),
        ("музей", "m", "музеи", "prep", ["музеях"]),
        ("мороженое", "n", "мороженые", "inst", ["морожеными"]),
        ("лихой", "m", "лихие", "dat", ["лихим"]),
        ("человек", "m", "люди", "inst", ["людьми"]),
        ("дитя", "n", "дети", "inst", ["детьми"]),
        ("дочь", "f", "дочери", "inst", ["дочерьми", "дочерями"]),
        ("лошадь", "f", "лошади", "inst", ["лошадьми", "лошадями"]),
    ])
    def test_oblique(self, text, gender, plural_form, case, expected):
        assert plural_forms(text, gender, case, plural_form) == expected


class TestAccusativePlural:

    def test_animate_is_genitive(self):
        assert plural_forms("кот", "m", "acc", "коты", animate=True) == ["котов"]

    def test_feminine_animate_is_genitive(self):
        assert plural_forms("корова", "f", "acc", "коровы", animate=True) == ["коров"]

    def test_inanimate_is_nominative(self):
        assert plural_forms("стол", "m", "acc", "столы") == ["столы"]

    def test_nominative(self):
        assert plural_forms("стол", "m", "nom", "столы") == ["столы"]


class TestSurnamePlural:

    @pytest.mark.parametrize("text, gender, plural_form, case, expected", [
        ("Иванов", "m", "Ивановы", "gen", ["Ивановых"]),
        ("Иванов", "m", "Ивановы", "dat", ["Ивановым"]),
        ("Иванов", "m", "Ивановы", "acc", ["Ивановых"]),
        ("Иванов", "m", "Ивановы", "inst", ["Ивановыми"]),
        ("Иванов", "m", "Ивановы", "prep", ["Ивановых"]),
        ("Иванова", "f", "Ивановы", "gen", ["Ивановых"]),
        ("Иванова", "f", "Ивановы", "inst", ["Ивановыми"]),
        ("Пушкин", "m", "Пушкины", "gen", ["Пушкиных"]),
        ("Лебедев", "m", "Лебедевы", "dat", ["Лебедевым"]),
        ("Пушкина", "f", "Пушкины", "loc", ["Пушкиных"]),
        ("Толстой", "m", "Толстые", "gen", ["Толстых"]),
        ("Толстой", "m", "Толстые", "dat", ["Толстым"]),
    ])
    def test_surname(self, text, gender, plural_form, case, expected):
        assert plural_forms(text, gender, case, plural_form, surname=True) == expected

    def test_common_noun_keeps_noun_endings(self):
        assert plural_forms("остров", "m", "gen", "острова") == ["островов"]

    def test_surname_rule_precedes_masculine(self):
        n = PluralCaseNoun(RussianLemma("Иванов", "m", surname=True), "Ивановы")
        assert find_rule(GENITIVE_RULES, n).name == "surname"
