import pytest

from russian_errors import UnsupportedForm
from noun_declension.plural import (
    MASCULINE_PLURAL_RULES,
    NEUTER_PLURAL_RULES,
    THIRD_DECLENSION_PLURAL_RULES,
    PluralNoun,
    pluralize,
)
from noun_declension.rules import apply_rules, find_rule
from noun_declension.russian_lemma import RussianLemma


class TestMasculinePlural:

    @pytest.mark.parametrize("text, expected", [
        ("стол", ["столы"]),
        ("конь", ["кони"]),
        ("нож", ["ножи"]),
        ("музей", ["музеи"]),
        ("отец", ["отцы"]),
        ("палец", ["пальцы"]),
        ("дом", ["дома"]),
        ("счёт", ["счета"]),
        ("год", ["года", "годы"]),
        ("сын", ["сыновья", "сыны"]),
        ("брат", ["братья"]),
        ("друг", ["друзья"]),
        ("прут", ["пруты", "прутья"]),
        ("сук", ["суки", "сучья"]),
        ("англичанин", ["англичане"]),
        ("боярин", ["бояре"]),
        ("цыган", ["цыгане"]),
        ("котёнок", ["котята"]),
        ("медвежонок", ["медвежата"]),
        ("кусок", ["куски"]),
        ("рабочий", ["рабочие"]),
        ("адаптировавший", ["адаптировавшие"]),
        ("лихой", ["лихие"]),
        ("городской", ["городские"]),
        ("портной", ["портные"]),
        ("Васильевич", ["Василиевичи", "Васильевичи"]),
        ("котёночек", ["котятки"]),
    ])
    def test_plural(self, text, expected):
        assert pluralize(RussianLemma(text, "m")) == expected

    def test_person(self):
        assert pluralize(RussianLemma("человек", "m"))[0] == "люди"

    @pytest.mark.parametrize("text, expected", [
        ("Толстой", ["Толстые"]),
        ("Иванов", ["Ивановы"]),
    ])
    def test_surnames(self, text, expected):
        assert pluralize(RussianLemma(text, "m", surname=True)) == expected

    @pytest.mark.parametrize("text, rule", [
        ("дом", "stressed_a"),
        ("котёнок", "yonok"),
        ("котёночек", "yonochek"),
        ("бочонок", "ok"),
        ("стол", "default"),
    ])
    def test_rule_precedence(self, text, rule):
        n = PluralNoun(RussianLemma(text, "m"))
        assert find_rule(MASCULINE_PLURAL_RULES, n).name == rule


class TestNeuterPlural:

    @pytest.mark.parametrize("text, expected", [
        ("окно", ["окна"]),
        ("письмо", ["письма"]),
        ("поле", ["поля"]),
        ("море", ["моря"]),
        ("здание", ["здания"]),
        ("копьё", ["копья"]),
        ("яблоко", ["яблоки"]),
        ("облако", ["облака"]),
        ("ухо", ["уши"]),
        ("дно", ["донья"]),
        ("чудо", ["чудеса", "чуда"]),
        ("дерево", ["деревья"]),
        ("мороженое", ["мороженые"]),
        ("насекомое", ["насекомые"]),
        ("будущее", ["будущие"]),
        ("стекло", ["стёкла"]),
        ("перо", ["перья"]),
        ("око", ["очи"]),
        ("содержимое", ["содержимые"]),
    ])
    def test_plural(self, text, expected):
        assert pluralize(RussianLemma(text, "n")) == expected

    def test_ye_has_two_forms(self):
        assert pluralize(RussianLemma("ущелье", "n")) == ["ущелия", "ущелья"]

    def test_rule_precedence(self):
        n = PluralNoun(RussianLemma("войско", "n"))
        assert find_rule(NEUTER_PLURAL_RULES, n).name == "default"

    @pytest.mark.parametrize("text, rule", [
        ("око", "irregular"),
        ("содержимое", "imoe"),
        ("насекомое", "oe"),
    ])
    def test_rule_names(self, text, rule):
        n = PluralNoun(RussianLemma(text, "n"))
        assert find_rule(NEUTER_PLURAL_RULES, n).name == rule


class TestSecondDeclensionPlural:

    @pytest.mark.parametrize("text, gender, expected", [
        ("гора", "f", ["горы"]),
        ("книга", "f", ["книги"]),
        ("земля", "f", ["земли"]),
        ("армия", "f", ["армии"]),
        ("статья", "f", ["статьи"]),
        ("заря", "f", ["зори"]),
        ("столовая", "f", ["столовые"]),
        ("адаптировавшая", "f", ["адаптировавшие"]),
        ("свая", "f", ["сваи"]),
        ("дядя", "m", ["дяди"]),
        ("сирота", "c", ["сироты"]),
    ])
    def test_plural(self, text, gender, expected):
        assert pluralize(RussianLemma(text, gender)) == expected


class TestThirdDeclensionPlural:

    @pytest.mark.parametrize("text, gender, expected", [
        ("ночь", "f", ["ночи"]),
        ("имя", "n", ["имена"]),
        ("время", "n", ["времена"]),
        ("дочь", "f", ["дочери"]),
        ("мать", "f", ["матери"]),
    ])
    def test_plural(self, text, gender, expected):
        assert pluralize(RussianLemma(text, gender)) == expected

    @pytest.mark.parametrize("text, expected", [
        ("гений", ["гения"]),
        ("ноль", ["нола"]),
    ])
    def test_non_feminine_fallback(self, text, expected):
        n = PluralNoun(RussianLemma(text, "m"))
        assert find_rule(THIRD_DECLENSION_PLURAL_RULES, n).name == "default"
        assert apply_rules(THIRD_DECLENSION_PLURAL_RULES, n) == expected


class TestIrregularPlural:

    def test_put(self):
        assert pluralize(RussianLemma("путь", "m")) == ["пути"]

    def test_ditya(self):
        assert pluralize(RussianLemma("дитя", "n")) == ["дети"]

    def test_plurale_tantum(self):
        assert pluralize(RussianLemma("ножницы", plurale_tantum=True)) == ["ножницы"]

    def test_indeclinable(self):
        assert pluralize(RussianLemma("пальто", "n", indeclinable=True)) == ["пальто"]

    def test_unknown_class_0_word(self):
        from noun_declension.plural import _pluralize0
        with pytest.raises(UnsupportedForm):
            _pluralize0(PluralNoun(RussianLemma("стол", "m")))

    @pytest.mark.parametrize("text, gender", [
        ("стол", "m"), ("сын", "m"), ("чудо", "n"), ("гора", "f"), ("ночь", "f"), ("ущелье", "n"),
    ])
    def test_one_or_two_forms(self, text, gender):
        assert len(pluralize(RussianLemma(text, gender))) in (1, 2)
