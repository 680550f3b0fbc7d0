from pathlib import Path

import pytest

import decline_nouns
from IO import read_csv, write_csv
from config import Settings, get_settings
from noun_declension.engine import Engine


@pytest.fixture
def input_csv(tmp_path: Path) -> Path:
    fp = tmp_path / "nouns.csv"
    write_csv(fp=str(fp), l=[
        {"text": "гора", "gender": "f", "plurale_tantum": "0", "indeclinable": "0", "animate": "0", "surname": "0"},
        {"text": "кринж", "gender": "m", "plurale_tantum": "0", "indeclinable": "0", "animate": "0", "surname": "0"},
        {"text": "ножницы", "gender": "", "plurale_tantum": "1", "indeclinable": "0", "animate": "0", "surname": "0"},
        {"text": "гора", "gender": "", "plurale_tantum": "0", "indeclinable": "0", "animate": "0", "surname": "0"},
    ])
    return fp


@pytest.fixture
def stress_csv(tmp_path: Path) -> Path:
    fp = tmp_path / "stress.csv"
    write_csv(fp=str(fp), l=[{"text": "кринж", "gender": "m", "settings": "SEESbSE-EEEEEE"}])
    return fp


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    monkeypatch.delenv("RUSSIAN_NOUNS_STRESS_FILE", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:

    def test_defaults(self):
        settings = Settings()
        assert settings.LOG_LEVEL == "INFO"
        assert settings.FORM_SEPARATOR == "/"
        assert settings.STRESS_FILE is None

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("RUSSIAN_NOUNS_FORM_SEPARATOR", ";")
        monkeypatch.setenv("RUSSIAN_NOUNS_LOG_JSON", "true")
        settings = Settings()
        assert settings.FORM_SEPARATOR == ";"
        assert settings.LOG_JSON is True


class TestLemmaFromRow:

    def test_flags(self):
        lemma = decline_nouns.lemma_from_row(
            {"text": " Иванов ", "gender": "m", "animate": "0", "surname": "1"}
        )
        assert lemma.text == "Иванов"
        assert lemma.surname and lemma.is_animate
        assert not lemma.plurale_tantum


class TestMakeRow:

    def test_forms_are_joined(self):
        row = decline_nouns.make_row({"text": "гора", "gender": "f"}, Engine(), "/")
        assert row["declension"] == 2
        assert row["school_declension"] == 1
        assert row["inst_sg"] == "горой/горою"
        assert row["gen_pl"] == "гор"

    def test_bad_row_is_left_blank(self):
        row = decline_nouns.make_row({"text": "гора", "gender": ""}, Engine(), "/")
        assert row["text"] == "гора"
        assert row["declension"] == ""
        assert all(row[t] == "" for t in decline_nouns.RUSSIAN_NOUN_DECLENSION_TYPES)


class TestMain:

    def test_export(self, input_csv, tmp_path, stress_csv):
        output = tmp_path / "paradigms.csv"
        decline_nouns.main([str(input_csv), str(output), "--stress", str(stress_csv)])

        rows = read_csv(str(output))
        assert list(rows[0]) == decline_nouns.OUTPUT_COLUMNS
        assert len(rows) == 4

        gora, krinzh, nozhnitsy, bad = rows
        assert gora["gen_sg"] == "горы"
        assert gora["declension"] == "2"
        assert krinzh["inst_sg"] == "кринжем/кринжом"
        assert nozhnitsy["gen_sg"] == "ножницы"
        assert nozhnitsy["gen_pl"] == "ножниц"
        assert nozhnitsy["declension"] == ""
        assert bad["gen_sg"] == ""

    def test_without_stress_file(self, input_csv, tmp_path):
        output = tmp_path / "paradigms.csv"
        decline_nouns.main([str(input_csv), str(output)])
        krinzh = read_csv(str(output))[1]
        assert krinzh["inst_sg"] == "кринжем"
