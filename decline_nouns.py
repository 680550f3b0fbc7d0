import argparse
from typing import List, Optional

from tqdm import tqdm

from IO import read_csv, write_csv
from config import get_settings
from russian_errors import DeclensionError
from russian_logging import cli_logger, configure_logging
from utils import eval_boolean
from noun_declension.engine import Engine
from noun_declension.russian_lemma import RussianLemma
from noun_declension.russian_noun import RUSSIAN_NOUN_DECLENSION_TYPES, RussianNoun
from noun_declension.stress import StressDictionary


log = cli_logger()

LEMMA_COLUMNS = ["text", "gender", "plurale_tantum", "indeclinable", "animate", "surname"]
CLASS_COLUMNS = ["declension", "school_declension"]
OUTPUT_COLUMNS = LEMMA_COLUMNS + CLASS_COLUMNS + RUSSIAN_NOUN_DECLENSION_TYPES


def lemma_from_row(row: dict) -> RussianLemma:
    return RussianLemma(
        text=row.get("text", "").strip(),
        gender=(row.get("gender") or "").strip() or None,
        plurale_tantum=eval_boolean(row.get("plurale_tantum")),
        indeclinable=eval_boolean(row.get("indeclinable")),
        animate=eval_boolean(row.get("animate")),
        surname=eval_boolean(row.get("surname")),
    )


def load_stress_dictionary(fp: str) -> StressDictionary:
    """Read stress overrides from a CSV with the columns text, gender, settings."""
    sd = StressDictionary()
    for row in read_csv(fp):
        sd.put(
            {"text": row["text"].strip(), "gender": row["gender"].strip()},
            row["settings"].strip(),
        )
    log.info("stress_file_loaded", path=fp, entries=len(sd))
    return sd


def make_row(row: dict, engine: Engine, separator: str) -> dict:
    out = {column: row.get(column, "") for column in LEMMA_COLUMNS}
    for column in CLASS_COLUMNS + RUSSIAN_NOUN_DECLENSION_TYPES:
        out[column] = ""

    try:
        lemma = lemma_from_row(row)
        paradigm = RussianNoun(lemma, engine).paradigm()
        if lemma.gender is not None:
            out["declension"] = engine.classify(lemma)
            out["school_declension"] = engine.classify_school(lemma)
    except DeclensionError as e:
        log.warning("row_skipped", text=row.get("text"), gender=row.get("gender"), error=str(e))
        return out

    for decl_type, forms in paradigm.items():
        out[decl_type] = separator.join(forms)
    return out


def decline_rows(rows: List[dict], engine: Engine, separator: str = "/") -> List[dict]:
    return [make_row(row, engine, separator) for row in tqdm(rows)]


def main(argv: Optional[List[str]] = None):
    """Export the full paradigm of every noun in a CSV file.

    Input file format:

        text, gender, plurale_tantum, indeclinable, animate, surname

    Output file format:

        text, gender, plurale_tantum, indeclinable, animate, surname,
        declension, school_declension,
        nom_sg, nom_pl, gen_sg, gen_pl, dat_sg, dat_pl, acc_sg, acc_pl,
        inst_sg, inst_pl, prep_sg, prep_pl, loc_sg, loc_pl

    Co-existing variants are joined with FORM_SEPARATOR ("горой/горою").
    """
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Decline the Russian nouns of a CSV file")
    parser.add_argument("input", help="CSV file with one lemma per row")
    parser.add_argument("output", help="CSV file to write the paradigms to")
    parser.add_argument("--stress", default=settings.STRESS_FILE, help="CSV file of stress overrides")
    args = parser.parse_args(argv)

    configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

    sd = load_stress_dictionary(args.stress) if args.stress else StressDictionary()
    engine = Engine(stress_dictionary=sd)

    rows = read_csv(args.input)
    log.info("declining_nouns", path=args.input, rows=len(rows))

    out_rows = decline_rows(rows, engine, separator=settings.FORM_SEPARATOR)

    write_csv(fp=args.output, l=out_rows, fieldnames=OUTPUT_COLUMNS)
    log.info("paradigms_written", path=args.output, rows=len(out_rows))


if __name__ == '__main__':
    main()
