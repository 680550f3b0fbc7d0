import csv
from typing import List, Optional


def read_csv(fp: str) -> List[dict]:
    with open(fp, "r", encoding="utf-8-sig", newline="") as f:
        csv_reader = csv.DictReader(f)
        return list(csv_reader)


def write_csv(fp: str, l: List[dict], fieldnames: Optional[List[str]] = None):
    """Write rows to `fp`. Columns default to the keys of the first row."""
    if fieldnames is None:
        fieldnames = list(l[0].keys()) if l else []

    with open(fp, "w", encoding="utf-8", newline="") as f:
        csv_writer = csv.DictWriter(f, fieldnames=fieldnames)
        csv_writer.writeheader()
        csv_writer.writerows(l)
