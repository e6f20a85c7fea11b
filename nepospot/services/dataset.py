"""Building, writing and loading the static people dataset.

Two on-disk forms are supported:

- ``.csv``: a header row with the ``PersonRecord`` field names followed by one
  row per person, empty cells for missing values.
- ``.json``: a single object mapping each IMDb id to its record, in record
  order. This replaces the compiled-in lookup table of earlier builds.
"""

from __future__ import annotations

import csv
import json
import logging
import re
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

from ..core import PERSON_FIELDS, PersonRecord

logger = logging.getLogger("nepospot.dataset")

PERSON_ID_PATTERN = re.compile(r"^nm(\d+)$")


def numeric_key(imdb_id: str) -> int:
    """``"nm0000123"`` -> ``123``."""

    match = PERSON_ID_PATTERN.match(imdb_id)
    if match is None:
        raise ValueError(f"Not an IMDb person id: {imdb_id!r}")
    return int(match.group(1))


def prepare_records(records: Iterable[PersonRecord]) -> list[PersonRecord]:
    """Keep person ids only, sort by their number and drop repeats.

    The sort is stable, so the first record fetched for an id wins.
    """

    records = list(records)
    kept = [r for r in records if PERSON_ID_PATTERN.match(r.imdb_id)]
    kept.sort(key=lambda r: numeric_key(r.imdb_id))

    unique: list[PersonRecord] = []
    last_key: int | None = None
    for record in kept:
        key = numeric_key(record.imdb_id)
        if key == last_key:
            continue
        unique.append(record)
        last_key = key

    logger.info(
        "Prepared %d people from %d fetched (%d without a person id, %d duplicates)",
        len(unique),
        len(records),
        len(records) - len(kept),
        len(kept) - len(unique),
    )
    return unique


def write_csv(records: Iterable[PersonRecord], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=PERSON_FIELDS)
        writer.writeheader()
        for record in records:
            writer.writerow(
                {k: "" if v is None else v for k, v in record.model_dump().items()}
            )


def write_mapping(records: Iterable[PersonRecord], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    mapping = {record.imdb_id: record.model_dump() for record in records}
    with open(path, "w", encoding="utf-8") as f:
        json.dump(mapping, f, indent=2, ensure_ascii=False)
        f.write("\n")


def write_dataset(records: Iterable[PersonRecord], path: Path) -> None:
    """Overwrite ``path`` with ``records`` in the form its suffix names."""

    suffix = path.suffix.lower()
    if suffix == ".csv":
        write_csv(records, path)
    elif suffix == ".json":
        write_mapping(records, path)
    else:
        raise ValueError(f"Unsupported dataset format {suffix!r}; use .csv or .json")


def _read_csv(path: Path) -> Iterable[PersonRecord]:
    with open(path, newline="", encoding="utf-8") as f:
        for row in csv.DictReader(f):
            yield PersonRecord(
                **{k: (row.get(k) or None) for k in PERSON_FIELDS if k not in ("imdb_id", "name")},
                imdb_id=row["imdb_id"],
                name=row["name"],
            )


def _read_mapping(path: Path) -> Iterable[PersonRecord]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    for fields in data.values():
        yield PersonRecord(**fields)


def load_dataset(path: Path) -> Mapping[str, PersonRecord]:
    """Read a dataset file into a read-only ``imdb_id -> record`` mapping."""

    suffix = path.suffix.lower()
    if suffix == ".csv":
        records = _read_csv(path)
    elif suffix == ".json":
        records = _read_mapping(path)
    else:
        raise ValueError(f"Unsupported dataset format {suffix!r}; use .csv or .json")

    people = {record.imdb_id: record for record in records}
    logger.info("Loaded %d people from %s", len(people), path)
    return MappingProxyType(people)
