import csv
import json

import pytest

from nepospot.core import PERSON_FIELDS
from nepospot.services.dataset import (
    load_dataset,
    numeric_key,
    prepare_records,
    write_dataset,
)


def test_numeric_key():
    assert numeric_key("nm0000123") == 123
    with pytest.raises(ValueError):
        numeric_key("tt0000123")


def test_duplicates_from_overlapping_chunks_collapse(person):
    first = person("nm0000123", "First Fetch")
    second = person("nm0000123", "Second Fetch")
    prepared = prepare_records([first, person("nm0000001"), second])
    assert [p.imdb_id for p in prepared] == ["nm0000001", "nm0000123"]
    assert prepared[1].name == "First Fetch"


def test_same_number_with_different_padding_is_a_duplicate(person):
    prepared = prepare_records([person("nm0000123"), person("nm123")])
    assert [p.imdb_id for p in prepared] == ["nm0000123"]


def test_non_person_ids_are_dropped(person):
    prepared = prepare_records(
        [person("tt0000123"), person("nm0000124"), person("co123"), person("nmabc")]
    )
    assert [p.imdb_id for p in prepared] == ["nm0000124"]


def test_sorted_by_number_not_text(person):
    prepared = prepare_records(
        [person("nm900"), person("nm0000010"), person("nm0000002"), person("nm1000000")]
    )
    keys = [numeric_key(p.imdb_id) for p in prepared]
    assert keys == [2, 10, 900, 1000000]
    assert all(a < b for a, b in zip(keys, keys[1:]))


def test_csv_header_and_empty_cells(tmp_path, person):
    path = tmp_path / "out" / "nepos.csv"
    write_dataset([person("nm0000001", "A", mother_name="M")], path)

    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert tuple(rows[0]) == PERSON_FIELDS
    assert rows[1] == ["nm0000001", "A", "", "", "", "", "M", "", ""]


def test_csv_loads_back_with_none_for_empty_cells(tmp_path, person):
    path = tmp_path / "nepos.csv"
    record = person("nm0000001", "A", wiki_link="https://en.wikipedia.org/wiki/A")
    write_dataset([record], path)

    people = load_dataset(path)
    assert people["nm0000001"] == record
    assert people["nm0000001"].father_name is None


def test_mapping_form(tmp_path, person):
    path = tmp_path / "nepos.json"
    records = [person("nm0000001", "A"), person("nm0000002", "B")]
    write_dataset(records, path)

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert list(raw) == ["nm0000001", "nm0000002"]
    assert list(raw["nm0000001"]) == list(PERSON_FIELDS)
    assert dict(load_dataset(path)) == {r.imdb_id: r for r in records}


def test_write_overwrites(tmp_path, person):
    path = tmp_path / "nepos.csv"
    write_dataset([person("nm0000001"), person("nm0000002")], path)
    write_dataset([person("nm0000003")], path)
    assert list(load_dataset(path)) == ["nm0000003"]


def test_loaded_dataset_is_read_only(dataset_file, person):
    people = load_dataset(dataset_file)
    with pytest.raises(TypeError):
        people["nm0000009"] = person("nm0000009")


def test_unknown_format(tmp_path, person):
    with pytest.raises(ValueError):
        write_dataset([person()], tmp_path / "nepos.txt")
    with pytest.raises(ValueError):
        load_dataset(tmp_path / "nepos.txt")


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_dataset(tmp_path / "missing.csv")
