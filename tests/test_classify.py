import pytest
from pydantic import ValidationError

from nepospot.core import (
    BothParents,
    FatherOnly,
    MotherOnly,
    NotNepoBaby,
    classify,
    classify_links,
)

FATHER = "https://en.wikipedia.org/wiki/Dad"
MOTHER = "https://en.wikipedia.org/wiki/Mum"


@pytest.mark.parametrize(
    "father, mother, expected",
    [
        (FATHER, MOTHER, BothParents(father_wiki_link=FATHER, mother_wiki_link=MOTHER)),
        (None, MOTHER, MotherOnly(wiki_link=MOTHER)),
        (FATHER, None, FatherOnly(wiki_link=FATHER)),
        (None, None, NotNepoBaby()),
    ],
)
def test_classify_decision_table(person, father, mother, expected):
    record = person(father_wiki_link=father, mother_wiki_link=mother)
    assert classify(record) == expected


def test_empty_links_count_as_absent():
    assert classify_links("", "") == NotNepoBaby()
    assert classify_links("", MOTHER) == MotherOnly(wiki_link=MOTHER)


def test_own_wiki_link_does_not_matter(person):
    record = person(wiki_link="https://en.wikipedia.org/wiki/Someone")
    assert classify(record) == NotNepoBaby()


def test_wire_forms():
    assert NotNepoBaby().to_wire() == "No"
    assert MotherOnly(wiki_link=MOTHER).to_wire() == {"OnlyMother": {"wiki_link": MOTHER}}
    assert FatherOnly(wiki_link=FATHER).to_wire() == {"OnlyFather": {"wiki_link": FATHER}}
    assert BothParents(father_wiki_link=FATHER, mother_wiki_link=MOTHER).to_wire() == {
        "Yes": {"father_wiki_link": FATHER, "mother_wiki_link": MOTHER}
    }


def test_records_are_immutable(person):
    record = person()
    with pytest.raises(ValidationError):
        record.name = "Someone Else"


def test_wire_payloads_are_string_maps():
    assert isinstance(NotNepoBaby().to_wire(), str)
    for verdict in (
        MotherOnly(wiki_link=MOTHER),
        FatherOnly(wiki_link=FATHER),
        BothParents(father_wiki_link=FATHER, mother_wiki_link=MOTHER),
    ):
        ((tag, payload),) = verdict.to_wire().items()
        assert tag == verdict.kind
        assert all(isinstance(v, str) for v in payload.values())
