"""Shared data models for people records and their classification."""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class PersonRecord(BaseModel):
    """One row of the dataset; field order is the CSV header order."""

    model_config = ConfigDict(frozen=True)

    imdb_id: str
    name: str
    wiki_link: Optional[str] = None
    father_name: Optional[str] = None
    father_imdb_id: Optional[str] = None
    father_wiki_link: Optional[str] = None
    mother_name: Optional[str] = None
    mother_imdb_id: Optional[str] = None
    mother_wiki_link: Optional[str] = None


PERSON_FIELDS: tuple[str, ...] = tuple(PersonRecord.model_fields)


class PersonInfo(BaseModel):
    """Slim view of a person resolved live from Wikidata."""

    model_config = ConfigDict(frozen=True)

    name: str
    wiki_link: Optional[str] = None
    father_id: Optional[str] = Field(default=None, description="Wikidata QID of the father")
    mother_id: Optional[str] = Field(default=None, description="Wikidata QID of the mother")


# "No", or {"OnlyMother": {"wiki_link": ...}} and the like
WireClassification = Union[str, dict[str, dict[str, str]]]


class NotNepoBaby(BaseModel):
    """Neither parent has a Wikipedia article."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["No"] = "No"

    def to_wire(self) -> WireClassification:
        return self.kind


class MotherOnly(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["OnlyMother"] = "OnlyMother"
    wiki_link: str

    def to_wire(self) -> WireClassification:
        return {self.kind: {"wiki_link": self.wiki_link}}


class FatherOnly(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["OnlyFather"] = "OnlyFather"
    wiki_link: str

    def to_wire(self) -> WireClassification:
        return {self.kind: {"wiki_link": self.wiki_link}}


class BothParents(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["Yes"] = "Yes"
    father_wiki_link: str
    mother_wiki_link: str

    def to_wire(self) -> WireClassification:
        return {
            self.kind: {
                "father_wiki_link": self.father_wiki_link,
                "mother_wiki_link": self.mother_wiki_link,
            }
        }


Classification = Annotated[
    Union[NotNepoBaby, MotherOnly, FatherOnly, BothParents],
    Field(discriminator="kind"),
]


class Judgement(BaseModel):
    """A live-resolved person together with their classification."""

    model_config = ConfigDict(frozen=True)

    person_info: PersonInfo
    nepo_babiness: Classification
