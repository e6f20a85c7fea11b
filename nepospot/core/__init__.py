"""Core data models and classification logic."""

from .classify import classify, classify_links
from .models import (
    PERSON_FIELDS,
    BothParents,
    Classification,
    FatherOnly,
    Judgement,
    MotherOnly,
    NotNepoBaby,
    PersonInfo,
    PersonRecord,
)

__all__ = [
    "PERSON_FIELDS",
    "BothParents",
    "Classification",
    "FatherOnly",
    "Judgement",
    "MotherOnly",
    "NotNepoBaby",
    "PersonInfo",
    "PersonRecord",
    "classify",
    "classify_links",
]
