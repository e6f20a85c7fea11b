"""Nepo-babiness classification from parents' Wikipedia links."""

from __future__ import annotations

from typing import Optional

from .models import (
    BothParents,
    Classification,
    FatherOnly,
    MotherOnly,
    NotNepoBaby,
    PersonRecord,
)


def classify_links(
    father_wiki_link: Optional[str], mother_wiki_link: Optional[str]
) -> Classification:
    """Map the two optional parent links onto the four classification variants.

    Empty strings count as absent, since CSV cells cannot tell them apart.
    """

    if father_wiki_link and mother_wiki_link:
        return BothParents(
            father_wiki_link=father_wiki_link, mother_wiki_link=mother_wiki_link
        )
    if mother_wiki_link:
        return MotherOnly(wiki_link=mother_wiki_link)
    if father_wiki_link:
        return FatherOnly(wiki_link=father_wiki_link)
    return NotNepoBaby()


def classify(record: PersonRecord) -> Classification:
    return classify_links(record.father_wiki_link, record.mother_wiki_link)
