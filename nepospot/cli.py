"""Command-line nepo-baby check that asks Wikidata directly.

Usage::

    nepospot nm0000123 nm0001774
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Optional, Sequence

from .core import (
    BothParents,
    Classification,
    FatherOnly,
    Judgement,
    MotherOnly,
    NotNepoBaby,
    PersonInfo,
    classify_links,
)
from .logs import get_logger
from .services.fetcher import find_person_by_imdb_id, find_person_by_wikidata_id
from .services.wikidata import SparqlClient, WikidataClient

logger = get_logger()


async def _parent_wiki_link(client: SparqlClient, qid: Optional[str]) -> Optional[str]:
    if qid is None:
        return None
    parent = await find_person_by_wikidata_id(client, qid)
    return parent.wiki_link if parent is not None else None


async def determine_nepo_babiness(client: SparqlClient, person: PersonInfo) -> Classification:
    # no wiki page of their own: parents are not looked up
    if person.wiki_link is None:
        return NotNepoBaby()

    # parents not on Wikidata
    if person.mother_id is None and person.father_id is None:
        return NotNepoBaby()

    mother_wiki_link = await _parent_wiki_link(client, person.mother_id)
    father_wiki_link = await _parent_wiki_link(client, person.father_id)
    return classify_links(father_wiki_link, mother_wiki_link)


async def get_nepo_babiness_judgement(client: SparqlClient, imdb_id: str) -> Optional[Judgement]:
    person = await find_person_by_imdb_id(client, imdb_id)
    if person is None:
        return None
    nepo_babiness = await determine_nepo_babiness(client, person)
    return Judgement(person_info=person, nepo_babiness=nepo_babiness)


def render_judgement(imdb_id: str, judgement: Optional[Judgement]) -> str:
    if judgement is None:
        return f"Couldn't find a person with IMDB id {imdb_id}, are you sure that's correct?"

    lines = [f"Person with IMDB id {imdb_id} appears to be {judgement.person_info.name}"]
    verdict = judgement.nepo_babiness
    if isinstance(verdict, NotNepoBaby):
        lines.append("They're not a nepo baby: neither of their parents have a wikipedia page")
    elif isinstance(verdict, MotherOnly):
        lines.append(f"They might be a nepo baby. Their mother has a wiki page: {verdict.wiki_link}")
    elif isinstance(verdict, FatherOnly):
        lines.append(f"They might be a nepo baby. Their father has a wiki page: {verdict.wiki_link}")
    elif isinstance(verdict, BothParents):
        lines.append(
            "They're a nepo baby.\nMeet the parents:\n"
            f"- {verdict.mother_wiki_link}\n- {verdict.father_wiki_link}"
        )
    else:
        raise TypeError(f"Unknown classification: {verdict!r}")
    return "\n".join(lines)


async def check_ids(client: SparqlClient, imdb_ids: Sequence[str]) -> None:
    """Print a verdict per id. Unknown ids are reported; query errors propagate."""

    for imdb_id in imdb_ids:
        judgement = await get_nepo_babiness_judgement(client, imdb_id)
        print(render_judgement(imdb_id, judgement))


async def _run(imdb_ids: Sequence[str]) -> None:
    async with WikidataClient() as client:
        await check_ids(client, imdb_ids)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="nepospot",
        description="Check whether film people's parents have Wikipedia pages.",
    )
    parser.add_argument("imdb_ids", nargs="*", metavar="IMDB_ID", help="IMDb person ids, e.g. nm0000123")
    args = parser.parse_args(argv)

    try:
        asyncio.run(_run(args.imdb_ids))
    except Exception:
        logger.exception("Lookup failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
