"""Queries that pull film people and their parents out of Wikidata."""

from __future__ import annotations

import logging
import re
from datetime import date
from time import monotonic
from typing import Iterable, Iterator, Optional

from ..core import PersonInfo, PersonRecord
from .wikidata import Row, SparqlClient, strip_entity_prefix

logger = logging.getLogger("nepospot.fetcher")

# Max Linder, the earliest known film actor, was born in 1883
EARLIEST_FILM_ACTOR_BIRTH_YEAR = 1883
# Five-year chunks have produced responses the endpoint could not finish
DEFAULT_CHUNK_SIZE = 4

IMDB_ID_PATTERN = re.compile(r"^[a-z]{2}\d+$")
WIKIDATA_ID_PATTERN = re.compile(r"^Q\d+$")

PEOPLE_QUERY = """SELECT
  DISTINCT ?imdbId
  ?personLabel
  ?wikiLink
  ?fatherLabel
  ?fatherImdbId
  ?fatherWikiLink
  ?motherLabel
  ?motherImdbId
  ?motherWikiLink
WHERE
{{
  ?person wdt:P31 wd:Q5;
    wdt:P345 ?imdbId;
    wdt:P569 ?born .
  OPTIONAL {{
    ?wikiLink schema:about ?person .
    ?wikiLink schema:isPartOf <https://en.wikipedia.org/>
  }}
  OPTIONAL {{
    ?person wdt:P22 ?father .
    ?fatherWikiLink schema:about ?father .
    ?fatherWikiLink schema:isPartOf <https://en.wikipedia.org/>
    OPTIONAL {{ ?father wdt:P345 ?fatherImdbId . }}
  }}
  OPTIONAL {{
    ?person wdt:P25 ?mother .
    ?motherWikiLink schema:about ?mother .
    ?motherWikiLink schema:isPartOf <https://en.wikipedia.org/>
    OPTIONAL {{ ?mother wdt:P345 ?motherImdbId . }}
  }}
  FILTER (YEAR(?born) >= {start_year} && YEAR(?born) < {end_year})
  SERVICE wikibase:label {{ bd:serviceParam wikibase:language "en" . }}
}}
"""

PERSON_BY_IMDB_ID_QUERY = """SELECT ?itemLabel ?mother ?father ?wikiLink WHERE {{
  ?item wdt:P345 "{imdb_id}".

  OPTIONAL{{ ?item wdt:P25 ?mother .}}
  OPTIONAL{{ ?item wdt:P22 ?father .}}
  OPTIONAL{{ ?wikiLink schema:about ?item . ?wikiLink schema:isPartOf <https://en.wikipedia.org/> }}
  SERVICE wikibase:label {{ bd:serviceParam wikibase:language "en". }}
}}
LIMIT 1"""

PERSON_BY_WIKIDATA_ID_QUERY = """SELECT ?itemLabel ?mother ?father ?wikiLink WHERE {{
  ?item ?p ?s

  OPTIONAL{{ ?item wdt:P25 ?mother .}}
  OPTIONAL{{ ?item wdt:P22 ?father .}}
  OPTIONAL{{ ?wikiLink schema:about ?item . ?wikiLink schema:isPartOf <https://en.wikipedia.org/> }}

  FILTER(?item = wd:{qid})

  SERVICE wikibase:label {{ bd:serviceParam wikibase:language "en". }}
}}
LIMIT 1"""


def count_down_year_ranges(
    chunk_size: int,
    last_year_to_be_included: int,
    current_year: Optional[int] = None,
) -> Iterator[range]:
    """Yield ``range(year, year + chunk_size)`` going back from next year.

    Stops once a chunk would end at or before ``last_year_to_be_included``.
    Calling it again starts a fresh walk.
    """

    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    year = (current_year if current_year is not None else date.today().year) + 1
    while True:
        year -= chunk_size
        if year + chunk_size <= last_year_to_be_included:
            return
        yield range(year, year + chunk_size)


def build_people_query(years: range) -> str:
    return PEOPLE_QUERY.format(start_year=years.start, end_year=years.stop)


def decode_people(rows: Iterable[Row]) -> list[PersonRecord]:
    """Turn query rows into records, skipping rows without an id or a name."""

    people: list[PersonRecord] = []
    for row in rows:
        imdb_id = row.get("imdbId")
        name = row.get("personLabel")
        if imdb_id is None or name is None:
            continue
        people.append(
            PersonRecord(
                imdb_id=imdb_id,
                name=name,
                wiki_link=row.get("wikiLink"),
                father_name=row.get("fatherLabel"),
                father_imdb_id=row.get("fatherImdbId"),
                father_wiki_link=row.get("fatherWikiLink"),
                mother_name=row.get("motherLabel"),
                mother_imdb_id=row.get("motherImdbId"),
                mother_wiki_link=row.get("motherWikiLink"),
            )
        )
    return people


async def collect_people(client: SparqlClient, years: range) -> list[PersonRecord]:
    """Fetch everyone with an IMDb id born within ``years``."""

    return decode_people(await client.select(build_people_query(years)))


async def fetch_all_people(
    client: SparqlClient,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    last_year_to_be_included: int = EARLIEST_FILM_ACTOR_BIRTH_YEAR,
    current_year: Optional[int] = None,
) -> list[PersonRecord]:
    """Walk every year chunk in turn and concatenate the results.

    Chunks are fetched one after another. The result may hold the same person
    more than once; deduplication happens when the dataset is prepared.
    """

    started = monotonic()
    people: list[PersonRecord] = []
    for years in count_down_year_ranges(chunk_size, last_year_to_be_included, current_year):
        chunk = await collect_people(client, years)
        logger.info(
            "Fetched %d people for years %d..%d", len(chunk), years.start, years.stop
        )
        people.extend(chunk)

    logger.info(
        "Done fetching. Took: %.1fs. Received total %d people.",
        monotonic() - started,
        len(people),
    )
    return people


def _person_info(rows: list[Row]) -> Optional[PersonInfo]:
    for row in rows:
        name = row.get("itemLabel")
        if name is None:
            continue
        return PersonInfo(
            name=name,
            wiki_link=row.get("wikiLink"),
            father_id=strip_entity_prefix(row.get("father")),
            mother_id=strip_entity_prefix(row.get("mother")),
        )
    return None


async def find_person_by_imdb_id(client: SparqlClient, imdb_id: str) -> Optional[PersonInfo]:
    if not IMDB_ID_PATTERN.match(imdb_id):
        logger.info("Not an IMDb id, skipping query: %r", imdb_id)
        return None
    rows = await client.select(PERSON_BY_IMDB_ID_QUERY.format(imdb_id=imdb_id))
    return _person_info(rows)


async def find_person_by_wikidata_id(client: SparqlClient, qid: str) -> Optional[PersonInfo]:
    if not WIKIDATA_ID_PATTERN.match(qid):
        logger.info("Not a Wikidata id, skipping query: %r", qid)
        return None
    rows = await client.select(PERSON_BY_WIKIDATA_ID_QUERY.format(qid=qid))
    return _person_info(rows)
