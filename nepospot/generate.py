"""Regenerate the people dataset from Wikidata.

Fetches everyone with an IMDb id, year chunk by year chunk, then filters,
sorts and deduplicates the lot and overwrites the dataset file. Sorting keeps
diffs between regenerations small.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from time import monotonic
from typing import Optional, Sequence

from .config import CHUNK_SIZE, DATASET_PATH, FLOOR_YEAR
from .logs import get_logger
from .services.dataset import prepare_records, write_dataset
from .services.fetcher import fetch_all_people
from .services.wikidata import SparqlClient, WikidataClient

logger = get_logger()


async def generate(
    client: SparqlClient,
    output: Path,
    chunk_size: int = CHUNK_SIZE,
    floor_year: int = FLOOR_YEAR,
) -> int:
    """Fetch, prepare and write the dataset; return the number of people written."""

    logger.info("Fetching data...")
    people = await fetch_all_people(client, chunk_size, floor_year)

    logger.info("Keeping only items with imdb id starting with nm, and sorting the lot")
    started = monotonic()
    people = prepare_records(people)
    logger.info("Done sorting. Took: %.3fs", monotonic() - started)

    logger.info("Writing to %s...", output)
    started = monotonic()
    write_dataset(people, output)
    logger.info("Done writing. Took: %.3fs", monotonic() - started)
    return len(people)


async def _run(output: Path, chunk_size: int, floor_year: int) -> int:
    async with WikidataClient() as client:
        return await generate(client, output, chunk_size, floor_year)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="nepospot-generate",
        description="Rebuild the nepospot dataset from Wikidata.",
    )
    parser.add_argument("--output", type=Path, default=DATASET_PATH, help="dataset file (.csv or .json)")
    parser.add_argument("--chunk-size", type=int, default=CHUNK_SIZE, help="years per query")
    parser.add_argument("--floor-year", type=int, default=FLOOR_YEAR, help="earliest birth year to include")
    args = parser.parse_args(argv)

    if args.chunk_size <= 0:
        parser.error("--chunk-size must be positive")

    try:
        asyncio.run(_run(args.output, args.chunk_size, args.floor_year))
    except Exception:
        logger.exception("Dataset generation failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
