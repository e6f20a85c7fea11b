"""Wikidata SPARQL endpoint client."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from ..config import HTTP_TIMEOUT, USER_AGENT, WIKIDATA_SPARQL_URL

logger = logging.getLogger("nepospot.wikidata")

ENTITY_PREFIX = "http://www.wikidata.org/entity/"

Row = dict[str, str]


class SparqlClient(Protocol):
    """Anything that can run a SELECT query and hand back flattened rows."""

    async def select(self, query: str) -> list[Row]: ...


def parse_bindings(payload: Any) -> list[Row]:
    """Flatten ``results.bindings`` into ``{field: value}`` rows.

    A payload without a usable ``results``/``bindings`` container decodes to
    zero rows. Fields whose wrapper lacks a string ``value`` are left out of
    the row, same as an unbound OPTIONAL variable.
    """

    if not isinstance(payload, dict):
        logger.warning("SPARQL payload is not an object; treating as empty")
        return []
    results = payload.get("results")
    bindings = results.get("bindings") if isinstance(results, dict) else None
    if not isinstance(bindings, list):
        logger.warning("SPARQL payload has no results.bindings; treating as empty")
        return []

    rows: list[Row] = []
    for binding in bindings:
        if not isinstance(binding, dict):
            continue
        row: Row = {}
        for key, cell in binding.items():
            value = cell.get("value") if isinstance(cell, dict) else None
            if isinstance(value, str):
                row[key] = value
        rows.append(row)
    return rows


def strip_entity_prefix(uri: str | None) -> str | None:
    """``http://www.wikidata.org/entity/Q42`` -> ``Q42``; anything else -> None."""

    if uri is None or not uri.startswith(ENTITY_PREFIX):
        return None
    return uri[len(ENTITY_PREFIX):]


class WikidataClient:
    """Async client for the Wikidata Query Service."""

    def __init__(
        self,
        endpoint: str = WIKIDATA_SPARQL_URL,
        user_agent: str = USER_AGENT,
        timeout: float = HTTP_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.endpoint = endpoint
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=timeout,
            headers={
                "Accept": "application/sparql-results+json",
                "User-Agent": user_agent,
            },
        )

    async def __aenter__(self) -> "WikidataClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def sparql_query(self, query: str) -> Any:
        """Run ``query`` and return the decoded JSON document.

        HTTP errors and undecodable bodies propagate to the caller.
        """

        logger.debug("Using query:\n%s", query)
        response = await self._client.get(
            self.endpoint, params={"query": query, "format": "json"}
        )
        response.raise_for_status()
        return response.json()

    async def select(self, query: str) -> list[Row]:
        return parse_bindings(await self.sparql_query(query))
