"""Wikidata access and dataset building."""

from .dataset import load_dataset, prepare_records, write_dataset
from .wikidata import SparqlClient, WikidataClient

__all__ = [
    "SparqlClient",
    "WikidataClient",
    "load_dataset",
    "prepare_records",
    "write_dataset",
]
