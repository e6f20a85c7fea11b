import sys
from pathlib import Path

import pytest

# Ensure package root on sys.path
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nepospot.core import PersonRecord  # noqa: E402
from nepospot.services.dataset import write_dataset  # noqa: E402


class StubSparqlClient:
    """Records every query and answers it with ``handler(query)``."""

    def __init__(self, handler=None, error=None):
        self.handler = handler or (lambda query: [])
        self.error = error
        self.queries = []

    async def select(self, query):
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.handler(query)


@pytest.fixture
def stub_client():
    return StubSparqlClient


def make_person(imdb_id="nm0000001", name="Someone", **fields):
    return PersonRecord(imdb_id=imdb_id, name=name, **fields)


@pytest.fixture
def person():
    return make_person


@pytest.fixture
def dataset_file(tmp_path):
    path = tmp_path / "nepos.csv"
    write_dataset(
        [
            make_person(
                "nm0001774",
                "Janet Junior",
                wiki_link="https://en.wikipedia.org/wiki/Janet_Junior",
                mother_name="Jane",
                mother_wiki_link="https://en.wikipedia.org/wiki/Jane",
            ),
            make_person("nm0000002", "Nobody Special"),
        ],
        path,
    )
    return path
