"""Runtime configuration for nepospot."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent

# Wikidata
WIKIDATA_SPARQL_URL = os.getenv("WIKIDATA_SPARQL_URL", "https://query.wikidata.org/sparql")
USER_AGENT = os.getenv(
    "NEPOSPOT_USER_AGENT", "nepospot/0.1 (https://github.com/nepospot/nepospot)"
)
HTTP_TIMEOUT = float(os.getenv("NEPOSPOT_HTTP_TIMEOUT", "60"))

# Dataset
DATASET_PATH = Path(os.getenv("NEPOSPOT_DATASET_PATH", str(PACKAGE_DIR / "data" / "nepos.csv")))

# Unset means "decide from the dataset form" (strict for the JSON mapping)
_strict_ids = os.getenv("NEPOSPOT_STRICT_IDS")
STRICT_IDS = None if _strict_ids is None else _strict_ids.lower() in {"1", "true", "yes"}

# Generation
CHUNK_SIZE = int(os.getenv("NEPOSPOT_CHUNK_SIZE", "4"))
FLOOR_YEAR = int(os.getenv("NEPOSPOT_FLOOR_YEAR", "1883"))

# Server
HOST = os.getenv("NEPOSPOT_HOST", "0.0.0.0")
PORT = int(os.getenv("NEPOSPOT_PORT", "8000"))

LOG_LEVEL = os.getenv("NEPOSPOT_LOG_LEVEL", "INFO").upper()

# Validation
if CHUNK_SIZE <= 0:
    raise ValueError(
        f"NEPOSPOT_CHUNK_SIZE must be a positive number of years, got {CHUNK_SIZE}."
    )
