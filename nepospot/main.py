"""FastAPI application answering nepo-baby lookups from the static dataset."""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from .config import DATASET_PATH, HOST, LOG_LEVEL, PORT, STRICT_IDS
from .core import classify
from .logs import get_logger
from .services.dataset import load_dataset

logger = get_logger()

# Every method is routed here so the rejection carries an empty body
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]
PERSON_ID_PREFIX = "nm"


def create_app(
    dataset_path: Path | str | None = None,
    strict_ids: bool | None = None,
) -> FastAPI:
    """Build the lookup app around the dataset at ``dataset_path``.

    The dataset is read once, when the app starts, and shared read-only by
    every request. ``strict_ids`` additionally rejects ids that do not start
    with ``nm``; by default it is on for the JSON mapping form only.
    """

    path = Path(dataset_path) if dataset_path is not None else DATASET_PATH
    if strict_ids is None:
        strict_ids = STRICT_IDS if STRICT_IDS is not None else path.suffix.lower() == ".json"

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown lifecycle."""
        logger.info("Starting nepospot lookup service (dataset=%s, strict_ids=%s)", path, strict_ids)
        app.state.people = load_dataset(path)
        yield
        logger.info("Shutdown complete")

    app = FastAPI(
        title="nepospot",
        description="Do a film person's parents have Wikipedia pages?",
        lifespan=lifespan,
    )

    @app.api_route("/", methods=ALL_METHODS)
    async def nepospot(request: Request) -> Response:
        if request.method != "GET":
            return Response(status_code=405)

        imdb_ids = request.query_params.getlist("imdb_id")
        if not imdb_ids:
            return Response(status_code=400)
        imdb_id = imdb_ids[0]
        if strict_ids and not imdb_id.startswith(PERSON_ID_PREFIX):
            return Response(status_code=400)

        person = request.app.state.people.get(imdb_id)
        if person is None:
            logger.info("No person with IMDb id %s", imdb_id)
            return Response(status_code=404)

        return JSONResponse(
            {
                "person": person.model_dump(),
                "is_nepo_baby": classify(person).to_wire(),
            }
        )

    @app.get("/health")
    async def health(request: Request):
        """Health check endpoint."""
        return {
            "status": "ok",
            "service": "nepospot",
            "people": len(request.app.state.people),
        }

    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
