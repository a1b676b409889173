"""FastAPI application entry point for the DNSA archive explorer."""

import os
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.logging.logging_setup import setup_logging
from shared.helper.HelperConfig import HelperConfig
from shared.clients.archive.ArchiveClientInterface import ArchiveClientInterface
from shared.clients.archive.ArchiveClientManager import ArchiveClientManager
from server.core.SearchService import SearchService
from server.core.GraphService import GraphService
from server.routers.DocumentsRouter import router as documents_router
from server.routers.FiltersRouter import router as filters_router
from server.routers.GraphRouter import router as graph_router

logging = setup_logging()
app_version = os.getenv("APP_VERSION", "unknown")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # when the app starts
    app.state.logging = logging
    app.state.helper_config = HelperConfig(logger=logging)

    archive_clients = ArchiveClientManager(helper_config=app.state.helper_config).get_clients()

    logging.info("Booting archive clients...")
    for client in archive_clients:
        await client.boot()
    app.state.archive_clients = archive_clients

    await check_connections(archive_clients)

    app.state.search_service = SearchService(
        helper_config=app.state.helper_config,
        archive_clients=archive_clients,
    )
    app.state.graph_service = GraphService(
        helper_config=app.state.helper_config,
        archive_clients=archive_clients,
    )

    # the whole collection is fetched once; every search runs in memory afterwards
    await app.state.search_service.do_load_documents()

    # while the app is running...
    yield

    # when the app shuts down, close all client connections
    logging.info("Shutting down, closing archive clients...")
    for client in archive_clients:
        await client.close()
    logging.info("All clients closed.")


app = FastAPI(
    title="dnsa_archive_explorer",
    description=(
        "Catalog and exploration API for a declassified-documents archive. "
        "The full collection is loaded into memory at start-up and searched with "
        "free-text queries combined with facet, year-range and file-presence filters. "
        "A companion entity graph links people, organizations, places and keywords."
    ),
    version=app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(documents_router)
app.include_router(filters_router)
app.include_router(graph_router)


async def check_connections(archive_clients: list[ArchiveClientInterface]) -> None:
    """Log archive backends that are not reachable on startup.

    Failures are non-fatal: the server stays up and reports the fetch error
    through GET /documents/status.
    """
    for client in archive_clients:
        try:
            result: httpx.Response = await client.do_healthcheck()
        except httpx.HTTPError as e:
            logging.warning("Archive client '%s' is not reachable: %s", client.__class__.__name__, e)
            continue
        if not result.is_success:
            logging.warning(
                "Archive client '%s' is not reachable (status %d). Document loading may fail.",
                client.__class__.__name__,
                result.status_code,
            )


if __name__ == "__main__":
    import uvicorn

    logging.info("Starting dnsa_archive_explorer API Server v%s on port 8000...", app_version)
    uvicorn.run(app, host="0.0.0.0", port=8000)
