"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from dictlookup import __version__
from dictlookup.config import settings
from dictlookup.logging_config import setup_logging
from dictlookup.routes import dictionary_router
from dictlookup.services.dictionary import (
    CacheManager,
    DictionaryService,
    DictionaryServiceError,
)

# Configure logging
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info("Starting dictlookup...")

    app.state.dictionary_service = DictionaryService(
        cache_manager=CacheManager(
            ttl_seconds=settings.cache_ttl_seconds,
            max_size=settings.cache_max_size,
        )
    )
    logger.info(
        f"Dictionary cache ready (ttl={settings.cache_ttl_seconds}s, "
        f"max_size={settings.cache_max_size})"
    )

    yield

    logger.info("Shutting down dictlookup...")


app = FastAPI(
    title="dictlookup",
    description="Cambridge Dictionary lookups with Wiktionary verb forms",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(dictionary_router)


@app.exception_handler(DictionaryServiceError)
async def dictionary_error_handler(request: Request, exc: DictionaryServiceError) -> JSONResponse:
    """Map lookup errors to HTTP responses."""
    if exc.status_code >= 500:
        logger.error(f"Lookup failed for {request.url.path}: {exc}")
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": __version__,
    }


def run() -> None:
    """Run the application (for use with `dictlookup-server` command)."""
    import uvicorn

    uvicorn.run(
        "dictlookup.main:app",
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
