"""FastAPI application entry point for Cave Gallery."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from . import __version__
from .api import images_router, router
from .api.dependencies import SettingsDep, get_painting_store
from .config import get_settings
from .exceptions import CaveGalleryException, PaintingNotFoundException
from .logging_config import configure_logging
from .models import ErrorResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup/shutdown events."""
    settings = get_settings()
    configure_logging(settings.log_level)

    store = get_painting_store(settings)
    store.ensure_directory()
    logger.info("Starting Cave Gallery v%s", __version__)
    logger.info("Paintings stored in: %s", store.root_dir.resolve())
    logger.info("Gallery available at: http://localhost:%s/gallery", settings.port)
    yield
    logger.info("Shutting down Cave Gallery")


app = FastAPI(
    title="Cave Gallery API",
    description="Store cave paintings together with the stories they tell",
    version=__version__,
    lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)
app.include_router(images_router)


@app.exception_handler(CaveGalleryException)
async def cave_gallery_exception_handler(
    request: Request,
    exc: CaveGalleryException,
) -> JSONResponse:
    """Handle all CaveGalleryException subclasses with proper error response."""
    logger.warning(
        "%s %s failed: %s (code=%s)",
        request.method,
        request.url.path,
        exc.message,
        exc.error_code.value,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.error_code.value, message=exc.message).model_dump(),
    )


@app.get("/gallery", include_in_schema=False)
async def gallery(settings: SettingsDep) -> FileResponse:
    """Serve the gallery page."""
    if not settings.gallery_page.is_file():
        raise PaintingNotFoundException("Gallery page not found")
    return FileResponse(settings.gallery_page, media_type="text/html")


@app.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


def run() -> None:
    """Run the server with uvicorn."""
    import uvicorn

    uvicorn.run(
        "cavegallery.main:app",
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
