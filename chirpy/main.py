"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from chirpy.api import admin, auth, chirps, users
from chirpy.config import get_settings
from chirpy.database import init_db
from chirpy.services.metrics import HitCounter

settings = get_settings()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    init_db()
    logger.info(f"Chirpy started (platform={settings.platform or 'unset'})")
    yield


app = FastAPI(
    title="Chirpy API",
    description="Short posts, masked profanity and password login",
    version="0.1.0",
    lifespan=lifespan,
)

app.state.metrics = HitCounter()


@app.middleware("http")
async def count_file_server_hits(request: Request, call_next):
    """Count every request to the static app."""
    if request.url.path.startswith("/app/"):
        request.app.state.metrics.increment()
    return await call_next(request)


# Register routers
app.include_router(users.router)
app.include_router(auth.router)
app.include_router(chirps.router)
app.include_router(admin.router)


@app.get("/api/healthz", response_class=PlainTextResponse)
async def health_check():
    """Health check endpoint."""
    return "OK"


app.mount(
    "/app",
    StaticFiles(directory=settings.static_dir, html=True, check_dir=False),
    name="app",
)
app.mount(
    "/assets",
    StaticFiles(directory=settings.static_dir / "assets", check_dir=False),
    name="assets",
)


def run() -> None:
    """Run the server with uvicorn."""
    import uvicorn

    uvicorn.run("chirpy.main:app", host="0.0.0.0", port=8080)  # noqa: S104
