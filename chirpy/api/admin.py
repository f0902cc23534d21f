"""Admin endpoints for file server metrics and the development reset."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse, PlainTextResponse
from sqlalchemy.orm import Session

from chirpy.api.dependencies import get_metrics
from chirpy.config import Settings, get_settings
from chirpy.database import get_db
from chirpy.services.auth import delete_all_users
from chirpy.services.metrics import HitCounter

router = APIRouter(prefix="/admin", tags=["admin"])

METRICS_PAGE = (
    "<html><body><h1>Welcome, Chirpy Admin</h1>"
    "<p>Chirpy has been visited {hits} times!</p></body></html>"
)


@router.get("/metrics", response_class=HTMLResponse)
async def get_metrics_page(
    metrics: Annotated[HitCounter, Depends(get_metrics)],
):
    """Show how many times the app was visited."""
    return METRICS_PAGE.format(hits=metrics.hits)


@router.post("/reset", response_class=PlainTextResponse)
async def reset(
    metrics: Annotated[HitCounter, Depends(get_metrics)],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Reset the hit counter and delete all users. Only allowed on the dev platform."""
    if not settings.is_dev_platform:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")

    metrics.reset()
    delete_all_users(db)
    return "Metrics reset\n"
