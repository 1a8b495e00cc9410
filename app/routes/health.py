"""Health check route."""

from fastapi import APIRouter

from ninjascript_checker import __version__

from ..schemas import HealthResponse
from ..utils import checker_svc

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    """Liveness check."""
    return HealthResponse(status="ok", version=__version__, platform=checker_svc.tables.version)
