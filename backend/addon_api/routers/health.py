"""Health endpoints."""
from fastapi import APIRouter, Depends

from backend.resolver.cache import CacheLayer

from ..dependencies import get_cache
from ..schemas import CacheHealthStatus, HealthStatus

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthStatus)
def get_health(cache: CacheLayer = Depends(get_cache)) -> HealthStatus:
    """Return service heartbeat information."""

    cache_status = CacheHealthStatus(status="ok")
    if not cache.ping():
        cache_status = CacheHealthStatus(status="error", detail="cache_unreachable")
    return HealthStatus(cache=cache_status)
