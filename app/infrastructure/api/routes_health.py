"""Health check endpoint."""

from fastapi import APIRouter, Depends

from app.application.live_hub import LiveChannelHub
from app.application.ports.counter_repo import CounterRepository
from app.domain.errors import CounterStoreError
from app.infrastructure.api.dependencies import get_counter_repo, get_hub

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    counter: CounterRepository = Depends(get_counter_repo),
    hub: LiveChannelHub = Depends(get_hub),
):
    """Check API and counter store availability."""
    try:
        await counter.check_available()
        storage_status = "available"
    except CounterStoreError as e:
        storage_status = f"error: {e}"

    return {
        "status": "ok" if storage_status == "available" else "degraded",
        "storage": storage_status,
        "connections": hub.connection_count,
        "service": "Likes - real-time counter",
    }
