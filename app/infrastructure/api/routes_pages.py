"""Static page served at the root."""

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from app.config import Settings
from app.infrastructure.api.dependencies import get_settings

router = APIRouter(tags=["pages"])


@router.get("/", include_in_schema=False)
async def index(settings: Settings = Depends(get_settings)):
    return FileResponse(settings.index_page, media_type="text/html")
