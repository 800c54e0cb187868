"""Like endpoints — read and increment the counter."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from app.application.use_cases.likes import GetLikesUseCase, LikeUseCase
from app.domain.errors import CounterStoreError, StorageUnavailable
from app.infrastructure.api.dependencies import get_get_likes_uc, get_like_uc

logger = logging.getLogger(__name__)

router = APIRouter(tags=["likes"])


class LikesResponse(BaseModel):
    numLikes: int


def _store_error(e: CounterStoreError) -> HTTPException:
    status_code = 503 if isinstance(e, StorageUnavailable) else 500
    return HTTPException(status_code=status_code, detail=str(e))


@router.get("/likes", response_model=LikesResponse)
async def get_likes(uc: GetLikesUseCase = Depends(get_get_likes_uc)):
    """Current like count."""
    try:
        return LikesResponse(numLikes=await uc.execute())
    except CounterStoreError as e:
        logger.exception("Error reading like count")
        raise _store_error(e)


@router.put("/like", response_model=LikesResponse)
async def like(uc: LikeUseCase = Depends(get_like_uc)):
    """Add one like; returns the post-increment count. The request body is ignored."""
    try:
        return LikesResponse(numLikes=await uc.execute())
    except CounterStoreError as e:
        logger.exception("Error recording like")
        raise _store_error(e)
