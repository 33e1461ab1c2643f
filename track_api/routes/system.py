from __future__ import annotations

from fastapi import APIRouter, Depends

from track_api.tracking.router import get_store
from track_api.tracking.store import RouteStore

router = APIRouter()


@router.get("/health")
async def health(store: RouteStore = Depends(get_store)):
    return {"status": "ok", "routes": await store.count()}
