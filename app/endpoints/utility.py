import time
from fastapi import APIRouter, Depends

from app.core.cache import TTLCache
from app.schemas.response import APIResponse
from app.services.cache_service import cache_service
from app.utils import deps

router = APIRouter()

@router.get("/healthz")
def health_check():
    return {"ok": True, "ts": int(time.time() * 1000)}

@router.get("/cache/health", response_model=APIResponse[dict])
def cache_health(
    cache: TTLCache = Depends(deps.get_cache),
    user_id: str = Depends(deps.get_current_user_id),
):
    data = cache_service.get_cache_stats(cache)
    data["healthy"] = cache_service.health_check(cache)
    return APIResponse(message="Cache status fetched successfully", data=data)
