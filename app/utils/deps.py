from typing import Optional
from fastapi import Depends, Header, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError

from app.core.cache import TTLCache
from app.core.config import settings
from app.core.database import get_db
from app.utils.cache_invalidation import CacheInvalidator

http_bearer = HTTPBearer(auto_error=False)

__all__ = ["get_db", "get_cache", "get_cache_invalidator", "get_current_user_id"]

def get_cache(request: Request) -> TTLCache:
    return request.app.state.cache

def get_cache_invalidator(cache: TTLCache = Depends(get_cache)) -> CacheInvalidator:
    return CacheInvalidator(cache)

def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(http_bearer),
    x_user_id: Optional[str] = Header(None, alias="X-User-Id"),
) -> str:
    """Opaque id of the authenticated user.

    A bearer token is verified when SECRET_KEY is configured; otherwise the
    X-User-Id development header is accepted if allowed.
    """
    if credentials and settings.SECRET_KEY:
        try:
            payload = jwt.decode(credentials.credentials, settings.SECRET_KEY, algorithms=["HS256"])
        except JWTError:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
        subject = payload.get("sub")
        if not subject:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
        return str(subject)

    if settings.ALLOW_DEV_USER_HEADER and x_user_id:
        return str(x_user_id)

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized: token or x-user-id required",
    )
