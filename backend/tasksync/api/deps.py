import logging
from fastapi import HTTPException, Request, status
from ..core.config import Settings
from ..core.security import decode_uid

logger = logging.getLogger(__name__)

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_current_uid(request: Request) -> str:
    """Resolve the caller's id from the auth token header or reject with 401."""
    settings = get_settings(request)
    token = request.headers.get(settings.AUTH_HEADER)
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="No auth token, access denied!")
    uid = decode_uid(token, settings)
    if uid is None:
        logger.info("Rejected request with invalid auth token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token verification failed, authorization denied!",
        )
    return uid
