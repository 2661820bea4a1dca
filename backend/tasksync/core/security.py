from typing import Optional
import jwt
from .config import Settings


def create_access_token(uid: str, settings: Settings) -> str:
    return jwt.encode({"id": uid}, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_uid(token: str, settings: Settings) -> Optional[str]:
    """Return the caller id carried by ``token``, or None if it does not verify."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.PyJWTError:
        return None
    uid = payload.get("id")
    if uid is None or uid == "":
        return None
    return str(uid)
