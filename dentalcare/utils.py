import jwt
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any

from .config import Settings


def generate_id() -> str:
    """Opaque record identifier used for every stored document."""
    return uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# =========================
# JWT Token Handling
# =========================
def create_jwt_token(data: Dict[str, Any], settings: Settings) -> str:
    """Create a signed access token that expires after ACCESS_TOKEN_EXPIRE_DAYS."""
    to_encode = data.copy()
    expire = utc_now() + timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    to_encode.update({"exp": expire})

    if not settings.secret_configured:
        raise ValueError("SECRET_KEY not properly configured")

    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_jwt_token(token: str, settings: Settings) -> Optional[Dict[str, Any]]:
    """Decode and verify a token. Returns None for bad signatures, expiry or garbage."""
    if not settings.secret_configured:
        return None
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.ExpiredSignatureError:
        return None
    except jwt.InvalidTokenError:
        return None
