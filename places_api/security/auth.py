from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Request
from jose import JWTError, jwt

from places_api import config
from places_api.errors import Unauthorized


def create_access_token(user_id: str, email: str, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES))
    payload = {"userId": user_id, "email": email, "exp": expire}
    return jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> str:
    """Return the user id carried by a token, raising Unauthorized when it is not valid."""
    try:
        payload = jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
    except JWTError:
        raise Unauthorized("Authentication failed!")
    user_id = payload.get("userId")
    if not user_id:
        raise Unauthorized("Authentication failed!")
    return user_id


async def get_current_user_id(request: Request) -> Optional[str]:
    """
    Authorization: Bearer <token>
    """
    if request.method == "OPTIONS":
        return None

    authorization = request.headers.get("Authorization", "")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise Unauthorized("Authentication failed!")
    return decode_access_token(token)
