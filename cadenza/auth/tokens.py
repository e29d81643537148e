"""Signed, time-limited bearer tokens carrying a user id."""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt
from flask import current_app


class TokenError(Exception):
    """Base class for tokens that cannot be accepted."""


class TokenExpired(TokenError):
    pass


class TokenInvalid(TokenError):
    pass


def create_access_token(user_id: int) -> str:
    """Create a signed JWT whose subject is `user_id`."""
    config = current_app.config
    now = datetime.now(timezone.utc)

    payload: Dict[str, Any] = {
        "sub": str(user_id),
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(seconds=config["JWT_EXPIRES_IN"])).timestamp()),
    }
    return jwt.encode(payload, config["JWT_SECRET"], algorithm=config["JWT_ALGORITHM"])


def decode_access_token(token: str) -> int:
    """Validate `token` and return the user id it was issued for."""
    config = current_app.config
    try:
        payload = jwt.decode(
            token,
            config["JWT_SECRET"],
            algorithms=[config["JWT_ALGORITHM"]],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise TokenExpired("Token has expired") from exc
    except jwt.InvalidTokenError as exc:
        raise TokenInvalid("Invalid token") from exc

    try:
        return int(payload["sub"])
    except (TypeError, ValueError) as exc:
        raise TokenInvalid("Invalid token subject") from exc
