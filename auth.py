import os
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from fastapi import Header, HTTPException

from env_loader import env_int

JWT_ALGORITHM = "HS256"


class AuthError(Exception):
    pass


def _secret() -> str:
    """
    Signing key from JWT_SECRET. The "dev-secret" fallback is shorter than
    PyJWT wants for HS256, so it emits InsecureKeyLengthWarning; set a real
    secret outside local development.
    """
    return os.getenv("JWT_SECRET", "dev-secret")


def issue_token(user: Dict[str, Any]) -> str:
    """
    Sign a token for the given user record.
    Claims: sub (user id), username, iat, exp.
    """
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user["id"],
        "username": user["username"],
        "iat": now,
        "exp": now + timedelta(seconds=env_int("JWT_EXPIRES_IN", 3600)),
    }
    return jwt.encode(payload, _secret(), algorithm=JWT_ALGORITHM)


def verify_token(token: str) -> Dict[str, Any]:
    try:
        return jwt.decode(token, _secret(), algorithms=[JWT_ALGORITHM])
    except jwt.PyJWTError as e:
        raise AuthError(str(e)) from e


def require_user(authorization: Optional[str] = Header(None)) -> Dict[str, Any]:
    """Dependency for protected routes; returns the verified token payload."""
    header = authorization or ""
    token = header[len("Bearer "):] if header.startswith("Bearer ") else None
    if not token:
        raise HTTPException(status_code=401, detail="Missing Authorization header")
    try:
        return verify_token(token)
    except AuthError:
        raise HTTPException(status_code=401, detail="Invalid or expired token")
