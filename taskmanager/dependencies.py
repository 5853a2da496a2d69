"""Request gate shared by every caller-scoped route.

``get_current_user`` verifies the bearer credential; ``require_matching_email``
depends on it, so the email check can only run once the token is known good.
"""
import logging
import re
from typing import Optional

from fastapi import Depends, Header, Query

from taskmanager.errors import BadRequest, Unauthorized
from taskmanager.utils.auth import decode_token

logger = logging.getLogger(__name__)

_ID_RE = re.compile(r"[0-9]+")
_MAX_ID = 2 ** 63 - 1


def get_current_user(authorization: Optional[str] = Header(None)) -> str:
    if not authorization:
        raise Unauthorized("Unauthorized entry")
    parts = authorization.split()
    if len(parts) < 2:
        raise Unauthorized("Unauthorized entry")
    return decode_token(parts[1])


def require_matching_email(
    email: Optional[str] = Query(None, description="Email the caller is acting as"),
    user: str = Depends(get_current_user),
) -> str:
    # exact compare; "A@x.com" and "a@x.com" are different callers
    if email != user:
        logger.info("Email mismatch for authenticated caller %s", user)
        raise Unauthorized("Invalid Email")
    return user


def parse_task_id(raw: str) -> int:
    if not _ID_RE.fullmatch(raw):
        raise BadRequest(f"Invalid task id: {raw!r}")
    value = int(raw)
    if value < 1 or value > _MAX_ID:
        raise BadRequest(f"Invalid task id: {raw!r}")
    return value
