import logging
import uuid
from datetime import datetime, timedelta, UTC
from jose import jwt, JWTError, ExpiredSignatureError
from taskmanager.config import SECRET_KEY, ALGORITHM
from taskmanager.errors import Forbidden

logger = logging.getLogger(__name__)


def create_token(data: dict):
    """Sign ``data`` into a bearer credential.

    Every call carries its own ``iat`` and ``jti``, so signing in twice never
    yields the same token for the same email.
    """
    data = data.copy()
    # read expiry at call-time so tests (and runtime overrides) that modify
    # taskmanager.config.ACCESS_TOKEN_EXPIRE_MINUTES take effect immediately
    import taskmanager.config as _cfg
    now = datetime.now(UTC)
    data.update({"iat": int(now.timestamp()), "jti": uuid.uuid4().hex})
    if _cfg.ACCESS_TOKEN_EXPIRE_MINUTES > 0:
        expire = now + timedelta(minutes=_cfg.ACCESS_TOKEN_EXPIRE_MINUTES)
        data["exp"] = int(expire.timestamp())  # JWT spec uses Unix timestamp
    return jwt.encode(data, SECRET_KEY, algorithm=ALGORITHM)


def decode_token(token: str) -> str:
    """Return the email embedded in ``token``.

    Raises Forbidden if the signature does not verify, the token has expired,
    or it carries no subject.
    """
    try:
        # jwt.decode validates exp automatically
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        logger.info("Rejected expired token")
        raise Forbidden("Token has expired")
    except JWTError:
        logger.info("Rejected token with invalid signature")
        raise Forbidden("Invalid token")
    email = payload.get("sub")
    if not email or not isinstance(email, str):
        raise Forbidden("Invalid token: missing user")
    return email
