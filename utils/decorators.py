from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import wraps

from flask import request, g, abort, current_app

from utils.security import TokenCodec, TokenError

BEARER_PREFIX = "Bearer "

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Request did not carry a usable credential."""


class MissingHeader(AuthError):
    pass


class BadHeaderFormat(AuthError):
    pass


@dataclass(frozen=True)
class Identity:
    username: str


def get_token_codec() -> TokenCodec:
    return current_app.extensions["token_codec"]


def current_identity() -> Identity:
    """Identity resolved by jwt_required() for the current request."""
    identity = g.get("identity")
    if not isinstance(identity, Identity):
        raise RuntimeError("current_identity() called outside a jwt_required view")
    return identity


def bearer_token(header: str | None) -> str:
    """
    Extract the token from an Authorization header value.
    The prefix must be exactly "Bearer " and something must follow it.
    """
    if not header:
        raise MissingHeader("Missing Authorization header")
    if not header.startswith(BEARER_PREFIX) or len(header) == len(BEARER_PREFIX):
        raise BadHeaderFormat("Authorization header is not a bearer token")
    return header[len(BEARER_PREFIX):]


def jwt_required():
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                token = bearer_token(request.headers.get("Authorization"))
                username = get_token_codec().verify(token)
            except (AuthError, TokenError) as e:
                # kind stays server-side; clients all get the same 401
                logger.debug("Rejected request to %s: %s (%s)", request.path, type(e).__name__, e)
                abort(401, description="Invalid or missing credentials")

            g.identity = Identity(username=username)
            return fn(*args, **kwargs)

        return wrapper

    return decorator
