"""
security helpers:
- Argon2 password hashing via argon2-cffi
- Session token issue/verify via PyJWT (HS256 by default)

Tokens carry {sub, iat, exp}. Nothing is stored server-side: a token is valid
while its signature checks out under the configured secret and exp has not
passed.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt
from jwt.exceptions import InvalidSignatureError, InvalidSubjectError, InvalidTokenError, PyJWTError
from argon2 import PasswordHasher
from argon2.exceptions import VerificationError, InvalidHashError

ph = PasswordHasher()


def hash_password(password: str) -> str:
    """Hash a plaintext password using Argon2
    """
    return ph.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """ Verify a plaintext password using argon2
    """
    try:
        return ph.verify(password_hash, password)
    except (VerificationError, InvalidHashError):
        return False


class TokenError(Exception):
    """Base class for everything that can go wrong issuing or verifying a token."""


class SigningError(TokenError):
    pass


class MalformedToken(TokenError):
    pass


class BadSignature(TokenError):
    pass


class Expired(TokenError):
    pass


class MissingSubject(TokenError):
    pass


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class TokenSettings:
    secret: str
    algorithm: str = "HS256"
    lifetime: timedelta = timedelta(hours=24)

    @classmethod
    def from_config(cls, config) -> "TokenSettings":
        return cls(
            secret=config["JWT_SECRET"],
            algorithm=config.get("JWT_ALGORITHM", "HS256"),
            lifetime=config.get("JWT_TOKEN_EXPIRES", timedelta(hours=24)),
        )


class TokenCodec:
    """
    Issues and verifies signed session tokens.

    The codec holds no mutable state: settings are fixed at construction and
    `clock` is only read. Pass a custom clock to move time around in tests.
    """

    def __init__(self, settings: TokenSettings, clock: Optional[Callable[[], datetime]] = None):
        self._settings = settings
        self._clock = clock or _now

    @property
    def settings(self) -> TokenSettings:
        return self._settings

    def issue(self, subject: str) -> str:
        """Sign a claim for `subject` that expires `settings.lifetime` from now."""
        now = self._clock()
        payload = {
            "sub": subject,
            "iat": int(now.timestamp()),
            "exp": int((now + self._settings.lifetime).timestamp()),
        }
        try:
            return jwt.encode(payload, self._settings.secret, algorithm=self._settings.algorithm)
        except (PyJWTError, NotImplementedError, TypeError, ValueError) as exc:
            raise SigningError(f"Cannot sign token: {exc}") from exc

    def verify(self, token: str) -> str:
        """
        Return the subject of a valid token.
        Raises MalformedToken, BadSignature, Expired or MissingSubject.
        """
        try:
            decoded = jwt.decode(
                token,
                self._settings.secret,
                algorithms=[self._settings.algorithm],
                # exp is checked below against our own clock, with no leeway
                options={"verify_exp": False, "verify_iat": False, "require": ["exp"]},
            )
        except InvalidSignatureError as exc:
            raise BadSignature("Signature verification failed") from exc
        except InvalidSubjectError as exc:
            raise MissingSubject("Subject must be a string") from exc
        except InvalidTokenError as exc:
            raise MalformedToken(f"Invalid token: {exc}") from exc

        exp = decoded["exp"]
        if isinstance(exp, bool) or not isinstance(exp, (int, float)):
            raise MalformedToken("Expiration time must be a number")
        if self._clock().timestamp() > exp:
            raise Expired("Token expired")

        subject = decoded.get("sub")
        if not isinstance(subject, str):
            raise MissingSubject("Token carries no subject")
        return subject
