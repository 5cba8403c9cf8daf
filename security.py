"""Security helpers: password hashing and JWT issuance/verification.

Passwords are hashed with Argon2 through :class:`passlib.context.CryptContext`.
Tokens are signed with :mod:`jwt` using the process-wide ``SECRET_KEY`` and
``ALGORITHM`` from :mod:`config`. The subject id travels in the standard
``sub`` claim. Tokens carry an ``exp`` claim only when
``ACCESS_TOKEN_EXPIRE_MINUTES`` is configured.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from passlib.context import CryptContext

import config

SUBJECT_CLAIM = "sub"

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


class InvalidToken(Exception):
    """Raised when a token cannot be verified."""


def get_password_hash(password: str) -> str:
    """Return a salted Argon2 hash for ``password``."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify that ``plain_password`` matches ``hashed_password``.

    Hashes that passlib does not recognize count as a mismatch.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        return False


class TokenService:
    """Issue and verify signed access tokens."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire_minutes: Optional[int] = None,
    ) -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def issue(
        self, claims: Dict[str, Any], expires_delta: Optional[timedelta] = None
    ) -> str:
        """Create a JWT containing ``claims``.

        ``expires_delta`` overrides the configured expiry; with neither set
        the token has no ``exp`` claim.
        """
        to_encode = claims.copy()
        if expires_delta is None and self.expire_minutes is not None:
            expires_delta = timedelta(minutes=self.expire_minutes)
        if expires_delta is not None:
            to_encode["exp"] = datetime.now(timezone.utc) + expires_delta
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> Dict[str, Any]:
        """Decode ``token`` and return its claims.

        Raises :class:`InvalidToken` for a bad signature, a malformed or
        expired token, or a token signed with another secret.
        """
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except jwt.InvalidTokenError as exc:
            raise InvalidToken(str(exc)) from exc

    def issue_for_user(self, user_id: int) -> str:
        return self.issue({SUBJECT_CLAIM: str(user_id)})

    @staticmethod
    def subject_of(claims: Dict[str, Any]) -> int:
        """Extract the user id from verified ``claims``."""
        subject = claims.get(SUBJECT_CLAIM)
        try:
            user_id = int(subject)
        except (TypeError, ValueError) as exc:
            raise InvalidToken("token has no usable subject") from exc
        if user_id < 1:
            raise InvalidToken("token has no usable subject")
        return user_id


token_service = TokenService(
    config.SECRET_KEY,
    config.ALGORITHM,
    config.ACCESS_TOKEN_EXPIRE_MINUTES,
)


def get_token_service() -> TokenService:
    """FastAPI dependency returning the process-wide :class:`TokenService`."""
    return token_service
