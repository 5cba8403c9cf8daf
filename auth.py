"""Bearer-token authentication dependency.

Protected routes depend on :func:`get_current_user_id`. It reads the
``Authorization: Bearer <token>`` header, verifies the token and stores the
resolved user id on ``request.state.user_id``. Verification failures are
reported uniformly as "Invalid token" whatever the underlying reason.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from errors import AuthError
from security import InvalidToken, TokenService, get_token_service

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(
    auto_error=False, bearerFormat="JWT", scheme_name="bearerAuth"
)


async def get_current_user_id(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> int:
    """Authenticate the request and return the caller's user id.

    Raises :class:`AuthError` (401) when the header is missing or the
    token does not verify.
    """
    if credentials is None or not credentials.credentials:
        raise AuthError("You must log in")

    try:
        claims = tokens.verify(credentials.credentials)
        user_id = tokens.subject_of(claims)
    except InvalidToken as exc:
        logger.info("Rejected token on %s: %s", request.url.path, exc)
        raise AuthError("Invalid token") from exc

    request.state.user_id = user_id
    return user_id
