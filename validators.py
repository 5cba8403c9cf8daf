"""Payload validation for users, movies and login requests.

Validation is presence-based and side-effect free: values are neither
trimmed nor coerced. A validator returns the accepted fields as a new
``dict`` or ``None`` when the payload is invalid.

- ``Mode.CREATE`` requires every field of the entity (logical AND).
- ``Mode.UPDATE`` requires at least one recognized field (logical OR).
- ``Mode.LOGIN`` requires ``email`` and ``password``.

A field counts as present when its value is truthy.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence

USER_FIELDS = ("email", "password", "gender", "role")
MOVIE_FIELDS = ("title", "genres", "year")
LOGIN_FIELDS = ("email", "password")


class Mode(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    LOGIN = "login"


def _pick(payload: Mapping[str, Any], fields: Sequence[str]) -> Dict[str, Any]:
    return {k: payload[k] for k in fields if payload.get(k) is not None}


def validate_full(
    payload: Any, fields: Sequence[str]
) -> Optional[Dict[str, Any]]:
    """Accept ``payload`` only if every name in ``fields`` has a truthy value."""
    if not isinstance(payload, Mapping):
        return None
    if all(payload.get(k) for k in fields):
        return _pick(payload, fields)
    return None


def validate_partial(
    payload: Any, fields: Sequence[str]
) -> Optional[Dict[str, Any]]:
    """Accept ``payload`` if any name in ``fields`` has a truthy value."""
    if not isinstance(payload, Mapping):
        return None
    if any(payload.get(k) for k in fields):
        return _pick(payload, fields)
    return None


def validate(
    mode: Mode, payload: Any, fields: Sequence[str]
) -> Optional[Dict[str, Any]]:
    if mode is Mode.UPDATE:
        return validate_partial(payload, fields)
    if mode is Mode.LOGIN:
        return validate_full(payload, LOGIN_FIELDS)
    return validate_full(payload, fields)


def validate_user(mode: Mode, payload: Any) -> Optional[Dict[str, Any]]:
    return validate(mode, payload, USER_FIELDS)


def validate_movie(mode: Mode, payload: Any) -> Optional[Dict[str, Any]]:
    if mode is Mode.LOGIN:
        raise ValueError("movies have no login mode")
    return validate(mode, payload, MOVIE_FIELDS)
