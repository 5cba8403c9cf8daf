"""Request body parsing for JSON and form-encoded payloads.

Write routes accept ``application/json`` as well as
``application/x-www-form-urlencoded`` (and ``multipart/form-data``)
bodies. Both are parsed into a plain mapping and checked against the
route's pydantic schema, so the validators see the same shape either way.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel
from pydantic import ValidationError as SchemaError

from errors import ValidationError

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

ModelT = TypeVar("ModelT", bound=BaseModel)


async def read_payload(request: Request) -> Any:
    """Return the request body as a mapping, or ``None`` when it is empty.

    Raises :class:`ValidationError` with "Invalid JSON" for an unparsable
    JSON body.
    """
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return dict(form)

    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise ValidationError("Invalid JSON") from exc


def body_of(model: Type[ModelT]) -> Callable[..., Any]:
    """Build a dependency that parses the body into ``model``.

    An empty body counts as ``{}``; schema violations (unknown fields,
    wrong JSON types) become a 400 "Invalid data".
    """

    async def dependency(request: Request) -> ModelT:
        payload = await read_payload(request)
        try:
            return model.model_validate({} if payload is None else payload)
        except SchemaError as exc:
            raise ValidationError("Invalid data") from exc

    dependency.__name__ = f"{model.__name__.lower()}_body"
    return dependency


def request_body(model: Type[BaseModel]) -> Dict[str, Any]:
    """``openapi_extra`` documenting ``model`` for JSON and form bodies."""
    schema = model.model_json_schema()
    return {
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": schema},
                "application/x-www-form-urlencoded": {"schema": schema},
            },
        }
    }
