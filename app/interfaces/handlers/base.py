"""Request/response plumbing shared by the function handlers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from app.domain.errors import MalformedRequestError
from app.interfaces.api.schemas import ErrorResponse

ModelT = TypeVar("ModelT", bound=BaseModel)

JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass(frozen=True)
class HandlerResponse:
    """Status code and JSON body produced by a handler invocation."""

    status_code: int
    body: str
    headers: dict[str, str] = field(default_factory=lambda: dict(JSON_HEADERS))

    def to_dict(self) -> dict[str, Any]:
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
        }


def json_response(status_code: int, payload: BaseModel) -> HandlerResponse:
    return HandlerResponse(status_code, payload.model_dump_json(by_alias=True))


def error_response(message: str, status_code: int = 400) -> HandlerResponse:
    return json_response(status_code, ErrorResponse(message=message))


def path_parameter(event: Mapping[str, Any], name: str) -> str:
    """Return the path parameter ``name`` or raise :class:`MalformedRequestError`."""

    parameters = event.get("pathParameters")
    if not isinstance(parameters, Mapping) or name not in parameters:
        raise MalformedRequestError(f"Missing path parameter '{name}'")
    value = parameters[name]
    if value is not None and not isinstance(value, str):
        raise MalformedRequestError(f"Path parameter '{name}' must be a string")
    return value


def parse_body(event: Mapping[str, Any], model: type[ModelT]) -> ModelT:
    """Decode the JSON request body into ``model``.

    Byte bodies must be valid UTF-8.
    """

    body = event.get("body")
    if body is None:
        raise MalformedRequestError("Request body is required")
    if isinstance(body, (bytes, bytearray)):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedRequestError("Request body is not valid UTF-8") from exc
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        raise MalformedRequestError("Request body is not valid JSON for this operation") from exc


__all__ = [
    "HandlerResponse",
    "error_response",
    "json_response",
    "parse_body",
    "path_parameter",
]
