"""Shared response parsing helpers for sync/async transports."""

from __future__ import annotations

from typing import Protocol

from .errors import (
    OzoneApiError,
    OzoneProtocolError,
    OzoneServerError,
    OzoneValidationError,
    classify_api_error,
)


class JsonPayloadResponse(Protocol):
    status_code: int

    def json(self) -> object: ...


def parse_json_payload(
    response: JsonPayloadResponse,
    *,
    http_status: int | None,
) -> dict[str, object]:
    """Parse response JSON payload and map parse failures to domain errors.

    A success response without a body decodes to an empty object.
    """

    if http_status == 204 or _has_empty_body(response):
        return {}

    try:
        payload = response.json()
    except Exception as exc:
        raise _json_parse_error(http_status=http_status) from exc

    if not isinstance(payload, dict):
        raise OzoneProtocolError(
            "response JSON root must be an object",
            http_status=http_status,
        )
    if any(not isinstance(key, str) for key in payload):
        raise OzoneProtocolError(
            "response JSON object keys must be strings",
            http_status=http_status,
        )
    return payload


def classify_response(
    payload: dict[str, object],
    *,
    http_status: int | None,
) -> OzoneApiError | None:
    return classify_api_error(payload, http_status=http_status)


def _has_empty_body(response: object) -> bool:
    content = getattr(response, "content", None)
    return isinstance(content, bytes | bytearray) and len(content.strip()) == 0


def _json_parse_error(*, http_status: int | None) -> OzoneApiError:
    message = "response body is not valid JSON"
    if http_status is not None and http_status >= 500:
        return OzoneServerError(
            message,
            http_status=http_status,
            cause="server",
        )
    if http_status is not None and http_status >= 400:
        mapped = classify_api_error(None, http_status=http_status)
        if mapped is not None:
            return mapped
        return OzoneValidationError(message, http_status=http_status)
    return OzoneProtocolError(
        message,
        http_status=http_status,
    )


__all__ = [
    "parse_json_payload",
    "classify_response",
]
