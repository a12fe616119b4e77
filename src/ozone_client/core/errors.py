"""Error types and status mapping."""

from __future__ import annotations

from collections.abc import Mapping


def _to_int(value: object) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text == "":
            return None
        if text.isdigit():
            return int(text)
    return None


def extract_http_code(payload: Mapping[str, object] | None) -> int | None:
    if not isinstance(payload, Mapping):
        return None
    return _to_int(payload.get("httpCode"))


def extract_error_code(payload: Mapping[str, object] | None) -> str | None:
    if not isinstance(payload, Mapping):
        return None
    value = payload.get("shortMessage")
    return str(value) if value is not None else None


def extract_message(payload: Mapping[str, object] | None) -> str | None:
    if not isinstance(payload, Mapping):
        return None
    value = payload.get("message")
    return str(value) if value is not None else None


class OzoneApiError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        error_code: str | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.error_code = error_code
        self.cause = cause


class OzoneTransportError(OzoneApiError):
    """Network/transport-level failure."""


class OzoneClientClosedError(OzoneApiError):
    """Raised when client is used after close."""


class OzoneValidationError(OzoneApiError):
    """Invalid input / request rejected."""


class OzonePermissionError(OzoneApiError):
    """Caller is not allowed to perform the operation."""


class OzoneNotFoundError(OzoneApiError):
    """Volume, bucket or key does not exist."""


class OzoneConflictError(OzoneApiError):
    """Resource already exists or is not empty."""


class OzoneServerError(OzoneApiError):
    """Server-side unexpected error."""


class OzoneProtocolError(OzoneApiError):
    """Response shape or HTTP/body status inconsistency."""


class OzoneIterationError(OzoneApiError):
    """A page fetch failed while a listing iterator was being consumed.

    Raised from iterator construction, ``has_next`` and ``__next__`` so that
    callers can tell a broken listing apart from the normal end of the
    sequence (``StopIteration``). The failed fetch's exception is kept in
    ``source`` and chained as ``__cause__``.

    It stays under ``OzoneApiError`` so one handler can catch everything this
    package raises. It never subclasses the source error's class: catch
    ``OzoneIterationError`` first to tell a listing failure apart from a
    failed single call such as ``get_volume``.
    """

    def __init__(
        self,
        message: str,
        *,
        source: BaseException,
        parent: object = None,
        start_after: str | None = None,
    ) -> None:
        super().__init__(
            message,
            http_status=getattr(source, "http_status", None),
            error_code=getattr(source, "error_code", None),
            cause=getattr(source, "cause", None) or "fetch",
        )
        self.source = source
        self.parent = parent
        self.start_after = start_after


_NOT_FOUND_CODES = frozenset(
    {
        "volumeNotFound",
        "bucketNotFound",
        "keyNotFound",
        "userNotFound",
    }
)
_CONFLICT_CODES = frozenset(
    {
        "volumeAlreadyExists",
        "bucketAlreadyExists",
        "volumeNotEmpty",
        "bucketNotEmpty",
    }
)


def classify_api_error(
    payload: Mapping[str, object] | None,
    *,
    http_status: int | None,
) -> OzoneApiError | None:
    """Map HTTP status and body error code to domain exceptions."""

    body_status = extract_http_code(payload)
    error_code = extract_error_code(payload)
    message = extract_message(payload) or "Ozone request failed"

    if http_status is None:
        return OzoneProtocolError("Missing HTTP status", error_code=error_code)

    if 200 <= http_status < 300:
        # A success response must not carry an error document.
        if body_status is not None and body_status >= 400:
            return OzoneProtocolError(
                "HTTP status and body httpCode are inconsistent",
                http_status=http_status,
                error_code=error_code,
            )
        return None

    # Body error code takes precedence when present.
    if error_code in _NOT_FOUND_CODES:
        return OzoneNotFoundError(message, http_status=http_status, error_code=error_code)
    if error_code in _CONFLICT_CODES:
        return OzoneConflictError(message, http_status=http_status, error_code=error_code)

    if http_status == 404:
        return OzoneNotFoundError(message, http_status=http_status, error_code=error_code)
    if http_status == 409:
        return OzoneConflictError(message, http_status=http_status, error_code=error_code)
    if http_status in (401, 403):
        return OzonePermissionError(message, http_status=http_status, error_code=error_code)
    if http_status >= 500:
        return OzoneServerError(
            message,
            http_status=http_status,
            error_code=error_code,
            cause="server",
        )
    if http_status >= 400:
        return OzoneValidationError(message, http_status=http_status, error_code=error_code)

    return OzoneProtocolError(
        "Unexpected HTTP status in Ozone response",
        http_status=http_status,
        error_code=error_code,
    )


__all__ = [
    "OzoneApiError",
    "OzoneTransportError",
    "OzoneClientClosedError",
    "OzoneValidationError",
    "OzonePermissionError",
    "OzoneNotFoundError",
    "OzoneConflictError",
    "OzoneServerError",
    "OzoneProtocolError",
    "OzoneIterationError",
    "extract_http_code",
    "extract_error_code",
    "extract_message",
    "classify_api_error",
]
