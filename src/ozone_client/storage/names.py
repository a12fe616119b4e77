"""Volume and bucket name validation."""

from __future__ import annotations

import ipaddress

from ..core.errors import OzoneValidationError

MIN_RESOURCE_NAME_LENGTH = 3
MAX_RESOURCE_NAME_LENGTH = 63

_ALLOWED_CHARS = frozenset("abcdefghijklmnopqrstuvwxyz0123456789-.")
_FORBIDDEN_SEQUENCES = ("..", "-.", ".-")


def _looks_like_ipv4(name: str) -> bool:
    try:
        ipaddress.IPv4Address(name)
    except ValueError:
        return False
    return True


def verify_resource_name(name: str | None) -> str:
    """Return ``name`` unchanged when it is a legal volume/bucket name.

    Rules follow S3 bucket naming: 3-63 characters of lowercase letters,
    digits, ``-`` and ``.``; no leading or trailing ``-``/``.``; no ``..``,
    ``-.`` or ``.-``; not an IPv4 address.
    """

    if name is None:
        raise OzoneValidationError("resource name is required")
    if not isinstance(name, str):
        raise OzoneValidationError("resource name must be str")
    if len(name) < MIN_RESOURCE_NAME_LENGTH:
        raise OzoneValidationError(
            f"resource name must be at least {MIN_RESOURCE_NAME_LENGTH} characters"
        )
    if len(name) > MAX_RESOURCE_NAME_LENGTH:
        raise OzoneValidationError(
            f"resource name must be at most {MAX_RESOURCE_NAME_LENGTH} characters"
        )
    if _looks_like_ipv4(name):
        raise OzoneValidationError("resource name cannot be an IPv4 address")
    if name[0] in "-." or name[-1] in "-.":
        raise OzoneValidationError("resource name cannot start or end with '-' or '.'")
    if any(ch not in _ALLOWED_CHARS for ch in name):
        raise OzoneValidationError("resource name has an unsupported character")
    for sequence in _FORBIDDEN_SEQUENCES:
        if sequence in name:
            raise OzoneValidationError(f"resource name cannot contain {sequence!r}")
    return name


__all__ = [
    "MIN_RESOURCE_NAME_LENGTH",
    "MAX_RESOURCE_NAME_LENGTH",
    "verify_resource_name",
]
