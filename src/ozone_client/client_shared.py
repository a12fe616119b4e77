"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from .config import OzoneClientConfig
from .core.errors import OzoneValidationError


def validate_client_config(config: OzoneClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise OzoneValidationError(str(exc)) from exc


__all__ = [
    "validate_client_config",
]
