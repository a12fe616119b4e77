"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from ..config import OzoneClientConfig


def build_default_headers(config: OzoneClientConfig) -> Mapping[str, str]:
    return {
        "Accept": "application/json",
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
        "x-ozone-user": config.user_name,
    }


def build_default_timeout(config: OzoneClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def normalize_base_url(config: OzoneClientConfig) -> str:
    return config.base_url.rstrip("/") + "/"


def normalize_endpoint(endpoint: str) -> str:
    return endpoint.lstrip("/")


def drop_empty_params(params: Mapping[str, object] | None) -> dict[str, str]:
    if not params:
        return {}
    return {key: str(value) for key, value in params.items() if value is not None}


__all__ = [
    "build_default_headers",
    "build_default_timeout",
    "normalize_base_url",
    "normalize_endpoint",
    "drop_empty_params",
]
