"""Async HTTP transport with status evaluation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

import httpx

from ..config import OzoneClientConfig
from .errors import OzoneApiError, OzoneTransportError
from .response_parsing import JsonPayloadResponse, classify_response, parse_json_payload
from .transport_shared import (
    build_default_headers,
    build_default_timeout,
    drop_empty_params,
    normalize_base_url,
    normalize_endpoint,
)

logger = logging.getLogger("ozone_client")


class AsyncTransportClient(Protocol):
    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, str] | None = None,
        json: object = None,
    ) -> JsonPayloadResponse: ...

    async def aclose(self) -> None: ...


class AsyncTransport:
    """Asynchronous transport for the Ozone REST gateway."""

    def __init__(
        self,
        config: OzoneClientConfig,
        *,
        client: AsyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=normalize_base_url(config),
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "aclose"):
            await self._client.aclose()

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Mapping[str, object] | None = None,
        body: Mapping[str, object] | None = None,
    ) -> dict[str, object]:
        if self._closed:
            raise OzoneTransportError("transport is already closed")

        normalized_endpoint = normalize_endpoint(endpoint)
        logger.debug("request start method=%s endpoint=%s", method, normalized_endpoint)

        try:
            response = await self._client.request(
                method,
                normalized_endpoint,
                params=drop_empty_params(params),
                json=dict(body) if body is not None else None,
            )
        except Exception as exc:
            logger.error(
                "request network error method=%s endpoint=%s error=%s",
                method,
                normalized_endpoint,
                exc.__class__.__name__,
            )
            raise OzoneTransportError(
                "network/transport error",
                cause="network",
            ) from exc

        http_status = getattr(response, "status_code", None)
        logger.debug(
            "response received method=%s endpoint=%s http_status=%s",
            method,
            normalized_endpoint,
            http_status,
        )
        try:
            payload = parse_json_payload(response, http_status=http_status)
        except OzoneApiError:
            logger.error(
                "response parse error method=%s endpoint=%s http_status=%s",
                method,
                normalized_endpoint,
                http_status,
            )
            raise
        mapped_error = classify_response(payload, http_status=http_status)
        if mapped_error is None:
            logger.info(
                "request success method=%s endpoint=%s",
                method,
                normalized_endpoint,
            )
            return payload

        logger.error(
            "request failed method=%s endpoint=%s http_status=%s error_code=%s",
            method,
            normalized_endpoint,
            http_status,
            mapped_error.error_code,
        )
        raise mapped_error


__all__ = [
    "AsyncTransport",
]
