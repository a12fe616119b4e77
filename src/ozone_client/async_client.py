"""Public async client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .client_shared import validate_client_config
from .config import OzoneClientConfig
from .core.async_transport import AsyncTransport
from .core.errors import OzoneClientClosedError
from .storage.async_handles import AsyncObjectStore
from .storage.async_protocol import AsyncRestProtocol


class AsyncOzoneClient:
    """Public async Ozone client."""

    def __init__(
        self,
        *,
        config: OzoneClientConfig | None = None,
        transport: AsyncTransport | None = None,
        protocol: AsyncRestProtocol | None = None,
    ) -> None:
        self._config = config or OzoneClientConfig()
        validate_client_config(self._config)

        self._transport = transport or AsyncTransport(self._config)
        self._protocol = protocol or AsyncRestProtocol(
            self._transport,
            user_name=self._config.user_name,
        )
        self._closed = False
        self._object_store = AsyncObjectStore(
            self._protocol,
            listing=self._config.listing,
            ensure_open=self._ensure_open,
        )

    @property
    def config(self) -> OzoneClientConfig:
        return self._config

    @property
    def object_store(self) -> AsyncObjectStore:
        self._ensure_open()
        return self._object_store

    def _ensure_open(self) -> None:
        if self._closed:
            raise OzoneClientClosedError("AsyncOzoneClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncOzoneClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncOzoneClient",
]
