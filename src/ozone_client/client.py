"""Public client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .client_shared import validate_client_config
from .config import OzoneClientConfig
from .core.errors import OzoneClientClosedError
from .core.transport import SyncTransport
from .storage.handles import ObjectStore
from .storage.protocol import RestProtocol


class OzoneClient:
    """Public Ozone client."""

    def __init__(
        self,
        *,
        config: OzoneClientConfig | None = None,
        transport: SyncTransport | None = None,
        protocol: RestProtocol | None = None,
    ) -> None:
        self._config = config or OzoneClientConfig()
        validate_client_config(self._config)

        self._transport = transport or SyncTransport(self._config)
        self._protocol = protocol or RestProtocol(
            self._transport,
            user_name=self._config.user_name,
        )
        self._closed = False
        self._object_store = ObjectStore(
            self._protocol,
            listing=self._config.listing,
            ensure_open=self._ensure_open,
        )

    @property
    def config(self) -> OzoneClientConfig:
        return self._config

    @property
    def object_store(self) -> ObjectStore:
        self._ensure_open()
        return self._object_store

    def _ensure_open(self) -> None:
        if self._closed:
            raise OzoneClientClosedError("OzoneClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "OzoneClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "OzoneClient",
]
