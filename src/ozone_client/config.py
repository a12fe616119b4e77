"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_LIST_CACHE_SIZE = 1000


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class ListingConfig:
    """Listing-related settings.

    ``list_cache_size`` is the page capacity of every listing iterator. It is
    read once when a volume, bucket or object store handle is built.
    """

    list_cache_size: int = DEFAULT_LIST_CACHE_SIZE

    def validate(self) -> None:
        if isinstance(self.list_cache_size, bool) or not isinstance(self.list_cache_size, int):
            raise ValueError("listing.list_cache_size must be int")
        if self.list_cache_size < 1:
            raise ValueError("listing.list_cache_size must be >= 1")


@dataclass(slots=True, frozen=True)
class OzoneClientConfig:
    """Runtime configuration for Ozone client."""

    base_url: str = "http://localhost:9880"
    user_name: str = "ozone"
    user_agent: str = "ozone-client/0.1.0"

    transport: TransportConfig = field(default_factory=TransportConfig)
    listing: ListingConfig = field(default_factory=ListingConfig)

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if not self.user_name or not self.user_name.strip():
            raise ValueError("user_name must not be empty")
        self.transport.validate()
        self.listing.validate()


__all__ = [
    "DEFAULT_LIST_CACHE_SIZE",
    "TransportConfig",
    "ListingConfig",
    "OzoneClientConfig",
]
