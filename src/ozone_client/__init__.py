"""Public package exports for Ozone client."""

from .async_client import AsyncOzoneClient
from .client import OzoneClient
from .config import OzoneClientConfig
from .core.errors import OzoneApiError, OzoneIterationError

__all__ = [
    "OzoneClient",
    "AsyncOzoneClient",
    "OzoneClientConfig",
    "OzoneApiError",
    "OzoneIterationError",
]
