from __future__ import annotations

import pytest

from ozone_client.core.errors import OzoneValidationError
from ozone_client.storage.names import verify_resource_name


@pytest.mark.parametrize("name", ["abc", "vol-1", "my.bucket", "a" * 63, "bucket-2026.logs"])
def test_accepts_valid_names(name: str):
    assert verify_resource_name(name) == name


@pytest.mark.parametrize(
    "name",
    [
        None,
        "ab",
        "a" * 64,
        "Upper",
        "under_score",
        "-leading",
        "trailing.",
        "double..dot",
        "dash-.dot",
        "dot.-dash",
        "192.168.1.10",
        "space here",
    ],
)
def test_rejects_invalid_names(name):
    with pytest.raises(OzoneValidationError):
        verify_resource_name(name)
