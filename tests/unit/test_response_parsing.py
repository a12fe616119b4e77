from __future__ import annotations

import json

import pytest

from ozone_client.core.errors import (
    OzoneNotFoundError,
    OzoneProtocolError,
    OzoneServerError,
)
from ozone_client.core.response_parsing import parse_json_payload
from tests.shared.transport import Response


def test_parse_json_payload_returns_object():
    payload = parse_json_payload(Response(200, {"buckets": []}), http_status=200)
    assert payload == {"buckets": []}


@pytest.mark.parametrize("status", [201, 204])
def test_empty_body_decodes_to_empty_object(status: int):
    assert parse_json_payload(Response(status), http_status=status) == {}


@pytest.mark.parametrize(
    ("http_status", "expected"),
    [
        (200, OzoneProtocolError),
        (404, OzoneNotFoundError),
        (502, OzoneServerError),
    ],
    ids=["success-protocol", "not-found", "server"],
)
def test_invalid_json_maps_by_http_status(http_status: int, expected: type[Exception]):
    response = Response(http_status, json.JSONDecodeError("bad", "x", 0))
    with pytest.raises(expected):
        parse_json_payload(response, http_status=http_status)


def test_parse_json_payload_rejects_non_object_root():
    with pytest.raises(OzoneProtocolError, match="root must be an object"):
        parse_json_payload(Response(200, ["a", "b"]), http_status=200)
