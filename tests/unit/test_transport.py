from __future__ import annotations

import logging

import pytest

from ozone_client.core.errors import (
    OzoneConflictError,
    OzoneNotFoundError,
    OzoneServerError,
    OzoneTransportError,
)
from ozone_client.core.transport import SyncTransport
from tests.shared.payloads import make_error_payload
from tests.shared.transport import Response, Step, SyncSequencedClient, build_config


@pytest.mark.parametrize(
    ("steps", "expected_exception"),
    [
        ([Response(200, {"buckets": []})], None),
        ([Response(404, make_error_payload(404, "volumeNotFound"))], OzoneNotFoundError),
        ([Response(409, make_error_payload(409, "bucketAlreadyExists"))], OzoneConflictError),
        ([Response(500, make_error_payload(500, "serverError"))], OzoneServerError),
        ([RuntimeError("network down")], OzoneTransportError),
    ],
    ids=["success", "not-found", "conflict", "server-error", "network"],
)
def test_transport_sends_each_request_once(
    steps: list[Step],
    expected_exception: type[Exception] | None,
):
    client = SyncSequencedClient(steps)
    transport = SyncTransport(build_config(), client=client)

    if expected_exception is not None:
        with pytest.raises(expected_exception):
            transport.request("GET", "/vol", params={"info": "list-bucket"})
    else:
        payload = transport.request("GET", "/vol", params={"info": "list-bucket"})
        assert payload == {"buckets": []}

    assert len(client.calls) == 1


def test_transport_normalizes_endpoint_and_drops_none_params():
    client = SyncSequencedClient([Response(200, {})])
    transport = SyncTransport(build_config(), client=client)

    transport.request("GET", "/vol/bucket", params={"info": "list-key", "prefix": None, "max-keys": 2})

    call = client.calls[0]
    assert call.method == "GET"
    assert call.url == "vol/bucket"
    assert call.params == {"info": "list-key", "max-keys": "2"}
    assert call.body is None


def test_transport_sends_json_body():
    client = SyncSequencedClient([Response(201)])
    transport = SyncTransport(build_config(), client=client)

    payload = transport.request("POST", "/vol", body={"owner": "hadoop"})

    assert payload == {}
    assert client.calls[0].body == {"owner": "hadoop"}


def test_network_error_chains_original_exception():
    original = ConnectionError("refused")
    transport = SyncTransport(build_config(), client=SyncSequencedClient([original]))

    with pytest.raises(OzoneTransportError) as excinfo:
        transport.request("GET", "/")

    assert excinfo.value.__cause__ is original
    assert excinfo.value.cause == "network"


def test_transport_rejects_requests_after_close():
    client = SyncSequencedClient([])
    transport = SyncTransport(build_config(), client=client)
    transport.close()
    transport.close()

    with pytest.raises(OzoneTransportError, match="already closed"):
        transport.request("GET", "/")
    assert client.closed is False


def test_failed_request_is_logged(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.INFO, logger="ozone_client")
    client = SyncSequencedClient([Response(404, make_error_payload(404, "volumeNotFound"))])
    transport = SyncTransport(build_config(), client=client)

    with pytest.raises(OzoneNotFoundError):
        transport.request("GET", "/missing")

    assert any(
        record.levelno == logging.ERROR and "error_code=volumeNotFound" in record.getMessage()
        for record in caplog.records
    )


def test_transport_can_initialize_and_close_with_real_httpx_client():
    transport = SyncTransport(build_config())
    transport.close()
