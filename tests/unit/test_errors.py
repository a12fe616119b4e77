from __future__ import annotations

import pytest

from ozone_client.core.errors import (
    OzoneApiError,
    OzoneConflictError,
    OzoneIterationError,
    OzoneNotFoundError,
    OzonePermissionError,
    OzoneProtocolError,
    OzoneServerError,
    OzoneValidationError,
    classify_api_error,
)
from tests.shared.payloads import make_error_payload


def test_success_status_maps_to_none():
    assert classify_api_error({"buckets": []}, http_status=200) is None
    assert classify_api_error({}, http_status=204) is None


@pytest.mark.parametrize(
    ("payload", "http_status", "expected"),
    [
        (make_error_payload(404, "volumeNotFound"), 404, OzoneNotFoundError),
        (make_error_payload(404, "bucketNotFound"), 404, OzoneNotFoundError),
        (make_error_payload(409, "bucketAlreadyExists"), 409, OzoneConflictError),
        (make_error_payload(409, "volumeNotEmpty"), 409, OzoneConflictError),
        (make_error_payload(403, "accessDenied"), 403, OzonePermissionError),
        (make_error_payload(401, "unauthorized"), 401, OzonePermissionError),
        (make_error_payload(400, "invalidBucketName"), 400, OzoneValidationError),
        (make_error_payload(500, "serverError"), 500, OzoneServerError),
        (None, 503, OzoneServerError),
        (None, 404, OzoneNotFoundError),
    ],
    ids=[
        "volume-not-found",
        "bucket-not-found",
        "bucket-exists",
        "volume-not-empty",
        "forbidden",
        "unauthorized",
        "bad-request",
        "server-error",
        "unavailable-without-body",
        "not-found-without-body",
    ],
)
def test_classify_error_status(payload, http_status: int, expected: type[OzoneApiError]):
    err = classify_api_error(payload, http_status=http_status)
    assert isinstance(err, expected)
    assert err.http_status == http_status


def test_body_error_code_takes_precedence_over_http_status():
    err = classify_api_error(make_error_payload(400, "volumeNotFound"), http_status=400)
    assert isinstance(err, OzoneNotFoundError)
    assert err.error_code == "volumeNotFound"


def test_error_body_on_success_status_is_protocol_error():
    err = classify_api_error(make_error_payload(500, "serverError"), http_status=200)
    assert isinstance(err, OzoneProtocolError)


def test_missing_http_status_is_protocol_error():
    assert isinstance(classify_api_error({}, http_status=None), OzoneProtocolError)


def test_error_message_comes_from_body():
    err = classify_api_error(make_error_payload(404, "keyNotFound", "key k1 not found"), http_status=404)
    assert str(err) == "key k1 not found"


def test_iteration_error_copies_source_attributes():
    source = OzonePermissionError("denied", http_status=403, error_code="accessDenied")
    err = OzoneIterationError("listing page fetch failed", source=source, parent="vol")

    assert err.source is source
    assert err.http_status == 403
    assert err.error_code == "accessDenied"
    assert err.cause == "fetch"
    assert err.parent == "vol"
    assert isinstance(err, OzoneApiError)


def test_iteration_error_accepts_foreign_exceptions():
    err = OzoneIterationError("listing page fetch failed", source=RuntimeError("boom"))
    assert err.http_status is None
    assert err.error_code is None


def test_iteration_error_is_a_package_error_but_not_the_source_kind():
    source = OzoneNotFoundError("gone", http_status=404, error_code="volumeNotFound")
    err = OzoneIterationError("listing page fetch failed", source=source, parent="vol")

    assert isinstance(err, OzoneApiError)
    assert not isinstance(err, OzoneNotFoundError)
    with pytest.raises(OzoneIterationError):
        try:
            raise err
        except OzoneNotFoundError:
            pytest.fail("iteration failure must not be handled as a single-call error")
