from __future__ import annotations

from collections.abc import Mapping

from tests.shared.payloads import (
    make_bucket_payload,
    make_error_payload,
    make_key_payload,
    make_volume_payload,
)
from tests.shared.transport import Call, Response


class InMemoryGatewayClient:
    """Minimal REST gateway double with sorted, prefix-filtered paging."""

    def __init__(self):
        self.volumes: dict[str, dict[str, object]] = {}
        self.buckets: dict[str, dict[str, dict[str, object]]] = {}
        self.keys: dict[tuple[str, str], dict[str, dict[str, object]]] = {}
        self.calls: list[Call] = []
        self.closed = False

    def add_volume(self, name: str, *, owner: str = "hadoop") -> None:
        self.volumes[name] = make_volume_payload(name, owner=owner)
        self.buckets.setdefault(name, {})

    def add_bucket(self, volume_name: str, name: str) -> None:
        self.buckets.setdefault(volume_name, {})[name] = make_bucket_payload(volume_name, name)
        self.keys.setdefault((volume_name, name), {})

    def add_key(self, volume_name: str, bucket_name: str, name: str) -> None:
        self.keys.setdefault((volume_name, bucket_name), {})[name] = make_key_payload(
            volume_name,
            bucket_name,
            name,
        )

    def list_calls(self, info: str) -> list[Call]:
        return [call for call in self.calls if call.params.get("info") == info]

    def request(self, method: str, url: str, *, params=None, json=None):
        self.calls.append(Call(method, url, params, json))
        return self._dispatch(method, url, dict(params or {}), json)

    def close(self):
        self.closed = True

    def _dispatch(self, method: str, url: str, params: dict[str, str], body: object) -> Response:
        segments = [segment for segment in url.split("/") if segment]
        if not segments:
            return self._page(
                "volumes",
                {
                    name: payload
                    for name, payload in self.volumes.items()
                    if payload["owner"] == params.get("user")
                },
                params,
            )
        volume_name = segments[0]
        if len(segments) == 1:
            return self._volume(method, volume_name, params, body)
        return self._bucket(method, volume_name, segments[1], params, body)

    def _volume(self, method: str, name: str, params: dict[str, str], body: object) -> Response:
        if method == "POST":
            if name in self.volumes:
                return Response(409, make_error_payload(409, "volumeAlreadyExists"))
            assert isinstance(body, Mapping)
            self.add_volume(name, owner=str(body["owner"]))
            return Response(201)
        if name not in self.volumes:
            return Response(404, make_error_payload(404, "volumeNotFound"))
        if method == "DELETE":
            if self.buckets.get(name):
                return Response(409, make_error_payload(409, "volumeNotEmpty"))
            del self.volumes[name]
            return Response(204)
        if method == "PUT":
            assert isinstance(body, Mapping)
            self.volumes[name].update(body)
            return Response(200, {})
        if params.get("info") == "list-bucket":
            return self._page("buckets", self.buckets.get(name, {}), params)
        return Response(200, self.volumes[name])

    def _bucket(
        self,
        method: str,
        volume_name: str,
        name: str,
        params: dict[str, str],
        body: object,
    ) -> Response:
        if volume_name not in self.volumes:
            return Response(404, make_error_payload(404, "volumeNotFound"))
        buckets = self.buckets.setdefault(volume_name, {})
        if method == "POST":
            if name in buckets:
                return Response(409, make_error_payload(409, "bucketAlreadyExists"))
            self.add_bucket(volume_name, name)
            return Response(201)
        if name not in buckets:
            return Response(404, make_error_payload(404, "bucketNotFound"))
        if method == "DELETE":
            del buckets[name]
            return Response(204)
        if params.get("info") == "list-key":
            return self._page("keys", self.keys.get((volume_name, name), {}), params)
        return Response(200, buckets[name])

    @staticmethod
    def _page(
        field: str,
        items: Mapping[str, dict[str, object]],
        params: dict[str, str],
    ) -> Response:
        prefix = params.get("prefix")
        prev_key = params.get("prev-key")
        limit = int(params["max-keys"])
        names = [
            name
            for name in sorted(items)
            if (prefix is None or name.startswith(prefix))
            and (prev_key is None or name > prev_key)
        ]
        return Response(200, {field: [items[name] for name in names[:limit]]})


class AsyncInMemoryGatewayClient(InMemoryGatewayClient):
    async def request(self, method: str, url: str, *, params=None, json=None):
        return InMemoryGatewayClient.request(self, method, url, params=params, json=json)

    async def aclose(self):
        self.closed = True
