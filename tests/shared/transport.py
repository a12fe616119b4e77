from __future__ import annotations

import json
from collections.abc import Mapping, Sequence

from ozone_client.config import ListingConfig, OzoneClientConfig


class Response:
    def __init__(self, status_code: int, payload: object = None):
        self.status_code = status_code
        self._payload = payload

    @property
    def content(self) -> bytes:
        if self._payload is None:
            return b""
        if isinstance(self._payload, Exception):
            return b"<html>oops</html>"
        return json.dumps(self._payload).encode("utf-8")

    def json(self) -> object:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


Step = Response | Exception


class Call:
    def __init__(
        self,
        method: str,
        url: str,
        params: Mapping[str, str] | None,
        body: object,
    ):
        self.method = method
        self.url = url
        self.params = dict(params or {})
        self.body = body


class SyncSequencedClient:
    def __init__(self, steps: Sequence[Step]):
        self.steps = list(steps)
        self.calls: list[Call] = []
        self.closed = False

    def request(self, method: str, url: str, *, params=None, json=None):
        self.calls.append(Call(method, url, params, json))
        step = self.steps.pop(0)
        if isinstance(step, Exception):
            raise step
        return step

    def close(self):
        self.closed = True


class AsyncSequencedClient:
    def __init__(self, steps: Sequence[Step]):
        self.steps = list(steps)
        self.calls: list[Call] = []
        self.closed = False

    async def request(self, method: str, url: str, *, params=None, json=None):
        self.calls.append(Call(method, url, params, json))
        step = self.steps.pop(0)
        if isinstance(step, Exception):
            raise step
        return step

    async def aclose(self):
        self.closed = True


def build_config(*, list_cache_size: int = 2, user_name: str = "hadoop") -> OzoneClientConfig:
    cfg = OzoneClientConfig(
        user_name=user_name,
        listing=ListingConfig(list_cache_size=list_cache_size),
    )
    cfg.validate()
    return cfg
