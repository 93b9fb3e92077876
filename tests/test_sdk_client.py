from __future__ import annotations

import json

import httpx
import pytest

from patternkit.core.errors import ValidationError
from patternkit.sdk.client import PatternkitClient


def _transport(requests: list[httpx.Request]) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        path = request.url.path
        if path == "/healthz":
            return httpx.Response(200, json={"ok": True})
        if path == "/api/person" and request.method == "PATCH":
            body = json.loads(request.content)
            if not isinstance(body.get("age", 0), (int, float)):
                return httpx.Response(400, json={"detail": {"field": "age", "reason": "age must be numeric"}})
            return httpx.Response(200, json={"ok": True, "updated": list(body)})
        if path == "/api/person/height":
            return httpx.Response(404, json={"detail": "Unknown field: height"})
        if path == "/api/person/name":
            return httpx.Response(200, json={"field": "name", "value": "John Doe"})
        if path == "/api/counter/increment":
            return httpx.Response(200, json={"count": 1})
        if path == "/api/books" and request.method == "POST":
            return httpx.Response(500, text="boom")
        return httpx.Response(404, json={"detail": "Not Found"})

    return httpx.MockTransport(handler)


def test_client_round_trips_against_routes() -> None:
    requests: list[httpx.Request] = []
    client = PatternkitClient("http://pk.test/", transport=_transport(requests))

    assert client.base_url == "http://pk.test"
    assert client.health() is True
    assert client.get_person_field("name") == "John Doe"
    assert client.get_person_field("height") is None
    assert client.increment_counter() == 1
    assert client.update_person(age=43) == {"ok": True, "updated": ["age"]}

    patch = next(r for r in requests if r.method == "PATCH")
    assert json.loads(patch.content) == {"age": 43}


def test_client_maps_validation_errors() -> None:
    client = PatternkitClient("http://pk.test", transport=_transport([]))

    with pytest.raises(ValidationError) as exc:
        client.update_person({"age": "43"})
    assert exc.value.field == "age"
    assert str(exc.value) == "age must be numeric"

    with pytest.raises(ValueError):
        client.update_person()


def test_client_raises_runtime_error_on_server_failure() -> None:
    client = PatternkitClient("http://pk.test", transport=_transport([]))

    with pytest.raises(RuntimeError, match="500"):
        client.add_book("t", "a", "X1")
