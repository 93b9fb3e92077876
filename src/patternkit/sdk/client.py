from __future__ import annotations

from typing import Any

import httpx

from ..core.errors import ValidationError


class PatternkitClient:
    """HTTP client for a running patternkit playground."""

    def __init__(self, base_url: str = "http://127.0.0.1:8000", *, transport: httpx.BaseTransport | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    def _client(self, timeout_s: float) -> httpx.Client:
        return httpx.Client(base_url=self.base_url, timeout=timeout_s, transport=self._transport)

    @staticmethod
    def _check(res: httpx.Response, action: str) -> Any:
        if res.status_code >= 400:
            raise RuntimeError(f"Failed to {action}: {res.status_code} {res.text}")
        return res.json()

    def health(self, *, timeout_s: float = 10.0) -> bool:
        with self._client(timeout_s) as client:
            res = client.get("/healthz")
            return bool(self._check(res, "check health").get("ok"))

    def events(self, *, since: int = 0, timeout_s: float = 10.0) -> dict[str, Any]:
        with self._client(timeout_s) as client:
            res = client.get("/api/events", params={"since": int(since)})
            return self._check(res, "get events")

    def get_settings(self, *, timeout_s: float = 10.0) -> dict[str, Any]:
        with self._client(timeout_s) as client:
            res = client.get("/api/settings")
            return self._check(res, "get settings")

    def update_settings(
        self,
        *,
        event_log_limit: int | None = None,
        log_level: str | None = None,
        timeout_s: float = 10.0,
    ) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if event_log_limit is not None:
            body["eventLogLimit"] = int(event_log_limit)
        if log_level is not None:
            body["logLevel"] = str(log_level)
        with self._client(timeout_s) as client:
            res = client.patch("/api/settings", json=body)
            return self._check(res, "update settings")

    def get_person(self, *, timeout_s: float = 10.0) -> dict[str, Any]:
        with self._client(timeout_s) as client:
            res = client.get("/api/person")
            return self._check(res, "get person")

    def get_person_field(self, field: str, *, timeout_s: float = 10.0) -> Any:
        """Return the field value, or None if the record has no such field."""

        with self._client(timeout_s) as client:
            res = client.get(f"/api/person/{field}")
            if res.status_code == 404:
                return None
            return self._check(res, f"get person field {field!r}").get("value")

    def update_person(self, values: dict[str, Any] | None = None, *, timeout_s: float = 10.0, **fields: Any) -> dict[str, Any]:
        body = {**(values or {}), **fields}
        if not body:
            raise ValueError("No fields to update")
        with self._client(timeout_s) as client:
            res = client.patch("/api/person", json=body)
            if res.status_code == 400:
                detail = res.json().get("detail")
                if isinstance(detail, dict) and "field" in detail:
                    raise ValidationError(str(detail["field"]), str(detail.get("reason", "")))
            return self._check(res, "update person")

    def get_books(self, *, timeout_s: float = 10.0) -> dict[str, Any]:
        with self._client(timeout_s) as client:
            res = client.get("/api/books")
            return self._check(res, "get books")

    def add_book(
        self,
        title: str,
        author: str,
        isbn: str,
        *,
        availability: bool = True,
        sales: int = 0,
        timeout_s: float = 10.0,
    ) -> dict[str, Any]:
        body = {
            "title": str(title),
            "author": str(author),
            "isbn": str(isbn),
            "availability": bool(availability),
            "sales": int(sales),
        }
        with self._client(timeout_s) as client:
            res = client.post("/api/books", json=body)
            return self._check(res, "add book")

    def get_counter(self, *, timeout_s: float = 10.0) -> int:
        with self._client(timeout_s) as client:
            res = client.get("/api/counter")
            return int(self._check(res, "get counter")["count"])

    def increment_counter(self, *, timeout_s: float = 10.0) -> int:
        with self._client(timeout_s) as client:
            res = client.post("/api/counter/increment")
            return int(self._check(res, "increment counter")["count"])

    def decrement_counter(self, *, timeout_s: float = 10.0) -> int:
        with self._client(timeout_s) as client:
            res = client.post("/api/counter/decrement")
            return int(self._check(res, "decrement counter")["count"])
