from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException

from ..core.errors import ValidationError
from ..patterns.books import BookCatalog
from ..runtime.state import AppState


def _books_summary(catalog: BookCatalog) -> dict[str, Any]:
    books: list[dict[str, Any]] = []
    for book in catalog.books():
        copies = catalog.copies_of(book.isbn)
        books.append(
            {
                "isbn": book.isbn,
                "title": book.title,
                "author": book.author,
                "copies": len(copies),
                "available": sum(1 for c in copies if c.availability),
                "sales": sum(int(c.sales) for c in copies),
            }
        )
    return {
        "copies": catalog.total_copies(),
        "uniqueBooks": catalog.unique_books(),
        "books": books,
    }


def _required_str(body: dict, key: str) -> str:
    value = str(body.get(key) or "").strip()
    if not value:
        raise HTTPException(status_code=400, detail=f"{key} is required")
    return value


def create_api_app(state: AppState) -> FastAPI:
    app = FastAPI(title="patternkit", version="0.1.0")

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    @app.get("/api/events")
    def events(since: int = 0) -> dict:
        return {
            "globalRevision": state.global_revision(),
            "events": state.event_log(since=since),
        }

    @app.get("/api/settings")
    def get_settings() -> dict:
        s = state.settings.get()
        return {"eventLogLimit": s.event_log_limit, "logLevel": s.log_level}

    @app.patch("/api/settings")
    def update_settings(body: dict) -> dict:
        # Supported:
        # - eventLogLimit: int > 0
        # - logLevel: 'debug' | 'info' | 'warning' | 'error'
        if "eventLogLimit" not in body and "logLevel" not in body:
            raise HTTPException(status_code=400, detail="Missing field: eventLogLimit or logLevel")
        try:
            s = state.update_settings(
                event_log_limit=body.get("eventLogLimit"),
                log_level=body.get("logLevel"),
            )
        except (TypeError, ValueError) as e:
            raise HTTPException(status_code=400, detail=str(e))
        return {"ok": True, "eventLogLimit": s.event_log_limit, "logLevel": s.log_level}

    @app.get("/api/books")
    def list_books() -> dict:
        return _books_summary(state.books)

    @app.post("/api/books")
    def add_book(body: dict) -> dict:
        title = _required_str(body, "title")
        author = _required_str(body, "author")
        isbn = _required_str(body, "isbn")
        availability = body.get("availability", True)
        if not isinstance(availability, bool):
            raise HTTPException(status_code=400, detail="availability must be a boolean")
        try:
            copy = state.add_book(
                title,
                author,
                isbn,
                availability=availability,
                sales=body.get("sales", 0),
            )
        except (TypeError, ValueError) as e:
            raise HTTPException(status_code=400, detail=str(e))
        return {
            "ok": True,
            "isbn": copy.isbn,
            "title": copy.book.title,
            "copies": state.books.total_copies(),
            "uniqueBooks": state.books.unique_books(),
        }

    @app.get("/api/person")
    def get_person() -> dict[str, Any]:
        return state.person.snapshot()

    @app.get("/api/person/{field}")
    def get_person_field(field: str) -> dict[str, Any]:
        value = state.person.get(field)
        if field not in state.person.record:
            raise HTTPException(status_code=404, detail=f"Unknown field: {field}")
        return {"field": field, "value": value}

    @app.patch("/api/person")
    def update_person(body: dict) -> dict[str, Any]:
        if not body:
            raise HTTPException(status_code=400, detail="No fields to update")
        try:
            state.person.update(body)
        except ValidationError as e:
            raise HTTPException(status_code=400, detail=e.to_dict())
        return {"ok": True, "updated": list(body)}

    @app.get("/api/counter")
    def get_counter() -> dict[str, int]:
        return {"count": state.counter.get_count()}

    @app.post("/api/counter/increment")
    def increment_counter() -> dict[str, int]:
        return {"count": state.increment_counter()}

    @app.post("/api/counter/decrement")
    def decrement_counter() -> dict[str, int]:
        return {"count": state.decrement_counter()}

    return app
