from __future__ import annotations

import threading
from dataclasses import dataclass

from ..core.registry import IdentityRegistry


@dataclass(frozen=True)
class Book:
    """Intrinsic state shared by every copy with the same ISBN."""

    title: str
    author: str
    isbn: str


@dataclass(frozen=True)
class BookCopy:
    book: Book
    availability: bool
    sales: int

    @property
    def isbn(self) -> str:
        return self.book.isbn


class BookCatalog:
    """Flyweight catalog: many copies, one `Book` per ISBN.

    The first title/author seen for an ISBN wins; later copies with the same
    ISBN reuse that `Book` unchanged.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._books: IdentityRegistry[str, Book] = IdentityRegistry("books")
        self._copies: list[BookCopy] = []

    def create_book(self, title: str, author: str, isbn: str) -> Book:
        isbn_v = str(isbn).strip()
        if not isbn_v:
            raise ValueError("isbn cannot be empty")
        return self._books.get_or_create(isbn_v, lambda: Book(title=str(title), author=str(author), isbn=isbn_v))

    def add_book(self, title: str, author: str, isbn: str, availability: bool, sales: int) -> BookCopy:
        sales_v = int(sales)
        if sales_v < 0:
            raise ValueError("sales must be >= 0")
        # Only register the Book once the copy is known to be valid.
        book = self.create_book(title, author, isbn)
        copy = BookCopy(book=book, availability=bool(availability), sales=sales_v)
        with self._lock:
            self._copies.append(copy)
        return copy

    def get_book(self, isbn: str) -> Book | None:
        return self._books.get(str(isbn).strip())

    def books(self) -> list[Book]:
        return [book for _, book in self._books.items()]

    def copies(self) -> list[BookCopy]:
        with self._lock:
            return list(self._copies)

    def copies_of(self, isbn: str) -> list[BookCopy]:
        isbn_v = str(isbn).strip()
        return [c for c in self.copies() if c.isbn == isbn_v]

    def total_copies(self) -> int:
        with self._lock:
            return len(self._copies)

    def unique_books(self) -> int:
        return len(self._books)
