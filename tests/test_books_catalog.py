from __future__ import annotations

import pytest

from patternkit.patterns.books import Book, BookCatalog


def _stock(catalog: BookCatalog) -> None:
    catalog.add_book("Harry Potter", "JK Rowling", "AB123", False, 100)
    catalog.add_book("Harry Potter", "JK Rowling", "AB123", True, 50)
    catalog.add_book("To Kill a Mockingbird", "Harper Lee", "CD345", True, 10)
    catalog.add_book("To Kill a Mockingbird", "Harper Lee", "CD345", False, 20)
    catalog.add_book("The Great Gatsby", "F. Scott Fitzgerald", "EF567", False, 20)


def test_five_copies_share_three_books() -> None:
    catalog = BookCatalog()
    _stock(catalog)

    assert catalog.total_copies() == 5
    assert catalog.unique_books() == 3
    assert [b.isbn for b in catalog.books()] == ["AB123", "CD345", "EF567"]


def test_copies_with_same_isbn_share_one_book() -> None:
    catalog = BookCatalog()
    first = catalog.add_book("Harry Potter", "JK Rowling", "AB123", False, 100)
    second = catalog.add_book("Harry Potter", "JK Rowling", "AB123", True, 50)

    assert first.book is second.book
    assert first is not second
    assert first.availability is False and second.availability is True
    assert [c.sales for c in catalog.copies_of("AB123")] == [100, 50]


def test_create_book_returns_canonical_instance() -> None:
    catalog = BookCatalog()
    book = catalog.create_book("Harry Potter", "JK Rowling", "AB123")

    assert catalog.create_book("Another title", "Someone else", "AB123") is book
    assert book == Book(title="Harry Potter", author="JK Rowling", isbn="AB123")
    assert catalog.get_book("AB123") is book
    assert catalog.get_book("ZZ999") is None
    assert catalog.total_copies() == 0


def test_invalid_input_is_rejected() -> None:
    catalog = BookCatalog()
    with pytest.raises(ValueError):
        catalog.create_book("t", "a", "  ")
    with pytest.raises(ValueError):
        catalog.add_book("t", "a", "X1", True, -1)
    with pytest.raises(ValueError):
        catalog.add_book("t", "a", "X2", True, "lots")  # type: ignore[arg-type]
    assert catalog.total_copies() == 0
    assert catalog.unique_books() == 0
    assert catalog.get_book("X1") is None
