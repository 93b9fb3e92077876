from __future__ import annotations

from .books import Book, BookCatalog, BookCopy
from .counter import COUNTER_SLOT, Counter, create_counter
from .person import default_person, logging_accessor, person_rules, validating_accessor
from .pets import Barks, Dog, Flies, Plays, SuperDog, capabilities

__all__ = [
    "Book",
    "BookCopy",
    "BookCatalog",
    "Counter",
    "COUNTER_SLOT",
    "create_counter",
    "default_person",
    "person_rules",
    "logging_accessor",
    "validating_accessor",
    "Barks",
    "Plays",
    "Flies",
    "Dog",
    "SuperDog",
    "capabilities",
]
