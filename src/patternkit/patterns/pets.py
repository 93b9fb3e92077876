from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable


logger = logging.getLogger(__name__)


@runtime_checkable
class Barks(Protocol):
    def bark(self) -> str: ...


@runtime_checkable
class Plays(Protocol):
    def play(self) -> str: ...


@runtime_checkable
class Flies(Protocol):
    def fly(self) -> str: ...


_CAPABILITIES: tuple[tuple[str, type], ...] = (
    ("bark", Barks),
    ("play", Plays),
    ("fly", Flies),
)


class Dog:
    def __init__(self, name: str) -> None:
        self.name = name

    def bark(self) -> str:
        logger.debug("%s barks", self.name)
        return "Woof!"

    def play(self) -> str:
        logger.debug("%s plays", self.name)
        return "Playing now!"


class SuperDog(Dog):
    def fly(self) -> str:
        logger.debug("%s flies", self.name)
        return "Flying!"


def capabilities(pet: object) -> tuple[str, ...]:
    """Names of the capabilities `pet` provides, in a fixed order."""
    return tuple(name for name, proto in _CAPABILITIES if isinstance(pet, proto))
