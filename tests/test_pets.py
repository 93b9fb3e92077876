from __future__ import annotations

from patternkit.patterns.pets import Barks, Dog, Flies, SuperDog, capabilities


def test_dog_capabilities() -> None:
    dog = Dog("Daisy")
    assert dog.bark() == "Woof!"
    assert dog.play() == "Playing now!"
    assert isinstance(dog, Barks)
    assert not isinstance(dog, Flies)
    assert capabilities(dog) == ("bark", "play")


def test_super_dog_extends_dog() -> None:
    dog = SuperDog("Max")
    assert dog.name == "Max"
    assert dog.bark() == "Woof!"
    assert dog.fly() == "Flying!"
    assert capabilities(dog) == ("bark", "play", "fly")


def test_plain_objects_have_no_capabilities() -> None:
    assert capabilities(object()) == ()
    assert not hasattr(Dog("Daisy"), "fly")
