import pytest

from drillrunner.basics import (
    ChangeColor,
    Echo,
    Move,
    Point,
    Quit,
    State,
    animal_habitat,
    bigger,
    foo_if_fizz,
    is_even,
    maybe_icecream,
    sale_price,
)


def test_match_message_call():
    state = State(
        quit_requested=False,
        position=Point(0, 0),
        color=(0, 0, 0),
        message="hello world",
    )
    state.process(ChangeColor(255, 0, 255))
    state.process(Echo("Hello world!"))
    state.process(Move(Point(10, 15)))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.quit_requested is True
    assert state.message == "Hello world!"


def test_process_unknown_message():
    with pytest.raises(TypeError):
        State().process("nonsense")


def test_check_icecream():
    assert maybe_icecream(9) == 5
    assert maybe_icecream(10) == 5
    assert maybe_icecream(23) == 0
    assert maybe_icecream(22) == 0
    assert maybe_icecream(25) is None


def test_raw_value():
    icecreams = maybe_icecream(12) or 0
    assert icecreams == 5


def test_sale_price():
    assert sale_price(51) == 48


def test_is_true_when_even():
    assert is_even(2)


def test_is_false_when_odd():
    assert not is_even(5)


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_equal_numbers():
    assert bigger(42, 42) == 42


def test_foo_for_fizz():
    assert foo_if_fizz("fizz") == "foo"


def test_bar_for_fuzz():
    assert foo_if_fizz("fuzz") == "bar"


def test_default_to_baz():
    assert foo_if_fizz("literally anything") == "baz"


@pytest.mark.parametrize(
    "animal, habitat",
    [
        ("gopher", "Burrow"),
        ("snake", "Desert"),
        ("crab", "Beach"),
        ("dinosaur", "Unknown"),
    ],
)
def test_animal_habitat(animal, habitat):
    assert animal_habitat(animal) == habitat