import pytest

from drillrunner.tallies import (
    Fruit,
    Team,
    Wrapper,
    build_scores_table,
    fill_basket,
    starter_basket,
    vec_loop,
    vec_map,
)

RESULTS = (
    "England,France,4,2\n"
    "France,Italy,3,1\n"
    "Poland,Spain,2,0\n"
    "Germany,England,2,1\n"
)


def get_fruit_basket():
    return {Fruit.APPLE: 4, Fruit.MANGO: 2, Fruit.LYCHEE: 5}


def test_at_least_three_types_of_fruits():
    assert len(starter_basket()) >= 3


def test_at_least_five_fruits():
    assert sum(starter_basket().values()) >= 5


def test_given_fruits_are_not_modified():
    basket = get_fruit_basket()
    fill_basket(basket)
    assert basket[Fruit.APPLE] == 4
    assert basket[Fruit.MANGO] == 2
    assert basket[Fruit.LYCHEE] == 5


def test_at_least_five_types_of_fruits():
    basket = get_fruit_basket()
    fill_basket(basket)
    assert len(basket) >= 5


def test_greater_than_eleven_fruits():
    basket = get_fruit_basket()
    fill_basket(basket)
    assert sum(basket.values()) > 11


def test_all_fruit_types_in_basket():
    basket = get_fruit_basket()
    fill_basket(basket)
    assert all(amount != 0 for amount in basket.values())
    assert set(basket) == set(Fruit)


def test_build_scores():
    scores = build_scores_table(RESULTS)
    assert sorted(scores) == ["England", "France", "Germany", "Italy", "Poland", "Spain"]


def test_validate_team_score_1():
    team = build_scores_table(RESULTS)["England"]
    assert team.goals_scored == 5
    assert team.goals_conceded == 4


def test_validate_team_score_2():
    assert build_scores_table(RESULTS)["Spain"] == Team(goals_scored=0, goals_conceded=2)


def test_scores_bad_number():
    with pytest.raises(ValueError):
        build_scores_table("England,France,four,2\n")


def test_scores_short_line():
    with pytest.raises(ValueError):
        build_scores_table("England,France,4\n")


def test_scores_overflow():
    with pytest.raises(OverflowError):
        build_scores_table("A,B,200,0\nA,B,100,0\n")


def test_vec_loop():
    values = [2, 4, 6, 8, 10]
    result = vec_loop(values)
    assert result == [4, 8, 12, 16, 20]
    assert result is values


def test_vec_map():
    values = [2, 4, 6, 8, 10]
    assert vec_map(values) == [4, 8, 12, 16, 20]
    assert values == [2, 4, 6, 8, 10]


def test_store_u32_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"