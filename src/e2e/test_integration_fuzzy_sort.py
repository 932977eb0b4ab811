# src/e2e/test_integration_fuzzy_sort.py

import pytest

from fuzzratio import ErrorKind, FuzzySortError, ScoreOption, fuzzy_map, fuzzy_sort
from fuzzratio.process import calculate_score

FRUITS = ["apple", "banana", "grape", "orange", "pineapple", "apricot"]


@pytest.mark.e2e
def test_standard_sort_top_three():
    out = fuzzy_sort(FRUITS, "app", score_option=ScoreOption.STANDARD)
    assert out[:3] == ["apple", "grape", "pineapple"]


@pytest.mark.e2e
def test_map_scores_and_stable_order():
    rows = fuzzy_map(FRUITS, "app", floor=0, sort=True)
    assert [(r.element, r.score) for r in rows] == [
        ("apple", 75), ("grape", 50), ("pineapple", 50),
        ("apricot", 40), ("banana", 22), ("orange", 22),
    ]


@pytest.mark.e2e
def test_unsorted_map_keeps_input_order():
    rows = fuzzy_map(FRUITS, "app")
    assert [r.element for r in rows] == FRUITS
    element, score = rows[0]
    assert (element, score) == ("apple", 75)


@pytest.mark.e2e
def test_floor_filters():
    assert len(fuzzy_map(FRUITS, "app", floor=0)) == 6
    assert [r.element for r in fuzzy_map(FRUITS, "app", floor=50, sort=True)] == ["apple", "grape", "pineapple"]
    assert fuzzy_map(FRUITS, "app", floor=80) == []
    assert all(r.score >= 50 for r in fuzzy_map(FRUITS, "app", floor=50))


@pytest.mark.e2e
@pytest.mark.parametrize("floor", [-1, 101])
def test_invalid_floor(floor):
    with pytest.raises(FuzzySortError) as exc:
        fuzzy_sort(FRUITS, "app", floor=floor)
    assert exc.value.kind is ErrorKind.INVALID_FLOOR


@pytest.mark.e2e
def test_empty_query():
    with pytest.raises(FuzzySortError) as exc:
        fuzzy_sort(FRUITS, "")
    assert exc.value.kind is ErrorKind.EMPTY_QUERY
    assert isinstance(exc.value, ValueError)


@pytest.mark.e2e
def test_floor_is_checked_before_query():
    with pytest.raises(FuzzySortError) as exc:
        fuzzy_sort(FRUITS, "", floor=-1)
    assert exc.value.kind is ErrorKind.INVALID_FLOOR


@pytest.mark.e2e
def test_case_sensitivity():
    upper = [f.upper() for f in FRUITS]
    assert fuzzy_sort(upper, "apple", floor=100, case_sensitive=True) == []
    rows = fuzzy_map(upper, "apple", floor=0, sort=True)
    assert rows[0].element == "APPLE" and rows[0].score == 100


@pytest.mark.e2e
def test_partial_scores():
    rows = fuzzy_map(FRUITS, "app", sort=True, score_option=ScoreOption.PARTIAL)
    assert [(r.element, r.score) for r in rows] == [
        ("apple", 100), ("pineapple", 100), ("grape", 67),
        ("apricot", 67), ("banana", 33), ("orange", 33),
    ]


@pytest.mark.e2e
@pytest.mark.parametrize("option", list(ScoreOption))
def test_every_option_ranks_apple_first(option):
    rows = fuzzy_map(FRUITS, "app", sort=True, score_option=option)
    assert len(rows) == 6
    assert rows[0].element == "apple"
    assert rows[0].score > 0


@pytest.mark.e2e
def test_token_set_matches_standard_ranking_for_single_words():
    out = fuzzy_sort(FRUITS, "app", score_option=ScoreOption.TOKEN_SET)
    assert out[:3] == ["apple", "grape", "pineapple"]


def test_score_option_names():
    assert ScoreOption.from_name("token-set") is ScoreOption.TOKEN_SET
    assert ScoreOption.from_name(" Partial ") is ScoreOption.PARTIAL
    with pytest.raises(ValueError):
        ScoreOption.from_name("nope")


def test_score_option_accepts_plain_values():
    assert calculate_score("app", "apple", score_option="standard") == 75
    assert calculate_score("a b", "b a", score_option="token_set") == 100
    assert fuzzy_sort(["grape", "apple"], "app", score_option="partial") == ["apple", "grape"]
    with pytest.raises(ValueError):
        calculate_score("app", "apple", score_option="nope")
