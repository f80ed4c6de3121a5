# tests/test_observations.py
# unit tests for CharObservation / ObservationList

import pytest

from markov_text_generator.core.observations import CharObservation, ObservationList


def build(text):
    obs = ObservationList()
    for c in text:
        obs.update(c)
    return obs


def test_update_counts_and_keeps_first_seen_order():
    obs = build("committee ")
    assert obs.chars() == ["c", "o", "m", "i", "t", "e", " "]
    assert obs.find("m").count == 2
    assert obs.find("t").count == 2
    assert obs.find("c").count == 1
    assert obs.total() == 10
    assert len(obs) == 7


def test_index_of_and_contains():
    obs = build("abca")
    assert obs.index_of("a") == 0
    assert obs.index_of("c") == 2
    assert obs.index_of("z") == -1
    assert "b" in obs
    assert "z" not in obs
    assert obs.first().char == "a"
    assert obs.last().char == "c"


def test_calculate_probabilities():
    obs = build("aab")
    obs.calculate_probabilities()
    a, b = obs.get(0), obs.get(1)
    assert a.p == pytest.approx(2 / 3)
    assert b.p == pytest.approx(1 / 3)
    assert a.cp == pytest.approx(2 / 3)
    assert b.cp == pytest.approx(1.0)


def test_probabilities_sum_to_one_and_cp_non_decreasing():
    obs = build("the quick brown fox jumps over the lazy dog")
    obs.calculate_probabilities()
    ps = [o.p for o in obs]
    cps = [o.cp for o in obs]
    assert sum(ps) == pytest.approx(1.0, abs=1e-9)
    assert all(x <= y for x, y in zip(cps, cps[1:]))
    assert cps[-1] == pytest.approx(sum(ps), abs=1e-12)


def test_calculate_probabilities_on_empty_list_is_noop():
    obs = ObservationList()
    obs.calculate_probabilities()
    assert len(obs) == 0


def test_sample_picks_first_cp_strictly_above_draw():
    obs = build("aab")
    obs.calculate_probabilities()
    assert obs.sample(0.0) == "a"
    assert obs.sample(0.5) == "a"
    assert obs.sample(0.9) == "b"


def test_sample_at_exact_cp_boundary_moves_to_next():
    obs = build("ab")
    obs.calculate_probabilities()
    # cp('a') == 0.5, draw equal to it is not strictly below
    assert obs.sample(0.5) == "b"


def test_sample_falls_back_to_last_observation():
    obs = build("xyz")
    obs.calculate_probabilities()
    obs.last().cp = 0.9  # simulate rounding leaving the total short of 1.0
    assert obs.sample(0.95) == "z"


def test_sample_empty_list_raises():
    with pytest.raises(LookupError):
        ObservationList().sample(0.1)


def test_str_format():
    obs = ObservationList()
    obs.update("a")
    obs.calculate_probabilities()
    assert str(obs) == "((a 1 1.0 1.0))"
    assert str(CharObservation("q", 3, 0.5, 0.75)) == "(q 3 0.5 0.75)"


def test_last_on_empty_list_raises():
    with pytest.raises(IndexError):
        ObservationList().last()
    obs = build("pq")
    assert obs.last() is obs.find("q")
