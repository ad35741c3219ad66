from __future__ import annotations

import pytest

from friend_suggestion.config import ScoringConfig
from friend_suggestion.graph.models import User
from friend_suggestion.graph.store import SocialGraph
from friend_suggestion.recommendations.scoring import (
    bidirectional_visit_count,
    combined_score,
    jaccard_similarity,
    mutual_friends_count,
    round_half_up,
)


class TestJaccardSimilarity:
    def test_identical_sets(self):
        assert jaccard_similarity({"a", "b"}, {"a", "b"}) == 1.0

    def test_partial_overlap(self):
        assert jaccard_similarity({"a", "b", "c"}, {"b", "c", "d"}) == 0.5

    def test_disjoint_sets(self):
        assert jaccard_similarity({"a"}, {"b"}) == 0.0

    def test_both_empty_is_zero(self):
        assert jaccard_similarity(set(), set()) == 0.0

    def test_one_empty_is_zero(self):
        assert jaccard_similarity({"a"}, set()) == 0.0

    @pytest.mark.parametrize(
        "left, right",
        [
            ({"a"}, {"a", "b", "c"}),
            ({"a", "b"}, {"c"}),
            ({"a", "b", "c", "d"}, {"d", "e"}),
        ],
    )
    def test_bounds(self, left, right):
        assert 0.0 <= jaccard_similarity(left, right) <= 1.0


class TestRounding:
    def test_two_thirds(self):
        assert round_half_up(2 / 3) == 0.67

    def test_one_third(self):
        assert round_half_up(1 / 3) == 0.33

    def test_exact_half_goes_up(self):
        assert round_half_up(0.125) == 0.13

    def test_just_under_half_rounds_down(self):
        # 1.005 is stored as 1.00499..., so the scaled value stays below .5
        assert round_half_up(1.005) == 1.0

    def test_precision(self):
        assert round_half_up(0.4567, 1) == 0.5


def _graph(*user_ids: str) -> SocialGraph:
    graph = SocialGraph()
    for user_id in user_ids:
        graph.add_user(User(id=user_id, name=user_id))
    return graph


def test_mutual_friends_count():
    graph = _graph("u", "c1", "a", "b", "c", "d")
    for friend_id in ("a", "b", "c"):
        graph.add_friendship("u", friend_id)
    for friend_id in ("b", "c", "d"):
        graph.add_friendship("c1", friend_id)
    assert mutual_friends_count(graph.get_user("u"), graph.get_user("c1")) == 2


def test_bidirectional_visit_count_sums_both_directions():
    graph = _graph("u", "c1", "x")
    for _ in range(2):
        graph.record_visit("u", "c1")
    for _ in range(5):
        graph.record_visit("u", "x")
    for _ in range(3):
        graph.record_visit("c1", "u")
    assert bidirectional_visit_count(graph.get_user("u"), graph.get_user("c1")) == 5


def test_bidirectional_visit_count_defaults_to_zero():
    assert bidirectional_visit_count(User(id="u", name="u"), User(id="c", name="c")) == 0


def test_combined_score_default_weights():
    assert combined_score(1.0, 3, 2) == 1.8


def test_combined_score_custom_weights():
    config = ScoringConfig(jaccard_weight=1.0, mutual_friends_weight=0.0, visits_weight=0.0)
    assert combined_score(0.5, 10, 10, config) == 0.5
