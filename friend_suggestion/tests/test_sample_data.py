from __future__ import annotations

from friend_suggestion.graph.store import SocialGraph
from friend_suggestion.sample_data import APP_CAST, PLAYGROUND_CAST, Cast, seed_graph


def test_playground_cast_friendships():
    graph = seed_graph(SocialGraph(), PLAYGROUND_CAST)
    assert len(graph) == 10
    assert graph.get_user("Alice").friends == {"Bob", "Charlie", "David"}
    assert graph.get_user("Pedro").friends == {"Pablo", "Pau", "Aldo"}


def test_playground_cast_visits():
    graph = seed_graph(SocialGraph(), PLAYGROUND_CAST)
    assert graph.get_user("Alice").visited_profiles == {
        "Bob": 1, "Charlie": 1, "Diego": 1, "Eve": 1,
    }
    assert graph.get_user("Diego").visits_to("Alice") == 1


def test_app_cast_connects_pablo_to_everyone():
    graph = seed_graph(SocialGraph(), APP_CAST)
    assert [u.id for u in graph.users()] == list(APP_CAST.users)
    assert graph.get_user("Pablo").friends == {"Alice", "Bob", "Charlie", "David", "Eve"}


def test_seed_skips_references_to_missing_users():
    cast = Cast(users=("a", "b"), friendships=(("a", "b"), ("a", "zed")), visits=(("zed", "a"),))
    graph = seed_graph(SocialGraph(), cast)
    assert graph.get_user("a").friends == {"b"}
    assert "zed" not in graph
