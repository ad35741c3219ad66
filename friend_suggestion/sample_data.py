"""
Example casts of users for demos and local runs.

A cast lists user ids (which double as display names), friendships and
profile visits. ``seed_graph`` applies them in that order.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .graph.models import User
from .graph.store import SocialGraph


@dataclass(frozen=True)
class Cast:
    users: tuple[str, ...]
    friendships: tuple[tuple[str, str], ...] = field(default_factory=tuple)
    visits: tuple[tuple[str, str], ...] = field(default_factory=tuple)


PLAYGROUND_CAST = Cast(
    users=(
        "Alice", "Bob", "Charlie", "David", "Eve",
        "Diego", "Pedro", "Pau", "Pablo", "Aldo",
    ),
    friendships=(
        ("Alice", "Bob"),
        ("Bob", "Charlie"),
        ("Alice", "Charlie"),
        ("Alice", "David"),
        ("David", "Eve"),
        ("Eve", "Bob"),
        ("Eve", "Charlie"),
        ("Bob", "Diego"),
        ("Diego", "David"),
        # Pedro's star has no path to the group above
        ("Pedro", "Pablo"),
        ("Pedro", "Pau"),
        ("Pedro", "Aldo"),
    ),
    visits=(
        ("Alice", "Bob"),
        ("Alice", "Charlie"),
        ("Bob", "Alice"),
        ("Eve", "Alice"),
        ("Alice", "Diego"),
        ("Alice", "Eve"),
        ("Diego", "Alice"),
    ),
)

APP_CAST = Cast(
    users=("Alice", "Bob", "Charlie", "David", "Eve", "Pablo"),
    friendships=(
        ("Alice", "Bob"),
        ("Bob", "Charlie"),
        ("David", "Eve"),
        ("Bob", "Eve"),
        ("Pablo", "Alice"),
        ("Pablo", "Bob"),
        ("Pablo", "Charlie"),
        ("Pablo", "David"),
        ("Pablo", "Eve"),
    ),
)


def seed_graph(graph: SocialGraph, cast: Cast = PLAYGROUND_CAST) -> SocialGraph:
    with graph.locked():
        for user_id in cast.users:
            graph.add_user(User(id=user_id, name=user_id))
        for user_id, friend_id in cast.friendships:
            graph.add_friendship(user_id, friend_id)
        for visitor_id, visited_id in cast.visits:
            graph.record_visit(visitor_id, visited_id)
    return graph
