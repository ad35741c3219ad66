from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class User:
    """
    A person in the social network.

    ``id`` and ``name`` are fixed at creation. ``friends`` and
    ``visited_profiles`` start empty, hold ids of other users and are only
    mutated by the owning :class:`~friend_suggestion.graph.store.SocialGraph`.
    """

    id: str
    name: str
    friends: set[str] = field(default_factory=set, init=False, compare=False)
    visited_profiles: dict[str, int] = field(
        default_factory=dict, init=False, compare=False
    )

    def visits_to(self, user_id: str) -> int:
        return self.visited_profiles.get(user_id, 0)
