"""Print the detailed suggestions for Alice in the playground cast."""

from __future__ import annotations

from .graph.store import SocialGraph
from .presentation import format_suggestion_details
from .recommendations.engine import suggest_friends
from .sample_data import PLAYGROUND_CAST, seed_graph


def main(user_id: str = "Alice") -> str:
    graph = seed_graph(SocialGraph(), PLAYGROUND_CAST)
    user = graph.get_user(user_id)
    name = user.name if user else user_id
    return format_suggestion_details(name, suggest_friends(graph, user_id))


if __name__ == "__main__":
    print(main())
