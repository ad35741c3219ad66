from __future__ import annotations

from collections.abc import Sequence

from .recommendations.models import Suggestion


def format_suggestions_inline(suggestions: Sequence[Suggestion]) -> str:
    """Render suggestions as ``"Eve (1.8), Diego (1.34)"``."""
    return ", ".join(f"{s.friend_id} ({s.combined_score})" for s in suggestions)


def format_suggestion_details(name: str, suggestions: Sequence[Suggestion]) -> str:
    lines = [f"Detailed friend suggestions for {name}:"]
    for s in suggestions:
        lines.extend([
            f"Friend ID: {s.friend_id}",
            f"- Jaccard Similarity: {s.jaccard_similarity}",
            f"- Mutual Friends Count: {s.mutual_friends_count}",
            f"- Number of Visits: {s.visits_count}",
            f"- Final Score: {s.combined_score}",
        ])
    return "\n".join(lines)
