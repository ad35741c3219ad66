from __future__ import annotations

import logging

from ..config import DEFAULT_SCORING_CONFIG, ScoringConfig
from ..graph.models import User
from ..graph.store import SocialGraph
from .models import RankingMode, Suggestion
from .scoring import (
    bidirectional_visit_count,
    combined_score,
    jaccard_similarity,
    mutual_friends_count,
    round_half_up,
)

logger = logging.getLogger(__name__)


def _friends_of_friends(graph: SocialGraph, user: User) -> list[User]:
    """Users exactly two hops from *user*, each listed once."""
    candidates: dict[str, User] = {}
    for friend_id in user.friends:
        friend = graph.get_user(friend_id)
        if friend is None:
            continue
        for candidate_id in friend.friends:
            if candidate_id == user.id or candidate_id in user.friends:
                continue
            if candidate_id in candidates:
                continue
            candidate = graph.get_user(candidate_id)
            if candidate is not None:
                candidates[candidate_id] = candidate
    return list(candidates.values())


def _score_candidate(
    user: User, candidate: User, config: ScoringConfig
) -> Suggestion:
    jaccard = round_half_up(
        jaccard_similarity(user.friends, candidate.friends), config.precision
    )
    mutual = mutual_friends_count(user, candidate)
    visits = bidirectional_visit_count(user, candidate)
    return Suggestion(
        friend_id=candidate.id,
        jaccard_similarity=jaccard,
        mutual_friends_count=mutual,
        visits_count=visits,
        combined_score=combined_score(jaccard, mutual, visits, config),
    )


def _sort_key(suggestion: Suggestion, ranking: RankingMode) -> tuple:
    if ranking is RankingMode.jaccard:
        return (
            -suggestion.jaccard_similarity,
            -suggestion.visits_count,
            suggestion.friend_id,
        )
    return (-suggestion.combined_score, suggestion.friend_id)


def suggest_friends(
    graph: SocialGraph,
    user_id: str,
    ranking: RankingMode = RankingMode.weighted,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> list[Suggestion]:
    """
    Rank the friends-of-friends of *user_id* as new friend suggestions.

    Candidates are users two friendship hops away who are neither the
    user nor already a friend. ``weighted`` ranking orders them by the
    combined score; ``jaccard`` ranking orders them by similarity and
    then by visit count. Remaining ties go to the lower friend id.

    Returns an empty list when the user is unknown or has no friends.
    Nothing is cached: every call reads the current graph.
    """
    ranking = RankingMode(ranking)
    with graph.locked():
        user = graph.get_user(user_id)
        if user is None:
            logger.debug("No suggestions for unknown user %s", user_id)
            return []

        candidates = _friends_of_friends(graph, user)
        suggestions = [
            _score_candidate(user, candidate, config) for candidate in candidates
        ]

    logger.debug(
        "Ranked %d candidates for %s (%s)", len(suggestions), user_id, ranking.value
    )
    return sorted(suggestions, key=lambda s: _sort_key(s, ranking))
