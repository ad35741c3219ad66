from __future__ import annotations

import math

from ..config import DEFAULT_SCORING_CONFIG, ScoringConfig
from ..graph.models import User


def round_half_up(value: float, precision: int = 2) -> float:
    """Round a non-negative *value* to *precision* decimals, halves going up.

    The value is scaled in binary floating point before rounding, so a
    sum landing a hair under a ``.xx5`` boundary rounds down.
    """
    scale = 10 ** precision
    return math.floor(value * scale + 0.5) / scale


def jaccard_similarity(friends_a: set[str], friends_b: set[str]) -> float:
    """Return |A ∩ B| / |A ∪ B|, or 0.0 when both sets are empty."""
    union = len(friends_a | friends_b)
    if union == 0:
        return 0.0
    return len(friends_a & friends_b) / union


def mutual_friends_count(user: User, candidate: User) -> int:
    return len(user.friends & candidate.friends)


def bidirectional_visit_count(user: User, candidate: User) -> int:
    """Visits *user* paid to *candidate* plus visits paid back."""
    return user.visits_to(candidate.id) + candidate.visits_to(user.id)


def combined_score(
    jaccard: float,
    mutual_friends: int,
    visits: int,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> float:
    """Weighted sum of the three signals, rounded to ``config.precision``."""
    jaccard_score = jaccard * config.jaccard_weight
    mutual_score = mutual_friends * config.mutual_friends_weight
    visits_score = visits * config.visits_weight
    return round_half_up(jaccard_score + mutual_score + visits_score, config.precision)
