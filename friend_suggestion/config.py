from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .recommendations.models import RankingMode

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off", "")


def _env_ranking(name: str, default: RankingMode) -> RankingMode:
    """Read a ranking mode, failing fast on values that are not one."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return RankingMode(raw.strip().lower())


@dataclass(frozen=True)
class ScoringConfig:
    """Weights of the combined suggestion score."""

    jaccard_weight: float = 0.5  # overlap of friendship circles
    mutual_friends_weight: float = 0.3
    visits_weight: float = 0.2
    precision: int = 2


@dataclass(frozen=True)
class AppConfig:
    seed_sample_data: bool = _env_flag("FRIEND_SUGGESTION_SEED_SAMPLE_DATA", True)
    default_ranking: RankingMode = _env_ranking(
        "FRIEND_SUGGESTION_DEFAULT_RANKING", RankingMode.weighted
    )


DEFAULT_SCORING_CONFIG = ScoringConfig()
DEFAULT_APP_CONFIG = AppConfig()
