from __future__ import annotations

import threading

from ..config import DEFAULT_APP_CONFIG, AppConfig
from ..sample_data import APP_CAST, seed_graph
from .store import SocialGraph

_graph: SocialGraph | None = None
_graph_lock = threading.Lock()


def _load(config: AppConfig) -> SocialGraph:
    graph = SocialGraph()
    if config.seed_sample_data:
        seed_graph(graph, APP_CAST)
    return graph


def get_graph(config: AppConfig = DEFAULT_APP_CONFIG) -> SocialGraph:
    """Return the process-wide social graph, creating it on first call."""
    global _graph
    with _graph_lock:
        if _graph is None:
            _graph = _load(config)
        return _graph


def reset_graph() -> None:
    """Drop the process-wide graph; the next ``get_graph`` rebuilds it."""
    global _graph
    with _graph_lock:
        _graph = None
