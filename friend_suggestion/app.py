from __future__ import annotations

from fastapi import Depends, FastAPI, HTTPException

from .config import DEFAULT_APP_CONFIG
from .graph.models import User
from .graph.registry import get_graph
from .graph.store import SocialGraph
from .presentation import format_suggestions_inline
from .recommendations.engine import suggest_friends
from .recommendations.models import (
    FriendshipRequest,
    RankingMode,
    SuggestionResponse,
    UserCreate,
    UserOut,
    VisitRequest,
)

app = FastAPI(title="Friend Suggestion API", version="1.0.0")


def _graph() -> SocialGraph:
    return get_graph()


def _require_users(graph: SocialGraph, *user_ids: str) -> None:
    """Raise 404 for the first id that is not registered."""
    for user_id in user_ids:
        if user_id not in graph:
            raise HTTPException(status_code=404, detail=f"Unknown user: {user_id}")


def _user_out(graph: SocialGraph, user: User) -> UserOut:
    with graph.locked():
        friends = [u.name for u in graph.users() if u.id in user.friends]
        targets = [u.id for u in graph.visit_targets(user.id)]
        suggestions = suggest_friends(graph, user.id)
    return UserOut(
        id=user.id,
        name=user.name,
        friends=friends,
        visit_targets=targets,
        suggestions_summary=format_suggestions_inline(suggestions),
    )


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


# ── Users ────────────────────────────────────────────────────────────────


@app.get("/users", response_model=list[UserOut])
def list_users(graph: SocialGraph = Depends(_graph)) -> list[UserOut]:
    return [_user_out(graph, user) for user in graph.users()]


@app.post("/users", response_model=UserOut)
def create_user(
    body: UserCreate, graph: SocialGraph = Depends(_graph)
) -> UserOut:
    user = graph.add_user(User(id=body.id, name=body.name))
    return _user_out(graph, user)


@app.get("/users/{user_id}", response_model=UserOut)
def get_user(user_id: str, graph: SocialGraph = Depends(_graph)) -> UserOut:
    user = graph.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail=f"Unknown user: {user_id}")
    return _user_out(graph, user)


# ── Interactions ─────────────────────────────────────────────────────────


@app.post("/friendships")
def add_friendship(
    body: FriendshipRequest, graph: SocialGraph = Depends(_graph)
) -> dict:
    if body.user_id == body.friend_id:
        raise HTTPException(status_code=422, detail="Users cannot befriend themselves")
    with graph.locked():
        _require_users(graph, body.user_id, body.friend_id)
        graph.add_friendship(body.user_id, body.friend_id)
    return {"status": "ok", "user_id": body.user_id, "friend_id": body.friend_id}


@app.post("/visits")
def record_visit(body: VisitRequest, graph: SocialGraph = Depends(_graph)) -> dict:
    with graph.locked():
        _require_users(graph, body.visitor_id, body.visited_id)
        graph.record_visit(body.visitor_id, body.visited_id)
        visits = graph.get_user(body.visitor_id).visits_to(body.visited_id)
    return {
        "status": "recorded",
        "visitor_id": body.visitor_id,
        "visited_id": body.visited_id,
        "visits": visits,
    }


# ── Suggestions ──────────────────────────────────────────────────────────


@app.get("/users/{user_id}/suggestions", response_model=SuggestionResponse)
def suggestions(
    user_id: str,
    ranking: RankingMode | None = None,
    graph: SocialGraph = Depends(_graph),
) -> SuggestionResponse:
    # Unknown users get an empty list rather than a 404.
    ranking = ranking or DEFAULT_APP_CONFIG.default_ranking
    return SuggestionResponse(
        user_id=user_id,
        ranking=ranking,
        suggestions=suggest_friends(graph, user_id, ranking),
    )
