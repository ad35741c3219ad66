from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from .models import User

logger = logging.getLogger(__name__)


class SocialGraph:
    """In-memory store of users keyed by id.

    Every read and write goes through one re-entrant lock so that a
    friendship, which touches two records, is never observed half-applied.
    """

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator[SocialGraph]:
        """Hold the graph lock for a sequence of reads or writes."""
        with self._lock:
            yield self

    def __contains__(self, user_id: object) -> bool:
        with self._lock:
            return user_id in self._users

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def add_user(self, user: User) -> User:
        """Register *user*, replacing any previous user with the same id.

        The stored record starts without friends or visits. Replacing a
        user also removes it from its former friends, so friendships stay
        symmetric. Returns the stored record.
        """
        with self._lock:
            previous = self._users.get(user.id)
            if previous is not None:
                logger.debug("Replacing existing user %s", user.id)
                for friend_id in previous.friends:
                    friend = self._users.get(friend_id)
                    if friend is not None:
                        friend.friends.discard(previous.id)
            record = User(id=user.id, name=user.name)
            # Re-inserting keeps the first registration slot.
            self._users[user.id] = record
            return record

    def get_user(self, user_id: str) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def users(self) -> list[User]:
        """Return every user in registration order."""
        with self._lock:
            return list(self._users.values())

    def add_friendship(self, user_id: str, friend_id: str) -> None:
        """Make two registered users friends of each other.

        Unknown ids and self-friendships are ignored without touching
        either record.
        """
        with self._lock:
            user = self._users.get(user_id)
            friend = self._users.get(friend_id)
            if user is None or friend is None:
                logger.debug(
                    "Ignoring friendship %s-%s: unknown user", user_id, friend_id
                )
                return
            if user.id == friend.id:
                logger.debug("Ignoring self-friendship for %s", user_id)
                return
            user.friends.add(friend.id)
            friend.friends.add(user.id)

    def record_visit(self, visitor_id: str, visited_id: str) -> None:
        """Count one visit by *visitor_id* to the profile of *visited_id*.

        Only the visitor's record changes.
        """
        with self._lock:
            visitor = self._users.get(visitor_id)
            if visitor is None or visited_id not in self._users:
                logger.debug(
                    "Ignoring visit %s->%s: unknown user", visitor_id, visited_id
                )
                return
            visitor.visited_profiles[visited_id] = visitor.visits_to(visited_id) + 1

    def visit_targets(self, user_id: str) -> list[User]:
        """Return the other users *user_id* is not yet friends with."""
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return []
            return [
                other
                for other in self._users.values()
                if other.id != user.id and other.id not in user.friends
            ]
