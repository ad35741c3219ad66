"""
Friend suggestion service.

Responsibilities:
- Keep an in-memory social graph of users, friendships and profile visits.
- Rank friends-of-friends by circle overlap, mutual friends and visits.
- Expose the graph and the ranking through a small JSON API.
"""
