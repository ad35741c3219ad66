"""
Friend recommendation engine.

Responsibilities:
- Collect friends-of-friends of a user as candidates.
- Score each candidate on circle overlap, mutual friends and visits.
- Return the candidates ranked, as structured records.
"""
