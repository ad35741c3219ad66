"""
Social graph store.

Responsibilities:
- Own every registered user, addressed by id.
- Create bidirectional friendships and count directional profile visits.
- Ignore operations that reference users who are not registered.
"""
