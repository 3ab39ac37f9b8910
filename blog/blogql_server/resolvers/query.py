"""
Query resolver for BlogQL.

Answers the read side of the schema: substring search over users and
posts, the full comment listing, and the `me` / `post` placeholders.

Invariants:
    - Results are returned in store insertion order
    - Search is case-insensitive
    - An empty or absent search string returns the whole collection
    - Reads never take the mutation lock
"""

from __future__ import annotations

import logging

from ..store import Collection, Comment, MemoryStore, Post, User

logger = logging.getLogger(__name__)

# Placeholder entities served by `me` and `post`. They are not in the store.
ME_PLACEHOLDER = User(
    id="123098",
    name="Derek",
    email="derek@gmail.com",
)

POST_PLACEHOLDER = Post(
    id="45678124",
    title="Gulliver's Travels",
    body="Once upon a time....",
    published=True,
    author=ME_PLACEHOLDER.id,
)


class QueryResolver:
    """Read-only resolvers over a MemoryStore.

    Example:
        >>> queries = QueryResolver(store)
        >>> [u.name for u in await queries.list_users("AND")]
        ['Andrew']
    """

    def __init__(self, store: MemoryStore) -> None:
        self.store = store

    async def list_users(self, query: str | None = None) -> list[User]:
        """List users whose name contains `query`, ignoring case."""
        if not query:
            return self.store.all(Collection.USERS)

        needle = query.lower()
        return self.store.filter_by(Collection.USERS, lambda u: needle in u.name.lower())

    async def list_posts(self, query: str | None = None) -> list[Post]:
        """List posts whose title or body contains `query`, ignoring case."""
        if not query:
            return self.store.all(Collection.POSTS)

        needle = query.lower()

        def matches(post: Post) -> bool:
            is_title_match = needle in post.title.lower()
            is_body_match = needle in post.body.lower()
            return is_title_match or is_body_match

        return self.store.filter_by(Collection.POSTS, matches)

    async def list_comments(self) -> list[Comment]:
        return self.store.all(Collection.COMMENTS)

    async def me(self) -> User:
        return ME_PLACEHOLDER

    async def post(self) -> Post:
        return POST_PLACEHOLDER
