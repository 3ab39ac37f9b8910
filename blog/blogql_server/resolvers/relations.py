"""
Relationship resolvers.

Each function resolves one relationship field for a parent entity by
re-querying the store with the foreign key the parent carries. They are
invoked lazily, once per returned entity, independent of the top-level
query.

There is no caching or batching: listing N posts with their authors costs
N extra lookups. That N+1 cost is accepted at this data size.
"""

from __future__ import annotations

from ..errors import UserNotFoundError
from ..store import Collection, Comment, MemoryStore, Post, User


def post_author(post: Post, store: MemoryStore) -> User:
    user = store.find_by_id(Collection.USERS, post.author)
    if user is None:
        raise UserNotFoundError(post.author)
    return user


def post_comments(post: Post, store: MemoryStore) -> list[Comment]:
    return store.filter_by(Collection.COMMENTS, lambda c: c.post == post.id)


def comment_author(comment: Comment, store: MemoryStore) -> User:
    user = store.find_by_id(Collection.USERS, comment.author)
    if user is None:
        raise UserNotFoundError(comment.author)
    return user


def comment_post(comment: Comment, store: MemoryStore) -> Post | None:
    # Comment.post is nullable on the wire; a missing post resolves to None
    return store.find_by_id(Collection.POSTS, comment.post)


def user_posts(user: User, store: MemoryStore) -> list[Post]:
    return store.filter_by(Collection.POSTS, lambda p: p.author == user.id)


def user_comments(user: User, store: MemoryStore) -> list[Comment]:
    return store.filter_by(Collection.COMMENTS, lambda c: c.author == user.id)
