"""
Mutation resolver for BlogQL.

Every mutation follows the same three steps:

    Validate ──▶ Apply ──▶ Return

Validation failures short-circuit with a domain error before any write.
Applying goes through the IntegrityEngine for anything that cascades.

Invariants:
    - One asyncio.Lock covers validate+apply of each mutation, so no
      reader or writer observes a half-applied change
    - Created entities get their ID from the engine's id factory
    - Deletes return the removed entity

How to change safely:
    - Keep all checks before the first store write
    - Put new cascade rules in IntegrityEngine, not here
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from ..store import (
    Collection,
    Comment,
    IntegrityEngine,
    MemoryStore,
    Post,
    User,
    build_comment,
    build_post,
    build_user,
    new_id,
)
from ..store.models import IdFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateUserInput:
    """Fields accepted by createUser."""

    name: str
    email: str
    age: int | None = None


@dataclass(frozen=True)
class CreatePostInput:
    """Fields accepted by createPost."""

    title: str
    body: str
    published: bool
    author: str


@dataclass(frozen=True)
class CreateCommentInput:
    """Fields accepted by createComment."""

    text: str
    author: str
    post: str


class MutationResolver:
    """Validated create/delete operations over a MemoryStore.

    Attributes:
        store: Backing store
        integrity: Foreign-key checks and cascades
        id_factory: Zero-argument callable producing unique IDs

    Example:
        >>> mutations = MutationResolver(store, IntegrityEngine(store))
        >>> user = await mutations.create_user(
        ...     CreateUserInput(name="Jess", email="jess@example.com")
        ... )
    """

    def __init__(
        self,
        store: MemoryStore,
        integrity: IntegrityEngine,
        id_factory: IdFactory = new_id,
    ) -> None:
        self.store = store
        self.integrity = integrity
        self.id_factory = id_factory
        self._lock = asyncio.Lock()

    async def create_user(self, data: CreateUserInput) -> User:
        """Create a user.

        Raises:
            EmailTakenError: If another user has the same email
        """
        async with self._lock:
            self.integrity.require_email_unique(data.email)

            user = build_user(
                name=data.name,
                email=data.email,
                age=data.age,
                id_factory=self.id_factory,
            )
            self.store.insert(Collection.USERS, user)

        logger.info("Created user", extra={"user_id": user.id})
        return user

    async def delete_user(self, user_id: str) -> User:
        """Delete a user with their posts and comments.

        Raises:
            NotFoundError: If the user does not exist
        """
        async with self._lock:
            result = self.integrity.cascade_delete_user(user_id)
        return result.removed

    async def create_post(self, data: CreatePostInput) -> Post:
        """Create a post for an existing author.

        Raises:
            UserNotFoundError: If the author does not exist
        """
        async with self._lock:
            self.integrity.require_user(data.author)

            post = build_post(
                title=data.title,
                body=data.body,
                published=data.published,
                author=data.author,
                id_factory=self.id_factory,
            )
            self.store.insert(Collection.POSTS, post)

        logger.info("Created post", extra={"post_id": post.id, "author": post.author})
        return post

    async def delete_post(self, post_id: str) -> Post:
        """Delete a post and the comments attached to it.

        Raises:
            NotFoundError: If the post does not exist
        """
        async with self._lock:
            result = self.integrity.delete_post(post_id)
        return result.removed

    async def create_comment(self, data: CreateCommentInput) -> Comment:
        """Create a comment on a published post.

        Raises:
            UserNotFoundError: If the author does not exist
            PostNotFoundError: If the post does not exist
            PostNotPublishedError: If the post is not published
        """
        async with self._lock:
            self.integrity.require_user(data.author)
            self.integrity.require_published_post(data.post)

            comment = build_comment(
                text=data.text,
                author=data.author,
                post=data.post,
                id_factory=self.id_factory,
            )
            self.store.insert(Collection.COMMENTS, comment)

        logger.info(
            "Created comment",
            extra={"comment_id": comment.id, "post_id": comment.post},
        )
        return comment

    async def delete_comment(self, comment_id: str) -> Comment:
        """Delete a single comment.

        Raises:
            NotFoundError: If the comment does not exist
        """
        async with self._lock:
            result = self.integrity.delete_comment(comment_id)
        return result.removed
