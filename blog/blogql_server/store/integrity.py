"""
Referential integrity for the BlogQL store.

The IntegrityEngine is the gatekeeper for every mutation precondition and
the executor of delete cascades along the dependency graph:

    User ──▶ Post ──▶ Comment
      └──────────────▶ Comment

Invariants:
    - Checks run before any write; a failed check never touches the store
    - Foreign keys are validated at creation only
    - Every delete leaves no comment pointing at a removed post or user
      that was removed by the same cascade
    - Each cascade runs inside one store transaction

How to change safely:
    - Add new foreign keys to both the create checks and the cascades
    - Keep cascade ordering: dependents first, root last
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..errors import (
    EmailTakenError,
    NotFoundError,
    PostNotFoundError,
    PostNotPublishedError,
    UserNotFoundError,
)
from .memory_store import MemoryStore
from .models import Collection, Comment, Entity, Post, User

logger = logging.getLogger(__name__)


@dataclass
class CascadeResult:
    """Outcome of a delete.

    Attributes:
        removed: The entity the caller asked to delete
        removed_posts: Posts removed as dependents
        removed_comments: Comments removed as dependents
    """

    removed: Entity
    removed_posts: list[Post] = field(default_factory=list)
    removed_comments: list[Comment] = field(default_factory=list)


class IntegrityEngine:
    """Enforces foreign-key rules over a MemoryStore.

    Example:
        >>> integrity = IntegrityEngine(store)
        >>> integrity.require_user("1")
        >>> result = integrity.cascade_delete_user("1")
        >>> len(result.removed_posts)
        1
    """

    def __init__(self, store: MemoryStore) -> None:
        self.store = store

    # --- Create-time checks ---

    def user_email_unique(self, email: str) -> bool:
        return not self.store.filter_by(Collection.USERS, lambda u: u.email == email)

    def user_exists(self, user_id: str) -> bool:
        return self.store.contains(Collection.USERS, user_id)

    def post_exists_and_published(self, post_id: str) -> bool:
        post = self.store.find_by_id(Collection.POSTS, post_id)
        return post is not None and post.published

    def require_email_unique(self, email: str) -> None:
        """Raises EmailTakenError if any user already has this email."""
        if not self.user_email_unique(email):
            raise EmailTakenError(email)

    def require_user(self, user_id: str) -> User:
        """Return the user, or raise UserNotFoundError."""
        user = self.store.find_by_id(Collection.USERS, user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def require_published_post(self, post_id: str) -> Post:
        """Return the post if it exists and is published.

        Raises:
            PostNotFoundError: If the post does not exist
            PostNotPublishedError: If the post is a draft
        """
        post = self.store.find_by_id(Collection.POSTS, post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        if not post.published:
            raise PostNotPublishedError(post_id)
        return post

    # --- Cascades ---

    def cascade_delete_user(self, user_id: str) -> CascadeResult:
        """Delete a user with everything that depends on it.

        Order:
            1. Find posts authored by the user
            2. Delete comments on each of those posts
            3. Delete those posts
            4. Delete remaining comments authored by the user
            5. Delete the user

        Raises:
            NotFoundError: If the user does not exist
        """
        if not self.user_exists(user_id):
            raise NotFoundError("user", user_id)

        with self.store.transaction():
            posts = self.store.filter_by(Collection.POSTS, lambda p: p.author == user_id)
            removed_comments: list[Comment] = []
            for post in posts:
                removed_comments.extend(self._remove_comments_on(post.id))
            for post in posts:
                self.store.remove_by_id(Collection.POSTS, post.id)

            own = self.store.filter_by(Collection.COMMENTS, lambda c: c.author == user_id)
            for comment in own:
                self.store.remove_by_id(Collection.COMMENTS, comment.id)
            removed_comments.extend(own)

            user = self.store.remove_by_id(Collection.USERS, user_id)

        logger.info(
            f"Deleted user {user_id} with {len(posts)} posts and {len(removed_comments)} comments",
            extra={"user_id": user_id},
        )
        return CascadeResult(removed=user, removed_posts=posts, removed_comments=removed_comments)

    def delete_post(self, post_id: str) -> CascadeResult:
        """Delete a post and every comment attached to it.

        The author is left untouched.

        Raises:
            NotFoundError: If the post does not exist
        """
        if not self.store.contains(Collection.POSTS, post_id):
            raise NotFoundError("post", post_id)

        with self.store.transaction():
            removed_comments = self._remove_comments_on(post_id)
            post = self.store.remove_by_id(Collection.POSTS, post_id)

        logger.info(
            f"Deleted post {post_id} with {len(removed_comments)} comments",
            extra={"post_id": post_id},
        )
        return CascadeResult(removed=post, removed_comments=removed_comments)

    def delete_comment(self, comment_id: str) -> CascadeResult:
        """Delete a single comment.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = self.store.remove_by_id(Collection.COMMENTS, comment_id)
        logger.info(f"Deleted comment {comment_id}", extra={"comment_id": comment_id})
        return CascadeResult(removed=comment)

    def _remove_comments_on(self, post_id: str) -> list[Comment]:
        comments = self.store.filter_by(Collection.COMMENTS, lambda c: c.post == post_id)
        for comment in comments:
            self.store.remove_by_id(Collection.COMMENTS, comment.id)
        return comments
