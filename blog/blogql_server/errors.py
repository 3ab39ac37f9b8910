"""
Error types for the BlogQL engine.

This module defines all domain exceptions raised by the resolvers:
- BlogQLError: Base exception
- EmailTakenError: Email already used by another user
- UserNotFoundError: Referenced user does not exist
- PostNotFoundError: Referenced post does not exist
- PostNotPublishedError: Referenced post exists but is a draft
- NotFoundError: Delete-by-id miss

Invariants:
    - All errors inherit from BlogQLError
    - Every error carries a stable code for programmatic handling
    - Raising any of these leaves the store unmodified
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class BlogQLError(Exception):
    """Base exception for all BlogQL domain errors.

    Attributes:
        message: Error message
        code: Error code for programmatic handling
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or "BLOGQL_ERROR"
        self.details = details or {}

    @property
    def extensions(self) -> Dict[str, Any]:
        """GraphQL error extensions, picked up when the error is located."""
        return {"code": self.code, "details": self.details}


class EmailTakenError(BlogQLError):
    """A user with this email already exists."""

    def __init__(self, email: str) -> None:
        super().__init__(
            "Email taken",
            code="EMAIL_TAKEN",
            details={"email": email},
        )
        self.email = email


class UserNotFoundError(BlogQLError):
    """Referenced user does not exist.

    Raised when:
    - A post or comment names an unknown author
    - A relationship field points at a deleted user
    """

    def __init__(self, user_id: str) -> None:
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )
        self.user_id = user_id


class PostNotFoundError(BlogQLError):
    """Referenced post does not exist."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            "Post not found",
            code="POST_NOT_FOUND",
            details={"post_id": post_id},
        )
        self.post_id = post_id


class PostNotPublishedError(BlogQLError):
    """Referenced post exists but has not been published.

    Comments may only be attached to published posts.
    """

    def __init__(self, post_id: str) -> None:
        super().__init__(
            "Post not published",
            code="POST_NOT_PUBLISHED",
            details={"post_id": post_id},
        )
        self.post_id = post_id


class NotFoundError(BlogQLError):
    """Entity not found in its collection.

    Raised when:
    - Deleting a user, post or comment by an unknown id
    - Removing an id the store does not hold
    """

    def __init__(
        self,
        resource_type: str,
        resource_id: str,
    ) -> None:
        super().__init__(
            f"{resource_type.capitalize()} not found: {resource_id}",
            code="NOT_FOUND",
            details={
                "resource_type": resource_type,
                "resource_id": resource_id,
            },
        )
        self.resource_type = resource_type
        self.resource_id = resource_id
