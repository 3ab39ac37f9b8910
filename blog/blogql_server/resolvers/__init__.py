"""
Resolver layer for BlogQL.

- QueryResolver: searches and listings
- MutationResolver: validated creates and cascading deletes
- relations: per-field relationship lookups (post.author, user.posts, ...)
"""

from . import relations
from .mutation import (
    CreateCommentInput,
    CreatePostInput,
    CreateUserInput,
    MutationResolver,
)
from .query import ME_PLACEHOLDER, POST_PLACEHOLDER, QueryResolver

__all__ = [
    "relations",
    "CreateCommentInput",
    "CreatePostInput",
    "CreateUserInput",
    "MutationResolver",
    "ME_PLACEHOLDER",
    "POST_PLACEHOLDER",
    "QueryResolver",
]
