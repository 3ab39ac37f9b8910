"""
Store module for BlogQL - entity collections and referential integrity.

This module handles:
- Immutable User, Post and Comment values and their builders
- The in-memory MemoryStore holding the three collections
- The IntegrityEngine enforcing foreign keys and delete cascades

Invariants:
    - Collections keep insertion order
    - All writes that touch more than one entity run in a transaction
    - Create-time checks happen before any write

How to change safely:
    - Add new entity types with a Collection member and a builder
    - Extend cascades in IntegrityEngine, never in the resolvers
"""

from .integrity import CascadeResult, IntegrityEngine
from .memory_store import MemoryStore
from .models import (
    Collection,
    Comment,
    Post,
    User,
    build_comment,
    build_post,
    build_user,
    new_id,
)

__all__ = [
    "CascadeResult",
    "IntegrityEngine",
    "MemoryStore",
    "Collection",
    "Comment",
    "Post",
    "User",
    "build_comment",
    "build_post",
    "build_user",
    "new_id",
]
