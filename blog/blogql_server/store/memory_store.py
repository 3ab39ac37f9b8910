"""
In-memory entity store for BlogQL.

This module holds the three ordered collections (users, posts, comments)
that back every query and mutation. It exposes lookup, filter, insert and
remove primitives plus a transaction context used by cascading deletes.

The store is owned by an Engine instance rather than living in module
globals, so any number of independent stores can exist in one process.

Invariants:
    - Iteration order is insertion order
    - insert() never checks uniqueness; callers validate first
    - transaction() restores every collection if its block raises
    - No primitive awaits, so callers on one event loop never observe
      a partially applied write

How to change safely:
    - Keep primitives synchronous; locking lives in the mutation resolver
    - Route every multi-step write through transaction()
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from typing import Any

from ..errors import NotFoundError
from .models import Collection, Comment, Entity, Post, User

logger = logging.getLogger(__name__)

# Resource names used in NotFoundError messages
_RESOURCE_NAMES = {
    Collection.USERS: "user",
    Collection.POSTS: "post",
    Collection.COMMENTS: "comment",
}


class MemoryStore:
    """Process-local store for users, posts and comments.

    Thread safety:
        None. The hosting runtime serializes mutations (see
        MutationResolver); reads are plain list scans.

    Example:
        >>> store = MemoryStore()
        >>> store.insert(Collection.USERS, User(id="1", name="Andrew", email="a@x.com"))
        >>> store.find_by_id(Collection.USERS, "1").name
        'Andrew'
    """

    def __init__(
        self,
        users: Iterable[User] = (),
        posts: Iterable[Post] = (),
        comments: Iterable[Comment] = (),
    ) -> None:
        """Initialize the store, optionally with seed entities.

        Args:
            users: Initial users in insertion order
            posts: Initial posts in insertion order
            comments: Initial comments in insertion order
        """
        self._collections: dict[Collection, list[Any]] = {
            Collection.USERS: list(users),
            Collection.POSTS: list(posts),
            Collection.COMMENTS: list(comments),
        }
        self._in_transaction = False

    def _items(self, collection: Collection) -> list[Any]:
        return self._collections[collection]

    def all(self, collection: Collection) -> list[Any]:
        """Return a copy of a collection in insertion order."""
        return list(self._items(collection))

    def count(self, collection: Collection) -> int:
        """Number of entities in a collection."""
        return len(self._items(collection))

    def find_by_id(self, collection: Collection, entity_id: str) -> Any | None:
        """Find an entity by ID.

        Args:
            collection: Collection to search
            entity_id: Entity identifier

        Returns:
            The entity, or None if not present
        """
        for entity in self._items(collection):
            if entity.id == entity_id:
                return entity
        return None

    def contains(self, collection: Collection, entity_id: str) -> bool:
        """Whether an entity with this ID exists."""
        return self.find_by_id(collection, entity_id) is not None

    def filter_by(
        self,
        collection: Collection,
        predicate: Callable[[Any], bool],
    ) -> list[Any]:
        """Return entities matching a predicate, in insertion order."""
        return [entity for entity in self._items(collection) if predicate(entity)]

    def insert(self, collection: Collection, entity: Entity) -> None:
        """Append an entity to a collection.

        Callers must have validated uniqueness and references beforehand.
        """
        self._items(collection).append(entity)
        logger.debug(
            "Inserted entity",
            extra={"collection": collection.value, "entity_id": entity.id},
        )

    def remove_by_id(self, collection: Collection, entity_id: str) -> Any:
        """Remove an entity by ID.

        Args:
            collection: Collection to remove from
            entity_id: Entity identifier

        Returns:
            The removed entity

        Raises:
            NotFoundError: If no entity has this ID
        """
        items = self._items(collection)
        for index, entity in enumerate(items):
            if entity.id == entity_id:
                del items[index]
                logger.debug(
                    "Removed entity",
                    extra={"collection": collection.value, "entity_id": entity_id},
                )
                return entity
        raise NotFoundError(_RESOURCE_NAMES[collection], entity_id)

    @contextmanager
    def transaction(self) -> Iterator[MemoryStore]:
        """Run a block of writes atomically.

        Snapshots every collection on entry. If the block raises, the
        snapshot is restored and the exception propagates. Nested calls
        join the outermost transaction.

        Yields:
            This store
        """
        if self._in_transaction:
            yield self
            return

        snapshot = {name: list(items) for name, items in self._collections.items()}
        self._in_transaction = True
        try:
            yield self
        except Exception:
            self._collections = snapshot
            logger.warning("Store transaction rolled back")
            raise
        finally:
            self._in_transaction = False
