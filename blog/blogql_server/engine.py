"""
Engine wiring for BlogQL.

An Engine owns one MemoryStore and the resolvers that operate on it.
It is the object handed to the GraphQL layer through the request
context, so several engines can live side by side (one per app, one per
test) without sharing state.

Example:
    >>> engine = Engine.create(seed=True)
    >>> await engine.queries.list_users("sarah")
    [User(id='2', name='Sarah', email='sarah@example.com', age=None)]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .resolvers import MutationResolver, QueryResolver
from .seed import demo_store
from .store import IntegrityEngine, MemoryStore, new_id
from .store.models import IdFactory

logger = logging.getLogger(__name__)


@dataclass
class Engine:
    """Store plus resolvers bound to it.

    Attributes:
        store: Backing entity store
        integrity: Foreign-key checks and cascades
        queries: Read resolvers
        mutations: Write resolvers
    """

    store: MemoryStore
    integrity: IntegrityEngine
    queries: QueryResolver
    mutations: MutationResolver

    @classmethod
    def create(
        cls,
        store: MemoryStore | None = None,
        seed: bool = False,
        id_factory: IdFactory = new_id,
    ) -> Engine:
        """Build an engine.

        Args:
            store: Existing store to wrap (a new one is created if omitted)
            seed: Load the demo data when no store is given
            id_factory: ID generator for created entities

        Returns:
            Engine instance
        """
        if store is None:
            store = demo_store() if seed else MemoryStore()

        integrity = IntegrityEngine(store)
        engine = cls(
            store=store,
            integrity=integrity,
            queries=QueryResolver(store),
            mutations=MutationResolver(store, integrity, id_factory=id_factory),
        )
        logger.debug("Engine created", extra={"seeded": seed})
        return engine
