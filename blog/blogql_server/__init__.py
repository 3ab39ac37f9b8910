"""
BlogQL Server - in-process GraphQL engine over users, posts and comments.

This package implements a small graph-query service built on:
- Three foreign-key-linked in-memory collections (users, posts, comments)
- A referential integrity engine with cascading deletes
- Query and mutation resolvers exposed through a Strawberry GraphQL schema
- A FastAPI app serving the schema over HTTP

Architecture:
    ┌─────────────┐     ┌───────────────┐     ┌──────────────────┐
    │   Client    │────▶│ FastAPI +     │────▶│ Query / Mutation │
    │  (GraphQL)  │     │ GraphQLRouter │     │    Resolvers     │
    └─────────────┘     └───────────────┘     └────────┬─────────┘
                                                       │
                              ┌────────────────────────┼
                              ▼                        ▼
                      ┌───────────────┐        ┌───────────────┐
                      │   Integrity   │───────▶│  MemoryStore  │
                      │    Engine     │        │ users/posts/  │
                      └───────────────┘        │   comments    │
                                               └───────────────┘

Invariants:
    - Foreign keys are checked at creation time only
    - Deleting a user removes their posts, comments on those posts,
      and their own comments
    - Deleting a post removes the comments attached to it
    - A failed mutation never leaves a partial write behind

How to change safely:
    - Add schema fields without renaming existing ones
    - Keep validation ahead of every store write
"""

from ._version import __version__

__all__ = ["__version__"]
