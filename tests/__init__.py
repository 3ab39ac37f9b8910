"""
BlogQL Test Suite.

This package contains:
- unit/: Unit tests for the store, integrity engine, resolvers and config
- integration/: GraphQL schema and HTTP app tests against in-process engines
"""
