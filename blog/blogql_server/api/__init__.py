"""
API module for BlogQL.

This module provides:
- The Strawberry GraphQL schema (types, queries, mutations)
- The FastAPI app factory serving it over HTTP

Invariants:
    - Field names and types on the schema are the wire contract
    - Resolvers reach data only through the Engine in the request context

How to change safely:
    - Add fields; never rename or retype existing ones
    - Keep domain logic in the resolvers package, not here
"""

from .app import create_app
from .schema import BlogSchema, make_context, schema

__all__ = ["create_app", "BlogSchema", "make_context", "schema"]
