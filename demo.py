#!/usr/bin/env python3
"""
BlogQL Demo - Shows queries, mutations and cascading deletes.

Runs GraphQL documents in-process against a seeded engine, no server needed.

Run: python demo.py
"""

import asyncio
import json

from blog.blogql_server.api.schema import make_context, schema
from blog.blogql_server.engine import Engine
from blog.blogql_server.store import Collection


async def run(engine, title, document):
    """Execute a document and print the result."""
    print(f"\n=== {title} ===")
    result = await schema.execute(document, context_value=make_context(engine))
    if result.errors:
        for error in result.errors:
            print(f"  error: {error.message} ({error.extensions.get('code')})")
    if result.data is not None:
        print(json.dumps(result.data, indent=2))
    return result


def print_counts(engine):
    counts = {c.value: engine.store.count(c) for c in Collection}
    print(f"  counts: {counts}")


async def main():
    print("=" * 60)
    print("BlogQL Demo")
    print("=" * 60)

    engine = Engine.create(seed=True)
    print_counts(engine)

    await run(engine, "Search users", '{ users(query: "a") { id name posts { title } } }')
    await run(
        engine,
        "Posts with authors and comments",
        "{ posts { title published author { name } comments { text author { name } } } }",
    )
    await run(
        engine,
        "Duplicate email",
        'mutation { createUser(data: {name: "Andy", email: "andrew@example.com"}) { id } }',
    )
    await run(
        engine,
        "Comment on a draft",
        'mutation { createComment(data: {text: "Hi", author: "2", post: "11"}) { id } }',
    )
    await run(
        engine,
        "Create post",
        """
        mutation {
            createPost(data: {title: "Thriller", body: "It's close to midnight", published: true, author: "1"}) {
                id
                author { name }
            }
        }
        """,
    )
    print_counts(engine)

    await run(engine, "Delete user 1 (cascade)", 'mutation { deleteUser(id: "1") { name } }')
    print_counts(engine)

    await run(engine, "Remaining comments", "{ comments { id text post { title } } }")

    print("\n" + "=" * 60)
    print("Demo Complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
