"""
Demo data for BlogQL.

Three users, three posts (one unpublished) and four comments, linked by
fixed IDs so example queries are reproducible.
"""

from .store import Comment, MemoryStore, Post, User

DEMO_USERS = (
    User(id="1", name="Andrew", email="andrew@example.com", age=27),
    User(id="2", name="Sarah", email="sarah@example.com"),
    User(id="3", name="Mike", email="mike@example.com"),
)

DEMO_POSTS = (
    Post(
        id="10",
        title="Dangerous",
        body="You playing with a smooth criminal..",
        published=True,
        author="1",
    ),
    Post(
        id="11",
        title="Leave me alone",
        body="Just stop dogging me around..",
        published=False,
        author="3",
    ),
    Post(
        id="12",
        title="Black or white",
        body="It don't matter if you're black or white..",
        published=True,
        author="2",
    ),
)

DEMO_COMMENTS = (
    Comment(id="101", text="How's are you today?", author="3", post="10"),
    Comment(id="102", text="I'm fine, thank you.  How are you?", author="1", post="10"),
    Comment(id="103", text="Not bad at all, yourself?", author="2", post="11"),
    Comment(id="104", text="Good, good.  Lovely weather, isn't it", author="1", post="11"),
)


def demo_store() -> MemoryStore:
    """Build a fresh store holding the demo data."""
    return MemoryStore(users=DEMO_USERS, posts=DEMO_POSTS, comments=DEMO_COMMENTS)
