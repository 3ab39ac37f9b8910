"""
Entity models for the BlogQL store.

Users, posts and comments are immutable values linked by foreign-key
fields rather than containment:

    User ◀── Post.author
    User ◀── Comment.author
    Post ◀── Comment.post

Builders enumerate required and optional fields, assign a generated ID
and return a frozen instance. Nothing else constructs entities with a
fresh ID.

Invariants:
    - Entities are never mutated in place
    - IDs come from the injected id factory (uuid4 strings by default)
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

IdFactory = Callable[[], str]


def new_id() -> str:
    """Generate a globally unique opaque ID."""
    return str(uuid.uuid4())


class Collection(Enum):
    """The three entity collections held by the store."""

    USERS = "users"
    POSTS = "posts"
    COMMENTS = "comments"


@dataclass(frozen=True)
class User:
    """A registered user.

    Attributes:
        id: Unique user identifier
        name: Display name
        email: Email address, unique across users
        age: Optional age in years
    """

    id: str
    name: str
    email: str
    age: int | None = None


@dataclass(frozen=True)
class Post:
    """A blog post.

    Attributes:
        id: Unique post identifier
        title: Post title
        body: Post body text
        published: Whether the post accepts comments
        author: ID of the authoring user
    """

    id: str
    title: str
    body: str
    published: bool
    author: str


@dataclass(frozen=True)
class Comment:
    """A comment left by a user on a post.

    Attributes:
        id: Unique comment identifier
        text: Comment text
        author: ID of the commenting user
        post: ID of the post commented on
    """

    id: str
    text: str
    author: str
    post: str


Entity = User | Post | Comment


def build_user(
    name: str,
    email: str,
    age: int | None = None,
    id_factory: IdFactory = new_id,
) -> User:
    return User(id=id_factory(), name=name, email=email, age=age)


def build_post(
    title: str,
    body: str,
    published: bool,
    author: str,
    id_factory: IdFactory = new_id,
) -> Post:
    return Post(
        id=id_factory(),
        title=title,
        body=body,
        published=published,
        author=author,
    )


def build_comment(
    text: str,
    author: str,
    post: str,
    id_factory: IdFactory = new_id,
) -> Comment:
    return Comment(id=id_factory(), text=text, author=author, post=post)
