"""
GraphQL schema for BlogQL.

Uses Strawberry's code-first types. Every object type wraps an immutable
store entity; scalar fields are copied from it and relationship fields
are resolved on demand through the Engine found in the request context
under the "engine" key.

    Query:    users, posts, comments, me, post
    Mutation: createUser, deleteUser, createPost, deletePost,
              createComment, deleteComment

Domain errors (BlogQLError) reach the client as GraphQL errors whose
extensions carry the error code and details.

Invariants:
    - `author` and `post` on returned objects are resolved objects, never
      raw foreign keys
    - Relationship fields are resolved lazily per object, without batching
"""

import logging
from typing import Any

import strawberry
from graphql import GraphQLError
from strawberry.types import ExecutionContext, Info

from .. import resolvers as core
from ..engine import Engine
from ..errors import BlogQLError
from ..resolvers import relations
from ..store import Comment, Post, User

logger = logging.getLogger(__name__)


def _engine(info: Info) -> Engine:
    return info.context["engine"]


@strawberry.type(name="User")
class UserType:
    id: strawberry.ID
    name: str
    email: str
    age: int | None
    model: strawberry.Private[User]

    @classmethod
    def from_model(cls, user: User) -> "UserType":
        return cls(
            id=strawberry.ID(user.id),
            name=user.name,
            email=user.email,
            age=user.age,
            model=user,
        )

    @strawberry.field
    def posts(self, info: Info) -> list["PostType"]:
        return [
            PostType.from_model(p) for p in relations.user_posts(self.model, _engine(info).store)
        ]

    @strawberry.field
    def comments(self, info: Info) -> list["CommentType"]:
        return [
            CommentType.from_model(c)
            for c in relations.user_comments(self.model, _engine(info).store)
        ]


@strawberry.type(name="Post")
class PostType:
    id: strawberry.ID
    title: str
    body: str
    published: bool
    model: strawberry.Private[Post]

    @classmethod
    def from_model(cls, post: Post) -> "PostType":
        return cls(
            id=strawberry.ID(post.id),
            title=post.title,
            body=post.body,
            published=post.published,
            model=post,
        )

    @strawberry.field
    def author(self, info: Info) -> UserType:
        return UserType.from_model(relations.post_author(self.model, _engine(info).store))

    @strawberry.field
    def comments(self, info: Info) -> list["CommentType"]:
        return [
            CommentType.from_model(c)
            for c in relations.post_comments(self.model, _engine(info).store)
        ]


@strawberry.type(name="Comment")
class CommentType:
    id: strawberry.ID
    text: str
    model: strawberry.Private[Comment]

    @classmethod
    def from_model(cls, comment: Comment) -> "CommentType":
        return cls(id=strawberry.ID(comment.id), text=comment.text, model=comment)

    @strawberry.field
    def author(self, info: Info) -> UserType:
        return UserType.from_model(relations.comment_author(self.model, _engine(info).store))

    @strawberry.field
    def post(self, info: Info) -> PostType | None:
        post = relations.comment_post(self.model, _engine(info).store)
        return PostType.from_model(post) if post is not None else None


@strawberry.input(name="CreateUserInput")
class CreateUserInput:
    name: str
    email: str
    age: int | None = None


@strawberry.input(name="CreatePostInput")
class CreatePostInput:
    title: str
    body: str
    published: bool
    author: strawberry.ID


@strawberry.input(name="CreateCommentInput")
class CreateCommentInput:
    text: str
    author: strawberry.ID
    post: strawberry.ID


@strawberry.type
class Query:
    @strawberry.field
    async def users(self, info: Info, query: str | None = None) -> list[UserType]:
        users = await _engine(info).queries.list_users(query)
        return [UserType.from_model(u) for u in users]

    @strawberry.field
    async def posts(self, info: Info, query: str | None = None) -> list[PostType]:
        posts = await _engine(info).queries.list_posts(query)
        return [PostType.from_model(p) for p in posts]

    @strawberry.field
    async def comments(self, info: Info) -> list[CommentType]:
        comments = await _engine(info).queries.list_comments()
        return [CommentType.from_model(c) for c in comments]

    @strawberry.field
    async def me(self, info: Info) -> UserType:
        return UserType.from_model(await _engine(info).queries.me())

    @strawberry.field
    async def post(self, info: Info) -> PostType:
        return PostType.from_model(await _engine(info).queries.post())


@strawberry.type
class Mutation:
    @strawberry.mutation(name="createUser")
    async def create_user(self, info: Info, data: CreateUserInput) -> UserType:
        user = await _engine(info).mutations.create_user(
            core.CreateUserInput(name=data.name, email=data.email, age=data.age)
        )
        return UserType.from_model(user)

    @strawberry.mutation(name="deleteUser")
    async def delete_user(self, info: Info, id: strawberry.ID) -> UserType:
        return UserType.from_model(await _engine(info).mutations.delete_user(str(id)))

    @strawberry.mutation(name="createPost")
    async def create_post(self, info: Info, data: CreatePostInput) -> PostType:
        post = await _engine(info).mutations.create_post(
            core.CreatePostInput(
                title=data.title,
                body=data.body,
                published=data.published,
                author=str(data.author),
            )
        )
        return PostType.from_model(post)

    @strawberry.mutation(name="deletePost")
    async def delete_post(self, info: Info, id: strawberry.ID) -> PostType:
        return PostType.from_model(await _engine(info).mutations.delete_post(str(id)))

    @strawberry.mutation(name="createComment")
    async def create_comment(self, info: Info, data: CreateCommentInput) -> CommentType:
        comment = await _engine(info).mutations.create_comment(
            core.CreateCommentInput(text=data.text, author=str(data.author), post=str(data.post))
        )
        return CommentType.from_model(comment)

    @strawberry.mutation(name="deleteComment")
    async def delete_comment(self, info: Info, id: strawberry.ID) -> CommentType:
        return CommentType.from_model(await _engine(info).mutations.delete_comment(str(id)))


class BlogSchema(strawberry.Schema):
    """Schema that logs domain errors without tracebacks."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        unexpected = []
        for error in errors:
            if isinstance(error.original_error, BlogQLError):
                logger.warning(
                    f"Request failed: {error.message}",
                    extra={"code": error.original_error.code, "path": error.path},
                )
            else:
                unexpected.append(error)
        if unexpected:
            super().process_errors(unexpected, execution_context)


schema = BlogSchema(query=Query, mutation=Mutation)


def make_context(engine: Engine, **extra: Any) -> dict:
    """Build the execution context for a request against `engine`."""
    return {"engine": engine, **extra}
