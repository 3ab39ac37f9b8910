"""
Unit tests for the referential integrity engine.

Tests cover:
- Create-time checks and guards
- User delete cascade
- Post delete cascade
- Comment delete
- Atomicity of cascades
"""

import pytest

from blog.blogql_server.errors import (
    EmailTakenError,
    NotFoundError,
    PostNotFoundError,
    PostNotPublishedError,
    UserNotFoundError,
)
from blog.blogql_server.seed import demo_store
from blog.blogql_server.store import Collection, IntegrityEngine


class TestIntegrityChecks:
    """Tests for create-time checks."""

    @pytest.fixture
    def integrity(self):
        return IntegrityEngine(demo_store())

    def test_user_email_unique(self, integrity):
        """Email uniqueness is exact-match."""
        assert not integrity.user_email_unique("andrew@example.com")
        assert integrity.user_email_unique("new@example.com")

    def test_user_exists(self, integrity):
        assert integrity.user_exists("1")
        assert not integrity.user_exists("42")

    def test_post_exists_and_published(self, integrity):
        """Drafts and missing posts both fail the check."""
        assert integrity.post_exists_and_published("10")
        assert not integrity.post_exists_and_published("11")
        assert not integrity.post_exists_and_published("99")

    def test_require_email_unique_raises(self, integrity):
        with pytest.raises(EmailTakenError) as exc_info:
            integrity.require_email_unique("sarah@example.com")

        assert exc_info.value.message == "Email taken"
        assert exc_info.value.details == {"email": "sarah@example.com"}

    def test_require_user(self, integrity):
        assert integrity.require_user("3").name == "Mike"

        with pytest.raises(UserNotFoundError):
            integrity.require_user("42")

    def test_require_published_post(self, integrity):
        """Missing and unpublished posts raise distinct errors."""
        assert integrity.require_published_post("12").title == "Black or white"

        with pytest.raises(PostNotFoundError):
            integrity.require_published_post("99")

        with pytest.raises(PostNotPublishedError):
            integrity.require_published_post("11")


class TestUserCascade:
    """Tests for cascade_delete_user."""

    @pytest.fixture
    def store(self):
        return demo_store()

    @pytest.fixture
    def integrity(self, store):
        return IntegrityEngine(store)

    def test_removes_posts_and_comments(self, store, integrity):
        """Deleting a user removes their posts, comments on them, and their comments."""
        result = integrity.cascade_delete_user("1")

        assert result.removed.id == "1"
        assert [p.id for p in result.removed_posts] == ["10"]
        # 101 and 102 were on post 10; 104 is user 1's comment on post 11
        assert sorted(c.id for c in result.removed_comments) == ["101", "102", "104"]

        assert [u.id for u in store.all(Collection.USERS)] == ["2", "3"]
        assert [p.id for p in store.all(Collection.POSTS)] == ["11", "12"]
        assert [c.id for c in store.all(Collection.COMMENTS)] == ["103"]

    def test_no_dangling_references(self, store, integrity):
        """No remaining comment points at the deleted user or their posts."""
        result = integrity.cascade_delete_user("3")
        removed_post_ids = {p.id for p in result.removed_posts}

        for comment in store.all(Collection.COMMENTS):
            assert comment.author != "3"
            assert comment.post not in removed_post_ids
        for post in store.all(Collection.POSTS):
            assert post.author != "3"

    def test_user_without_content(self, store, integrity):
        """A user with no posts or comments is removed alone."""
        store.remove_by_id(Collection.COMMENTS, "103")
        store.remove_by_id(Collection.POSTS, "12")

        result = integrity.cascade_delete_user("2")

        assert result.removed_posts == []
        assert result.removed_comments == []
        assert store.count(Collection.USERS) == 2

    def test_missing_user(self, store, integrity):
        with pytest.raises(NotFoundError):
            integrity.cascade_delete_user("42")

        assert store.count(Collection.USERS) == 3

    def test_failure_rolls_back(self, store, integrity, monkeypatch):
        """A failure midway leaves every collection as it was."""
        original = store.remove_by_id

        def failing(collection, entity_id):
            if collection is Collection.USERS:
                raise RuntimeError("store failure")
            return original(collection, entity_id)

        monkeypatch.setattr(store, "remove_by_id", failing)

        with pytest.raises(RuntimeError):
            integrity.cascade_delete_user("1")

        assert store.count(Collection.USERS) == 3
        assert store.count(Collection.POSTS) == 3
        assert store.count(Collection.COMMENTS) == 4


class TestPostAndCommentDelete:
    """Tests for delete_post and delete_comment."""

    @pytest.fixture
    def store(self):
        return demo_store()

    @pytest.fixture
    def integrity(self, store):
        return IntegrityEngine(store)

    def test_delete_post_removes_its_comments(self, store, integrity):
        """Comments on the post go with it; the author stays."""
        result = integrity.delete_post("10")

        assert result.removed.id == "10"
        assert [c.id for c in result.removed_comments] == ["101", "102"]
        assert [c.id for c in store.all(Collection.COMMENTS)] == ["103", "104"]
        assert store.contains(Collection.USERS, "1")

    def test_delete_post_missing(self, store, integrity):
        with pytest.raises(NotFoundError):
            integrity.delete_post("99")

    def test_delete_comment(self, store, integrity):
        """Only the comment is removed."""
        result = integrity.delete_comment("103")

        assert result.removed.text == "Not bad at all, yourself?"
        assert store.count(Collection.COMMENTS) == 3
        assert store.count(Collection.POSTS) == 3

    def test_delete_comment_missing(self, store, integrity):
        with pytest.raises(NotFoundError):
            integrity.delete_comment("999")
