"""In-memory comment repository."""

import asyncio
from collections.abc import Iterable

from blog.domain.model.comment import Comment
from blog.domain.repository.comment import CommentRepository
from blog.domain.value import Slug


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository."""

    def __init__(self, comments: Iterable[Comment] = ()) -> None:
        self._comments: list[Comment] = list(comments)
        self._lock = asyncio.Lock()

    async def find_by_post(self, post_slug: Slug) -> list[Comment]:
        """Find all comments for an article, newest first."""
        comments = [c for c in self._comments if c.post_slug == post_slug]
        comments.sort(key=lambda c: c.date, reverse=True)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Append a comment."""
        async with self._lock:
            self._comments.append(comment)
        return comment
