"""Comment repository interface."""

from abc import ABC, abstractmethod

from blog.domain.model.comment import Comment
from blog.domain.value import Slug


class CommentRepository(ABC):
    """Append-only repository for comments."""

    @abstractmethod
    async def find_by_post(self, post_slug: Slug) -> list[Comment]:
        """Find all comments for an article, newest first.

        Args:
            post_slug: Slug of the article

        Returns:
            List of comments ordered by date descending
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Append a comment.

        Args:
            comment: The comment to store

        Returns:
            The stored comment
        """
        pass
