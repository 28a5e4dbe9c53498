"""Comment domain service."""

import logfire
from datetime import datetime, timezone
from uuid import uuid4

from blog.domain.error import ValidationError
from blog.domain.model.comment import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, Slug

from .base import Service

MIN_AUTHOR_LENGTH = 2
MIN_CONTENT_LENGTH = 3


def validate_comment(post_slug: str | None, author: str | None, content: str | None) -> list[str]:
    """Check a comment submission.

    Returns:
        Human-readable reasons the submission is rejected (empty if valid)
    """
    if not post_slug or not author or not content:
        return ["Campos obrigatorios: nome e comentario."]

    reasons = []
    if len(author.strip()) < MIN_AUTHOR_LENGTH:
        reasons.append("Nome deve ter pelo menos 2 caracteres.")
    if len(content.strip()) < MIN_CONTENT_LENGTH:
        reasons.append("Comentario muito curto.")
    return reasons


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        post_slug: str,
        author: str,
        content: str,
        email: str | None = None,
    ) -> Comment:
        """Create a comment on an article.

        Author, email and content are stored trimmed.

        Args:
            post_slug: Slug of the article
            author: Commenter's name
            content: Comment text
            email: Commenter's email (optional)

        Returns:
            Created comment

        Raises:
            ValidationError: If required fields are missing or too short
        """
        with logfire.span("comment_service.create_comment", post_slug=post_slug):
            reasons = validate_comment(post_slug, author, content)
            if reasons:
                logfire.warn(
                    "Comment rejected", post_slug=post_slug, reasons=reasons
                )
                raise ValidationError(reasons)

            comment = Comment(
                id=CommentId(uuid4()),
                post_slug=Slug(post_slug),
                author=author.strip(),
                email=(email or "").strip(),
                content=content.strip(),
                date=datetime.now(timezone.utc),
                avatar="",
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_slug=post_slug,
            )
            return saved

    async def get_comments_for_post(self, post_slug: str) -> list[Comment]:
        """Get all comments for an article, newest first.

        Args:
            post_slug: Slug of the article

        Returns:
            List of comments
        """
        with logfire.span(
            "comment_service.get_comments_for_post", post_slug=post_slug
        ):
            comments = await self.comment_repository.find_by_post(Slug(post_slug))
            logfire.info(
                "Comments retrieved for post",
                post_slug=post_slug,
                count=len(comments),
            )
            return comments
