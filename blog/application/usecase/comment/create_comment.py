"""Create comment use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase, CamelModel
from blog.domain.error import NotFoundError, ValidationError
from blog.domain.service import ArticleService, CommentService
from blog.domain.service.comment_service import validate_comment

from .common import CommentItem, to_comment_item


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_slug: str | None = None
    author: str | None = None
    email: str | None = None
    content: str | None = None


class CreateCommentResponse(CamelModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on an article."""

    def __init__(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            article_service: Article domain service
        """
        self.comment_service = comment_service
        self.article_service = article_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Validate the submission
        2. Verify the article exists
        3. Store the comment

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            ValidationError: If required fields are missing or too short
            NotFoundError: If no article has the given slug
        """
        reasons = validate_comment(request.post_slug, request.author, request.content)
        if reasons:
            raise ValidationError(reasons)

        article = await self.article_service.get_by_slug(request.post_slug)
        if not article:
            raise NotFoundError("Article", request.post_slug)

        comment = await self.comment_service.create_comment(
            post_slug=request.post_slug,
            author=request.author,
            content=request.content,
            email=request.email,
        )
        return CreateCommentResponse(comment=to_comment_item(comment))
