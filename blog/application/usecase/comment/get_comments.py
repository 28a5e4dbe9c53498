"""Get comments use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase, CamelModel
from blog.domain.service import CommentService

from .common import CommentItem, to_comment_item


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_slug: str


class GetCommentsResponse(CamelModel):
    """Get comments response."""

    comments: list[CommentItem]


class GetCommentsUseCase(BaseUseCase):
    """Use case for listing an article's comments, newest first."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Article slug

        Returns:
            Comments ordered newest first
        """
        comments = await self.comment_service.get_comments_for_post(request.post_slug)
        return GetCommentsResponse(comments=[to_comment_item(c) for c in comments])
