"""Comment response item."""

from datetime import datetime

from blog.application.usecase.base import CamelModel
from blog.domain.model import Comment


class CommentItem(CamelModel):
    """Comment in response."""

    id: str
    post_slug: str
    author: str
    email: str
    content: str
    date: datetime
    avatar: str


def to_comment_item(comment: Comment) -> CommentItem:
    return CommentItem(
        id=str(comment.id),
        post_slug=str(comment.post_slug),
        author=comment.author,
        email=comment.email,
        content=comment.content,
        date=comment.date,
        avatar=comment.avatar,
    )
