"""Comment entity.

Comments are flat, append-only reader notes attached to an article by slug.
"""

from datetime import datetime

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import CommentId, Slug


class Comment(DomainModel):
    """Comment entity."""

    id: CommentId
    post_slug: Slug
    author: str = Field(min_length=2)
    email: str = ""
    content: str = Field(min_length=3)
    date: datetime
    avatar: str = ""
