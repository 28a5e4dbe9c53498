"""Domain services."""

from .article_service import ArticleService
from .base import Service
from .comment_service import CommentService
from .contact_service import ContactService
from .newsletter_service import NewsletterService

__all__ = [
    "ArticleService",
    "CommentService",
    "ContactService",
    "NewsletterService",
    "Service",
]
