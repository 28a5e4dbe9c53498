"""In-memory repository implementations."""

from .article import InMemoryArticleRepository
from .comment import InMemoryCommentRepository
from .contact import InMemoryContactMessageRepository
from .newsletter import InMemorySubscriberRepository

__all__ = [
    "InMemoryArticleRepository",
    "InMemoryCommentRepository",
    "InMemoryContactMessageRepository",
    "InMemorySubscriberRepository",
]
