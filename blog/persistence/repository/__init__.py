"""Repository implementations.

The blog has no database: every store lives in memory.
"""

from blog.persistence.repository.inmemory import (
    InMemoryArticleRepository,
    InMemoryCommentRepository,
    InMemoryContactMessageRepository,
    InMemorySubscriberRepository,
)

__all__ = [
    "InMemoryArticleRepository",
    "InMemoryCommentRepository",
    "InMemoryContactMessageRepository",
    "InMemorySubscriberRepository",
]
