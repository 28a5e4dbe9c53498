"""Repository interfaces for the blog domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from blog.domain.repository.article import ArticleRepository
from blog.domain.repository.comment import CommentRepository
from blog.domain.repository.contact import ContactMessageRepository
from blog.domain.repository.newsletter import SubscriberRepository

__all__ = [
    "ArticleRepository",
    "CommentRepository",
    "ContactMessageRepository",
    "SubscriberRepository",
]
