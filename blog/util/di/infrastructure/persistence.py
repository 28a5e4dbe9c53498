"""Persistence infrastructure providers."""

from dishka import Scope, provide
import logfire

from blog.config import ContentSettings
from blog.domain.repository import (
    ArticleRepository,
    CommentRepository,
    ContactMessageRepository,
    SubscriberRepository,
)
from blog.persistence.loader import load_catalog, load_seed_comments
from blog.persistence.repository.inmemory import (
    InMemoryArticleRepository,
    InMemoryCommentRepository,
    InMemoryContactMessageRepository,
    InMemorySubscriberRepository,
)
from blog.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider.

    Stores live for the whole process: the catalog is loaded once at
    start-up and comments, subscribers and contact messages accumulate
    until restart.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_article_repository(self, content: ContentSettings) -> ArticleRepository:
        """Provide the article catalog loaded from seed or file."""
        return InMemoryArticleRepository(load_catalog(content))

    @provide(scope=Scope.APP)
    def get_comment_repository(self, content: ContentSettings) -> CommentRepository:
        """Provide the comment store, optionally seeded with demo comments."""
        comments = load_seed_comments() if content.seed_comments else []
        logfire.info("Comment store ready", seeded=len(comments))
        return InMemoryCommentRepository(comments)

    @provide(scope=Scope.APP)
    def get_subscriber_repository(self) -> SubscriberRepository:
        """Provide the newsletter subscriber store."""
        return InMemorySubscriberRepository()

    @provide(scope=Scope.APP)
    def get_contact_repository(self) -> ContactMessageRepository:
        """Provide the contact message store."""
        return InMemoryContactMessageRepository()
