"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.domain.repository import (
    ArticleRepository,
    CommentRepository,
    ContactMessageRepository,
    SubscriberRepository,
)
from blog.domain.service import (
    ArticleService,
    CommentService,
    ContactService,
    NewsletterService,
)
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services are REQUEST-scoped; the repositories they wrap decide how long
    the underlying data lives.
    """

    scope = Scope.REQUEST

    @provide
    def get_article_service(
        self, article_repository: ArticleRepository
    ) -> ArticleService:
        """Provide article domain service."""
        return ArticleService(article_repository=article_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_newsletter_service(
        self, subscriber_repository: SubscriberRepository
    ) -> NewsletterService:
        """Provide newsletter domain service."""
        return NewsletterService(subscriber_repository=subscriber_repository)

    @provide
    def get_contact_service(
        self, contact_repository: ContactMessageRepository
    ) -> ContactService:
        """Provide contact domain service."""
        return ContactService(contact_repository=contact_repository)
