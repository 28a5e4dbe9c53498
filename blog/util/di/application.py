"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.article import (
    BrowseArticlesUseCase,
    GetArticleUseCase,
    ListArticlesUseCase,
    ListCategoriesUseCase,
    ListFeaturedUseCase,
    ListTagsUseCase,
    ListTrendingUseCase,
)
from blog.application.usecase.comment import CreateCommentUseCase, GetCommentsUseCase
from blog.application.usecase.contact import SendMessageUseCase
from blog.application.usecase.newsletter import SubscribeUseCase
from blog.config import ListingSettings
from blog.domain.service import (
    ArticleService,
    CommentService,
    ContactService,
    NewsletterService,
)
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Article use cases
    @provide(scope=Scope.REQUEST)
    def get_list_articles_use_case(
        self, article_service: ArticleService
    ) -> ListArticlesUseCase:
        """Provide list articles use case."""
        return ListArticlesUseCase(article_service=article_service)

    @provide(scope=Scope.REQUEST)
    def get_get_article_use_case(
        self, article_service: ArticleService
    ) -> GetArticleUseCase:
        """Provide get article use case."""
        return GetArticleUseCase(article_service=article_service)

    @provide(scope=Scope.REQUEST)
    def get_browse_articles_use_case(
        self, article_service: ArticleService, listing_settings: ListingSettings
    ) -> BrowseArticlesUseCase:
        """Provide blog listing page use case."""
        return BrowseArticlesUseCase(
            article_service=article_service, listing_settings=listing_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_list_trending_use_case(
        self, article_service: ArticleService
    ) -> ListTrendingUseCase:
        """Provide trending articles use case."""
        return ListTrendingUseCase(article_service=article_service)

    @provide(scope=Scope.REQUEST)
    def get_list_featured_use_case(
        self, article_service: ArticleService
    ) -> ListFeaturedUseCase:
        """Provide featured articles use case."""
        return ListFeaturedUseCase(article_service=article_service)

    @provide(scope=Scope.REQUEST)
    def get_list_categories_use_case(
        self, article_service: ArticleService
    ) -> ListCategoriesUseCase:
        """Provide list categories use case."""
        return ListCategoriesUseCase(article_service=article_service)

    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, article_service: ArticleService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(article_service=article_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService, article_service: ArticleService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, article_service=article_service
        )

    # Newsletter and contact use cases
    @provide(scope=Scope.REQUEST)
    def get_subscribe_use_case(
        self, newsletter_service: NewsletterService
    ) -> SubscribeUseCase:
        """Provide newsletter subscribe use case."""
        return SubscribeUseCase(newsletter_service=newsletter_service)

    @provide(scope=Scope.REQUEST)
    def get_send_message_use_case(
        self, contact_service: ContactService
    ) -> SendMessageUseCase:
        """Provide contact form use case."""
        return SendMessageUseCase(contact_service=contact_service)
