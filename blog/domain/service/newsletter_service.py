"""Newsletter domain service."""

import logfire
from datetime import datetime, timezone

from blog.domain.error import DuplicateSubscriptionError, ValidationError
from blog.domain.model.newsletter import NewsletterSubscription
from blog.domain.repository import SubscriberRepository

from .base import Service


class NewsletterService(Service):
    """Domain service for newsletter signups."""

    def __init__(self, subscriber_repository: SubscriberRepository) -> None:
        """Initialize newsletter service.

        Args:
            subscriber_repository: Subscriber repository
        """
        self.subscriber_repository = subscriber_repository

    async def subscribe(self, email: str | None) -> NewsletterSubscription:
        """Subscribe an email address.

        Args:
            email: Address to subscribe

        Returns:
            Stored subscription

        Raises:
            ValidationError: If the email is missing or has no "@"
            DuplicateSubscriptionError: If the email is already subscribed
        """
        with logfire.span("newsletter_service.subscribe"):
            if not email or "@" not in email:
                logfire.warn("Newsletter signup rejected: invalid email")
                raise ValidationError(["Email invalido."])

            subscription = NewsletterSubscription(
                email=email,
                subscribed_at=datetime.now(timezone.utc),
            )
            if not await self.subscriber_repository.add(subscription):
                logfire.warn("Newsletter signup rejected: duplicate email")
                raise DuplicateSubscriptionError(email)

            total = await self.subscriber_repository.count()
            logfire.info("Newsletter subscription created", subscribers=total)
            return subscription
