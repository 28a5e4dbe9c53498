"""Newsletter subscriber repository interface."""

from abc import ABC, abstractmethod

from blog.domain.model.newsletter import NewsletterSubscription


class SubscriberRepository(ABC):
    """Append-only repository for newsletter subscriptions."""

    @abstractmethod
    async def add(self, subscription: NewsletterSubscription) -> bool:
        """Store a subscription unless its email is already present.

        Args:
            subscription: The subscription to store

        Returns:
            True if stored, False if the email was already subscribed
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count subscriptions."""
        pass
