"""In-memory newsletter subscriber repository."""

import asyncio

from blog.domain.model.newsletter import NewsletterSubscription
from blog.domain.repository.newsletter import SubscriberRepository


class InMemorySubscriberRepository(SubscriberRepository):
    """In-memory implementation of SubscriberRepository, keyed by email."""

    def __init__(self) -> None:
        self._subscriptions: dict[str, NewsletterSubscription] = {}
        self._lock = asyncio.Lock()

    async def add(self, subscription: NewsletterSubscription) -> bool:
        """Store a subscription unless its email is already present."""
        async with self._lock:
            if subscription.email in self._subscriptions:
                return False
            self._subscriptions[subscription.email] = subscription
            return True

    async def count(self) -> int:
        """Count subscriptions."""
        return len(self._subscriptions)
