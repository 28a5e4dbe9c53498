"""Newsletter subscription entity."""

from datetime import datetime

from blog.domain.model.common import DomainModel


class NewsletterSubscription(DomainModel):
    """An email address signed up for the newsletter."""

    email: str
    subscribed_at: datetime
