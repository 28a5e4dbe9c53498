"""Contact form message entity."""

from datetime import datetime

from blog.domain.model.common import DomainModel


class ContactMessage(DomainModel):
    """Message sent through the contact form."""

    name: str
    email: str
    subject: str
    message: str
    sent_at: datetime
