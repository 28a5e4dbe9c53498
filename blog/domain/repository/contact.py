"""Contact message repository interface."""

from abc import ABC, abstractmethod

from blog.domain.model.contact import ContactMessage


class ContactMessageRepository(ABC):
    """Append-only repository for contact form messages."""

    @abstractmethod
    async def save(self, message: ContactMessage) -> ContactMessage:
        """Append a message."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count stored messages."""
        pass
