"""In-memory contact message repository."""

import asyncio

from blog.domain.model.contact import ContactMessage
from blog.domain.repository.contact import ContactMessageRepository


class InMemoryContactMessageRepository(ContactMessageRepository):
    """In-memory implementation of ContactMessageRepository."""

    def __init__(self) -> None:
        self._messages: list[ContactMessage] = []
        self._lock = asyncio.Lock()

    async def save(self, message: ContactMessage) -> ContactMessage:
        """Append a message."""
        async with self._lock:
            self._messages.append(message)
        return message

    async def count(self) -> int:
        """Count stored messages."""
        return len(self._messages)
