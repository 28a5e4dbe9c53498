"""Contact form domain service."""

import logfire
from datetime import datetime, timezone

from blog.domain.error import ValidationError
from blog.domain.model.contact import ContactMessage
from blog.domain.repository import ContactMessageRepository

from .base import Service


def validate_contact(
    name: str | None,
    email: str | None,
    subject: str | None,
    message: str | None,
) -> list[str]:
    """Check a contact form submission, collecting every failure."""
    reasons = []
    if not name or len(name.strip()) < 2:
        reasons.append("Nome deve ter pelo menos 2 caracteres.")
    if not email or "@" not in email:
        reasons.append("Email invalido.")
    if not subject or len(subject.strip()) < 3:
        reasons.append("Assunto deve ter pelo menos 3 caracteres.")
    if not message or len(message.strip()) < 10:
        reasons.append("Mensagem deve ter pelo menos 10 caracteres.")
    return reasons


class ContactService(Service):
    """Domain service for contact form messages."""

    def __init__(self, contact_repository: ContactMessageRepository) -> None:
        """Initialize contact service.

        Args:
            contact_repository: Contact message repository
        """
        self.contact_repository = contact_repository

    async def send_message(
        self,
        name: str | None,
        email: str | None,
        subject: str | None,
        message: str | None,
    ) -> ContactMessage:
        """Validate and store a contact message.

        Raises:
            ValidationError: With every failed rule
        """
        with logfire.span("contact_service.send_message"):
            reasons = validate_contact(name, email, subject, message)
            if reasons:
                logfire.warn("Contact message rejected", reasons=reasons)
                raise ValidationError(reasons)

            saved = await self.contact_repository.save(
                ContactMessage(
                    name=name.strip(),
                    email=email.strip(),
                    subject=subject.strip(),
                    message=message.strip(),
                    sent_at=datetime.now(timezone.utc),
                )
            )
            total = await self.contact_repository.count()
            logfire.info(
                "Contact message stored", subject=saved.subject, messages=total
            )
            return saved
