"""Send contact message use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase, CamelModel
from blog.domain.service import ContactService


class SendMessageRequest(BaseModel):
    """Contact form submission."""

    name: str | None = None
    email: str | None = None
    subject: str | None = None
    message: str | None = None


class SendMessageResponse(CamelModel):
    """Send message response."""

    message: str


class SendMessageUseCase(BaseUseCase):
    """Use case for the contact form."""

    def __init__(self, contact_service: ContactService) -> None:
        """Initialize send message use case.

        Args:
            contact_service: Contact domain service
        """
        self.contact_service = contact_service

    async def execute(self, request: SendMessageRequest) -> SendMessageResponse:
        """Execute send message flow.

        Raises:
            ValidationError: With every failed rule
        """
        await self.contact_service.send_message(
            name=request.name,
            email=request.email,
            subject=request.subject,
            message=request.message,
        )
        return SendMessageResponse(
            message="Mensagem enviada com sucesso! Responderei o mais breve possivel."
        )
