"""Newsletter subscribe use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase, CamelModel
from blog.domain.service import NewsletterService


class SubscribeRequest(BaseModel):
    """Subscribe request."""

    email: str | None = None


class SubscribeResponse(CamelModel):
    """Subscribe response."""

    message: str


class SubscribeUseCase(BaseUseCase):
    """Use case for signing up to the newsletter."""

    def __init__(self, newsletter_service: NewsletterService) -> None:
        """Initialize subscribe use case.

        Args:
            newsletter_service: Newsletter domain service
        """
        self.newsletter_service = newsletter_service

    async def execute(self, request: SubscribeRequest) -> SubscribeResponse:
        """Execute subscribe flow.

        Raises:
            ValidationError: If the email is invalid
            DuplicateSubscriptionError: If the email is already subscribed
        """
        await self.newsletter_service.subscribe(request.email)
        return SubscribeResponse(
            message="Inscricao realizada com sucesso! Voce recebera nossos melhores artigos."
        )
