"""Contact form routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from blog.application.usecase.contact import (
    SendMessageRequest,
    SendMessageResponse,
    SendMessageUseCase,
)
from blog.domain.error import ValidationError

router = APIRouter(prefix="/contact", tags=["contact"], route_class=DishkaRoute)


@router.post("", response_model=SendMessageResponse)
async def send_message(
    request: SendMessageRequest,
    send_message_use_case: FromDishka[SendMessageUseCase],
) -> SendMessageResponse:
    """Submit the contact form.

    Raises:
        HTTPException: 400 listing every failed field rule
    """
    try:
        return await send_message_use_case.execute(request)
    except ValidationError as e:
        logfire.warn("Contact message rejected", reasons=e.reasons)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.reasons,
        )
    except Exception as e:
        logfire.error("Unexpected error sending contact message", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Erro ao enviar mensagem",
        )
