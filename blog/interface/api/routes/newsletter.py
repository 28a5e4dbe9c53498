"""Newsletter routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from blog.application.usecase.newsletter import (
    SubscribeRequest,
    SubscribeResponse,
    SubscribeUseCase,
)
from blog.domain.error import DuplicateSubscriptionError, ValidationError

router = APIRouter(prefix="/newsletter", tags=["newsletter"], route_class=DishkaRoute)


@router.post("", response_model=SubscribeResponse)
async def subscribe(
    request: SubscribeRequest,
    subscribe_use_case: FromDishka[SubscribeUseCase],
) -> SubscribeResponse:
    """Subscribe an email to the newsletter.

    Raises:
        HTTPException: 400 for an invalid email, 409 if already subscribed
    """
    try:
        return await subscribe_use_case.execute(request)
    except ValidationError as e:
        logfire.warn("Newsletter signup rejected", reasons=e.reasons)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.reasons,
        )
    except DuplicateSubscriptionError:
        logfire.warn("Duplicate newsletter signup")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Este email ja esta inscrito.",
        )
    except Exception as e:
        logfire.error("Unexpected error subscribing", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Erro ao processar inscricao",
        )
