"""Unit tests for SendMessageUseCase."""

import pytest

from blog.application.usecase.contact import SendMessageRequest, SendMessageUseCase
from blog.domain.error import ValidationError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_send_message(unit_env):
    use_case = await unit_env.get(SendMessageUseCase)

    response = await use_case.execute(
        SendMessageRequest(
            name="Ana",
            email="ana@example.com",
            subject="Proposta",
            message="Vamos conversar sobre um projeto?",
        )
    )

    assert response.message.startswith("Mensagem enviada com sucesso!")


@pytest.mark.asyncio
async def test_send_message_reports_all_reasons(unit_env):
    use_case = await unit_env.get(SendMessageUseCase)

    with pytest.raises(ValidationError) as exc_info:
        await use_case.execute(SendMessageRequest(name="A"))

    assert len(exc_info.value.reasons) == 4
