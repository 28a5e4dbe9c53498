"""Unit tests for SubscribeUseCase."""

import pytest

from blog.application.usecase.newsletter import SubscribeRequest, SubscribeUseCase
from blog.domain.error import DuplicateSubscriptionError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_subscribe_then_duplicate(unit_env):
    use_case = await unit_env.get(SubscribeUseCase)

    response = await use_case.execute(SubscribeRequest(email="dev@example.com"))
    assert response.message.startswith("Inscricao realizada com sucesso!")

    with pytest.raises(DuplicateSubscriptionError):
        await use_case.execute(SubscribeRequest(email="dev@example.com"))
