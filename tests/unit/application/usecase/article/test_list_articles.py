"""Unit tests for ListArticlesUseCase and GetArticleUseCase."""

import pytest

from blog.application.usecase.article import (
    GetArticleRequest,
    GetArticleUseCase,
    ListArticlesRequest,
    ListArticlesUseCase,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListArticlesUseCase:
    """Tests for the list endpoint flow."""

    @pytest.mark.asyncio
    async def test_default_page(self, unit_env):
        use_case = await unit_env.get(ListArticlesUseCase)

        response = await use_case.execute(ListArticlesRequest())

        assert len(response.posts) == 10
        assert response.pagination.total == 15
        assert response.pagination.total_pages == 2

    @pytest.mark.asyncio
    async def test_filtered_total_covers_whole_catalog(self, unit_env):
        """Filtering happens before pagination."""
        use_case = await unit_env.get(ListArticlesUseCase)

        response = await use_case.execute(
            ListArticlesRequest(category="Frontend", page=2, limit=2)
        )

        assert [p.id for p in response.posts] == [10, 11]
        assert response.pagination.total == 5
        assert response.pagination.total_pages == 3

    @pytest.mark.asyncio
    async def test_page_past_end(self, unit_env):
        use_case = await unit_env.get(ListArticlesUseCase)

        response = await use_case.execute(ListArticlesRequest(page=5, limit=10))

        assert response.posts == []
        assert response.pagination.page == 5
        assert response.pagination.total == 15

    @pytest.mark.asyncio
    async def test_serializes_camel_case(self, unit_env):
        use_case = await unit_env.get(ListArticlesUseCase)

        response = await use_case.execute(ListArticlesRequest(limit=1))
        payload = response.model_dump(by_alias=True)

        assert payload["pagination"]["totalPages"] == 15
        assert "readTime" in payload["posts"][0]
        assert "content" not in payload["posts"][0]


class TestGetArticleUseCase:
    """Tests for the detail flow."""

    @pytest.mark.asyncio
    async def test_article_with_related(self, unit_env):
        use_case = await unit_env.get(GetArticleUseCase)

        response = await use_case.execute(
            GetArticleRequest(slug="tailwind-css-guia-completo")
        )

        assert response is not None
        assert response.post.id == 3
        assert response.post.content
        assert [p.id for p in response.related_posts] == [7, 10, 11]

    @pytest.mark.asyncio
    async def test_missing_article(self, unit_env):
        use_case = await unit_env.get(GetArticleUseCase)

        assert await use_case.execute(GetArticleRequest(slug="nao-existe")) is None
