"""Unit tests for the article query engine."""

import pytest

from blog.domain.service import article_query
from blog.domain.value import Category
from tests.conftest import make_article


@pytest.fixture
def catalog():
    """Small catalog covering categories, tags, views and featured flags."""
    return [
        make_article(1, "react-hooks", title="Hooks in depth", category=Category.FRONTEND, tags=["React", "Hooks"], views=100, featured=True),
        make_article(2, "node-apis", title="Node APIs", excerpt="Build a REST API", category=Category.BACKEND, tags=["Node.js", "API"], views=300),
        make_article(3, "css-grid", title="CSS Grid", category=Category.FRONTEND, tags=["CSS"], views=300),
        make_article(4, "react-native", title="Mobile apps", category=Category.MOBILE, tags=["React Native"], views=50, featured=True),
        make_article(5, "docker-basics", title="Docker basics", category=Category.DEVOPS, tags=["Docker"], views=300),
        make_article(6, "clean-code", title="Clean Code", category=Category.CARREIRA, tags=["Boas Praticas"], views=10),
    ]


def slugs(articles):
    return [a.slug.root for a in articles]


class TestFindBySlug:
    """Tests for find_by_slug."""

    def test_finds_existing_article(self, catalog):
        article = article_query.find_by_slug(catalog, "css-grid")
        assert article is not None
        assert article.id == 3

    def test_unknown_slug_returns_none(self, catalog):
        assert article_query.find_by_slug(catalog, "nope") is None


class TestSearch:
    """Tests for keyword search."""

    def test_matches_title_case_insensitively(self, catalog):
        assert slugs(article_query.search(catalog, "DOCKER")) == ["docker-basics"]

    def test_matches_excerpt(self, catalog):
        assert slugs(article_query.search(catalog, "rest api")) == ["node-apis"]

    def test_matches_single_tag(self, catalog):
        # both hits come from tags; order is catalog order
        assert slugs(article_query.search(catalog, "react")) == [
            "react-hooks",
            "react-native",
        ]

    def test_does_not_match_across_tag_boundaries(self, catalog):
        assert article_query.search(catalog, "react hooks") == []

    def test_empty_query_matches_nothing(self, catalog):
        assert article_query.search(catalog, "") == []

    def test_returns_only_matching_title(self):
        articles = [
            make_article(1, "react-hooks-guia-definitivo", title="React Hooks: Guia definitivo"),
            make_article(2, "docker-para-desenvolvedores", title="Docker para desenvolvedores"),
        ]
        assert slugs(article_query.search(articles, "react")) == [
            "react-hooks-guia-definitivo"
        ]

    def test_no_match_is_empty_list(self, catalog):
        assert article_query.search(catalog, "kubernetes") == []


class TestFilterByCategory:
    """Tests for category filtering."""

    def test_keeps_only_category(self, catalog):
        result = article_query.filter_by_category(catalog, Category.FRONTEND)
        assert slugs(result) == ["react-hooks", "css-grid"]

    def test_accepts_category_name(self, catalog):
        result = article_query.filter_by_category(catalog, "Mobile")
        assert slugs(result) == ["react-native"]

    @pytest.mark.parametrize("category", ["Todos", None])
    def test_all_sentinel_returns_everything(self, catalog, category):
        result = article_query.filter_by_category(catalog, category)
        assert result == catalog
        assert result is not catalog

    def test_unknown_category_is_empty(self, catalog):
        assert article_query.filter_by_category(catalog, "Games") == []

    @pytest.mark.parametrize("query", ["react", "a", "docker", "zzz"])
    @pytest.mark.parametrize("category", [Category.FRONTEND, Category.MOBILE, "Todos"])
    def test_commutes_with_search(self, catalog, query, category):
        left = article_query.filter_by_category(
            article_query.search(catalog, query), category
        )
        right = article_query.search(
            article_query.filter_by_category(catalog, category), query
        )
        assert left == right


class TestRelated:
    """Tests for related article selection."""

    def test_shares_category_or_tag_in_catalog_order(self, catalog):
        result = article_query.related(catalog, "react-hooks")
        # css-grid shares the category; nothing shares the "React" tag exactly
        assert slugs(result) == ["css-grid"]

    def test_never_includes_reference(self, catalog):
        for article in catalog:
            result = article_query.related(catalog, article.slug.root, limit=10)
            assert article.slug not in [a.slug for a in result]

    def test_every_result_shares_category_or_tag(self, catalog):
        for article in catalog:
            for other in article_query.related(catalog, article.slug.root, limit=10):
                assert other.category == article.category or set(other.tags) & set(
                    article.tags
                )

    def test_respects_limit(self):
        articles = [
            make_article(i, f"post-{i}", category=Category.BACKEND) for i in range(1, 8)
        ]
        result = article_query.related(articles, "post-1", limit=3)
        assert slugs(result) == ["post-2", "post-3", "post-4"]

    def test_tag_overlap_across_categories(self):
        articles = [
            make_article(1, "a", category=Category.FRONTEND, tags=["TypeScript"]),
            make_article(2, "b", category=Category.BACKEND, tags=["TypeScript", "Node"]),
            make_article(3, "c", category=Category.DEVOPS, tags=["Docker"]),
        ]
        assert slugs(article_query.related(articles, "a")) == ["b"]

    def test_no_shared_category_or_tag_is_empty(self):
        articles = [
            make_article(1, "node-api", category=Category.BACKEND, tags=["Node.js", "API"]),
            make_article(2, "react-hooks", category=Category.FRONTEND, tags=["React", "Hooks"]),
        ]
        assert article_query.related(articles, "node-api") == []

    def test_unknown_slug_is_empty(self, catalog):
        assert article_query.related(catalog, "missing") == []


class TestTrending:
    """Tests for trending selection."""

    def test_sorted_by_views_with_stable_ties(self, catalog):
        result = article_query.trending(catalog, limit=4)
        # node-apis, css-grid and docker-basics tie at 300 and keep catalog order
        assert slugs(result) == ["node-apis", "css-grid", "docker-basics", "react-hooks"]

    def test_default_limit_is_five(self, catalog):
        assert len(article_query.trending(catalog)) == 5

    def test_does_not_reorder_input(self, catalog):
        before = list(catalog)
        article_query.trending(catalog)
        assert catalog == before


class TestFeatured:
    """Tests for featured selection."""

    def test_returns_all_featured_in_order(self, catalog):
        assert slugs(article_query.featured(catalog)) == ["react-hooks", "react-native"]


class TestPaginate:
    """Tests for pagination."""

    def test_first_page(self):
        page = article_query.paginate(list(range(12)), 1, 6)
        assert page.items == [0, 1, 2, 3, 4, 5]
        assert page.total == 12
        assert page.total_pages == 2

    def test_partial_last_page(self):
        page = article_query.paginate(list(range(5)), 2, 2)
        assert page.items == [2, 3]
        assert page.total_pages == 3

        last = article_query.paginate(list(range(5)), 3, 2)
        assert last.items == [4]

    def test_last_of_three_pages(self):
        articles = [make_article(i, f"post-{i}") for i in range(1, 16)]

        page = article_query.paginate(articles, 3, 6)

        assert [a.id for a in page.items] == [13, 14, 15]
        assert page.total_pages == 3

    def test_page_past_end_is_empty_with_same_totals(self):
        page = article_query.paginate(list(range(5)), 9, 2)
        assert page.items == []
        assert page.page == 9
        assert page.limit == 2
        assert page.total == 5
        assert page.total_pages == 3

    def test_empty_input(self):
        page = article_query.paginate([], 1, 10)
        assert page.items == []
        assert page.total == 0
        assert page.total_pages == 0

    @pytest.mark.parametrize("page,size", [(1, 0), (1, -3), (0, 5), (-1, 5)])
    def test_non_positive_arguments_raise(self, page, size):
        with pytest.raises(ValueError):
            article_query.paginate([1, 2, 3], page, size)


class TestTaxonomy:
    """Tests for category and tag listings."""

    def test_categories_start_with_all_then_first_seen(self, catalog):
        assert article_query.list_categories(catalog) == [
            "Todos",
            "Frontend",
            "Backend",
            "Mobile",
            "DevOps",
            "Carreira",
        ]

    def test_tags_distinct_and_sorted(self):
        articles = [
            make_article(1, "a", tags=["React", "CSS"]),
            make_article(2, "b", tags=["CSS", "API"]),
        ]
        assert article_query.list_tags(articles) == ["API", "CSS", "React"]
