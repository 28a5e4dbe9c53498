"""Article catalog loading.

The catalog comes from the bundled seed unless ``content.articles_file``
points at a JSON document of the form::

    {"author": {...}, "articles": [{...}, ...]}
"""

import json
from pathlib import Path

import logfire

from blog.config import ContentSettings
from blog.domain.error import DuplicateSlugError
from blog.domain.model import Article, Comment
from blog.persistence import seed
from blog.persistence.mappers import (
    record_to_article,
    record_to_author,
    record_to_comment,
)
from blog.util.error import ConfigurationError


def build_catalog(records: list[dict], author_record: dict) -> list[Article]:
    """Map records to articles, rejecting duplicate slugs.

    Raises:
        DuplicateSlugError: If two records share a slug
    """
    author = record_to_author(author_record)
    articles: list[Article] = []
    seen: set[str] = set()
    for record in records:
        article = record_to_article(record, author)
        if article.slug.root in seen:
            raise DuplicateSlugError(article.slug.root)
        seen.add(article.slug.root)
        articles.append(article)
    return articles


def read_articles_file(path: Path) -> tuple[list[dict], dict]:
    """Read article and author records from a JSON file.

    Raises:
        ConfigurationError: If the file is missing or malformed
    """
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
        return document["articles"], document["author"]
    except (OSError, ValueError, KeyError, TypeError) as e:
        raise ConfigurationError(f"Cannot read articles file {path}: {e}") from e


def load_catalog(content: ContentSettings) -> list[Article]:
    """Load the article catalog configured in ``content``."""
    if content.articles_file is not None:
        records, author_record = read_articles_file(content.articles_file)
        source = str(content.articles_file)
    else:
        records, author_record = seed.ARTICLES, seed.AUTHOR
        source = "seed"

    with logfire.span("loader.load_catalog", source=source):
        articles = build_catalog(records, author_record)
        logfire.info("Article catalog loaded", source=source, count=len(articles))
        return articles


def load_seed_comments() -> list[Comment]:
    """Demo comments bundled with the seed catalog."""
    return [record_to_comment(record) for record in seed.COMMENTS]
