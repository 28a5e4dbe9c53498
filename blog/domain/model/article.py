"""Article aggregate.

Articles are loaded once when the catalog is built and never mutated
afterwards. The slug is the only stable external identifier.
"""

import datetime

from pydantic import Field

from blog.domain.model.author import Author
from blog.domain.model.common import DomainModel
from blog.domain.value import ArticleId, Category, Slug


class Article(DomainModel):
    """A single blog entry.

    ``content`` is an opaque rich-text blob; nothing in the domain reads it.
    ``tags`` keep their original order and are not de-duplicated.
    """

    id: ArticleId
    slug: Slug
    title: str = Field(min_length=1)
    excerpt: str
    content: str
    date: datetime.date
    read_time: str = ""
    category: Category
    cover_image: str = ""
    views: int = Field(default=0, ge=0)
    likes: int = Field(default=0, ge=0)
    tags: list[str] = Field(default_factory=list)
    author: Author
    featured: bool = False
