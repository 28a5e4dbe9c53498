"""Strongly typed identifiers for blog entities."""

from typing import NewType
from uuid import UUID

ArticleId = NewType("ArticleId", int)
CommentId = NewType("CommentId", UUID)
