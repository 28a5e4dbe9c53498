"""Domain value objects for the blog.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import field_validator

from blog.domain.value.common import RootValueObject

# Category selection meaning "no filter"
ALL_CATEGORIES = "Todos"


class Category(str, Enum):
    """Closed set of article categories."""

    FRONTEND = "Frontend"
    BACKEND = "Backend"
    MOBILE = "Mobile"
    DEVOPS = "DevOps"
    SEGURANCA = "Seguranca"
    CARREIRA = "Carreira"
    BANCO_DE_DADOS = "Banco de Dados"
    ARQUITETURA = "Arquitetura"


class Slug(RootValueObject[str]):
    """URL-safe article identifier.

    Must be lowercase, alphanumeric with hyphens, 1-100 characters.
    Examples: 'react-hooks-guia-definitivo', 'docker-para-desenvolvedores'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) > 100:
            raise ValueError("Slug must be 1-100 characters")
        return v
