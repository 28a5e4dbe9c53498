"""Author reference data."""

from blog.domain.model.common import DomainModel


class SocialLinks(DomainModel):
    """Author profile links."""

    github: str = ""
    linkedin: str = ""
    twitter: str = ""


class Author(DomainModel):
    """Author shared by many articles. Read-only reference data."""

    name: str
    avatar: str
    role: str
    bio: str
    social: SocialLinks = SocialLinks()
