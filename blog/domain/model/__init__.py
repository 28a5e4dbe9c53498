"""Domain model entities for the blog."""

from blog.domain.model.article import Article
from blog.domain.model.author import Author, SocialLinks
from blog.domain.model.comment import Comment
from blog.domain.model.contact import ContactMessage
from blog.domain.model.newsletter import NewsletterSubscription

__all__ = [
    "Article",
    "Author",
    "SocialLinks",
    "Comment",
    "ContactMessage",
    "NewsletterSubscription",
]
