"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Submitted data failed one or more validation rules.

    Carries every human-readable reason so callers can show them together.
    """

    def __init__(self, reasons: list[str]):
        self.reasons = reasons
        super().__init__(" ".join(reasons))


class DuplicateSubscriptionError(DomainError):
    """Raised when an email is already subscribed to the newsletter."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email already subscribed: {email}")


class DuplicateSlugError(DomainError):
    """Raised when an article catalog contains the same slug twice."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Duplicate article slug: {slug}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
