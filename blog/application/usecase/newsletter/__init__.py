"""Newsletter use cases."""

from .subscribe import SubscribeRequest, SubscribeResponse, SubscribeUseCase

__all__ = [
    "SubscribeRequest",
    "SubscribeResponse",
    "SubscribeUseCase",
]
