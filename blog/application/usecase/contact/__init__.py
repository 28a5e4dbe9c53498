"""Contact use cases."""

from .send_message import SendMessageRequest, SendMessageResponse, SendMessageUseCase

__all__ = [
    "SendMessageRequest",
    "SendMessageResponse",
    "SendMessageUseCase",
]
