from .message import (
    MarkdownMessage,
    MessageContent,
    NotifierResponse,
    OutboundMessage,
    TextMessage,
)
from .webhook import GitLabMREvent, MRAction

__all__ = [
    "MarkdownMessage",
    "MessageContent",
    "NotifierResponse",
    "OutboundMessage",
    "TextMessage",
    "GitLabMREvent",
    "MRAction",
]
