from typing import Annotated, Literal, Union
from pydantic import BaseModel, Field
from .base import NullDefaultsModel


class MessageContent(BaseModel):
    content: str


class TextMessage(BaseModel):
    msgtype: Literal["text"] = "text"
    text: MessageContent


class MarkdownMessage(BaseModel):
    msgtype: Literal["markdown"] = "markdown"
    markdown: MessageContent


OutboundMessage = Annotated[Union[TextMessage, MarkdownMessage], Field(discriminator="msgtype")]


class NotifierResponse(NullDefaultsModel):
    errcode: int = 0
    errmsg: str = ""

    @property
    def ok(self) -> bool:
        return self.errcode == 0
