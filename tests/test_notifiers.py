# tests/test_notifiers.py
import pytest
from mr_relay.models.message import MarkdownMessage, TextMessage
from mr_relay.notifiers.base import Notifier


class RecordingNotifier(Notifier):
    def __init__(self):
        self.sent = []

    async def send(self, message):
        self.sent.append(message)


def test_notifier_is_abstract():
    with pytest.raises(TypeError):
        Notifier()


@pytest.mark.asyncio
async def test_send_text_wraps_content():
    notifier = RecordingNotifier()
    await notifier.send_text("hello")

    assert len(notifier.sent) == 1
    assert isinstance(notifier.sent[0], TextMessage)
    assert notifier.sent[0].text.content == "hello"


@pytest.mark.asyncio
async def test_send_markdown_wraps_content():
    notifier = RecordingNotifier()
    await notifier.send_markdown("# hello")

    assert isinstance(notifier.sent[0], MarkdownMessage)
    assert notifier.sent[0].markdown.content == "# hello"
