# src/mr_relay/notifiers/wecom.py
import logging
import httpx
from pydantic import ValidationError
from .base import Notifier
from mr_relay.config import WECOM_WEBHOOK_URL
from mr_relay.errors import DeliveryError
from mr_relay.models.message import NotifierResponse, OutboundMessage


logger = logging.getLogger(__name__)


class WeComClient(Notifier):
    """WeCom (WeChat Work) group bot webhook client."""

    def __init__(self, key: str, base_url: str = WECOM_WEBHOOK_URL, timeout: float = 10.0):
        self.base_url = base_url
        self.url = f"{base_url}?key={key}"
        self.timeout = timeout

    async def send(self, message: OutboundMessage) -> None:
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.url,
                    json=message.model_dump(),
                    headers={"Content-Type": "application/json"},
                    timeout=self.timeout,
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            # str(e) carries the full URL, key included
            raise DeliveryError(
                f"request to {self.base_url} failed with status {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise DeliveryError(f"request to {self.base_url} failed: {type(e).__name__}: {e}") from e

        try:
            result = NotifierResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise DeliveryError(f"invalid response body: {response.text!r}") from e

        if not result.ok:
            raise DeliveryError(f"response errcode: {result.errcode}, errmsg: {result.errmsg}")

        logger.info(f"Sent {message.msgtype} message to {self.base_url}")
