# src/gitlab_notifier/senders/wecom.py
import logging
import httpx
from .base import DeliveryError, Sender


logger = logging.getLogger(__name__)


class WeComSender(Sender):
    """Posts Markdown messages to a WeCom group robot webhook."""

    DEFAULT_URL = "https://qyapi.weixin.qq.com/cgi-bin/webhook/send"

    def __init__(self, base_url: str = DEFAULT_URL, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def send(self, key: str, content: str) -> None:
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.base_url,
                    params={"key": key},
                    json={
                        "msgtype": "markdown",
                        "markdown": {"content": content},
                    },
                    timeout=self.timeout,
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            # The message would include the request URL and so the key
            raise DeliveryError(key, f"WeCom returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise DeliveryError(key, f"WeCom request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise DeliveryError(key, f"WeCom returned invalid JSON: {response.text[:200]}") from e

        if not isinstance(data, dict):
            raise DeliveryError(key, f"WeCom returned unexpected reply: {response.text[:200]}")

        # The robot API answers 200 even on failure, errcode carries the result
        errcode = data.get("errcode", 0)
        if errcode != 0:
            raise DeliveryError(key, f"WeCom rejected message: errcode={errcode} errmsg={data.get('errmsg')}")

        logger.info(f"Message delivered to WeCom robot ({len(content)} chars)")
