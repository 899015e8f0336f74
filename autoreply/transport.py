from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from twilio.base.exceptions import TwilioException
from twilio.rest import Client

from autoreply.errors import TransportError
from logging_config import configure_logger

logger = configure_logger("transport")

# ---------------------------------------------------------------------------#
# helpers ­– one shared executor for Twilio I/O so we remain async‑friendly   #
# ---------------------------------------------------------------------------#
_EXECUTOR = ThreadPoolExecutor(max_workers=4)


def _twilio_async(fn, *args, **kwargs):
    """Run Twilio SDK call in thread‑pool."""
    loop = asyncio.get_running_loop()
    return loop.run_in_executor(_EXECUTOR, lambda: fn(*args, **kwargs))


# ---------------------------------------------------------------------------#
# TwilioTransport                                                            #
# ---------------------------------------------------------------------------#
class TwilioTransport:
    """Sends WhatsApp messages through the Twilio REST API."""

    def __init__(
        self,
        account_sid: Optional[str],
        auth_token: Optional[str],
        whatsapp_from: Optional[str],
    ) -> None:
        self.account_sid = account_sid
        self.auth_token = auth_token
        self.whatsapp_from = whatsapp_from
        self._client: Optional[Client] = None

    @property
    def configured(self) -> bool:
        return bool(self.account_sid and self.auth_token and self.whatsapp_from)

    def _get_client(self) -> Client:
        if self._client is None:
            self._client = Client(self.account_sid, self.auth_token)
        return self._client

    async def send(self, to: str, body: str) -> bool:
        """Dispatch `body` to `to`.

        Returns False without sending when credentials are missing, True once
        Twilio accepted the message. Raises TransportError on failure.
        """
        if not self.configured:
            logger.warning("Twilio config missing, cannot send message to %s.", to)
            return False

        try:
            message = await _twilio_async(
                self._get_client().messages.create,
                body=body,
                from_=self.whatsapp_from,
                to=to,
            )
        except (TwilioException, OSError) as e:
            raise TransportError(f"Twilio send to {to} failed: {e}") from e

        logger.info("Sent message to %s (sid=%s)", to, getattr(message, "sid", None))
        return True
