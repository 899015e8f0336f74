from typing import Optional

from autoreply.errors import InternalError, TransportError
from autoreply.message_log import MessageLog, MessageLogEntry
from autoreply.reply_generator import ReplyGenerator
from autoreply.transport import TwilioTransport
from logging_config import configure_logger

logger = configure_logger("conversation_handler")


class ConversationHandler:
    """Per-message entry point: log inbound, pick a reply, log outbound, send."""

    def __init__(
        self,
        message_log: MessageLog,
        reply_generator: ReplyGenerator,
        transport: TwilioTransport,
    ) -> None:
        self.message_log = message_log
        self.reply_generator = reply_generator
        self.transport = transport

    async def handle_inbound(self, from_id: str, body: Optional[str]) -> str:
        """Process one inbound message and return the reply that was sent.

        Dispatch failures are logged only; the log entries stay. Anything
        unexpected surfaces as InternalError.
        """
        body = body or ""
        try:
            logger.info("Incoming: %s %s", from_id, body)
            self.message_log.append(MessageLogEntry.inbound(from_id, body))

            reply = await self.reply_generator.generate_reply(body)
            self.message_log.append(MessageLogEntry.outbound(from_id, reply))

            await self._dispatch(from_id, reply)
            return reply
        except Exception as e:
            logger.error(f"Inbound handling error for sender '{from_id}': {e}", exc_info=True)
            raise InternalError("inbound message could not be handled") from e

    async def _dispatch(self, to: str, reply: str) -> None:
        try:
            await self.transport.send(to, reply)
        except TransportError as e:
            logger.error("Twilio send error: %s", e)
        except Exception as e:
            logger.error("Unexpected dispatch error for %s: %s", to, e, exc_info=True)
