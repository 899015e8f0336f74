"""
Reply selection for inbound messages.

Flow hierarchy
--------------
1. Keyword intent from the intent store   (fast, deterministic, no network)
2. Sentiment-tagged OpenAI completion     (costly, may fail)
3. Fixed apology                          (whenever step 2 fails)

`generate_reply()` never raises; every AI failure collapses to APOLOGY_REPLY.
"""
from dataclasses import dataclass
from typing import Optional

from autoreply.ai_client import OpenAIResponder
from autoreply.classifier import IntentClassifier, normalize_text
from autoreply.errors import AIBackendError
from autoreply.sentiment import SentimentTagger
from logging_config import configure_logger

logger = configure_logger("reply_generator")

APOLOGY_REPLY = "Sorry, I'm having trouble answering right now."

SYSTEM_PROMPT_TEMPLATE = (
    "You are an assistant for {business_name}. "
    "Be friendly and concise (1-2 sentences). Website: {website}"
)


@dataclass
class AIOutcome:
    """Result of one AI fallback attempt, before any masking."""

    text: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.text)


class ReplyGenerator:
    def __init__(
        self,
        classifier: IntentClassifier,
        ai_client: OpenAIResponder,
        business_name: str,
        website: str,
        tagger: Optional[SentimentTagger] = None,
    ) -> None:
        self.classifier = classifier
        self.ai_client = ai_client
        self.tagger = tagger or SentimentTagger()
        self.system_prompt = SYSTEM_PROMPT_TEMPLATE.format(
            business_name=business_name, website=website
        )

    def build_user_message(self, text: Optional[str]) -> str:
        body = "" if text is None else str(text)
        sentiment = self.tagger.tag(body)
        return f"{body} (sentiment: {sentiment.value})"

    async def ask_ai(self, text: Optional[str]) -> AIOutcome:
        try:
            reply = await self.ai_client.complete(self.system_prompt, self.build_user_message(text))
        except AIBackendError as e:
            logger.error("OpenAI error: %s", e)
            return AIOutcome(error=e)
        except Exception as e:
            logger.error("Unexpected AI fallback error: %s", e, exc_info=True)
            return AIOutcome(error=e)
        return AIOutcome(text=reply)

    async def generate_reply(self, text: Optional[str]) -> str:
        intent = self.classifier.classify(text)
        if intent is not None:
            return intent.reply

        logger.info("No intent for %r, falling back to AI", normalize_text(text)[:80])
        outcome = await self.ask_ai(text)
        if not outcome.ok:
            return APOLOGY_REPLY
        return outcome.text
