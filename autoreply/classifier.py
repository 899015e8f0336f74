"""
Keyword intent classification.

Literal, case-insensitive substring matching against the intent store. The
first intent (in store order) owning a pattern found in the text wins; there
is no scoring, so operators control priority purely by list order.
"""
from typing import Optional

from autoreply.intent_store import Intent, IntentStore
from logging_config import configure_logger

logger = configure_logger("classifier")


def normalize_text(text: Optional[str]) -> str:
    """Lowercase inbound text; a missing body is treated as empty."""
    if text is None:
        return ""
    return str(text).lower()


class IntentClassifier:
    def __init__(self, store: IntentStore) -> None:
        self.store = store

    def classify(self, text: Optional[str]) -> Optional[Intent]:
        """Return the first matching intent, or None when nothing matches."""
        lowered = normalize_text(text)
        for intent in self.store.list():
            for pattern in intent.active_patterns():
                if pattern in lowered:
                    logger.info("Matched intent '%s' on pattern '%s'", intent.name, pattern)
                    return intent
        logger.debug("No intent matched")
        return None
