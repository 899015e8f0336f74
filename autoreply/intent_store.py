"""
Intent rules and the process-wide store that holds them.

Order matters: the classifier walks the stored sequence front to back and the
first intent with a matching pattern wins, so operators set priority by
arranging the list.
"""
import json
import threading
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from autoreply.errors import ValidationError
from logging_config import configure_logger

logger = configure_logger("intent_store")


class Intent(BaseModel):
    name: str = ""
    patterns: List[Optional[str]] = Field(default_factory=list)
    reply: str = ""

    @field_validator("patterns", mode="before")
    @classmethod
    def _none_means_no_patterns(cls, value):
        return [] if value is None else value

    def active_patterns(self) -> List[str]:
        """Lowercased patterns, with empty and missing entries dropped."""
        return [p.lower() for p in self.patterns if p]


DEFAULT_INTENTS: Tuple[Intent, ...] = (
    Intent(name="greeting", patterns=["hi", "hello", "hey"],
           reply="Hello 👋! How can I help you today?"),
    Intent(name="price", patterns=["price", "fees", "cost"],
           reply="Our pricing depends on the service. Which service are you looking for?"),
    Intent(name="timing", patterns=["open", "time", "hours", "timing"],
           reply="We are open 10:00 AM to 8:00 PM (Mon-Sat)."),
    Intent(name="appointment", patterns=["book", "appointment", "slot"],
           reply="Share your preferred date and time and we will confirm."),
)


def _coerce(item) -> Intent:
    if isinstance(item, Intent):
        return item
    try:
        return Intent.model_validate(item)
    except PydanticValidationError as e:
        raise ValidationError(f"invalid intent: {e.errors()[0]['msg']}") from e


class IntentStore:
    """Ordered, atomically replaceable sequence of intents."""

    def __init__(self, intents: Optional[Iterable[Intent]] = None) -> None:
        self._lock = threading.Lock()
        self._intents: Tuple[Intent, ...] = tuple(
            DEFAULT_INTENTS if intents is None else intents
        )

    def replace_all(self, intents) -> Tuple[Intent, ...]:
        """Swap in a whole new intent list and return it.

        Raises ValidationError (leaving the store untouched) when `intents`
        is not a list/tuple or one of its items is not a valid intent.
        """
        if not isinstance(intents, (list, tuple)):
            raise ValidationError("intents must be array")
        replacement = tuple(_coerce(item) for item in intents)
        with self._lock:
            self._intents = replacement
        logger.info("Intent store replaced with %d intents", len(replacement))
        return replacement

    def list(self) -> Tuple[Intent, ...]:
        with self._lock:
            return self._intents

    def __len__(self) -> int:
        return len(self.list())


def load_intents_file(path) -> Optional[Tuple[Intent, ...]]:
    """Read a JSON list of intents; returns None if the file is unusable."""
    file_path = Path(path)
    if not file_path.is_file():
        logger.warning("Intents file %s not found. Using default intents.", file_path)
        return None
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValidationError("intents must be array")
        return tuple(_coerce(item) for item in data)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
        logger.warning("Could not load intents from %s: %s. Using default intents.", file_path, e)
        return None
