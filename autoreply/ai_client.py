"""OpenAI Chat Completions adapter used for replies no intent covers."""
from typing import Optional

import openai
from openai import AsyncOpenAI

from autoreply.errors import AIBackendError
from logging_config import configure_logger

logger = configure_logger("ai_client")

REQUEST_TIMEOUT: float = 15
DEFAULT_MODEL = "gpt-4o-mini"


class OpenAIResponder:
    def __init__(
        self,
        api_key: Optional[str],
        model: str = DEFAULT_MODEL,
        temperature: float = 0.4,
        max_tokens: int = 150,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self._client: Optional[AsyncOpenAI] = None

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self.api_key, timeout=self.timeout)
        return self._client

    async def complete(self, system_prompt: str, user_message: str) -> str:
        """Return the model's reply text, or raise AIBackendError."""
        if not self.configured:
            raise AIBackendError("OPENAI_API_KEY missing")

        try:
            resp = await self._get_client().chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_message},
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except openai.OpenAIError as e:
            raise AIBackendError(f"OpenAI request failed: {e}") from e

        try:
            content = resp.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            raise AIBackendError("Malformed OpenAI response") from e

        text = (content or "").strip()
        if not text:
            raise AIBackendError("Empty OpenAI response")
        return text
