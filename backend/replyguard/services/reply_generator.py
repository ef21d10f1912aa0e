"""
Reply Generation Client
Drafts a clinic reply through the OpenAI chat completions API
"""
import logging
from functools import lru_cache
from typing import Optional

from openai import AsyncOpenAI

from ..config import settings
from .prompts import SYSTEM_PROMPT, build_user_message

logger = logging.getLogger(__name__)


class ReplyGenerator:
    """Client for the reply drafting model"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.model = model or settings.openai_model
        self.temperature = settings.openai_temperature if temperature is None else temperature
        self._api_key = api_key or settings.openai_api_key
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        """Lazily build the SDK client so the app starts without an API key"""
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self._api_key)
        return self._client

    async def generate(self, classification: str, patient_messages: str) -> str:
        """
        Draft one reply for the given classification and patient messages.

        Returns the raw model text, or an empty string when the model
        returned no content. Transport and API errors propagate.
        """
        completion = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_user_message(classification, patient_messages)},
            ],
            temperature=self.temperature,
        )

        if not completion.choices:
            logger.warning("Model returned no choices for classification %r", classification)
            return ""

        content = completion.choices[0].message.content or ""
        logger.info("Drafted reply (%d chars) for classification %r", len(content), classification)
        return content


@lru_cache()
def get_reply_generator() -> ReplyGenerator:
    """Shared generator instance (FastAPI dependency)."""
    return ReplyGenerator()
