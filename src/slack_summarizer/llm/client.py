"""OpenAI chat completion wrapper.

Errors from the SDK propagate; the summarization engine turns them into
fallback text.
"""

from typing import Dict, List, Optional
from openai import AsyncOpenAI
from ..log import get_logger

logger = get_logger("llm_client")

class LLMClient:
    def __init__(self, client: AsyncOpenAI, model: str = "gpt-4o"):
        self.client = client
        self.model = model

    @classmethod
    def from_settings(cls, settings) -> "LLMClient":
        return cls(
            AsyncOpenAI(
                api_key=settings.OPENAI_API_KEY,
                organization=settings.OPENAI_ORGANIZATION_ID,
                project=settings.OPENAI_PROJECT_ID,
            ),
            model=settings.MODEL,
        )

    async def complete(self, messages: List[Dict[str, str]], temperature: float = 0.5) -> Optional[str]:
        """Single-choice chat completion. Returns the first choice's text (may be None)."""
        completion = await self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=temperature,
            n=1,
        )
        usage = getattr(completion, "usage", None)
        if usage is not None:
            logger.debug(f"Completion used {usage.total_tokens} tokens ({self.model})")
        return completion.choices[0].message.content
