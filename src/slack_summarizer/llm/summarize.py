"""Prompt assembly and the summarize/answer model call.

The system prompt switches the model between summarizing and answering based
on whether the final user entry carries the question marker.
"""

from typing import Dict, List, Optional, Sequence

from .client import LLMClient
from .prompts import question_entry, system_prompt
from ..schemas.messages import TranscriptEntry
from ..schemas.results import StageResult
from ..log import get_logger

logger = get_logger("summarize")

NO_SUMMARY = "No summary found."
SUMMARY_ERROR = "Error summarizing text."


def build_prompt(
    entries: Sequence[TranscriptEntry],
    question: Optional[str] = None,
    language: str = "Korean",
    template: Optional[str] = None,
) -> List[Dict[str, str]]:
    messages = [system_prompt(language, template)]
    messages += [entry.as_prompt_message() for entry in entries]
    if question:
        messages.append(question_entry(question))
    return messages


class SummarizationEngine:
    def __init__(
        self,
        llm: LLMClient,
        language: str = "Korean",
        temperature: float = 0.5,
        template: Optional[str] = None,
    ):
        self.llm = llm
        self.language = language
        self.temperature = temperature
        self.template = template

    async def summarize(
        self,
        entries: Sequence[TranscriptEntry],
        question: Optional[str] = None,
    ) -> StageResult[str]:
        """
        Returns the model's text, or one of the fixed fallback strings.
        Never raises.
        """
        try:
            messages = build_prompt(entries, question, self.language, self.template)
            mode = "answer" if question else "summary"
            logger.info(f"Requesting {mode} over {len(entries)} transcript entries")
            content = await self.llm.complete(messages, temperature=self.temperature)
        except Exception as e:
            logger.error(f"Error summarizing text: {e}")
            return StageResult(status="failed", value=SUMMARY_ERROR, error=str(e))

        if not content:
            logger.warning("Model returned no content")
            return StageResult(status="empty", value=NO_SUMMARY)
        return StageResult(status="ok", value=content)
