from __future__ import annotations

import logging
from typing import Any

from openai import AsyncOpenAI, OpenAIError

from backend.config import Settings, get_settings
from backend.errors import (
    EmptyCompletionError,
    EmptyContentError,
    EmptyInstructionError,
    ProviderError,
)
from backend.models.summary_model import SummaryResult
from backend.services.prompt_builder import build_prompt

logger = logging.getLogger(__name__)

TEMPERATURE = 0.3
MAX_TOKENS = 2000
TOP_P = 1


def _extract_text(completion: Any) -> str:
    choices = getattr(completion, "choices", None) or []
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    return content if isinstance(content, str) else ""


class CompletionClient:
    """Chat-completion wrapper around an OpenAI-compatible provider (Groq by default)."""

    def __init__(self, settings: Settings | None = None, client: Any | None = None):
        self.settings = settings or get_settings()
        self._client = client

    def _completion_client(self) -> Any:
        if self._client is not None:
            return self._client
        if not self.settings.groq_api_key:
            raise ProviderError("GROQ_API_KEY is not configured")
        self._client = AsyncOpenAI(
            api_key=self.settings.groq_api_key,
            base_url=self.settings.completion_base_url,
            timeout=self.settings.request_timeout_seconds,
            max_retries=0,
        )
        return self._client

    async def generate_summary(self, content: str, instruction: str) -> SummaryResult:
        if not content:
            raise EmptyContentError()
        if not instruction:
            raise EmptyInstructionError()

        prompt = build_prompt(content, instruction)
        client = self._completion_client()
        try:
            completion = await client.chat.completions.create(
                model=self.settings.completion_model,
                messages=prompt.messages(),
                temperature=TEMPERATURE,
                max_tokens=MAX_TOKENS,
                top_p=TOP_P,
                stream=False,
            )
        except OpenAIError as exc:
            logger.exception("Completion provider call failed")
            raise ProviderError(str(exc)) from exc

        summary = _extract_text(completion)
        if not summary.strip():
            logger.error("Completion provider returned no summary (model=%s)", self.settings.completion_model)
            raise EmptyCompletionError()

        logger.info("Generated summary chars=%d from content chars=%d", len(summary), len(content))
        return SummaryResult(summary=summary)
