"""Chat Writer Agent — one turn of voice-matched chat."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from imv.agents.base import BaseAgent, CompletionBackend
from imv.agents.chat_writer.prompts import WRITING_MODE_LABELS, build_system_prompt
from imv.schemas.chat import ChatMessage, WritingMode
from imv.shared.openai_client import TokensCallback

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 10
MIN_TEMPERATURE = 0.1
MAX_TEMPERATURE = 1.0


def clamp_temperature(value: float) -> float:
    return max(MIN_TEMPERATURE, min(MAX_TEMPERATURE, value))


def recent_history(history: Sequence[ChatMessage], limit: int = HISTORY_LIMIT) -> list[ChatMessage]:
    """Last ``limit`` user/assistant turns; system turns are dropped."""
    turns = [m for m in history if m.role in ("user", "assistant")]
    return turns[-limit:] if limit > 0 else []


class ChatWriterAgent(BaseAgent):
    max_tokens = 2000
    require_content = False

    def __init__(self, client: CompletionBackend, *, history_limit: int = HISTORY_LIMIT) -> None:
        super().__init__(client)
        self.history_limit = history_limit

    @property
    def name(self) -> str:
        return "Chat Writer"

    def get_system_prompt(self) -> str:
        return build_system_prompt("", WritingMode.GENERAL)

    async def run(
        self,
        message: str,
        prompt_text: str,
        history: Sequence[ChatMessage] = (),
        writing_mode: WritingMode | str = WritingMode.GENERAL,
        temperature: float = 0.7,
        *,
        on_tokens: TokensCallback | None = None,
    ) -> str:
        if not message.strip():
            raise ValueError("Message is required")
        if not prompt_text.strip():
            raise ValueError("No active IMV prompt found. Please create one first.")
        mode = WritingMode(writing_mode)
        turns = recent_history(history, self.history_limit)

        logger.info("Chat turn in %s mode with %d history turns", WRITING_MODE_LABELS[mode], len(turns))
        return await self.complete(
            message,
            system=build_system_prompt(prompt_text, mode),
            history=turns,
            temperature=clamp_temperature(temperature),
            on_tokens=on_tokens,
        )
