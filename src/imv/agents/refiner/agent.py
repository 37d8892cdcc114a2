"""Refiner Agent — applies free-text feedback to an existing profile."""

from __future__ import annotations

import logging

from imv.agents.base import BaseAgent, clean_output
from imv.agents.refiner.prompts import SYSTEM_PROMPT, USER_PROMPT_TEMPLATE
from imv.shared.openai_client import TokensCallback

logger = logging.getLogger(__name__)


class RefinerAgent(BaseAgent):
    temperature = 0.7
    max_tokens = 2500

    @property
    def name(self) -> str:
        return "Refiner"

    def get_system_prompt(self) -> str:
        return SYSTEM_PROMPT

    async def run(
        self,
        feedback: str,
        current_prompt_text: str,
        *,
        on_tokens: TokensCallback | None = None,
    ) -> str:
        """Return the refined profile text with any code fences removed."""
        if not feedback.strip() or not current_prompt_text.strip():
            raise ValueError("Missing required fields: feedback, current_prompt_text")

        user_message = USER_PROMPT_TEMPLATE.format(
            current_prompt=current_prompt_text,
            feedback=feedback.strip(),
        )
        raw = await self.complete(user_message, on_tokens=on_tokens)
        refined = clean_output(raw)
        if not refined:
            raise RuntimeError(f"{self.name} returned no content")
        logger.info("Refined profile: %d -> %d chars", len(current_prompt_text), len(refined))
        return refined
