"""Profile Builder Agent — turns writing samples into an IMV voice profile."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from imv.agents.base import BaseAgent
from imv.agents.profile_builder.prompts import (
    SAMPLE_SEPARATOR,
    SYSTEM_PROMPT,
    USER_PROMPT_TEMPLATE,
)
from imv.shared.openai_client import TokensCallback

logger = logging.getLogger(__name__)


class ProfileBuilderAgent(BaseAgent):
    """Analyzes raw writing samples and writes the full 13-section profile."""

    temperature = 0.5
    max_tokens = 4500

    @property
    def name(self) -> str:
        return "Profile Builder"

    def get_system_prompt(self) -> str:
        return SYSTEM_PROMPT

    def build_user_message(self, samples: Sequence[str], total_words: int | None = None) -> str:
        if total_words is None:
            total_words = sum(len(s.split()) for s in samples)
        return USER_PROMPT_TEMPLATE.format(
            sample_count=len(samples),
            total_words=total_words,
            samples=SAMPLE_SEPARATOR.join(samples),
        )

    async def run(
        self,
        samples: Sequence[str],
        total_words: int | None = None,
        *,
        on_tokens: TokensCallback | None = None,
    ) -> str:
        """Generate a profile. ``total_words`` is counted from the samples when omitted."""
        samples = [s for s in samples if s.strip()]
        if not samples:
            raise ValueError("No writing samples provided")

        logger.info("Building profile from %d samples", len(samples))
        profile = await self.complete(
            self.build_user_message(samples, total_words), on_tokens=on_tokens,
        )
        return profile.strip()
