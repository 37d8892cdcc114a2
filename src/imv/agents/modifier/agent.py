"""Modifier Agent — applies one canned modification to generated text."""

from __future__ import annotations

import logging

from imv.agents.base import BaseAgent
from imv.agents.modifier.prompts import (
    NO_PROFILE_SYSTEM_PROMPT,
    build_modification_request,
    build_system_prompt,
)
from imv.schemas.chat import ModificationType
from imv.shared.openai_client import TokensCallback

logger = logging.getLogger(__name__)

# Variations run slightly hotter than the original generation
_TEMPERATURE_BUMP = 0.1


class ModifierAgent(BaseAgent):
    max_tokens = 2000
    require_content = False

    @property
    def name(self) -> str:
        return "Modifier"

    def get_system_prompt(self) -> str:
        return NO_PROFILE_SYSTEM_PROMPT

    async def run(
        self,
        original_content: str,
        modification_type: ModificationType | str,
        prompt_text: str | None = None,
        temperature: float = 0.7,
        *,
        on_tokens: TokensCallback | None = None,
    ) -> str:
        """Return the modified text ("" if the model produced nothing).

        Raises ``UnknownModificationTypeError`` for a type outside the closed set.
        """
        if not original_content.strip():
            raise ValueError("Missing required fields: original_content")
        user_message = build_modification_request(original_content, modification_type)

        logger.info("Applying modification %s", ModificationType(modification_type).value)
        return await self.complete(
            user_message,
            system=build_system_prompt(prompt_text),
            temperature=min(temperature + _TEMPERATURE_BUMP, 1.0),
            on_tokens=on_tokens,
        )
