"""Voice Tester Agent — writes a sample in one A/B/C mode of a profile."""

from __future__ import annotations

import logging

from imv.agents.base import BaseAgent
from imv.agents.voice_tester.prompts import (
    BASE_INSTRUCTION,
    CORE_VOICE_BLOCK,
    MODE_BLOCK,
    WRITING_RULES,
)
from imv.parsing.extractor import extract_sections
from imv.schemas.chat import VoiceMode
from imv.shared.openai_client import TokensCallback

logger = logging.getLogger(__name__)


def coerce_mode(mode: VoiceMode | str) -> VoiceMode:
    """Accept ``A``/``B``/``C`` (any case) or a VoiceMode."""
    try:
        return VoiceMode(mode.upper() if isinstance(mode, str) else mode)
    except ValueError:
        raise ValueError("Invalid mode. Must be A, B, or C") from None


class VoiceTesterAgent(BaseAgent):
    """Only the core voice and the selected mode are sent, not the full profile."""

    temperature = 0.7
    max_tokens = 1000

    @property
    def name(self) -> str:
        return "Voice Tester"

    def get_system_prompt(self) -> str:
        return "\n\n".join([BASE_INSTRUCTION, WRITING_RULES.format(
            mode_description=VoiceMode.PROFESSIONAL.description,
        )])

    def build_system_prompt(self, mode: VoiceMode, prompt_text: str) -> str:
        sections = extract_sections(prompt_text)
        mode_section = dict(zip(VoiceMode, (m for _, m in sections.modes())))[mode]

        parts = [BASE_INSTRUCTION]
        if sections.core_voice:
            parts.append(CORE_VOICE_BLOCK.format(core_voice=sections.core_voice))
        if mode_section.text:
            parts.append(MODE_BLOCK.format(mode_name=mode.display_name, mode_text=mode_section.text))
        parts.append(WRITING_RULES.format(mode_description=mode.description))
        return "\n\n".join(parts)

    async def run(
        self,
        mode: VoiceMode | str,
        test_request: str,
        prompt_text: str,
        *,
        on_tokens: TokensCallback | None = None,
    ) -> str:
        if not test_request.strip() or not prompt_text.strip():
            raise ValueError("Missing required fields: mode, test_request, prompt_text")
        voice_mode = coerce_mode(mode)

        logger.info("Testing voice in mode %s (%s)", voice_mode.value, voice_mode.display_name)
        return await self.complete(
            test_request,
            system=self.build_system_prompt(voice_mode, prompt_text),
            on_tokens=on_tokens,
        )
