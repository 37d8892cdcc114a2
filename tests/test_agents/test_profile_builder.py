"""Tests for the Profile Builder agent."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from imv.agents.profile_builder.agent import ProfileBuilderAgent
from imv.agents.profile_builder.prompts import SAMPLE_SEPARATOR, SYSTEM_PROMPT


class TestProfileBuilderAgent:
    def test_name_and_prompt(self, fake_client: MagicMock) -> None:
        agent = ProfileBuilderAgent(fake_client)
        assert agent.name == "Profile Builder"
        assert agent.get_system_prompt() == SYSTEM_PROMPT
        assert "## 13. QUALITY ASSURANCE" in SYSTEM_PROMPT

    def test_user_message(self, fake_client: MagicMock) -> None:
        message = ProfileBuilderAgent(fake_client).build_user_message(["one two", "three"], 3)
        assert "Analyze these 2 writing samples (3 words total)" in message
        assert f"one two{SAMPLE_SEPARATOR}three" in message

    def test_word_count_defaults_to_sample_words(self, fake_client: MagicMock) -> None:
        message = ProfileBuilderAgent(fake_client).build_user_message(["one two", "three"])
        assert "(3 words total)" in message

    @pytest.mark.asyncio
    async def test_run(self, fake_client: MagicMock) -> None:
        fake_client.complete.return_value = "  ## 1. VOICE IDENTITY\nx\n"
        profile = await ProfileBuilderAgent(fake_client).run(["Hey team, quick question."])

        assert profile == "## 1. VOICE IDENTITY\nx"
        kwargs = fake_client.complete.call_args.kwargs
        assert kwargs["temperature"] == 0.5
        assert kwargs["max_tokens"] == 4500
        assert kwargs["system"] == SYSTEM_PROMPT

    @pytest.mark.asyncio
    async def test_no_samples(self, fake_client: MagicMock) -> None:
        with pytest.raises(ValueError, match="No writing samples"):
            await ProfileBuilderAgent(fake_client).run(["", "  "])
        fake_client.complete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_completion(self, fake_client: MagicMock) -> None:
        fake_client.complete.return_value = ""
        with pytest.raises(RuntimeError, match="no content"):
            await ProfileBuilderAgent(fake_client).run(["sample"])
