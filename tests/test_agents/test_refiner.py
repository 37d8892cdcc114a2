"""Tests for the Refiner agent."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from imv.agents.refiner.agent import RefinerAgent


class TestRefinerAgent:
    @pytest.mark.asyncio
    async def test_strips_code_fences(self, fake_client: MagicMock) -> None:
        fake_client.complete.return_value = "```\nIMV STYLE PROFILE - Jordan\nbody\n```"
        refined = await RefinerAgent(fake_client).run("More casual", "IMV STYLE PROFILE - Jordan")
        assert refined == "IMV STYLE PROFILE - Jordan\nbody"

    @pytest.mark.asyncio
    async def test_prompt_contents(self, fake_client: MagicMock) -> None:
        await RefinerAgent(fake_client).run("  Use fewer exclamation points ", "PROFILE TEXT")

        kwargs = fake_client.complete.call_args.kwargs
        assert "---\nPROFILE TEXT\n---" in kwargs["user_message"]
        assert '"Use fewer exclamation points"' in kwargs["user_message"]
        assert "refining IMV" in kwargs["system"]
        assert kwargs["max_tokens"] == 2500
        assert kwargs["temperature"] == 0.7

    @pytest.mark.asyncio
    async def test_missing_fields(self, fake_client: MagicMock) -> None:
        with pytest.raises(ValueError, match="Missing required fields"):
            await RefinerAgent(fake_client).run("", "profile")

    @pytest.mark.asyncio
    async def test_only_fences_is_empty(self, fake_client: MagicMock) -> None:
        fake_client.complete.return_value = "```\n```"
        with pytest.raises(RuntimeError, match="no content"):
            await RefinerAgent(fake_client).run("feedback", "profile")
