"""Tests for the BaseAgent ABC contract."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from imv.agents.base import BaseAgent, clean_output
from imv.shared.openai_client import CompletionClient


class SampleAgent(BaseAgent):
    """Concrete test implementation of BaseAgent."""

    temperature = 0.4
    max_tokens = 321

    @property
    def name(self) -> str:
        return "Sample Agent"

    def get_system_prompt(self) -> str:
        return "You are a test agent."


class LenientAgent(SampleAgent):
    require_content = False


def _mock_openai_response(content: str) -> SimpleNamespace:
    """Build a fake OpenAI response with the given text content."""
    message = SimpleNamespace(content=content, tool_calls=None)
    choice = SimpleNamespace(message=message)
    return SimpleNamespace(choices=[choice], usage=None)


class TestBaseAgent:
    def test_cannot_instantiate_abstract(self) -> None:
        with pytest.raises(TypeError):
            BaseAgent(client=MagicMock())  # type: ignore[abstract]

    @pytest.mark.asyncio
    async def test_uses_agent_defaults(self, mock_completion_client: CompletionClient) -> None:
        create = AsyncMock(return_value=_mock_openai_response("result"))
        mock_completion_client._client.chat.completions.create = create

        result = await SampleAgent(mock_completion_client).complete("hello")

        assert result == "result"
        kwargs = create.call_args.kwargs
        assert kwargs["temperature"] == 0.4
        assert kwargs["max_tokens"] == 321
        assert kwargs["messages"][0] == {"role": "system", "content": "You are a test agent."}

    @pytest.mark.asyncio
    async def test_overrides(self, fake_client: MagicMock) -> None:
        await SampleAgent(fake_client).complete("hello", system="custom", temperature=0.9)
        kwargs = fake_client.complete.call_args.kwargs
        assert kwargs["system"] == "custom"
        assert kwargs["temperature"] == 0.9

    @pytest.mark.asyncio
    async def test_empty_output_raises_when_required(self, fake_client: MagicMock) -> None:
        fake_client.complete.return_value = "   "
        with pytest.raises(RuntimeError, match="Sample Agent returned no content"):
            await SampleAgent(fake_client).complete("hello")

    @pytest.mark.asyncio
    async def test_empty_output_allowed_when_not_required(self, fake_client: MagicMock) -> None:
        fake_client.complete.return_value = ""
        assert await LenientAgent(fake_client).complete("hello") == ""


class TestCleanOutput:
    def test_strips_fences(self) -> None:
        assert clean_output("```markdown\n## 1. VOICE\ntext\n```") == "## 1. VOICE\ntext"

    def test_plain_text_unchanged(self) -> None:
        assert clean_output("  ## 1. VOICE\ntext\n") == "## 1. VOICE\ntext"
