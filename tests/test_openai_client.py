"""Tests for the CompletionClient — mock the OpenAI SDK underneath."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from openai import APIConnectionError, RateLimitError

from imv.schemas.chat import ChatMessage
from imv.shared.openai_client import (
    CompletionClient,
    DryRunClient,
    _parse_retry_after,
    build_messages,
)

_REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


def _make_text_response(text: str | None, usage: SimpleNamespace | None = None):
    """Create a mock OpenAI response with text only."""
    message = SimpleNamespace(content=text, tool_calls=None)
    choice = SimpleNamespace(message=message)
    return SimpleNamespace(choices=[choice], usage=usage)


def _rate_limit_error(message: str, headers: dict[str, str] | None = None) -> RateLimitError:
    response = httpx.Response(429, headers=headers or {}, request=_REQUEST)
    return RateLimitError(message, response=response, body=None)


@pytest.fixture
def no_sleep(monkeypatch: pytest.MonkeyPatch) -> AsyncMock:
    sleep = AsyncMock()
    monkeypatch.setattr("imv.shared.openai_client.asyncio.sleep", sleep)
    return sleep


class TestBuildMessages:
    def test_system_history_then_user(self) -> None:
        history = [
            ChatMessage(role="user", content="hi"),
            ChatMessage(role="system", content="ignored"),
            ChatMessage(role="assistant", content="hello"),
        ]
        assert build_messages("sys", "next", history) == [
            {"role": "system", "content": "sys"},
            {"role": "user", "content": "hi"},
            {"role": "assistant", "content": "hello"},
            {"role": "user", "content": "next"},
        ]


class TestComplete:
    @pytest.mark.asyncio
    async def test_returns_text(self, mock_completion_client: CompletionClient) -> None:
        create = AsyncMock(return_value=_make_text_response("Hello!"))
        mock_completion_client._client.chat.completions.create = create

        result = await mock_completion_client.complete(
            system="sys", user_message="hi", temperature=0.3, max_tokens=100,
        )

        assert result == "Hello!"
        kwargs = create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o"
        assert kwargs["max_tokens"] == 100
        assert kwargs["temperature"] == 0.3
        assert kwargs["messages"][-1] == {"role": "user", "content": "hi"}

    @pytest.mark.asyncio
    async def test_default_max_tokens(self, mock_completion_client: CompletionClient) -> None:
        create = AsyncMock(return_value=_make_text_response("ok"))
        mock_completion_client._client.chat.completions.create = create

        await mock_completion_client.complete(system="sys", user_message="hi")
        assert create.call_args.kwargs["max_tokens"] == 2000

    @pytest.mark.asyncio
    async def test_missing_content_is_empty_string(self, mock_completion_client: CompletionClient) -> None:
        mock_completion_client._client.chat.completions.create = AsyncMock(
            return_value=_make_text_response(None)
        )
        assert await mock_completion_client.complete(system="s", user_message="u") == ""

    @pytest.mark.asyncio
    async def test_no_choices_is_empty_string(self, mock_completion_client: CompletionClient) -> None:
        mock_completion_client._client.chat.completions.create = AsyncMock(
            return_value=SimpleNamespace(choices=[], usage=None)
        )
        assert await mock_completion_client.complete(system="s", user_message="u") == ""

    @pytest.mark.asyncio
    async def test_reports_token_usage(self, mock_completion_client: CompletionClient) -> None:
        usage = SimpleNamespace(prompt_tokens=12, completion_tokens=34)
        mock_completion_client._client.chat.completions.create = AsyncMock(
            return_value=_make_text_response("ok", usage)
        )
        on_tokens = MagicMock()

        await mock_completion_client.complete(system="s", user_message="u", on_tokens=on_tokens)
        on_tokens.assert_called_once_with(12, 34)


class TestRetry:
    @pytest.mark.asyncio
    async def test_rate_limit_then_success(
        self, mock_completion_client: CompletionClient, no_sleep: AsyncMock,
    ) -> None:
        mock_completion_client._client.chat.completions.create = AsyncMock(
            side_effect=[_rate_limit_error("Rate limit reached"), _make_text_response("done")]
        )

        assert await mock_completion_client.complete(system="s", user_message="u") == "done"
        assert no_sleep.await_count == 1
        assert no_sleep.await_args.args[0] >= 1.0

    @pytest.mark.asyncio
    async def test_request_too_large_not_retried(
        self, mock_completion_client: CompletionClient, no_sleep: AsyncMock,
    ) -> None:
        create = AsyncMock(side_effect=_rate_limit_error("Request too large for gpt-4o"))
        mock_completion_client._client.chat.completions.create = create

        with pytest.raises(RateLimitError):
            await mock_completion_client.complete(system="s", user_message="u")
        assert create.await_count == 1
        no_sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_gives_up_after_max_retries(
        self, mock_completion_client: CompletionClient, no_sleep: AsyncMock,
    ) -> None:
        create = AsyncMock(side_effect=APIConnectionError(request=_REQUEST))
        mock_completion_client._client.chat.completions.create = create

        with pytest.raises(APIConnectionError):
            await mock_completion_client.complete(system="s", user_message="u")
        assert create.await_count == 6
        assert no_sleep.await_count == 5


class TestParseRetryAfter:
    def test_header(self) -> None:
        assert _parse_retry_after(_rate_limit_error("slow down", {"retry-after": "7"})) == 7.0

    def test_message_seconds(self) -> None:
        assert _parse_retry_after(_rate_limit_error("Please try again in 1.5s.")) == 1.5

    def test_message_milliseconds(self) -> None:
        assert _parse_retry_after(_rate_limit_error("Please try again in 250ms.")) == 0.25

    def test_not_found(self) -> None:
        assert _parse_retry_after(_rate_limit_error("slow down")) is None


class TestDryRunClient:
    @pytest.mark.parametrize(
        ("system", "agent"),
        [
            ("You are a Prompt Architect.", "builder"),
            ("You are an expert at refining IMV (In My Voice) prompts", "refiner"),
            ("You are an AI assistant that writes in a specific person's voice and style.", "tester"),
            ("profile\n\n---\n\nYou are helping modify content while maintaining", "modifier"),
            ("Prompt Architect\n---\nYou are helping the user write content", "chat"),
            ("anything else", "chat"),
        ],
    )
    def test_detect_agent(self, system: str, agent: str) -> None:
        assert DryRunClient._detect_agent(system) == agent

    @pytest.mark.asyncio
    async def test_complete_returns_canned_text(self) -> None:
        text = await DryRunClient().complete(system="You are a Prompt Architect.", user_message="x")
        assert text.startswith("## 1. VOICE IDENTITY")
