"""Tests for the Chat Writer agent."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from imv.agents.chat_writer.agent import ChatWriterAgent, clamp_temperature, recent_history
from imv.agents.chat_writer.prompts import WRITING_MODE_CONTEXT, build_system_prompt
from imv.schemas.chat import ChatMessage, WritingMode


def _history(n: int) -> list[ChatMessage]:
    return [
        ChatMessage(role="user" if i % 2 == 0 else "assistant", content=f"turn {i}")
        for i in range(n)
    ]


class TestHelpers:
    @pytest.mark.parametrize(("value", "expected"), [(-1.0, 0.1), (0.0, 0.1), (0.5, 0.5), (2.0, 1.0)])
    def test_clamp_temperature(self, value: float, expected: float) -> None:
        assert clamp_temperature(value) == expected

    def test_recent_history_keeps_last_turns(self) -> None:
        turns = recent_history(_history(14))
        assert [t.content for t in turns] == [f"turn {i}" for i in range(4, 14)]

    def test_recent_history_drops_system_turns(self) -> None:
        history = [ChatMessage(role="system", content="s"), *_history(2)]
        assert [t.role for t in recent_history(history)] == ["user", "assistant"]

    def test_zero_limit(self) -> None:
        assert recent_history(_history(3), 0) == []

    def test_every_writing_mode_has_context(self) -> None:
        assert set(WRITING_MODE_CONTEXT) == set(WritingMode)
        assert WRITING_MODE_CONTEXT[WritingMode.GENERAL] == ""

    def test_system_prompt(self) -> None:
        system = build_system_prompt("MY PROFILE", WritingMode.SLACK)
        assert system.startswith("MY PROFILE\n\n---\n\nYou are helping the user write content")
        assert "The user is writing a Slack message." in system


class TestChatWriterAgent:
    @pytest.mark.asyncio
    async def test_run(self, fake_client: MagicMock) -> None:
        agent = ChatWriterAgent(fake_client)
        await agent.run("Draft a note", "PROFILE", _history(12), "email", temperature=1.4)

        kwargs = fake_client.complete.call_args.kwargs
        assert kwargs["user_message"] == "Draft a note"
        assert kwargs["temperature"] == 1.0
        assert len(kwargs["history"]) == 10
        assert "The user is writing an email." in kwargs["system"]

    @pytest.mark.asyncio
    async def test_history_limit_from_constructor(self, fake_client: MagicMock) -> None:
        await ChatWriterAgent(fake_client, history_limit=2).run("hi", "PROFILE", _history(5))
        assert [t.content for t in fake_client.complete.call_args.kwargs["history"]] == ["turn 3", "turn 4"]

    @pytest.mark.asyncio
    async def test_blank_message(self, fake_client: MagicMock) -> None:
        with pytest.raises(ValueError, match="Message is required"):
            await ChatWriterAgent(fake_client).run("   ", "PROFILE")

    @pytest.mark.asyncio
    async def test_missing_profile(self, fake_client: MagicMock) -> None:
        with pytest.raises(ValueError, match="No active IMV prompt"):
            await ChatWriterAgent(fake_client).run("hi", "")

    @pytest.mark.asyncio
    async def test_unknown_writing_mode(self, fake_client: MagicMock) -> None:
        with pytest.raises(ValueError):
            await ChatWriterAgent(fake_client).run("hi", "PROFILE", writing_mode="haiku")
