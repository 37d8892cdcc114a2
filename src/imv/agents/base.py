"""Base agent ABC — defines the pattern every agent follows."""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Protocol

from imv.schemas.chat import ChatMessage
from imv.shared.openai_client import TokensCallback

logger = logging.getLogger(__name__)

_CODE_FENCE_OPEN = re.compile(r"^```[\w]*\n?", re.MULTILINE)
_CODE_FENCE_CLOSE = re.compile(r"\n?```$", re.MULTILINE)


class CompletionBackend(Protocol):
    """Anything with the ``CompletionClient.complete`` signature (incl. DryRunClient)."""

    async def complete(
        self,
        *,
        system: str,
        user_message: str,
        history: Sequence[ChatMessage] = (),
        temperature: float = ...,
        max_tokens: int | None = None,
        on_tokens: TokensCallback | None = None,
    ) -> str: ...


class BaseAgent(ABC):
    """Abstract base class for all voice agents.

    Subclasses implement:
    - ``name`` — human-readable agent name
    - ``get_system_prompt()`` — returns the default system prompt string

    and set the sampling defaults as class attributes.
    """

    temperature: float = 0.7
    max_tokens: int = 2000
    # When True an empty completion is an error rather than a valid result
    require_content: bool = True

    def __init__(self, client: CompletionBackend) -> None:
        self.client = client

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for progress display."""

    @abstractmethod
    def get_system_prompt(self) -> str:
        """Return the system prompt for this agent."""

    async def complete(
        self,
        user_message: str,
        *,
        system: str | None = None,
        history: Sequence[ChatMessage] = (),
        temperature: float | None = None,
        on_tokens: TokensCallback | None = None,
    ) -> str:
        """Run one completion with this agent's defaults and return the text."""
        raw = await self.client.complete(
            system=system if system is not None else self.get_system_prompt(),
            user_message=user_message,
            history=history,
            temperature=self.temperature if temperature is None else temperature,
            max_tokens=self.max_tokens,
            on_tokens=on_tokens,
        )
        logger.debug("Agent %s raw output:\n%s", self.name, raw[:500])
        if self.require_content and not raw.strip():
            raise RuntimeError(f"{self.name} returned no content")
        return raw


def clean_output(text: str) -> str:
    """Strip markdown code fences the model sometimes wraps around a profile."""
    text = _CODE_FENCE_OPEN.sub("", text)
    text = _CODE_FENCE_CLOSE.sub("", text)
    return text.strip()
