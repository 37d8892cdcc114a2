"""Async OpenAI chat-completion wrapper used by every agent.

Only plain text completions are needed: a system prompt, optional
conversation history, and one user message in; one string out.
"""

from __future__ import annotations

import asyncio
import logging
import random
import re
from collections.abc import Sequence
from typing import Any, Callable

from openai import AsyncOpenAI, APIConnectionError, APITimeoutError, RateLimitError

from imv.schemas.chat import ChatMessage

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o"
DEFAULT_MAX_TOKENS = 2000
DEFAULT_TEMPERATURE = 0.7

# Retry settings for rate-limit (429) errors
_RATE_LIMIT_MAX_RETRIES = 6
_RATE_LIMIT_BASE_DELAY = 2  # seconds, floor for exponential backoff

TokensCallback = Callable[[int, int], None]
"""Called with (input_tokens, output_tokens) when a completion finishes."""


def _parse_retry_after(exc: RateLimitError) -> float | None:
    """Extract the suggested retry delay from an OpenAI rate limit error.

    Checks the ``Retry-After`` header first, then falls back to parsing
    the "Please try again in Xs / Xms" substring from the error message.
    Returns seconds as a float, or None if not found.
    """
    try:
        headers = exc.response.headers  # type: ignore[union-attr]
        if retry_after := headers.get("retry-after"):
            return float(retry_after)
    except (AttributeError, TypeError, ValueError):
        pass

    m = re.search(r"try again in (\d+(?:\.\d+)?)\s*(ms|s)\b", str(exc), re.IGNORECASE)
    if m:
        value = float(m.group(1))
        return value / 1000 if m.group(2).lower() == "ms" else value

    return None


def build_messages(
    system: str,
    user_message: str,
    history: Sequence[ChatMessage] = (),
) -> list[dict[str, Any]]:
    """Assemble the OpenAI messages list: system, prior user/assistant turns, new message."""
    messages: list[dict[str, Any]] = [{"role": "system", "content": system}]
    for turn in history:
        if turn.role in ("user", "assistant"):
            messages.append({"role": turn.role, "content": turn.content})
    messages.append({"role": "user", "content": user_message})
    return messages


class CompletionClient:
    """Thin async wrapper around the OpenAI SDK with retry on rate limits."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        model: str = DEFAULT_MODEL,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> None:
        self._client = AsyncOpenAI(api_key=api_key)
        self.model = model
        self.max_tokens = max_tokens

    async def _call_with_retry(self, **kwargs: Any) -> Any:
        """Call chat.completions.create with exponential backoff on 429 errors.

        Waits at least as long as OpenAI's suggested retry-after time, uses
        exponential backoff as a floor, and adds ±25% jitter.

        Fails immediately if the error indicates the request itself exceeds
        the token limit (retrying won't help — the payload must shrink).
        """
        for attempt in range(_RATE_LIMIT_MAX_RETRIES):
            try:
                return await self._client.chat.completions.create(**kwargs)
            except RateLimitError as exc:
                msg = str(exc).lower()
                if "request too large" in msg or "context_length_exceeded" in msg:
                    logger.error("Request exceeds token limit (not retryable): %s", exc)
                    raise
                if attempt == _RATE_LIMIT_MAX_RETRIES - 1:
                    raise

                backoff = _RATE_LIMIT_BASE_DELAY * (2 ** attempt)
                suggested = _parse_retry_after(exc)
                base_delay = max(suggested or 0.0, backoff)
                jitter = random.uniform(-0.25 * base_delay, 0.25 * base_delay)
                delay = max(1.0, base_delay + jitter)

                logger.warning(
                    "Rate limited (429), retrying in %.1fs (attempt %d/%d, "
                    "suggested=%.1fs, backoff=%ds): %s",
                    delay, attempt + 1, _RATE_LIMIT_MAX_RETRIES,
                    suggested or 0.0, backoff, exc,
                )
                await asyncio.sleep(delay)
            except (APIConnectionError, APITimeoutError) as exc:
                if attempt == _RATE_LIMIT_MAX_RETRIES - 1:
                    raise
                # Transient network or TLS error: short exponential backoff, capped.
                backoff = _RATE_LIMIT_BASE_DELAY * (2 ** min(attempt, 3))
                jitter = random.uniform(-0.25 * backoff, 0.25 * backoff)
                delay = max(1.0, backoff + jitter)
                logger.warning(
                    "Connection error, retrying in %.1fs (attempt %d/%d): %s",
                    delay, attempt + 1, _RATE_LIMIT_MAX_RETRIES, exc,
                )
                await asyncio.sleep(delay)

    async def complete(
        self,
        *,
        system: str,
        user_message: str,
        history: Sequence[ChatMessage] = (),
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int | None = None,
        on_tokens: TokensCallback | None = None,
    ) -> str:
        """Single chat completion. Returns the assistant text ("" if none)."""
        response = await self._call_with_retry(
            model=self.model,
            max_tokens=max_tokens or self.max_tokens,
            temperature=temperature,
            messages=build_messages(system, user_message, history),
        )
        usage = getattr(response, "usage", None)
        if on_tokens and usage:
            on_tokens(getattr(usage, "prompt_tokens", 0), getattr(usage, "completion_tokens", 0))
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""


# ======================================================================
# Dry-run client, no API calls
# ======================================================================

_DRY_RUN_PROFILE = """\
## 1. VOICE IDENTITY & ROLE DEFINITION

You are a writing assistant that mimics the user's personal writing voice. \
Write in the user's voice, not your own.

## 2. CORE VOICE FOUNDATION

- Overall tone: direct, warm, and concise
- Sentence style: short sentences, fragments allowed

## 3. LANGUAGE PATTERN ANALYSIS

### A. Commonly Used Language (Signature Patterns)
- "Quick question"
- "Thanks!"

### B. Rarely or Never Used Language (Avoidance Patterns)
- "Per my last email"

## 5. AUDIENCE & WRITING MODES

### CASUAL / INTERNAL
- Opening patterns: Hey team,
- Closing patterns: Thanks!

### PROFESSIONAL / EXTERNAL
- Opening patterns: Hi Sam,
- Closing patterns: Best,

### FORMAL / EXECUTIVE
- Opening patterns: Dear Board Members,
- Closing patterns: Respectfully,
"""

_DRY_RUN_TEXT: dict[str, str] = {
    "builder": _DRY_RUN_PROFILE,
    "refiner": _DRY_RUN_PROFILE,
    "tester": "Hey team, quick question about Friday's launch. Can we sync at 3? Thanks!",
    "modifier": "Hey team, quick one: can we move the sync to 3? Thanks!",
    "chat": "Hi Sam, thanks for the quick turnaround. I'll review the draft today. Best,",
}


class DryRunClient:
    """Drop-in replacement for CompletionClient that makes zero API calls."""

    model = "dry-run"

    async def complete(
        self,
        *,
        system: str,
        user_message: str,
        history: Sequence[ChatMessage] = (),
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int | None = None,
        on_tokens: TokensCallback | None = None,
    ) -> str:
        key = self._detect_agent(system)
        logger.info("[dry-run] %s completion (%d chars of input)", key, len(user_message))
        if on_tokens:
            on_tokens(0, 0)
        return _DRY_RUN_TEXT[key]

    @staticmethod
    def _detect_agent(system: str) -> str:
        """Guess which agent is calling from its system prompt.

        Order matters — the chat and modifier prompts embed the user's whole
        profile, which may itself mention refinement or prompt building.
        """
        if "You are helping modify content" in system:
            return "modifier"
        if "You are helping the user write content" in system:
            return "chat"
        if "Prompt Architect" in system:
            return "builder"
        if "refining IMV" in system:
            return "refiner"
        if "writes in a specific person's voice" in system:
            return "tester"
        return "chat"
