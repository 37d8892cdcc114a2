"""Short previews and summaries of a voice profile for list and card views."""

from __future__ import annotations

import re

from imv.parsing.extractor import CORE_VOICE, VOICE_IDENTITY, first_match

DEFAULT_VOICE_SUMMARY = (
    "Your personalized voice profile captures your unique writing style, "
    "tone, and communication patterns."
)

_RULE_RUNS = re.compile(r"[=\-]{3,}")
_WHITESPACE = re.compile(r"\s+")
_SENTENCE_BREAK = re.compile(r"[.!?]+")


def get_prompt_preview(prompt_text: str, max_length: int = 200) -> str:
    """Collapse the profile to a single line and cut it at ``max_length`` chars."""
    cleaned = _WHITESPACE.sub(" ", _RULE_RUNS.sub("", prompt_text)).strip()
    if len(cleaned) <= max_length:
        return cleaned
    return cleaned[:max_length] + "..."


def get_preview_lines(prompt_text: str, lines: int = 4) -> str:
    """Return the first ``lines`` non-blank lines of the profile."""
    kept = [line for line in prompt_text.split("\n") if line.strip()]
    return "\n".join(kept[:lines])


def extract_voice_summary(prompt_text: str) -> str:
    """Summarize the voice in a few sentences.

    Prefers prose sentences from the voice-identity section, then the first
    lines of the core voice section, then a generic default.
    """
    identity = first_match(prompt_text, VOICE_IDENTITY, "voice_identity")
    if identity:
        sentences = [s.strip() for s in _SENTENCE_BREAK.split(identity)]
        sentences = [
            s for s in sentences
            if len(s) > 20 and not s.startswith(("-", "•"))
        ][:3]
        if sentences:
            return ". ".join(sentences) + "."

    core = first_match(prompt_text, CORE_VOICE, "core_voice")
    if core:
        core_lines = [
            line.strip()
            for line in core.split("\n")
            if len(line.strip()) > 10 and not line.strip().startswith("#")
        ][:3]
        if core_lines:
            return " ".join(core_lines)[:300] + "..."

    return DEFAULT_VOICE_SUMMARY
