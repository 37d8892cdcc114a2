"""Platform renderers — frame a voice profile for a specific AI assistant.

Each renderer builds its body from the extracted sections. When neither
the core voice nor the voice identity could be extracted, the renderer
wraps the raw profile text verbatim instead, so an export is never a
template full of empty fields. Every export ends with the shared
workflow instructions.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from imv.parsing.extractor import extract_sections
from imv.platforms.workflow import WORKFLOW_INSTRUCTIONS
from imv.schemas.exports import PlatformExportSet, PlatformId
from imv.schemas.sections import (
    ANTI_PATTERNS_FALLBACK,
    CLOSINGS_FALLBACK,
    EXAMPLE_FALLBACK,
    OPENINGS_FALLBACK,
    STRUCTURE_FALLBACK,
    TONE_FALLBACK,
    VOCABULARY_FALLBACK,
    ExtractedSections,
    ModeSection,
)

logger = logging.getLogger(__name__)

Renderer = Callable[[ExtractedSections, str], str]

_RULE = "==========================================="
_CLAUSE_BREAK = re.compile(r"[.;!?\n]+")

COPILOT_MAX_ITEMS = 5
COPILOT_MAX_CLAUSES = 3
COPILOT_MAX_MODE_CHARS = 120
GEMINI_MAX_ITEMS = 8
GEMINI_MAX_MODE_CHARS = 300


# ----------------------------------------------------------------------
# Shared helpers
# ----------------------------------------------------------------------

def _with_workflow(body: str) -> str:
    return f"{body}\n\n{WORKFLOW_INSTRUCTIONS}"


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[:limit - 3].rstrip() + "..."


def _tone(sections: ExtractedSections) -> str:
    """Tone analysis when one was extracted, otherwise the core voice text."""
    if sections.tone_analysis != TONE_FALLBACK:
        return sections.tone_analysis
    return sections.core_voice


def _clauses(text: str, limit: int) -> str:
    parts = [p.strip(" \t-•*") for p in _CLAUSE_BREAK.split(text)]
    return "; ".join([p for p in parts if p][:limit])


def _bullets(items: list[str], limit: int | None = None) -> str:
    chosen = items if limit is None else items[:limit]
    return "\n".join(f"- {item}" for item in chosen)


def _vocabulary(sections: ExtractedSections, limit: int | None = None) -> str:
    if sections.signature_patterns:
        return _bullets(sections.signature_patterns, limit)
    if sections.vocabulary_signatures != VOCABULARY_FALLBACK:
        return sections.vocabulary_signatures
    return ""


def _avoidance(sections: ExtractedSections, limit: int | None = None) -> str:
    if sections.avoidance_patterns:
        return _bullets(sections.avoidance_patterns, limit)
    if sections.anti_patterns != ANTI_PATTERNS_FALLBACK:
        return sections.anti_patterns
    return ""


def _mode_text(mode: ModeSection, limit: int | None = None) -> str:
    """Labelled mode fields when extracted, else the whole mode span."""
    fields = [
        ("Structure", mode.structure, STRUCTURE_FALLBACK),
        ("Openings", mode.openings, OPENINGS_FALLBACK),
        ("Closings", mode.closings, CLOSINGS_FALLBACK),
        ("Example", mode.example, EXAMPLE_FALLBACK),
    ]
    found = [f"{label}: {value}" for label, value, fallback in fields if value != fallback]
    body = "\n".join(found) if found else mode.text
    return _truncate(body, limit) if limit else body


def _inline_list(items: list[str], limit: int) -> str:
    return "; ".join(items[:limit])


# ----------------------------------------------------------------------
# Renderers
# ----------------------------------------------------------------------

def render_chatgpt(sections: ExtractedSections, raw_text: str) -> str:
    """Conversational system prompt with markdown headers."""
    if not sections.has_core_content:
        return _with_workflow(
            "You are a writing assistant that mimics my personal writing voice.\n\n"
            f"{_RULE}\nMY COMPLETE VOICE PROFILE:\n{_RULE}\n\n{raw_text}"
        )

    parts = [
        "You are a writing assistant that mimics my personal writing voice. "
        "Write in my voice, not your own, and keep following this profile "
        "for the rest of our conversation.",
    ]
    if sections.voice_identity:
        parts.append(f"## Who I Am\n\n{sections.voice_identity}")
    if sections.core_voice:
        parts.append(f"## How I Sound\n\n{sections.core_voice}")
    if sections.sentence_mechanics:
        parts.append(f"## How I Build Sentences\n\n{sections.sentence_mechanics}")
    if vocabulary := _vocabulary(sections):
        parts.append(
            "## Phrases I Commonly Use\n\n"
            f"{vocabulary}\n\nUse these naturally and sparingly. Don't force them."
        )
    if avoidance := _avoidance(sections):
        parts.append(
            "## Language I Avoid\n\n"
            f"{avoidance}\n\nAvoid these unless I explicitly ask for a different tone."
        )
    modes = [
        f"### {label}\n\n{text}"
        for label, mode in sections.modes()
        if (text := _mode_text(mode))
    ]
    if modes:
        parts.append("## My Writing Modes\n\n" + "\n\n".join(modes))
    return _with_workflow("\n\n".join(parts))


def render_claude(sections: ExtractedSections, raw_text: str) -> str:
    """Nested pseudo-XML tags grouping description, vocabulary, avoidance and modes."""
    if not sections.has_core_content:
        return _with_workflow(
            f"<voice_profile>\n<complete_profile>\n{raw_text}\n</complete_profile>\n</voice_profile>"
        )

    lines = ["<voice_profile>", "<description>"]
    if sections.voice_identity:
        lines += ["<identity>", sections.voice_identity, "</identity>"]
    if sections.core_voice:
        lines += ["<core_voice>", sections.core_voice, "</core_voice>"]
    if sections.sentence_mechanics:
        lines += ["<mechanics>", sections.sentence_mechanics, "</mechanics>"]
    lines.append("</description>")
    if vocabulary := _vocabulary(sections):
        lines += ["<vocabulary>", vocabulary, "</vocabulary>"]
    if avoidance := _avoidance(sections):
        lines += ["<avoidance>", avoidance, "</avoidance>"]

    mode_blocks = []
    for key, (label, mode) in zip("ABC", sections.modes()):
        if text := _mode_text(mode):
            name = label.split(") ", 1)[-1]
            mode_blocks += [f'<mode id="{key}" name="{name}">', text, "</mode>"]
    if mode_blocks:
        lines += ["<modes>", *mode_blocks, "</modes>"]
    lines.append("</voice_profile>")
    return _with_workflow("\n".join(lines))


def render_copilot(sections: ExtractedSections, raw_text: str) -> str:
    """Condensed bullet summary for short-context assistants."""
    if not sections.has_core_content:
        return _with_workflow(
            "# My Writing Voice Profile\n\n"
            "You are a writing assistant that mimics my personal writing voice. "
            f"Follow this complete profile:\n\n---\n\n{raw_text}\n\n---"
        )

    bullets = []
    if tone := _clauses(_tone(sections) or sections.voice_identity, COPILOT_MAX_CLAUSES):
        bullets.append(f"- **Tone:** {tone}")
    if sections.signature_patterns:
        bullets.append(f"- **Use:** {_inline_list(sections.signature_patterns, COPILOT_MAX_ITEMS)}")
    if sections.avoidance_patterns:
        bullets.append(f"- **Avoid:** {_inline_list(sections.avoidance_patterns, COPILOT_MAX_ITEMS)}")
    for label, mode in sections.modes():
        if text := _mode_text(mode):
            one_line = " ".join(text.split())
            bullets.append(f"- **{label}:** {_truncate(one_line, COPILOT_MAX_MODE_CHARS)}")

    return _with_workflow(
        "# My Writing Voice Profile\n\n"
        "You are a writing assistant that mimics my personal writing voice.\n\n"
        + "\n".join(bullets)
    )


def render_gemini(sections: ExtractedSections, raw_text: str) -> str:
    """Verbose framing with explicitly numbered sections and modes."""
    header = f"{_RULE}\nMY VOICE PROFILE\n{_RULE}"
    if not sections.has_core_content:
        return _with_workflow(
            "I want you to write in my personal voice. "
            f"Here's my complete voice profile:\n\n{header}\n\n{raw_text}"
        )

    numbered: list[tuple[str, str]] = []
    if sections.voice_identity:
        numbered.append(("VOICE IDENTITY", sections.voice_identity))
    if sections.core_voice:
        numbered.append(("CORE VOICE", sections.core_voice))
    if sections.sentence_mechanics:
        numbered.append(("SENTENCE & PARAGRAPH MECHANICS", sections.sentence_mechanics))
    if vocabulary := _vocabulary(sections, GEMINI_MAX_ITEMS):
        numbered.append(("SIGNATURE PHRASES (use naturally, never forced)", vocabulary))
    if avoidance := _avoidance(sections, GEMINI_MAX_ITEMS):
        numbered.append(("AVOIDANCE PATTERNS (avoid unless I ask otherwise)", avoidance))
    modes = [
        f"Mode {key} - {label.split(') ', 1)[-1]}:\n{text}"
        for key, (label, mode) in zip("ABC", sections.modes())
        if (text := _mode_text(mode, GEMINI_MAX_MODE_CHARS))
    ]
    if modes:
        numbered.append(("WRITING MODES", "\n\n".join(modes)))

    body = "\n\n".join(
        f"{i}. {title}\n{content}" for i, (title, content) in enumerate(numbered, 1)
    )
    return _with_workflow(
        "I want you to write in my personal voice. Here's my voice profile, "
        "organized into numbered sections. Read every section before writing "
        f"and apply all of them.\n\n{header}\n\n{body}"
    )


def render_generic(sections: ExtractedSections, raw_text: str) -> str:
    """Plain-language framing with no platform-specific syntax."""
    if not sections.has_core_content:
        return _with_workflow(
            "VOICE PROFILE INSTRUCTIONS\n\n"
            "You are helping me write content in my personal voice. "
            "Follow this complete voice profile:\n\n"
            f"{_RULE}\nMY COMPLETE VOICE PROFILE\n{_RULE}\n\n{raw_text}"
        )

    parts = [
        "VOICE PROFILE INSTRUCTIONS",
        "You are helping me write content in my personal voice. Follow these rules:",
    ]
    if sections.voice_identity:
        parts.append(f"WHO I AM:\n{sections.voice_identity}")
    if sections.core_voice:
        parts.append(f"HOW I SOUND:\n{sections.core_voice}")
    if vocabulary := _vocabulary(sections):
        parts.append(f"PHRASES I USE:\n{vocabulary}")
    if avoidance := _avoidance(sections):
        parts.append(f"PHRASES I AVOID:\n{avoidance}")
    modes = [f"{label}:\n{text}" for label, mode in sections.modes() if (text := _mode_text(mode))]
    if modes:
        parts.append("WRITING MODES:\n" + "\n\n".join(modes))
    return _with_workflow("\n\n".join(parts))


_RENDERERS: dict[PlatformId, Renderer] = {
    PlatformId.CHATGPT: render_chatgpt,
    PlatformId.CLAUDE: render_claude,
    PlatformId.COPILOT: render_copilot,
    PlatformId.GEMINI: render_gemini,
    PlatformId.GENERIC: render_generic,
}


def render_for_platform(
    sections: ExtractedSections,
    raw_text: str,
    platform: PlatformId | str,
) -> str:
    """Render one platform export. Unknown platform names get the generic framing."""
    try:
        platform_id = PlatformId(platform)
    except ValueError:
        logger.warning("Unknown platform %r, using generic framing", platform)
        platform_id = PlatformId.GENERIC
    return _RENDERERS[platform_id](sections, raw_text)


def render_all(sections: ExtractedSections, raw_text: str) -> PlatformExportSet:
    """Render every platform export."""
    return PlatformExportSet(
        **{p.value: render_for_platform(sections, raw_text, p) for p in PlatformId}
    )


def export_profile(profile_text: str) -> PlatformExportSet:
    """Extract sections from ``profile_text`` and render all platform exports."""
    return render_all(extract_sections(profile_text), profile_text)
