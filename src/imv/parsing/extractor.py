"""Section extractor — slices a voice profile into ExtractedSections.

Each field has an ordered tuple of strategies, one per heading vocabulary
that profile generators have used over time. The first strategy that
yields a non-empty span wins; spans from different vocabularies are never
merged. A field nothing matches keeps its fallback value.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from imv.parsing.lists import extract_list_items
from imv.parsing.strategies import (
    BracketSpan,
    BulletField,
    DelimitedBlock,
    HeadingSpan,
    LabeledField,
    SectionStrategy,
)
from imv.schemas.sections import (
    DEFAULT_USER_NAME,
    MAX_AVOIDANCE_PATTERNS,
    MAX_SIGNATURE_PATTERNS,
    ExtractedSections,
    ModeSection,
)

logger = logging.getLogger(__name__)

_USER_NAME = re.compile(r"IMV STYLE PROFILE[ \t]*-[ \t]*(\S[^\n]*)", re.IGNORECASE)

VOICE_IDENTITY: tuple[SectionStrategy, ...] = (
    HeadingSpan(r"VOICE IDENTITY"),
    BracketSpan("VOICE IDENTITY"),
)

CORE_VOICE: tuple[SectionStrategy, ...] = (
    HeadingSpan(r"CORE VOICE"),
    DelimitedBlock("CORE VOICE FOUNDATION", stops=("MODE A:",)),
    BracketSpan("TONE ANALYSIS"),
)

TONE_ANALYSIS: tuple[SectionStrategy, ...] = (
    BracketSpan("TONE ANALYSIS"),
    LabeledField("TONE ANALYSIS"),
    BulletField(r"overall tone"),
)

VOCABULARY_SIGNATURES: tuple[SectionStrategy, ...] = (
    LabeledField("VOCABULARY SIGNATURES"),
    BracketSpan("SIGNATURE PHRASES"),
    HeadingSpan(r"Signature Patterns|Commonly Used Language"),
)

ANTI_PATTERNS: tuple[SectionStrategy, ...] = (
    LabeledField("NEVER USE"),
    BracketSpan("ANTI-PATTERNS"),
    BracketSpan("NEVER USE"),
    HeadingSpan(r"Avoidance Patterns|Never Used Language"),
)

SIGNATURE_LIST: tuple[SectionStrategy, ...] = (
    HeadingSpan(r"Signature Patterns|Commonly Used Language"),
    BracketSpan("SIGNATURE PHRASES"),
    LabeledField("VOCABULARY SIGNATURES"),
)

AVOIDANCE_LIST: tuple[SectionStrategy, ...] = (
    HeadingSpan(r"Avoidance Patterns|Never Used Language"),
    BracketSpan("NEVER USE"),
    BracketSpan("ANTI-PATTERNS"),
    LabeledField("NEVER USE"),
)

SENTENCE_MECHANICS: tuple[SectionStrategy, ...] = (
    HeadingSpan(r"MECHANICS"),
    LabeledField("SENTENCE STRUCTURE"),
)

CASUAL_MODE: tuple[SectionStrategy, ...] = (
    HeadingSpan(r"\bCASUAL\b"),
    DelimitedBlock("MODE A:", stops=("MODE B:", "MODE C:", "REMEMBER:")),
)

PROFESSIONAL_MODE: tuple[SectionStrategy, ...] = (
    HeadingSpan(r"\bPROFESSIONAL\b"),
    DelimitedBlock("MODE B:", stops=("MODE A:", "MODE C:", "REMEMBER:")),
)

FORMAL_MODE: tuple[SectionStrategy, ...] = (
    HeadingSpan(r"\bFORMAL\b"),
    DelimitedBlock("MODE C:", stops=("MODE A:", "MODE B:", "REMEMBER:")),
)

# Sub-fields searched inside a mode span
MODE_STRUCTURE = (LabeledField("STRUCTURE"), BulletField(r"structure"))
MODE_OPENINGS = (LabeledField("OPENINGS"), BulletField(r"opening"))
MODE_CLOSINGS = (LabeledField("CLOSINGS"), BulletField(r"closing"))
MODE_EXAMPLE = (LabeledField("EXAMPLE"), BulletField(r"example"))


def first_match(text: str, strategies: Sequence[SectionStrategy], field: str = "") -> str | None:
    """Return the first non-empty span produced by ``strategies``, or ``None``.

    A strategy that raises is logged and skipped so one bad pattern can't
    take down extraction for the whole profile.
    """
    if not text:
        return None
    for strategy in strategies:
        try:
            span = strategy.find(text)
        except Exception as exc:
            logger.warning("Strategy %s failed on field %s: %s", strategy.name, field, exc)
            continue
        if span:
            logger.debug("Field %s matched by %s", field, strategy.name)
            return span
    logger.debug("Field %s not found", field)
    return None


def _extract_mode(text: str, strategies: Sequence[SectionStrategy], field: str) -> ModeSection:
    span = first_match(text, strategies, field)
    if span is None:
        return ModeSection()

    values: dict[str, str] = {"text": span}
    for key, sub_strategies in (
        ("structure", MODE_STRUCTURE),
        ("openings", MODE_OPENINGS),
        ("closings", MODE_CLOSINGS),
        ("example", MODE_EXAMPLE),
    ):
        found = first_match(span, sub_strategies, f"{field}.{key}")
        if found is not None:
            values[key] = found
    return ModeSection(**values)


def extract_sections(profile_text: str) -> ExtractedSections:
    """Extract every known section from ``profile_text``.

    Never raises for string input; missing sections keep the fallback
    values defined on ``ExtractedSections``. Calling it twice on the same
    text returns equal results.
    """
    text = profile_text or ""
    values: dict[str, object] = {}

    name_match = _USER_NAME.search(text)
    if name_match:
        values["user_name"] = name_match.group(1).strip() or DEFAULT_USER_NAME

    for key, strategies in (
        ("voice_identity", VOICE_IDENTITY),
        ("core_voice", CORE_VOICE),
        ("tone_analysis", TONE_ANALYSIS),
        ("vocabulary_signatures", VOCABULARY_SIGNATURES),
        ("anti_patterns", ANTI_PATTERNS),
        ("sentence_mechanics", SENTENCE_MECHANICS),
    ):
        span = first_match(text, strategies, key)
        if span is not None:
            values[key] = span

    signature_span = first_match(text, SIGNATURE_LIST, "signature_patterns")
    if signature_span is not None:
        values["signature_patterns"] = extract_list_items(signature_span, MAX_SIGNATURE_PATTERNS)

    avoidance_span = first_match(text, AVOIDANCE_LIST, "avoidance_patterns")
    if avoidance_span is not None:
        values["avoidance_patterns"] = extract_list_items(avoidance_span, MAX_AVOIDANCE_PATTERNS)

    values["casual_mode"] = _extract_mode(text, CASUAL_MODE, "casual_mode")
    values["professional_mode"] = _extract_mode(text, PROFESSIONAL_MODE, "professional_mode")
    values["formal_mode"] = _extract_mode(text, FORMAL_MODE, "formal_mode")

    return ExtractedSections(**values)


# The dashboard and older callers know this operation as "parse".
parse_prompt = extract_sections
