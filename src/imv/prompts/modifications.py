"""Modification instructions — one canned directive per ModificationType.

The instructions steer the model with explicit wording ("cut by 30-50%",
"do NOT introduce new phrases") rather than sampling parameters.
"""

from __future__ import annotations

from imv.schemas.chat import ModificationType


class UnknownModificationTypeError(KeyError):
    """Raised when a caller asks for a modification type outside the closed set."""


MODIFICATION_PROMPTS: dict[ModificationType, str] = {
    ModificationType.SHORTER: (
        "Make this shorter and more concise while keeping the key points. "
        "Cut the length by 30-50%. Remove filler and repetition, and do NOT drop "
        "the main ask or any deadline."
    ),
    ModificationType.LONGER: (
        "Expand this with more detail, examples, or context. Add about 30-50% more "
        "content using my own vocabulary, not generic filler."
    ),
    ModificationType.MORE_CASUAL: (
        "Rewrite this in a more casual, friendly tone. Use contractions, simpler "
        "words, and a conversational style. It MUST read noticeably more relaxed "
        "than the original."
    ),
    ModificationType.MORE_PROFESSIONAL: (
        "Rewrite this in a more professional, polished tone. Use formal language and "
        "business-appropriate phrasing. Remove slang and casual expressions."
    ),
    ModificationType.MORE_LIKE_ME: (
        "Rewrite this to sound even more like my natural voice. Emphasize my signature "
        "phrases and writing patterns from my IMV profile. Do NOT introduce new phrases "
        "that are not in the profile, and never use anything from my avoidance patterns."
    ),
    ModificationType.CLEARER: (
        "Rewrite this to be clearer and easier to understand. Simplify complex "
        "sentences, replace jargon with plain language, and improve the flow."
    ),
    ModificationType.AUDIENCE_TEAM: (
        "Adapt this for an internal team audience. Keep it friendly but focused, "
        "assuming familiarity with context. Skip formalities and be direct."
    ),
    ModificationType.AUDIENCE_CLIENT: (
        "Adapt this for a client audience. Be professional, clear, and ensure it "
        "reflects well on our organization. Explain any context they might not have."
    ),
    ModificationType.AUDIENCE_EXECUTIVE: (
        "Adapt this for an executive audience. Be concise, lead with the key point or "
        "decision needed, focus on business impact, and use a formal tone. Keep it to "
        "3-4 sentences unless more is absolutely necessary."
    ),
    ModificationType.REWRITE: (
        "Generate a completely fresh version of this with the same intent but "
        "different wording and structure. Use a different opening and closing; "
        "this must NOT look like a minor edit."
    ),
}

# Label and icon shown on the modification buttons, in menu order
MODIFY_OPTIONS: list[tuple[ModificationType, str, str]] = [
    (ModificationType.SHORTER, "Shorter", "📉"),
    (ModificationType.LONGER, "Longer", "📈"),
    (ModificationType.MORE_CASUAL, "Casual", "😊"),
    (ModificationType.MORE_PROFESSIONAL, "Professional", "👔"),
    (ModificationType.MORE_LIKE_ME, "More like me", "🎯"),
    (ModificationType.CLEARER, "Clearer", "💡"),
    (ModificationType.AUDIENCE_TEAM, "Team", "👥"),
    (ModificationType.AUDIENCE_CLIENT, "Client", "👥"),
    (ModificationType.AUDIENCE_EXECUTIVE, "Executive", "👥"),
    (ModificationType.REWRITE, "Rewrite", "🔄"),
]


def instruction_for(modification_type: ModificationType | str) -> str:
    """Return the instruction for ``modification_type``.

    Accepts the enum or its string value. Anything outside the closed set
    raises ``UnknownModificationTypeError``.
    """
    try:
        key = ModificationType(modification_type)
    except ValueError:
        valid = ", ".join(t.value for t in ModificationType)
        raise UnknownModificationTypeError(
            f"Unknown modification type {modification_type!r}. Valid options: {valid}"
        ) from None
    return MODIFICATION_PROMPTS[key]
