"""Pydantic models for the sections extracted from a voice profile."""

from pydantic import BaseModel, ConfigDict

# Fallback values used when a section cannot be located in the profile text.
DEFAULT_USER_NAME = "User"
TONE_FALLBACK = "Analysis not available"
VOCABULARY_FALLBACK = "Signatures not available"
ANTI_PATTERNS_FALLBACK = "Anti-patterns not available"
STRUCTURE_FALLBACK = "Structure not specified"
OPENINGS_FALLBACK = "Openings not specified"
CLOSINGS_FALLBACK = "Closings not specified"
EXAMPLE_FALLBACK = "No example available"

MAX_SIGNATURE_PATTERNS = 10
MAX_AVOIDANCE_PATTERNS = 10


class ModeSection(BaseModel):
    """One audience/formality mode (casual, professional or formal)."""

    model_config = ConfigDict(frozen=True)

    text: str = ""  # whole mode span, "" when the mode is missing
    structure: str = STRUCTURE_FALLBACK
    openings: str = OPENINGS_FALLBACK
    closings: str = CLOSINGS_FALLBACK
    example: str = EXAMPLE_FALLBACK


class ExtractedSections(BaseModel):
    """Named sections pulled out of a voice profile.

    Every field is always present. A section that could not be matched
    holds its fallback value (an empty string, an empty list, or one of
    the placeholder strings above), so consumers never see ``None``.
    """

    model_config = ConfigDict(frozen=True)

    user_name: str = DEFAULT_USER_NAME
    voice_identity: str = ""
    core_voice: str = ""
    tone_analysis: str = TONE_FALLBACK
    vocabulary_signatures: str = VOCABULARY_FALLBACK
    anti_patterns: str = ANTI_PATTERNS_FALLBACK
    signature_patterns: list[str] = []   # at most MAX_SIGNATURE_PATTERNS
    avoidance_patterns: list[str] = []   # at most MAX_AVOIDANCE_PATTERNS
    sentence_mechanics: str = ""
    casual_mode: ModeSection = ModeSection()
    professional_mode: ModeSection = ModeSection()
    formal_mode: ModeSection = ModeSection()

    @property
    def has_core_content(self) -> bool:
        """True when either of the two essential fields was extracted."""
        return bool(self.core_voice or self.voice_identity)

    def modes(self) -> list[tuple[str, ModeSection]]:
        """Return the three modes with their A/B/C display labels, in order."""
        return [
            ("A) Casual / Internal", self.casual_mode),
            ("B) Professional / External", self.professional_mode),
            ("C) Formal / Executive", self.formal_mode),
        ]
