"""Chat-side enums and message models: modification types, writing modes, voice modes."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel


class ModificationType(str, Enum):
    """Canned transformations that can be applied to generated text."""

    SHORTER = "shorter"
    LONGER = "longer"
    MORE_CASUAL = "more_casual"
    MORE_PROFESSIONAL = "more_professional"
    MORE_LIKE_ME = "more_like_me"
    CLEARER = "clearer"
    AUDIENCE_TEAM = "audience_team"
    AUDIENCE_CLIENT = "audience_client"
    AUDIENCE_EXECUTIVE = "audience_executive"
    REWRITE = "rewrite"


class WritingMode(str, Enum):
    """Kind of content the user is drafting in the chat."""

    GENERAL = "general"
    EMAIL = "email"
    LINKEDIN = "linkedin"
    TWITTER = "twitter"
    SLACK = "slack"
    FORMAL_LETTER = "formal_letter"


class VoiceMode(str, Enum):
    """Formality mode selected with A/B/C."""

    CASUAL = "A"
    PROFESSIONAL = "B"
    FORMAL = "C"

    @property
    def display_name(self) -> str:
        return {
            VoiceMode.CASUAL: "CASUAL/INTERNAL",
            VoiceMode.PROFESSIONAL: "PROFESSIONAL/EXTERNAL",
            VoiceMode.FORMAL: "FORMAL/EXECUTIVE",
        }[self]

    @property
    def description(self) -> str:
        return {
            VoiceMode.CASUAL: "casual, friendly, for team members and internal communication",
            VoiceMode.PROFESSIONAL: "professional, balanced, for clients and business partners",
            VoiceMode.FORMAL: "formal, polished, for board members, legal, and official correspondence",
        }[self]


class ChatMessage(BaseModel):
    """A single turn of conversation history."""

    role: Literal["user", "assistant", "system"]
    content: str
