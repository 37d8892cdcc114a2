"""Platform identifiers and the rendered export set."""

from enum import Enum

from pydantic import BaseModel


class PlatformId(str, Enum):
    """Target AI platforms a voice profile can be exported to."""

    CHATGPT = "chatgpt"
    CLAUDE = "claude"
    COPILOT = "copilot"
    GEMINI = "gemini"
    GENERIC = "generic"


class PlatformInfo(BaseModel):
    """Display metadata for a platform."""

    name: str
    icon: str
    description: str


PLATFORM_INFO: dict[PlatformId, PlatformInfo] = {
    PlatformId.CHATGPT: PlatformInfo(name="ChatGPT", icon="🤖", description="Optimized for OpenAI ChatGPT"),
    PlatformId.CLAUDE: PlatformInfo(name="Claude", icon="🧠", description="XML-structured for Anthropic Claude"),
    PlatformId.COPILOT: PlatformInfo(name="Copilot", icon="✈️", description="Concise format for Microsoft Copilot"),
    PlatformId.GEMINI: PlatformInfo(name="Gemini", icon="✨", description="Detailed format for Google Gemini"),
    PlatformId.GENERIC: PlatformInfo(name="Universal", icon="📋", description="Works with any AI assistant"),
}


class PlatformExportSet(BaseModel):
    """One rendered instruction string per platform."""

    chatgpt: str
    claude: str
    copilot: str
    gemini: str
    generic: str

    def get(self, platform: PlatformId | str) -> str:
        return getattr(self, PlatformId(platform).value)
