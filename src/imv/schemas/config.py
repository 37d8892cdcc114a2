"""Configuration schema — validates imv-config.yml."""

from pydantic import BaseModel, Field, model_validator

from imv.schemas.exports import PlatformId


class ImvConfig(BaseModel):
    """Top-level configuration loaded from imv-config.yml.

    Every field has a default, so an empty mapping is a valid config.
    At least one export platform must remain enabled.
    """

    # Model settings
    model: str = "gpt-4o"
    max_tokens: int = Field(default=2000, gt=0)
    temperature: float = Field(default=0.7, ge=0.0, le=1.0)

    # Platforms written by ``imv export`` when no --platform is given
    platforms: list[PlatformId] = list(PlatformId)

    # Chat context: number of history turns sent with each request
    history_limit: int = Field(default=10, ge=0)

    # Output
    output_directory: str = "./output"

    @model_validator(mode="after")
    def check_has_platforms(self) -> "ImvConfig":
        if not self.platforms:
            raise ValueError("At least one platform is required")
        return self
