"""YAML config loader — reads imv-config.yml into ImvConfig."""

from pathlib import Path

import yaml

from imv.schemas.config import ImvConfig


def load_config(path: str | Path) -> ImvConfig:
    """Load and validate a config file.

    Raises ``FileNotFoundError`` if the path doesn't exist and
    ``pydantic.ValidationError`` if the YAML content is invalid.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    raw = yaml.safe_load(path.read_text())
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file must be a YAML mapping, got {type(raw).__name__}")

    # A key with only commented-out items loads as None; fall back to the default.
    if "platforms" in raw and raw["platforms"] is None:
        del raw["platforms"]

    return ImvConfig(**raw)
