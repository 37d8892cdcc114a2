"""Models for user-added phrase rules."""

from enum import Enum

from pydantic import BaseModel


class RuleType(str, Enum):
    """Whether a phrase should be avoided or preferred."""

    AVOID = "avoid"
    PREFER = "prefer"


class RuleResult(BaseModel):
    """Outcome of adding a rule: the new profile text plus a user-facing message."""

    prompt_text: str
    phrase: str
    rule_type: RuleType
    message: str
    already_exists: bool = False
