"""Prompts for the Modifier agent."""

from imv.prompts.modifications import instruction_for
from imv.schemas.chat import ModificationType

NO_PROFILE_SYSTEM_PROMPT = "You are a helpful writing assistant."

PROFILE_SYSTEM_TEMPLATE = """\
{profile}

---

You are helping modify content while maintaining the user's voice profile above."""

USER_PROMPT_TEMPLATE = """\
Here is the content to modify:

---
{content}
---

Modification requested: {instruction}

Please provide the modified version only, without any explanation or preamble."""


def build_system_prompt(prompt_text: str | None) -> str:
    if prompt_text and prompt_text.strip():
        return PROFILE_SYSTEM_TEMPLATE.format(profile=prompt_text)
    return NO_PROFILE_SYSTEM_PROMPT


def build_modification_request(
    original_content: str,
    modification_type: ModificationType | str,
) -> str:
    """User message asking for ``modification_type`` applied to ``original_content``."""
    return USER_PROMPT_TEMPLATE.format(
        content=original_content,
        instruction=instruction_for(modification_type),
    )
