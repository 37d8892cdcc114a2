"""Append user-added avoid/prefer phrases to a voice profile.

The profile text is never edited in place: ``add_rule`` returns a new
string, which the caller stores as a new profile version.
"""

from __future__ import annotations

import logging
import re

from imv.schemas.rules import RuleResult, RuleType

logger = logging.getLogger(__name__)

_AVOIDANCE_SECTION = re.compile(r"Avoidance Patterns[\s\S]*?(?=##|\Z)", re.IGNORECASE)
_SIGNATURE_SECTION = re.compile(r"Signature Patterns[\s\S]*?(?=##|\Z)", re.IGNORECASE)

_AVOIDANCE_SUBSECTION = re.compile(
    r"(### B\. Rarely or Never Used Language \(Avoidance Patterns\)[\s\S]*?)(?=###|## \d|\Z)",
    re.IGNORECASE,
)
_SIGNATURE_SUBSECTION = re.compile(
    r"(### A\. Commonly Used Language \(Signature Patterns\)[\s\S]*?)(?=###|## \d|\Z)",
    re.IGNORECASE,
)
_LANGUAGE_SECTION = re.compile(r"(## 3\. LANGUAGE PATTERN ANALYSIS[\s\S]*?)(?=## 4|\Z)", re.IGNORECASE)


def _insert_after(text: str, match: re.Match[str], addition: str) -> str:
    insert_at = match.end()
    return text[:insert_at].rstrip() + addition + "\n" + text[insert_at:]


def _already_listed(text: str, phrase: str, section: re.Pattern[str]) -> bool:
    lowered = phrase.lower()
    if lowered not in text.lower():
        return False
    found = section.search(text)
    return bool(found and lowered in found.group(0).lower())


def add_rule(prompt_text: str, phrase: str, rule_type: RuleType | str) -> RuleResult:
    """Add ``phrase`` to the avoidance or signature patterns of a profile.

    Raises ``ValueError`` for an empty phrase or an unknown rule type.
    """
    phrase = phrase.strip()
    if not phrase:
        raise ValueError("Missing phrase")
    rule_type = RuleType(rule_type)

    if rule_type is RuleType.AVOID:
        if _already_listed(prompt_text, phrase, _AVOIDANCE_SECTION):
            return RuleResult(
                prompt_text=prompt_text,
                phrase=phrase,
                rule_type=rule_type,
                message="This phrase is already in your avoidance patterns",
                already_exists=True,
            )

        addition = f'\n- "{phrase}" — User-added avoidance (do not use this phrase)'
        if match := _AVOIDANCE_SUBSECTION.search(prompt_text):
            updated = _insert_after(prompt_text, match, addition)
        elif match := _LANGUAGE_SECTION.search(prompt_text):
            updated = _insert_after(
                prompt_text, match, "\n\n### User-Added Avoidance Patterns" + addition,
            )
        else:
            updated = prompt_text + "\n\n## USER-ADDED RULES\n\n### Avoidance Patterns" + addition
        message = f'"{phrase}" added to avoidance patterns'
    else:
        if _already_listed(prompt_text, phrase, _SIGNATURE_SECTION):
            return RuleResult(
                prompt_text=prompt_text,
                phrase=phrase,
                rule_type=rule_type,
                message="This phrase is already in your preferred phrases",
                already_exists=True,
            )

        addition = f'\n- "{phrase}" — User-added preference (use naturally when appropriate)'
        if match := _SIGNATURE_SUBSECTION.search(prompt_text):
            updated = _insert_after(prompt_text, match, addition)
        else:
            updated = prompt_text + "\n\n## USER-ADDED RULES\n\n### Preferred Phrases" + addition
        message = f'"{phrase}" added to preferred phrases'

    logger.info("Added %s rule for phrase %r", rule_type.value, phrase)
    return RuleResult(prompt_text=updated, phrase=phrase, rule_type=rule_type, message=message)
