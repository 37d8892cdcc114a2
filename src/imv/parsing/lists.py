"""Turn a matched section span into a list of phrases."""

from __future__ import annotations

import re

# "- item", "• item", "* item"; not "---" rules or "**bold**" lines
_BULLET = re.compile(r"^[-•*](?![-*])[ \t]*")
_QUOTES = "\"'“”‘’"
_LEADING_QUOTED = re.compile(r"^[\"“'‘](.+?)[\"”'’](?=\W|$)")


def _clean_item(line: str) -> str:
    """Strip the bullet marker, leftover dashes, markdown emphasis and quotes."""
    item = _BULLET.sub("", line.strip(), count=1).lstrip("-* \t").rstrip("*").strip()
    quoted = _LEADING_QUOTED.match(item)
    if quoted:
        return quoted.group(1).strip()
    return item.strip(_QUOTES).strip()


def extract_list_items(span: str, limit: int) -> list[str]:
    """Return up to ``limit`` bullet or quoted items from ``span``.

    Only lines that start with a bullet marker or a quote are kept.
    Document order is preserved and repeated items keep their first
    occurrence.
    """
    items: list[str] = []
    if limit <= 0:
        return items
    for line in span.splitlines():
        stripped = line.strip()
        if not stripped:
            continue
        if not (_BULLET.match(stripped) or stripped[0] in _QUOTES):
            continue
        item = _clean_item(stripped)
        if item and item not in items:
            items.append(item)
            if len(items) >= limit:
                break
    return items
