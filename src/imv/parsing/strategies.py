"""Pattern strategies that locate one section of a voice profile.

Voice profiles have been generated under several heading vocabularies
(numbered markdown headings, a legacy ``=====``-separated layout, and
``[BRACKET]`` labels). Each strategy below recognizes one way a section
can be marked up. The extractor tries a field's strategies in order and
keeps the first non-empty span.

Strategies must not raise for any input string: a miss returns ``None``.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

# A markdown heading line: "## 2. CORE VOICE FOUNDATION", "### A. Commonly ..."
_HEADING_LINE = re.compile(r"^(#{1,6})[ \t]+(\S[^\n]*)$", re.MULTILINE)

# "[SIGNATURE PHRASES]": mid-line, only upper-case labels count as the next
# label so template placeholders like "[Name]" don't cut a span short.
_NEXT_BRACKET_LABEL = re.compile(r"\[[A-Z][A-Z0-9 &/\-]*\]")

# "[signature phrases]" at the start of a line ends a span in any case.
_LINE_BRACKET_LABEL = re.compile(r"^[ \t]*\[[A-Za-z][A-Za-z0-9 &/\-]*\]", re.MULTILINE)

# Keywords that end a bracket span when they start a line (legacy layout).
_BRACKET_STOP_KEYWORDS = re.compile(
    r"^[ \t]*(?:MODE [ABC]:|NEVER USE|VOCABULARY|REMEMBER:)", re.MULTILINE
)

# "TONE ANALYSIS:" style field lines (upper case only).
_FIELD_LINE = re.compile(r"^[ \t]*[A-Z][A-Z &/\-]+:", re.MULTILINE)

# "=====" or "-----" separator lines between legacy blocks.
_SEPARATOR_LINE = re.compile(r"^[ \t]*(?:={3,}|-{3,})[ \t]*$", re.MULTILINE)


class SectionStrategy(ABC):
    """One way of locating a section in profile text."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier used in debug logs."""

    @abstractmethod
    def find(self, text: str) -> str | None:
        """Return the stripped span for this section, or ``None`` on a miss."""


class HeadingSpan(SectionStrategy):
    """Markdown heading whose title matches ``title`` (case-insensitive).

    The span runs from the line after the heading to the next heading of
    equal or higher level (fewer or equal ``#``), or to the end of text.
    Sub-headings stay inside the span.
    """

    def __init__(self, title: str) -> None:
        self._title = re.compile(title, re.IGNORECASE)

    @property
    def name(self) -> str:
        return f"heading:{self._title.pattern}"

    def find(self, text: str) -> str | None:
        headings = list(_HEADING_LINE.finditer(text))
        for i, heading in enumerate(headings):
            if not self._title.search(heading.group(2).rstrip()):
                continue
            level = len(heading.group(1))
            end = len(text)
            for following in headings[i + 1:]:
                if len(following.group(1)) <= level:
                    end = following.start()
                    break
            return text[heading.end():end].strip()
        return None


class BracketSpan(SectionStrategy):
    """Literal ``[LABEL]`` marker (case-insensitive).

    The span runs to the next upper-case ``[LABEL]``, a ``[label]`` of any
    case opening a line, a line starting with one of the legacy stop
    keywords, or the end of text.
    """

    def __init__(self, label: str) -> None:
        self._label = label
        self._marker = re.compile(r"\[" + re.escape(label) + r"\]", re.IGNORECASE)

    @property
    def name(self) -> str:
        return f"bracket:{self._label}"

    def find(self, text: str) -> str | None:
        match = self._marker.search(text)
        if not match:
            return None
        rest = text[match.end():]
        end = len(rest)
        # pos=1 keeps the rest of the marker's own line from ending the span
        stops = (
            _NEXT_BRACKET_LABEL.search(rest),
            _LINE_BRACKET_LABEL.search(rest, 1),
            _BRACKET_STOP_KEYWORDS.search(rest, 1),
        )
        for stop in stops:
            if stop and stop.start() < end:
                end = stop.start()
        return rest[:end].strip()


class LabeledField(SectionStrategy):
    """Legacy ``LABEL:`` field at the start of a line.

    The colon may be omitted only when the label stands alone on its line.
    The span is the rest of that line plus following lines, up to the next
    upper-case ``FIELD:`` line, a separator line, or the end of text.
    """

    def __init__(self, label: str) -> None:
        self._label = label
        self._pattern = re.compile(
            r"^[ \t]*" + re.escape(label) + r"(?:[ \t]*:|[ \t]*$)",
            re.IGNORECASE | re.MULTILINE,
        )

    @property
    def name(self) -> str:
        return f"field:{self._label}"

    def find(self, text: str) -> str | None:
        match = self._pattern.search(text)
        if not match:
            return None
        rest = text[match.end():]
        end = len(rest)
        for stop in (_FIELD_LINE.search(rest, 1), _SEPARATOR_LINE.search(rest)):
            if stop and stop.start() < end:
                end = stop.start()
        return rest[:end].strip()


class DelimitedBlock(SectionStrategy):
    """Plain-text block header such as ``CORE VOICE FOUNDATION`` or ``MODE A:``.

    The rest of the header line is skipped, as are separator lines right
    after it. The span ends at the earliest of ``stops`` (case-insensitive),
    the next separator line, or the end of text.
    """

    def __init__(self, start: str, stops: tuple[str, ...] = ()) -> None:
        self._start = start
        self._start_pattern = re.compile(re.escape(start), re.IGNORECASE)
        self._stop_patterns = [re.compile(re.escape(s), re.IGNORECASE) for s in stops]

    @property
    def name(self) -> str:
        return f"block:{self._start}"

    def find(self, text: str) -> str | None:
        match = self._start_pattern.search(text)
        if not match:
            return None
        line_end = text.find("\n", match.end())
        if line_end == -1:
            return None

        body = text[line_end + 1:]
        # Skip the "=====" rule(s) that usually frame the header
        while True:
            body = body.lstrip("\n")
            leading = _SEPARATOR_LINE.match(body)
            if not leading:
                break
            body = body[leading.end():]

        end = len(body)
        stops = [p.search(body) for p in self._stop_patterns]
        stops.append(_SEPARATOR_LINE.search(body))
        for stop in stops:
            if stop and stop.start() < end:
                end = stop.start()
        return body[:end].strip()


class BulletField(SectionStrategy):
    """Bullet line of the form ``- Keyword ...: value``; returns ``value``."""

    def __init__(self, keyword: str) -> None:
        self._keyword = keyword
        self._pattern = re.compile(
            r"^[ \t]*[-•*][ \t]*\**[ \t]*" + keyword + r"[^:\n]*:\**[ \t]*(\S.*)$",
            re.IGNORECASE | re.MULTILINE,
        )

    @property
    def name(self) -> str:
        return f"bullet:{self._keyword}"

    def find(self, text: str) -> str | None:
        match = self._pattern.search(text)
        return match.group(1).strip() if match else None
