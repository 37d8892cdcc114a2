"""Tests for list item extraction."""

from __future__ import annotations

from imv.parsing.lists import extract_list_items


class TestExtractListItems:
    def test_bullet_markers(self) -> None:
        span = "- one\n• two\n* three"
        assert extract_list_items(span, 10) == ["one", "two", "three"]

    def test_leading_quoted_phrase_is_kept_without_commentary(self) -> None:
        span = '- "Quick question" — opens most requests\n- “Thanks!” (closing)'
        assert extract_list_items(span, 10) == ["Quick question", "Thanks!"]

    def test_apostrophe_inside_quotes(self) -> None:
        assert extract_list_items('- "Let\'s go"', 10) == ["Let's go"]

    def test_quote_lines_without_bullets(self) -> None:
        assert extract_list_items('"Circle back"\nprose line', 10) == ["Circle back"]

    def test_prose_and_rules_are_ignored(self) -> None:
        span = "Use these sparingly.\n---\n**Note:** x\n- real item"
        assert extract_list_items(span, 10) == ["real item"]

    def test_bold_items(self) -> None:
        assert extract_list_items("- **Per my last email**", 10) == ["Per my last email"]

    def test_duplicates_keep_first_occurrence(self) -> None:
        assert extract_list_items("- b\n- a\n- b\n- c", 10) == ["b", "a", "c"]

    def test_limit(self) -> None:
        span = "\n".join(f"- item {i}" for i in range(12))
        assert extract_list_items(span, 3) == ["item 0", "item 1", "item 2"]

    def test_zero_limit(self) -> None:
        assert extract_list_items("- a", 0) == []

    def test_empty_bullets_skipped(self) -> None:
        assert extract_list_items("-\n- \n- a", 10) == ["a"]

    def test_extra_markers_after_bullet_are_stripped(self) -> None:
        assert extract_list_items("- -- hmm\n* *emph*\n- - nested", 10) == ["hmm", "emph", "nested"]
