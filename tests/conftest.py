"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from imv.shared.openai_client import CompletionClient

# Root of the test fixtures
FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def markdown_profile() -> str:
    """Numbered markdown layout written by the current profile builder."""
    return (FIXTURES_DIR / "profile_markdown.md").read_text()


@pytest.fixture
def legacy_profile() -> str:
    """``=====``-separated layout with ``FIELD:`` lines and ``MODE A:`` blocks."""
    return (FIXTURES_DIR / "profile_legacy.txt").read_text()


@pytest.fixture
def bracket_profile() -> str:
    """``[LABEL]`` layout."""
    return (FIXTURES_DIR / "profile_bracket.txt").read_text()


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    cfg = tmp_path / "config.yml"
    cfg.write_text(
        """\
model: "gpt-4o-mini"
platforms:
  - chatgpt
  - generic
output_directory: "{out}"
""".format(out=str(tmp_path / "output"))
    )
    return cfg


@pytest.fixture
def mock_completion_client() -> CompletionClient:
    """Return a CompletionClient with a mocked OpenAI SDK underneath."""
    client = CompletionClient.__new__(CompletionClient)
    client._client = AsyncMock()
    client.model = "gpt-4o"
    client.max_tokens = 2000
    return client


@pytest.fixture
def fake_client() -> MagicMock:
    """Stand-in for CompletionClient whose ``complete`` returns a fixed reply."""
    client = MagicMock()
    client.complete = AsyncMock(return_value="Hey team, quick question. Thanks!")
    return client
