"""Shared test fixtures for the wildcard test suite."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest

from wildcard.observability import InMemorySink


@pytest.fixture
def sink() -> InMemorySink:
    """Fresh in-memory trace sink."""
    return InMemorySink()


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str, str], str]:
    """Write dedented YAML content to a file under tmp_path and return its path."""

    def _write(content: str, name: str = "rules.yaml") -> str:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content))
        return str(path)

    return _write
