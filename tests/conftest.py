"""Shared pytest fixtures for the web-boilerplate test suite.

Provides reusable fixtures for:
- An isolated working directory
- A recording reporter
- A clean environment without BOILERPLATE_* overrides
"""

from __future__ import annotations

from pathlib import Path

import pytest

from boilerplate.reporter import SilentReporter


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of every test."""
    monkeypatch.delenv("BOILERPLATE_QUIET", raising=False)
    monkeypatch.delenv("BOILERPLATE_ENCODING", raising=False)


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Empty directory standing in for the caller's current directory."""
    work = tmp_path / "work"
    work.mkdir()
    return work


@pytest.fixture
def reporter() -> SilentReporter:
    return SilentReporter()
