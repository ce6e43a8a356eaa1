"""Shared fixtures for agentkit tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a CLI runner."""
    return CliRunner()


@pytest.fixture
def existing_prompts(temp_project: Path) -> Path:
    """Create a project that already has a .github/prompts directory."""
    prompts_dir = temp_project / ".github" / "prompts"
    prompts_dir.mkdir(parents=True)
    (prompts_dir / "existing.md").write_text("existing content")
    return temp_project
