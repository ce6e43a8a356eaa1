"""Tests for agentkit.errors module."""

from __future__ import annotations

from pathlib import Path

from agentkit.errors import AgentKitError, ConflictError, FileWriteError, TemplateNotFoundError


class TestErrors:
    """Tests for error types."""

    def test_template_not_found(self) -> None:
        """Test message and KeyError compatibility."""
        err = TemplateNotFoundError("deploy")
        assert isinstance(err, AgentKitError)
        assert isinstance(err, KeyError)
        assert err.name == "deploy"
        assert str(err) == "Template not found: deploy"

    def test_conflict(self) -> None:
        """Test conflict message names the path."""
        err = ConflictError(".github/prompts")
        assert err.path == Path(".github/prompts")
        assert str(err) == ".github/prompts already exists"

    def test_file_write(self) -> None:
        """Test write errors wrap the filesystem error."""
        cause = PermissionError(13, "Permission denied")
        err = FileWriteError(Path(".github/copilot-instructions.md"), cause)
        assert isinstance(err, OSError)
        assert err.cause is cause
        assert str(err) == "Failed to write .github/copilot-instructions.md: Permission denied"
