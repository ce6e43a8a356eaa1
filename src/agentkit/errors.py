"""Error types for agentkit.

Every error raised on purpose derives from ``AgentKitError`` so the CLI can
report it as a single ``Error:`` line and exit non-zero.
"""

from __future__ import annotations

from pathlib import Path


class AgentKitError(Exception):
    """Base exception for agentkit errors.

    Use this for user-facing errors that should have actionable messages.
    """


class TemplateNotFoundError(AgentKitError, KeyError):
    """Raised when a template name is not in the prompt store."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template not found: {name}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class ConflictError(AgentKitError):
    """Raised when init would overwrite an existing prompt directory."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"{self.path} already exists")


class FileWriteError(AgentKitError, OSError):
    """Raised when a directory or file cannot be written."""

    def __init__(self, path: Path | str, cause: OSError) -> None:
        self.path = Path(path)
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"Failed to write {self.path}: {reason}")

    def __str__(self) -> str:
        return str(self.args[0])
