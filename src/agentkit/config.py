"""Configuration models for agentkit."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

PROG_NAME = "agentkit"

# Layout of generated files, relative to the project root
GITHUB_DIR = Path(".github")
PROMPTS_DIR = GITHUB_DIR / "prompts"
COPILOT_INSTRUCTIONS_FILE = GITHUB_DIR / "copilot-instructions.md"
PROMPT_SUFFIX = ".prompt.md"


def prompt_path(name: str) -> Path:
    """Relative path of the prompt file for a workflow name."""
    return PROMPTS_DIR / f"{name}{PROMPT_SUFFIX}"


class AgentKitConfig(BaseModel):
    """Runtime configuration for a single agentkit invocation."""

    root: Path = Field(default_factory=lambda: Path("."))

    def resolve(self, relative: Path | str) -> Path:
        """Resolve a project-relative path against the configured root."""
        return self.root / relative

    @property
    def github_dir(self) -> Path:
        return self.resolve(GITHUB_DIR)

    @property
    def prompts_dir(self) -> Path:
        return self.resolve(PROMPTS_DIR)
