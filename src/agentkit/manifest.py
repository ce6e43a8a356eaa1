"""File manifests written by ``agentkit init`` and ``agentkit install``."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from agentkit.config import COPILOT_INSTRUCTIONS_FILE, PROG_NAME, prompt_path
from agentkit.filewriter import write_file
from agentkit.prompts import get_template
from agentkit.renderer import render


@dataclass(frozen=True)
class ManifestEntry:
    """A file to generate, relative to the project root."""

    path: Path
    content: str


# Prompt files copied verbatim by install
INSTALL_PROMPTS: tuple[str, ...] = ("feat", "fix", "refactor", "instructions")

AGENTKIT_INSTRUCTIONS = """\
# AgentKit Workflow

This project follows the AgentKit workflow for building software with AI
assistants. Work moves through four stages, each driven by a prompt in
`.github/prompts/`:

1. **Specify** (`/specify`) - describe what to build and why. Output lives in
   `project/specification.md` and `specs/[feature-name].md`.
2. **Plan** (`/plan`) - turn the specification into a technical plan. Output
   lives in `project/architecture.md` and the feature spec.
3. **Implement** (`/implement`) - build the planned tasks one at a time.
4. **Verify** (`/verify`) - check the result against the acceptance criteria.

## Usage

In GitHub Copilot Chat, run each stage in order:

```
@workspace /specify a command-line todo app with due dates
@workspace /plan
@workspace /implement
@workspace /verify
```

## Ground Rules

- Do not start a stage before the previous one is reviewed.
- Keep specifications free of implementation details.
- Follow the conventions of the existing codebase.
- Keep `project/` and `specs/` up to date as decisions change.
"""

_PLACEHOLDER_PROMPT = """\
# {title}

TODO: the /{command} stage prompt is not available yet.
"""

COPILOT_INSTRUCTIONS = f"""\
# GitHub Copilot Instructions for {PROG_NAME}

This project uses {PROG_NAME} for structured AI agent workflows. Use the following commands for systematic development:

## Available Commands

### /feat - Feature Implementation Workflow
Use this command to implement new features with a structured approach.

**Usage:**
```
/feat [description of the feature to implement]
```

**Examples:**
- /feat add user authentication system
- /feat implement REST API with JWT tokens
- /feat add file upload functionality

**What it does:**
Generates a comprehensive 5-stage workflow:
1. **CODEBASE ANALYSIS** - Detect language, examine patterns, find integration points
2. **IMPLEMENTATION PLAN** - Plan files, dependencies, and implementation order
3. **IMPLEMENTATION** - Step-by-step coding with language-specific best practices
4. **TESTING** - Unit tests, integration tests, and edge cases
5. **DOCUMENTATION** - Code comments, README updates, and API docs

### /fix - Bug Fix Workflow
Use this command to systematically diagnose and fix bugs.

**Usage:**
```
/fix [description of the bug or issue]
```

**Examples:**
- /fix null pointer exception in user service
- /fix memory leak in background worker
- /fix database connection timeout errors

**What it does:**
Generates a systematic 5-stage debugging workflow:
1. **DIAGNOSIS** - Understand, locate, reproduce, and analyze the issue
2. **FIX STRATEGY** - Plan the fix approach and assess impact
3. **IMPLEMENTATION** - Apply minimal fix with safety checks
4. **TESTING** - Verify fix and run regression tests
5. **DOCUMENTATION** - Document the fix and add preventive measures

### /refactor - Code Refactoring Workflow
Use this command to systematically improve and refactor existing code.

**Usage:**
```
/refactor [description of the refactoring task]
```

**Examples:**
- /refactor simplify user authentication logic
- /refactor extract payment processing into separate service
- /refactor improve error handling patterns

**What it does:**
Generates a comprehensive 5-stage refactoring workflow:
1. **CODEBASE ANALYSIS** - Understand current implementation and identify improvements
2. **REFACTOR PLAN** - Plan refactoring strategy and assess risks
3. **IMPLEMENTATION** - Apply refactoring techniques systematically
4. **TESTING** - Verify functionality and performance are maintained
5. **DOCUMENTATION** - Update docs to reflect architectural changes

### /instructions - Generate Copilot Instructions
Analyses the repository and writes a project-specific `.github/copilot-instructions.md`.

## Language-Agnostic Design

These workflows work with any programming language. Each one starts by
detecting the project's language from files like go.mod, package.json,
pyproject.toml or Cargo.toml, then follows that language's conventions,
error patterns and testing practices.

## Integration with GitHub Copilot

When you use these commands in GitHub Copilot Chat:

1. **Follow each stage systematically** - don't skip ahead
2. **Let Copilot examine your codebase** when prompted with @workspace
3. **Implement step by step** as guided by the workflow

## Getting Started

1. Run `{PROG_NAME} install` in your project (already done!)
2. Open GitHub Copilot Chat
3. Try: `/feat add a simple hello world endpoint`
4. Follow the generated workflow step by step

---

*Generated by {PROG_NAME} - a language-agnostic toolkit for structured AI agent workflows.*
"""


def generate_copilot_instructions() -> str:
    """Return the copilot-instructions.md written by install."""
    return COPILOT_INSTRUCTIONS


def _placeholder_prompt(command: str) -> str:
    return _PLACEHOLDER_PROMPT.format(title=command.capitalize(), command=command)


def build_init_manifest() -> list[ManifestEntry]:
    """Files for the specify/plan/implement/verify workflow."""
    return [
        ManifestEntry(COPILOT_INSTRUCTIONS_FILE, AGENTKIT_INSTRUCTIONS),
        ManifestEntry(prompt_path("specify"), render("specify")),
        ManifestEntry(prompt_path("plan"), render("plan")),
        ManifestEntry(prompt_path("implement"), _placeholder_prompt("implement")),
        ManifestEntry(prompt_path("verify"), _placeholder_prompt("verify")),
    ]


def build_install_manifest() -> list[ManifestEntry]:
    """Prompt files for the feat/fix/refactor workflows plus Copilot instructions."""
    entries = [ManifestEntry(prompt_path(name), get_template(name)) for name in INSTALL_PROMPTS]
    entries.append(ManifestEntry(COPILOT_INSTRUCTIONS_FILE, generate_copilot_instructions()))
    return entries


def write_manifest(
    entries: list[ManifestEntry],
    root: Path,
    on_written: Callable[[ManifestEntry], None] | None = None,
) -> list[Path]:
    """Write every entry under root, in order.

    Stops at the first failure; files already written are left in place.

    Raises:
        FileWriteError: If any file cannot be written.
    """
    written: list[Path] = []
    for entry in entries:
        written.append(write_file(root / entry.path, entry.content))
        if on_written is not None:
            on_written(entry)
    return written
