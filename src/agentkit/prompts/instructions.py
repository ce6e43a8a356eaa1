"""Prompt that asks the assistant to write copilot-instructions.md."""

TEMPLATE = """\
# Generate GitHub Copilot Instructions

Analyse this repository and write `.github/copilot-instructions.md`: a concise
guide that tells GitHub Copilot how code in this project is written.

## Steps

1. **Detect the stack.** Read the build files (`go.mod`, `package.json`,
   `pyproject.toml`, `Cargo.toml`, `pom.xml`, ...) and note the language
   version, frameworks, and key libraries.
2. **Map the structure.** List the top-level directories and the role of
   each one.
3. **Extract conventions.** Sample several source files and record:
   - Naming of files, types, functions and variables
   - Error handling and logging patterns
   - How configuration is loaded
   - How tests are organised and run
4. **Find the commands.** Build, test, lint and format commands, taken from
   the build files, Makefile or CI configuration.

## Output Format

```markdown
# Copilot Instructions

## Project Overview
## Tech Stack
## Project Structure
## Coding Conventions
## Testing
## Commands
```

## Rules

- Describe what the code actually does today, not ideals.
- Keep the file under 200 lines.
- If `.github/copilot-instructions.md` already exists, update it instead of
  replacing project-specific notes.
"""
