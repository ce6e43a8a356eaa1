"""Feature implementation workflow prompt."""

TEMPLATE = """\
# Feature Implementation Workflow

## Feature Request
{{ description }}

You are implementing the feature described above. Work through every stage in
order. Do not skip ahead: each stage builds on what the previous one found.

---

## STAGE 1: CODEBASE ANALYSIS

### 1.1 Detect the Language and Tooling
Look for the files that identify the stack before writing anything:
- `go.mod` (Go), `package.json` (JavaScript/TypeScript), `pyproject.toml` or
  `requirements.txt` (Python), `Cargo.toml` (Rust), `pom.xml` or
  `build.gradle` (Java/Kotlin), `*.csproj` (C#), `Gemfile` (Ruby)
- The test runner, linter and formatter the project already uses

### 1.2 Examine Existing Patterns
- How is the code organised (packages, modules, layers)?
- How are errors created, wrapped and reported?
- How is configuration loaded?
- What naming conventions do files, types and functions follow?

### 1.3 Find Integration Points
- Which existing modules will the feature touch?
- Which public interfaces must stay backward compatible?
- Where do similar features live today?

**Output of this stage:** a short summary of the language, the relevant
modules, and the patterns the new code must follow.

---

## STAGE 2: IMPLEMENTATION PLAN

### 2.1 Files
List every file to create or modify and what changes in each.

### 2.2 Dependencies
- Prefer what the project already depends on
- Justify any new dependency in one sentence

### 2.3 Order of Work
Break the feature into small steps that each leave the build green.

**Output of this stage:** a numbered plan. Confirm it before coding.

---

## STAGE 3: IMPLEMENTATION

For each step of the plan:
1. Write the code following the conventions found in Stage 1
2. Keep functions small and focused
3. Handle errors the way the surrounding code does
4. Follow the language's community style (gofmt, PEP 8, ESLint rules, etc.)
5. Build or type-check after each step

---

## STAGE 4: TESTING

### 4.1 Unit Tests
Cover the new behaviour with tests placed where the project keeps its tests.

### 4.2 Integration Tests
Exercise the feature through its public entry point.

### 4.3 Edge Cases
- Empty and missing input
- Boundary values
- Failure paths of external calls

Run the full test suite and fix any regression before moving on.

---

## STAGE 5: DOCUMENTATION

- Add comments where the intent is not obvious from the code
- Update the README or user documentation for new behaviour
- Document any new API endpoint, flag or configuration option
- Summarise the change for the commit message or pull request
"""
