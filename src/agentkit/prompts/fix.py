"""Bug fix workflow prompt."""

TEMPLATE = """\
# Bug Fix Workflow

## Issue
{{ description }}

You are fixing the issue described above. Find the root cause before changing
any code, and keep the fix as small as the problem allows.

---

## STAGE 1: DIAGNOSIS

### 1.1 Understand the Problem
- What is the expected behaviour and what actually happens?
- When did it start? Check recent commits touching the affected area.

### 1.2 Locate the Code
- Detect the project language from its build files (`go.mod`,
  `package.json`, `pyproject.toml`, `Cargo.toml`, `pom.xml`, ...)
- Search for the error message, the failing function, or the entry point of
  the broken feature

### 1.3 Reproduce
Write a failing test or a minimal script that shows the bug.

### 1.4 Analyse the Root Cause
Trace the data from input to failure. Name the exact line or condition that
is wrong and explain why.

---

## STAGE 2: FIX STRATEGY

- Describe the fix in one or two sentences
- List the files that change
- Identify callers that may depend on the current (buggy) behaviour
- Consider whether the same mistake exists elsewhere

---

## STAGE 3: IMPLEMENTATION

1. Apply the minimal change that removes the root cause
2. Match the error-handling and style conventions of the surrounding code
3. Do not mix unrelated refactoring into the fix
4. Add guards only where invalid state can really occur

---

## STAGE 4: TESTING

- Run the reproduction from Stage 1: it must now pass
- Keep the reproduction as a regression test
- Run the full test suite
- Check the related edge cases found during diagnosis

---

## STAGE 5: DOCUMENTATION

- Explain the root cause and the fix in the commit message
- Update documentation if user-visible behaviour changed
- Note any preventive measure (validation, lint rule, test) that would have
  caught the bug earlier
"""
