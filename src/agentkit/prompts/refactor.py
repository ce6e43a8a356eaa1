"""Code refactoring workflow prompt."""

TEMPLATE = """\
# Code Refactor Workflow

## Refactoring Goal
{{ description }}

You are refactoring existing code as described above. Behaviour must stay the
same: every change is structural unless the goal says otherwise.

---

## STAGE 1: CODEBASE ANALYSIS

### 1.1 Current Implementation
- Detect the project language and tooling from its build files
- Read the code in scope and everything that calls it
- Note the tests that currently cover it

### 1.2 Identify Improvements
- Duplicated logic
- Functions or types with too many responsibilities
- Unclear names, deep nesting, long parameter lists
- Hidden coupling between modules

---

## STAGE 2: REFACTOR PLAN

### 2.1 Strategy
Choose the techniques that fit (extract function, extract module, rename,
introduce interface, inline, move) and list them in order.

### 2.2 Risk Assessment
- Which public APIs change?
- Which behaviour lacks test coverage today? Add tests for it first.
- Can the work be split into independently shippable steps?

---

## STAGE 3: IMPLEMENTATION

1. Make one structural change at a time
2. Run the tests after every change
3. Follow the conventions already used in the codebase
4. Remove code that becomes dead along the way

---

## STAGE 4: TESTING

- The existing test suite passes without changing its assertions
- Add tests for any seam the refactor introduced
- Compare performance on hot paths if they were touched

---

## STAGE 5: DOCUMENTATION

- Update architecture notes and module docs to match the new structure
- Update comments that refer to moved or renamed code
- Describe the motivation and the structural changes in the commit message
"""
