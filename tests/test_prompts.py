"""Tests for agentkit.prompts module."""

from __future__ import annotations

import pytest

from agentkit.errors import TemplateNotFoundError
from agentkit.prompts import (
    DESCRIPTION_PLACEHOLDER,
    PROMPTS,
    TEMPLATE_NAMES,
    WORKFLOW_NAMES,
    get_template,
)


class TestPromptStore:
    """Tests for the built-in template table."""

    def test_known_names(self) -> None:
        """Test the store holds exactly the built-in templates."""
        assert set(TEMPLATE_NAMES) == {"feat", "fix", "refactor", "specify", "plan", "instructions"}

    def test_workflows_are_in_store(self) -> None:
        """Test every CLI workflow has a template."""
        for name in WORKFLOW_NAMES:
            assert name in PROMPTS

    def test_store_is_read_only(self) -> None:
        """Test templates cannot be replaced at runtime."""
        with pytest.raises(TypeError):
            PROMPTS["feat"] = "hijacked"  # type: ignore[index]

    def test_templates_not_empty(self) -> None:
        """Test no template is blank."""
        for name in TEMPLATE_NAMES:
            assert get_template(name).strip()


class TestGetTemplate:
    """Tests for get_template function."""

    def test_returns_raw_text(self) -> None:
        """Test raw template keeps its placeholder."""
        assert DESCRIPTION_PLACEHOLDER in get_template("feat")

    def test_unknown_template(self) -> None:
        """Test unknown names raise TemplateNotFoundError."""
        with pytest.raises(TemplateNotFoundError, match="nonexistent"):
            get_template("nonexistent")

    def test_not_found_is_key_error(self) -> None:
        """Test the error can be caught as a KeyError."""
        with pytest.raises(KeyError):
            get_template("deploy")


class TestTemplateContent:
    """Tests for headers matched literally by downstream tooling."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            (
                "feat",
                [
                    "Feature Implementation Workflow",
                    "STAGE 1: CODEBASE ANALYSIS",
                    "STAGE 2: IMPLEMENTATION PLAN",
                    "STAGE 3: IMPLEMENTATION",
                    "STAGE 4: TESTING",
                    "STAGE 5: DOCUMENTATION",
                ],
            ),
            (
                "fix",
                [
                    "Bug Fix Workflow",
                    "STAGE 1: DIAGNOSIS",
                    "STAGE 2: FIX STRATEGY",
                    "STAGE 3: IMPLEMENTATION",
                    "STAGE 4: TESTING",
                    "STAGE 5: DOCUMENTATION",
                ],
            ),
            (
                "refactor",
                [
                    "Code Refactor Workflow",
                    "STAGE 1: CODEBASE ANALYSIS",
                    "STAGE 2: REFACTOR PLAN",
                    "STAGE 3: IMPLEMENTATION",
                    "STAGE 4: TESTING",
                    "STAGE 5: DOCUMENTATION",
                ],
            ),
        ],
    )
    def test_workflow_headers(self, name: str, expected: list[str]) -> None:
        """Test each workflow has its title and five stages."""
        template = get_template(name)
        for text in expected:
            assert text in template
        assert template.count(DESCRIPTION_PLACEHOLDER) == 1

    def test_specify_content(self) -> None:
        """Test specify prompt is complete and takes no description."""
        template = get_template("specify")
        assert "Specification Assistant" in template
        assert "GitHub Copilot Instructions" in template
        assert "/specify" in template
        assert "project/specification.md" in template
        assert "specs/[feature-name].md" in template
        assert "TODO" not in template
        assert "{{" not in template

    def test_plan_content(self) -> None:
        """Test plan prompt is complete and takes no description."""
        template = get_template("plan")
        assert "Technical Planning Assistant" in template
        assert "GitHub Copilot Instructions" in template
        assert "/plan" in template
        assert "project/architecture.md" in template
        assert "Pre-flight Checks" in template
        assert "package.json" in template
        assert "go.mod" in template
        assert "TODO" not in template
        assert "{{" not in template

    def test_instructions_content(self) -> None:
        """Test instructions prompt targets copilot-instructions.md."""
        assert ".github/copilot-instructions.md" in get_template("instructions")
