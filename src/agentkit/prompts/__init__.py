"""Built-in prompt templates for agentkit.

Each workflow lives in its own module as a ``TEMPLATE`` string. Templates that
take a task description reference it as ``{{ description }}``.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from agentkit.errors import TemplateNotFoundError
from agentkit.prompts import feat, fix, instructions, plan, refactor, specify

DESCRIPTION_PLACEHOLDER = "{{ description }}"

PROMPTS: Mapping[str, str] = MappingProxyType(
    {
        "feat": feat.TEMPLATE,
        "fix": fix.TEMPLATE,
        "refactor": refactor.TEMPLATE,
        "specify": specify.TEMPLATE,
        "plan": plan.TEMPLATE,
        "instructions": instructions.TEMPLATE,
    }
)

TEMPLATE_NAMES: tuple[str, ...] = tuple(PROMPTS)

# Workflows exposed as CLI commands taking a description
WORKFLOW_NAMES: tuple[str, ...] = ("feat", "fix", "refactor")


def get_template(name: str) -> str:
    """Return the raw text of a built-in template."""
    try:
        return PROMPTS[name]
    except KeyError:
        raise TemplateNotFoundError(name) from None
