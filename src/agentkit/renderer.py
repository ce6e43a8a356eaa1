"""Template rendering for agentkit."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from jinja2 import BaseLoader, Environment

from agentkit.prompts import get_template

# Rendered prompts are Markdown, not HTML: never escape the description.
_env = Environment(loader=BaseLoader(), autoescape=False, keep_trailing_newline=True)


@dataclass(frozen=True)
class RenderContext:
    """Values available to a template."""

    description: str = ""


def render(template_name: str, description: str = "") -> str:
    """Render a built-in template with the given task description.

    The description is inserted literally wherever the template references
    it. An empty description is valid and leaves the template structure
    intact.

    Raises:
        TemplateNotFoundError: If ``template_name`` is not a built-in template.
    """
    context = RenderContext(description=description)
    template = _env.from_string(get_template(template_name))
    return template.render(**asdict(context))
