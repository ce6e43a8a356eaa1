"""CLI interface for agentkit."""

from __future__ import annotations

from pathlib import Path

import click
from rich.markup import escape
from rich.panel import Panel

from agentkit import __version__
from agentkit.config import PROG_NAME, AgentKitConfig
from agentkit.errors import AgentKitError, ConflictError
from agentkit.output import console, error, info, success, warning


@click.group(invoke_without_command=True)
@click.version_option(
    version=__version__,
    prog_name=PROG_NAME,
    message="%(prog)s version %(version)s",
)
@click.option(
    "--directory",
    "-C",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    envvar="AGENTKIT_DIR",
    show_envvar=True,
    help="Project root to generate files in.",
)
@click.pass_context
def main(ctx: click.Context, directory: Path) -> None:
    """agentkit - AI-powered development workflow tool.

    Generates language-agnostic prompts for AI coding assistants and
    installs them as GitHub Copilot prompt files.

    \b
    Examples:
      agentkit feat add user authentication
      agentkit fix null pointer exception in user service
      agentkit refactor simplify error handling
      agentkit init                # specify/plan/implement/verify prompts
      agentkit install             # feat/fix/refactor prompts for Copilot
    """
    ctx.ensure_object(dict)
    ctx.obj["config"] = AgentKitConfig(root=directory)

    # If no subcommand, show help
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _print_workflow(ctx: click.Context, template_name: str, words: tuple[str, ...]) -> None:
    """Render a workflow template and write it to stdout."""
    from agentkit.renderer import render

    description = " ".join(words)
    try:
        output = render(template_name, description)
    except AgentKitError as e:
        error(f"Failed to render {template_name} template: {e}")
        ctx.exit(1)

    # Plain echo: rendered Markdown must not be parsed as rich markup
    click.echo(output, nl=False)


@main.command()
@click.argument("description", nargs=-1, required=True)
@click.pass_context
def feat(ctx: click.Context, description: tuple[str, ...]) -> None:
    """Generate a feature implementation workflow.

    Walks through analysing the codebase, planning the implementation,
    writing code, testing, and documenting the feature.

    \b
    Examples:
      agentkit feat add user authentication
      agentkit feat "implement REST API with JWT"
    """
    _print_workflow(ctx, "feat", description)


@main.command()
@click.argument("description", nargs=-1, required=True)
@click.pass_context
def fix(ctx: click.Context, description: tuple[str, ...]) -> None:
    """Generate a bug fix workflow.

    Walks through diagnosing the problem, planning the fix, implementing
    it, testing, and documenting the change.

    \b
    Examples:
      agentkit fix null pointer exception in user service
      agentkit fix "memory leak in background worker"
    """
    _print_workflow(ctx, "fix", description)


@main.command()
@click.argument("description", nargs=-1, required=True)
@click.pass_context
def refactor(ctx: click.Context, description: tuple[str, ...]) -> None:
    """Generate a code refactoring workflow.

    \b
    Examples:
      agentkit refactor simplify user authentication logic
      agentkit refactor "extract payment processing into separate service"
    """
    _print_workflow(ctx, "refactor", description)


@main.command()
@click.option("--force", "-f", is_flag=True, help="Overwrite existing prompt files")
@click.pass_context
def init(ctx: click.Context, force: bool) -> None:
    """Initialize the AgentKit prompt structure.

    Creates .github/copilot-instructions.md and the specify, plan,
    implement and verify prompts under .github/prompts.
    """
    config: AgentKitConfig = ctx.obj["config"]

    try:
        _run_init(config, force=force)
    except ConflictError as e:
        error(str(e))
        info("Use --force to overwrite existing files.")
        ctx.exit(1)
    except AgentKitError as e:
        error(str(e))
        ctx.exit(1)

    console.print()
    success("AgentKit structure initialized successfully!")
    console.print()
    console.print(
        Panel.fit(
            "Next steps in GitHub Copilot Chat:\n"
            f"  1. Describe your idea: [cyan]{escape('@workspace /specify <idea>')}[/cyan]\n"
            "  2. Plan the work: [cyan]@workspace /plan[/cyan]\n"
            "  3. Build it: [cyan]@workspace /implement[/cyan]\n"
            "  4. Check it: [cyan]@workspace /verify[/cyan]",
            title=PROG_NAME,
        )
    )


def _run_init(config: AgentKitConfig, force: bool) -> None:
    """Write the init manifest, refusing to clobber prompts unless forced."""
    from agentkit.filewriter import path_exists
    from agentkit.manifest import build_init_manifest, write_manifest

    entries = build_init_manifest()

    if path_exists(config.prompts_dir):
        if not force:
            raise ConflictError(config.prompts_dir)
        warning(f"Overwriting existing files in {config.prompts_dir}")

    info("Creating AgentKit prompt structure...")
    write_manifest(entries, config.root, on_written=lambda entry: success(f"Created {entry.path}"))


@main.command()
@click.pass_context
def install(ctx: click.Context) -> None:
    """Install GitHub Copilot integration files.

    Writes the feat, fix, refactor and instructions prompts to
    .github/prompts and a .github/copilot-instructions.md describing them.
    Existing files are always overwritten.

    \b
    After installing, use them in GitHub Copilot Chat:
      /feat add user authentication
      /fix null pointer exception
    """
    from agentkit.filewriter import ensure_directory
    from agentkit.manifest import build_install_manifest, write_manifest

    config: AgentKitConfig = ctx.obj["config"]

    try:
        ensure_directory(config.github_dir)
        ensure_directory(config.prompts_dir)
        write_manifest(
            build_install_manifest(),
            config.root,
            on_written=lambda entry: success(f"Created {entry.path}"),
        )
    except AgentKitError as e:
        error(str(e))
        ctx.exit(1)

    console.print()
    console.print("[green]✅ GitHub Copilot integration installed successfully![/green]")
    console.print()
    info("Available commands in GitHub Copilot Chat:")
    info("  /feat [description]     - Feature implementation workflow")
    info("  /fix [description]      - Bug fix workflow")
    info("  /refactor [description] - Systematic code refactoring workflow")
    info("  /instructions           - Generate GitHub Copilot instructions")
    console.print()
    info("Example usage:")
    info("  /feat add user authentication")
    info("  /fix null pointer exception")
    info("  /refactor simplify user authentication logic")
