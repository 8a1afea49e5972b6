"""Install, remove and inspect the prompt hook in a project's settings.json."""

from pathlib import Path

import click

from metasaver_hooks.error_boundary import cli_error_boundary
from metasaver_hooks.hooks.installer import (
    DEFAULT_TIMEOUT_SECONDS,
    PROMPT_HOOK_LIFECYCLE,
    install_prompt_hook,
    list_installed_hooks,
    uninstall_prompt_hook,
)
from metasaver_hooks.hooks.settings import get_settings_path

_project_root_option = click.option(
    "--project-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project root containing .claude/ (defaults to the current directory).",
)


def _resolve_root(project_root: Path | None) -> Path:
    if project_root is None:
        return Path.cwd()
    return project_root


@click.command("install-hook")
@_project_root_option
@click.option(
    "--timeout",
    type=int,
    default=DEFAULT_TIMEOUT_SECONDS,
    show_default=True,
    help="Hook timeout in seconds.",
)
@cli_error_boundary
def install_hook_command(project_root: Path | None, timeout: int) -> None:
    """Register the prompt workflow reminder in .claude/settings.json."""
    result = install_prompt_hook(_resolve_root(project_root), timeout)

    if result.replaced:
        click.echo(f"✓ Replaced existing {PROMPT_HOOK_LIFECYCLE} hook in {result.settings_path}")
    else:
        click.echo(f"✓ Installed {PROMPT_HOOK_LIFECYCLE} hook in {result.settings_path}")
    click.echo(f"  command: {result.command}")


@click.command("uninstall-hook")
@_project_root_option
@cli_error_boundary
def uninstall_hook_command(project_root: Path | None) -> None:
    """Remove hook entries installed by metasaver-hooks."""
    root = _resolve_root(project_root)
    removed = uninstall_prompt_hook(root)

    if removed == 0:
        click.echo("No metasaver-hooks entries found")
        return
    click.echo(f"✓ Removed {removed} hook(s) from {get_settings_path(root)}")


@click.command("hook-status")
@_project_root_option
@cli_error_boundary
def hook_status_command(project_root: Path | None) -> None:
    """Show hook entries installed by metasaver-hooks."""
    installed = list_installed_hooks(_resolve_root(project_root))

    if not installed:
        click.echo("Not installed")
        return
    for lifecycle, command in installed:
        click.echo(f"{lifecycle}: {command}")
