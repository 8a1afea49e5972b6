"""Commands for the bundled configuration templates."""

from pathlib import Path

import click

from metasaver_hooks.core.templates import TEMPLATES, get_template, write_template
from metasaver_hooks.error_boundary import cli_error_boundary


@click.group("templates")
def templates_group() -> None:
    """Bundled build-tool and commit-lint config templates."""


@templates_group.command("list")
def list_templates() -> None:
    """List bundled templates."""
    for template in TEMPLATES:
        click.echo(f"{template.name:<16} {template.consumer:<12} {template.description}")


@templates_group.command("show")
@click.argument("name")
@cli_error_boundary
def show_template(name: str) -> None:
    """Print a template verbatim."""
    click.echo(get_template(name).read_text(), nl=False)


@templates_group.command("write")
@click.argument("name")
@click.argument("dest", type=click.Path(path_type=Path))
@click.option("-f", "--force", is_flag=True, help="Overwrite an existing file.")
@cli_error_boundary
def write_template_command(name: str, dest: Path, force: bool) -> None:
    """Copy a template to DEST (a file path or an existing directory)."""
    target = write_template(get_template(name), dest, force)
    click.echo(f"✓ Wrote {target}")
