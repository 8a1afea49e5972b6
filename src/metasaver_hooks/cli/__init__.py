"""Static CLI definition for metasaver-hooks.

This module uses static imports instead of dynamic command loading to enable
shell completion. Click's completion mechanism requires all commands to be
available at import time for inspection.
"""

import logging
import os

import click

from metasaver_hooks.commands.install.command import (
    hook_status_command,
    install_hook_command,
    uninstall_hook_command,
)
from metasaver_hooks.commands.prompt_reminder.command import prompt_workflow_reminder_hook
from metasaver_hooks.commands.templates.command import templates_group

# Enable debug logging if METASAVER_HOOKS_DEBUG environment variable is set
if os.getenv("METASAVER_HOOKS_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(name="metasaver-hooks", context_settings=CONTEXT_SETTINGS)
def cli() -> None:
    """Coding assistant hooks and config templates for MetaSaver projects."""
    pass


# Register all commands
cli.add_command(prompt_workflow_reminder_hook)
cli.add_command(install_hook_command)
cli.add_command(uninstall_hook_command)
cli.add_command(hook_status_command)
cli.add_command(templates_group)
