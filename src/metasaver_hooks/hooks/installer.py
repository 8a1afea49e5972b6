"""Hook installation and removal operations."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from metasaver_hooks.hooks.models import HookEntry, HookMetadata
from metasaver_hooks.hooks.settings import (
    add_hook_to_settings,
    find_owned_hooks,
    get_settings_path,
    load_settings,
    remove_owned_hooks,
    save_settings,
)

logger = logging.getLogger(__name__)

PACKAGE_ID = "metasaver-hooks"
PROMPT_HOOK_ID = "prompt-workflow-reminder-hook"
PROMPT_HOOK_LIFECYCLE = "UserPromptSubmit"
PROMPT_HOOK_MATCHER = "*"
DEFAULT_TIMEOUT_SECONDS = 30


@dataclass(frozen=True)
class InstallResult:
    """Outcome of installing the prompt hook into a project."""

    settings_path: Path
    command: str
    replaced: int


def get_user_claude_dir() -> Path:
    """Return the user's global Claude directory (~/.claude)."""
    return Path.home() / ".claude"


def _ensure_not_user_directory(project_root: Path) -> None:
    """Ensure we're not accidentally touching user's global settings.

    Raises:
        ValueError: If project_root/.claude is the user's global .claude directory
    """
    user_dir = get_user_claude_dir()
    if (project_root / ".claude").resolve() == user_dir.resolve():
        raise ValueError(
            "SAFETY: Hooks can only be installed/removed at project level, "
            "never in user's global ~/.claude directory"
        )


def build_hook_command() -> str:
    """Command line the assistant runs for the prompt hook.

    Uses the current interpreter so the hook keeps working outside the
    environment's PATH.
    """
    return f'"{sys.executable}" -m metasaver_hooks {PROMPT_HOOK_ID}'


def install_prompt_hook(project_root: Path, timeout: int) -> InstallResult:
    """Register the prompt workflow reminder under UserPromptSubmit.

    Any entry previously installed by this package is replaced, so running
    this twice leaves a single entry.

    Args:
        project_root: Project root directory (MUST be project, not user dir)
        timeout: Hook timeout in seconds

    Raises:
        ValueError: If project_root is the user's home or timeout is not positive
    """
    _ensure_not_user_directory(project_root)
    if timeout <= 0:
        raise ValueError(f"timeout must be positive, got {timeout}")

    settings_path = get_settings_path(project_root)
    settings = load_settings(settings_path)
    settings, replaced = remove_owned_hooks(settings)
    logger.debug("Removed %d existing entries from %s", replaced, settings_path)

    command = build_hook_command()
    entry = HookEntry(
        command=command,
        timeout=timeout,
        metasaver=HookMetadata(package=PACKAGE_ID, hook_id=PROMPT_HOOK_ID),
    )
    settings = add_hook_to_settings(
        settings,
        lifecycle=PROMPT_HOOK_LIFECYCLE,
        matcher=PROMPT_HOOK_MATCHER,
        entry=entry,
    )
    save_settings(settings_path, settings)

    return InstallResult(settings_path=settings_path, command=command, replaced=replaced)


def uninstall_prompt_hook(project_root: Path) -> int:
    """Remove all hook entries installed by this package.

    Returns:
        Count of removed entries

    Raises:
        ValueError: If project_root is the user's home
    """
    _ensure_not_user_directory(project_root)

    settings_path = get_settings_path(project_root)
    if not settings_path.exists():
        return 0

    settings = load_settings(settings_path)
    updated_settings, removed_count = remove_owned_hooks(settings)
    if removed_count > 0:
        save_settings(settings_path, updated_settings)

    return removed_count


def list_installed_hooks(project_root: Path) -> list[tuple[str, str]]:
    """Return (lifecycle, command) for each entry installed by this package."""
    settings = load_settings(get_settings_path(project_root))
    return [
        (lifecycle, str(hook.get("command", ""))) for lifecycle, hook in find_owned_hooks(settings)
    ]
