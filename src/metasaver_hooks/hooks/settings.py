"""I/O and hook manipulation for Claude Code settings.json files.

All manipulation functions are pure: they take a ClaudeSettings and return a
new one. Only load_settings and save_settings touch the disk.
"""

import json
from pathlib import Path

from metasaver_hooks.hooks.models import METADATA_KEY, ClaudeSettings, HookEntry, MatcherGroup


def get_settings_path(project_root: Path) -> Path:
    """Get settings.json path for a project.

    Returns:
        Path to <project_root>/.claude/settings.json
    """
    return project_root / ".claude" / "settings.json"


def load_settings(settings_path: Path) -> ClaudeSettings:
    """Load settings.json from disk.

    Args:
        settings_path: Path to settings.json file

    Returns:
        ClaudeSettings object, or empty settings if file doesn't exist
    """
    if not settings_path.exists():
        return ClaudeSettings.empty()

    json_str = settings_path.read_text(encoding="utf-8")
    return ClaudeSettings.model_validate_json(json_str)


def save_settings(settings_path: Path, settings: ClaudeSettings) -> None:
    """Save settings.json to disk atomically.

    Writes to a temporary file first, then renames to avoid corruption.
    Creates parent directories if they don't exist.
    """
    settings_path.parent.mkdir(parents=True, exist_ok=True)

    temp_path = settings_path.with_suffix(".json.tmp")
    with temp_path.open("w", encoding="utf-8") as f:
        json.dump(settings.to_dict(), f, indent=2, sort_keys=True)
        f.write("\n")

    temp_path.replace(settings_path)


def add_hook_to_settings(
    settings: ClaudeSettings,
    lifecycle: str,
    matcher: str,
    entry: HookEntry,
) -> ClaudeSettings:
    """Add a hook entry under a lifecycle event and matcher.

    The entry joins an existing group with the same matcher, otherwise a new
    group is appended.
    """
    new_hooks = dict(settings.hooks)
    groups = list(new_hooks.get(lifecycle, []))

    for index, group in enumerate(groups):
        if group.matcher == matcher:
            groups[index] = group.model_copy(update={"hooks": [*group.hooks, entry.to_dict()]})
            break
    else:
        groups.append(MatcherGroup(matcher=matcher, hooks=[entry.to_dict()]))

    new_hooks[lifecycle] = groups
    return settings.model_copy(update={"hooks": new_hooks})


def remove_owned_hooks(settings: ClaudeSettings) -> tuple[ClaudeSettings, int]:
    """Remove every hook entry installed by this package.

    Groups left without hooks are dropped, as are lifecycles left without
    groups. Entries owned by other tools are kept as-is.

    Returns:
        Tuple of (updated settings, number of removed entries)
    """
    removed_count = 0
    new_hooks: dict[str, list[MatcherGroup]] = {}

    for lifecycle, groups in settings.hooks.items():
        kept_groups: list[MatcherGroup] = []
        for group in groups:
            kept = [hook for hook in group.hooks if METADATA_KEY not in hook]
            removed_count += len(group.hooks) - len(kept)
            if kept:
                kept_groups.append(group.model_copy(update={"hooks": kept}))
            elif not group.hooks:
                kept_groups.append(group)
        if kept_groups or not groups:
            new_hooks[lifecycle] = kept_groups

    return settings.model_copy(update={"hooks": new_hooks}), removed_count


def find_owned_hooks(settings: ClaudeSettings) -> list[tuple[str, dict]]:
    """List (lifecycle, entry) pairs for hooks installed by this package."""
    found: list[tuple[str, dict]] = []
    for lifecycle, groups in settings.hooks.items():
        for group in groups:
            found.extend((lifecycle, hook) for hook in group.owned_hooks())
    return found
