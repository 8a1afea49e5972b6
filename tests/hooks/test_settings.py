"""Tests for settings.json I/O and hook manipulation operations."""

import json
from pathlib import Path

from metasaver_hooks.hooks.models import ClaudeSettings, HookEntry, HookMetadata, MatcherGroup
from metasaver_hooks.hooks.settings import (
    add_hook_to_settings,
    find_owned_hooks,
    get_settings_path,
    load_settings,
    remove_owned_hooks,
    save_settings,
)


# Helper factories for test data
def create_hook_entry(
    hook_id: str = "test-hook",
    command: str = "echo test",
    timeout: int = 30,
) -> HookEntry:
    """Factory function for creating test HookEntry objects."""
    return HookEntry(
        command=command,
        timeout=timeout,
        metasaver=HookMetadata(package="metasaver-hooks", hook_id=hook_id),
    )


def foreign_hook(command: str = "other-tool run") -> dict:
    """A hook entry installed by some other tool."""
    return {"type": "command", "command": command}


class TestGetSettingsPath:
    """Tests for get_settings_path function."""

    def test_points_into_dot_claude(self, tmp_path: Path) -> None:
        assert get_settings_path(tmp_path) == tmp_path / ".claude" / "settings.json"


class TestLoadSettings:
    """Tests for load_settings function."""

    def test_load_settings_nonexistent_file_returns_empty(self, tmp_path: Path) -> None:
        """Test that loading nonexistent file returns empty ClaudeSettings."""
        result = load_settings(tmp_path / "nonexistent.json")

        assert isinstance(result, ClaudeSettings)
        assert result.hooks == {}

    def test_load_settings_valid_json(self, tmp_path: Path) -> None:
        """Test loading a settings.json written by the assistant."""
        settings_file = tmp_path / "settings.json"
        settings_data = {
            "hooks": {
                "UserPromptSubmit": [
                    {"hooks": [{"type": "command", "command": "echo hi", "timeout": 5}]}
                ],
                "PreToolUse": [{"matcher": "Bash", "hooks": [foreign_hook()]}],
            }
        }
        settings_file.write_text(json.dumps(settings_data), encoding="utf-8")

        result = load_settings(settings_file)

        assert result.hooks["UserPromptSubmit"][0].matcher is None
        assert result.hooks["UserPromptSubmit"][0].hooks[0]["command"] == "echo hi"
        assert result.hooks["PreToolUse"][0].matcher == "Bash"

    def test_load_settings_preserves_extra_fields(self, tmp_path: Path) -> None:
        """Test that unknown fields are preserved."""
        settings_file = tmp_path / "settings.json"
        settings_data = {
            "hooks": {},
            "permissions": {"allow": ["Bash(git:*)"]},
            "customField": "customValue",
        }
        settings_file.write_text(json.dumps(settings_data), encoding="utf-8")

        result = load_settings(settings_file)

        assert result.model_extra is not None
        assert result.model_extra["customField"] == "customValue"
        assert result.model_extra["permissions"] == {"allow": ["Bash(git:*)"]}

    def test_load_settings_empty_json(self, tmp_path: Path) -> None:
        """Test loading empty JSON object."""
        settings_file = tmp_path / "settings.json"
        settings_file.write_text("{}", encoding="utf-8")

        result = load_settings(settings_file)

        assert result.hooks == {}


class TestSaveSettings:
    """Tests for save_settings function."""

    def test_save_settings_creates_parent_directory(self, tmp_path: Path) -> None:
        """Test that parent directory is created if it doesn't exist."""
        nested_path = tmp_path / "nested" / ".claude" / "settings.json"

        save_settings(nested_path, ClaudeSettings.empty())

        assert nested_path.exists()

    def test_save_settings_leaves_no_temp_file(self, tmp_path: Path) -> None:
        settings_file = tmp_path / "settings.json"

        save_settings(settings_file, ClaudeSettings.empty())

        assert not (tmp_path / "settings.json.tmp").exists()

    def test_save_settings_uses_metadata_alias(self, tmp_path: Path) -> None:
        """Test that field aliases are used in output (_metasaver)."""
        settings_file = tmp_path / "settings.json"
        settings = add_hook_to_settings(
            ClaudeSettings.empty(), "UserPromptSubmit", "*", create_hook_entry()
        )

        save_settings(settings_file, settings)

        data = json.loads(settings_file.read_text(encoding="utf-8"))
        hook_data = data["hooks"]["UserPromptSubmit"][0]["hooks"][0]
        assert hook_data["_metasaver"] == {"package": "metasaver-hooks", "hook_id": "test-hook"}
        assert "metasaver" not in hook_data
        assert hook_data["type"] == "command"

    def test_save_settings_omits_unset_matcher(self, tmp_path: Path) -> None:
        settings_file = tmp_path / "settings.json"
        settings = ClaudeSettings(hooks={"Stop": [MatcherGroup(hooks=[foreign_hook()])]})

        save_settings(settings_file, settings)

        data = json.loads(settings_file.read_text(encoding="utf-8"))
        assert data["hooks"]["Stop"] == [{"hooks": [foreign_hook()]}]

    def test_save_then_load_preserves_unrelated_settings(self, tmp_path: Path) -> None:
        settings_file = tmp_path / "settings.json"
        original = {
            "model": "sonnet",
            "permissions": {"allow": ["Bash(ls:*)"]},
            "hooks": {"PreToolUse": [{"matcher": "Bash", "hooks": [foreign_hook()]}]},
        }
        settings_file.write_text(json.dumps(original), encoding="utf-8")

        save_settings(settings_file, load_settings(settings_file))

        assert json.loads(settings_file.read_text(encoding="utf-8")) == original


class TestAddHookToSettings:
    """Tests for add_hook_to_settings function."""

    def test_adds_new_lifecycle_and_group(self) -> None:
        result = add_hook_to_settings(
            ClaudeSettings.empty(), "UserPromptSubmit", "*", create_hook_entry()
        )

        groups = result.hooks["UserPromptSubmit"]
        assert len(groups) == 1
        assert groups[0].matcher == "*"
        assert groups[0].hooks[0]["command"] == "echo test"

    def test_joins_existing_group_with_same_matcher(self) -> None:
        settings = ClaudeSettings(
            hooks={"UserPromptSubmit": [MatcherGroup(matcher="*", hooks=[foreign_hook()])]}
        )

        result = add_hook_to_settings(settings, "UserPromptSubmit", "*", create_hook_entry())

        groups = result.hooks["UserPromptSubmit"]
        assert len(groups) == 1
        assert groups[0].hooks[0] == foreign_hook()
        assert groups[0].hooks[1]["command"] == "echo test"

    def test_appends_group_for_different_matcher(self) -> None:
        settings = ClaudeSettings(
            hooks={"UserPromptSubmit": [MatcherGroup(hooks=[foreign_hook()])]}
        )

        result = add_hook_to_settings(settings, "UserPromptSubmit", "*", create_hook_entry())

        assert len(result.hooks["UserPromptSubmit"]) == 2

    def test_does_not_mutate_input(self) -> None:
        settings = ClaudeSettings.empty()

        add_hook_to_settings(settings, "UserPromptSubmit", "*", create_hook_entry())

        assert settings.hooks == {}


class TestRemoveOwnedHooks:
    """Tests for remove_owned_hooks function."""

    def test_removes_owned_entries_only(self) -> None:
        settings = add_hook_to_settings(
            ClaudeSettings(
                hooks={"UserPromptSubmit": [MatcherGroup(matcher="*", hooks=[foreign_hook()])]}
            ),
            "UserPromptSubmit",
            "*",
            create_hook_entry(),
        )

        result, removed = remove_owned_hooks(settings)

        assert removed == 1
        assert result.hooks["UserPromptSubmit"][0].hooks == [foreign_hook()]

    def test_drops_empty_groups_and_lifecycles(self) -> None:
        settings = add_hook_to_settings(
            ClaudeSettings.empty(), "UserPromptSubmit", "*", create_hook_entry()
        )

        result, removed = remove_owned_hooks(settings)

        assert removed == 1
        assert result.hooks == {}

    def test_nothing_to_remove(self) -> None:
        settings = ClaudeSettings(hooks={"Stop": [MatcherGroup(hooks=[foreign_hook()])]})

        result, removed = remove_owned_hooks(settings)

        assert removed == 0
        assert result.hooks == settings.hooks


class TestFindOwnedHooks:
    """Tests for find_owned_hooks function."""

    def test_lists_owned_entries_with_lifecycle(self) -> None:
        settings = add_hook_to_settings(
            ClaudeSettings(hooks={"Stop": [MatcherGroup(hooks=[foreign_hook()])]}),
            "UserPromptSubmit",
            "*",
            create_hook_entry(command="run-me"),
        )

        found = find_owned_hooks(settings)

        assert len(found) == 1
        assert found[0][0] == "UserPromptSubmit"
        assert found[0][1]["command"] == "run-me"
