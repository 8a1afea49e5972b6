"""Pydantic models for Claude Code hooks configuration."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Key marking hook entries owned by this package inside settings.json
METADATA_KEY = "_metasaver"


class HookMetadata(BaseModel):
    """Metadata tracking which package hook an entry belongs to."""

    model_config = ConfigDict(frozen=True)

    package: str = Field(..., min_length=1)
    hook_id: str = Field(..., min_length=1)


class HookEntry(BaseModel):
    """A hook entry written by this package."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: str = "command"
    command: str = Field(..., min_length=1)
    timeout: int = Field(..., gt=0)
    metasaver: HookMetadata = Field(..., alias=METADATA_KEY)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the settings.json representation."""
        return self.model_dump(by_alias=True)


class MatcherGroup(BaseModel):
    """A group of hooks sharing one matcher pattern.

    Entries are kept as plain dicts so hooks installed by other tools survive
    a load/save cycle untouched.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    matcher: str | None = None
    hooks: list[dict[str, Any]] = Field(default_factory=list)

    @field_validator("matcher")
    @classmethod
    def validate_matcher(cls, v: str | None) -> str | None:
        """Reject whitespace-only matchers; None means "match everything"."""
        if v and not v.strip():
            raise ValueError("matcher cannot be blank")
        return v

    def owned_hooks(self) -> list[dict[str, Any]]:
        """Return entries installed by this package."""
        return [hook for hook in self.hooks if METADATA_KEY in hook]


class ClaudeSettings(BaseModel):
    """Top-level settings.json structure with hooks configuration.

    Uses extra="allow" to preserve unknown fields when reading and writing.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    hooks: dict[str, list[MatcherGroup]] = Field(default_factory=dict)

    @field_validator("hooks", mode="before")
    @classmethod
    def validate_hooks(cls, v: Any) -> Any:
        """Treat an explicit null as no hooks."""
        if v is None:
            return {}
        return v

    def to_dict(self) -> dict[str, Any]:
        """Convert to settings.json format, dropping unset matchers."""
        result = self.model_dump()
        for groups in result["hooks"].values():
            for group in groups:
                if group.get("matcher") is None:
                    group.pop("matcher", None)
        return result

    @staticmethod
    def empty() -> "ClaudeSettings":
        """Create an empty settings object."""
        return ClaudeSettings(hooks={})
