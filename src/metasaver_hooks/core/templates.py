"""Bundled configuration templates.

The templates are opaque data for third-party tools. They are shipped and
copied verbatim, never parsed.
"""

import shutil
from dataclasses import dataclass
from pathlib import Path


def get_templates_dir() -> Path:
    """Return the directory holding the bundled template files."""
    return Path(__file__).parent.parent / "data" / "templates"


@dataclass(frozen=True)
class ConfigTemplate:
    """A bundled configuration file and the tool that consumes it."""

    name: str
    filename: str
    output_name: str
    consumer: str
    description: str

    @property
    def path(self) -> Path:
        return get_templates_dir() / self.filename

    def read_text(self) -> str:
        return self.path.read_text(encoding="utf-8")


TEMPLATES: tuple[ConfigTemplate, ...] = (
    ConfigTemplate(
        name="vite-mfe-host",
        filename="vite-mfe-host.template.ts",
        output_name="vite.config.ts",
        consumer="vite",
        description="Module federation host app with React",
    ),
    ConfigTemplate(
        name="commitlint",
        filename="commitlint.config.template.js",
        output_name="commitlint.config.js",
        consumer="commitlint",
        description="Conventional commits with relaxed subject rules",
    ),
)


def get_template(name: str) -> ConfigTemplate:
    """Look up a template by name.

    Raises:
        ValueError: If no template has that name
    """
    for template in TEMPLATES:
        if template.name == name:
            return template
    available = ", ".join(t.name for t in TEMPLATES)
    raise ValueError(f"Unknown template '{name}'. Available: {available}")


def write_template(template: ConfigTemplate, dest: Path, force: bool) -> Path:
    """Copy a template to dest, byte for byte.

    If dest is an existing directory the file is written inside it under the
    template's output name.

    Returns:
        Path of the written file

    Raises:
        FileExistsError: If the target exists and force is False
    """
    target = dest / template.output_name if dest.is_dir() else dest
    if target.exists() and not force:
        raise FileExistsError(f"{target} already exists (use --force to overwrite)")

    target.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(template.path, target)
    return target
