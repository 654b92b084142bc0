import tomllib
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any

from .errors import make_config_error

MANIFEST_NAME = "tokengen.toml"


class OutputLayout(StrEnum):
    """Which set of type-declaration files a build emits."""

    COMBINED = "combined"  # index.d.ts only
    SPLIT = "split"  # types.d.ts + index.d.ts re-exporting it


@dataclass
class TokensConfig:
    """Token document location."""

    source: str = "src/designTokens.json"


@dataclass
class OutputConfig:
    """Generated file destinations.

    Examples in tokengen.toml:

        [output]
        constants = "src/constant.js"
        types_dir = "dist"
        layout = "split"
    """

    constants: str = "src/constant.js"
    types_dir: str = "dist"
    layout: OutputLayout = OutputLayout.COMBINED


@dataclass
class ProjectManifest:
    """
    Project manifest loaded from tokengen.toml.

    Relative paths resolve against ``root``, the directory holding the
    manifest (or the working directory when none exists).
    """

    root: Path
    name: str = "@pantograph/design-tokens"
    tokens: TokensConfig = field(default_factory=TokensConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @property
    def tokens_path(self) -> Path:
        return self.root / self.tokens.source

    @property
    def constants_path(self) -> Path:
        return self.root / self.output.constants

    @property
    def types_dir(self) -> Path:
        return self.root / self.output.types_dir


def _table(data: dict[str, Any], key: str, path: Path) -> dict[str, Any]:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise make_config_error(f"[{key}] must be a table", path)
    return value


def _string(table: dict[str, Any], section: str, key: str, default: str, path: Path) -> str:
    value = table.get(key, default)
    if not isinstance(value, str):
        raise make_config_error(f"[{section}] {key} must be a string", path)
    return value


def parse_layout(value: str, path: Path | None = None) -> OutputLayout:
    """Convert a layout name to OutputLayout, raising ConfigError on unknown names."""
    try:
        return OutputLayout(value)
    except ValueError:
        allowed = ", ".join(layout.value for layout in OutputLayout)
        raise make_config_error(
            f"Unknown output layout {value!r} (expected one of: {allowed})", path
        ) from None


def load_manifest(path: Path) -> ProjectManifest:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise make_config_error("Manifest not found", path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise make_config_error(f"Cannot read manifest: {e}", path) from e

    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise make_config_error(f"Invalid TOML: {e}", path) from e

    project = _table(data, "project", path)
    tokens_data = _table(data, "tokens", path)
    output_data = _table(data, "output", path)

    tokens = TokensConfig(
        source=_string(tokens_data, "tokens", "source", "src/designTokens.json", path),
    )

    output = OutputConfig(
        constants=_string(output_data, "output", "constants", "src/constant.js", path),
        types_dir=_string(output_data, "output", "types_dir", "dist", path),
        layout=parse_layout(_string(output_data, "output", "layout", "combined", path), path),
    )

    return ProjectManifest(
        root=path.resolve().parent,
        name=_string(project, "project", "name", "@pantograph/design-tokens", path),
        tokens=tokens,
        output=output,
    )


def find_manifest(start: Path | None = None) -> ProjectManifest:
    """Load tokengen.toml from ``start`` (default: cwd), or fall back to defaults."""
    root = (start or Path.cwd()).resolve()
    candidate = root / MANIFEST_NAME
    if candidate.exists():
        return load_manifest(candidate)
    return ProjectManifest(root=root)
