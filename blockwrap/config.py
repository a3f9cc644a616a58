"""Workspace configuration support for the blockwrap CLI."""

from __future__ import annotations

import fnmatch
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from blockwrap.errors import ConfigurationError
from blockwrap.formatting import FormattingOptions
from blockwrap.formatting.core import normalize_line_ending
from blockwrap.formatting.rules import DEFAULT_WIDTH, validate_width

CONFIG_FILE_NAMES = ["blockwrap.toml", ".blockwrap.toml"]
PYPROJECT = "pyproject.toml"

DEFAULT_EXTENSIONS = [
    ".c", ".h", ".cc", ".cpp", ".cxx", ".hpp", ".m", ".mm",
    ".cs", ".java", ".kt", ".scala", ".swift", ".go",
    ".js", ".jsx", ".mjs", ".ts", ".tsx",
    ".css", ".scss", ".less", ".php",
]


@dataclass
class WorkspaceConfig:
    """Resolved workspace configuration."""

    root: Path
    width: int = DEFAULT_WIDTH
    line_ending: str = "auto"
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    exclude: List[str] = field(default_factory=list)
    source: Optional[Path] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    def formatting_options(self, width: Optional[int] = None, line_ending: Optional[str] = None) -> FormattingOptions:
        """Build formatter options, letting CLI flags override the file."""
        options = FormattingOptions(
            width=self.width if width is None else width,
            line_ending=self.line_ending if line_ending is None else line_ending,
        )
        return options.validate()

    def is_excluded(self, path: Path) -> bool:
        try:
            relative = path.resolve().relative_to(self.root).as_posix()
        except ValueError:
            relative = path.as_posix()
        return any(fnmatch.fnmatch(relative, pattern) for pattern in self.exclude)

    def accepts(self, path: Path) -> bool:
        return path.suffix.lower() in self.extensions and not self.is_excluded(path)


def _read_toml_config(path: Path) -> Dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Invalid TOML: {exc}", path=str(path)) from exc


def _string_list(value: Any, key: str, path: Optional[Path]) -> List[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
        return list(value)
    raise ConfigurationError(
        f"Option '{key}' must be a string or a list of strings",
        path=str(path) if path else None,
    )


def _parse_section(data: Dict[str, Any], root: Path, source: Optional[Path]) -> WorkspaceConfig:
    location = str(source) if source else None

    try:
        width = validate_width(data.get("width", DEFAULT_WIDTH))
        line_ending = normalize_line_ending(data.get("line_ending", "auto"))
    except ConfigurationError as exc:
        raise ConfigurationError(exc.message, path=location, hint=exc.hint) from exc

    extensions_raw = data.get("extensions")
    if extensions_raw is None:
        extensions = list(DEFAULT_EXTENSIONS)
    else:
        extensions = [
            ext.lower() if ext.startswith(".") else f".{ext.lower()}"
            for ext in _string_list(extensions_raw, "extensions", source)
        ]
    exclude = _string_list(data.get("exclude") or [], "exclude", source)

    return WorkspaceConfig(
        root=root,
        width=width,
        line_ending=line_ending,
        extensions=extensions,
        exclude=exclude,
        source=source,
        raw=data,
    )


def locate_config_file(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    if explicit is not None:
        return explicit if explicit.exists() else None
    for candidate in CONFIG_FILE_NAMES:
        path = root / candidate
        if path.exists():
            return path
    pyproject = root / PYPROJECT
    if pyproject.exists() and "blockwrap" in _read_toml_config(pyproject).get("tool", {}):
        return pyproject
    return None


def load_workspace_config(root: Path, explicit: Optional[Path] = None) -> WorkspaceConfig:
    root = root.resolve()
    config_path = locate_config_file(root, explicit)
    if config_path is None:
        return WorkspaceConfig(root=root)

    data = _read_toml_config(config_path)
    if config_path.name == PYPROJECT:
        data = data.get("tool", {}).get("blockwrap", {})
    return _parse_section(data, root, config_path)


def discover_source_files(paths: Iterable[Path], config: WorkspaceConfig) -> List[Path]:
    """
    Expand ``paths`` into the list of files to process.

    Directories are searched recursively for configured extensions. Files
    named explicitly are kept whatever their suffix, unless excluded.
    """
    found = set()
    for path in paths:
        if path.is_dir():
            for candidate in path.rglob("*"):
                if candidate.is_file() and config.accepts(candidate):
                    found.add(candidate)
        elif path.is_file() and not config.is_excluded(path):
            found.add(path)
    return sorted(found)
