"""Shared state for CLI commands."""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from blockwrap.config import WorkspaceConfig, discover_source_files, load_workspace_config
from blockwrap.errors import ConfigurationError
from blockwrap.formatting import FormattingOptions

from .errors import CLIConfigError, CLIFileNotFoundError
from .validation import validate_int


@dataclass
class CLIContext:
    """Workspace root and the configuration resolved for it."""
    workspace: Path
    config: WorkspaceConfig

    def options_from_args(self, args: argparse.Namespace) -> FormattingOptions:
        width = validate_int(getattr(args, "width", None), allow_none=True, min_value=1)
        line_ending = getattr(args, "line_ending", None)
        try:
            return self.config.formatting_options(width=width, line_ending=line_ending)
        except ConfigurationError as exc:
            raise CLIConfigError(exc.format(), hint=exc.hint) from exc

    def collect_files(self, raw_paths: List[str]) -> List[Path]:
        paths = []
        for raw in raw_paths:
            path = Path(raw)
            if not path.exists():
                raise CLIFileNotFoundError(
                    f"Path not found: {raw}",
                    context={"workspace": str(self.workspace)},
                )
            paths.append(path)
        return discover_source_files(paths, self.config)


def get_cli_context(args: argparse.Namespace) -> CLIContext:
    workspace = Path(getattr(args, "workspace", None) or Path.cwd()).resolve()
    config_arg = getattr(args, "config", None)
    explicit: Optional[Path] = Path(config_arg).resolve() if config_arg else None
    if explicit is not None and not explicit.exists():
        raise CLIFileNotFoundError(f"Config file not found: {config_arg}")
    try:
        config = load_workspace_config(workspace, explicit)
    except ConfigurationError as exc:
        raise CLIConfigError(exc.format(), hint=exc.hint) from exc
    return CLIContext(workspace=workspace, config=config)
