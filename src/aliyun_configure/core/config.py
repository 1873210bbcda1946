"""Configuration dataclasses for aliyun-configure.

These dataclasses centralize the run options for type safety and easy
testing. They can be created from command-line arguments or used directly
in code.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class LogConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level string (default: None, resolved from LOG_LEVEL)
        log_format: "text" or "json" (default: "text")
        log_file: Optional file that receives a rotating copy of the log
        file_max_bytes: Maximum size per log file (default: 1MB)
        file_backup_count: Number of backup log files (default: 3)
    """

    level: str | None = None
    log_format: str = "text"
    log_file: Path | None = None
    file_max_bytes: int = 1024 * 1024  # 1MB
    file_backup_count: int = 3


@dataclass
class RunConfig:
    """Options for a single CLI invocation.

    Attributes:
        command: Subcommand name (configure, list, get, set, delete)
        profile: Profile name from --profile (None means "resolve")
        mode: Authenticate mode string from --mode ("" means not given)
        config_path: Explicit store location from --config-path
        output_format: Output format for ``list`` (table or json)
        no_color: Disable ANSI colors
        log: Logging configuration
    """

    command: str = "configure"
    profile: str | None = None
    mode: str = ""
    config_path: Path | None = None
    output_format: str = "table"
    no_color: bool = False
    log: LogConfig = field(default_factory=LogConfig)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> RunConfig:
        """Create configuration from parsed command-line arguments."""
        config_path = getattr(args, "config_path", None)
        return cls(
            command=getattr(args, "command", None) or "configure",
            profile=getattr(args, "profile", None),
            mode=getattr(args, "mode", None) or "",
            config_path=Path(config_path).expanduser() if config_path else None,
            output_format=getattr(args, "format", "table"),
            no_color=getattr(args, "no_color", False),
            log=LogConfig(
                level=getattr(args, "log_level", None),
                log_format=getattr(args, "log_format", "text"),
                log_file=Path(args.log_file).expanduser() if getattr(args, "log_file", None) else None,
            ),
        )
