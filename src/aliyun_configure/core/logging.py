"""Logging helpers for aliyun-configure.

Log lines never carry credential values: every handler gets a
:class:`SensitiveDataFilter` that rewrites ``key=value`` / ``key: value``
pairs whose key looks like a secret.
"""

import json
import logging
import os
import re
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler

from aliyun_configure.core.config import LogConfig
from aliyun_configure.core.constants import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL, VALID_LOG_LEVELS

_REDACTED_VALUE = "[REDACTED]"
_SENSITIVE_KEY_PATTERN = re.compile(
    r"""(?ix)
    (?P<key>["']?(?<![A-Za-z0-9_])
        (?:access[_-]?key[_-]?secret|sts[_-]?token|private[_-]?key|password|passwd|secret|token)
    (?![A-Za-z0-9_])["']?)
    (?P<sep>\s*[:=]\s*)
    (?P<value>\[REDACTED\]|"(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*'|[^,\s;}\]]+)
    """
)


def _replace_secret(match: re.Match[str]) -> str:
    value = match.group("value")
    if len(value) >= 2 and value[0] in "'\"" and value[-1] == value[0]:
        redacted = f"{value[0]}{_REDACTED_VALUE}{value[0]}"
    else:
        redacted = _REDACTED_VALUE
    return f"{match.group('key')}{match.group('sep')}{redacted}"


def redact_message(message: str) -> str:
    """Replace the value of every secret-looking ``key=value`` / ``key: value`` pair."""
    return _SENSITIVE_KEY_PATTERN.sub(_replace_secret, message)


def _record_message(record: logging.LogRecord) -> str:
    try:
        return record.getMessage()
    except (TypeError, ValueError):
        return f"{record.msg} [log-message-format-error]"


class SensitiveDataFilter(logging.Filter):
    """Redacts secrets from the rendered message of each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = redact_message(_record_message(record))
        record.args = ()
        return True


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging output.

    Each log record is a single JSON object on one line.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": redact_message(_record_message(record)),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def resolve_log_level(log_level: str | None) -> int:
    """Resolve a numeric level. Priority: argument, then LOG_LEVEL, then WARNING."""
    if log_level is None:
        log_level = os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)

    if log_level.upper() not in VALID_LOG_LEVELS:
        print(f"Warning: Invalid log level '{log_level}', using {DEFAULT_LOG_LEVEL}", file=sys.stderr)
        log_level = DEFAULT_LOG_LEVEL

    return getattr(logging, log_level.upper(), logging.WARNING)


def setup_logging(config: LogConfig | None = None) -> logging.Logger:
    """Setup logging to stderr and, optionally, a rotating log file.

    Prompts go to stdout, so log output stays on stderr to keep the
    interactive surface clean.

    Args:
        config: Logging configuration (defaults to LogConfig())

    Returns:
        The package logger
    """
    config = config or LogConfig()
    numeric_level = resolve_log_level(config.level)

    # Clear any existing handlers from root logger
    for handler in logging.root.handlers[:]:
        handler.close()
        logging.root.removeHandler(handler)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_file is not None:
        try:
            config.log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(
                RotatingFileHandler(
                    config.log_file,
                    maxBytes=config.file_max_bytes,
                    backupCount=config.file_backup_count,
                )
            )
        except OSError as e:
            print(f"Warning: Cannot open log file {config.log_file}: {e}. Logging to console only.", file=sys.stderr)

    if config.log_format.lower() == "json":
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(numeric_level)
        handler.addFilter(SensitiveDataFilter())
        logging.root.addHandler(handler)

    logging.root.setLevel(numeric_level)

    logger = logging.getLogger("aliyun_configure")
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    logger.debug("Logging initialized at level %s", logging.getLevelName(numeric_level))
    return logger
