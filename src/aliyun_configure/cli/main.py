"""CLI entrypoint for aliyun-configure."""

from __future__ import annotations

import logging
import sys

from dotenv import find_dotenv, load_dotenv

from aliyun_configure.cli.commands import delete_profile, list_profiles, set_profile, show_profile
from aliyun_configure.cli.parser import parse_arguments
from aliyun_configure.core.colors import ConsoleColors
from aliyun_configure.core.config import RunConfig
from aliyun_configure.core.constants import EXIT_ERROR, EXIT_INTERRUPTED, EXIT_SUCCESS
from aliyun_configure.core.exceptions import ConfigureError
from aliyun_configure.core.logging import setup_logging
from aliyun_configure.profiles.configure import do_configure

logger = logging.getLogger(__name__)


def _exit_error(error: Exception) -> int:
    print(ConsoleColors.error(f"ERROR: {error}"), file=sys.stderr)
    return EXIT_ERROR


def run(config: RunConfig, args) -> bool:
    """Dispatch one parsed invocation to its command."""
    if config.command == "list":
        return list_profiles(config.config_path, config.output_format)
    if config.command == "get":
        return show_profile(config.profile, config.config_path)
    if config.command == "set":
        return set_profile(args, config.config_path)
    if config.command == "delete":
        return delete_profile(config.profile, config.config_path)
    do_configure(config.profile, config.mode, config_path=config.config_path)
    return True


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the script"""
    # .env may provide ALIYUN_CONFIG_DIR, ALIYUN_PROFILE or LOG_LEVEL; real env vars win.
    dotenv_loaded = load_dotenv(find_dotenv(usecwd=True), override=False)

    args = parse_arguments(argv)
    config = RunConfig.from_args(args)

    ConsoleColors.configure(no_color=config.no_color)
    setup_logging(config.log)
    if dotenv_loaded:
        logger.debug(".env file found and loaded")

    try:
        ok = run(config, args)
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except ConfigureError as e:
        logger.debug("Command '%s' failed", config.command, exc_info=True)
        return _exit_error(e)

    return EXIT_SUCCESS if ok else EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
