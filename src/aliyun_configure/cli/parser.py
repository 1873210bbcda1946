"""Command-line argument parsing."""

import argparse

from aliyun_configure.core.constants import VALID_LOG_LEVELS
from aliyun_configure.core.version import __version__
from aliyun_configure.profiles.models import AuthenticateMode

MODE_CHOICES_HELP = ", ".join(m.value for m in AuthenticateMode)


def _add_profile_argument(parser: argparse.ArgumentParser, subcommand: bool = True) -> None:
    # SUPPRESS keeps a subcommand from clobbering a --profile given before it.
    parser.add_argument(
        "--profile",
        "-p",
        metavar="NAME",
        default=argparse.SUPPRESS if subcommand else None,
        help="Profile name (default: $ALIYUN_PROFILE, then the current profile)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (exposed separately for tests)."""
    parser = argparse.ArgumentParser(
        prog="aliyun-configure",
        description="Configure credential profiles for the Alibaba Cloud CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Configure the default profile with an AccessKey pair
  aliyun-configure --mode AK

  # Configure a named profile that assumes a RAM role
  aliyun-configure --profile prod --mode RamRoleArn

  # List profiles (the current one is marked with *)
  aliyun-configure list

  # Show one profile with secrets masked
  aliyun-configure get --profile prod

  # Update fields without prompting
  aliyun-configure set --profile prod --region cn-shanghai --language zh

  # Delete a profile
  aliyun-configure delete --profile old
""",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config-path", metavar="PATH", help="Profile store file (default: ~/.aliyun/config.json)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        default=None,
        help="Logging level (default: $LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--log-format", choices=["text", "json"], default="text", help="Log output format")
    parser.add_argument("--log-file", metavar="PATH", help="Also write logs to this rotating file")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")

    # Top-level --profile/--mode make `aliyun-configure --mode AK` work without a subcommand.
    _add_profile_argument(parser, subcommand=False)
    parser.add_argument("--mode", metavar="MODE", default="", help=f"Authenticate mode: {MODE_CHOICES_HELP}")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    configure_parser = subparsers.add_parser("configure", help="Interactively configure a profile")
    _add_profile_argument(configure_parser)
    configure_parser.add_argument("--mode", metavar="MODE", default=argparse.SUPPRESS, help=f"Authenticate mode: {MODE_CHOICES_HELP}")

    list_parser = subparsers.add_parser("list", help="List all profiles")
    list_parser.add_argument("--format", choices=["table", "json"], default="table", help="Output format")

    get_parser = subparsers.add_parser("get", help="Show one profile with secrets masked")
    _add_profile_argument(get_parser)

    set_parser = subparsers.add_parser("set", help="Update profile fields without prompting")
    _add_profile_argument(set_parser)
    set_parser.add_argument("--mode", metavar="MODE", default=argparse.SUPPRESS, help=f"Authenticate mode: {MODE_CHOICES_HELP}")
    set_parser.add_argument("--access-key-id", metavar="ID")
    set_parser.add_argument("--access-key-secret", metavar="SECRET")
    set_parser.add_argument("--sts-token", metavar="TOKEN")
    set_parser.add_argument("--ram-role-arn", metavar="ARN")
    set_parser.add_argument("--role-session-name", metavar="NAME")
    set_parser.add_argument("--ram-role-name", metavar="NAME")
    set_parser.add_argument("--private-key-file", metavar="PATH", help="RSA private key file (contents are stored)")
    set_parser.add_argument("--key-pair-name", metavar="NAME")
    set_parser.add_argument("--region", dest="region_id", metavar="REGION")
    set_parser.add_argument("--language", choices=["zh", "en"])

    delete_parser = subparsers.add_parser("delete", help="Delete a profile (needs --profile, before or after the subcommand)")
    _add_profile_argument(delete_parser)

    return parser


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments"""
    return build_parser().parse_args(argv)
