"""CLI module - Command-line interface components."""

from aliyun_configure.cli.commands import (
    delete_profile,
    describe_credential,
    list_profiles,
    masked_profile_dict,
    set_profile,
    show_profile,
)
from aliyun_configure.cli.main import main
from aliyun_configure.cli.parser import build_parser, parse_arguments

__all__ = [
    "build_parser",
    "delete_profile",
    "describe_credential",
    "list_profiles",
    "main",
    "masked_profile_dict",
    "parse_arguments",
    "set_profile",
    "show_profile",
]
