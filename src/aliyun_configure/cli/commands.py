"""Profile management subcommands: list, get, set, delete."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from aliyun_configure.core.colors import ConsoleColors
from aliyun_configure.core.constants import BANNER_WIDTH, SECRET_VISIBLE_CHARS
from aliyun_configure.core.exceptions import ProfileConfigError, ProfileNotFoundError
from aliyun_configure.core.masking import get_last_chars, mosaic_string
from aliyun_configure.profiles.configure import apply_settings
from aliyun_configure.profiles.models import AuthenticateMode, Profile
from aliyun_configure.profiles.store import (
    load_configuration,
    resolve_active_profile,
    save_configuration,
    validate_profile_name,
)

logger = logging.getLogger(__name__)

SET_FIELDS = (
    "access_key_id",
    "access_key_secret",
    "sts_token",
    "ram_role_arn",
    "role_session_name",
    "ram_role_name",
    "key_pair_name",
    "region_id",
    "language",
)


def describe_credential(profile: Profile) -> str:
    """One-line credential summary for listings (never reveals a full secret)."""
    suffix = f"***{get_last_chars(profile.access_key_id, SECRET_VISIBLE_CHARS)}"
    summaries = {
        AuthenticateMode.AK: f"AK:{suffix}",
        AuthenticateMode.STS_TOKEN: f"StsToken:{suffix}",
        AuthenticateMode.RAM_ROLE_ARN: f"RamRoleArn:{suffix}",
        AuthenticateMode.ECS_RAM_ROLE: f"EcsRamRole:{profile.ram_role_name}",
        AuthenticateMode.RSA_KEY_PAIR: f"RsaKeyPair:{profile.key_pair_name}",
    }
    return summaries.get(profile.mode, "Unconfigured")


def masked_profile_dict(profile: Profile) -> dict[str, object]:
    """Profile as a dict with secrets masked for display."""
    data = profile.to_dict()
    for key in ("access_key_id", "access_key_secret", "sts_token"):
        data[key] = mosaic_string(data[key], SECRET_VISIBLE_CHARS)
    if data["private_key"]:
        data["private_key"] = "***"
    return data


def list_profiles(config_path: Path | None = None, output_format: str = "table") -> bool:
    """List all profiles with the current one marked.

    Args:
        config_path: Store file
        output_format: Output format - "table" (default) or "json"

    Returns:
        True if successful
    """
    conf = load_configuration(config_path)
    profiles = conf.list_profiles()

    if output_format == "json":
        rows = [
            {
                "name": p.name,
                "current": p.name == conf.current_profile,
                "credential": describe_credential(p),
                "region_id": p.region_id,
                "language": p.language,
            }
            for p in profiles
        ]
        print(json.dumps({"profiles": rows, "count": len(rows), "current": conf.current_profile}, indent=2))
        return True

    print()
    print("=" * BANNER_WIDTH)
    print("PROFILES")
    print("=" * BANNER_WIDTH)
    print()

    if not profiles:
        print("No profiles found.")
        print()
        print("To create a profile, run:")
        print("  aliyun-configure --profile <name> --mode AK")
        print()
        return True

    print(f"  {'Profile':<20} {'Credential':<28} {'Region':<16} {'Language'}")
    print("-" * (BANNER_WIDTH + 14))
    for p in profiles:
        is_current = p.name == conf.current_profile
        marker = "*" if is_current else " "
        name = ConsoleColors.bold(p.name) if is_current else p.name
        print(f"{marker} {ConsoleColors.ljust(name, 20)} {describe_credential(p):<28} {p.region_id:<16} {p.language}")
    print()
    print(f"Total: {len(profiles)} profile(s)")
    print()
    return True


def show_profile(profile_name: str | None, config_path: Path | None = None) -> bool:
    """Print one profile as JSON with secrets masked.

    Raises:
        ProfileNotFoundError: If the profile does not exist
    """
    conf = load_configuration(config_path)
    name = resolve_active_profile(profile_name, conf)
    profile = conf.get_profile(name)
    if profile is None:
        raise ProfileNotFoundError(f"Profile '{name}' not found", profile_name=name)
    print(json.dumps(masked_profile_dict(profile), indent=2, ensure_ascii=False))
    return True


def set_profile(args: argparse.Namespace, config_path: Path | None = None) -> bool:
    """Create or update a profile from command-line values, then make it current.

    Raises:
        ProfileConfigError: If the profile name is invalid
        InvalidModeError: If --mode is not supported
        FileReadError: If --private-key-file cannot be read
    """
    conf = load_configuration(config_path)
    name = resolve_active_profile(getattr(args, "profile", None), conf)
    is_valid, error_msg = validate_profile_name(name)
    if not is_valid:
        raise ProfileConfigError(error_msg, profile_name=name)

    mode = AuthenticateMode.parse(getattr(args, "mode", "") or "")
    profile = conf.get_profile(name) or conf.new_profile(name)
    values = {key: getattr(args, key, None) for key in SET_FIELDS}
    apply_settings(profile, mode=mode, private_key_file=getattr(args, "private_key_file", None), **values)

    conf.put_profile(profile)
    conf.current_profile = name
    save_configuration(conf, config_path)
    logger.info("Profile '%s' updated via set (mode=%s)", name, profile.mode)
    print(ConsoleColors.success(f"Profile '{name}' saved."))
    return True


def delete_profile(profile_name: str | None, config_path: Path | None = None) -> bool:
    """Delete a profile from the store.

    The name must be given explicitly; $ALIYUN_PROFILE and the current
    profile are never used as a fallback here.

    Raises:
        ProfileConfigError: If no profile name was given
        ProfileNotFoundError: If the profile does not exist
    """
    if not profile_name:
        raise ProfileConfigError("delete needs a profile name", details="pass --profile NAME")
    conf = load_configuration(config_path)
    conf.delete_profile(profile_name)
    save_configuration(conf, config_path)
    logger.info("Profile '%s' deleted", profile_name)
    print(ConsoleColors.success(f"Profile '{profile_name}' deleted."))
    return True
