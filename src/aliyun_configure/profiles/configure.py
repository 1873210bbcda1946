"""The ``configure`` workflow and its non-interactive counterpart."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from aliyun_configure.core.colors import ConsoleColors
from aliyun_configure.core.constants import (
    DEFAULT_EXPIRED_SECONDS,
    DEFAULT_PROFILE_NAME,
    OUTPUT_FORMAT_JSON,
)
from aliyun_configure.core.exceptions import ProfileConfigError
from aliyun_configure.profiles.collector import (
    InputReader,
    ModeCollector,
    normalize_language,
    read_key_file,
)
from aliyun_configure.profiles.models import AuthenticateMode, Profile
from aliyun_configure.profiles.store import (
    load_configuration,
    save_configuration,
    validate_profile_name,
)

logger = logging.getLogger(__name__)


def _check_profile_name(profile_name: str) -> None:
    is_valid, error_msg = validate_profile_name(profile_name)
    if not is_valid:
        raise ProfileConfigError(error_msg, profile_name=profile_name)


def do_configure(
    profile_name: str | None,
    mode: str,
    *,
    config_path: Path | None = None,
    reader: InputReader | None = None,
    writer: TextIO | None = None,
) -> Profile:
    """Interactively configure one profile and make it current.

    Args:
        profile_name: Profile to create or update (None means "default")
        mode: Authenticate mode string; "" collects AK fields and keeps the
            profile's existing mode
        config_path: Store file (defaults to ~/.aliyun/config.json)
        reader: Input source (defaults to stdin)
        writer: Prompt destination (defaults to stdout)

    Returns:
        The saved profile

    Raises:
        InvalidModeError: If ``mode`` is not supported (before any prompt)
        ProfileConfigError: If the profile name is invalid
        ConfigLoadError / ConfigSaveError: If the store cannot be read or written
        FileReadError: If the RSA private key file cannot be read
        InputClosedError: If input ends mid-pass
    """
    writer = writer if writer is not None else sys.stdout
    profile_name = profile_name or DEFAULT_PROFILE_NAME
    _check_profile_name(profile_name)
    auth_mode = AuthenticateMode.parse(mode)

    conf = load_configuration(config_path)
    profile = conf.get_profile(profile_name)
    if profile is None:
        logger.debug("Profile '%s' not found, creating it", profile_name)
        profile = conf.new_profile(profile_name)

    writer.write(f"Configuring profile '{profile_name}' in '{mode}' authenticate mode...\n")

    collector = ModeCollector(reader or InputReader(), writer)
    profile = collector.collect(profile, auth_mode)

    writer.write(f"Saving profile[{profile_name}] ...")
    writer.flush()
    conf.put_profile(profile)
    conf.current_profile = profile.name
    save_configuration(conf, config_path)
    writer.write(ConsoleColors.success("Done.") + "\n")

    logger.info("Profile '%s' configured (mode=%s, explicit=%s)", profile_name, profile.mode, collector.mode_explicit)
    return profile


def apply_settings(
    profile: Profile,
    *,
    mode: AuthenticateMode | None = None,
    private_key_file: str | None = None,
    **values: str | None,
) -> Profile:
    """Apply non-interactive field updates, then the same normalization as ``configure``.

    ``None`` or empty values leave the field unchanged.

    Args:
        profile: Profile to update in place
        mode: New authenticate mode, if any
        private_key_file: Path whose contents replace ``private_key``
        **values: Profile field names mapped to new values

    Returns:
        The same profile, updated

    Raises:
        FileReadError: If ``private_key_file`` cannot be read
        ProfileConfigError: If ``values`` names an unknown field
    """
    settable = {
        "access_key_id",
        "access_key_secret",
        "sts_token",
        "ram_role_arn",
        "role_session_name",
        "ram_role_name",
        "key_pair_name",
        "region_id",
        "language",
    }
    unknown = set(values) - settable
    if unknown:
        raise ProfileConfigError(
            f"Unknown profile field(s): {', '.join(sorted(unknown))}", profile_name=profile.name
        )

    if mode is not None:
        profile.mode = mode
    for key, value in values.items():
        if value:
            setattr(profile, key, value)
    if private_key_file:
        profile.private_key = read_key_file(private_key_file)

    if profile.mode in (AuthenticateMode.RAM_ROLE_ARN, AuthenticateMode.RSA_KEY_PAIR):
        profile.expired_seconds = DEFAULT_EXPIRED_SECONDS
    profile.output_format = OUTPUT_FORMAT_JSON
    profile.language = normalize_language(profile.language)
    return profile
