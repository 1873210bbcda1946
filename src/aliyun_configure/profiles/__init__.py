"""Profiles module - the profile model, store and configure workflow."""

from aliyun_configure.profiles.collector import (
    CollectorState,
    InputReader,
    ModeCollector,
    normalize_language,
    read_key_file,
)
from aliyun_configure.profiles.configure import apply_settings, do_configure
from aliyun_configure.profiles.models import AuthenticateMode, Profile
from aliyun_configure.profiles.store import (
    Configuration,
    get_config_home,
    get_config_path,
    load_configuration,
    resolve_active_profile,
    save_configuration,
    validate_profile_name,
)

__all__ = [
    "AuthenticateMode",
    "CollectorState",
    "Configuration",
    "InputReader",
    "ModeCollector",
    "Profile",
    "apply_settings",
    "do_configure",
    "get_config_home",
    "get_config_path",
    "load_configuration",
    "normalize_language",
    "read_key_file",
    "resolve_active_profile",
    "save_configuration",
    "validate_profile_name",
]
