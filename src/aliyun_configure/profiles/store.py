"""Profile store: named profiles, the current-profile pointer, load and save."""

from __future__ import annotations

import dataclasses
import json
import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from aliyun_configure.core.constants import (
    CONFIG_FILE_MODE,
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_DIR_NAME,
    DEFAULT_PROFILE_NAME,
    ENV_CONFIG_DIR,
    ENV_PROFILE,
    PROFILE_NAME_MAX_LENGTH,
)
from aliyun_configure.core.exceptions import (
    ConfigLoadError,
    ConfigSaveError,
    InvalidModeError,
    ProfileNotFoundError,
)
from aliyun_configure.profiles.models import Profile

logger = logging.getLogger(__name__)


def get_config_home() -> Path:
    """Get the store directory (~/.aliyun or $ALIYUN_CONFIG_DIR).

    Returns:
        Path to the store directory
    """
    config_home = os.environ.get(ENV_CONFIG_DIR)
    if config_home:
        return Path(config_home).expanduser()
    return Path.home() / DEFAULT_CONFIG_DIR_NAME


def get_config_path() -> Path:
    """Get path to the store file (~/.aliyun/config.json)."""
    return get_config_home() / CONFIG_FILE_NAME


def validate_profile_name(name: str) -> tuple[bool, str | None]:
    """Validate profile name (alphanumeric, dots, dashes, underscores only).

    Args:
        name: Profile name to validate

    Returns:
        Tuple of (is_valid, error_message). error_message is None if valid.
    """
    if not name:
        return False, "Profile name cannot be empty"

    if not re.match(r"^[a-zA-Z0-9][a-zA-Z0-9._-]*$", name):
        return False, (
            f"Profile name '{name}' is invalid. "
            "Must start with alphanumeric and contain only letters, numbers, dots, dashes, and underscores."
        )

    if len(name) > PROFILE_NAME_MAX_LENGTH:
        return False, f"Profile name '{name}' is too long (max {PROFILE_NAME_MAX_LENGTH} characters)"

    return True, None


@dataclass
class Configuration:
    """All named profiles plus the name of the current one.

    Profiles are stored and handed out as copies, so a caller holding a
    Profile never shares state with the store.
    """

    current_profile: str = DEFAULT_PROFILE_NAME
    profiles: dict[str, Profile] = field(default_factory=dict)

    def get_profile(self, name: str) -> Profile | None:
        """Exact-name lookup. Returns a copy, or None when absent."""
        profile = self.profiles.get(name)
        if profile is None:
            return None
        return dataclasses.replace(profile)

    def new_profile(self, name: str) -> Profile:
        """Return a zero-valued profile named ``name`` (not inserted)."""
        return Profile(name=name)

    def put_profile(self, profile: Profile) -> None:
        """Insert or overwrite by name."""
        self.profiles[profile.name] = dataclasses.replace(profile)

    def delete_profile(self, name: str) -> None:
        """Remove a profile, moving the current pointer if it pointed at it.

        Raises:
            ProfileNotFoundError: If no profile has that name
        """
        if name not in self.profiles:
            raise ProfileNotFoundError(f"Profile '{name}' not found", profile_name=name)
        del self.profiles[name]
        if self.current_profile == name:
            remaining = sorted(self.profiles)
            self.current_profile = remaining[0] if remaining else DEFAULT_PROFILE_NAME
            logger.info("Current profile '%s' deleted, current is now '%s'", name, self.current_profile)

    def list_profiles(self) -> list[Profile]:
        """All profiles sorted by name."""
        return [dataclasses.replace(self.profiles[name]) for name in sorted(self.profiles)]

    def to_dict(self) -> dict[str, Any]:
        return {
            "current": self.current_profile,
            "profiles": [p.to_dict() for p in self.list_profiles()],
        }

    @classmethod
    def from_dict(cls, data: Any, *, path: Path | None = None) -> Configuration:
        """Build a configuration from the stored JSON document.

        Raises:
            ConfigLoadError: If the document does not have the expected shape
        """
        location = str(path) if path is not None else None
        if not isinstance(data, dict):
            raise ConfigLoadError("Invalid configuration: expected a JSON object", config_path=location)

        profiles_raw = data.get("profiles") or []
        if not isinstance(profiles_raw, list):
            raise ConfigLoadError("Invalid configuration: 'profiles' must be a list", config_path=location)

        conf = cls(current_profile=str(data.get("current") or DEFAULT_PROFILE_NAME))
        for index, raw in enumerate(profiles_raw):
            if not isinstance(raw, dict) or not str(raw.get("name") or "").strip():
                raise ConfigLoadError(
                    f"Invalid configuration: profile #{index} has no name", config_path=location
                )
            try:
                profile = Profile.from_dict(raw)
            except InvalidModeError as e:
                raise ConfigLoadError(
                    f"Invalid configuration: profile '{raw['name']}' has an unsupported mode",
                    config_path=location,
                    details=str(e),
                ) from e
            except (TypeError, ValueError) as e:
                raise ConfigLoadError(
                    f"Invalid configuration: profile '{raw['name']}' is malformed",
                    config_path=location,
                    details=str(e),
                ) from e
            if profile.name in conf.profiles:
                raise ConfigLoadError(
                    f"Invalid configuration: profile '{profile.name}' is defined more than once",
                    config_path=location,
                )
            conf.profiles[profile.name] = profile
        return conf


def load_configuration(path: Path | None = None) -> Configuration:
    """Read the persisted store.

    A store that does not exist yet is not an error: an empty configuration
    is returned.

    Args:
        path: Store file (defaults to get_config_path())

    Raises:
        ConfigLoadError: If the file is unreadable or malformed
    """
    config_path = path or get_config_path()
    if not config_path.exists():
        logger.debug("No configuration at %s, starting empty", config_path)
        return Configuration()

    try:
        with open(config_path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigLoadError("Invalid JSON in configuration", config_path=str(config_path), details=str(e)) from e
    except OSError as e:
        raise ConfigLoadError("Cannot read configuration", config_path=str(config_path), details=str(e)) from e

    conf = Configuration.from_dict(data, path=config_path)
    logger.debug("Loaded %d profile(s) from %s", len(conf.profiles), config_path)
    return conf


def save_configuration(conf: Configuration, path: Path | None = None) -> Path:
    """Overwrite the persisted store with ``conf``.

    The file is replaced atomically and restricted to the owner. There is no
    lock: concurrent writers race and the last one wins.

    Returns:
        The path written

    Raises:
        ConfigSaveError: If the file cannot be written
    """
    config_path = path or get_config_path()
    content = json.dumps(conf.to_dict(), indent=2, ensure_ascii=False) + "\n"
    tmp_path = config_path.with_name(f".{config_path.name}.tmp-{os.getpid()}")
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, CONFIG_FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, config_path)
        os.chmod(config_path, CONFIG_FILE_MODE)
    except OSError as e:
        raise ConfigSaveError("Cannot write configuration", config_path=str(config_path), details=str(e)) from e
    finally:
        if tmp_path.exists():
            try:
                tmp_path.unlink()
            except OSError:
                logger.debug("Could not remove temporary file %s", tmp_path)

    logger.info("Saved %d profile(s) to %s", len(conf.profiles), config_path)
    return config_path


def resolve_active_profile(cli_profile: str | None, conf: Configuration) -> str:
    """Resolve active profile: --profile > ALIYUN_PROFILE > store's current profile.

    Args:
        cli_profile: Profile name from --profile CLI argument
        conf: Loaded configuration

    Returns:
        Active profile name
    """
    if cli_profile:
        return cli_profile
    return os.environ.get(ENV_PROFILE) or conf.current_profile
