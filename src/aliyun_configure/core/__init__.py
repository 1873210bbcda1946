"""Core module - Foundation components with no internal dependencies.

This module provides the basic building blocks used throughout the application:
- Version information
- Custom exceptions
- Configuration dataclasses
- Constants and defaults
- Secret masking
- Console colors
"""

from aliyun_configure.core.version import __version__

from aliyun_configure.core.exceptions import (
    ConfigureError,
    InvalidModeError,
    FileReadError,
    ConfigLoadError,
    ConfigSaveError,
    InputClosedError,
    ProfileError,
    ProfileNotFoundError,
    ProfileConfigError,
)

from aliyun_configure.core.config import (
    LogConfig,
    RunConfig,
)

from aliyun_configure.core.constants import (
    BANNER_WIDTH,
    CONFIG_FILE_NAME,
    DEFAULT_EXPIRED_SECONDS,
    DEFAULT_LANGUAGE,
    DEFAULT_PROFILE_NAME,
    OUTPUT_FORMAT_JSON,
    SECRET_VISIBLE_CHARS,
    SUPPORTED_LANGUAGES,
)

from aliyun_configure.core.masking import (
    get_last_chars,
    mosaic_string,
)

from aliyun_configure.core.colors import ConsoleColors

__all__ = [
    # Version
    '__version__',
    # Exceptions
    'ConfigureError',
    'InvalidModeError',
    'FileReadError',
    'ConfigLoadError',
    'ConfigSaveError',
    'InputClosedError',
    'ProfileError',
    'ProfileNotFoundError',
    'ProfileConfigError',
    # Config dataclasses
    'LogConfig',
    'RunConfig',
    # Constants
    'BANNER_WIDTH',
    'CONFIG_FILE_NAME',
    'DEFAULT_EXPIRED_SECONDS',
    'DEFAULT_LANGUAGE',
    'DEFAULT_PROFILE_NAME',
    'OUTPUT_FORMAT_JSON',
    'SECRET_VISIBLE_CHARS',
    'SUPPORTED_LANGUAGES',
    # Masking
    'get_last_chars',
    'mosaic_string',
    # Colors
    'ConsoleColors',
]
