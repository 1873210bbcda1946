"""Constants and default values for aliyun-configure.

This module centralizes magic numbers, default locations and the
environment variable names used throughout the application.
"""

# ==================== STORE LOCATION ====================

# Directory holding the profile store (overridable via ALIYUN_CONFIG_DIR)
DEFAULT_CONFIG_DIR_NAME: str = ".aliyun"
CONFIG_FILE_NAME: str = "config.json"

# Permissions applied to the store file since it contains secrets
CONFIG_FILE_MODE: int = 0o600

DEFAULT_PROFILE_NAME: str = "default"

# ==================== PROFILE DEFAULTS ====================

# Session lifetime applied to role-based and key-pair modes
DEFAULT_EXPIRED_SECONDS: int = 900

# The only output format the CLI supports
OUTPUT_FORMAT_JSON: str = "json"

SUPPORTED_LANGUAGES: tuple[str, ...] = ("zh", "en")
DEFAULT_LANGUAGE: str = "en"

# Characters left visible when masking secrets in prompts and listings
SECRET_VISIBLE_CHARS: int = 3
MASK_CHAR: str = "*"

PROFILE_NAME_MAX_LENGTH: int = 64

# ==================== DISPLAY CONSTANTS ====================

# Width of banner separator lines (used across CLI output)
BANNER_WIDTH: int = 60

# ==================== LOGGING DEFAULTS ====================

DEFAULT_LOG_LEVEL: str = "WARNING"
VALID_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# ==================== ENVIRONMENT VARIABLES ====================

ENV_CONFIG_DIR: str = "ALIYUN_CONFIG_DIR"
ENV_PROFILE: str = "ALIYUN_PROFILE"
ENV_LOG_LEVEL: str = "LOG_LEVEL"

# ==================== EXIT CODES ====================

EXIT_SUCCESS: int = 0
EXIT_ERROR: int = 1
EXIT_INTERRUPTED: int = 130
