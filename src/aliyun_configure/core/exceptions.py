"""Custom exceptions for aliyun-configure.

All exception classes are designed to provide clear, actionable error messages
with context about what went wrong and how to fix it.
"""


class ConfigureError(Exception):
    """Base exception for all aliyun-configure errors."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class InvalidModeError(ConfigureError):
    """Raised when an authenticate mode string is not one of the supported modes."""

    def __init__(self, mode: str, details: str | None = None):
        self.mode = mode
        super().__init__(f"unexpected authenticate mode: {mode}", details)


class FileReadError(ConfigureError):
    """Raised when the RSA private key file cannot be read.

    Attributes:
        path: The path the operator entered
        original_error: The underlying OSError, if any
    """

    def __init__(self, path: str, original_error: Exception | None = None):
        self.path = path
        self.original_error = original_error
        details = str(original_error) if original_error else None
        super().__init__(f"read key file {path!r} failed", details)


class ConfigLoadError(ConfigureError):
    """Raised when the profile store cannot be read or is malformed.

    Examples:
        - Permission denied on config.json
        - Invalid JSON
        - A stored profile with an unknown mode
    """

    def __init__(self, message: str, config_path: str | None = None, details: str | None = None):
        self.config_path = config_path
        super().__init__(message, details)


class ConfigSaveError(ConfigureError):
    """Raised when the profile store cannot be written."""

    def __init__(self, message: str, config_path: str | None = None, details: str | None = None):
        self.config_path = config_path
        super().__init__(message, details)


class InputClosedError(ConfigureError):
    """Raised when the interactive input stream ends while a value is expected."""

    pass


class ProfileError(ConfigureError):
    """Base exception for profile-related errors.

    Used when operations involving credential profiles fail.
    """

    def __init__(self, message: str, profile_name: str | None = None, details: str | None = None):
        self.profile_name = profile_name
        super().__init__(message, details)


class ProfileNotFoundError(ProfileError):
    """Raised when a named profile is not present in the store."""

    pass


class ProfileConfigError(ProfileError):
    """Raised when a profile has invalid configuration.

    Examples:
        - Invalid profile name format
        - Unreadable private key file given to ``set``
    """

    pass
