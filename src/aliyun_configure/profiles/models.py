"""Profile entity and the closed set of authenticate modes."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any

from aliyun_configure.core.exceptions import InvalidModeError


class AuthenticateMode(str, Enum):
    """Supported credential mechanisms."""

    AK = "AK"
    STS_TOKEN = "StsToken"
    RAM_ROLE_ARN = "RamRoleArn"
    ECS_RAM_ROLE = "EcsRamRole"
    RSA_KEY_PAIR = "RsaKeyPair"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str | None) -> AuthenticateMode | None:
        """Parse a case-sensitive mode string.

        Args:
            value: Mode name as typed by the operator

        Returns:
            The matching mode, or None when ``value`` is empty/None

        Raises:
            InvalidModeError: If ``value`` is not a supported mode
        """
        if not value:
            return None
        try:
            return cls(value)
        except ValueError as e:
            supported = ", ".join(m.value for m in cls)
            raise InvalidModeError(value, details=f"supported modes: {supported}") from e


@dataclass
class Profile:
    """One named credential configuration.

    Which credential fields are meaningful depends on ``mode``; the rest keep
    whatever value they had before.
    """

    name: str
    mode: AuthenticateMode | None = None
    access_key_id: str = ""
    access_key_secret: str = ""
    sts_token: str = ""
    ram_role_arn: str = ""
    role_session_name: str = ""
    expired_seconds: int = 0
    ram_role_name: str = ""
    private_key: str = ""
    key_pair_name: str = ""
    region_id: str = ""
    output_format: str = ""
    language: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the JSON store (mode as its string value, "" when unset)."""
        data = asdict(self)
        data["mode"] = self.mode.value if self.mode else ""
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Profile:
        """Build a profile from a stored mapping, ignoring unknown keys.

        Raises:
            InvalidModeError: If the stored mode is not supported
            ValueError: If ``expired_seconds`` is not an integer
        """
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        values["mode"] = AuthenticateMode.parse(values.get("mode") or "")
        values["expired_seconds"] = int(values.get("expired_seconds") or 0)
        for key in known - {"mode", "expired_seconds"}:
            if key in values and values[key] is not None:
                values[key] = str(values[key])
            elif key in values:
                values[key] = ""
        return cls(**values)
