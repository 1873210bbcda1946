"""Interactive, mode-driven collection of profile fields."""

from __future__ import annotations

import dataclasses
import logging
import sys
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import TextIO

from aliyun_configure.core.constants import (
    DEFAULT_EXPIRED_SECONDS,
    DEFAULT_LANGUAGE,
    OUTPUT_FORMAT_JSON,
    SECRET_VISIBLE_CHARS,
    SUPPORTED_LANGUAGES,
)
from aliyun_configure.core.exceptions import FileReadError, InputClosedError
from aliyun_configure.core.masking import mosaic_string
from aliyun_configure.profiles.models import AuthenticateMode, Profile

logger = logging.getLogger(__name__)


class InputReader:
    """Reads whitespace-delimited tokens from an interactive stream."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdin

    def read_token(self, default: str) -> str:
        """Read one line and return its first token, or ``default`` if it has none.

        Raises:
            InputClosedError: If the stream is exhausted
        """
        line = self.stream.readline()
        if not line:
            raise InputClosedError("Input closed while waiting for a value")
        tokens = line.split()
        if not tokens:
            return default
        return tokens[0]


class CollectorState(Enum):
    """Linear states of one collection pass."""

    SELECT_MODE = "select_mode"
    COLLECT_MODE_FIELDS = "collect_mode_fields"
    COLLECT_COMMON_FIELDS = "collect_common_fields"
    DONE = "done"


def normalize_language(language: str) -> str:
    """Anything but exactly "zh" or "en" becomes "en"."""
    if language in SUPPORTED_LANGUAGES:
        return language
    return DEFAULT_LANGUAGE


def read_key_file(path: str) -> str:
    """Return the contents of an RSA private key file.

    Raises:
        FileReadError: If the file cannot be read
    """
    if not path:
        raise FileReadError(path, FileNotFoundError("no key file given"))
    try:
        return Path(path).expanduser().read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(path, e) from e


class ModeCollector:
    """Gathers mode-specific and common fields for one profile.

    Works on a draft copy: :meth:`collect` returns the completed draft and
    leaves the profile it was given untouched, so an aborted pass never
    leaves a half-updated profile behind.

    Attributes:
        state: Current CollectorState
        mode_explicit: Whether the last pass was given a mode (False means the
            AK fields were collected by default and ``mode`` was not changed)
    """

    def __init__(self, reader: InputReader, writer: TextIO | None = None):
        self.reader = reader
        self.writer = writer if writer is not None else sys.stdout
        self.state = CollectorState.SELECT_MODE
        self.mode_explicit = False
        self._handlers: dict[AuthenticateMode, Callable[[Profile], None]] = {
            AuthenticateMode.AK: self._collect_ak,
            AuthenticateMode.STS_TOKEN: self._collect_sts_token,
            AuthenticateMode.RAM_ROLE_ARN: self._collect_ram_role_arn,
            AuthenticateMode.ECS_RAM_ROLE: self._collect_ecs_ram_role,
            AuthenticateMode.RSA_KEY_PAIR: self._collect_rsa_key_pair,
        }

    def collect(self, profile: Profile, mode: AuthenticateMode | None = None) -> Profile:
        """Run a full pass and return the updated copy of ``profile``.

        Args:
            profile: Profile whose current values serve as defaults
            mode: Mode to configure; None collects AK fields without
                touching ``profile.mode``

        Raises:
            FileReadError: If the RSA private key file cannot be read
            InputClosedError: If input ends mid-pass
        """
        draft = dataclasses.replace(profile)
        self.state = CollectorState.SELECT_MODE
        self.mode_explicit = mode is not None

        self.state = CollectorState.COLLECT_MODE_FIELDS
        if mode is None:
            logger.debug("No mode given for '%s'; collecting AK fields, mode stays %s", draft.name, draft.mode)
            self._collect_ak(draft)
        else:
            draft.mode = mode
            self._handlers[mode](draft)

        self.state = CollectorState.COLLECT_COMMON_FIELDS
        self._collect_common(draft)

        self.state = CollectorState.DONE
        return draft

    def _prompt(self, label: str, current: str) -> None:
        self.writer.write(f"{label} [{current}]: ")
        self.writer.flush()

    def _ask(self, label: str, current: str, *, secret: bool = False) -> str:
        shown = mosaic_string(current, SECRET_VISIBLE_CHARS) if secret else current
        self._prompt(label, shown)
        return self.reader.read_token(current)

    def _collect_ak(self, draft: Profile) -> None:
        draft.access_key_id = self._ask("Access Key Id", draft.access_key_id, secret=True)
        draft.access_key_secret = self._ask("Access Key Secret", draft.access_key_secret, secret=True)

    def _collect_sts_token(self, draft: Profile) -> None:
        self._collect_ak(draft)
        draft.sts_token = self._ask("Sts Token", draft.sts_token)

    def _collect_ram_role_arn(self, draft: Profile) -> None:
        self._collect_ak(draft)
        draft.ram_role_arn = self._ask("Ram Role Arn", draft.ram_role_arn)
        draft.role_session_name = self._ask("Role Session Name", draft.role_session_name)
        draft.expired_seconds = DEFAULT_EXPIRED_SECONDS

    def _collect_ecs_ram_role(self, draft: Profile) -> None:
        draft.ram_role_name = self._ask("Ecs Ram Role", draft.ram_role_name)

    def _collect_rsa_key_pair(self, draft: Profile) -> None:
        self.writer.write("Rsa Private Key File: ")
        self.writer.flush()
        key_file = self.reader.read_token("")
        draft.private_key = read_key_file(key_file)
        logger.debug("Loaded private key from %s", key_file)
        draft.key_pair_name = self._ask("Rsa Key Pair Name", draft.key_pair_name)
        draft.expired_seconds = DEFAULT_EXPIRED_SECONDS

    def _collect_common(self, draft: Profile) -> None:
        draft.region_id = self._ask("Default Region Id", draft.region_id)

        self.writer.write(f"Default Output Format [{draft.output_format}]: json (Only support json)\n")
        draft.output_format = OUTPUT_FORMAT_JSON

        language = self._ask("Default Language [zh|en]", draft.language)
        draft.language = normalize_language(language)
