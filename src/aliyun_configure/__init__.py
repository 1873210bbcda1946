"""
aliyun-configure - credential profile management for the Alibaba Cloud CLI

Interactively creates, inspects and persists named credential profiles
(AK, StsToken, RamRoleArn, EcsRamRole, RsaKeyPair) in ~/.aliyun/config.json.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from aliyun_configure.core.version import __version__

__all__ = ["__version__", "main"]

if TYPE_CHECKING:
    from aliyun_configure.cli.main import main


def __getattr__(name: str) -> Any:
    if name == "main":
        from aliyun_configure.cli.main import main

        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
