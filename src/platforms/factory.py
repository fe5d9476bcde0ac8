from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Literal

from src.cordova_common.errors import CordovaError

if TYPE_CHECKING:  # pragma: no cover
    from .base import PlatformParser

PlatformId = Literal["android"]

_KNOWN_PLATFORMS: tuple[PlatformId, ...] = ("android",)


def known_platforms() -> list[str]:
    return list(_KNOWN_PLATFORMS)


def parse_platform_id(raw: object) -> PlatformId | None:
    v = str(raw or "").strip().lower()
    if v in _KNOWN_PLATFORMS:
        return v  # type: ignore[return-value]
    return None


def get_parser(
    platform: str, project_path: str, *, logger: logging.Logger | None = None
) -> PlatformParser:
    pid = parse_platform_id(platform)
    if pid is None:
        raise CordovaError(f"Unknown platform: {platform!r}")

    from .android.parser import AndroidParser

    return AndroidParser(project_path, logger=logger)
