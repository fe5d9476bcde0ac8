from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from src.cordova_common.config_parser import ConfigParser

_log = logging.getLogger(__name__)

ORIENTATION_DEFAULT = "default"
ORIENTATION_PORTRAIT = "portrait"
ORIENTATION_LANDSCAPE = "landscape"
ORIENTATION_ALL = "all"

GLOBAL_ORIENTATIONS = (ORIENTATION_DEFAULT, ORIENTATION_PORTRAIT, ORIENTATION_LANDSCAPE)
PLATFORM_ORIENTATIONS: dict[str, tuple[str, ...]] = {
    "ios": (ORIENTATION_ALL,),
}


class ParserHelper:
    def __init__(self, platform: str, *, logger: logging.Logger | None = None) -> None:
        self.platform = platform
        self._log = logger or _log

    def is_default_orientation(self, orientation: str) -> bool:
        return (orientation or "").lower() == ORIENTATION_DEFAULT

    def is_global_orientation(self, orientation: str) -> bool:
        return (orientation or "").lower() in GLOBAL_ORIENTATIONS

    def is_supported_platform_orientation(self, orientation: str) -> bool:
        supported = PLATFORM_ORIENTATIONS.get(self.platform, ())
        return (orientation or "").lower() in supported

    def get_orientation(self, config: ConfigParser) -> str:
        """Return the configured orientation, '' when unset.

        Unsupported values fall back to 'default' with a warning.
        """
        orientation = config.get_preference("Orientation", self.platform)
        if not orientation:
            return ""
        orientation = orientation.lower()
        if self.is_global_orientation(orientation):
            return orientation
        if self.is_supported_platform_orientation(orientation):
            return orientation
        self._log.warning("Unsupported global orientation: %s", orientation)
        self._log.warning("Defaulting to value: %s", ORIENTATION_DEFAULT)
        return ORIENTATION_DEFAULT
