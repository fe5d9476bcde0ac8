from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:  # pragma: no cover
    from src.cordova_common.config_parser import ConfigParser


class PlatformParser(Protocol):
    """Abstract platform parser.

    A parser owns one scaffolded native project. `path` is the directory the
    platform's sources live in; it may differ from the directory the parser was
    constructed with when the platform nests its sources.

    `update_project` performs a full read-mutate-write pass over the project
    and raises whatever error stopped it; nothing is rolled back.
    """

    platform: str
    path: str

    def www_dir(self) -> str: ...

    def config_xml(self) -> str: ...

    def cordovajs_path(self, lib_dir: str) -> str: ...

    def cordovajs_src_path(self, lib_dir: str) -> str: ...

    def update_www(self) -> None: ...

    def update_overrides(self) -> None: ...

    def update_from_config(self, config: ConfigParser) -> None: ...

    async def update_project(self, config: ConfigParser) -> None: ...
