"""Platform parsers.

Each supported platform provides a parser that rewrites its scaffolded native
project from the app's config.xml. `get_parser` picks one by platform name.
"""

from src.platforms.base import PlatformParser
from src.platforms.factory import get_parser, known_platforms
from src.platforms.helper import ParserHelper

__all__ = [
    "ParserHelper",
    "PlatformParser",
    "get_parser",
    "known_platforms",
]
