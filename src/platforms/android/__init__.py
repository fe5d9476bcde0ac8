"""Android platform parser.

This package contains:
- AndroidParser, which syncs a scaffolded Android project with config.xml
- Icon/splash density resolution
- Entry-point activity package migration
"""

from src.platforms.android.parser import AndroidParser
from src.platforms.android.versioning import default_version_code

__all__ = ["AndroidParser", "default_version_code"]
