from __future__ import annotations

import re

_WEIGHTS = (10000, 100, 1)
_DIGITS_RE = re.compile(r"[0-9]+")


def _component(raw: str) -> int:
    raw = raw.strip()
    if not _DIGITS_RE.fullmatch(raw):
        return 0
    return int(raw)


def default_version_code(version: str | None) -> int:
    """Build the default versionCode as MAJOR * 10000 + MINOR * 100 + PATCH.

    A pre-release suffix ("1.0.0-rc1") is ignored; missing or non-numeric
    components count as 0.
    """
    nums = (version or "").split("-", 1)[0].split(".")
    code = 0
    for weight, raw in zip(_WEIGHTS, nums):
        code += weight * _component(raw)
    return code
