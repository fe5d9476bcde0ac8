from __future__ import annotations

import os


def _env_bool(name: str, *, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    v = raw.strip().lower()
    if v in ("1", "true", "yes", "on"):
        return True
    if v in ("0", "false", "no", "off"):
        return False
    return default


def _env_int(name: str, default: int) -> int:
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return int(default)
    try:
        return int(raw)
    except ValueError:
        return int(default)


def xml_indent() -> int:
    return max(0, _env_int("CORDOVA_XML_INDENT", 4))


def write_xml_declaration() -> bool:
    return _env_bool("CORDOVA_WRITE_XML_DECLARATION", default=True)


_DEFAULT_VCS_DIRS = [".svn"]


def vcs_dir_names() -> list[str]:
    raw = (os.environ.get("CORDOVA_VCS_DIRS") or "").strip()
    if not raw:
        return list(_DEFAULT_VCS_DIRS)
    parts = [p.strip().strip("/") for p in raw.split(",") if p.strip().strip("/")]
    return parts or list(_DEFAULT_VCS_DIRS)
