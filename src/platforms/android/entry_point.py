from __future__ import annotations

import logging
import os
import re

from src.cordova_common.errors import EntryPointNotFoundError

_log = logging.getLogger(__name__)

_EXTENDS_ACTIVITY_RE = re.compile(r"extends\s+CordovaActivity")
_PACKAGE_DECL_RE = re.compile(r"package [\w.]*;")


def package_dir(java_root: str, package: str) -> str:
    return os.path.join(java_root, *package.split("."))


def _read_text(path: str) -> str:
    with open(path, encoding="utf-8") as f:
        return f.read()


def _write_text(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def find_entry_point_sources(pkg_dir: str) -> list[str]:
    """Java files in `pkg_dir` whose class extends CordovaActivity, in listing order."""
    out: list[str] = []
    for name in sorted(os.listdir(pkg_dir)):
        if ".svn" in name or ".java" not in name:
            continue
        full = os.path.join(pkg_dir, name)
        if not os.path.isfile(full):
            continue
        if _EXTENDS_ACTIVITY_RE.search(_read_text(full)):
            out.append(name)
    return out


def _prune_empty_dirs(start: str, stop: str) -> None:
    stop = os.path.abspath(stop)
    current = os.path.abspath(start)
    while current != stop and current.startswith(stop + os.sep):
        if os.path.isdir(current) and not os.listdir(current):
            os.rmdir(current)
            current = os.path.dirname(current)
        else:
            break


def migrate_entry_point(
    java_root: str,
    orig_pkg: str,
    new_pkg: str,
    *,
    logger: logging.Logger | None = None,
) -> str:
    """Move the entry-point activity from `orig_pkg` into `new_pkg`.

    The package statement is rewritten, the file is written under the new
    package directory and, when the directory changed, the original file and
    any directories left empty below `java_root` are removed. Returns the path
    of the written file.
    """
    log = logger or _log
    orig_dir = package_dir(java_root, orig_pkg)
    candidates = find_entry_point_sources(orig_dir)
    if not candidates:
        raise EntryPointNotFoundError("No Java files found which extend CordovaActivity.")
    if len(candidates) > 1:
        log.info(
            "Multiple candidate Java files (.java files which extend CordovaActivity) found. "
            "Guessing at the first one, %s",
            candidates[0],
        )

    java_class = candidates[0]
    new_dir = package_dir(java_root, new_pkg)
    os.makedirs(new_dir, exist_ok=True)

    orig_file = os.path.join(orig_dir, java_class)
    new_file = os.path.join(new_dir, java_class)
    contents = _PACKAGE_DECL_RE.sub(
        lambda _m: f"package {new_pkg};", _read_text(orig_file), count=1
    )
    _write_text(new_file, contents)
    log.debug('Wrote out Android package name to "%s"', new_pkg)

    if os.path.abspath(orig_dir) != os.path.abspath(new_dir):
        os.remove(orig_file)
        _prune_empty_dirs(orig_dir, java_root)
    return new_file
