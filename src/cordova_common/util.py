from __future__ import annotations

import logging
import os
import shutil

from src.cordova_common.config import vcs_dir_names
from src.cordova_common.errors import CordovaError

logger = logging.getLogger(__name__)


def _root_dir_score(directory: str) -> int:
    # 2: certainly an app root, 1: might be one, 0: not one.
    if not os.path.isdir(os.path.join(directory, "www")):
        return 0
    if os.path.exists(os.path.join(directory, "config.xml")):
        if os.path.isdir(os.path.join(directory, "platforms")):
            return 2
        return 1
    if os.path.exists(os.path.join(directory, "www", "config.xml")):
        return 1
    return 0


def is_cordova(directory: str) -> str | None:
    """Return the app project root containing `directory`, or None."""
    current = os.path.abspath(directory)
    best: str | None = None
    while True:
        score = _root_dir_score(current)
        if score == 2:
            return current
        if score == 1:
            best = current
        parent = os.path.dirname(current)
        if parent == current:
            return best
        current = parent


def require_project_root(directory: str) -> str:
    root = is_cordova(directory)
    if not root:
        raise CordovaError("Current working directory is not a Cordova-based project.")
    return root


def app_dir(project_root: str) -> str:
    return project_root


def project_www(project_root: str) -> str:
    return os.path.join(project_root, "www")


def project_config(project_root: str) -> str | None:
    root_path = os.path.join(project_root, "config.xml")
    if os.path.exists(root_path):
        return root_path
    www_path = os.path.join(project_root, "www", "config.xml")
    if os.path.exists(www_path):
        return www_path
    return None


def copy_dir_contents(src: str, dest: str) -> None:
    """Copy everything inside `src` into `dest`, overwriting existing files."""
    if not os.path.isdir(src):
        return
    os.makedirs(dest, exist_ok=True)
    shutil.copytree(src, dest, dirs_exist_ok=True)
    logger.debug("copied %s/* to %s", src, dest)


def delete_svn_folders(directory: str, names: list[str] | None = None) -> None:
    targets = set(names if names is not None else vcs_dir_names())
    if not os.path.isdir(directory):
        return
    for entry in sorted(os.listdir(directory)):
        full = os.path.join(directory, entry)
        if not os.path.isdir(full) or os.path.islink(full):
            continue
        if entry in targets:
            shutil.rmtree(full)
            logger.debug("deleted: %s", full)
        else:
            delete_svn_folders(full, list(targets))
