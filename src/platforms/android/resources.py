"""Launcher icon and splash screen handling for Android projects.

Images land in density-qualified drawable folders under ``res/``. Icons may be
declared by density or by pixel size; splash screens only by density.
"""

from __future__ import annotations

import json
import logging
import os
import re
import shutil
import stat
from dataclasses import asdict
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from src.cordova_common.config_parser import StaticResource, StaticResources

_log = logging.getLogger(__name__)

ICON_NAME = "icon.png"
SPLASH_NAME = "screen.png"

# http://developer.android.com/design/style/iconography.html
SIZE_TO_DENSITY: dict[int, str] = {
    36: "ldpi",
    48: "mdpi",
    72: "hdpi",
    96: "xhdpi",
    144: "xxhdpi",
    192: "xxxhdpi",
}

_PNG_RE = re.compile(r"\.png$")
_NINE_PATCH_RE = re.compile(r"\.9\.png$")


def _nine_patch_name(name: str) -> str:
    return _PNG_RE.sub(".9.png", name)


def _make_user_writable(path: str) -> None:
    mode = os.stat(path).st_mode
    os.chmod(path, mode | stat.S_IWUSR)


def delete_default_resource(
    res_dir: str, name: str, *, logger: logging.Logger | None = None
) -> None:
    """Remove `name` (and its nine-patch variant) from every drawable-* folder."""
    log = logger or _log
    for dirname in sorted(os.listdir(res_dir)):
        if not dirname.startswith("drawable-"):
            continue
        img_path = os.path.join(res_dir, dirname, name)
        for candidate in (img_path, _nine_patch_name(img_path)):
            if os.path.isfile(candidate):
                _make_user_writable(candidate)
                os.unlink(candidate)
                log.debug("deleted: %s", candidate)


def copy_image(
    res_dir: str,
    src: str,
    density: str | None,
    name: str,
    *,
    logger: logging.Logger | None = None,
) -> str:
    log = logger or _log
    dest_folder = os.path.join(res_dir, f"drawable-{density}" if density else "drawable")
    is_nine_patch = bool(_NINE_PATCH_RE.search(src))

    # The template may not ship a folder for this density.
    os.makedirs(dest_folder, exist_ok=True)

    dest = os.path.join(dest_folder, _nine_patch_name(name) if is_nine_patch else name)
    log.debug("copying image from %s to %s", src, dest)
    if os.path.lexists(dest):
        os.unlink(dest)
    shutil.copyfile(src, dest)
    return dest


def _icon_size(icon: StaticResource) -> int | None:
    return icon.width or icon.height or None


def resolve_icon_densities(
    icons: list[StaticResource], *, logger: logging.Logger | None = None
) -> tuple[dict[str, StaticResource], StaticResource | None]:
    """Pick the icon to use for each density.

    Returns the density map and the default icon (the first one declared with
    neither size nor density). A density keeps its first icon; only a
    platform-scoped icon may replace an unscoped one.
    """
    log = logger or _log
    by_density: dict[str, StaticResource] = {}
    default_icon: StaticResource | None = None

    for icon in icons:
        size = _icon_size(icon)
        if not size and not icon.density:
            if default_icon is not None:
                log.debug("more than one default icon: %s", json.dumps(asdict(icon)))
            else:
                default_icon = icon
            continue

        density = icon.density or SIZE_TO_DENSITY.get(size or 0)
        if not density:
            # Unsupported size.
            continue
        previous = by_density.get(density)
        if previous is None or (previous.platform is None and icon.platform is not None):
            by_density[density] = icon

    return by_density, default_icon


def handle_icons(
    res_dir: str,
    project_root: str,
    icons: StaticResources,
    *,
    logger: logging.Logger | None = None,
) -> dict[str, StaticResource]:
    log = logger or _log
    if len(icons) == 0:
        log.debug("This app does not have launcher icons defined")
        return {}

    delete_default_resource(res_dir, ICON_NAME, logger=log)

    by_density, default_icon = resolve_icon_densities(icons, logger=log)
    for density, icon in by_density.items():
        copy_image(res_dir, os.path.join(project_root, icon.src), density, ICON_NAME, logger=log)

    # There is no "default" drawable, so treat the default icon as mdpi.
    if default_icon is not None and "mdpi" not in by_density:
        copy_image(
            res_dir, os.path.join(project_root, default_icon.src), "mdpi", ICON_NAME, logger=log
        )
    return by_density


def handle_splashes(
    res_dir: str,
    project_root: str,
    splashes: StaticResources,
    *,
    logger: logging.Logger | None = None,
) -> None:
    log = logger or _log
    if len(splashes) == 0:
        return

    delete_default_resource(res_dir, SPLASH_NAME, logger=log)
    log.debug("splash screens: %s", json.dumps([asdict(s) for s in splashes]))

    had_mdpi = False
    for splash in splashes:
        if not splash.density:
            continue
        if splash.density == "mdpi":
            had_mdpi = True
        copy_image(
            res_dir, os.path.join(project_root, splash.src), splash.density, SPLASH_NAME, logger=log
        )

    default = splashes.default_resource
    if not had_mdpi and default is not None:
        copy_image(res_dir, os.path.join(project_root, default.src), "mdpi", SPLASH_NAME, logger=log)
