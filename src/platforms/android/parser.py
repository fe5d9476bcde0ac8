from __future__ import annotations

import asyncio
import logging
import os
import shutil

from lxml import etree

from src.cordova_common import util
from src.cordova_common.config_parser import ConfigParser
from src.cordova_common.errors import CordovaError, NotAndroidProjectError
from src.cordova_common.xml_helpers import parse_elementtree_sync, write_elementtree_sync
from src.platforms.android.entry_point import migrate_entry_point
from src.platforms.android.resources import handle_icons, handle_splashes
from src.platforms.android.versioning import default_version_code
from src.platforms.helper import ParserHelper

_log = logging.getLogger(__name__)

PLATFORM = "android"
ANDROID_NS = "http://schemas.android.com/apk/res/android"

LAUNCH_MODES = ("standard", "singleTop", "singleTask", "singleInstance")
DEFAULT_LAUNCH_MODE = "singleTop"
SDK_PREFERENCES = ("minSdkVersion", "maxSdkVersion", "targetSdkVersion")


def android_attr(name: str) -> str:
    return f"{{{ANDROID_NS}}}{name}"


class AndroidParser:
    """Keeps a scaffolded Android project in sync with the app's config.xml."""

    platform = PLATFORM

    def __init__(self, project: str, *, logger: logging.Logger | None = None) -> None:
        if not os.path.exists(os.path.join(project, "build.gradle")):
            raise NotAndroidProjectError(project)

        self.project = project
        self.log = logger or _log
        self.helper = ParserHelper(PLATFORM, logger=self.log)

        # A gradle file without a root manifest means the module layout. Its Java
        # sources follow the Gradle convention (java/) rather than src/.
        if os.path.exists(os.path.join(project, "AndroidManifest.xml")):
            self.path = project
            self.java_root = os.path.join(self.path, "src")
        else:
            self.path = os.path.join(project, "app", "src", "main")
            self.java_root = os.path.join(self.path, "java")

        self.res_dir = os.path.join(self.path, "res")
        self.strings = os.path.join(self.res_dir, "values", "strings.xml")
        self.manifest = os.path.join(self.path, "AndroidManifest.xml")
        self.android_config = os.path.join(self.res_dir, "xml", "config.xml")

    def _project_root(self) -> str:
        return util.require_project_root(self.path)

    def find_android_launch_mode_preference(self, config: ConfigParser) -> str:
        launch_mode = config.get_preference("AndroidLaunchMode")
        if not launch_mode:
            return DEFAULT_LAUNCH_MODE

        if launch_mode not in LAUNCH_MODES:
            self.log.warning("Unrecognized value for AndroidLaunchMode preference: %s", launch_mode)
            self.log.warning("  Expected values are: %s", ", ".join(LAUNCH_MODES))
            # Keep the developer's value in case Android adds new modes.
        return launch_mode

    def handle_splashes(self, config: ConfigParser) -> None:
        splashes = config.get_splash_screens(PLATFORM)
        project_root = self._project_root() if len(splashes) else ""
        handle_splashes(self.res_dir, project_root, splashes, logger=self.log)

    def handle_icons(self, config: ConfigParser) -> None:
        icons = config.get_icons(PLATFORM)
        project_root = self._project_root() if len(icons) else ""
        handle_icons(self.res_dir, project_root, icons, logger=self.log)

    def _update_app_name(self, name: str) -> None:
        strings = parse_elementtree_sync(self.strings)
        root = strings.getroot()
        el = root.find("string[@name='app_name']")
        if el is None:
            el = etree.SubElement(root, "string", name="app_name")
        el.text = name
        write_elementtree_sync(strings, self.strings)
        self.log.debug('Wrote out Android application name to "%s"', name)

    def _update_manifest(self, config: ConfigParser) -> tuple[str, str]:
        """Patch AndroidManifest.xml; returns (original package, new package)."""
        manifest = parse_elementtree_sync(self.manifest)
        root = manifest.getroot()

        version = config.version() or ""
        version_code = config.android_version_code() or str(default_version_code(version))
        root.set(android_attr("versionName"), version)
        root.set(android_attr("versionCode"), version_code)

        pkg = config.android_package_name() or config.package_name()
        if not pkg:
            raise CordovaError("config.xml does not declare a package name")
        # Java packages cannot contain dashes.
        pkg = pkg.replace("-", "_")
        orig_pkg = root.get("package")
        if not orig_pkg:
            raise CordovaError(f"{self.manifest} does not declare a package")
        root.set("package", pkg)

        act = root.find("./application/activity")
        if act is None:
            raise CordovaError(f"{self.manifest} has no <application>/<activity> element")

        orientation = self.helper.get_orientation(config)
        if orientation and not self.helper.is_default_orientation(orientation):
            act.set(android_attr("screenOrientation"), orientation)
        else:
            act.attrib.pop(android_attr("screenOrientation"), None)

        launch_mode = self.find_android_launch_mode_preference(config)
        if launch_mode:
            act.set(android_attr("launchMode"), launch_mode)
        else:
            act.attrib.pop(android_attr("launchMode"), None)

        # <uses-sdk android:minSdkVersion="10" android:targetSdkVersion="19" ... />
        uses_sdk = root.find("./uses-sdk")
        for pref_name in SDK_PREFERENCES:
            value = config.get_preference(f"android-{pref_name}", PLATFORM)
            if not value:
                continue
            if uses_sdk is None:
                uses_sdk = etree.SubElement(root, "uses-sdk")
            uses_sdk.set(android_attr(pref_name), value)

        write_elementtree_sync(manifest, self.manifest)
        return orig_pkg, pkg

    def update_from_config(self, config: ConfigParser) -> None:
        if not isinstance(config, ConfigParser):
            raise TypeError("update_from_config requires a ConfigParser object")

        self._update_app_name(config.name())

        self.handle_splashes(config)
        self.handle_icons(config)

        orig_pkg, pkg = self._update_manifest(config)

        migrate_entry_point(self.java_root, orig_pkg, pkg, logger=self.log)

    def www_dir(self) -> str:
        return os.path.join(self.path, "assets", "www")

    def config_xml(self) -> str:
        return self.android_config

    # Used for creating platform_www in projects created by older versions.
    def cordovajs_path(self, lib_dir: str) -> str:
        return os.path.abspath(os.path.join(lib_dir, "framework", "assets", "www", "cordova.js"))

    def cordovajs_src_path(self, lib_dir: str) -> str:
        return os.path.abspath(os.path.join(lib_dir, "cordova-js-src"))

    def update_www(self) -> None:
        """Replace the www dir with the app's www followed by platform_www."""
        project_root = self._project_root()
        app_www = util.project_www(project_root)
        platform_www = os.path.join(self.path, "platform_www")
        www = self.www_dir()

        if os.path.isdir(www):
            shutil.rmtree(www)
        os.makedirs(www)
        util.copy_dir_contents(app_www, www)
        # Stock platform assets (cordova.js) win over app assets.
        util.copy_dir_contents(platform_www, www)

    def update_overrides(self) -> None:
        project_root = self._project_root()
        merges_path = os.path.join(util.app_dir(project_root), "merges", PLATFORM)
        if os.path.isdir(merges_path):
            util.copy_dir_contents(merges_path, self.www_dir())

    def _update_project_sync(self, config: ConfigParser) -> None:
        self.update_from_config(config)
        self.update_overrides()
        util.delete_svn_folders(os.path.join(self.path, "assets"))

    async def update_project(self, config: ConfigParser) -> None:
        await asyncio.to_thread(self._update_project_sync, config)
