"""Read-only view over an app's config.xml.

Only the accessors the platform parsers consume are provided. Element lookups
ignore namespaces so documents with or without the W3C widget namespace read
the same way.
"""

from __future__ import annotations

from dataclasses import dataclass

from lxml import etree

from src.cordova_common.xml_helpers import children_named, parse_elementtree_sync

_DENSITY_ATTRS = (
    "density",
    "{http://cordova.apache.org/ns/1.0}density",
    "{http://phonegap.com/ns/1.0}density",
)


@dataclass(frozen=True)
class StaticResource:
    src: str
    density: str | None = None
    width: int | None = None
    height: int | None = None
    # None for resources shared between platforms.
    platform: str | None = None
    target: str | None = None


class StaticResources(list):
    """Ordered icon/splash descriptors plus the default (sizeless) one."""

    def __init__(self, resources: list[StaticResource] | None = None) -> None:
        super().__init__(resources or [])
        self.default_resource: StaticResource | None = None
        for res in self:
            if res.platform is None and not (res.width or res.height or res.density):
                self.default_resource = res
                break


def _int_attr(el: etree._Element, name: str) -> int | None:
    raw = (el.get(name) or "").strip()
    if not raw:
        return None
    try:
        v = int(float(raw))
    except (ValueError, OverflowError):
        return None
    return v or None


def _density_of(el: etree._Element) -> str | None:
    for attr in _DENSITY_ATTRS:
        v = el.get(attr)
        if v:
            return v
    return None


def _preference_value(elems: list[etree._Element], name: str) -> str:
    wanted = name.lower()
    for el in elems:
        if (el.get("name") or "").lower() == wanted:
            return el.get("value") or ""
    return ""


class ConfigParser:
    def __init__(self, path: str) -> None:
        self.path = path
        self.doc = parse_elementtree_sync(path)
        self.root = self.doc.getroot()

    def _platform_elements(self, platform: str) -> list[etree._Element]:
        return [p for p in children_named(self.root, "platform") if p.get("name") == platform]

    def name(self) -> str:
        el = children_named(self.root, "name")
        if not el:
            return ""
        return (el[0].text or "").strip()

    def package_name(self) -> str | None:
        return self.root.get("id")

    def android_package_name(self) -> str | None:
        return self.root.get("android-packageName")

    def version(self) -> str | None:
        return self.root.get("version")

    def android_version_code(self) -> str | None:
        return self.root.get("android-versionCode")

    def get_global_preference(self, name: str) -> str:
        return _preference_value(children_named(self.root, "preference"), name)

    def get_platform_preference(self, name: str, platform: str) -> str:
        elems: list[etree._Element] = []
        for p in self._platform_elements(platform):
            elems.extend(children_named(p, "preference"))
        return _preference_value(elems, name)

    def get_preference(self, name: str, platform: str | None = None) -> str:
        value = ""
        if platform:
            value = self.get_platform_preference(name, platform)
        return value or self.get_global_preference(name)

    def get_static_resources(
        self, platform: str | None, resource_name: str
    ) -> StaticResources:
        found: list[tuple[etree._Element, str | None]] = []
        if platform:
            for p in self._platform_elements(platform):
                found.extend((el, platform) for el in children_named(p, resource_name))
        found.extend((el, None) for el in children_named(self.root, resource_name))

        out: list[StaticResource] = []
        for el, scope in found:
            out.append(
                StaticResource(
                    src=el.get("src") or "",
                    density=_density_of(el),
                    width=_int_attr(el, "width"),
                    height=_int_attr(el, "height"),
                    platform=scope,
                    target=el.get("target") or None,
                )
            )
        return StaticResources(out)

    def get_icons(self, platform: str | None = None) -> StaticResources:
        return self.get_static_resources(platform, "icon")

    def get_splash_screens(self, platform: str | None = None) -> StaticResources:
        return self.get_static_resources(platform, "splash")
