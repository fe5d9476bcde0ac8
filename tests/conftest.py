import sys
import textwrap
from pathlib import Path

import pytest

# Ensure the repo root is on sys.path so tests can import the local `src/` package.
ROOT = str(Path(__file__).resolve().parents[1])
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


MANIFEST = """\
<?xml version='1.0' encoding='utf-8'?>
<manifest android:hardwareAccelerated="true" android:versionCode="1" android:versionName="0.0.1" package="com.old.app" xmlns:android="http://schemas.android.com/apk/res/android">
    <supports-screens android:anyDensity="true" android:largeScreens="true" />
    <uses-permission android:name="android.permission.INTERNET" />
    <application android:icon="@drawable/icon" android:label="@string/app_name">
        <activity android:name="MainActivity" android:launchMode="singleTop" android:screenOrientation="portrait">
            <intent-filter>
                <action android:name="android.intent.action.MAIN" />
                <category android:name="android.intent.category.LAUNCHER" />
            </intent-filter>
        </activity>
    </application>
</manifest>
"""

STRINGS = """\
<?xml version='1.0' encoding='utf-8'?>
<resources>
    <string name="app_name">HelloCordova</string>
    <string name="launcher_name">@string/app_name</string>
</resources>
"""

MAIN_ACTIVITY = """\
package com.old.app;

import android.os.Bundle;
import org.apache.cordova.*;

public class MainActivity extends CordovaActivity
{
}
"""

DEFAULT_CONFIG_BODY = """\
<name>Hello App</name>
<preference name="Orientation" value="landscape" />
<icon src="res/icon.png" />
<icon src="res/icon-72.png" width="72" height="72" />
<icon src="res/icon-96.png" density="xhdpi" />
<splash src="res/screen-land-hdpi.png" density="hdpi" />
<splash src="res/screen-default.png" />
"""


def write_config(root: Path, body: str = DEFAULT_CONFIG_BODY, **attrs: str) -> Path:
    widget_attrs = {"id": "com.new.app", "version": "1.2.3"}
    widget_attrs.update(attrs)
    rendered = " ".join(f'{k}="{v}"' for k, v in widget_attrs.items())
    doc = (
        "<?xml version='1.0' encoding='utf-8'?>\n"
        f'<widget {rendered} xmlns="http://www.w3.org/ns/widgets" '
        'xmlns:cdv="http://cordova.apache.org/ns/1.0">\n'
        f"{textwrap.indent(body, '    ')}"
        "</widget>\n"
    )
    path = root / "config.xml"
    path.write_text(doc, encoding="utf-8")
    return path


def _write(path: Path, content: str | bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")


def build_android_project(platform_dir: Path, *, module_layout: bool = False) -> Path:
    """Lay out a scaffolded Android project; returns the sources directory."""
    _write(platform_dir / "build.gradle", "// gradle\n")
    src_dir = platform_dir / "app" / "src" / "main" if module_layout else platform_dir
    java_root = src_dir / ("java" if module_layout else "src")

    _write(src_dir / "AndroidManifest.xml", MANIFEST)
    _write(src_dir / "res" / "values" / "strings.xml", STRINGS)
    _write(src_dir / "res" / "xml" / "config.xml", "<widget />\n")
    _write(src_dir / "res" / "drawable-ldpi" / "icon.png", b"stale-ldpi")
    _write(src_dir / "res" / "drawable-hdpi" / "icon.png", b"stale-hdpi")
    _write(src_dir / "res" / "drawable-port-hdpi" / "screen.9.png", b"stale-screen")
    _write(java_root / "com" / "old" / "app" / "MainActivity.java", MAIN_ACTIVITY)
    _write(src_dir / "assets" / "www" / "stale.html", "stale")
    _write(src_dir / "platform_www" / "cordova.js", "// platform cordova.js")
    return src_dir


@pytest.fixture
def app_project(tmp_path: Path) -> Path:
    """An app project root with www/, res/ images and a legacy Android platform."""
    root = tmp_path / "app"
    _write(root / "www" / "index.html", "<html>app</html>")
    _write(root / "www" / "cordova.js", "// app cordova.js")
    _write(root / "www" / "js" / "index.js", "// app js")
    for name in (
        "icon.png",
        "icon-72.png",
        "icon-96.png",
        "screen-land-hdpi.png",
        "screen-default.png",
        "splash.9.png",
    ):
        _write(root / "res" / name, name.encode("utf-8"))
    write_config(root)
    build_android_project(root / "platforms" / "android")
    return root


@pytest.fixture(autouse=True)
def _default_cordova_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    # Tests assume the default XML/VCS settings; opt in per test.
    for name in ("CORDOVA_XML_INDENT", "CORDOVA_VCS_DIRS", "CORDOVA_WRITE_XML_DECLARATION"):
        monkeypatch.delenv(name, raising=False)
