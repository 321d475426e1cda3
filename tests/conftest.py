"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from apkctl.models.application import Application


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path_factory: pytest.TempPathFactory,
    monkeypatch: pytest.MonkeyPatch,
) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory for every test."""
    config_home = tmp_path_factory.mktemp("config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def app_a() -> Application:
    """Application with package name 'a.b'."""
    return Application(
        package_name="a.b",
        app_name="Alpha",
        version_code=1,
        apk_file_path="/data/app/a.b/base.apk",
    )


@pytest.fixture
def app_b() -> Application:
    """Application with package name 'c.d'."""
    return Application(
        package_name="c.d",
        app_name="Charlie",
        version_code=2,
        apk_file_path="/data/app/c.d/base.apk",
    )


@pytest.fixture
def sample_apps() -> list[Application]:
    """A small inventory mixing user and system apps."""
    return [
        Application(
            package_name="org.mozilla.firefox",
            app_name="Firefox",
            version_code=2015985,
            version_name="128.0",
            apk_file_path="/data/app/~~x1==/org.mozilla.firefox-y1==/base.apk",
        ),
        Application(
            package_name="org.videolan.vlc",
            app_name="VLC",
            version_code=13050407,
            apk_file_path="/data/app/~~x2==/org.videolan.vlc-y2==/base.apk",
        ),
        Application(
            package_name="com.android.settings",
            app_name="Settings",
            version_code=34,
            apk_file_path="/system/priv-app/Settings/Settings.apk",
            system_app=True,
        ),
    ]


@pytest.fixture
def mock_pm_list_output() -> str:
    """Sample `pm list packages -f --show-versioncode` output."""
    return "\n".join(
        [
            "package:/data/app/~~x1==/org.mozilla.firefox-y1==/base.apk"
            "=org.mozilla.firefox versionCode:2015985",
            "package:/data/app/~~x2==/org.videolan.vlc-y2==/base.apk"
            "=org.videolan.vlc versionCode:13050407",
            "package:/system/priv-app/Settings/Settings.apk=com.android.settings versionCode:34",
            "package:/system/app/Bluetooth/Bluetooth.apk=com.android.bluetooth versionCode:34",
        ]
    )


@pytest.fixture
def mock_pm_system_output() -> str:
    """Sample `pm list packages -s` output."""
    return """package:com.android.settings
package:com.android.bluetooth"""
