"""User settings and their persistence.

This module provides the settings model and I/O functions. Settings hold
the last chosen export folder and the defaults used to talk to a device.

Settings are stored in ~/.config/apkctl/settings.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from apkctl.core.paths import get_settings_path

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """Persisted apkctl settings.

    Attributes:
        export_location: Folder APKs are exported to. None until chosen.
        include_system_apps: Whether listings include system apps by default.
        adb_path: adb executable name or path.
        serial: Device serial passed to adb. None lets adb pick the only device.
    """

    model_config = ConfigDict(extra="forbid")

    export_location: Annotated[
        Path | None,
        Field(description="Folder APKs are exported to"),
    ] = None
    include_system_apps: Annotated[
        bool,
        Field(description="List system apps by default"),
    ] = True
    adb_path: Annotated[
        str,
        Field(min_length=1, description="adb executable"),
    ] = "adb"
    serial: Annotated[
        str | None,
        Field(description="Device serial (None = only attached device)"),
    ] = None


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    A missing file is not an error: defaults are returned instead.

    Args:
        path: Path to the settings file. If None, uses the default settings path.

    Returns:
        Validated Settings object.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the file cannot be read or doesn't match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        logger.debug("No settings file at %s, using defaults", settings_path)
        return Settings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return Settings.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise SettingsError(f"Invalid settings content: {e}") from e


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        settings: The Settings object to save.
        path: Path to save the settings. If None, uses the default settings path.

    Returns:
        Path to the saved settings file.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()

    data = _settings_to_dict(settings)

    tmp_path: Path | None = None
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    logger.debug("Saved settings to %s", settings_path)
    return settings_path


def _settings_to_dict(settings: Settings) -> dict[str, object]:
    """Convert Settings to a dictionary for TOML serialization.

    TOML has no null, so unset optional values are left out.

    Args:
        settings: The Settings to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    result: dict[str, object] = {
        "include_system_apps": settings.include_system_apps,
        "adb_path": settings.adb_path,
    }

    if settings.export_location is not None:
        result["export_location"] = str(settings.export_location)

    if settings.serial is not None:
        result["serial"] = settings.serial

    return result
