"""Inventory snapshot model for JSON export.

This module defines the data structure for exporting a loaded
application inventory to JSON with proper metadata.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from apkctl.models.application import Application


@dataclass(frozen=True, slots=True)
class InventoryMetadata:
    """Metadata for an inventory snapshot.

    Attributes:
        timestamp: ISO format timestamp when the inventory was loaded.
        hostname: Name of the machine the device is attached to.
        apkctl_version: Version of apkctl that loaded the inventory.
        serial: Serial of the device (None when adb picked the only device).
        include_system_apps: Whether system apps were enumerated.
        query: Active search query, if the snapshot is filtered.
    """

    timestamp: str
    hostname: str
    apkctl_version: str
    serial: str | None = None
    include_system_apps: bool = True
    query: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "timestamp": self.timestamp,
            "hostname": self.hostname,
            "apkctl_version": self.apkctl_version,
            "serial": self.serial,
            "include_system_apps": self.include_system_apps,
            "query": self.query,
        }


@dataclass(frozen=True, slots=True)
class InventorySnapshot:
    """Complete inventory for export.

    Attributes:
        metadata: Snapshot metadata including timestamp and device.
        apps: Applications in discovery order.
        summary: Application count summary.
    """

    metadata: InventoryMetadata
    apps: list[Application]
    summary: dict[str, int] = field(default_factory=lambda: {})

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "metadata": self.metadata.to_dict(),
            "apps": [_app_to_dict(app) for app in self.apps],
            "summary": self.summary,
        }

    @classmethod
    def create(
        cls,
        apps: list[Application],
        serial: str | None = None,
        include_system_apps: bool = True,
        query: str | None = None,
    ) -> InventorySnapshot:
        """Create an InventorySnapshot with auto-generated metadata.

        Args:
            apps: Applications to include.
            serial: Device serial, if one was selected explicitly.
            include_system_apps: Whether system apps were enumerated.
            query: Active search query, if any.

        Returns:
            InventorySnapshot with populated metadata and summary.
        """
        import socket

        from apkctl import __version__

        system_count = sum(1 for app in apps if app.system_app)

        summary = {
            "total": len(apps),
            "system": system_count,
            "user": len(apps) - system_count,
        }

        metadata = InventoryMetadata(
            timestamp=datetime.now(UTC).isoformat(),
            hostname=socket.gethostname(),
            apkctl_version=__version__,
            serial=serial,
            include_system_apps=include_system_apps,
            query=query or None,
        )

        return cls(metadata=metadata, apps=apps, summary=summary)


def _app_to_dict(app: Application) -> dict[str, Any]:
    """Convert an Application to a dictionary.

    Icons are left out; they are binary and only useful to a GUI.

    Args:
        app: The application to convert.

    Returns:
        Dictionary representation of the application.
    """
    return {
        "package_name": app.package_name,
        "app_name": app.app_name,
        "version_code": app.version_code,
        "version_name": app.version_name,
        "apk_file_path": app.apk_file_path,
        "system_app": app.system_app,
    }
