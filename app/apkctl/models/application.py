"""Application model for installed Android packages.

This module defines the immutable data structure representing an
application discovered on a device.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Application:
    """Represents an application installed on a device.

    Two applications are equal when they share the same package name,
    regardless of the remaining metadata.

    Attributes:
        package_name: Unique package identifier (e.g., 'org.mozilla.firefox')
        app_name: Human-readable display name
        version_code: Integer version code of the installed build
        apk_file_path: On-device path of the base APK file
        version_name: Marketing version string (if available)
        system_app: Whether the app is part of the system image
        icon: Raw icon bytes (if requested and available)
    """

    package_name: str
    app_name: str = field(compare=False)
    version_code: int = field(compare=False)
    apk_file_path: str = field(compare=False)
    version_name: str | None = field(default=None, compare=False)
    system_app: bool = field(default=False, compare=False)
    icon: bytes | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate application data after initialization."""
        if not self.package_name:
            msg = "Package name cannot be empty"
            raise ValueError(msg)
        if not self.apk_file_path:
            msg = f"APK path cannot be empty for {self.package_name}"
            raise ValueError(msg)

    @property
    def search_source(self) -> str:
        """Return the lower-cased text used for fuzzy search."""
        return f"{self.app_name} {self.package_name}".lower()

    @property
    def version_label(self) -> str:
        """Return a display label combining version name and code."""
        if self.version_name:
            return f"{self.version_name} ({self.version_code})"
        return str(self.version_code)
