"""Abstract base class for application scanners.

This module defines the AppScanner interface that every source of
installed applications must implement.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from apkctl.models.application import Application


class AppScanner(ABC):
    """Abstract base class for all application scanners.

    Scanners query a device's package manager, yield information about
    installed applications, and read their APK files.

    Example:
        >>> scanner = AdbScanner()
        >>> if scanner.is_available():
        ...     print(scanner.count_installed())
        ...     for app in scanner.stream_installed():
        ...         print(f"{app.package_name}: {app.version_code}")
    """

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the scanner can reach a device.

        Returns:
            True if the scanner can be used, False otherwise.
        """

    @abstractmethod
    def count_installed(self, include_system_apps: bool = True) -> int:
        """Count installed applications without enumerating their details.

        Args:
            include_system_apps: Whether to count system apps.

        Returns:
            Number of installed applications.

        Raises:
            RuntimeError: If the package manager cannot be queried.
        """

    @abstractmethod
    def stream_installed(
        self,
        include_icons: bool = False,
        include_system_apps: bool = True,
    ) -> Iterator[Application]:
        """Yield installed applications one at a time.

        The iterator is finite and not restartable; exhaustion signals
        that enumeration is complete.

        Args:
            include_icons: Whether to load application icons.
            include_system_apps: Whether to include system apps.

        Yields:
            Application for each installed package.

        Raises:
            RuntimeError: If the package manager cannot be queried.
        """

    @abstractmethod
    def read_package(self, apk_file_path: str) -> bytes:
        """Read the full content of an installed APK file.

        Args:
            apk_file_path: Path of the APK on the device.

        Returns:
            Raw APK bytes.

        Raises:
            RuntimeError: If the file cannot be read.
        """
