"""ADB application scanner implementation.

Enumerates installed applications with `pm list packages` over adb and
reads APK files with `adb exec-out cat`.
"""

import logging
import re
import subprocess
from collections.abc import Iterator

from apkctl.models.application import Application
from apkctl.scanners.base import AppScanner
from apkctl.utils.shell import command_exists, run_binary, run_command

logger = logging.getLogger(__name__)


class AdbScanner(AppScanner):
    """Scanner for applications on an adb-connected Android device.

    Uses `pm list packages -f --show-versioncode` to list packages with
    their APK path and version code, and `pm list packages -s` to tell
    system apps apart from user apps.

    Attributes:
        adb_path: adb executable name or path.
        serial: Device serial, or None to use the only attached device.
    """

    # package:/data/app/~~x==/org.foo-y==/base.apk=org.foo versionCode:42
    # The APK path may itself contain '=', so the package name is what
    # follows the last one.
    _LINE_PATTERN = re.compile(
        r"^package:(?P<path>.+)=(?P<name>[A-Za-z0-9_.]+)(?:\s+versionCode:(?P<code>\d+))?\s*$"
    )

    def __init__(self, adb_path: str = "adb", serial: str | None = None) -> None:
        """Initialize the scanner.

        Args:
            adb_path: adb executable name or path.
            serial: Device serial passed to `adb -s`.
        """
        self.adb_path = adb_path
        self.serial = serial

    def _adb(self, *args: str) -> list[str]:
        """Build an adb command line targeting the configured device."""
        command = [self.adb_path]
        if self.serial:
            command.extend(["-s", self.serial])
        command.extend(args)
        return command

    def is_available(self) -> bool:
        """Check if adb is installed and a device is attached."""
        if not command_exists(self.adb_path):
            return False

        try:
            result = run_command(self._adb("get-state"), timeout=10.0)
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.debug("adb get-state failed: %s", e)
            return False
        return result.success and result.stdout.strip() == "device"

    def count_installed(self, include_system_apps: bool = True) -> int:
        """Count installed packages.

        Args:
            include_system_apps: Whether to count system apps.

        Returns:
            Number of installed packages.

        Raises:
            RuntimeError: If adb is unavailable or pm fails.
        """
        output = self._list_packages(third_party_only=not include_system_apps)
        return sum(1 for line in output.splitlines() if line.startswith("package:"))

    def stream_installed(
        self,
        include_icons: bool = False,
        include_system_apps: bool = True,
    ) -> Iterator[Application]:
        """Yield installed applications in package manager order.

        Icons cannot be fetched through the package manager shell, so
        every application is yielded without one.

        Args:
            include_icons: Whether icons were requested.
            include_system_apps: Whether to include system apps.

        Yields:
            Application for each installed package.

        Raises:
            RuntimeError: If adb is unavailable or pm fails.
        """
        if include_icons:
            logger.debug("Icons are not available over adb, skipping them")

        system_packages: set[str] = set()
        if include_system_apps:
            system_packages = self._get_system_packages()

        output = self._list_packages(
            "-f",
            "--show-versioncode",
            third_party_only=not include_system_apps,
        )

        for line in output.splitlines():
            if not line.strip():
                continue

            app = self._parse_package_line(line, system_packages)
            if app is not None:
                yield app

    def read_package(self, apk_file_path: str) -> bytes:
        """Read an APK file off the device.

        Args:
            apk_file_path: On-device path of the APK.

        Returns:
            Raw APK bytes.

        Raises:
            RuntimeError: If adb is unavailable or the file cannot be read.
        """
        self._require_adb()

        try:
            result = run_binary(self._adb("exec-out", "cat", apk_file_path))
        except (OSError, subprocess.TimeoutExpired) as e:
            msg = f"Failed to read {apk_file_path}: {e}"
            raise RuntimeError(msg) from e
        if not result.success:
            msg = f"Failed to read {apk_file_path}: {result.stderr.strip() or 'unknown error'}"
            raise RuntimeError(msg)

        logger.debug("Read %d bytes from %s", len(result.stdout), apk_file_path)
        return result.stdout

    def _require_adb(self) -> None:
        """Raise if the adb executable cannot be found."""
        if not command_exists(self.adb_path):
            msg = f"adb executable not found: {self.adb_path}"
            raise RuntimeError(msg)

    def _list_packages(self, *flags: str, third_party_only: bool = False) -> str:
        """Run `pm list packages` with the given flags.

        Args:
            flags: Extra flags for pm.
            third_party_only: Restrict the listing to non-system packages.

        Returns:
            Raw pm output.

        Raises:
            RuntimeError: If adb is unavailable or pm fails.
        """
        self._require_adb()

        args = ["shell", "pm", "list", "packages", *flags]
        if third_party_only:
            args.append("-3")

        try:
            result = run_command(self._adb(*args))
        except (OSError, subprocess.TimeoutExpired) as e:
            msg = f"pm list packages failed: {e}"
            raise RuntimeError(msg) from e
        if not result.success:
            msg = f"pm list packages failed: {result.stderr.strip() or 'unknown error'}"
            raise RuntimeError(msg)

        return result.stdout

    def _get_system_packages(self) -> set[str]:
        """Get the set of package names that belong to the system image.

        Returns:
            Set of system package names.

        Raises:
            RuntimeError: If pm fails.
        """
        output = self._list_packages("-s")
        return {
            line.removeprefix("package:").strip()
            for line in output.splitlines()
            if line.startswith("package:")
        }

    def _parse_package_line(
        self,
        line: str,
        system_packages: set[str],
    ) -> Application | None:
        """Parse a single line of `pm list packages -f` output.

        Args:
            line: Line of pm output.
            system_packages: Set of system package names.

        Returns:
            Application if parsing succeeds, None otherwise.
        """
        match = self._LINE_PATTERN.match(line.strip())
        if match is None:
            logger.debug("Skipping malformed pm line: %r", line[:100])
            return None

        package_name = match.group("name")
        code = match.group("code")

        return Application(
            package_name=package_name,
            app_name=_display_name(package_name),
            version_code=int(code) if code else 0,
            apk_file_path=match.group("path"),
            system_app=package_name in system_packages,
        )


def _display_name(package_name: str) -> str:
    """Derive a readable name from the last segment of a package name.

    The package manager shell does not expose application labels.
    """
    return package_name.split(".")[-1].replace("_", " ").capitalize()
