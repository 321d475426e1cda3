"""Test doubles for the store collaborators."""

from collections.abc import Iterator
from pathlib import Path

from apkctl.models.application import Application
from apkctl.scanners.base import AppScanner
from apkctl.storage.location import ExportLocation


class FakeScanner(AppScanner):
    """In-memory scanner yielding a fixed list of applications."""

    def __init__(
        self,
        apps: list[Application],
        total: int | None = None,
        fail_after: int | None = None,
    ) -> None:
        self.apps = apps
        self.total = len(apps) if total is None else total
        self.fail_after = fail_after
        self.read_paths: list[str] = []
        self.stream_calls: list[tuple[bool, bool]] = []

    def is_available(self) -> bool:
        return True

    def count_installed(self, include_system_apps: bool = True) -> int:
        return self.total

    def stream_installed(
        self,
        include_icons: bool = False,
        include_system_apps: bool = True,
    ) -> Iterator[Application]:
        self.stream_calls.append((include_icons, include_system_apps))
        for index, app in enumerate(self.apps):
            if self.fail_after is not None and index == self.fail_after:
                msg = "device disconnected"
                raise RuntimeError(msg)
            yield app

    def read_package(self, apk_file_path: str) -> bytes:
        self.read_paths.append(apk_file_path)
        return f"APK:{apk_file_path}".encode()


class FakeLocation(ExportLocation):
    """Export location held in memory, with a scripted prompt answer."""

    def __init__(self, location: Path | None = None, answer: Path | None = None) -> None:
        super().__init__()
        self.location = location
        self.answer = answer
        self.prompt_count = 0

    def current_location(self) -> Path | None:
        return self.location

    def ensure_location_chosen(self) -> None:
        if self.location is None:
            self.prompt_count += 1
            self.location = self.answer


class FailingWriter:
    """Writer that never manages to create a file."""

    def create_file(self, parent: Path, mime_type: str, display_name: str, data: bytes) -> None:
        return None
