"""Device applications store.

This module provides the DeviceAppsStore class, which owns the list of
installed applications, the loading progress, the user's selection and
the active search, and exports selected applications' APK files.

Every mutating call notifies subscribed listeners afterwards, so a
presentation layer can re-render after each change.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from apkctl.core.search import filter_applications
from apkctl.models.application import Application
from apkctl.models.extraction import ApkExtraction, ExtractionResult, MultipleApkExtraction
from apkctl.scanners.base import AppScanner
from apkctl.storage.location import ExportLocation
from apkctl.storage.writer import APK_MIME_TYPE, FolderWriter
from apkctl.utils.ids import short_id

logger = logging.getLogger(__name__)

Listener = Callable[["DeviceAppsStore"], None]


class DeviceAppsStore:
    """Inventory, selection, search and export of device applications.

    Call load_packages() before any other action.

    Attributes:
        apps: All device applications in discovery order.
        results: Search results. None when no search is active, empty
            when the active search matched nothing.
        is_loading: Whether applications are currently being loaded.
        total_packages_count: Number of applications expected while loading.
            None until loading starts.

    Example:
        >>> store = DeviceAppsStore(AdbScanner(), ExportLocation())
        >>> store.load_packages()
        >>> store.search("firefox")
        >>> store.toggle_select_all()
        >>> store.extract_selected_apks().result
        <BatchResult.ALL_EXTRACTED: 'all_extracted'>
    """

    # Id length to avoid filename conflicts on extraction
    ID_LENGTH = 5

    def __init__(
        self,
        scanner: AppScanner,
        location: ExportLocation,
        writer: FolderWriter | None = None,
        id_generator: Callable[[int], str] = short_id,
        include_icons: bool = True,
        include_system_apps: bool = True,
    ) -> None:
        """Initialize the store.

        Args:
            scanner: Source of installed applications and their APK files.
            location: Export location service.
            writer: File creation service. Defaults to a FolderWriter.
            id_generator: Returns a random identifier of the given length.
            include_icons: Whether to request application icons.
            include_system_apps: Whether to include system apps.
        """
        self._scanner = scanner
        self._location = location
        self._writer = writer if writer is not None else FolderWriter()
        self._id_generator = id_generator
        self._include_icons = include_icons
        self._include_system_apps = include_system_apps

        self.apps: list[Application] = []
        self.results: list[Application] | None = None
        self.is_loading = False
        self.total_packages_count: int | None = None

        self._selected: dict[str, Application] = {}
        self._listeners: list[Listener] = []

    # =========================================================================
    # Change notification
    # =========================================================================

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called after every change.

        Args:
            listener: Callable receiving this store.

        Returns:
            Callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # =========================================================================
    # Loading
    # =========================================================================

    @property
    def include_system_apps(self) -> bool:
        """Whether system apps are enumerated."""
        return self._include_system_apps

    @property
    def loaded_packages_count(self) -> int:
        """Number of applications loaded so far."""
        return len(self.apps)

    @property
    def fully_loaded(self) -> bool:
        """Check if loading finished and every expected application arrived."""
        return (
            not self.is_loading
            and self.total_packages_count is not None
            and self.loaded_packages_count == self.total_packages_count
        )

    def load_packages(self) -> None:
        """Load all device applications.

        Listeners are notified once loading starts, after every loaded
        application, and once loading ends.

        Raises:
            RuntimeError: If the scanner fails. Loading stops and the
                applications loaded so far are kept.
        """
        self.is_loading = True
        self._notify()

        try:
            self.total_packages_count = self._scanner.count_installed(
                include_system_apps=self._include_system_apps
            )
            logger.info("Loading %d applications", self.total_packages_count)

            for app in self._scanner.stream_installed(
                include_icons=self._include_icons,
                include_system_apps=self._include_system_apps,
            ):
                self.apps.append(app)
                self._notify()
        except RuntimeError as e:
            logger.warning("Loading stopped after %d applications: %s", len(self.apps), e)
            raise
        finally:
            self.is_loading = False
            self._notify()

        logger.info("Loaded %d applications", len(self.apps))

    # =========================================================================
    # Selection
    # =========================================================================

    @property
    def selected(self) -> list[Application]:
        """Selected applications in selection order."""
        return list(self._selected.values())

    @property
    def displayable_apps(self) -> list[Application]:
        """Applications to be rendered: search results, or all applications."""
        return self.results if self.results is not None else self.apps

    @property
    def is_all_selected(self) -> bool:
        """Check if the selection covers as many apps as are displayable."""
        return len(self.displayable_apps) == len(self._selected)

    def is_selected(self, app: Application) -> bool:
        """Check if an application is selected."""
        return app.package_name in self._selected

    def toggle_select(self, app: Application) -> None:
        """Select an application, or unselect it if already selected."""
        if app.package_name in self._selected:
            del self._selected[app.package_name]
        else:
            self._selected[app.package_name] = app

        self._notify()

    def toggle_select_all(self) -> None:
        """Select all displayable applications, or clear a full selection."""
        if self.is_all_selected:
            self._selected.clear()
        else:
            self._selected = {app.package_name: app for app in self.displayable_apps}

        self._notify()

    def clear_selection(self) -> None:
        """Mark all applications as unselected."""
        self._selected.clear()
        self._notify()

    def restore_to_default(self) -> None:
        """Clear the selection and disable search."""
        self.clear_selection()
        self.disable_search()
        self._notify()

    # =========================================================================
    # Search
    # =========================================================================

    def search(self, text: str) -> None:
        """Replace results with the applications matching text.

        An empty text disables search instead.

        Args:
            text: Free-text query, matched as an ordered subsequence of
                the app name and package name.
        """
        if not text:
            self.disable_search()
        else:
            self.results = filter_applications(self.apps, text)
            logger.debug("Search %r matched %d applications", text, len(self.results))

        self._notify()

    def disable_search(self) -> None:
        """Drop search results and show all applications."""
        self.results = None
        self._notify()

    # =========================================================================
    # Extraction
    # =========================================================================

    def request_export_location(self) -> Path | None:
        """Resolve the export folder, asking the user if none is set yet.

        Returns:
            Export folder, or None if the user declined to choose one.
        """
        self._location.ensure_location_chosen()
        return self._location.current_location()

    def extract_apk(self, app: Application, folder: Path | None = None) -> ApkExtraction:
        """Extract the APK of an application.

        Args:
            app: Application to extract.
            folder: Destination folder. If None, the export location is used.

        Returns:
            ApkExtraction with the created file, or with the source APK
            path and PERMISSION_DENIED when nothing was written.

        Raises:
            RuntimeError: If the APK cannot be read from the device.
        """
        parent_folder = folder if folder is not None else self.request_export_location()

        if parent_folder is None:
            logger.info("No export folder for %s", app.package_name)
            return ApkExtraction(app.apk_file_path, ExtractionResult.PERMISSION_DENIED)

        apk_filename = "_".join(
            [
                app.app_name,
                app.package_name,
                str(app.version_code),
                self._id_generator(self.ID_LENGTH),
            ]
        )

        created_file = self._writer.create_file(
            parent_folder,
            mime_type=APK_MIME_TYPE,
            display_name=apk_filename,
            data=self._scanner.read_package(app.apk_file_path),
        )

        if created_file is None:
            return ApkExtraction(app.apk_file_path, ExtractionResult.PERMISSION_DENIED)

        logger.info("Extracted %s to %s", app.package_name, created_file)
        return ApkExtraction(str(created_file), ExtractionResult.EXTRACTED)

    def extract_selected_apks(self, folder: Path | None = None) -> MultipleApkExtraction:
        """Extract the APKs of all selected applications.

        The destination is resolved once for the whole batch, then each
        selected application is extracted in turn.

        Args:
            folder: Destination folder. If None, the export location is used.

        Returns:
            MultipleApkExtraction with one extraction per selected application.

        Raises:
            RuntimeError: If an APK cannot be read from the device.
        """
        parent_folder = folder if folder is not None else self.request_export_location()

        if parent_folder is None:
            return MultipleApkExtraction([], destination_denied=True)

        extractions = [self.extract_apk(app, folder=parent_folder) for app in self.selected]
        return MultipleApkExtraction(extractions)
