"""Export location management.

The export location is the folder APKs are written into. It is chosen
once by the user and persisted in the settings file, so later exports
reuse it without asking again.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from apkctl.core.settings import load_settings, save_settings

logger = logging.getLogger(__name__)

# Asks the user for a folder; returns None when the user declines
LocationPrompt = Callable[[], Path | None]


class ExportLocation:
    """Persisted export folder with an interactive fallback.

    Attributes:
        settings_path: Settings file holding the location. None uses the default path.

    Example:
        >>> location = ExportLocation(prompt=lambda: Path("~/apks").expanduser())
        >>> location.ensure_location_chosen()
        >>> location.current_location()
        PosixPath('/home/user/apks')
    """

    def __init__(
        self,
        settings_path: Path | None = None,
        prompt: LocationPrompt | None = None,
    ) -> None:
        """Initialize the export location.

        Args:
            settings_path: Optional override for the settings file.
            prompt: Callable asking the user for a folder. Without one,
                an unset location stays unset.
        """
        self.settings_path = settings_path
        self._prompt = prompt

    def current_location(self) -> Path | None:
        """Return the persisted export folder, if any.

        Raises:
            SettingsError: If the settings file cannot be read.
        """
        return load_settings(self.settings_path).export_location

    def ensure_location_chosen(self) -> None:
        """Ask the user for an export folder if none is persisted yet.

        The chosen folder is persisted. Declining leaves the location unset.

        Raises:
            SettingsError: If the settings file cannot be read or written.
        """
        if self.current_location() is not None:
            return

        if self._prompt is None:
            logger.debug("No export location set and no prompt available")
            return

        chosen = self._prompt()
        if chosen is None:
            logger.info("Export location request declined")
            return

        self.set_location(chosen)

    def set_location(self, folder: Path) -> Path:
        """Persist a new export folder.

        Args:
            folder: Folder to export into. Stored as an absolute path.

        Returns:
            The stored folder path.

        Raises:
            SettingsError: If the settings file cannot be read or written.
        """
        folder = folder.expanduser().resolve()
        settings = load_settings(self.settings_path)
        save_settings(settings.model_copy(update={"export_location": folder}), self.settings_path)
        logger.info("Export location set to %s", folder)
        return folder

    def clear_location(self) -> None:
        """Forget the persisted export folder.

        Raises:
            SettingsError: If the settings file cannot be read or written.
        """
        settings = load_settings(self.settings_path)
        save_settings(settings.model_copy(update={"export_location": None}), self.settings_path)
        logger.info("Export location cleared")
