"""Export destinations for extracted APK files.

This module exports the export location service and the folder writer.
"""

from apkctl.storage.location import ExportLocation, LocationPrompt
from apkctl.storage.writer import APK_MIME_TYPE, FolderWriter

__all__ = ["APK_MIME_TYPE", "ExportLocation", "FolderWriter", "LocationPrompt"]
