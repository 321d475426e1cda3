"""Application scanners for connected devices.

This module exports the scanner classes for querying installed applications.
"""

from apkctl.scanners.adb import AdbScanner
from apkctl.scanners.base import AppScanner

__all__ = ["AdbScanner", "AppScanner"]
