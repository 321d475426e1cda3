"""Data models for apkctl.

This module exports the core data structures used throughout the application.
"""

from apkctl.models.application import Application
from apkctl.models.extraction import (
    ApkExtraction,
    BatchResult,
    ExtractionResult,
    MultipleApkExtraction,
)
from apkctl.models.inventory import InventoryMetadata, InventorySnapshot

__all__ = [
    "ApkExtraction",
    "Application",
    "BatchResult",
    "ExtractionResult",
    "InventoryMetadata",
    "InventorySnapshot",
    "MultipleApkExtraction",
]
