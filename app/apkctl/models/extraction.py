"""Extraction result models.

This module defines the outcome of exporting a single APK and the
aggregate outcome of exporting a batch of APKs.
"""

from dataclasses import dataclass, field
from enum import Enum


class ExtractionResult(Enum):
    """Outcome of a single APK extraction.

    Attributes:
        EXTRACTED: APK written to the destination folder.
        PERMISSION_DENIED: No destination granted, or the file could not be created.
        PERMISSION_RESTRICTED: Permission restricted, usually by parental controls.
        NOT_ALLOWED: Extraction not permitted for a protected package.
    """

    EXTRACTED = "extracted"
    PERMISSION_DENIED = "permission_denied"
    PERMISSION_RESTRICTED = "permission_restricted"
    NOT_ALLOWED = "not_allowed"

    @property
    def success(self) -> bool:
        """Check if the APK was extracted."""
        return self == ExtractionResult.EXTRACTED

    @property
    def permission_was_denied(self) -> bool:
        """Check if the user denied access to a destination."""
        return self == ExtractionResult.PERMISSION_DENIED

    @property
    def restricted_permission(self) -> bool:
        """Check if the permission is restricted by the OS."""
        return self == ExtractionResult.PERMISSION_RESTRICTED

    @property
    def extraction_not_allowed(self) -> bool:
        """Check if extraction of this package is not allowed."""
        return self == ExtractionResult.NOT_ALLOWED


class BatchResult(Enum):
    """Aggregate outcome of extracting several APKs."""

    ALL_EXTRACTED = "all_extracted"
    ALL_FAILED = "all_failed"
    SOME_FAILED = "some_failed"
    PERMISSION_DENIED = "permission_denied"

    @property
    def success(self) -> bool:
        """Check if every APK was extracted."""
        return self == BatchResult.ALL_EXTRACTED

    @property
    def failed(self) -> bool:
        """Check if every extraction failed."""
        return self == BatchResult.ALL_FAILED

    @property
    def some_may_fail(self) -> bool:
        """Check if some extractions failed while others succeeded."""
        return self == BatchResult.SOME_FAILED

    @property
    def permission_was_denied(self) -> bool:
        """Check if the user denied access to a destination."""
        return self == BatchResult.PERMISSION_DENIED


@dataclass(frozen=True, slots=True)
class ApkExtraction:
    """Result of extracting one APK.

    Attributes:
        apk: Path of the created file on success, otherwise the
            on-device path of the source APK.
        result: Classification of the extraction.
    """

    apk: str
    result: ExtractionResult

    @property
    def success(self) -> bool:
        """Check if the APK was extracted."""
        return self.result.success


@dataclass(frozen=True, slots=True)
class MultipleApkExtraction:
    """Result of extracting a batch of APKs.

    Attributes:
        extractions: One extraction per selected application, in selection order.
        destination_denied: True when no shared destination could be resolved,
            in which case no extraction was attempted.
    """

    extractions: list[ApkExtraction] = field(default_factory=lambda: [])
    destination_denied: bool = False

    @property
    def result(self) -> BatchResult:
        """Overall result derived from the individual extractions.

        A denied permission outranks every other outcome, then the number
        of successful extractions decides between all, none and some.
        """
        if self.destination_denied:
            return BatchResult.PERMISSION_DENIED

        if any(e.result.permission_was_denied for e in self.extractions):
            return BatchResult.PERMISSION_DENIED

        success_count = sum(1 for e in self.extractions if e.success)

        if success_count == 0:
            return BatchResult.ALL_FAILED

        if success_count == len(self.extractions):
            return BatchResult.ALL_EXTRACTED

        return BatchResult.SOME_FAILED

    @property
    def success_count(self) -> int:
        """Number of extracted APKs."""
        return sum(1 for e in self.extractions if e.success)

    @property
    def failure_count(self) -> int:
        """Number of APKs that were not extracted."""
        return len(self.extractions) - self.success_count
