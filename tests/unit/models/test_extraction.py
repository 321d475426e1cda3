"""Unit tests for extraction result models."""

import pytest
from apkctl.models.extraction import (
    ApkExtraction,
    BatchResult,
    ExtractionResult,
    MultipleApkExtraction,
)

EXTRACTED = ApkExtraction("/out/a.apk", ExtractionResult.EXTRACTED)
DENIED = ApkExtraction("/data/app/b/base.apk", ExtractionResult.PERMISSION_DENIED)
RESTRICTED = ApkExtraction("/data/app/c/base.apk", ExtractionResult.PERMISSION_RESTRICTED)
NOT_ALLOWED = ApkExtraction("/data/app/d/base.apk", ExtractionResult.NOT_ALLOWED)


class TestExtractionResult:
    """Tests for ExtractionResult accessors."""

    def test_accessors_are_exclusive(self) -> None:
        """Exactly one accessor is true for each result."""
        for result in ExtractionResult:
            flags = [
                result.success,
                result.permission_was_denied,
                result.restricted_permission,
                result.extraction_not_allowed,
            ]
            assert flags.count(True) == 1

    def test_extracted_is_success(self) -> None:
        """Only EXTRACTED is a success."""
        assert ExtractionResult.EXTRACTED.success
        assert not ExtractionResult.PERMISSION_DENIED.success


class TestBatchResult:
    """Tests for BatchResult accessors."""

    def test_accessors(self) -> None:
        """Each batch result maps to its accessor."""
        assert BatchResult.ALL_EXTRACTED.success
        assert BatchResult.ALL_FAILED.failed
        assert BatchResult.SOME_FAILED.some_may_fail
        assert BatchResult.PERMISSION_DENIED.permission_was_denied


class TestMultipleApkExtraction:
    """Tests for the aggregate result rule."""

    @pytest.mark.parametrize(
        ("extractions", "expected"),
        [
            ([EXTRACTED, DENIED, EXTRACTED], BatchResult.PERMISSION_DENIED),
            ([EXTRACTED, EXTRACTED], BatchResult.ALL_EXTRACTED),
            ([EXTRACTED], BatchResult.ALL_EXTRACTED),
            ([RESTRICTED, NOT_ALLOWED], BatchResult.ALL_FAILED),
            ([EXTRACTED, RESTRICTED], BatchResult.SOME_FAILED),
            ([DENIED, RESTRICTED], BatchResult.PERMISSION_DENIED),
        ],
    )
    def test_result_priority(
        self, extractions: list[ApkExtraction], expected: BatchResult
    ) -> None:
        """Denied outranks everything, then success count decides."""
        assert MultipleApkExtraction(extractions).result == expected

    def test_denied_destination(self) -> None:
        """A denied destination is PERMISSION_DENIED, not ALL_FAILED."""
        batch = MultipleApkExtraction([], destination_denied=True)

        assert batch.result == BatchResult.PERMISSION_DENIED

    def test_empty_batch_without_denial(self) -> None:
        """An empty batch with a destination counts zero successes."""
        assert MultipleApkExtraction([]).result == BatchResult.ALL_FAILED

    def test_counts(self) -> None:
        """success_count and failure_count split the extractions."""
        batch = MultipleApkExtraction([EXTRACTED, RESTRICTED, EXTRACTED])

        assert batch.success_count == 2
        assert batch.failure_count == 1
