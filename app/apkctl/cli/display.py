"""Shared Rich display functions for extraction results.

Provides table builders and summary printers for displaying the
outcome of single and batch APK extractions.
"""

from rich.table import Table

from apkctl.models.application import Application
from apkctl.models.extraction import (
    ApkExtraction,
    BatchResult,
    ExtractionResult,
    MultipleApkExtraction,
)
from apkctl.utils.formatting import console, print_error, print_success, print_warning

# Status markup per extraction result
_RESULT_LABELS: dict[ExtractionResult, str] = {
    ExtractionResult.EXTRACTED: "[success]OK[/success]",
    ExtractionResult.PERMISSION_DENIED: "[error]DENIED[/error]",
    ExtractionResult.PERMISSION_RESTRICTED: "[warning]RESTRICTED[/warning]",
    ExtractionResult.NOT_ALLOWED: "[warning]NOT ALLOWED[/warning]",
}


def create_extractions_table(
    rows: list[tuple[Application, ApkExtraction]],
) -> Table:
    """Create a Rich table displaying extraction results.

    Successful rows show the created file; failed rows show the source
    APK path on the device.

    Args:
        rows: Pairs of application and its extraction, in extraction order.

    Returns:
        Rich Table configured for results display.
    """
    table = Table(
        title="Extractions",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=11, justify="center")
    table.add_column("Package", no_wrap=True)
    table.add_column("File")

    for app, extraction in rows:
        table.add_row(
            _RESULT_LABELS[extraction.result],
            app.package_name,
            f"[muted]{extraction.apk}[/muted]",
        )

    return table


def print_extraction_summary(app: Application, extraction: ApkExtraction) -> None:
    """Print the outcome of a single extraction."""
    if extraction.success:
        print_success(f"Extracted {app.package_name} to {extraction.apk}")
    elif extraction.result.permission_was_denied:
        print_error(f"Permission denied: {app.package_name} was not extracted.")
    else:
        print_error(f"Extraction of {app.package_name} failed ({extraction.result.value}).")


def print_batch_summary(batch: MultipleApkExtraction) -> None:
    """Print the overall outcome of a batch extraction.

    Args:
        batch: Batch extraction to summarize.
    """
    result = batch.result

    if result == BatchResult.ALL_EXTRACTED:
        print_success(f"All {batch.success_count} APK(s) extracted successfully.")
    elif result == BatchResult.SOME_FAILED:
        print_warning("Some APKs could not be extracted.")
        console.print(
            f"\n[success]{batch.success_count} extracted[/success], "
            f"[error]{batch.failure_count} failed[/error]"
        )
    elif result == BatchResult.ALL_FAILED:
        print_error("No APK could be extracted.")
    else:
        print_error("Permission denied: no APK was written to the export folder.")


def extractions_to_dict(
    rows: list[tuple[Application, ApkExtraction]],
    result: BatchResult | ExtractionResult,
) -> dict[str, object]:
    """Convert extraction results to a dictionary for JSON output."""
    return {
        "result": result.value,
        "extractions": [
            {
                "package_name": app.package_name,
                "apk": extraction.apk,
                "result": extraction.result.value,
            }
            for app, extraction in rows
        ],
    }
