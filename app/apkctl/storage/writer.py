"""File creation in an export folder.

Creates new files inside a destination folder the user granted, the way
a document provider would: the extension follows the mime type, and an
existing file is never overwritten.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

APK_MIME_TYPE = "application/vnd.android.package-archive"

# File extension appended for each supported mime type
MIME_EXTENSIONS: dict[str, str] = {
    APK_MIME_TYPE: ".apk",
    "application/octet-stream": "",
}


class FolderWriter:
    """Writes new files into local folders."""

    def create_file(
        self,
        parent: Path,
        mime_type: str,
        display_name: str,
        data: bytes,
    ) -> Path | None:
        """Create a new file with the given content.

        Args:
            parent: Destination folder.
            mime_type: Mime type of the content, decides the extension.
            display_name: File name without extension.
            data: File content.

        Returns:
            Path of the created file, or None if the folder is missing,
            the name is taken, or the file cannot be written.
        """
        if not parent.is_dir():
            logger.warning("Export folder does not exist: %s", parent)
            return None

        extension = MIME_EXTENSIONS.get(mime_type, "")
        target = parent / f"{_safe_name(display_name)}{extension}"

        try:
            # "xb" refuses to replace an existing file
            with target.open("xb") as f:
                f.write(data)
        except FileExistsError:
            logger.warning("Refusing to overwrite existing file: %s", target)
            return None
        except OSError as e:
            logger.warning("Failed to create %s: %s", target, e)
            target.unlink(missing_ok=True)
            return None

        logger.debug("Created %s (%d bytes)", target, len(data))
        return target


def _safe_name(display_name: str) -> str:
    """Replace characters that would escape the destination folder."""
    name = display_name.replace("/", "_").replace("\\", "_").replace("\0", "_")
    return name.strip() or "unnamed"
