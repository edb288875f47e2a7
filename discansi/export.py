"""Writing the encoded block to a text file."""

import os
import tempfile
from typing import Optional

from .constants import FormatterConstants


def default_export_path(directory: Optional[str] = None) -> str:
    """Path of the export file inside ``directory`` (default: cwd).

    Args:
        directory: Target directory, or None for the current directory.

    Returns:
        Path ending in the standard export filename.
    """
    return os.path.join(directory or '.', FormatterConstants.EXPORT_FILENAME)


def export_text(path: str, text: str) -> None:
    """Write text to ``path`` atomically.

    The content goes to a temporary file in the same directory first and
    is renamed over the target, so an existing export is never left half
    written.

    Args:
        path: Destination file.
        text: Content to write.

    Raises:
        OSError: If the file could not be written.
    """
    dir_name = os.path.dirname(path) or '.'
    base_name = os.path.basename(path)

    temp_filename = None
    try:
        with tempfile.NamedTemporaryFile(
            mode='w',
            encoding='utf-8',
            newline='',
            dir=dir_name,
            prefix=FormatterConstants.ATOMIC_SAVE_PREFIX + base_name,
            suffix=FormatterConstants.ATOMIC_SAVE_SUFFIX,
            delete=False
        ) as temp_file:
            temp_filename = temp_file.name
            temp_file.write(text)
            temp_file.flush()
            os.fsync(temp_file.fileno())

        # Atomic rename
        os.replace(temp_filename, path)
    except OSError:
        if temp_filename is not None:
            try:
                os.remove(temp_filename)
            except OSError:
                pass
        raise
