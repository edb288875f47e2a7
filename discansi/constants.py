"""Constants and configuration for the discansi formatter."""

class FormatterConstants:
    """Central configuration constants for the formatter."""

    # Escape sequences
    ESCAPE = "\x1b["
    RESET_SEQUENCE = "\x1b[0m"
    DEFAULT_DECORATION = 0  # Written when no decoration is set

    # Fenced block output
    FENCE = "```"
    LANGUAGE_TAG = "ansi"
    FENCE_BREAKER = "\u200b"  # Zero-width space inserted into backtick runs

    # History
    DEFAULT_HISTORY_LIMIT = 500  # Snapshots kept before the oldest is dropped

    # File operations
    EXPORT_FILENAME = "discord-ansi.txt"
    ATOMIC_SAVE_PREFIX = "."  # Prefix for temporary export files
    ATOMIC_SAVE_SUFFIX = ".tmp"  # Suffix for temporary export files

    # Status messages
    COPIED_MESSAGE = "ANSI formatted text has been copied."
    COPY_FAILED_MESSAGE = "Copying failed. Please try manually."
    EXPORTED_MESSAGE = "ANSI formatted text has been saved to {}."
    EXPORT_FAILED_MESSAGE = "Export failed: {}"
