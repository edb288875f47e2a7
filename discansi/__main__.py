"""discansi CLI entry point.

Allows running via `python -m discansi` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import sys

from .version import get_version_string

USAGE = """usage: discansi [--version | --demo | --plain FILE | FILE]

  --version     print the version and exit
  --demo        print the encoded welcome message
  --plain FILE  print FILE as an ansi block without styling
  FILE          open FILE in the editor"""


def _read_text(filename: str) -> str:
    with open(filename, 'r', encoding='utf-8') as f:
        return f.read().replace('\r\n', '\n')


def _make_session(text: str | None = None):
    from .constants import FormatterConstants
    from .model import Document
    from .samples import welcome_document
    from .session import FormatterSession
    from .settings_persistence import SettingsKeys, get_persistence

    settings = get_persistence().load_settings()
    limit = settings.get(SettingsKeys.HISTORY_LIMIT) or FormatterConstants.DEFAULT_HISTORY_LIMIT
    document = welcome_document() if text is None else Document.from_text(text)
    return FormatterSession(
        document,
        max_entries=limit,
        export_directory=settings.get(SettingsKeys.EXPORT_DIRECTORY),
    )


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--help", "-h"):
        print(USAGE)
        return 0
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0
    if args and args[0] == "--demo":
        from .encoder import encode
        from .samples import welcome_document
        print(encode(welcome_document()))
        return 0
    if args and args[0] == "--plain":
        if len(args) < 2:
            print(USAGE, file=sys.stderr)
            return 2
        from .encoder import encode
        from .model import Document
        try:
            text = _read_text(args[1])
        except OSError as e:
            print(f"discansi: cannot read {args[1]}: {e.strerror or e}", file=sys.stderr)
            return 1
        print(encode(Document.from_text(text)))
        return 0

    text = None
    if args:
        try:
            text = _read_text(args[0])
        except OSError as e:
            print(f"discansi: cannot read {args[0]}: {e.strerror or e}", file=sys.stderr)
            return 1

    # Lazy import to avoid importing UI deps for --version
    from .textual_app import FormatterApp
    FormatterApp(_make_session(text)).run()
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
