"""Script wrapper around the minicurl package CLI."""

from __future__ import annotations

from minicurl.cli import main

if __name__ == "__main__":  # pragma: no cover - CLI bootstrap
    raise SystemExit(main())
