"""Allow ``python -m i18nscan``."""

from __future__ import annotations

from i18nscan.extractor.cli import app

if __name__ == "__main__":  # pragma: no cover - manual execution entrypoint
    app(prog_name="i18nscan")
