"""Reader for rustdoc JSON exports already present on disk."""

import logging
from pathlib import Path

from quarry.errors import (
    GenerationFailureError,
    MalformedInputError,
    MissingExportError,
)

logger = logging.getLogger(__name__)


class RustdocJsonReader:
    """Reads `<doc_dir>/<crate>.json`, as written by `cargo doc` with JSON output.

    Generating the export is left to the caller, e.g.::

        RUSTDOCFLAGS="-Z unstable-options --output-format json" \\
            cargo +nightly doc -p std -p alloc -p core --document-private-items
    """

    def __init__(self, doc_dir: str | Path | None) -> None:
        """Remember the directory holding the exports."""
        self.doc_dir = Path(doc_dir) if doc_dir else None

    def path_for(self, crate: str) -> Path:
        """Return the expected export path for a crate."""
        if self.doc_dir is None:
            msg = "No rustdoc output directory configured (docs.doc_dir)"
            raise GenerationFailureError(msg)
        return self.doc_dir / f"{crate}.json"

    def __call__(self, crate: str) -> str:
        """Return the raw JSON text exported for `crate`."""
        path = self.path_for(crate)
        if not path.is_file():
            raise MissingExportError(crate, path)
        logger.debug("Reading rustdoc JSON for %s from %s", crate, path)
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            msg = f"rustdoc JSON for crate '{crate}' is not valid UTF-8: {exc}"
            raise MalformedInputError(msg) from exc
