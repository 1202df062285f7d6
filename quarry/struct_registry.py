"""Lazily built, invalidatable registry of standard library structs."""

import logging
import threading
import time
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from quarry.alias_table import AliasTable, load_alias_file, load_alias_table
from quarry.build_document_index import build_document_index
from quarry.errors import (
    GenerationFailureError,
    MissingExportError,
    QuarryError,
    TypeNotFoundError,
)
from quarry.extract_struct import (
    UNRESOLVED_BARE_NAME,
    UNRESOLVED_POLICIES,
    extract_structs,
)
from quarry.models import StructInfo
from quarry.rustdoc_json_reader import RustdocJsonReader

logger = logging.getLogger(__name__)

DEFAULT_CRATES: tuple[str, ...] = ("std", "alloc", "core")

IndexReader = Callable[[str], str]


class StructRegistry:
    """Serves StructInfo by canonical path, building the registry on first use.

    The whole registry is built under a single lock: concurrent callers
    wait for the one build in progress and then share its result. A failed
    build publishes nothing, so the next call retries from scratch.
    """

    def __init__(
        self,
        reader: IndexReader,
        crates: Sequence[str] = DEFAULT_CRATES,
        aliases: AliasTable | None = None,
        unresolved: str = UNRESOLVED_BARE_NAME,
        skip_missing_crates: bool = False,
    ) -> None:
        """Initialize a cold registry.

        `reader` maps a crate name to the raw rustdoc JSON text for it. With
        `skip_missing_crates`, a crate without an export is left out and the
        build fails only when no crate has one.
        """
        if unresolved not in UNRESOLVED_POLICIES:
            msg = f"Unknown unresolved-path policy: {unresolved!r}"
            raise ValueError(msg)
        self.reader = reader
        self.crates = tuple(crates)
        self.aliases = aliases if aliases is not None else load_alias_table()
        self.unresolved = unresolved
        self.skip_missing_crates = skip_missing_crates

        self._lock = threading.Lock()
        self._structs: dict[str, StructInfo] | None = None

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "StructRegistry":
        """Create a registry from a config produced by `load_config`."""
        docs = config.get("docs", {})
        aliases = load_alias_table()
        for alias_file in config.get("alias_files", []):
            path = Path(alias_file)
            if not path.exists():
                logger.warning("Alias file not found: %s", path)
                continue
            aliases = aliases.merged(load_alias_file(path))
        aliases = aliases.merged(config.get("aliases") or {})

        return cls(
            RustdocJsonReader(docs.get("doc_dir")),
            crates=docs.get("crates") or DEFAULT_CRATES,
            aliases=aliases,
            unresolved=config.get("unresolved", UNRESOLVED_BARE_NAME),
            skip_missing_crates=bool(docs.get("skip_missing_crates", False)),
        )

    def ensure_ready(self) -> None:
        """Build the registry now if it is not built yet."""
        with self._lock:
            self._ensure_ready_locked()

    def warm(self) -> None:
        """Build the registry up front so errors surface before any lookup."""
        self.ensure_ready()

    def lookup(self, path: str) -> StructInfo:
        """Return the struct at `path`, trying the alias table on a miss.

        A struct found through an alias is presented under the alias path.
        """
        with self._lock:
            structs = self._ensure_ready_locked()

        info = structs.get(path)
        if info is not None:
            return info

        canonical = self.aliases.resolve(path)
        if canonical is not None:
            info = structs.get(canonical)
            if info is not None:
                return info.renamed(path)
            logger.debug("Alias '%s' resolved but '%s' is absent", path, canonical)

        raise TypeNotFoundError(path)

    def list_all(self) -> list[str]:
        """Return every canonical path in the registry, sorted."""
        with self._lock:
            structs = self._ensure_ready_locked()
        return sorted(structs)

    def exists(self, path: str) -> bool:
        """Return True if `lookup(path)` would succeed.

        A failed build also yields False; the registry stays cold and the
        next accessor retries the build.
        """
        try:
            self.lookup(path)
        except TypeNotFoundError:
            return False
        except QuarryError as exc:
            logger.debug("Struct registry unavailable for '%s': %s", path, exc)
            return False
        return True

    def invalidate(self) -> None:
        """Drop the registry; the next access rebuilds it."""
        with self._lock:
            if self._structs is not None:
                logger.info(
                    "Invalidating struct registry (%d types)", len(self._structs)
                )
            self._structs = None

    def stats(self) -> tuple[int, bool]:
        """Return (number of structs, is built) without triggering a build."""
        with self._lock:
            if self._structs is None:
                return 0, False
            return len(self._structs), True

    def _ensure_ready_locked(self) -> dict[str, StructInfo]:
        if self._structs is None:
            self._structs = self._build()
        else:
            logger.debug("Using existing struct registry")
        return self._structs

    def _build(self) -> dict[str, StructInfo]:
        logger.info("Building struct registry from crates: %s", ", ".join(self.crates))
        start = time.monotonic()

        structs: dict[str, StructInfo] = {}
        missing: list[str] = []
        for crate in self.crates:
            try:
                raw_text = self.reader(crate)
            except MissingExportError as exc:
                if not self.skip_missing_crates:
                    raise
                logger.warning("Skipping crate %s: %s", crate, exc)
                missing.append(crate)
                continue
            except QuarryError:
                raise
            except OSError as exc:
                msg = f"Could not read rustdoc JSON for crate '{crate}': {exc}"
                raise GenerationFailureError(msg) from exc

            index = build_document_index(raw_text)
            crate_structs = extract_structs(index, self.unresolved)
            logger.debug("Parsed %d structs from %s", len(crate_structs), crate)
            structs.update(crate_structs)

        if missing and len(missing) == len(self.crates):
            msg = f"No rustdoc JSON found for any crate: {', '.join(missing)}"
            raise GenerationFailureError(msg)

        logger.info(
            "Built struct registry with %d types in %.2fs",
            len(structs),
            time.monotonic() - start,
        )
        return structs
