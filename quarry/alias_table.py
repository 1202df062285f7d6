"""Static table mapping public `std::` paths to canonical struct paths."""

import logging
from collections.abc import Iterator, Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

import yaml

logger = logging.getLogger(__name__)

STD_ALIASES_PATH = Path(__file__).parent / "data" / "std_aliases.yml"


class AliasTable(Mapping[str, str]):
    """Immutable alias -> canonical mapping with exact-match resolution.

    No case folding, prefix matching or normalization is applied. A resolved
    canonical path is not guaranteed to exist in any registry.
    """

    def __init__(self, pairs: Mapping[str, str] | None = None) -> None:
        """Copy the given pairs into a read-only table."""
        self._pairs = MappingProxyType(dict(pairs or {}))

    def resolve(self, alias: str) -> str | None:
        """Return the canonical path for `alias`, or None."""
        canonical = self._pairs.get(alias)
        if canonical is not None:
            logger.debug("Resolved alias '%s' to '%s'", alias, canonical)
        return canonical

    def merged(self, extra: Mapping[str, str]) -> "AliasTable":
        """Return a new table with `extra` added; `extra` wins on conflicts."""
        return AliasTable({**self._pairs, **extra})

    def __getitem__(self, alias: str) -> str:
        return self._pairs[alias]

    def __iter__(self) -> Iterator[str]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)


def load_alias_file(path: Path) -> dict[str, str]:
    """Load a YAML mapping of alias to canonical path."""
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        msg = f"Alias file {path} must contain a mapping"
        raise ValueError(msg)
    return {str(alias): str(canonical) for alias, canonical in data.items()}


@lru_cache(maxsize=1)
def load_alias_table() -> AliasTable:
    """Load the bundled std alias table (once per process)."""
    table = AliasTable(load_alias_file(STD_ALIASES_PATH))
    logger.debug("Loaded %d std aliases", len(table))
    return table
