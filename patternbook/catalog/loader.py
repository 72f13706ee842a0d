# Copyright 2025 Vijaykumar Singh <singhvjd@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Catalog loading and markdown rendering.

The catalog is a YAML document of the form:

    patterns:
      builder:
        name: Builder
        category: creational
        intent: >
          Separate the construction of a complex object from its representation.
        benefits: [...]
        drawbacks: [...]
        interview_summary: [...]
        uml: |
          ...
        related: [prototype]

Loaded catalogs are cached per resolved path; call ``invalidate_catalog_cache``
after editing a catalog file in a long-lived process.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import ValidationError

from patternbook.catalog.models import Catalog, PatternEntry
from patternbook.core.demo import PatternCategory
from patternbook.core.errors import CatalogError, ErrorCategory

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "patterns.yaml"

_cache: Dict[Path, Catalog] = {}
_cache_lock = threading.Lock()


class CatalogLoader:
    """Load and validate a pattern catalog file."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """Initialize the loader.

        Args:
            path: Catalog file (default: the packaged patterns.yaml)
        """
        self.path = Path(path) if path is not None else DEFAULT_CATALOG_PATH

    def load(self, use_cache: bool = True) -> Catalog:
        """Load the catalog.

        Args:
            use_cache: Reuse a previously loaded catalog for the same path

        Returns:
            Validated Catalog

        Raises:
            CatalogError: If the file is missing, not valid YAML, or an entry
                fails validation
        """
        resolved = self.path.resolve()
        if use_cache:
            with _cache_lock:
                cached = _cache.get(resolved)
            if cached is not None:
                return cached

        catalog = self._parse(self._read(resolved), resolved)

        with _cache_lock:
            _cache[resolved] = catalog
        logger.debug(f"Loaded {len(catalog)} catalog entries from {resolved}")
        return catalog

    def _read(self, path: Path) -> Any:
        if not path.exists():
            raise CatalogError(
                f"Catalog file not found: {path}",
                path=str(path),
                category=ErrorCategory.CATALOG_MISSING,
                recovery_hint="Unset PATTERNBOOK_CATALOG_PATH to use the bundled catalog.",
            )
        try:
            with open(path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise CatalogError(f"Catalog is not valid YAML: {e}", path=str(path), cause=e) from e
        except OSError as e:
            raise CatalogError(f"Cannot read catalog: {e}", path=str(path), cause=e) from e

    def _parse(self, data: Any, path: Path) -> Catalog:
        if not isinstance(data, dict) or not isinstance(data.get("patterns"), dict):
            raise CatalogError(
                "Catalog must be a mapping with a 'patterns' mapping",
                path=str(path),
            )

        entries: Dict[str, PatternEntry] = {}
        for key, raw in data["patterns"].items():
            if not isinstance(raw, dict):
                raise CatalogError(f"Entry '{key}' must be a mapping", path=str(path), key=str(key))
            try:
                entries[str(key)] = PatternEntry(key=str(key), **raw)
            except (ValidationError, TypeError) as e:
                raise CatalogError(
                    f"Invalid catalog entry '{key}': {e}",
                    path=str(path),
                    key=str(key),
                    cause=e,
                ) from e

        for entry in entries.values():
            unknown = [r for r in entry.related if r not in entries]
            if unknown:
                logger.warning(f"Catalog entry '{entry.key}' relates to unknown keys: {unknown}")

        return Catalog(entries=entries)


def load_catalog(path: Optional[Union[str, Path]] = None) -> Catalog:
    """Load a catalog, defaulting to the packaged one."""
    return CatalogLoader(path).load()


def invalidate_catalog_cache() -> None:
    """Drop all cached catalogs."""
    with _cache_lock:
        _cache.clear()


def render_markdown(entry: PatternEntry, source: Optional[str] = None) -> str:
    """Render a catalog entry as a markdown document.

    Args:
        entry: Entry to render
        source: Optional example source code appended as a python block

    Returns:
        Markdown text ending with a newline
    """
    parts: List[str] = [
        f"# {entry.name}",
        "",
        f"*Category: {entry.category.value}*",
        "",
        "## Intent",
        "",
        entry.intent,
    ]

    def bullets(title: str, items: List[str]) -> None:
        if items:
            parts.extend(["", f"## {title}", ""])
            parts.extend(f"- {item}" for item in items)

    bullets("Benefits", entry.benefits)
    bullets("Drawbacks", entry.drawbacks)

    if entry.uml:
        parts.extend(["", "## UML", "", "```", entry.uml, "```"])

    bullets("Interview summary", entry.interview_summary)

    if entry.related:
        parts.extend(["", "## Related", "", ", ".join(entry.related)])

    if source:
        parts.extend(["", "## Example", "", "```python", source.rstrip("\n"), "```"])

    return "\n".join(parts) + "\n"


def _first_line(text: str) -> str:
    lines = text.splitlines()
    return lines[0] if lines else ""


def render_index(catalog: Catalog) -> str:
    """Render a markdown index linking every entry document."""
    parts: List[str] = ["# Pattern catalog", ""]
    for category in PatternCategory:
        entries = catalog.by_category(category)
        if not entries:
            continue
        parts.extend([f"## {category.value.title()}", ""])
        parts.extend(f"- [{e.name}]({e.key}.md): {_first_line(e.intent)}" for e in entries)
        parts.append("")
    return "\n".join(parts)


__all__ = [
    "CatalogLoader",
    "DEFAULT_CATALOG_PATH",
    "load_catalog",
    "invalidate_catalog_cache",
    "render_markdown",
    "render_index",
]
