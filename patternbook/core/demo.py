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

"""Demo registration.

Every example module exposes a ``main()`` function decorated with ``@demo``.
The decorator records a ``DemoSpec`` in the process-wide ``DemoRegistry`` and
returns the function unchanged, so the module still runs on its own:

    @demo("builder", title="Builder", category=PatternCategory.CREATIONAL)
    def main() -> None:
        ...

    if __name__ == "__main__":
        main()

``load_builtin_demos()`` imports every bundled example module so that all
decorators have run before the registry is queried.
"""

from __future__ import annotations

import importlib
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from patternbook.core.errors import DemoNotFoundError, DuplicateDemoError
from patternbook.core.registry_base import KeyedRegistry

logger = logging.getLogger(__name__)

DemoEntry = Callable[[], None]

_KEY_RE = re.compile(r"^[a-z][a-z0-9]*(?:-[a-z0-9]+)*$")


class PatternCategory(str, Enum):
    """Grouping used for listing demos. Declaration order is display order."""

    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"
    SOLID = "solid"

    @property
    def order(self) -> int:
        return list(PatternCategory).index(self)


@dataclass(frozen=True)
class DemoSpec:
    """A registered demo."""

    key: str
    title: str
    category: PatternCategory
    entry: DemoEntry
    module: str

    @property
    def sort_key(self) -> Tuple[int, str]:
        return (self.category.order, self.key)


class DemoRegistry(KeyedRegistry["DemoRegistry", DemoSpec]):
    """Registry of all known demos, keyed by demo key."""

    def register(self, key: str, item: DemoSpec) -> None:
        """Register a demo under its own key.

        Registering the same entry twice (a module imported again) is a no-op.

        Raises:
            ValueError: If ``key`` differs from ``item.key``
            DuplicateDemoError: If another demo already uses the key
        """
        if key != item.key:
            raise ValueError(f"Demo key mismatch: {key!r} != {item.key!r}")
        with self._items_lock:
            existing = self._items.get(key)
            if existing is not None:
                if existing.module == item.module and existing.entry.__qualname__ == item.entry.__qualname__:
                    return
                raise DuplicateDemoError(key, existing.module)
            super().register(key, item)

    def register_spec(self, spec: DemoSpec) -> None:
        """Register a demo keyed by ``spec.key``; see ``register``."""
        self.register(spec.key, spec)

    def require(self, key: str) -> DemoSpec:
        """Get a demo by key.

        Raises:
            DemoNotFoundError: If no demo is registered under ``key``
        """
        spec = self.get(key)
        if spec is None:
            raise DemoNotFoundError(key, available=[s.key for s in self.list_specs()])
        return spec

    def list_specs(self, category: Optional[PatternCategory] = None) -> List[DemoSpec]:
        """List demos ordered by category, then key."""
        specs = self.values()
        if category is not None:
            specs = [s for s in specs if s.category == category]
        return sorted(specs, key=lambda s: s.sort_key)


def demo(
    key: str,
    title: str,
    category: PatternCategory,
) -> Callable[[DemoEntry], DemoEntry]:
    """Register the decorated function as the entry point of a demo.

    Args:
        key: Lowercase, hyphen-separated identifier (e.g. ``abstract-factory``)
        title: Human-readable name
        category: Listing group

    Raises:
        ValueError: If ``key`` is not a valid demo key
    """
    if not _KEY_RE.match(key):
        raise ValueError(f"Invalid demo key: {key!r}")

    def decorator(func: DemoEntry) -> DemoEntry:
        if func.__module__ == "__main__":
            # Example executed as a script; nothing to discover.
            return func
        spec = DemoSpec(
            key=key,
            title=title,
            category=PatternCategory(category),
            entry=func,
            module=func.__module__,
        )
        DemoRegistry.get_instance().register_spec(spec)
        func.__demo_spec__ = spec  # type: ignore[attr-defined]
        return func

    return decorator


BUILTIN_DEMO_MODULES: Tuple[str, ...] = (
    "patternbook.creational.singleton",
    "patternbook.creational.factory",
    "patternbook.creational.abstract_factory",
    "patternbook.creational.builder",
    "patternbook.creational.prototype",
    "patternbook.structural.adapter",
    "patternbook.structural.bridge",
    "patternbook.structural.composite",
    "patternbook.structural.decorator",
    "patternbook.structural.facade",
    "patternbook.structural.proxy",
    "patternbook.structural.flyweight",
    "patternbook.behavioral.iterator",
    "patternbook.solid.srp",
    "patternbook.solid.ocp",
    "patternbook.solid.lsp",
    "patternbook.solid.isp",
    "patternbook.solid.dip",
)


def load_builtin_demos() -> DemoRegistry:
    """Import every bundled example module and return the populated registry.

    Modules already imported are not re-executed, so after a registry reset
    their specs are registered again from the module objects.
    """
    registry = DemoRegistry.get_instance()
    for module_name in BUILTIN_DEMO_MODULES:
        module = importlib.import_module(module_name)
        entry = getattr(module, "main", None)
        spec = getattr(entry, "__demo_spec__", None)
        if spec is not None and not registry.contains(spec.key):
            registry.register_spec(spec)
    logger.debug(f"Loaded {registry.count()} demos")
    return registry


__all__ = [
    "PatternCategory",
    "DemoSpec",
    "DemoRegistry",
    "DemoEntry",
    "demo",
    "BUILTIN_DEMO_MODULES",
    "load_builtin_demos",
]
