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

"""Base classes for process-wide registries.

Design Pattern: Template Method + Singleton
==========================================
- SingletonRegistry owns the get_instance()/reset_instance() machinery
- KeyedRegistry adds thread-safe storage of items by string key
- Subclasses add domain-specific validation on top

Usage:
    from patternbook.core.registry_base import KeyedRegistry

    class RecipeRegistry(KeyedRegistry["RecipeRegistry", Recipe]):
        pass

    registry = RecipeRegistry.get_instance()
    registry.register("pasta", recipe)

    # For testing
    RecipeRegistry.reset_instance()
"""

from __future__ import annotations

import logging
import threading
from abc import ABC
from typing import Any, ClassVar, Dict, Generic, List, Optional, TypeVar

logger = logging.getLogger(__name__)

R = TypeVar("R", bound="SingletonRegistry[Any]")
ItemT = TypeVar("ItemT")


class SingletonRegistry(ABC, Generic[R]):
    """Base class for thread-safe singleton registries.

    Each subclass gets its own ``_instance`` and ``_lock`` through
    ``__init_subclass__`` so that two registry types never share state.
    Direct construction stays allowed; tests rely on it to build isolated
    registries.
    """

    _instance: ClassVar[Optional[Any]] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._instance = None
        cls._lock = threading.Lock()

    @classmethod
    def get_instance(cls: type[R]) -> R:
        """Get the singleton instance, creating it on first use.

        Returns:
            The singleton registry instance
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
                    logger.debug(f"{cls.__name__} singleton instance created")
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the singleton instance (test isolation only)."""
        with cls._lock:
            cls._instance = None
            logger.debug(f"{cls.__name__} singleton instance reset")

    @classmethod
    def is_initialized(cls) -> bool:
        """Check if the singleton instance exists."""
        return cls._instance is not None


class KeyedRegistry(SingletonRegistry[R], Generic[R, ItemT]):
    """Singleton registry storing items by string key."""

    def __init__(self) -> None:
        self._items: Dict[str, ItemT] = {}
        self._items_lock = threading.RLock()

    def register(self, key: str, item: ItemT) -> None:
        """Register an item, replacing any previous item with the same key.

        Args:
            key: Unique key for the item
            item: The item to register
        """
        with self._items_lock:
            self._items[key] = item
            logger.debug(f"{type(self).__name__}: Registered '{key}'")

    def unregister(self, key: str) -> bool:
        """Remove an item.

        Returns:
            True if the item was found and removed
        """
        with self._items_lock:
            if key in self._items:
                del self._items[key]
                logger.debug(f"{type(self).__name__}: Unregistered '{key}'")
                return True
            return False

    def get(self, key: str) -> Optional[ItemT]:
        """Get an item by key, or None if it is not registered."""
        with self._items_lock:
            return self._items.get(key)

    def contains(self, key: str) -> bool:
        with self._items_lock:
            return key in self._items

    def keys(self) -> List[str]:
        with self._items_lock:
            return list(self._items.keys())

    def values(self) -> List[ItemT]:
        with self._items_lock:
            return list(self._items.values())

    def count(self) -> int:
        with self._items_lock:
            return len(self._items)

    def clear(self) -> int:
        """Remove all items.

        Returns:
            Number of items that were cleared
        """
        with self._items_lock:
            count = len(self._items)
            self._items.clear()
            logger.debug(f"{type(self).__name__}: Cleared {count} items")
            return count


__all__ = [
    "SingletonRegistry",
    "KeyedRegistry",
]
