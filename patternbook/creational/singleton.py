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

"""Singleton: five ways to guarantee a class has exactly one instance.

Variants:
    EagerSingleton          created when this module is imported
    LazySingleton           created on first use, no locking (not thread-safe)
    ThreadSafeSingleton     lock taken on every call
    DoubleCheckedSingleton  check, lock, check again; lock only on first use
    MeyersSingleton         created on first use; the interpreter's import
                            lock guarantees once-only initialization

All variants forbid direct construction and copying.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, ClassVar, Optional, TypeVar

from patternbook.core.demo import PatternCategory, demo
from patternbook.core.errors import SingletonViolationError

logger = logging.getLogger(__name__)

S = TypeVar("S", bound="SingletonBase")

_CONSTRUCT_TOKEN = object()


class SingletonBase:
    """Construction and copy guards shared by every variant.

    ``__init__`` only accepts the module-private construction token, so
    ``_construct()`` is the only way in. Each subclass gets its own
    ``_instance`` and ``_lock`` through ``__init_subclass__``.
    """

    _instance: ClassVar[Optional[Any]] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._instance = None
        cls._lock = threading.Lock()

    def __init__(self, _token: object = None) -> None:
        if _token is not _CONSTRUCT_TOKEN:
            raise SingletonViolationError(type(self).__name__)

    @classmethod
    def _construct(cls: type[S]) -> S:
        instance = cls(_CONSTRUCT_TOKEN)
        logger.debug(f"{cls.__name__} instance created")
        return instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the instance (test isolation only)."""
        cls._instance = None

    def __copy__(self) -> Any:
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo: Any) -> Any:
        raise TypeError(f"{type(self).__name__} cannot be copied")


class EagerSingleton(SingletonBase):
    @classmethod
    def get_instance(cls) -> "EagerSingleton":
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = cls._construct()


EagerSingleton._instance = EagerSingleton._construct()


class LazySingleton(SingletonBase):
    """Two threads racing on the first call can both construct an instance."""

    @classmethod
    def get_instance(cls) -> "LazySingleton":
        if cls._instance is None:
            cls._instance = cls._construct()
        return cls._instance


class ThreadSafeSingleton(SingletonBase):
    @classmethod
    def get_instance(cls) -> "ThreadSafeSingleton":
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls._construct()
            return cls._instance


class DoubleCheckedSingleton(SingletonBase):
    @classmethod
    def get_instance(cls) -> "DoubleCheckedSingleton":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls._construct()
        return cls._instance


class MeyersSingleton(SingletonBase):
    @classmethod
    def get_instance(cls) -> "MeyersSingleton":
        if cls._instance is None:
            from patternbook.creational import _singleton_holder

            cls._instance = _singleton_holder.INSTANCE
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        # The holder module keeps its instance; only the cached reference goes.
        cls._instance = None


VARIANTS = (
    EagerSingleton,
    LazySingleton,
    ThreadSafeSingleton,
    DoubleCheckedSingleton,
    MeyersSingleton,
)


def distinct_instances(cls: Any, workers: int = 8) -> int:
    """Call ``cls.get_instance()`` from ``workers`` threads at once.

    Returns:
        Number of distinct objects handed out
    """
    barrier = threading.Barrier(workers)

    def fetch() -> int:
        barrier.wait()
        return id(cls.get_instance())

    with ThreadPoolExecutor(max_workers=workers) as pool:
        ids = list(pool.map(lambda _: fetch(), range(workers)))
    return len(set(ids))


@demo("singleton", title="Singleton", category=PatternCategory.CREATIONAL)
def main() -> None:
    for cls in VARIANTS:
        print(f"{cls.__name__}: same instance = {cls.get_instance() is cls.get_instance()}")

    for cls in (ThreadSafeSingleton, DoubleCheckedSingleton):
        # Start from no instance so the threads race on construction.
        cls.reset_instance()
        print(f"{cls.__name__}: {distinct_instances(cls)} distinct instance(s) across 8 threads")


if __name__ == "__main__":
    main()
