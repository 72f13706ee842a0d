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

"""Run demos and capture what they print.

Example Usage:
    from patternbook.core.runner import DemoRunner

    runner = DemoRunner()
    result = runner.run("builder")
    for line in result.lines:
        print(line)
"""

from __future__ import annotations

import io
import logging
import threading
import time
from contextlib import redirect_stdout
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from patternbook.core.demo import DemoRegistry, DemoSpec, PatternCategory, load_builtin_demos
from patternbook.core.errors import DemoExecutionError

logger = logging.getLogger(__name__)


@dataclass
class DemoResult:
    """Captured output of one demo run."""

    key: str
    title: str
    lines: List[str] = field(default_factory=list)
    duration_ms: float = 0.0
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def output(self) -> str:
        """Captured output joined with newlines."""
        return "\n".join(self.lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "title": self.title,
            "lines": list(self.lines),
            "duration_ms": round(self.duration_ms, 3),
            "error": self.error,
        }


class DemoRunner:
    """Runs registered demos with standard output captured.

    Redirecting ``sys.stdout`` is process-global, so runs are serialized
    with a class-level lock.
    """

    _run_lock = threading.Lock()

    def __init__(self, registry: Optional[DemoRegistry] = None):
        """Initialize the runner.

        Args:
            registry: Registry to resolve keys from. Defaults to the global
                registry populated with the bundled demos.
        """
        self._registry = registry if registry is not None else load_builtin_demos()

    @property
    def registry(self) -> DemoRegistry:
        return self._registry

    def run(self, key: str, raise_on_error: bool = True) -> DemoResult:
        """Run one demo.

        Args:
            key: Demo key
            raise_on_error: Raise DemoExecutionError if the demo fails,
                otherwise record the failure on the result

        Returns:
            DemoResult with the printed lines

        Raises:
            DemoNotFoundError: If the key is not registered
            DemoExecutionError: If the demo raised and raise_on_error is set
        """
        return self._run_spec(self._registry.require(key), raise_on_error)

    def run_all(self, category: Optional[PatternCategory] = None) -> List[DemoResult]:
        """Run every registered demo in listing order.

        A failing demo is recorded on its result and does not stop the rest.
        """
        return [
            self._run_spec(spec, raise_on_error=False)
            for spec in self._registry.list_specs(category)
        ]

    def _run_spec(self, spec: DemoSpec, raise_on_error: bool) -> DemoResult:
        buffer = io.StringIO()
        error: Optional[BaseException] = None

        with self._run_lock:
            start = time.perf_counter()
            try:
                with redirect_stdout(buffer):
                    spec.entry()
            except Exception as e:
                error = e
            duration_ms = (time.perf_counter() - start) * 1000

        result = DemoResult(
            key=spec.key,
            title=spec.title,
            lines=buffer.getvalue().splitlines(),
            duration_ms=duration_ms,
        )

        if error is not None:
            if raise_on_error:
                raise DemoExecutionError(spec.key, error) from error
            result.error = f"{type(error).__name__}: {error}"
            logger.warning(f"Demo '{spec.key}' failed: {result.error}")
        else:
            logger.debug(f"Demo '{spec.key}' printed {len(result.lines)} lines in {duration_ms:.2f}ms")

        return result


__all__ = [
    "DemoResult",
    "DemoRunner",
]
