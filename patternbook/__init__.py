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

"""
patternbook - runnable SOLID and Gang-of-Four design pattern examples.

Every example is an independent module with a ``main()`` that prints a short
demonstration. The package adds a registry so the examples can be listed,
run with their output captured, and explained from a YAML catalog.

Simple API:
    from patternbook import DemoRunner

    result = DemoRunner().run("decorator")
    print(result.output)

Command line:
    patternbook list
    patternbook run builder
    patternbook explain flyweight
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"

from patternbook.core import (
    BuildError,
    CatalogError,
    ConfigurationError,
    DemoExecutionError,
    DemoNotFoundError,
    DemoRegistry,
    DemoResult,
    DemoRunner,
    DemoSpec,
    DuplicateDemoError,
    PatternbookError,
    PatternCategory,
    SingletonViolationError,
    demo,
    load_builtin_demos,
)

__all__ = [
    # Demos
    "DemoRunner",
    "DemoResult",
    "DemoRegistry",
    "DemoSpec",
    "PatternCategory",
    "demo",
    "load_builtin_demos",
    # Errors
    "PatternbookError",
    "DemoNotFoundError",
    "DuplicateDemoError",
    "DemoExecutionError",
    "CatalogError",
    "ConfigurationError",
    "SingletonViolationError",
    "BuildError",
]
