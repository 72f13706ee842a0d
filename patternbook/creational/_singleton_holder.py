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

"""Holder for MeyersSingleton.

Imported on the first ``MeyersSingleton.get_instance()`` call. Module
execution happens once under the import lock, which plays the role of a
function-local static.

When the singleton module runs as a script (``python -m
patternbook.creational.singleton``) its classes live in ``__main__``; the
holder builds that copy's class so ``get_instance()`` returns an instance of
the class the script actually uses.
"""

import sys

_SINGLETON_MODULE = "patternbook.creational.singleton"

_main = sys.modules.get("__main__")
if getattr(getattr(_main, "__spec__", None), "name", None) == _SINGLETON_MODULE:
    MeyersSingleton = _main.MeyersSingleton
else:
    from patternbook.creational.singleton import MeyersSingleton

INSTANCE = MeyersSingleton._construct()
