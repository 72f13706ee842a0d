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

"""Pattern catalog: intent, benefits, UML sketches and interview talking points."""

from patternbook.catalog.loader import (
    DEFAULT_CATALOG_PATH,
    CatalogLoader,
    invalidate_catalog_cache,
    load_catalog,
    render_index,
    render_markdown,
)
from patternbook.catalog.models import Catalog, PatternEntry

__all__ = [
    "Catalog",
    "PatternEntry",
    "CatalogLoader",
    "DEFAULT_CATALOG_PATH",
    "load_catalog",
    "invalidate_catalog_cache",
    "render_markdown",
    "render_index",
]
