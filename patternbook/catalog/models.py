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

"""Pydantic models for the pattern catalog."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from patternbook.core.demo import PatternCategory
from patternbook.core.errors import CatalogError


class PatternEntry(BaseModel):
    """Prose describing one pattern or principle."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    key: str = Field(..., pattern=r"^[a-z][a-z0-9]*(?:-[a-z0-9]+)*$")
    name: str = Field(..., min_length=1)
    category: PatternCategory
    intent: str = Field(..., min_length=1)
    benefits: List[str] = Field(default_factory=list)
    drawbacks: List[str] = Field(default_factory=list)
    interview_summary: List[str] = Field(default_factory=list)
    uml: str = ""
    related: List[str] = Field(default_factory=list)

    @field_validator("intent", "uml", mode="before")
    @classmethod
    def strip_block_text(cls, v: object) -> object:
        # Runs before min_length, so whitespace-only intent is rejected.
        if isinstance(v, str):
            return v.strip("\n").rstrip()
        return v


class Catalog(BaseModel):
    """All catalog entries, keyed by demo key."""

    entries: Dict[str, PatternEntry] = Field(default_factory=dict)

    def get(self, key: str) -> Optional[PatternEntry]:
        return self.entries.get(key)

    def require(self, key: str) -> PatternEntry:
        """Get an entry by key.

        Raises:
            CatalogError: If no entry exists for ``key``
        """
        entry = self.entries.get(key)
        if entry is None:
            raise CatalogError(f"No catalog entry for '{key}'", key=key)
        return entry

    def keys(self) -> List[str]:
        return sorted(self.entries)

    def by_category(self, category: PatternCategory) -> List[PatternEntry]:
        return sorted(
            (e for e in self.entries.values() if e.category == category),
            key=lambda e: e.key,
        )

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries


__all__ = ["PatternEntry", "Catalog"]
