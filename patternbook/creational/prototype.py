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

"""Prototype: create objects by cloning a configured instance.

Clones are deep copies, so mutating a clone's mutable fields (``tags``)
never reaches the prototype kept in the registry.
"""

from __future__ import annotations

import copy
from typing import Dict, List, Optional

from patternbook.core.demo import PatternCategory, demo


class Prototype:
    def clone(self) -> "Prototype":
        return copy.deepcopy(self)


class Shape(Prototype):
    def __init__(self, color: str, tags: Optional[List[str]] = None):
        self.color = color
        self.tags: List[str] = list(tags or [])


class Circle(Shape):
    def __init__(self, color: str, radius: int, tags: Optional[List[str]] = None):
        super().__init__(color, tags)
        self.radius = radius

    def __str__(self) -> str:
        return f"Circle(color={self.color}, radius={self.radius}, tags={self.tags})"


class Rectangle(Shape):
    def __init__(self, color: str, width: int, height: int, tags: Optional[List[str]] = None):
        super().__init__(color, tags)
        self.width = width
        self.height = height

    def __str__(self) -> str:
        return (
            f"Rectangle(color={self.color}, width={self.width}, "
            f"height={self.height}, tags={self.tags})"
        )


class PrototypeRegistry:
    """Named prototypes; ``create`` hands out clones, never the originals."""

    def __init__(self) -> None:
        self._prototypes: Dict[str, Prototype] = {}

    def add(self, key: str, prototype: Prototype) -> None:
        self._prototypes[key] = prototype

    def remove(self, key: str) -> bool:
        return self._prototypes.pop(key, None) is not None

    def prototype(self, key: str) -> Optional[Prototype]:
        return self._prototypes.get(key)

    def create(self, key: str) -> Optional[Prototype]:
        prototype = self._prototypes.get(key)
        return prototype.clone() if prototype is not None else None

    def keys(self) -> List[str]:
        return sorted(self._prototypes)


@demo("prototype", title="Prototype", category=PatternCategory.CREATIONAL)
def main() -> None:
    registry = PrototypeRegistry()
    registry.add("red-circle", Circle("red", 10, tags=["base"]))
    registry.add("green-rectangle", Rectangle("green", 4, 5))

    original = registry.prototype("red-circle")
    clone = registry.create("red-circle")
    clone.color = "blue"
    clone.tags.append("clone")

    print(original)
    print(clone)
    print(f"Prototype unchanged: {original.color == 'red' and original.tags == ['base']}")
    print(registry.create("green-rectangle"))

    if registry.create("hexagon") is None:
        print("Unknown prototype: hexagon")


if __name__ == "__main__":
    main()
