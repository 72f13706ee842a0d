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

"""Flyweight: thousands of trees share a handful of TreeType objects.

Intrinsic state (name, color, texture) lives in the shared ``TreeType``.
Extrinsic state (position) stays in each lightweight ``Tree`` and is passed
to the flyweight when drawing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from patternbook.core.demo import PatternCategory, demo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TreeType:
    name: str
    color: str
    texture: str

    def draw(self, x: int, y: int) -> None:
        print(f"Drawing {self.name} tree ({self.color}, {self.texture}) at ({x}, {y})")


class TreeFactory:
    """Hands out one shared TreeType per (name, color, texture)."""

    def __init__(self) -> None:
        self._types: Dict[Tuple[str, str, str], TreeType] = {}

    def get_tree_type(self, name: str, color: str, texture: str) -> TreeType:
        key = (name, color, texture)
        tree_type = self._types.get(key)
        if tree_type is None:
            tree_type = TreeType(name, color, texture)
            self._types[key] = tree_type
            logger.debug(f"Created tree type {key}")
        return tree_type

    @property
    def type_count(self) -> int:
        return len(self._types)


@dataclass
class Tree:
    x: int
    y: int
    tree_type: TreeType

    def draw(self) -> None:
        self.tree_type.draw(self.x, self.y)


class Forest:
    def __init__(self, factory: Optional[TreeFactory] = None):
        self.factory = factory if factory is not None else TreeFactory()
        self.trees: List[Tree] = []

    def plant_tree(self, x: int, y: int, name: str, color: str, texture: str) -> Tree:
        tree = Tree(x, y, self.factory.get_tree_type(name, color, texture))
        self.trees.append(tree)
        return tree

    def draw(self) -> None:
        for tree in self.trees:
            tree.draw()


@demo("flyweight", title="Flyweight", category=PatternCategory.STRUCTURAL)
def main() -> None:
    forest = Forest()
    forest.plant_tree(1, 2, "Oak", "green", "rough")
    forest.plant_tree(5, 7, "Oak", "green", "rough")
    forest.plant_tree(3, 4, "Pine", "dark green", "needles")
    forest.plant_tree(8, 1, "Oak", "green", "rough")
    forest.draw()

    print(f"Trees planted: {len(forest.trees)}, tree types created: {forest.factory.type_count}")


if __name__ == "__main__":
    main()
