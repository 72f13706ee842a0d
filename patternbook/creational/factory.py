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

"""Factory: clients ask for a product by name instead of naming its class."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type

from patternbook.core.demo import PatternCategory, demo

logger = logging.getLogger(__name__)


class Shape(ABC):
    @abstractmethod
    def draw(self) -> str:
        """Return the drawing message."""
        ...


class Circle(Shape):
    def draw(self) -> str:
        return "Drawing a Circle"


class Square(Shape):
    def draw(self) -> str:
        return "Drawing a Square"


class Rectangle(Shape):
    def draw(self) -> str:
        return "Drawing a Rectangle"


class ShapeFactory:
    """Creates shapes by case-insensitive name.

    New shapes are added with ``register_shape`` without touching
    ``get_shape``.
    """

    _creators: Dict[str, Type[Shape]] = {
        "circle": Circle,
        "square": Square,
        "rectangle": Rectangle,
    }

    @classmethod
    def get_shape(cls, shape_type: Optional[str]) -> Optional[Shape]:
        """Create a shape.

        Returns:
            A new shape, or None if ``shape_type`` is empty or unknown
        """
        if not shape_type:
            return None
        creator = cls._creators.get(shape_type.strip().lower())
        if creator is None:
            logger.debug(f"Unknown shape type requested: {shape_type}")
            return None
        return creator()

    @classmethod
    def register_shape(cls, name: str, shape_cls: Type[Shape]) -> None:
        if not name or not name.strip():
            raise ValueError("Shape name must not be empty")
        # Copy so registrations on a subclass never leak into the parent.
        cls._creators = {**cls._creators, name.strip().lower(): shape_cls}

    @classmethod
    def available_shapes(cls) -> List[str]:
        return sorted(cls._creators)


@demo("factory", title="Factory Method", category=PatternCategory.CREATIONAL)
def main() -> None:
    for name in ("CIRCLE", "SQUARE", "RECTANGLE", "TRIANGLE"):
        shape = ShapeFactory.get_shape(name)
        if shape is None:
            print(f"Unknown shape type: {name}")
        else:
            print(shape.draw())


if __name__ == "__main__":
    main()
