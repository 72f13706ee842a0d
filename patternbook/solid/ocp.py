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

"""Open/Closed: ``AreaCalculator`` is closed for modification, open for extension.

Adding a shape means adding a class with ``area()``; no ``if isinstance``
chain in the calculator has to grow.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Iterable

from patternbook.core.demo import PatternCategory, demo


class Shape(ABC):
    @abstractmethod
    def area(self) -> float: ...


class Circle(Shape):
    def __init__(self, radius: float):
        self.radius = radius

    def area(self) -> float:
        return math.pi * self.radius**2


class Rectangle(Shape):
    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def area(self) -> float:
        return self.width * self.height


class Square(Shape):
    def __init__(self, side: float):
        self.side = side

    def area(self) -> float:
        return self.side**2


class AreaCalculator:
    def total_area(self, shapes: Iterable[Shape]) -> float:
        return sum(shape.area() for shape in shapes)


@demo("ocp", title="Open/Closed Principle", category=PatternCategory.SOLID)
def main() -> None:
    shapes = [Circle(1), Rectangle(3, 4), Square(2)]
    for shape in shapes:
        print(f"{type(shape).__name__} area: {shape.area():.2f}")

    print(f"Total area: {AreaCalculator().total_area(shapes):.2f}")


if __name__ == "__main__":
    main()
