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

"""Decorator: wrap a coffee in add-ons at runtime instead of subclassing
every combination (MilkSugarCoffee, MilkWhippedCreamCoffee, ...).

This is the object-structural pattern, not Python's ``@decorator`` syntax.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from patternbook.core.demo import PatternCategory, demo


class Coffee(ABC):
    @property
    @abstractmethod
    def description(self) -> str: ...

    @property
    @abstractmethod
    def cost(self) -> Decimal: ...

    def __str__(self) -> str:
        return f"{self.description}: ${self.cost:.2f}"


class SimpleCoffee(Coffee):
    @property
    def description(self) -> str:
        return "Simple Coffee"

    @property
    def cost(self) -> Decimal:
        return Decimal("2.00")


class CoffeeDecorator(Coffee):
    """Adds ``name`` to the description and ``price`` to the cost."""

    name: str = ""
    price: Decimal = Decimal("0")

    def __init__(self, coffee: Coffee):
        self._coffee = coffee

    @property
    def description(self) -> str:
        return f"{self._coffee.description}, {self.name}"

    @property
    def cost(self) -> Decimal:
        return self._coffee.cost + self.price


class Milk(CoffeeDecorator):
    name = "Milk"
    price = Decimal("0.50")


class Sugar(CoffeeDecorator):
    name = "Sugar"
    price = Decimal("0.25")


class WhippedCream(CoffeeDecorator):
    name = "Whipped Cream"
    price = Decimal("0.75")


@demo("decorator", title="Decorator", category=PatternCategory.STRUCTURAL)
def main() -> None:
    coffee: Coffee = SimpleCoffee()
    print(coffee)

    for add_on in (Milk, Sugar, WhippedCream):
        coffee = add_on(coffee)
        print(coffee)


if __name__ == "__main__":
    main()
