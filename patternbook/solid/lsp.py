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

"""Liskov Substitution: a subclass must be usable wherever its base is.

Violation: ``Penguin`` inherits ``Bird.fly`` and can only refuse by raising,
so code written against ``Bird`` breaks when handed a penguin.

Fix: model what birds have in common (``move``) in the base and put flying
in a ``FlyingBird`` subtype that only real flyers extend.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from patternbook.core.demo import PatternCategory, demo


# Violation


class Bird:
    name = "Bird"

    def fly(self) -> str:
        return f"{self.name} is flying"


class Sparrow(Bird):
    name = "Sparrow"


class Penguin(Bird):
    name = "Penguin"

    def fly(self) -> str:
        raise NotImplementedError(f"{self.name} cannot fly")


def make_bird_fly(bird: Bird) -> None:
    print(bird.fly())


# Fix


class MovingBird(ABC):
    name = "Bird"

    @abstractmethod
    def move(self) -> str: ...


class FlyingBird(MovingBird):
    def fly(self) -> str:
        return f"{self.name} is flying"

    def move(self) -> str:
        return self.fly()


class SwimmingBird(MovingBird):
    def swim(self) -> str:
        return f"{self.name} is swimming"

    def move(self) -> str:
        return self.swim()


class FlyingSparrow(FlyingBird):
    name = "Sparrow"


class SwimmingPenguin(SwimmingBird):
    name = "Penguin"


def move_bird(bird: MovingBird) -> None:
    print(bird.move())


@demo("lsp", title="Liskov Substitution Principle", category=PatternCategory.SOLID)
def main() -> None:
    for bird in (Sparrow(), Penguin()):
        try:
            make_bird_fly(bird)
        except NotImplementedError as e:
            print(f"Error: {e}")

    for moving in (FlyingSparrow(), SwimmingPenguin()):
        move_bird(moving)


if __name__ == "__main__":
    main()
