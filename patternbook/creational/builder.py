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

"""Builder: assemble an immutable Computer step by step.

Required parts (CPU, RAM) go to the builder's constructor; optional parts
are fluent setters that return the builder:

    computer = (
        Computer.Builder("Intel i9", "32GB")
        .set_graphics_card(True)
        .set_bluetooth(True)
        .build()
    )
"""

from __future__ import annotations

from dataclasses import dataclass

from patternbook.core.demo import PatternCategory, demo
from patternbook.core.errors import BuildError


def _flag(value: bool) -> str:
    return "true" if value else "false"


@dataclass(frozen=True)
class Computer:
    cpu: str
    ram: str
    has_graphics_card: bool = False
    has_bluetooth: bool = False

    def __str__(self) -> str:
        return (
            f"Computer [CPU={self.cpu}, RAM={self.ram}, "
            f"GraphicsCard={_flag(self.has_graphics_card)}, "
            f"Bluetooth={_flag(self.has_bluetooth)}]"
        )

    def print_specs(self) -> None:
        print(self)

    class Builder:
        def __init__(self, cpu: str, ram: str):
            self._cpu = cpu
            self._ram = ram
            self._has_graphics_card = False
            self._has_bluetooth = False

        def set_graphics_card(self, value: bool) -> "Computer.Builder":
            self._has_graphics_card = bool(value)
            return self

        def set_bluetooth(self, value: bool) -> "Computer.Builder":
            self._has_bluetooth = bool(value)
            return self

        def build(self) -> "Computer":
            """Create the computer.

            Raises:
                BuildError: If CPU or RAM is blank
            """
            for field_name, value in (("cpu", self._cpu), ("ram", self._ram)):
                if not value or not value.strip():
                    raise BuildError(f"Computer requires a {field_name.upper()}", field=field_name)
            return Computer(
                cpu=self._cpu.strip(),
                ram=self._ram.strip(),
                has_graphics_card=self._has_graphics_card,
                has_bluetooth=self._has_bluetooth,
            )


@demo("builder", title="Builder", category=PatternCategory.CREATIONAL)
def main() -> None:
    gaming_pc = Computer.Builder("Intel i9", "32GB").set_graphics_card(True).set_bluetooth(True).build()
    office_pc = Computer.Builder("Intel i5", "16GB").set_graphics_card(False).set_bluetooth(True).build()

    gaming_pc.print_specs()
    office_pc.print_specs()


if __name__ == "__main__":
    main()
