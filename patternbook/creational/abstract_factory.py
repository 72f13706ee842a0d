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

"""Abstract Factory: one factory per platform creates a matching family of widgets.

``Application`` only sees ``GUIFactory``, ``Button`` and ``Checkbox``; switching
platform means passing a different factory, never editing the application.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from patternbook.core.demo import PatternCategory, demo


class Button(ABC):
    @abstractmethod
    def paint(self) -> str: ...


class Checkbox(ABC):
    @abstractmethod
    def paint(self) -> str: ...


class WindowsButton(Button):
    def paint(self) -> str:
        return "Rendering a button in Windows style"


class WindowsCheckbox(Checkbox):
    def paint(self) -> str:
        return "Rendering a checkbox in Windows style"


class MacButton(Button):
    def paint(self) -> str:
        return "Rendering a button in macOS style"


class MacCheckbox(Checkbox):
    def paint(self) -> str:
        return "Rendering a checkbox in macOS style"


class GUIFactory(ABC):
    """Creates one consistent family of widgets."""

    @abstractmethod
    def create_button(self) -> Button: ...

    @abstractmethod
    def create_checkbox(self) -> Checkbox: ...


class WindowsFactory(GUIFactory):
    def create_button(self) -> Button:
        return WindowsButton()

    def create_checkbox(self) -> Checkbox:
        return WindowsCheckbox()


class MacFactory(GUIFactory):
    def create_button(self) -> Button:
        return MacButton()

    def create_checkbox(self) -> Checkbox:
        return MacCheckbox()


class Application:
    def __init__(self, factory: GUIFactory):
        self.button = factory.create_button()
        self.checkbox = factory.create_checkbox()

    def render_ui(self) -> None:
        print(self.button.paint())
        print(self.checkbox.paint())


_PLATFORM_FACTORIES: Dict[str, Type[GUIFactory]] = {
    "windows": WindowsFactory,
    "win32": WindowsFactory,
    "mac": MacFactory,
    "macos": MacFactory,
    "darwin": MacFactory,
}


def factory_for_platform(platform: str) -> Optional[GUIFactory]:
    """Pick the widget factory for a platform name (``sys.platform`` works).

    Returns:
        A factory, or None for unsupported platforms
    """
    factory_cls = _PLATFORM_FACTORIES.get(platform.strip().lower())
    return factory_cls() if factory_cls else None


@demo("abstract-factory", title="Abstract Factory", category=PatternCategory.CREATIONAL)
def main() -> None:
    for platform in ("windows", "darwin"):
        factory = factory_for_platform(platform)
        if factory is not None:
            Application(factory).render_ui()


if __name__ == "__main__":
    main()
