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

"""Proxy: a stand-in with the same interface as the real object.

Two flavours:
- Virtual proxy (``ProxyImage``): defers the expensive load until first use
- Protection proxy (``ProtectedDocument``): checks the caller's role first
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import FrozenSet, Iterable, Optional

from patternbook.core.demo import PatternCategory, demo


class Image(ABC):
    @abstractmethod
    def display(self) -> None: ...


class RealImage(Image):
    def __init__(self, filename: str):
        self.filename = filename
        self._load_from_disk()

    def _load_from_disk(self) -> None:
        print(f"Loading image: {self.filename}")

    def display(self) -> None:
        print(f"Displaying image: {self.filename}")


class ProxyImage(Image):
    def __init__(self, filename: str):
        self.filename = filename
        self._real_image: Optional[RealImage] = None

    @property
    def is_loaded(self) -> bool:
        return self._real_image is not None

    def display(self) -> None:
        if self._real_image is None:
            self._real_image = RealImage(self.filename)
        self._real_image.display()


class Document(ABC):
    @abstractmethod
    def read(self, role: str) -> bool:
        """Read the document as ``role``; True if it was read."""
        ...


class RealDocument(Document):
    def __init__(self, name: str):
        self.name = name

    def read(self, role: str) -> bool:
        print(f"Reading document: {self.name}")
        return True


class ProtectedDocument(Document):
    def __init__(self, document: Document, allowed_roles: Iterable[str]):
        self._document = document
        self._allowed_roles: FrozenSet[str] = frozenset(r.lower() for r in allowed_roles)

    def read(self, role: str) -> bool:
        if role.lower() not in self._allowed_roles:
            print(f"Access denied for role '{role}'")
            return False
        return self._document.read(role)


@demo("proxy", title="Proxy", category=PatternCategory.STRUCTURAL)
def main() -> None:
    image = ProxyImage("photo.png")
    image.display()
    image.display()

    payroll = ProtectedDocument(RealDocument("payroll.xlsx"), allowed_roles=["admin", "hr"])
    payroll.read("guest")
    payroll.read("hr")


if __name__ == "__main__":
    main()
