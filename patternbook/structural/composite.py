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

"""Composite: files and directories share one interface, so a tree is
treated the same way as a single leaf."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator, List

from patternbook.core.demo import PatternCategory, demo


class FileSystemItem(ABC):
    def __init__(self, name: str):
        self.name = name

    @property
    @abstractmethod
    def size(self) -> int:
        """Size in KB."""
        ...

    @abstractmethod
    def show_details(self, indent: int = 0) -> None: ...


class File(FileSystemItem):
    def __init__(self, name: str, size_kb: int):
        super().__init__(name)
        if size_kb < 0:
            raise ValueError(f"File size cannot be negative: {size_kb}")
        self._size = size_kb

    @property
    def size(self) -> int:
        return self._size

    def show_details(self, indent: int = 0) -> None:
        print(f"{' ' * indent}File: {self.name} ({self.size} KB)")


class Directory(FileSystemItem):
    def __init__(self, name: str):
        super().__init__(name)
        self._children: List[FileSystemItem] = []

    def add(self, item: FileSystemItem) -> "Directory":
        if item is self:
            raise ValueError("A directory cannot contain itself")
        self._children.append(item)
        return self

    def remove(self, item: FileSystemItem) -> bool:
        try:
            self._children.remove(item)
        except ValueError:
            return False
        return True

    @property
    def children(self) -> List[FileSystemItem]:
        return list(self._children)

    def __iter__(self) -> Iterator[FileSystemItem]:
        return iter(self._children)

    @property
    def size(self) -> int:
        return sum(child.size for child in self._children)

    def show_details(self, indent: int = 0) -> None:
        print(f"{' ' * indent}Directory: {self.name} (total {self.size} KB)")
        for child in self._children:
            child.show_details(indent + 2)


@demo("composite", title="Composite", category=PatternCategory.STRUCTURAL)
def main() -> None:
    src = Directory("src").add(File("main.py", 10)).add(File("util.py", 8))
    root = Directory("root").add(File("readme.md", 2)).add(src)
    root.show_details()


if __name__ == "__main__":
    main()
