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

"""Iterator: walk a collection without exposing how it stores its items.

``BookIterator`` shows the classic ``has_next()`` / ``next()`` interface and
also implements Python's iterator protocol, which is what ``for`` loops use.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

from patternbook.core.demo import PatternCategory, demo


@dataclass(frozen=True)
class Book:
    title: str
    author: str = ""


class BookIterator:
    def __init__(self, books: List[Book]):
        self._books = books
        self._position = 0

    def has_next(self) -> bool:
        return self._position < len(self._books)

    def next(self) -> Book:
        """Return the next book.

        Raises:
            StopIteration: When the collection is exhausted
        """
        if not self.has_next():
            raise StopIteration
        book = self._books[self._position]
        self._position += 1
        return book

    def __iter__(self) -> "BookIterator":
        return self

    def __next__(self) -> Book:
        return self.next()


class BookCollection:
    def __init__(self) -> None:
        self._books: List[Book] = []

    def add_book(self, book: Book) -> None:
        self._books.append(book)

    def create_iterator(self) -> BookIterator:
        # Iterate over a snapshot so adding books mid-walk is safe.
        return BookIterator(list(self._books))

    def __iter__(self) -> Iterator[Book]:
        return self.create_iterator()

    def __len__(self) -> int:
        return len(self._books)


@demo("iterator", title="Iterator", category=PatternCategory.BEHAVIORAL)
def main() -> None:
    shelf = BookCollection()
    shelf.add_book(Book("Design Patterns", "Gamma, Helm, Johnson, Vlissides"))
    shelf.add_book(Book("Clean Code", "Robert C. Martin"))
    shelf.add_book(Book("Refactoring", "Martin Fowler"))

    iterator = shelf.create_iterator()
    while iterator.has_next():
        print(f"Book: {iterator.next().title}")

    print(f"Total books: {sum(1 for _ in shelf)}")


if __name__ == "__main__":
    main()
