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


"""Tests for the behavioral pattern examples."""

import pytest

from patternbook.behavioral.iterator import Book, BookCollection, BookIterator


class TestBookIterator:
    """Tests for has_next()/next() and the Python protocol."""

    def setup_method(self):
        self.shelf = BookCollection()
        for title in ("Design Patterns", "Clean Code", "Refactoring"):
            self.shelf.add_book(Book(title))

    def test_has_next_next(self):
        iterator = self.shelf.create_iterator()
        titles = []
        while iterator.has_next():
            titles.append(iterator.next().title)

        assert titles == ["Design Patterns", "Clean Code", "Refactoring"]

    def test_exhausted_raises_stop_iteration(self):
        iterator = BookIterator([Book("Only")])
        iterator.next()

        assert not iterator.has_next()
        with pytest.raises(StopIteration):
            iterator.next()

    def test_empty_collection(self):
        iterator = BookCollection().create_iterator()

        assert not iterator.has_next()
        assert list(BookCollection()) == []

    def test_for_loop_protocol(self):
        assert [b.title for b in self.shelf] == ["Design Patterns", "Clean Code", "Refactoring"]
        assert len(self.shelf) == 3

    def test_independent_iterators(self):
        first = self.shelf.create_iterator()
        second = self.shelf.create_iterator()
        first.next()

        assert second.next().title == "Design Patterns"
        assert first.next().title == "Clean Code"

    def test_adding_during_iteration(self):
        """An iterator walks the books present when it was created."""
        iterator = self.shelf.create_iterator()
        self.shelf.add_book(Book("Later"))

        assert len(list(iterator)) == 3
        assert len(self.shelf) == 4
