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

"""Interface Segregation: no client should depend on methods it does not use.

A single ``Worker`` interface with ``work()`` and ``eat()`` would force
``RobotWorker`` to stub out ``eat()``. Two small protocols avoid that.
"""

from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from patternbook.core.demo import PatternCategory, demo


@runtime_checkable
class Workable(Protocol):
    def work(self) -> str: ...


@runtime_checkable
class Eatable(Protocol):
    def eat(self) -> str: ...


class HumanWorker:
    def work(self) -> str:
        return "Human is working"

    def eat(self) -> str:
        return "Human is eating lunch"


class RobotWorker:
    def work(self) -> str:
        return "Robot is working"


def run_shift(workers: Iterable[Workable]) -> None:
    for worker in workers:
        print(worker.work())
        if isinstance(worker, Eatable):
            print(worker.eat())


@demo("isp", title="Interface Segregation Principle", category=PatternCategory.SOLID)
def main() -> None:
    run_shift([HumanWorker(), RobotWorker()])


if __name__ == "__main__":
    main()
