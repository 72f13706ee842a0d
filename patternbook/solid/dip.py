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

"""Dependency Inversion: depend on abstractions, not concretions.

``NotificationService`` (high level) receives any ``MessageSender`` instead
of constructing an ``EmailSender`` itself, so SMS, push, or a test double can
be swapped in without changing the service.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from patternbook.core.demo import PatternCategory, demo


class MessageSender(ABC):
    @abstractmethod
    def send(self, message: str) -> None: ...


class EmailSender(MessageSender):
    def send(self, message: str) -> None:
        print(f"Email sent: {message}")


class SmsSender(MessageSender):
    def send(self, message: str) -> None:
        print(f"SMS sent: {message}")


class NotificationService:
    def __init__(self, sender: MessageSender):
        self._sender = sender

    def notify(self, message: str) -> None:
        if not message.strip():
            raise ValueError("Notification message must not be empty")
        self._sender.send(message)


@demo("dip", title="Dependency Inversion Principle", category=PatternCategory.SOLID)
def main() -> None:
    for sender in (EmailSender(), SmsSender()):
        NotificationService(sender).notify("Your order has shipped")


if __name__ == "__main__":
    main()
