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

"""Single Responsibility: one reason to change per class.

Instead of an Invoice that computes, prints and saves itself, each concern
has its own class. A new print format touches only ``InvoicePrinter``; a new
storage backend touches only ``InvoiceRepository``.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Optional

from patternbook.core.demo import PatternCategory, demo


@dataclass(frozen=True)
class Invoice:
    number: int
    item: str
    quantity: int
    unit_price: Decimal

    def __post_init__(self) -> None:
        if self.quantity <= 0:
            raise ValueError(f"Invoice quantity must be positive, got {self.quantity}")

    @property
    def total(self) -> Decimal:
        return self.unit_price * self.quantity


class InvoicePrinter:
    def format(self, invoice: Invoice) -> str:
        return (
            f"Invoice #{invoice.number}: {invoice.quantity} x {invoice.item} "
            f"@ {invoice.unit_price:.2f} = {invoice.total:.2f}"
        )


class InvoiceRepository:
    """In-memory store keyed by invoice number."""

    def __init__(self) -> None:
        self._invoices: Dict[int, Invoice] = {}

    def save(self, invoice: Invoice) -> int:
        """Store an invoice, replacing one with the same number.

        Returns:
            Number of stored invoices
        """
        self._invoices[invoice.number] = invoice
        return len(self._invoices)

    def find(self, number: int) -> Optional[Invoice]:
        return self._invoices.get(number)


@demo("srp", title="Single Responsibility Principle", category=PatternCategory.SOLID)
def main() -> None:
    invoice = Invoice(number=1001, item="Widget", quantity=3, unit_price=Decimal("4.50"))

    print(InvoicePrinter().format(invoice))
    stored = InvoiceRepository().save(invoice)
    print(f"Saved invoice #{invoice.number} ({stored} stored)")


if __name__ == "__main__":
    main()
