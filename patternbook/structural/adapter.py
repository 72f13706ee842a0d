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

"""Adapter: make incompatible payment APIs look like ``PaymentProcessor``.

The checkout code only knows ``PaymentProcessor.pay(amount)``. Two existing
gateways with different interfaces are wrapped rather than modified.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from patternbook.core.demo import PatternCategory, demo

Amount = Union[int, float, Decimal]


class PaymentProcessor(ABC):
    """Target interface expected by the client."""

    @abstractmethod
    def pay(self, amount: Amount) -> None: ...


class LegacyPaymentGateway:
    """Adaptee taking a plain number through ``make_payment``."""

    def make_payment(self, value: float) -> None:
        print(f"[LegacyGateway] Payment of {value:.2f} processed")


class StripeClient:
    """Adaptee charging integer minor units."""

    def charge(self, cents: int, currency: str) -> None:
        print(f"[Stripe] Charged {cents} cents ({currency})")


def _to_decimal(amount: Amount) -> Decimal:
    value = Decimal(str(amount))
    if value <= 0:
        raise ValueError(f"Payment amount must be positive, got {amount}")
    return value


class LegacyGatewayAdapter(PaymentProcessor):
    def __init__(self, gateway: LegacyPaymentGateway):
        self._gateway = gateway

    def pay(self, amount: Amount) -> None:
        self._gateway.make_payment(float(_to_decimal(amount)))


class StripeAdapter(PaymentProcessor):
    def __init__(self, client: StripeClient, currency: str = "USD"):
        self._client = client
        self._currency = currency.upper()

    def pay(self, amount: Amount) -> None:
        cents = (_to_decimal(amount) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        self._client.charge(int(cents), self._currency)


def process_order(processor: PaymentProcessor, amount: Amount) -> None:
    processor.pay(amount)


@demo("adapter", title="Adapter", category=PatternCategory.STRUCTURAL)
def main() -> None:
    process_order(LegacyGatewayAdapter(LegacyPaymentGateway()), 500)
    process_order(StripeAdapter(StripeClient()), 125.50)


if __name__ == "__main__":
    main()
