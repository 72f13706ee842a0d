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


"""Tests for the SOLID principle examples."""

import math
from decimal import Decimal

import pytest

from patternbook.solid.dip import EmailSender, MessageSender, NotificationService, SmsSender
from patternbook.solid.isp import Eatable, HumanWorker, RobotWorker, Workable, run_shift
from patternbook.solid.lsp import (
    FlyingSparrow,
    MovingBird,
    Penguin,
    Sparrow,
    SwimmingPenguin,
    make_bird_fly,
    move_bird,
)
from patternbook.solid.ocp import AreaCalculator, Circle, Rectangle, Shape, Square
from patternbook.solid.srp import Invoice, InvoicePrinter, InvoiceRepository


class TestSingleResponsibility:
    """Tests for Invoice, InvoicePrinter and InvoiceRepository."""

    def test_total(self):
        invoice = Invoice(number=1, item="Widget", quantity=3, unit_price=Decimal("4.50"))

        assert invoice.total == Decimal("13.50")

    def test_rejects_non_positive_quantity(self):
        with pytest.raises(ValueError):
            Invoice(number=1, item="Widget", quantity=0, unit_price=Decimal("1"))

    def test_printer(self):
        invoice = Invoice(number=7, item="Gadget", quantity=2, unit_price=Decimal("0.5"))

        assert InvoicePrinter().format(invoice) == "Invoice #7: 2 x Gadget @ 0.50 = 1.00"

    def test_repository(self):
        repo = InvoiceRepository()
        first = Invoice(number=1, item="A", quantity=1, unit_price=Decimal("1"))
        replacement = Invoice(number=1, item="B", quantity=1, unit_price=Decimal("2"))

        assert repo.save(first) == 1
        assert repo.save(replacement) == 1
        assert repo.find(1) is replacement
        assert repo.find(2) is None


class TestOpenClosed:
    """Tests for AreaCalculator."""

    def test_total_area(self):
        total = AreaCalculator().total_area([Circle(1), Rectangle(3, 4), Square(2)])

        assert total == pytest.approx(math.pi + 16)

    def test_new_shape_without_changing_calculator(self):
        class Triangle(Shape):
            def __init__(self, base, height):
                self.base = base
                self.height = height

            def area(self):
                return self.base * self.height / 2

        assert AreaCalculator().total_area([Triangle(4, 3), Square(1)]) == 7

    def test_empty(self):
        assert AreaCalculator().total_area([]) == 0


class TestLiskovSubstitution:
    """Tests for the violation and its fix."""

    def test_violation(self, capsys):
        make_bird_fly(Sparrow())
        with pytest.raises(NotImplementedError):
            make_bird_fly(Penguin())

        assert capsys.readouterr().out == "Sparrow is flying\n"

    def test_fix_substitutes(self, capsys):
        birds = [FlyingSparrow(), SwimmingPenguin()]
        for bird in birds:
            assert isinstance(bird, MovingBird)
            move_bird(bird)

        assert capsys.readouterr().out.splitlines() == ["Sparrow is flying", "Penguin is swimming"]

    def test_penguin_has_no_fly(self):
        assert not hasattr(SwimmingPenguin(), "fly")


class TestInterfaceSegregation:
    """Tests for the small worker protocols."""

    def test_protocol_membership(self):
        assert isinstance(HumanWorker(), Workable)
        assert isinstance(HumanWorker(), Eatable)
        assert isinstance(RobotWorker(), Workable)
        assert not isinstance(RobotWorker(), Eatable)

    def test_run_shift(self, capsys):
        run_shift([RobotWorker(), HumanWorker()])

        assert capsys.readouterr().out.splitlines() == [
            "Robot is working",
            "Human is working",
            "Human is eating lunch",
        ]


class RecordingSender(MessageSender):
    def __init__(self):
        self.sent = []

    def send(self, message):
        self.sent.append(message)


class TestDependencyInversion:
    """Tests for NotificationService."""

    def test_any_sender(self):
        sender = RecordingSender()

        NotificationService(sender).notify("hello")

        assert sender.sent == ["hello"]

    @pytest.mark.parametrize("sender_cls, prefix", [(EmailSender, "Email"), (SmsSender, "SMS")])
    def test_bundled_senders(self, capsys, sender_cls, prefix):
        NotificationService(sender_cls()).notify("Ping")

        assert capsys.readouterr().out == f"{prefix} sent: Ping\n"

    @pytest.mark.parametrize("message", ["", "   "])
    def test_empty_message(self, message):
        sender = RecordingSender()

        with pytest.raises(ValueError):
            NotificationService(sender).notify(message)
        assert sender.sent == []
