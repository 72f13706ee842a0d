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


"""Tests for the structural pattern examples."""

from decimal import Decimal

import pytest

from patternbook.structural.adapter import (
    LegacyGatewayAdapter,
    LegacyPaymentGateway,
    PaymentProcessor,
    StripeAdapter,
    StripeClient,
    process_order,
)
from patternbook.structural.bridge import TV, AdvancedRemote, Radio, RemoteControl
from patternbook.structural.composite import Directory, File
from patternbook.structural.decorator import Milk, SimpleCoffee, Sugar, WhippedCream
from patternbook.structural.facade import (
    Amplifier,
    DVDPlayer,
    HomeTheaterFacade,
    Lights,
    Projector,
)
from patternbook.structural.flyweight import Forest, TreeFactory
from patternbook.structural.proxy import ProtectedDocument, ProxyImage, RealDocument


class RecordingStripeClient(StripeClient):
    def __init__(self):
        self.charges = []

    def charge(self, cents, currency):
        self.charges.append((cents, currency))


class TestAdapter:
    """Tests for the payment adapters."""

    def test_adapters_are_payment_processors(self):
        assert isinstance(LegacyGatewayAdapter(LegacyPaymentGateway()), PaymentProcessor)
        assert isinstance(StripeAdapter(StripeClient()), PaymentProcessor)

    def test_legacy_gateway(self, capsys):
        process_order(LegacyGatewayAdapter(LegacyPaymentGateway()), Decimal("19.9"))

        assert capsys.readouterr().out == "[LegacyGateway] Payment of 19.90 processed\n"

    @pytest.mark.parametrize(
        "amount, cents",
        [(125.50, 12550), (Decimal("0.015"), 2), (1, 100), ("0.1", 10)],
    )
    def test_stripe_converts_to_cents(self, amount, cents):
        client = RecordingStripeClient()

        StripeAdapter(client, currency="eur").pay(amount)

        assert client.charges == [(cents, "EUR")]

    @pytest.mark.parametrize("amount", [0, -5, Decimal("-0.01")])
    def test_rejects_non_positive(self, amount):
        client = RecordingStripeClient()

        with pytest.raises(ValueError):
            StripeAdapter(client).pay(amount)
        assert client.charges == []


class TestBridge:
    """Tests for remotes and devices."""

    def test_toggle_power(self, capsys):
        tv = TV()
        remote = RemoteControl(tv)

        remote.toggle_power()
        assert tv.is_enabled()
        remote.toggle_power()
        assert not tv.is_enabled()

        assert capsys.readouterr().out.splitlines() == ["TV is now ON", "TV is now OFF"]

    def test_volume_is_clamped(self):
        radio = Radio(volume=95)
        remote = RemoteControl(radio)

        remote.volume_up()
        assert radio.volume == 100
        remote.volume_up()
        assert radio.volume == 100

        radio.set_volume(5)
        remote.volume_down()
        assert radio.volume == 0

    def test_mute(self, capsys):
        remote = AdvancedRemote(TV())

        remote.mute()

        assert remote.device.volume == 0
        assert capsys.readouterr().out == "TV muted\n"

    def test_any_remote_with_any_device(self):
        for remote_cls in (RemoteControl, AdvancedRemote):
            for device_cls in (TV, Radio):
                remote = remote_cls(device_cls())
                remote.volume_up()
                assert remote.device.volume == 40


class TestComposite:
    """Tests for files and directories."""

    def test_sizes(self):
        src = Directory("src").add(File("main.py", 10)).add(File("util.py", 8))
        root = Directory("root").add(File("readme.md", 2)).add(src)

        assert src.size == 18
        assert root.size == 20
        assert Directory("empty").size == 0

    def test_children_and_remove(self):
        readme = File("readme.md", 2)
        root = Directory("root").add(readme)

        assert root.children == [readme]
        assert list(root) == [readme]
        assert root.remove(readme) is True
        assert root.remove(readme) is False
        assert root.size == 0

    def test_children_is_a_copy(self):
        root = Directory("root").add(File("a", 1))

        root.children.clear()

        assert root.size == 1

    def test_rejects_self(self):
        root = Directory("root")

        with pytest.raises(ValueError):
            root.add(root)

    def test_rejects_negative_size(self):
        with pytest.raises(ValueError):
            File("broken", -1)

    def test_show_details_indents(self, capsys):
        Directory("a").add(Directory("b").add(File("c", 1))).show_details()

        assert capsys.readouterr().out.splitlines() == [
            "Directory: a (total 1 KB)",
            "  Directory: b (total 1 KB)",
            "    File: c (1 KB)",
        ]


class TestDecorator:
    """Tests for coffee add-ons."""

    def test_costs_accumulate(self):
        coffee = WhippedCream(Sugar(Milk(SimpleCoffee())))

        assert coffee.cost == Decimal("3.50")
        assert coffee.description == "Simple Coffee, Milk, Sugar, Whipped Cream"

    def test_order_of_wrapping(self):
        coffee = Milk(Sugar(SimpleCoffee()))

        assert coffee.description == "Simple Coffee, Sugar, Milk"
        assert str(coffee) == "Simple Coffee, Sugar, Milk: $2.75"

    def test_same_add_on_twice(self):
        assert Milk(Milk(SimpleCoffee())).cost == Decimal("3.00")


class TestFacade:
    """Tests for the home theater facade."""

    def setup_method(self):
        self.dvd = DVDPlayer()
        self.theater = HomeTheaterFacade(Amplifier(), self.dvd, Projector(), Lights())

    def test_watch_and_end(self, capsys):
        self.theater.watch_movie("Alien")
        assert self.dvd.current_movie == "Alien"

        self.theater.end_movie()
        assert self.dvd.current_movie is None

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Get ready to watch a movie..."
        assert 'Playing "Alien"' in lines
        assert lines[-1] == "Lights on"

    def test_subsystems_remain_usable(self, capsys):
        self.theater.amplifier.set_volume(11)

        assert capsys.readouterr().out == "Amplifier volume set to 11\n"


class TestProxy:
    """Tests for virtual and protection proxies."""

    def test_image_loaded_lazily_once(self, capsys):
        image = ProxyImage("photo.png")
        assert not image.is_loaded
        assert capsys.readouterr().out == ""

        image.display()
        image.display()

        assert image.is_loaded
        out = capsys.readouterr().out
        assert out.count("Loading image: photo.png") == 1
        assert out.count("Displaying image: photo.png") == 2

    @pytest.mark.parametrize("role, allowed", [("admin", True), ("HR", True), ("guest", False)])
    def test_protected_document(self, capsys, role, allowed):
        document = ProtectedDocument(RealDocument("payroll.xlsx"), allowed_roles=["Admin", "hr"])

        assert document.read(role) is allowed

        out = capsys.readouterr().out
        if allowed:
            assert out == "Reading document: payroll.xlsx\n"
        else:
            assert out == f"Access denied for role '{role}'\n"


class TestFlyweight:
    """Tests for shared tree types."""

    def test_types_are_shared(self):
        factory = TreeFactory()

        first = factory.get_tree_type("Oak", "green", "rough")
        second = factory.get_tree_type("Oak", "green", "rough")
        pine = factory.get_tree_type("Pine", "dark green", "needles")

        assert first is second
        assert pine is not first
        assert factory.type_count == 2

    def test_forest_shares_factory(self):
        factory = TreeFactory()
        forest = Forest(factory)

        a = forest.plant_tree(1, 2, "Oak", "green", "rough")
        b = forest.plant_tree(3, 4, "Oak", "green", "rough")

        assert a.tree_type is b.tree_type
        assert (a.x, a.y, b.x, b.y) == (1, 2, 3, 4)
        assert len(forest.trees) == 2
        assert factory.type_count == 1

    def test_tree_type_is_immutable(self):
        tree_type = TreeFactory().get_tree_type("Oak", "green", "rough")

        with pytest.raises(AttributeError):
            tree_type.color = "red"
