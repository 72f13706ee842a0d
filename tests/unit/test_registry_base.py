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


"""Tests for SingletonRegistry and KeyedRegistry."""

import threading

from patternbook.core.registry_base import KeyedRegistry


class ToolboxRegistry(KeyedRegistry["ToolboxRegistry", str]):
    pass


class OtherRegistry(KeyedRegistry["OtherRegistry", int]):
    pass


class TestSingletonRegistry:
    """Tests for the get_instance()/reset_instance() machinery."""

    def setup_method(self):
        ToolboxRegistry.reset_instance()
        OtherRegistry.reset_instance()

    def test_get_instance_returns_same_object(self):
        """Repeated calls return the same registry."""
        assert ToolboxRegistry.get_instance() is ToolboxRegistry.get_instance()

    def test_subclasses_do_not_share_instances(self):
        """Each subclass has its own singleton."""
        toolbox = ToolboxRegistry.get_instance()
        other = OtherRegistry.get_instance()

        assert toolbox is not other
        assert isinstance(other, OtherRegistry)

    def test_reset_instance(self):
        """After a reset a new instance is created."""
        first = ToolboxRegistry.get_instance()
        assert ToolboxRegistry.is_initialized()

        ToolboxRegistry.reset_instance()

        assert not ToolboxRegistry.is_initialized()
        assert ToolboxRegistry.get_instance() is not first

    def test_concurrent_get_instance(self):
        """Threads racing on first use all see one instance."""
        barrier = threading.Barrier(8)
        seen = []

        def fetch():
            barrier.wait()
            seen.append(ToolboxRegistry.get_instance())

        threads = [threading.Thread(target=fetch) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len({id(r) for r in seen}) == 1


class TestKeyedRegistry:
    """Tests for keyed item storage."""

    def setup_method(self):
        self.registry = ToolboxRegistry()

    def test_register_and_get(self):
        self.registry.register("hammer", "claw hammer")

        assert self.registry.get("hammer") == "claw hammer"
        assert self.registry.contains("hammer")
        assert self.registry.get("saw") is None

    def test_register_replaces(self):
        """A second registration under the same key wins."""
        self.registry.register("hammer", "claw hammer")
        self.registry.register("hammer", "mallet")

        assert self.registry.get("hammer") == "mallet"
        assert self.registry.count() == 1

    def test_unregister(self):
        self.registry.register("hammer", "claw hammer")

        assert self.registry.unregister("hammer") is True
        assert self.registry.unregister("hammer") is False
        assert not self.registry.contains("hammer")

    def test_keys_and_values(self):
        self.registry.register("hammer", "claw hammer")
        self.registry.register("saw", "hand saw")

        assert sorted(self.registry.keys()) == ["hammer", "saw"]
        assert sorted(self.registry.values()) == ["claw hammer", "hand saw"]

    def test_clear_returns_count(self):
        self.registry.register("hammer", "claw hammer")
        self.registry.register("saw", "hand saw")

        assert self.registry.clear() == 2
        assert self.registry.count() == 0
