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


"""Tests for demo registration and discovery."""

import pytest

from patternbook.core.demo import (
    BUILTIN_DEMO_MODULES,
    DemoRegistry,
    DemoSpec,
    PatternCategory,
    demo,
    load_builtin_demos,
)
from patternbook.core.errors import DemoNotFoundError, DuplicateDemoError


def _noop() -> None:
    pass


def _other() -> None:
    pass


class TestDemoDecorator:
    """Tests for the @demo decorator."""

    def test_registers_spec(self):
        """Decorating registers a spec and returns the function unchanged."""

        def main():
            print("hello")

        decorated = demo("hello-world", title="Hello", category=PatternCategory.BEHAVIORAL)(main)

        assert decorated is main
        spec = DemoRegistry.get_instance().require("hello-world")
        assert spec.title == "Hello"
        assert spec.category is PatternCategory.BEHAVIORAL
        assert spec.entry is main
        assert spec.module == __name__
        assert main.__demo_spec__ is spec

    def test_accepts_category_value(self):
        """Category may be given by its string value."""

        @demo("by-value", title="By value", category="solid")
        def main():
            pass

        assert main.__demo_spec__.category is PatternCategory.SOLID

    @pytest.mark.parametrize("key", ["", "Builder", "abstract_factory", "-lead", "trail-", "a--b", "9lives"])
    def test_invalid_key(self, key):
        """Keys must be lowercase words joined by single hyphens."""
        with pytest.raises(ValueError) as exc_info:
            demo(key, title="Bad", category=PatternCategory.SOLID)

        assert "Invalid demo key" in str(exc_info.value)

    def test_duplicate_key_from_other_function(self):
        """A second function cannot claim an existing key."""
        demo("taken", title="First", category=PatternCategory.SOLID)(_noop)

        with pytest.raises(DuplicateDemoError) as exc_info:
            demo("taken", title="Second", category=PatternCategory.SOLID)(_other)

        assert "taken" in str(exc_info.value)
        assert exc_info.value.details["existing_module"] == __name__

    def test_same_function_registered_twice_is_noop(self):
        """Re-registering the same entry point is allowed."""
        demo("again", title="Again", category=PatternCategory.SOLID)(_noop)
        demo("again", title="Again", category=PatternCategory.SOLID)(_noop)

        assert DemoRegistry.get_instance().count() == 1


class TestDemoRegistry:
    """Tests for lookup and listing."""

    def setup_method(self):
        self.registry = DemoRegistry()

    def _spec(self, key, category):
        return DemoSpec(key=key, title=key.title(), category=category, entry=_noop, module=__name__)

    def test_require_unknown_key(self):
        """Unknown keys raise DemoNotFoundError listing what exists."""
        self.registry.register_spec(self._spec("builder", PatternCategory.CREATIONAL))

        with pytest.raises(DemoNotFoundError) as exc_info:
            self.registry.require("nope")

        assert exc_info.value.key == "nope"
        assert exc_info.value.available == ["builder"]
        assert "Demo not found: nope" in str(exc_info.value)
        assert "patternbook list" in str(exc_info.value)

    def test_list_specs_order(self):
        """Listing is by category order, then key."""
        self.registry.register_spec(self._spec("ocp", PatternCategory.SOLID))
        self.registry.register_spec(self._spec("proxy", PatternCategory.STRUCTURAL))
        self.registry.register_spec(self._spec("builder", PatternCategory.CREATIONAL))
        self.registry.register_spec(self._spec("adapter", PatternCategory.STRUCTURAL))

        keys = [s.key for s in self.registry.list_specs()]

        assert keys == ["builder", "adapter", "proxy", "ocp"]

    def test_list_specs_by_category(self):
        self.registry.register_spec(self._spec("ocp", PatternCategory.SOLID))
        self.registry.register_spec(self._spec("proxy", PatternCategory.STRUCTURAL))

        specs = self.registry.list_specs(PatternCategory.SOLID)

        assert [s.key for s in specs] == ["ocp"]

    def test_keyed_register_rejects_conflicting_spec(self):
        """register(key, spec) enforces the same duplicate rule as register_spec."""
        self.registry.register_spec(self._spec("builder", PatternCategory.CREATIONAL))
        conflicting = DemoSpec(
            key="builder", title="Other", category=PatternCategory.SOLID, entry=_other, module=__name__
        )

        with pytest.raises(DuplicateDemoError):
            self.registry.register("builder", conflicting)

        assert self.registry.require("builder").entry is _noop

    def test_keyed_register_same_entry_is_noop(self):
        spec = self._spec("builder", PatternCategory.CREATIONAL)
        self.registry.register("builder", spec)
        self.registry.register("builder", spec)

        assert self.registry.count() == 1

    def test_keyed_register_key_mismatch(self):
        with pytest.raises(ValueError) as exc_info:
            self.registry.register("facade", self._spec("builder", PatternCategory.CREATIONAL))

        assert "mismatch" in str(exc_info.value)

    def test_builtin_demo_cannot_be_replaced(self):
        """A loaded demo is never silently overwritten."""
        registry = load_builtin_demos()
        other = DemoSpec(key="builder", title="Other", category=PatternCategory.SOLID, entry=_other, module=__name__)

        with pytest.raises(DuplicateDemoError):
            registry.register("builder", other)

        assert registry.require("builder").title == "Builder"


class TestLoadBuiltinDemos:
    """Tests for discovery of the bundled demos."""

    def test_loads_all_modules(self):
        registry = load_builtin_demos()

        assert registry.count() == len(BUILTIN_DEMO_MODULES) == 18
        assert {s.module for s in registry.values()} == set(BUILTIN_DEMO_MODULES)

    def test_reloads_after_reset(self):
        """Already-imported modules are registered again after a reset."""
        load_builtin_demos()
        DemoRegistry.reset_instance()

        registry = load_builtin_demos()

        assert registry.count() == 18
        assert registry.contains("abstract-factory")

    def test_category_counts(self):
        registry = load_builtin_demos()

        counts = {c: len(registry.list_specs(c)) for c in PatternCategory}

        assert counts == {
            PatternCategory.CREATIONAL: 5,
            PatternCategory.STRUCTURAL: 7,
            PatternCategory.BEHAVIORAL: 1,
            PatternCategory.SOLID: 5,
        }

    def test_listing_starts_with_creational(self):
        keys = [s.key for s in load_builtin_demos().list_specs()]

        assert keys[:5] == ["abstract-factory", "builder", "factory", "prototype", "singleton"]
        assert keys[-5:] == ["dip", "isp", "lsp", "ocp", "srp"]
