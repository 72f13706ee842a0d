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

"""Shared pytest fixtures and configuration."""

import logging
import os

# Must be set before patternbook.config.settings is imported.
os.environ.setdefault("PATTERNBOOK_SKIP_ENV_FILE", "1")

import pytest

from singleton_reset import reset_all_singletons


@pytest.fixture(autouse=True)
def isolate_environment_variables(monkeypatch):
    """Isolate tests from PATTERNBOOK_* variables and .env files."""
    monkeypatch.setenv("PATTERNBOOK_SKIP_ENV_FILE", "1")
    for var in list(os.environ):
        if var.startswith("PATTERNBOOK_") and var != "PATTERNBOOK_SKIP_ENV_FILE":
            monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset registries, caches and singleton examples before and after each test."""
    reset_all_singletons()
    yield
    reset_all_singletons()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Remove handlers installed by the CLI so they never outlive CliRunner streams."""
    root = logging.getLogger()
    level = root.level
    yield
    from patternbook.ui import cli

    for handler in list(cli._installed_handlers):
        root.removeHandler(handler)
        handler.close()
    cli._installed_handlers.clear()
    root.setLevel(level)
