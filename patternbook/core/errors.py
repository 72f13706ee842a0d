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

"""Exception types for patternbook.

This module provides:
- A base exception carrying structured details and a recovery hint
- Demo registry and runner errors
- Catalog and configuration errors
- Errors raised by the examples themselves (singleton misuse, invalid builds)
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCategory(Enum):
    """Categories of errors for classification and reporting."""

    DEMO_NOT_FOUND = "demo_not_found"
    DEMO_DUPLICATE = "demo_duplicate"
    DEMO_EXECUTION = "demo_execution"

    CATALOG_INVALID = "catalog_invalid"
    CATALOG_MISSING = "catalog_missing"

    CONFIG_INVALID = "config_invalid"

    PATTERN_MISUSE = "pattern_misuse"
    VALIDATION_ERROR = "validation_error"

    UNKNOWN = "unknown"


class PatternbookError(Exception):
    """Base exception for all patternbook errors.

    Provides structured error information including:
    - Error category
    - Short correlation ID for matching log lines to CLI output
    - Recovery suggestion
    - Original exception chain
    """

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        details: Optional[Dict[str, Any]] = None,
        recovery_hint: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.details = details or {}
        self.recovery_hint = recovery_hint
        self.correlation_id = str(uuid.uuid4())[:8]
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "error": self.message,
            "category": self.category.value,
            "correlation_id": self.correlation_id,
            "recovery_hint": self.recovery_hint,
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        result = self.message
        if self.recovery_hint:
            result += f"\nRecovery hint: {self.recovery_hint}"
        return result


class DemoNotFoundError(PatternbookError):
    """Requested demo key is not registered."""

    def __init__(self, key: str, available: Optional[List[str]] = None, **kwargs: Any):
        message = f"Demo not found: {key}"
        if available:
            message += f". Available: {', '.join(available[:8])}"
            if len(available) > 8:
                message += ", ..."
        super().__init__(
            message,
            category=ErrorCategory.DEMO_NOT_FOUND,
            recovery_hint="Use 'patternbook list' to see available demos.",
            **kwargs,
        )
        self.key = key
        self.available = available or []
        self.details["key"] = key


class DuplicateDemoError(PatternbookError):
    """A different demo is already registered under the same key."""

    def __init__(self, key: str, existing_module: str, **kwargs: Any):
        super().__init__(
            f"Demo '{key}' is already registered by {existing_module}",
            category=ErrorCategory.DEMO_DUPLICATE,
            **kwargs,
        )
        self.key = key
        self.details["key"] = key
        self.details["existing_module"] = existing_module


class DemoExecutionError(PatternbookError):
    """A demo raised while running."""

    def __init__(self, key: str, cause: BaseException, **kwargs: Any):
        super().__init__(
            f"Demo '{key}' failed: {type(cause).__name__}: {cause}",
            category=ErrorCategory.DEMO_EXECUTION,
            cause=cause,
            **kwargs,
        )
        self.key = key
        self.details["key"] = key


class CatalogError(PatternbookError):
    """Catalog file is missing, malformed, or lacks an entry."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        key: Optional[str] = None,
        **kwargs: Any,
    ):
        kwargs.setdefault("category", ErrorCategory.CATALOG_INVALID)
        super().__init__(message, **kwargs)
        self.path = path
        self.key = key
        self.details["path"] = path
        self.details["key"] = key


class ConfigurationError(PatternbookError):
    """Invalid settings."""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs: Any):
        super().__init__(
            message,
            category=ErrorCategory.CONFIG_INVALID,
            recovery_hint="Check PATTERNBOOK_* environment variables and your .env file.",
            **kwargs,
        )
        self.config_key = config_key
        self.details["config_key"] = config_key


class SingletonViolationError(PatternbookError, RuntimeError):
    """A singleton class was constructed directly."""

    def __init__(self, class_name: str, **kwargs: Any):
        super().__init__(
            f"{class_name} is a singleton. Use {class_name}.get_instance() "
            "to get the singleton instance.",
            category=ErrorCategory.PATTERN_MISUSE,
            **kwargs,
        )
        self.class_name = class_name


class BuildError(PatternbookError, ValueError):
    """A builder was asked to build an object from invalid parts."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs: Any):
        super().__init__(message, category=ErrorCategory.VALIDATION_ERROR, **kwargs)
        self.field = field
        self.details["field"] = field


__all__ = [
    "ErrorCategory",
    "PatternbookError",
    "DemoNotFoundError",
    "DuplicateDemoError",
    "DemoExecutionError",
    "CatalogError",
    "ConfigurationError",
    "SingletonViolationError",
    "BuildError",
]
