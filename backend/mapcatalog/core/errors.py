"""Error Hierarchy: typed, categorized exceptions for catalog import failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation errors (400-level) come from bad input; internal errors (500-level) abort an import
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CatalogError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Malformed attributes, unknown node kinds and unresolvable source references
      are NOT errors: they resolve to defaults inside the core
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    node_id: str | None = None
    map_source_name: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class CatalogError(Exception):
    """Base exception for all catalog import errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "node_id": self.context.node_id,
                    "map_source_name": self.context.map_source_name,
                },
            }
        }


# ─── Validation Errors (400-level) ──────────────────────────────

class CatalogParseError(CatalogError):
    """Catalog markup could not be parsed into a node tree."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Catalog document could not be parsed: {message}",
            "CATALOG_PARSE_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class MapSourceDefinitionError(CatalogError):
    """Map-source registry built from inconsistent definitions."""
    def __init__(self, source_name: str, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.map_source_name = source_name
        super().__init__(
            f"Map source '{source_name}' is invalid: {reason}",
            "MAP_SOURCE_DEFINITION_INVALID", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.source_name = source_name


# ─── Internal Errors (500-level) ────────────────────────────────

class IdentifierGenerationError(CatalogError):
    """The identifier generator failed; the whole import is aborted."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_message = ctx.user_message or "Catalog identifiers could not be assigned"
        super().__init__(
            f"Identifier generation failed: {reason}",
            "IDENTIFIER_GENERATION_FAILED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
