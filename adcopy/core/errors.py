"""Error Hierarchy — typed, categorized exceptions for editor failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - The DKI renderer never raises; these errors belong to the service shell
    - to_response() produces the envelope shown by the editor UI
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with AdCopyError base: callers catch one type
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    template: str | None = None
    keyword_count: int | None = None
    user_message: str | None = None


class AdCopyError(Exception):
    """Base exception for all adcopy errors."""

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
        """Convert to standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "recoverable": self.severity in (
                    ErrorSeverity.INFO, ErrorSeverity.WARNING,
                ),
                "context": {
                    "template": self.context.template,
                    "keyword_count": self.context.keyword_count,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class TemplateValidationError(AdCopyError):
    """Editor input failed validation."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class BatchTooLargeError(AdCopyError):
    """Too many test keywords for one preview."""
    def __init__(self, count: int, limit: int, context: ErrorContext | None = None):
        super().__init__(
            f"Preview accepts at most {limit} keywords. Received: {count}.",
            "BATCH_TOO_LARGE", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )
        self.count = count
        self.limit = limit


class InvalidHeadlineIndexError(AdCopyError):
    """Template applied to a headline slot that does not exist."""
    def __init__(self, index: int, size: int, context: ErrorContext | None = None):
        super().__init__(
            f"Headline {index + 1} does not exist. Ad has {size} headline(s).",
            "INVALID_HEADLINE_INDEX", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.index = index
        self.size = size
