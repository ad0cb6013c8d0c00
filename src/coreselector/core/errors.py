"""
Error hierarchy for the core selector.

Error Code Ranges:
- 4000-4999: Data/payload errors
- 6000-6999: Configuration errors
- 9000-9999: Unknown/System errors

The tree locator and pin engine never raise; these errors belong to the
edges of the package (entity payload parsing, configuration loading).
"""

from typing import Optional, Dict, Any, List


class SelectorError(Exception):
    """
    Base exception for all core selector errors.

    Attributes:
        message: Human-readable description
        error_code: One of ErrorCodes, or the class default
        context: Structured details (category, entity_id, file_path, ...)
        cause: Wrapped exception, also chained as __cause__
        suggestions: Next steps shown to the user
    """

    DEFAULT_CODE = 9000

    def __init__(self, message: str, error_code: Optional[int] = None,
                 context: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.DEFAULT_CODE
        self.context = dict(context or {})
        self.suggestions = list(suggestions or [])
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause
            self.context.setdefault('original_type', type(cause).__name__)

    def format_user_message(self) -> str:
        """Message plus numbered suggestions, for the CLI."""
        lines = [self.message]
        if self.suggestions:
            lines.append("")
            lines.extend(f"  {i}. {s}" for i, s in enumerate(self.suggestions, 1))
        return "\n".join(lines)

    def format_log_message(self) -> str:
        """One-line form with code, class, context and cause."""
        text = f"[{self.error_code}] {type(self).__name__}: {self.message}"
        if self.context:
            text += f" | Context: {self.context}"
        if self.cause is not None:
            text += f" | Caused by: {self.cause!r}"
        return text


class DataError(SelectorError):
    """Malformed entity payloads and unreadable entity files."""
    DEFAULT_CODE = 4001

    def __init__(self, message: str, entity_id: Optional[str] = None,
                 file_path: Optional[str] = None, **kwargs):
        context = _with_details(kwargs.pop('context', None), 'DATA',
                                entity_id=entity_id, file_path=file_path)
        super().__init__(message, context=context, **kwargs)


class ConfigurationError(SelectorError):
    """Invalid selector options or unreadable configuration files."""
    DEFAULT_CODE = 6001

    def __init__(self, message: str, setting_name: Optional[str] = None, **kwargs):
        context = _with_details(kwargs.pop('context', None), 'CONFIGURATION',
                                setting=setting_name)
        super().__init__(message, context=context, **kwargs)


def _with_details(context: Optional[Dict[str, Any]], category: str, **details) -> Dict[str, Any]:
    # Unset details are left out
    result = dict(context or {})
    result['category'] = category
    result.update({key: value for key, value in details.items() if value is not None})
    return result


class ErrorCodes:
    """Standard error codes for common error scenarios."""

    # Data errors (4000-4999)
    FILE_NOT_FOUND = 4001
    FILE_READ_ERROR = 4002
    INVALID_FORMAT = 4005
    DUPLICATE_ID = 4006

    # Configuration errors (6000-6999)
    CONFIG_NOT_FOUND = 6001
    CONFIG_INVALID = 6002
    UNSUPPORTED_FORMAT = 6003

    # System errors (9000-9999)
    UNKNOWN_ERROR = 9000


def wrap_external_error(e: Exception, message: str, error_class=SelectorError,
                        error_code: Optional[int] = None, **context) -> SelectorError:
    """
    Wrap an external exception in a SelectorError.

    Args:
        e: The original exception
        message: Context-specific error message
        error_class: The SelectorError subclass to use
        error_code: Code to use instead of the class default
        **context: Additional context information

    Returns:
        A SelectorError instance wrapping the original exception
    """
    return error_class(
        message=message,
        error_code=error_code,
        cause=e,
        context=context
    )
