"""
Restyler errors and user-friendly error reporting.

Pipeline failures are never propagated to the host page: they are turned
into readable log messages with an actionable suggestion.
"""

from typing import Dict, Optional
import logging

logger = logging.getLogger(__name__)


class RestylerError(Exception):
    """Base exception for the restyler"""
    pass


class DataModelError(RestylerError):
    """The source table does not have the expected two-rows-per-item shape"""
    pass


class SlotResolutionError(RestylerError):
    """A render target (section or templated slot) could not be located"""

    def __init__(self, message: str, slot: Optional[str] = None, index: Optional[int] = None):
        super().__init__(message)
        self.slot = slot
        self.index = index


class WatcherSetupError(RestylerError):
    """The watched container could not be subscribed to"""
    pass


class ContentTimeoutError(RestylerError):
    """The host never rendered the expected source structure"""

    def __init__(self, selector: str, timeout: float):
        super().__init__(f"Timeout after {timeout:.1f}s waiting for {selector}")
        self.selector = selector
        self.timeout = timeout


def format_user_friendly_error(
    error: Exception,
    context: str = "general",
    technical_details: Optional[str] = None
) -> Dict:
    """
    Convert technical error to user-friendly message.

    Args:
        error: The exception that occurred
        context: Context where error occurred (e.g., "render_pass", "watcher")
        technical_details: Additional technical information

    Returns:
        Dictionary with user-friendly error information:
        {
            "message": str,          # User-friendly message
            "suggestion": str,       # Actionable suggestion
            "technical": str,        # Technical details
            "severity": str,         # "critical", "error", "warning"
            "can_retry": bool        # Whether a host re-render might help
        }
    """
    error_str = str(error)

    for error_type, friendly_error in ERROR_TYPE_MAPPINGS.items():
        if isinstance(error, error_type):
            result = friendly_error.copy()
            result["technical"] = technical_details or error_str
            return result

    # Try to match against known error patterns
    for pattern, friendly_error in ERROR_MAPPINGS.items():
        if pattern.lower() in error_str.lower():
            result = friendly_error.copy()
            result["technical"] = technical_details or error_str
            logger.debug(f"Mapped error to user-friendly: {result['message']}")
            return result

    # Default fallback for unknown errors
    return {
        "message": "Unexpected error while restyling the page",
        "suggestion": "Check the technical details or rerun with --debug",
        "technical": technical_details or error_str,
        "severity": "error",
        "can_retry": True
    }


ERROR_TYPE_MAPPINGS = {
    DataModelError: {
        "message": "Cannot build the checklist data model from the source table",
        "suggestion": "The host table no longer has three columns grouped in row pairs; the page was left untouched",
        "severity": "error",
        "can_retry": True
    },
    SlotResolutionError: {
        "message": "A render target is missing from the page",
        "suggestion": "Check that the target section and the panel template still match",
        "severity": "critical",
        "can_retry": False
    },
    WatcherSetupError: {
        "message": "Cannot watch the host container for re-renders",
        "suggestion": "The initial render still applies; host re-renders will not be picked up",
        "severity": "warning",
        "can_retry": False
    },
    ContentTimeoutError: {
        "message": "The host never rendered the checklist table",
        "suggestion": "Increase RESTYLER_WAIT_TIMEOUT_MS or check that the page shows the checklist",
        "severity": "warning",
        "can_retry": True
    },
}


# Error mappings for errors raised by Playwright: pattern -> user-friendly info
ERROR_MAPPINGS = {
    "target closed": {
        "message": "The browser page was closed during the operation",
        "suggestion": "Run the restyler again",
        "severity": "error",
        "can_retry": True
    },
    "execution context was destroyed": {
        "message": "The page navigated away while it was being restyled",
        "suggestion": "Wait for the page to settle and run again",
        "severity": "warning",
        "can_retry": True
    },
    "timeout": {
        "message": "The page took too long to respond",
        "suggestion": "Check the URL and network connection, then try again",
        "severity": "warning",
        "can_retry": True
    },
    "net::err": {
        "message": "Cannot load the page",
        "suggestion": "Check that the URL is correct and reachable",
        "severity": "error",
        "can_retry": True
    },
    "executable doesn't exist": {
        "message": "Chromium is not installed for Playwright",
        "suggestion": "Run: python -m playwright install chromium",
        "severity": "critical",
        "can_retry": False
    },
}


def get_error_category(error: Exception) -> str:
    """
    Categorize error type.

    Returns:
        Category name: "data_model", "render", "watcher", "timeout", "browser", "unknown"
    """
    if isinstance(error, DataModelError):
        return "data_model"
    if isinstance(error, SlotResolutionError):
        return "render"
    if isinstance(error, WatcherSetupError):
        return "watcher"
    if isinstance(error, (ContentTimeoutError, TimeoutError)):
        return "timeout"

    error_str = str(error).lower()
    if "timeout" in error_str:
        return "timeout"
    elif any(k in error_str for k in ["browser", "target", "navigation", "net::"]):
        return "browser"
    else:
        return "unknown"


def format_error_for_logging(error: Exception, context: str = "") -> str:
    """
    Format error for structured logging.

    Args:
        error: The exception
        context: Additional context

    Returns:
        Formatted error string for logs
    """
    friendly = format_user_friendly_error(error, context)

    lines = [
        f"❌ {friendly['message']}",
        f"💡 {friendly['suggestion']}",
        f"🔧 Technical: {friendly['technical']}"
    ]

    if context:
        lines.insert(0, f"📍 Context: {context}")

    return "\n".join(lines)


def create_error_response(
    error: Exception,
    context: str = "",
    include_stacktrace: bool = False
) -> Dict:
    """
    Create standardized error response for the CLI summary.

    Args:
        error: The exception
        context: Where the error occurred
        include_stacktrace: Whether to include full stacktrace

    Returns:
        Standardized error response dictionary
    """
    import traceback

    friendly = format_user_friendly_error(error, context)

    response = {
        "success": False,
        "error": {
            "message": friendly["message"],
            "suggestion": friendly["suggestion"],
            "severity": friendly["severity"],
            "can_retry": friendly["can_retry"],
            "category": get_error_category(error),
        }
    }

    if include_stacktrace:
        response["error"]["stacktrace"] = traceback.format_exc()
        response["error"]["technical_details"] = friendly["technical"]

    return response
