"""Enhanced logging utilities with conditional debug logging."""

import logging
import traceback
from os import getenv
from typing import Optional, Any

# Check if debug mode is enabled
DEBUG = getenv("APP_DEBUG", "false").lower() == "true"

# Get the main logger
logger = logging.getLogger("Timeline")


def debug_log(message: str, *args, **kwargs) -> None:
    """
    Log a debug message only if APP_DEBUG is enabled.
    
    Args:
        message: Log message (supports % formatting)
        *args: Positional arguments for message formatting
        **kwargs: Keyword arguments (level, exc_info, etc.)
    """
    if DEBUG:
        level = kwargs.pop("level", logging.DEBUG)
        logger.log(level, message, *args, **kwargs)


def error_log(
    message: str,
    exc: Optional[Exception] = None,
    context: Optional[dict] = None,
    *args,
    **kwargs
) -> None:
    """
    Log an error with a contextual tag, optional context and exception.
    
    Args:
        message: Error message, conventionally starting with a "[route METHOD]" tag
        exc: Optional exception object
        context: Optional dictionary with additional context (query params, file paths, etc.)
        *args: Additional positional arguments
        **kwargs: Additional keyword arguments for logger
    """
    parts = [message]
    
    if context:
        context_str = ", ".join(f"{k}={v}" for k, v in context.items())
        parts.append(f"Context: {context_str}")
    
    if exc:
        parts.append(f"Exception: {type(exc).__name__}: {exc}")
        
        # Full traceback only in debug mode
        if DEBUG:
            parts.append(f"Traceback:\n{''.join(traceback.format_exception(type(exc), exc, exc.__traceback__))}")
    
    full_message = " | ".join(parts)
    
    if exc:
        logger.error(full_message, *args, exc_info=exc, **kwargs)
    else:
        logger.error(full_message, *args, **kwargs)


def log_request_error(
    request: Any,
    exc: Exception,
    message: Optional[str] = None
) -> None:
    """
    Log an error with request context.
    
    Args:
        request: Request object (should have url, method, etc.)
        exc: The exception
        message: Optional custom message, defaults to the exception type
    """
    context = {}
    
    url = getattr(request, "url", None)
    if url is not None:
        context["path"] = getattr(url, "path", str(url))
    method = getattr(request, "method", None)
    if method:
        context["method"] = method
    headers = getattr(request, "headers", None)
    if headers is not None:
        context["user_agent"] = headers.get("user-agent", "unknown")
    
    error_log(message or f"Unhandled exception: {type(exc).__name__}", exc=exc, context=context)
