"""
Custom Exceptions for the Adaptive Chunking package.

Chunking itself never raises: every page map produces at least one chunk.
Errors are limited to loading configuration.

Exception Hierarchy:
    ChunkingError (base)
    └── ConfigurationError

Usage:
    from adaptive_chunking.exceptions import ConfigurationError

    try:
        config = load_chunking_config("chunking.json")
    except ConfigurationError as e:
        print(f"Bad config {e.path}: {e}")
"""

from __future__ import annotations

from typing import Optional


class ChunkingError(Exception):
    """
    Base exception for all chunking-related errors.

    Attributes:
        message: Human-readable error description
        details: Additional technical details (optional)
    """

    def __init__(
        self,
        message: str = "A chunking error occurred",
        details: Optional[str] = None,
    ):
        self.message = message
        self.details = details

        full_message = message
        if details:
            full_message = f"{message} | Details: {details}"

        super().__init__(full_message)


class ConfigurationError(ChunkingError):
    """
    Raised when chunking configuration cannot be loaded or is invalid.

    Attributes:
        path: Path of the configuration source (if loaded from a file)
        original_error: The underlying parse or validation error
    """

    def __init__(
        self,
        message: str = "Invalid chunking configuration",
        path: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.path = path
        self.original_error = original_error
        if path:
            message = f"{message} [{path}]"
        details = str(original_error) if original_error else None
        super().__init__(message, details)
