"""Custom exceptions used throughout the gpiosim package."""

from typing import Any, Optional


class SimulatorError(Exception):
    """Base exception for all simulator errors.

    All gpiosim-specific exceptions inherit from this class, so a single
    except clause catches every error the package raises on purpose.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """

        super().__init__(message)
        self.details = details or {}


class ConfigurationError(SimulatorError):
    """Raised when a controller variant or its configuration is invalid.

    This includes:
    - YAML that cannot be parsed
    - Missing required configuration keys
    - Capability masks, labels or pin counts that fail validation
    - Register layouts that overlap or reference missing sets
    """

    def __init__(
        self,
        config_key: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """Initialize configuration error.

        Args:
            config_key: The configuration key that caused the error
            message: Description of what's wrong. If omitted, config_key is
                treated as the message and the key defaults to "configuration".
            details: Additional context
        """
        if message is None:
            message = config_key or "Invalid configuration"
            config_key = "configuration"
        if config_key is None:
            config_key = "configuration"

        full_message = f"Configuration error for '{config_key}': {message}"
        super().__init__(message=full_message, details=details)
        self.config_key = config_key


class MemoryException(SimulatorError):
    """Base exception for all register window access errors.

    These describe guest-visible faults. The controller logs them and
    returns a benign value instead of letting them propagate.
    """

    def __init__(
        self,
        message: str,
        offset: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        if offset is not None:
            details = details or {}
            details["offset"] = f"0x{offset:03X}"

        super().__init__(message=message, details=details)
        self.offset = offset


class MemoryAccessError(MemoryException):
    """Raised when an offset does not resolve to any register.

    Examples:
    - Offset outside both register banks
    - Offset inside a bank but belonging to a set the variant lacks
    """

    def __init__(
        self,
        offset: int,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        if message is None:
            message = f"offset 0x{offset:03X} out of bounds"
        super().__init__(message=message, offset=offset, details=details)


class MemoryAlignmentError(MemoryException):
    """Raised when an access has the wrong size or is not word aligned."""

    def __init__(
        self,
        offset: int,
        size: int,
        details: Optional[dict[str, Any]] = None,
    ):
        message = (
            f"invalid access at 0x{offset:03X} "
            f"for access size {size} bytes (must be 4, word aligned)"
        )
        super().__init__(message=message, offset=offset, details=details)
        self.size = size


class RegisterAccessError(MemoryException):
    """Raised when a register has no getter (read) or no setter (write)."""

    def __init__(
        self,
        offset: int,
        operation: str,
        details: Optional[dict[str, Any]] = None,
    ):
        accessor = "getter" if operation == "read" else "setter"
        message = f"no {accessor} for offset 0x{offset:03X}"
        super().__init__(message=message, offset=offset, details=details)
        self.operation = operation
