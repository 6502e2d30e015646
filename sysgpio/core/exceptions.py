"""Custom exceptions used throughout the sysgpio package."""

from typing import Any, Optional


class GpioError(Exception):
    """Base exception for all GPIO errors.

    Every failure the library reports inherits from this class, so callers
    can catch all of them with a single except clause and still tell an
    I/O problem apart from unexpected kernel output.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """

        super().__init__(message)
        self.details = details or {}


class GpioIOError(GpioError):
    """Raised when a sysfs path cannot be opened, written or read.

    This includes:
    - Pin not exported (per-pin files do not exist)
    - Permission denied
    - Kernel rejecting the write (duplicate export, pin out of range,
      direction fixed by the platform)
    - Transient filesystem errors
    """

    def __init__(
        self,
        path: str,
        operation: str,
        os_error: OSError,
        pin: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """Initialize the I/O error.

        Args:
            path: The sysfs path being accessed
            operation: What was attempted ("write" or "read")
            os_error: The underlying OS error, kept for diagnostics
            pin: The pin involved, if the operation is pin-scoped
            details: Additional context
        """
        details = details or {}
        details["path"] = path
        details["operation"] = operation
        if pin is not None:
            details["pin"] = pin

        reason = os_error.strerror or str(os_error)
        message = f"GPIO I/O error: cannot {operation} {path}: {reason}"
        super().__init__(message=message, details=details)
        self.path = path
        self.operation = operation
        self.os_error = os_error
        self.errno = os_error.errno
        self.pin = pin


class GpioParseError(GpioError):
    """Raised when the content of a pin's sysfs file cannot be interpreted.

    Examples:
    - value file holding something other than a decimal integer
    - value file holding a level other than 0/1 while strict levels are on
    - direction file holding an unknown direction
    """

    def __init__(
        self,
        path: str,
        content: str,
        pin: Optional[int] = None,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        details = details or {}
        details["path"] = path
        details["content"] = content
        if pin is not None:
            details["pin"] = pin

        if message is None:
            message = f"invalid integer literal {content!r}"
        super().__init__(message=f"GPIO parse error in {path}: {message}", details=details)
        self.path = path
        self.content = content
        self.pin = pin


class ConfigurationError(GpioError):
    """Raised when there's an error in configuration.

    This includes:
    - Invalid configuration value
    - Missing or unreadable configuration file
    - Configuration validation failures
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
