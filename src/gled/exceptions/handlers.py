"""
Centralized error handling utilities.

Errors are translated one layer at a time:

```
USB library (pyusb)      -> usb.core.USBError, NoBackendError
Transport (PyUsbTransport) -> DeviceError subclasses via wrap_usb_error()
CLI                      -> format_error_for_display() + nonzero exit
```

## Examples

### Converting Low-Level Errors

```python
from gled.exceptions import wrap_usb_error

try:
    usb.util.claim_interface(device, interface)
except usb.core.USBError as e:
    raise wrap_usb_error(e, "claim interface", interface=interface) from e
```

### Critical Sections

```python
from gled.exceptions import ErrorContext

with ErrorContext("send solid command", logger_instance=logger):
    transport.open(vendor_id, product_id)
    ...
```
"""

import logging
from typing import Optional

from .base import GledError
from .device import DeviceError, InterfaceClaimError, TransferError


logger = logging.getLogger(__name__)

CLAIM_INTERFACE = "claim interface"
CONTROL_TRANSFER = "control transfer"


class ErrorContext:
    """
    Log the start, end or failure of one operation.

    Exceptions always propagate. GledErrors are logged with their technical
    message; anything else is logged with its traceback.

    Example:
        ```python
        with ErrorContext("send solid command to 046d:c084", logger_instance=logger):
            transport.open(0x046D, 0xC084)
        ```
    """

    def __init__(self, operation: str, logger_instance: Optional[logging.Logger] = None):
        self.operation = operation
        self.logger = logger_instance or logger

    def __enter__(self):
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
        elif isinstance(exc_val, GledError):
            self.logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)
        return False


def wrap_usb_error(
    error: Exception,
    operation: str,
    interface: Optional[int] = None
) -> DeviceError:
    """
    Convert low-level USB errors to gled exceptions.

    Args:
        error: The original exception from pyusb
        operation: What was being attempted (CLAIM_INTERFACE, CONTROL_TRANSFER, ...)
        interface: The interface number involved (if applicable)

    Returns:
        A DeviceError with appropriate type and message
    """
    import usb.core

    error_msg = str(error)
    usb_errno = getattr(error, "errno", None)

    if isinstance(error, usb.core.NoBackendError):
        return DeviceError(
            user_message="No USB backend is available.",
            technical_message=f"pyusb could not load a backend during {operation}: {error_msg}",
            recoverable=True,
            recovery_hint="Install libusb 1.0 (e.g. 'apt install libusb-1.0-0' or 'brew install libusb').",
        )

    if operation == CLAIM_INTERFACE:
        return InterfaceClaimError(interface, error_msg, usb_errno=usb_errno)

    if operation == CONTROL_TRANSFER:
        return TransferError(error_msg, usb_errno=usb_errno)

    return DeviceError(
        user_message=f"USB error during {operation}: {error_msg}",
        technical_message=f"USB error during {operation} (errno={usb_errno}): {error_msg}",
        usb_errno=usb_errno,
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, GledError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
