"""
Custom exception hierarchy for gled.

## Exception Hierarchy

```
GledError (base)
├── ArgumentValidationError
├── PayloadEncodingError
└── DeviceError
    ├── DeviceNotFoundError
    ├── InterfaceClaimError
    └── TransferError
```

All custom exceptions inherit from `GledError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

Nothing is retried internally. Setting the LEDs is a one-shot operation,
so every error is reported and the user reruns the command.

### Example: Out-of-range brightness

```python
from gled.exceptions import ArgumentValidationError

raise ArgumentValidationError("brightness", "150", "out of range")

# User sees: "Invalid brightness argument '150': out of range"
# Recovery hint: "Expected brightness: 1-100 (percentage, default 100)"
```
"""

from .base import GledError
from .device import DeviceError, DeviceNotFoundError, InterfaceClaimError, TransferError
from .handlers import (
    CLAIM_INTERFACE,
    CONTROL_TRANSFER,
    ErrorContext,
    format_error_for_display,
    wrap_usb_error,
)
from .validation import ArgumentValidationError, PayloadEncodingError

__all__ = [
    "CLAIM_INTERFACE",
    "CONTROL_TRANSFER",
    # Validation
    "ArgumentValidationError",
    # Device
    "DeviceError",
    "DeviceNotFoundError",
    # Handlers
    "ErrorContext",
    # Base
    "GledError",
    "InterfaceClaimError",
    "PayloadEncodingError",
    "TransferError",
    "format_error_for_display",
    "wrap_usb_error",
]
