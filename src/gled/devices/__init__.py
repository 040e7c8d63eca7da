"""USB device access for the G102/G203 mouse."""

from .controller import LedController
from .protocols import UsbTransport

__all__ = [
    "LedController",
    "UsbTransport",
]
