"""USB device exceptions.

This module defines exceptions for device access errors:
- DeviceError: Base class for USB device errors
- DeviceNotFoundError: The mouse is not connected
- InterfaceClaimError: The HID interface could not be claimed
- TransferError: The control transfer failed
"""

import errno
from typing import Optional

from .base import GledError


def _hint_for_errno(code: Optional[int]) -> Optional[str]:
    """Return a recovery hint for common USB errno values."""
    if code == errno.EACCES or code == errno.EPERM:
        return (
            "Permission denied. Run with sudo, or add a udev rule granting your "
            "user access to the mouse and replug it."
        )
    if code == errno.EBUSY:
        return "The device is busy. Close other tools that control the mouse and try again."
    if code in (errno.ENODEV, errno.ENOENT):
        return "The mouse was disconnected. Plug it back in and try again."
    if code == errno.ETIMEDOUT:
        return "The mouse did not respond in time. Replug it and try again."
    return None


class DeviceError(GledError):
    """USB device access or operation failed."""

    def __init__(self, user_message: str, usb_errno: Optional[int] = None, **kwargs):
        """
        Initialize device error.

        Args:
            user_message: User-friendly error message
            usb_errno: errno reported by the USB library (if any)
        """
        kwargs.setdefault("recovery_hint", _hint_for_errno(usb_errno))
        super().__init__(user_message, **kwargs)
        self.usb_errno = usb_errno


class DeviceNotFoundError(DeviceError):
    """No device with the expected vendor/product ID is connected."""

    def __init__(self, vendor_id: int, product_id: int):
        """
        Initialize device-not-found error.

        Args:
            vendor_id: USB vendor ID that was searched for
            product_id: USB product ID that was searched for
        """
        usb_id = f"{vendor_id:04x}:{product_id:04x}"
        super().__init__(
            user_message=f"Mouse not found (USB ID {usb_id}).",
            technical_message=f"Error open device: no USB device matches {usb_id}",
            recoverable=True,
            recovery_hint=(
                "Check that a Logitech G102 or G203 Prodigy mouse is plugged in. "
                f"Run 'lsusb -d {usb_id}' to confirm it is visible."
            ),
        )
        self.vendor_id = vendor_id
        self.product_id = product_id


class InterfaceClaimError(DeviceError):
    """The device interface could not be detached from its kernel driver or claimed."""

    def __init__(
        self,
        interface: Optional[int],
        original_error: str,
        usb_errno: Optional[int] = None,
    ):
        """
        Initialize interface claim error.

        Args:
            interface: Interface number that failed to claim
            original_error: The error message from the USB library
            usb_errno: errno reported by the USB library (if any)
        """
        super().__init__(
            user_message=f"Could not claim USB interface {interface}.",
            technical_message=f"Error claim interface {interface}: {original_error}",
            usb_errno=usb_errno,
            recoverable=True,
        )
        self.interface = interface
        self.original_error = original_error


class TransferError(DeviceError):
    """The control transfer carrying the LED command failed."""

    def __init__(self, original_error: str, usb_errno: Optional[int] = None):
        """
        Initialize transfer error.

        Args:
            original_error: The error message from the USB library
            usb_errno: errno reported by the USB library (if any)
        """
        super().__init__(
            user_message="Sending the LED command to the mouse failed.",
            technical_message=f"Error sending control data: {original_error}",
            usb_errno=usb_errno,
            recoverable=True,
        )
        self.original_error = original_error
