"""pyusb implementation of the USB transport."""

import logging
import os
import sys
from typing import Optional

import usb.core
import usb.util

from gled.exceptions import (
    CLAIM_INTERFACE,
    CONTROL_TRANSFER,
    DeviceNotFoundError,
    wrap_usb_error,
)

logger = logging.getLogger(__name__)

# -debug level -> level of pyusb's "usb" logger. At 0 it follows -v/-vv.
_USB_LOG_LEVELS = {
    0: logging.NOTSET,
    1: logging.ERROR,
    2: logging.INFO,
    3: logging.DEBUG,
}

_debug_handler: Optional[logging.Handler] = None


def set_debug_level(level: int) -> None:
    """
    Set the verbosity of the USB library's diagnostic output.

    Level 3 is a full trace. At level 0 libusb stays quiet and pyusb's ``usb``
    logger inherits the root level, so its errors still show under -v/-vv.
    libusb reads ``LIBUSB_DEBUG`` when pyusb initializes its backend, so this
    must run before the first device lookup. At levels 1-3 the ``usb`` logger
    gets a stderr handler of its own so the trace shows regardless of ``-v``.

    Args:
        level: Debug level (0-3)
    """
    global _debug_handler

    if level not in _USB_LOG_LEVELS:
        raise ValueError(f"Debug level must be 0-3, got {level}")

    os.environ["LIBUSB_DEBUG"] = str(level)

    usb_logger = logging.getLogger("usb")
    usb_logger.setLevel(_USB_LOG_LEVELS[level])

    if level > 0 and _debug_handler is None:
        _debug_handler = logging.StreamHandler(sys.stderr)
        _debug_handler.setFormatter(logging.Formatter("usb: %(levelname)s %(message)s"))
        usb_logger.addHandler(_debug_handler)
        usb_logger.propagate = False
    elif level == 0 and _debug_handler is not None:
        usb_logger.removeHandler(_debug_handler)
        usb_logger.propagate = True
        _debug_handler = None


class PyUsbTransport:
    """
    USB transport backed by pyusb (libusb 1.0).

    Tracks what it changed on the device (claimed interface, detached
    kernel drivers) so ``close`` undoes exactly that.
    """

    def __init__(self):
        self._device = None
        self._claimed: Optional[int] = None
        self._detached: list[int] = []

    @property
    def is_open(self) -> bool:
        """Check if a device handle is held."""
        return self._device is not None

    def _require_device(self):
        if self._device is None:
            raise RuntimeError("USB device is not open")
        return self._device

    def open(self, vendor_id: int, product_id: int) -> None:
        """
        Find the device by vendor/product ID.

        Raises:
            DeviceNotFoundError: If no matching device is connected
            DeviceError: If no USB backend is available
        """
        try:
            device = usb.core.find(idVendor=vendor_id, idProduct=product_id)
        except (usb.core.USBError, usb.core.NoBackendError) as e:
            raise wrap_usb_error(e, "open device") from e

        if device is None:
            raise DeviceNotFoundError(vendor_id, product_id)

        logger.debug(
            f"Opened device {vendor_id:04x}:{product_id:04x} "
            f"(bus {device.bus}, address {device.address})"
        )
        self._device = device

    def claim_interface(self, interface: int) -> None:
        """
        Claim an interface, detaching the kernel driver first if one is bound.

        Raises:
            InterfaceClaimError: If detaching or claiming fails
        """
        device = self._require_device()

        try:
            if device.is_kernel_driver_active(interface):
                logger.debug(f"Detaching kernel driver from interface {interface}")
                device.detach_kernel_driver(interface)
                self._detached.append(interface)
        except NotImplementedError:
            # Backend cannot query kernel drivers (non-Linux)
            logger.debug("Kernel driver detach not supported by backend")
        except usb.core.USBError as e:
            raise wrap_usb_error(e, CLAIM_INTERFACE, interface=interface) from e

        try:
            usb.util.claim_interface(device, interface)
        except usb.core.USBError as e:
            raise wrap_usb_error(e, CLAIM_INTERFACE, interface=interface) from e

        self._claimed = interface
        logger.debug(f"Claimed interface {interface}")

    def control_transfer(
        self,
        request_type: int,
        request: int,
        value: int,
        index: int,
        data: bytes,
        timeout: Optional[int] = None,
    ) -> int:
        """
        Send a control transfer with ``data`` as the data stage.

        Returns:
            Number of bytes transferred

        Raises:
            TransferError: If the transfer fails
        """
        device = self._require_device()
        logger.debug(
            f"Control transfer: bmRequestType=0x{request_type:02x} bRequest=0x{request:02x} "
            f"wValue=0x{value:04x} wIndex=0x{index:04x} length={len(data)}"
        )
        try:
            return device.ctrl_transfer(request_type, request, value, index, data, timeout)
        except usb.core.USBError as e:
            raise wrap_usb_error(e, CONTROL_TRANSFER) from e

    def close(self) -> None:
        """
        Release the interface, reattach kernel drivers, reset and free the device.

        Errors here are logged rather than raised so they never mask the
        error that caused the close.
        """
        if self._device is None:
            return

        device = self._device

        if self._claimed is not None:
            try:
                usb.util.release_interface(device, self._claimed)
            except usb.core.USBError as e:
                logger.warning(f"Failed to release interface {self._claimed}: {e}")

        for interface in self._detached:
            try:
                device.attach_kernel_driver(interface)
            except usb.core.USBError as e:
                logger.warning(f"Failed to reattach kernel driver to interface {interface}: {e}")

        # The mouse needs a reset before it accepts the next command
        try:
            device.reset()
        except usb.core.USBError as e:
            logger.warning(f"Failed to reset device: {e}")

        usb.util.dispose_resources(device)

        self._device = None
        self._claimed = None
        self._detached = []
        logger.debug("Device closed")
