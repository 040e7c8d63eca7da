"""LED controller: encodes a lighting command and delivers it over USB."""

import logging
from typing import Optional

from gled.exceptions import ErrorContext
from gled.models import DeviceConfig, LightingCommand
from gled.protocol import LedCommandBuilder

from .protocols import UsbTransport

logger = logging.getLogger(__name__)


class LedController:
    """
    Sends lighting commands to the mouse.

    Each ``send`` is self-contained: the payload is built first (so invalid
    input never reaches the device), then the device is opened, claimed,
    written to once and closed again on every path.

    Example:
        ```python
        controller = LedController()
        controller.send(SolidCommand(color=Color(r=255, g=0, b=0)))
        ```
    """

    def __init__(
        self,
        transport: Optional[UsbTransport] = None,
        config: Optional[DeviceConfig] = None,
        builder: Optional[LedCommandBuilder] = None,
    ):
        """
        Initialize the controller.

        Args:
            transport: USB transport (defaults to PyUsbTransport)
            config: Device/transfer parameters (defaults to the G102/G203)
            builder: Payload builder
        """
        if transport is None:
            from .pyusb_transport import PyUsbTransport

            transport = PyUsbTransport()

        self.transport = transport
        self.config = config or DeviceConfig()
        self.builder = builder or LedCommandBuilder()

    def send(self, command: LightingCommand) -> int:
        """
        Encode and send one lighting command.

        Args:
            command: The lighting command to apply

        Returns:
            Number of bytes transferred

        Raises:
            PayloadEncodingError: If the command cannot be encoded
            DeviceError: If the device cannot be opened, claimed or written
        """
        payload = self.builder.payload(command)
        logger.info(f"Sending command: {payload.hex()}")

        config = self.config
        operation = f"send {command.mode.value} command to {config.usb_id}"
        with ErrorContext(operation, logger_instance=logger):
            try:
                self.transport.open(config.vendor_id, config.product_id)
                self.transport.claim_interface(config.interface)
                transferred = self.transport.control_transfer(
                    config.request_type,
                    config.request,
                    config.value,
                    config.index,
                    payload,
                    timeout=config.timeout_ms,
                )
            finally:
                self.transport.close()

        logger.info(f"{transferred} bytes transferred to device")
        return transferred
