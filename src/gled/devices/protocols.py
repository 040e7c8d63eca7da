"""USB transport protocol."""

from typing import Optional, Protocol


class UsbTransport(Protocol):
    """
    Minimal USB capability needed to deliver one LED command.

    Implementations raise DeviceError subclasses on failure. ``close`` must
    be safe to call after a partial ``open``/``claim_interface``.
    """

    def open(self, vendor_id: int, product_id: int) -> None:
        """Open the device matching vendor_id/product_id."""
        ...

    def claim_interface(self, interface: int) -> None:
        """Detach any kernel driver from the interface and claim it."""
        ...

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
        Issue a host-to-device control transfer.

        Returns:
            Number of bytes transferred
        """
        ...

    def close(self) -> None:
        """Release the interface, reset the device and free its handle."""
        ...
