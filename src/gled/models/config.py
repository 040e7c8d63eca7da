"""USB device configuration model."""

from pydantic import BaseModel, ConfigDict, Field


class DeviceConfig(BaseModel):
    """Where and how LED commands are delivered.

    The defaults target the Logitech G102/G203 Prodigy and are the only
    values the mouse accepts; the model exists so the transport parameters
    live in one validated place instead of being scattered as literals.
    """

    model_config = ConfigDict(frozen=True)

    # Device identity
    vendor_id: int = Field(
        default=0x046D, ge=0, le=0xFFFF, description="USB vendor ID (Logitech, Inc.)"
    )
    product_id: int = Field(
        default=0xC084,
        ge=0,
        le=0xFFFF,
        description="USB product ID (G102 and G203 Prodigy Gaming Mouse)",
    )
    interface: int = Field(
        default=0,
        ge=0,
        le=0xFF,
        description="Interface claimed before the transfer (#0 of the active configuration)",
    )

    # HID SET_REPORT control transfer setup
    request_type: int = Field(
        default=0x21,
        ge=0,
        le=0xFF,
        description="bmRequestType (host-to-device, class, interface recipient)",
    )
    request: int = Field(default=0x09, ge=0, le=0xFF, description="bRequest (SET_REPORT)")
    value: int = Field(
        default=0x0211,
        ge=0,
        le=0xFFFF,
        description="wValue (report type in the high byte, report ID in the low byte)",
    )
    index: int = Field(default=0x01, ge=0, le=0xFFFF, description="wIndex (target interface)")

    timeout_ms: int | None = Field(
        default=None,
        gt=0,
        description="Control transfer timeout in milliseconds (None = USB library default)",
    )

    @property
    def usb_id(self) -> str:
        """Vendor/product pair in lsusb notation, e.g. '046d:c084'."""
        return f"{self.vendor_id:04x}:{self.product_id:04x}"
