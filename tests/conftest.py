"""Pytest fixtures for tests."""

import logging
from unittest.mock import Mock

import pytest

from gled.devices import LedController
from gled.models import DeviceConfig


@pytest.fixture(autouse=True)
def isolate_logging(monkeypatch):
    """Undo logging and libusb debug changes made by the CLI."""
    monkeypatch.delenv("LIBUSB_DEBUG", raising=False)
    yield

    from gled.cli import main
    from gled.devices.pyusb_transport import set_debug_level

    root_logger = logging.getLogger()
    for handler in main._handlers:
        root_logger.removeHandler(handler)
    main._handlers.clear()
    set_debug_level(0)


@pytest.fixture
def mock_transport():
    """Create a mock USB transport that reports a full 20-byte transfer."""
    transport = Mock()
    transport.control_transfer.return_value = 20
    return transport


@pytest.fixture
def device_config():
    """Default G102/G203 device configuration."""
    return DeviceConfig()


@pytest.fixture
def controller(mock_transport, device_config):
    """LedController wired to the mock transport."""
    return LedController(transport=mock_transport, config=device_config)

