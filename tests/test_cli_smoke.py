"""Smoke tests for CLI commands.

Uses Click's CliRunner with a controller whose transport is mocked, so no
mouse is needed.
"""

import pytest
from click.testing import CliRunner

from gled.cli.main import cli
from gled.exceptions import DeviceError, DeviceNotFoundError, TransferError


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(runner, controller):
    """Invoke the CLI with the mock-transport controller."""
    def _invoke(*args):
        return runner.invoke(cli, list(args), obj=controller)
    return _invoke


def payload_hex(transport) -> str:
    return transport.control_transfer.call_args[0][4].hex()


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        """Test main CLI help displays."""
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'Logitech G102 and G203 Prodigy Mouse LED control' in result.output
        for mode in ['solid', 'cycle', 'breathe', 'intro']:
            assert mode in result.output

    def test_version_flag(self, runner):
        """Test --version flag works."""
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert '0.1.0' in result.output

    def test_debug_option_listed(self, runner):
        """Test that the libusb debug flag is documented."""
        result = runner.invoke(cli, ['--help'])
        assert '-debug' in result.output

    @pytest.mark.parametrize('mode', ['solid', 'cycle', 'breathe', 'intro'])
    def test_mode_help(self, runner, mode):
        """Test mode command help."""
        result = runner.invoke(cli, [mode, '--help'])
        assert result.exit_code == 0


@pytest.mark.integration
class TestModes:
    """Test that each mode sends the right payload."""

    def test_solid(self, invoke, mock_transport):
        """Test 'solid ff0000'."""
        result = invoke('solid', 'ff0000')

        assert result.exit_code == 0
        assert payload_hex(mock_transport) == "11ff0e" + "3b0001ff00000000000000" + "000000000000"
        assert '20 bytes transferred to device' in result.output

    def test_solid_hash_color(self, invoke, mock_transport):
        """Test that '#RGB' colors are accepted."""
        result = invoke('solid', '#0f0')

        assert result.exit_code == 0
        assert payload_hex(mock_transport)[12:18] == "00ff00"

    def test_cycle_defaults(self, invoke, mock_transport):
        """Test 'cycle' with no arguments applies defaults."""
        result = invoke('cycle')

        assert result.exit_code == 0
        assert payload_hex(mock_transport) == (
            "11ff0e" + "3b0002" + "0000000000" + "2710" + "64" + "000000000000"
        )

    def test_cycle_rate_only(self, invoke, mock_transport):
        """Test 'cycle' with only a rate keeps the default brightness."""
        result = invoke('cycle', '5000')

        assert result.exit_code == 0
        assert payload_hex(mock_transport)[6:28] == "3b0002" + "0000000000" + "1388" + "64"

    def test_cycle_empty_rate_uses_default(self, invoke, mock_transport):
        """Test that an empty rate string falls back to the default."""
        result = invoke('cycle', '', '50')

        assert result.exit_code == 0
        assert payload_hex(mock_transport)[6:28] == "3b0002" + "0000000000" + "2710" + "32"

    def test_breathe(self, invoke, mock_transport):
        """Test 'breathe f00 100 50'."""
        result = invoke('breathe', 'f00', '100', '50')

        assert result.exit_code == 0
        assert payload_hex(mock_transport)[6:28] == "3b0003ff00000064003200"

    def test_intro_on(self, invoke, mock_transport):
        """Test 'intro on'."""
        result = invoke('intro', 'on')

        assert result.exit_code == 0
        assert payload_hex(mock_transport)[6:28] == "5b000101" + "00000000000000"

    def test_intro_off(self, invoke, mock_transport):
        """Test 'intro off'."""
        result = invoke('intro', 'off')

        assert result.exit_code == 0
        assert payload_hex(mock_transport)[6:14] == "5b000102"

    def test_debug_flag_single_dash(self, invoke, mock_transport):
        """Test '-debug 3' before the mode."""
        result = invoke('-debug', '3', 'intro', 'on')

        assert result.exit_code == 0
        mock_transport.control_transfer.assert_called_once()


@pytest.mark.integration
class TestArgumentErrors:
    """Test that bad arguments print usage, exit nonzero and send nothing."""

    def test_intro_maybe(self, invoke, mock_transport):
        """Test 'intro maybe'."""
        result = invoke('intro', 'maybe')

        assert result.exit_code != 0
        assert 'Usage:' in result.output
        assert "Invalid toggle argument 'maybe'" in result.output
        mock_transport.open.assert_not_called()

    def test_missing_mode(self, invoke, mock_transport):
        """Test that a bare 'gled' prints usage and fails."""
        result = invoke()

        assert result.exit_code == 2
        assert 'Usage:' in result.output
        assert 'Missing mode' in result.output
        mock_transport.open.assert_not_called()

    def test_missing_mode_with_options(self, invoke, mock_transport):
        """Test that global options alone are not enough."""
        result = invoke('-debug', '1')

        assert result.exit_code == 2
        mock_transport.open.assert_not_called()

    def test_unknown_mode(self, invoke, mock_transport):
        """Test that an unknown mode is rejected with usage."""
        result = invoke('rainbow')

        assert result.exit_code != 0
        assert 'Usage:' in result.output
        mock_transport.open.assert_not_called()

    @pytest.mark.parametrize(
        'args',
        [
            ['solid'],
            ['solid', 'ff00'],
            ['solid', 'zzzzzz'],
            ['cycle', '99'],
            ['cycle', '60001'],
            ['cycle', 'fast'],
            ['cycle', '1000', '0'],
            ['cycle', '1000', '101'],
            ['breathe', 'fff', '1000', 'bright'],
        ],
    )
    def test_invalid_fields(self, invoke, mock_transport, args):
        """Test that invalid fields never reach the device."""
        result = invoke(*args)

        assert result.exit_code != 0
        assert 'Usage:' in result.output
        mock_transport.open.assert_not_called()

    def test_debug_level_out_of_range(self, invoke, mock_transport):
        """Test that '-debug 4' is rejected."""
        result = invoke('-debug', '4', 'cycle')

        assert result.exit_code != 0
        mock_transport.open.assert_not_called()


@pytest.mark.integration
class TestDeviceErrors:
    """Test reporting of device failures."""

    def test_device_not_found(self, invoke, mock_transport):
        """Test that a missing mouse is reported with a hint and exit 1."""
        mock_transport.open.side_effect = DeviceNotFoundError(0x046D, 0xC084)

        result = invoke('solid', 'ff0000')

        assert result.exit_code == 1
        assert 'ERROR: Mouse not found (USB ID 046d:c084).' in result.output
        assert 'lsusb' in result.output
        mock_transport.close.assert_called_once()

    def test_transfer_error(self, invoke, mock_transport):
        """Test that a failed transfer exits nonzero without retrying."""
        mock_transport.control_transfer.side_effect = TransferError("Pipe error")

        result = invoke('cycle')

        assert result.exit_code == 1
        assert 'ERROR: Sending the LED command to the mouse failed.' in result.output
        assert mock_transport.control_transfer.call_count == 1

    def test_log_file_hint(self, invoke, mock_transport, tmp_path):
        """Test that the log file is mentioned when one is configured."""
        mock_transport.open.side_effect = DeviceNotFoundError(0x046D, 0xC084)
        log_file = tmp_path / "gled.log"

        result = invoke('--log-file', str(log_file), 'intro', 'on')

        assert result.exit_code == 1
        assert f'For details, check the log file: {log_file}' in result.output
        assert 'Sending command: 11ff0e5b000101' in log_file.read_text()

    def test_recoverable_error_has_no_bug_report_hint(self, invoke, mock_transport):
        """Test that fixable errors only point at the details."""
        mock_transport.open.side_effect = DeviceNotFoundError(0x046D, 0xC084)

        result = invoke('cycle')

        assert 'For details, rerun with -vv' in result.output
        assert 'bug' not in result.output

    def test_unexpected_device_error_asks_for_report(self, invoke, mock_transport):
        """Test that non-recoverable errors are reported as bugs."""
        mock_transport.open.side_effect = DeviceError("USB error during open device: Overflow")

        result = invoke('cycle')

        assert result.exit_code == 1
        assert 'This looks like a bug in gled' in result.output
        mock_transport.close.assert_called_once()

    def test_unexpected_exception_asks_for_report(self, invoke, mock_transport):
        """Test that non-gled exceptions are also reported as bugs."""
        mock_transport.control_transfer.side_effect = RuntimeError("boom")

        result = invoke('intro', 'off')

        assert result.exit_code == 1
        assert 'ERROR: RuntimeError: boom' in result.output
        assert 'This looks like a bug in gled' in result.output
