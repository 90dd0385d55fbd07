"""Tests for the core network configuration service.

All tests inject a mock :class:`CommandRunner` — no process is ever
spawned.

Coverage:
* Input validation happens before any command runs.
* Exact argument vectors handed to the runner.
* DHCP "already enabled" detection.
* Non-zero exits become ``CommandFailedError`` with stderr attached.
* Runner exception mapping.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from netcfg_menu.core.models import CommandResult, DhcpOutcome
from netcfg_menu.core.network_service import NetworkConfigService
from netcfg_menu.exceptions import CommandFailedError, CommandLaunchError, InvalidInputError


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

def _result(returncode: int = 0, stdout: str = "", stderr: str = "") -> CommandResult:
    return CommandResult(
        args=("netsh",),
        returncode=returncode,
        stdout=stdout.encode(),
        stderr=stderr.encode(),
    )


def _service(result: CommandResult | None = None) -> tuple[NetworkConfigService, MagicMock]:
    runner = MagicMock()
    runner.run.return_value = result if result is not None else _result()
    return NetworkConfigService(runner), runner


BLANKS = ["", "   ", "\t", " \n "]


# ---------------------------------------------------------------------------
# list_addresses
# ---------------------------------------------------------------------------

class TestListAddresses:
    def test_returns_stdout_verbatim(self) -> None:
        report = "Windows IP Configuration\n\n   Host Name . . . . : DESKTOP\n"
        svc, runner = _service(_result(stdout=report))

        assert svc.list_addresses() == report
        runner.run.assert_called_once_with(("ipconfig", "/all"))

    def test_failure_raises_with_stderr(self) -> None:
        svc, _ = _service(_result(returncode=1, stderr="something broke"))

        with pytest.raises(CommandFailedError, match="Failed to retrieve IP addresses") as exc_info:
            svc.list_addresses()
        assert exc_info.value.stderr == "something broke"
        assert exc_info.value.returncode == 1


# ---------------------------------------------------------------------------
# enable_dhcp
# ---------------------------------------------------------------------------

class TestEnableDhcp:
    @pytest.mark.parametrize("name", BLANKS)
    def test_blank_name_rejected_without_running(self, name: str) -> None:
        svc, runner = _service()

        with pytest.raises(InvalidInputError, match="Interface name cannot be empty"):
            svc.enable_dhcp(name)
        runner.run.assert_not_called()

    def test_runs_netsh_dhcp(self) -> None:
        svc, runner = _service()
        svc.enable_dhcp("Ethernet")

        runner.run.assert_called_once_with(
            ("netsh", "interface", "ip", "set", "address", "Ethernet", "dhcp"),
        )

    def test_name_is_trimmed(self) -> None:
        svc, runner = _service()
        svc.enable_dhcp("  Ethernet  ")

        args = runner.run.call_args.args[0]
        assert args[5] == "Ethernet"

    def test_newly_enabled(self) -> None:
        svc, _ = _service(_result(stdout="Ok.\n"))
        assert svc.enable_dhcp("Ethernet") is DhcpOutcome.ENABLED

    def test_already_enabled(self) -> None:
        svc, _ = _service(_result(stdout="DHCP is already enabled on this interface.\n"))
        assert svc.enable_dhcp("Ethernet") is DhcpOutcome.ALREADY_ENABLED

    def test_marker_match_is_case_sensitive(self) -> None:
        svc, _ = _service(_result(stdout="dhcp is already enabled on this interface.\n"))
        assert svc.enable_dhcp("Ethernet") is DhcpOutcome.ENABLED

    def test_marker_only_checked_on_stdout(self) -> None:
        svc, _ = _service(_result(stderr="DHCP is already enabled"))
        assert svc.enable_dhcp("Ethernet") is DhcpOutcome.ENABLED

    def test_failure_names_interface(self) -> None:
        svc, _ = _service(
            _result(returncode=1, stderr="The filename, directory name, or volume label syntax is incorrect."),
        )

        with pytest.raises(CommandFailedError) as exc_info:
            svc.enable_dhcp("Wi-Fi 2")
        assert "Wi-Fi 2" in str(exc_info.value)
        assert "volume label syntax" in exc_info.value.stderr

    def test_marker_ignored_on_failure(self) -> None:
        svc, _ = _service(_result(returncode=1, stdout="DHCP is already enabled"))

        with pytest.raises(CommandFailedError):
            svc.enable_dhcp("Ethernet")

    def test_consecutive_calls_follow_tool_output(self) -> None:
        runner = MagicMock()
        runner.run.side_effect = [
            _result(stdout="\n"),
            _result(stdout="DHCP is already enabled on this interface.\n"),
        ]
        svc = NetworkConfigService(runner)

        assert svc.enable_dhcp("Ethernet") is DhcpOutcome.ENABLED
        assert svc.enable_dhcp("Ethernet") is DhcpOutcome.ALREADY_ENABLED


# ---------------------------------------------------------------------------
# set_static_ip
# ---------------------------------------------------------------------------

VALID = ("Ethernet", "192.168.1.10", "255.255.255.0", "192.168.1.1")


class TestSetStaticIp:
    @pytest.mark.parametrize("index", range(4))
    @pytest.mark.parametrize("blank", BLANKS)
    def test_each_blank_field_rejected_without_running(self, index: int, blank: str) -> None:
        values = list(VALID)
        values[index] = blank
        svc, runner = _service()

        with pytest.raises(InvalidInputError, match="All parameters must be provided"):
            svc.set_static_ip(*values)
        runner.run.assert_not_called()

    def test_runs_netsh_static(self) -> None:
        svc, runner = _service()
        svc.set_static_ip(*VALID)

        runner.run.assert_called_once_with(
            (
                "netsh", "interface", "ip", "set", "address",
                "Ethernet", "static", "192.168.1.10", "255.255.255.0", "192.168.1.1",
            ),
        )

    def test_values_are_trimmed(self) -> None:
        svc, runner = _service()
        svc.set_static_ip(" Ethernet ", " 10.0.0.2", "255.0.0.0 ", "\t10.0.0.1")

        args = runner.run.call_args.args[0]
        assert args[5:] == ("Ethernet", "static", "10.0.0.2", "255.0.0.0", "10.0.0.1")

    def test_returns_none_on_success(self) -> None:
        svc, _ = _service()
        assert svc.set_static_ip(*VALID) is None

    def test_failure_names_interface(self) -> None:
        svc, _ = _service(_result(returncode=1, stderr="Invalid address parameter."))

        with pytest.raises(CommandFailedError, match="Ethernet") as exc_info:
            svc.set_static_ip(*VALID)
        assert exc_info.value.stderr == "Invalid address parameter."


# ---------------------------------------------------------------------------
# Runner exception mapping
# ---------------------------------------------------------------------------

class TestRunnerExceptions:
    def test_launch_error_propagates_unchanged(self) -> None:
        runner = MagicMock()
        original = CommandLaunchError("Could not run netsh: not found")
        runner.run.side_effect = original
        svc = NetworkConfigService(runner)

        with pytest.raises(CommandLaunchError) as exc_info:
            svc.enable_dhcp("Ethernet")
        assert exc_info.value is original

    def test_unexpected_error_wrapped(self) -> None:
        runner = MagicMock()
        original = RuntimeError("kaboom")
        runner.run.side_effect = original
        svc = NetworkConfigService(runner)

        with pytest.raises(CommandLaunchError, match="Unexpected") as exc_info:
            svc.list_addresses()
        assert exc_info.value.__cause__ is original
