"""Tests for CLI interface implementation."""

from unittest.mock import MagicMock, patch

import pytest
import typer

from scratchpad.core import DivisionByZeroError
from scratchpad.interfaces.base import BaseInterface
from scratchpad.interfaces.cli import CLIInterface
from scratchpad.models.io import DivisionResult


class TestCLIInterface:
    """Test CLI interface functionality."""

    def test_cli_interface_inherits_base(self) -> None:
        """Test that CLIInterface inherits from BaseInterface."""
        assert issubclass(CLIInterface, BaseInterface)

    def test_cli_interface_has_name(self) -> None:
        """Test that CLIInterface has correct name."""
        cli = CLIInterface()
        assert cli.name == "CLI"

    def test_cli_interface_has_typer_app(self) -> None:
        """Test that CLIInterface has Typer app."""
        cli = CLIInterface()
        assert isinstance(cli.app, typer.Typer)

    def test_cli_compare_command(self) -> None:
        """The compare command should print z and four comparisons."""
        cli = CLIInterface()

        with patch("scratchpad.interfaces.cli.console") as mock_console:
            cli.compare()

            printed = [call.args[0] for call in mock_console.print.call_args_list]
            assert printed == [
                "Value of z: 10",
                "x == y: true",
                "x != y: false",
                "x > y: false",
                "x == z: true",
            ]
            mock_console.file.flush.assert_called_once()

    def test_cli_divide_prints_result(self) -> None:
        """The divide command should print the formatted quotient."""
        cli = CLIInterface()

        with (
            patch("scratchpad.interfaces.cli.console") as mock_console,
            patch("scratchpad.interfaces.cli.run_division") as mock_run,
        ):
            mock_run.return_value = DivisionResult(
                numerator=10,
                denominator=4,
                quotient=2.5,
            )

            cli.divide(10.0, 4.0)

            mock_run.assert_called_once_with(10.0, 4.0)
            mock_console.print.assert_called_once_with("Result: 2.500000")

    def test_cli_divide_by_zero_exits_with_error(self) -> None:
        """The divide command should report the error and exit with 1."""
        cli = CLIInterface()

        with patch("scratchpad.interfaces.cli.console") as mock_console:
            with pytest.raises(typer.Exit) as exc_info:
                cli.divide(10.0, 0.0)

            assert exc_info.value.exit_code == 1
            assert isinstance(exc_info.value.__cause__, DivisionByZeroError)
            mock_console.print.assert_called_once_with(
                "[red]Error: division by zero is not allowed[/red]",
            )

    def test_cli_run_method(self) -> None:
        """Test CLI run method executes typer app."""
        cli = CLIInterface()

        # Mock the typer app
        cli.app = MagicMock()

        cli.run()

        cli.app.assert_called_once()

    def test_cli_configures_logging_on_init(self) -> None:
        """Creating the interface should configure logging."""
        with patch("scratchpad.interfaces.cli.configure_logging") as mock_configure:
            CLIInterface()

        mock_configure.assert_called_once_with()

    def test_cli_falls_back_to_default_logging(self) -> None:
        """A broken logging configuration should not stop the interface."""
        with patch("scratchpad.interfaces.cli.configure_logging") as mock_configure:
            mock_configure.side_effect = [OSError("read-only file system"), None]

            cli = CLIInterface()

        assert cli.name == "CLI"
        assert mock_configure.call_count == 2
        fallback_settings = mock_configure.call_args_list[1].args[0]
        assert fallback_settings.log_level == "WARNING"
        assert fallback_settings.log_file_path is None

    def test_cli_compare_keeps_info_logs_quiet_by_default(
        self,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """At the default level only the report is printed."""
        cli = CLIInterface()

        cli.compare()

        captured = capsys.readouterr()
        assert captured.out.splitlines()[0] == "Value of z: 10"
        assert captured.err == ""
