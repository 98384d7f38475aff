"""CLI interface implementation using Typer."""

from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console

from scratchpad import __version__
from scratchpad.core import (
    DivisionByZeroError,
    build_comparison_report,
    run_division,
)
from scratchpad.utils.logger import configure_logging
from scratchpad.utils.settings import use_default_settings

from .base import BaseInterface

# Lines are printed whole and unhighlighted; colour only on a real terminal
console = Console(highlight=False, soft_wrap=True)


class CLIInterface(BaseInterface):
    """Command Line Interface implementation."""

    def __init__(self) -> None:
        """Initialize the CLI interface."""
        super().__init__()
        try:
            configure_logging()
        except (ValidationError, OSError) as exc:
            configure_logging(use_default_settings())
            self.logger.warning(
                "Invalid logging configuration, using defaults",
                error=str(exc),
            )
        self.app = typer.Typer(
            name="scratchpad",
            help="Print comparison results and divide numbers safely.",
            add_completion=False,
        )
        self._setup_commands()

    @property
    def name(self) -> str:
        """Get the interface name.

        Returns:
            str: The interface name

        """
        return "CLI"

    def _setup_commands(self) -> None:
        """Set up CLI commands."""
        self.app.command(name="compare")(self.compare)
        self.app.command(
            name="divide",
            context_settings={"ignore_unknown_options": True},
        )(self.divide)

        # Print the comparison report when no command is specified
        self.app.callback(invoke_without_command=True)(self._main_callback)

    def _main_callback(
        self,
        ctx: typer.Context,
        version: Annotated[
            bool,
            typer.Option(
                "--version",
                help="Show the program version and exit.",
                is_eager=True,
            ),
        ] = False,
    ) -> None:
        """Print comparison results and divide numbers safely."""
        if version:
            console.print(f"scratchpad {__version__}")
            console.file.flush()
            raise typer.Exit(0)

        if ctx.invoked_subcommand is None:
            self.compare()
            raise typer.Exit(0)

    def compare(self) -> None:
        """Print the value of z and the comparison operator results."""
        report = build_comparison_report()
        self.logger.info("Printing comparison report", z=report.z)

        for line in report.render():
            console.print(line)
        console.file.flush()

    def divide(
        self,
        numerator: Annotated[
            float,
            typer.Argument(help="Number to divide."),
        ],
        denominator: Annotated[
            float,
            typer.Argument(help="Number to divide by. Must not be zero."),
        ],
    ) -> None:
        """Divide NUMERATOR by DENOMINATOR and print the quotient."""
        self.logger.info(
            "Dividing",
            numerator=numerator,
            denominator=denominator,
        )

        try:
            result = run_division(numerator, denominator)
        except DivisionByZeroError as exc:
            self.logger.error("Division failed", error=str(exc))
            console.print(f"[red]Error: {exc}[/red]")
            console.file.flush()
            raise typer.Exit(1) from exc

        console.print(result.render())
        console.file.flush()

    def run(self) -> None:
        """Run the CLI interface."""
        # Let Typer handle the command parsing
        self.app()
