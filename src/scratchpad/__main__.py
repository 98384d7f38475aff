"""Entry point for ``python -m scratchpad``."""

from scratchpad.interfaces.cli import CLIInterface


def main() -> None:
    """Run the command line interface."""
    interface = CLIInterface()
    interface.logger.debug("Starting interface", interface=interface.name)
    interface.run()


if __name__ == "__main__":
    main()
