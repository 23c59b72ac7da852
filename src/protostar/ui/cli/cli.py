"""Command line interface for the launcher."""

import sys
from typing import final

from protostar.config.config import ConfigError
from protostar.platform.logging import logger
from protostar.ui.cli.args import ArgumentParser
from protostar.ui.cli.args.options import AppsArgs, CLIArgs, IconArgs
from protostar.ui.cli.commands import AppsCommand, IconCommand, LaunchCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: Process exit code.
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, AppsArgs):
                return AppsCommand(args).execute()
            if isinstance(args, IconArgs):
                return IconCommand(args).execute()
            return LaunchCommand(args).execute()

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130
        except ConfigError as e:
            logger.error("%s", e)
            return 1
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            return 1


def main() -> int:
    """Main entry point."""

    return CommandProcessor.process_command()


if __name__ == "__main__":
    sys.exit(main())
