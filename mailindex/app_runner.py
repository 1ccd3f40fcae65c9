import os
import sys
import signal
import logging
from typing import Optional, List, NoReturn

from mailindex.utils.colors import Colors
from mailindex.utils.config import ConfigurationError
from mailindex.utils.logging_utils import DEFAULT_LOG_LEVEL, setup_logging
from mailindex.utils.setup_wizard import EXIT_FAILURE, SetupAborted, SetupWizard

LOG_LEVEL_ENV_VAR = "MAILINDEX_LOG_LEVEL"
EXIT_INTERRUPTED = 130


class AppRunner:
    """Turns the outcome of the setup wizard into a process exit status."""

    def __init__(self, args: Optional[List[str]] = None) -> None:
        """
        Initialize the runner with CLI arguments.

        Args:
            args: Command line arguments (defaults to sys.argv)
        """
        self.args = args if args is not None else sys.argv
        self.config_file = self.args[1] if len(self.args) > 1 else None

    def run(self) -> NoReturn:
        """Execute the setup flow and exit with its status."""
        self.setup_signal_handlers()
        self.setup_logging()
        sys.exit(self.run_wizard())

    def setup_signal_handlers(self) -> None:
        """Treat SIGTERM like Ctrl-C."""
        signal.signal(signal.SIGTERM, self._signal_handler)

    @staticmethod
    def _signal_handler(signum, frame) -> NoReturn:
        """Handle shutdown signals."""
        raise KeyboardInterrupt

    def setup_logging(self) -> None:
        """Configure logging from the environment."""
        setup_logging(os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL))

    def run_wizard(self) -> int:
        """
        Run the wizard and map every outcome to an exit status.

        Returns:
            The wizard's own status (0 saved, 1 save failed), EXIT_FAILURE
            for an unreadable configuration, EXIT_INTERRUPTED on Ctrl-C.
            Fatal aborts exit the process directly.
        """
        logger = logging.getLogger("mailindex")
        try:
            return SetupWizard(self.config_file).run()
        except SetupAborted as e:
            self._abort(e)
        except ConfigurationError as e:
            logger.error("%s", e)
            print(Colors.error(f"Error: {e}"), file=sys.stderr)
            return EXIT_FAILURE
        except KeyboardInterrupt:
            print("\nExiting.", file=sys.stderr)
            return EXIT_INTERRUPTED

    @staticmethod
    def _abort(error: SetupAborted) -> NoReturn:
        """Report a fatal setup error and terminate without saving."""
        print(error.message, file=sys.stderr)
        sys.exit(error.exit_code)
