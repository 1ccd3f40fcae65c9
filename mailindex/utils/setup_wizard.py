"""
Interactive setup wizard for initial configuration.
Collects the user's identity and mail archive location and saves them.
"""

import logging
from dataclasses import replace
from typing import Callable, List, Optional

from .colors import Colors
from .config import CONFIG_ENV_VAR, ConfigStore, UserProfile
from .paths import PathResolutionError, make_path_absolute
from .validators import check_profile

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_ABORTED = 2

NO_MORE_EMAILS = "Press 'Enter' if none"

logger = logging.getLogger("mailindex.setup")


class SetupAborted(Exception):
    """Raised when the wizard cannot continue; nothing has been saved"""

    def __init__(self, message: str, exit_code: int = EXIT_ABORTED):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


def welcome_message_pre_setup() -> None:
    """Explain what is about to be asked, shown for a new configuration"""
    print(Colors.header("Welcome to mailindex!"))
    print()
    print(
        "mailindex helps you search your collection of email and keep up with\n"
        "new mail as it arrives.\n"
        "\n"
        "A few questions follow: your name, your email addresses, and the\n"
        "directory holding your mail. That directory is where your mail is\n"
        "stored today and where new messages will be delivered. It may contain\n"
        "any number of sub-directories, and every regular file inside should\n"
        "be a single email message. Files written by other mail programs, such\n"
        "as their indexes, are detected and skipped where possible.\n"
        "\n"
        "Mail delivered in maildir or mh format works as is. mbox storage, where\n"
        "one file holds many messages, is not supported. If your mail is kept in\n"
        "mbox files, convert it to maildir first with a tool such as mb2md. You\n"
        "can finish this setup now, but complete the conversion before running\n"
        "\"mailindex new\" for the first time.\n"
    )


def welcome_message_post_setup(config_file: str) -> None:
    """Point a first-time user at the saved file and the next step"""
    print()
    print(Colors.success("mailindex is now configured."))
    print(
        f"The settings are saved in {config_file}. To change them later,\n"
        "edit that file directly or run \"mailindex setup\" again. To use a\n"
        f"different configuration file, set ${{{CONFIG_ENV_VAR}}}.\n"
        "\n"
        "Next, run \"mailindex new\" to build the index of all your mail.\n"
        "The first indexing run can take a long time for a large archive, and\n"
        "the index needs about as much disk space as the mail itself, so make\n"
        "sure that space is available before you start.\n"
    )


def prompt(message: str) -> str:
    """
    Show message and block until the user enters one line.

    Returns:
        The line without its trailing newline

    Raises:
        SetupAborted: If input ends before a line is read
    """
    try:
        # input() flushes stdout before reading
        return input(message)
    except EOFError:
        raise SetupAborted("Exiting.") from None


class SetupWizard:
    """Ask for each setting in turn, keeping existing values as defaults"""

    def __init__(
        self,
        config_file: Optional[str] = None,
        open_store: Callable[[Optional[str]], ConfigStore] = ConfigStore.open_or_create,
    ):
        """
        Args:
            config_file: Explicit configuration file (default: resolved by the store)
            open_store: Factory returning the configuration store
        """
        self.config_file = config_file
        self.open_store = open_store

    def run(self) -> int:
        """
        Run the full setup flow.

        Returns:
            EXIT_SUCCESS if the configuration was saved, EXIT_FAILURE otherwise

        Raises:
            SetupAborted: On end of input or an unusable archive path
        """
        store = self.open_store(self.config_file)
        is_new = store.is_new

        if is_new:
            welcome_message_pre_setup()

        profile = store.profile
        profile = self._ask_name(profile)
        profile = self._ask_primary_email(profile)
        profile = self._ask_other_emails(profile)
        profile = self._ask_database_path(profile)

        for warning in check_profile(profile):
            logger.warning(warning)

        if not store.save(profile):
            return EXIT_FAILURE

        if is_new:
            welcome_message_post_setup(str(store.config_file))
        return EXIT_SUCCESS

    def _ask_name(self, profile: UserProfile) -> UserProfile:
        response = prompt(f"Your full name [{profile.full_name}]: ")
        if response:
            return replace(profile, full_name=response)
        return profile

    def _ask_primary_email(self, profile: UserProfile) -> UserProfile:
        response = prompt(f"Your primary email address [{profile.primary_email}]: ")
        if response:
            return replace(profile, primary_email=response)
        return profile

    def _ask_other_emails(self, profile: UserProfile) -> UserProfile:
        other_emails: List[str] = []

        # Every existing address is offered again, in order
        for old_email in profile.other_emails:
            response = prompt(f"Additional email address [{old_email}]: ")
            other_emails.append(response or old_email)

        while True:
            response = prompt(f"Additional email address [{NO_MORE_EMAILS}]: ")
            if not response:
                break
            other_emails.append(response)

        if other_emails:
            return replace(profile, other_emails=tuple(other_emails))
        return profile

    def _ask_database_path(self, profile: UserProfile) -> UserProfile:
        response = prompt(
            f"Top-level directory of your email archive [{profile.database_path}]: "
        )
        if not response:
            return profile

        try:
            absolute_path = make_path_absolute(response)
        except PathResolutionError as e:
            raise SetupAborted(str(e)) from e

        if absolute_path != response:
            logger.debug("Archive path %r resolved to %s", response, absolute_path)
        return replace(profile, database_path=absolute_path)


def run_setup_wizard(config_file: Optional[str] = None) -> int:
    """Run interactive setup wizard for the mailindex configuration"""
    return SetupWizard(config_file).run()
