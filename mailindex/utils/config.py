"""
Configuration Management Module
Reads and writes the user profile kept in the mailindex configuration file
"""

import os
import pwd
import socket
import getpass
import logging
import tempfile
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple
from dotenv import dotenv_values, set_key


CONFIG_ENV_VAR = "MAILINDEX_CONFIG"
DEFAULT_CONFIG_NAME = ".mailindex-config"

# Keys used in the configuration file
USER_NAME_KEY = "USER_NAME"
PRIMARY_EMAIL_KEY = "USER_PRIMARY_EMAIL"
OTHER_EMAIL_KEY = "USER_OTHER_EMAIL"
DATABASE_PATH_KEY = "DATABASE_PATH"

OTHER_EMAIL_SEPARATOR = ";"

logger = logging.getLogger("mailindex.config")


class ConfigurationError(Exception):
    """Raised when the configuration file exists but cannot be read"""


@dataclass(frozen=True)
class UserProfile:
    """Identity and archive location of the mailindex user"""
    full_name: str = ""
    primary_email: str = ""
    other_emails: Tuple[str, ...] = ()
    database_path: str = ""


def resolve_config_path(config_file: Optional[str] = None) -> Path:
    """
    Pick the configuration file location.

    Order: explicit argument, ${MAILINDEX_CONFIG}, ~/.mailindex-config
    """
    if config_file:
        return Path(config_file).expanduser()
    env = os.getenv(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser()
    return Path.home() / DEFAULT_CONFIG_NAME


def _login_name() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return ""


def _default_full_name() -> str:
    """Full name from the passwd GECOS field, else the login name"""
    try:
        gecos = pwd.getpwuid(os.getuid()).pw_gecos
    except KeyError:
        gecos = ""
    name = gecos.split(",", 1)[0].strip()
    return name or _login_name()


def _default_primary_email() -> str:
    user = _login_name()
    if not user:
        return ""
    return f"{user}@{socket.getfqdn()}"


def _default_database_path() -> str:
    return os.path.join(os.path.expanduser("~"), "mail")


def default_profile() -> UserProfile:
    """Profile suggested to a user who has no configuration yet"""
    return UserProfile(
        full_name=_default_full_name(),
        primary_email=_default_primary_email(),
        other_emails=(),
        database_path=_default_database_path(),
    )


def _parse_emails(value: Optional[str]) -> Tuple[str, ...]:
    """Split the stored address list, dropping empty items"""
    if not value:
        return ()
    return tuple(item for item in value.split(OTHER_EMAIL_SEPARATOR) if item)


def _from_values(values: Dict[str, Optional[str]]) -> UserProfile:
    """Build a profile from file values, filling missing keys with defaults"""
    defaults = default_profile()

    def _get(key: str, default: str) -> str:
        value = values.get(key)
        return default if value is None else value

    return UserProfile(
        full_name=_get(USER_NAME_KEY, defaults.full_name),
        primary_email=_get(PRIMARY_EMAIL_KEY, defaults.primary_email),
        other_emails=_parse_emails(values.get(OTHER_EMAIL_KEY)),
        database_path=_get(DATABASE_PATH_KEY, defaults.database_path),
    )


def _to_values(profile: UserProfile) -> Dict[str, str]:
    return {
        USER_NAME_KEY: profile.full_name,
        PRIMARY_EMAIL_KEY: profile.primary_email,
        OTHER_EMAIL_KEY: OTHER_EMAIL_SEPARATOR.join(profile.other_emails),
        DATABASE_PATH_KEY: profile.database_path,
    }


class ConfigStore:
    """
    Handle on the mailindex configuration file.

    The profile is an immutable value; setters swap in a new one and
    nothing reaches the disk until save() succeeds.
    """

    def __init__(self, config_file: Path, profile: UserProfile, is_new: bool = False):
        """
        Args:
            config_file: Location of the configuration file
            profile: Current profile values
            is_new: True if the file did not exist when opened
        """
        self.config_file = Path(config_file)
        self.is_new = is_new
        self._profile = profile

    @classmethod
    def open_or_create(cls, config_file: Optional[str] = None) -> "ConfigStore":
        """
        Open the configuration, or prepare a new one with default values.

        Args:
            config_file: Explicit location (default: see resolve_config_path)

        Raises:
            ConfigurationError: If the file exists but cannot be read
        """
        path = resolve_config_path(config_file)

        if not path.exists():
            logger.debug("No configuration at %s; starting from defaults", path)
            return cls(path, default_profile(), is_new=True)

        try:
            values = dotenv_values(path, interpolate=False, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e

        logger.debug("Loaded configuration from %s", path)
        return cls(path, _from_values(values), is_new=False)

    @property
    def profile(self) -> UserProfile:
        return self._profile

    def get_user_name(self) -> str:
        return self._profile.full_name

    def set_user_name(self, name: str) -> None:
        self._profile = replace(self._profile, full_name=name)

    def get_primary_email(self) -> str:
        return self._profile.primary_email

    def set_primary_email(self, email: str) -> None:
        self._profile = replace(self._profile, primary_email=email)

    def get_other_emails(self) -> Tuple[str, ...]:
        return self._profile.other_emails

    def set_other_emails(self, emails: Iterable[str]) -> None:
        """Replace the whole list of secondary addresses"""
        self._profile = replace(self._profile, other_emails=tuple(emails))

    def get_database_path(self) -> str:
        return self._profile.database_path

    def set_database_path(self, path: str) -> None:
        self._profile = replace(self._profile, database_path=path)

    def save(self, profile: Optional[UserProfile] = None) -> bool:
        """
        Write the profile to disk in a single atomic replace.

        Keys not managed here are carried over from the existing file.

        Args:
            profile: Profile to commit (default: the current one)

        Returns:
            True on success, False if the file could not be written
        """
        candidate = profile if profile is not None else self._profile
        directory = self.config_file.parent

        try:
            directory.mkdir(parents=True, exist_ok=True)
            # mkstemp creates the file with mode 0600
            fd, tmp_name = tempfile.mkstemp(prefix=f"{self.config_file.name}.", dir=directory)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    if self.config_file.is_file():
                        handle.write(self.config_file.read_text(encoding="utf-8"))

                for key, value in _to_values(candidate).items():
                    set_key(tmp_name, key, value, quote_mode="always")

                os.replace(tmp_name, self.config_file)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            logger.error("Error saving configuration to %s: %s", self.config_file, e)
            return False

        self._profile = candidate
        logger.info("Configuration saved to %s", self.config_file)
        return True
