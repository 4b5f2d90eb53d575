import abc
import logging
import os
from typing import Optional, Tuple

from uaesm import apt, exceptions, gpg, messages, system, util
from uaesm.config import UAConfig

LOG = logging.getLogger(util.replace_top_level_logger_name(__name__))


class RepoEntitlement(metaclass=abc.ABCMeta):
    """An authenticated APT repository that can be toggled on and off.

    The enabled state is never stored: the repository is enabled when its
    sources list file holds an active deb line for repo_url.
    """

    # Short name used in command names and log messages
    name = None  # type: str

    # Full name used in error messages
    title = None  # type: str

    # Name used in the "Ubuntu <label> repository ..." messages
    label = None  # type: str

    repo_url = None  # type: str

    supported_series = ()  # type: Tuple[str, ...]

    def __init__(self, cfg: Optional[UAConfig] = None) -> None:
        if not cfg:
            cfg = UAConfig()
        self.cfg = cfg

    @property
    @abc.abstractmethod
    def repo_key_file(self) -> str:
        pass

    @property
    @abc.abstractmethod
    def repo_list_file(self) -> str:
        pass

    @property
    def dependencies(self) -> Tuple[apt.Dependency, ...]:
        """Packages that must be present before the repo can be used."""
        return ()

    @property
    def source_keyring_file(self) -> str:
        return os.path.join(self.cfg.keyrings_dir, self.repo_key_file)

    @property
    def trusted_keyring_file(self) -> str:
        return os.path.join(self.cfg.apt_keys_dir, self.repo_key_file)

    def repo_list_content(self, series: str) -> str:
        return (
            "deb {url} {series} main\n"
            "# deb-src {url} {series} main\n".format(
                url=self.repo_url, series=series
            )
        )

    def is_enabled(self) -> bool:
        repo_list_file = self.repo_list_file
        if not os.path.exists(repo_list_file):
            return False
        deb_prefix = "deb {} ".format(self.repo_url)
        for line in system.load_file(repo_list_file).splitlines():
            if line.strip().startswith(deb_prefix):
                return True
        return False

    def check_series(self) -> None:
        series = self.cfg.series
        if series not in self.supported_series:
            raise exceptions.UnsupportedSeriesError(
                title=self.title, series=series
            )

    def _check_apt_config_files(self) -> None:
        """Fail before any file is touched when a later step cannot work.

        @raises: InvalidFileEncodingError when the auth file is unreadable.
        """
        if os.path.exists(self.cfg.apt_auth_file):
            system.load_file(self.cfg.apt_auth_file)

    def setup_apt_config(self, username: str, password: str) -> None:
        series = self.cfg.series
        LOG.debug("Enabling %s repository on %s", self.name, series)
        system.write_file(self.repo_list_file, self.repo_list_content(series))
        apt.add_apt_auth_conf_entry(
            self.cfg.apt_auth_file, self.repo_url, username, password
        )
        gpg.export_gpg_key(
            self.source_keyring_file, self.trusted_keyring_file
        )

    def remove_apt_config(self) -> None:
        """Remove the list file, the keyring and the auth line."""
        system.ensure_file_absent(self.repo_list_file)
        gpg.remove_gpg_key(self.trusted_keyring_file)
        apt.remove_repo_from_apt_auth_file(
            self.cfg.apt_auth_file, self.repo_url
        )

    def enable(self, token: Optional[str]) -> bool:
        """Enable the repository using token as credentials.

        @raises: UnsupportedSeriesError, AlreadyEnabledError,
            InvalidTokenFormat, DependencyInstallError, InvalidToken,
            TokenCheckFailed, GPGKeyNotFound or InvalidFileEncodingError,
            from the first step that fails. No later step runs after a
            failure, and any file already written is removed again.
        """
        self.check_series()
        if self.is_enabled():
            raise exceptions.AlreadyEnabledError(title=self.title)
        username, password = util.parse_token(token)

        apt.install_missing_dependencies(self.dependencies)
        apt.check_token(self.cfg.apt_helper, self.repo_url, username, password)

        if not os.path.exists(self.source_keyring_file):
            raise exceptions.GPGKeyNotFound(keyfile=self.source_keyring_file)
        self._check_apt_config_files()
        try:
            self.setup_apt_config(username, password)
        except (exceptions.UbuntuAdvantageError, OSError):
            LOG.warning(
                "Failed to enable %s, removing its apt configuration",
                self.name,
            )
            self.remove_apt_config()
            raise
        print(messages.REPO_ENABLED.format(label=self.label))
        return True

    def disable(self) -> bool:
        """Remove the repository, its keyring and its credentials.

        @raises: UnsupportedSeriesError, NotEnabledError or
            InvalidFileEncodingError. The list file is left in place when
            the auth file cannot be read, so disable can be run again.
        """
        self.check_series()
        if not self.is_enabled():
            raise exceptions.NotEnabledError(title=self.title)
        self._check_apt_config_files()

        LOG.debug("Disabling %s repository", self.name)
        self.remove_apt_config()
        print(messages.REPO_DISABLED.format(label=self.label))
        return True
