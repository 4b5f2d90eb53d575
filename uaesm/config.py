import copy
import logging
import os
from typing import Any, Dict, Optional, Set, Tuple

from uaesm import exceptions, system, util, yaml
from uaesm.defaults import (
    CONFIG_DEFAULTS,
    CONFIG_FIELD_ENVVAR_ALLOWLIST,
    DEFAULT_CONFIG_FILE,
)

LOG = logging.getLogger(util.replace_top_level_logger_name(__name__))

# Basic schema validation top-level keys for parse_config handling
VALID_UA_CONFIG_KEYS = (
    "log_file",
    "log_level",
    "series",
    "esm_repo_list",
    "keyrings_dir",
    "apt_keys_dir",
    "apt_auth_file",
    "apt_helper",
    "apt_method_https",
    "ca_certificates",
)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class UAConfig:
    def __init__(
        self,
        cfg: Optional[Dict[str, Any]] = None,
        series: Optional[str] = None,
    ) -> None:
        if cfg:
            self.cfg_path = None
            self.cfg = cfg
            self.invalid_keys = None  # type: Optional[Set[str]]
        else:
            self.cfg_path = get_config_path()
            self.cfg, self.invalid_keys = parse_config(self.cfg_path)
        self._series = series

    @property
    def log_level(self) -> str:
        log_level = str(
            self.cfg.get("log_level", CONFIG_DEFAULTS["log_level"])
        )
        if log_level.upper() not in VALID_LOG_LEVELS:
            raise exceptions.InvalidConfigValue(
                path_to_value="log_level",
                expected_value=", ".join(VALID_LOG_LEVELS),
                value=log_level,
            )
        return log_level.upper()

    @property
    def log_file(self) -> str:
        return self.cfg.get("log_file", CONFIG_DEFAULTS["log_file"])

    @property
    def series(self) -> str:
        """The release series the tool acts on.

        An explicit "series" config value wins over the series detected from
        /etc/os-release.
        """
        if self._series:
            return self._series
        configured = self.cfg.get("series")
        if configured:
            return str(configured).lower()
        return system.get_release_info().series

    @property
    def esm_repo_list(self) -> str:
        tmpl = self.cfg.get("esm_repo_list", CONFIG_DEFAULTS["esm_repo_list"])
        return tmpl.format(series=self.series)

    @property
    def keyrings_dir(self) -> str:
        return self.cfg.get("keyrings_dir", CONFIG_DEFAULTS["keyrings_dir"])

    @property
    def apt_keys_dir(self) -> str:
        return self.cfg.get("apt_keys_dir", CONFIG_DEFAULTS["apt_keys_dir"])

    @property
    def apt_auth_file(self) -> str:
        return self.cfg.get("apt_auth_file", CONFIG_DEFAULTS["apt_auth_file"])

    @property
    def apt_helper(self) -> str:
        return self.cfg.get("apt_helper", CONFIG_DEFAULTS["apt_helper"])

    @property
    def apt_method_https(self) -> str:
        return self.cfg.get(
            "apt_method_https", CONFIG_DEFAULTS["apt_method_https"]
        )

    @property
    def ca_certificates(self) -> str:
        return self.cfg.get(
            "ca_certificates", CONFIG_DEFAULTS["ca_certificates"]
        )

    def warn_about_invalid_keys(self):
        if self.invalid_keys is not None:
            for invalid_key in sorted(self.invalid_keys):
                LOG.warning(
                    "Ignoring invalid %s key: %s", self.cfg_path, invalid_key
                )


def get_config_path() -> str:
    """Get config path to be used when loading config dict."""
    config_file = os.environ.get("UA_CONFIG_FILE")
    if config_file:
        return config_file

    return DEFAULT_CONFIG_FILE


def parse_config(config_path=None) -> Tuple[Dict[str, Any], Set[str]]:
    """Parse known config file

    Attempt to find configuration in config_path and fallback to
    DEFAULT_CONFIG_FILE. Any missing configuration keys will be set to
    CONFIG_DEFAULTS.

    Values are overridden by any allowlisted environment variable with
    prefix 'UA_'.

    @param config_path: Fullpath to the config file. If unspecified, use
        get_config_path.

    @return: Tuple of the dict of configuration values and the set of
        unknown keys that were dropped.
    """
    cfg = copy.copy(CONFIG_DEFAULTS)  # type: Dict[str, Any]

    if not config_path:
        config_path = get_config_path()

    LOG.debug("Using client configuration file at %s", config_path)
    if os.path.exists(config_path):
        try:
            cfg.update(yaml.load_mapping(system.load_file(config_path)))
        except yaml.YAMLError as e:
            raise exceptions.InvalidConfigFile(
                config_path=config_path, error=str(e)
            )
    env_keys = {}
    for key, value in os.environ.items():
        key = key.lower()
        if key in CONFIG_FIELD_ENVVAR_ALLOWLIST:
            # Strip leading UA_
            env_keys[key[3:]] = value
    cfg.update(env_keys)
    for key in ("log_file", "esm_repo_list", "apt_auth_file"):
        if cfg.get(key):
            cfg[key] = os.path.expanduser(cfg[key])

    invalid_keys = set(cfg.keys()).difference(VALID_UA_CONFIG_KEYS)
    for invalid_key in invalid_keys:
        cfg.pop(invalid_key)

    return cfg, invalid_keys
