from typing import Dict, Optional  # noqa: F401


class NamedMessage:
    def __init__(self, name: str, msg: str):
        self.name = name
        self.msg = msg
        # we should use this field whenever we want to provide
        # extra information to the message. This is specially
        # useful if the message represents an error.
        self.additional_info = None  # type: Optional[Dict[str, str]]

    def __eq__(self, other):
        return (
            self.msg == other.msg
            and self.name == other.name
            and self.additional_info == other.additional_info
        )

    def __repr__(self):
        return "NamedMessage({}, {}, {})".format(
            self.name.__repr__(),
            self.msg.__repr__(),
            self.additional_info.__repr__(),
        )


class FormattedNamedMessage(NamedMessage):
    def __init__(self, name: str, msg: str):
        self.name = name
        self.tmpl_msg = msg

    def format(self, **msg_params):
        return NamedMessage(
            name=self.name, msg=self.tmpl_msg.format(**msg_params)
        )


SUBP_INVALID_COMMAND = "Invalid command specified '{cmd}'."
SUBP_COMMAND_FAILED = (
    "Failed running command '{cmd}' [exit({exit_code})]. Message: {stderr}"
)

BROKEN_YAML_MODULE = """\
Error while trying to parse a yaml file using 'yaml' from {path}"""

CLI_INTERRUPT_RECEIVED = "Interrupt received; exiting."
CLI_DESCRIPTION = "Manage Ubuntu Advantage services on this machine."
CLI_ROOT_DEBUG = "show all debug log messages to console"
CLI_ROOT_VERSION = "show version of {name}"
CLI_AVAILABLE_COMMANDS = "Available Commands"
CLI_ENABLE_ESM = "enable the Extended Security Maintenance repository"
CLI_ENABLE_ESM_DESC = """\
Enable the Extended Security Maintenance (ESM) APT repository, storing the
credentials in the APT auth file and installing the repository keyring."""
CLI_ENABLE_ESM_TOKEN = 'ESM token, in the form "user:password"'
CLI_DISABLE_ESM = "disable the Extended Security Maintenance repository"
CLI_DISABLE_ESM_DESC = """\
Disable the Extended Security Maintenance (ESM) APT repository, removing its
credentials and keyring."""
CLI_IS_ESM_ENABLED = (
    "exit with 0 if the Extended Security Maintenance repository is enabled"
)
CLI_IS_ESM_ENABLED_DESC = """\
Check whether the Extended Security Maintenance (ESM) repository is enabled.
Exits with 0 when enabled and 1 otherwise."""

INSTALLING_MISSING_DEPENDENCY = "Installing missing dependency {package}... "
UPDATING_PACKAGE_LISTS = "Updating package lists... "
CHECKING_TOKEN = "Checking token... "
STEP_OK = "OK"
STEP_ERROR = "ERROR"
STEP_SKIPPED = "SKIPPED"

REPO_ENABLED = "Ubuntu {label} repository enabled."
REPO_DISABLED = "Ubuntu {label} repository disabled."

UNEXPECTED_ERROR = FormattedNamedMessage(
    "unexpected-error",
    """\
Unexpected error(s) occurred: {error_msg}
For more details, see the log: {log_path}""",
)

E_NONROOT_USER = NamedMessage(
    "nonroot-user", "This command must be run as root (try using sudo)"
)

E_INVALID_TOKEN_FORMAT = NamedMessage(
    "invalid-token-format",
    'Invalid token, it must be in the form "user:password"',
)

E_INVALID_TOKEN = NamedMessage("invalid-token", "Invalid token")

E_TOKEN_CHECK_FAILED = FormattedNamedMessage(
    "token-check-failed", "Failed checking token ({error})"
)

E_TOKEN_CHECK_TIMEOUT = "Timeout after {timeout} seconds trying to reach {url}"

E_UNSUPPORTED_SERIES = FormattedNamedMessage(
    "unsupported-series", "{title} is not supported on {series}"
)

E_ALREADY_ENABLED = FormattedNamedMessage(
    "service-already-enabled", "{title} is already enabled"
)

E_NOT_ENABLED = FormattedNamedMessage(
    "service-not-enabled", "{title} is not enabled"
)

E_DEPENDENCY_INSTALL_FAILED = FormattedNamedMessage(
    "dependency-install-failed", "{stderr}"
)

E_GPG_KEY_NOT_FOUND = FormattedNamedMessage(
    "gpg-key-not-found",
    "GPG key '{keyfile}' not found.",
)

E_INVALID_FILE_ENCODING = FormattedNamedMessage(
    "invalid-file-encoding",
    "{file_name} needs to be a valid {file_encoding} file",
)

E_PARSING_ERROR_ON_OS_RELEASE = FormattedNamedMessage(
    "parsing-error-on-os-release",
    """\
Could not parse /etc/os-release VERSION: {orig_ver} (modified to {mod_ver})""",
)

E_MISSING_SERIES_ON_OS_RELEASE = FormattedNamedMessage(
    "missing-series-on-os-release",
    """\
Could not extract series information from /etc/os-release.
The VERSION field does not have version information: {version}
and the VERSION_CODENAME information is not present""",
)

E_INVALID_CONFIG_FILE = FormattedNamedMessage(
    "invalid-config-file",
    "Failed to parse configuration file {config_path}: {error}",
)

E_INVALID_CONFIG_VALUE = FormattedNamedMessage(
    "invalid-config-value",
    """\
Invalid value for {path_to_value} in /etc/ubuntu-advantage/uaclient.conf. \
Expected {expected_value}, found {value}.""",
)
