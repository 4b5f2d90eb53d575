import logging
import os
import re
from typing import List, Optional, Tuple

from uaesm import exceptions

LOGGER_NAME = "ubuntu-advantage"


def replace_top_level_logger_name(name: str) -> str:
    """Replace the name of the root logger from __name__"""
    if name == "":
        return ""
    names = name.split(".")
    names[0] = LOGGER_NAME
    return ".".join(names)


LOG = logging.getLogger(replace_top_level_logger_name(__name__))


REDACT_SENSITIVE_LOGS = [
    r"(https://[^:/@\s]+:)[^@\s]+(?=@)",
    r"(\slogin\s+\S+\s+password\s+)\S+",
    r"(\'token\': \')[^\']+",
    r"(\'enable-esm\', \'[^:\']*:)[^\']+",
]


def redact_sensitive_logs(
    log, redact_regexs: List[str] = REDACT_SENSITIVE_LOGS
) -> str:
    """Redact known sensitive information from log content."""
    redacted_log = log
    for redact_regex in redact_regexs:
        redacted_log = re.sub(redact_regex, r"\g<1><REDACTED>", redacted_log)
    return redacted_log


def we_are_currently_root() -> bool:
    return os.getuid() == 0


def parse_token(token: Optional[str]) -> Tuple[str, str]:
    """Split an ESM token into its user and password parts.

    :param token: the token string provided on the command line, or None.

    :return: a (user, password) tuple.
    :raise InvalidTokenFormat: if the token is missing or is not made of
        exactly one non-empty user and one non-empty password separated by a
        single colon.
    """
    if not token:
        raise exceptions.InvalidTokenFormat()
    parts = token.split(":")
    if len(parts) != 2 or not all(parts):
        LOG.debug("Rejecting token with %d colon separated parts", len(parts))
        raise exceptions.InvalidTokenFormat()
    user, password = parts
    return user, password
