import json
import logging
import os
import pathlib
from collections import OrderedDict
from typing import Any, Dict, Union  # noqa: F401

from uaesm import defaults, util


class RegexRedactionFilter(logging.Filter):
    """A logging filter to redact confidential info"""

    def filter(self, record: logging.LogRecord):
        record.msg = util.redact_sensitive_logs(str(record.msg))
        if record.args:
            record.args = tuple(
                util.redact_sensitive_logs(str(arg))
                if isinstance(arg, str)
                else arg
                for arg in record.args
            )
        return True


class JsonArrayFormatter(logging.Formatter):
    """Json Array Formatter for our logging mechanism"""

    default_time_format = "%Y-%m-%dT%H:%M:%S"
    default_msec_format = "%s.%03d"
    required_fields = (
        "asctime",
        "levelname",
        "name",
        "funcName",
        "lineno",
        "message",
    )

    def format(self, record: logging.LogRecord) -> str:
        record.message = record.getMessage()
        record.asctime = self.formatTime(record)

        extra_message_dict = {}  # type: Dict[str, Any]
        if record.exc_info:
            extra_message_dict["exc_info"] = self.formatException(
                record.exc_info
            )
        if not extra_message_dict.get("exc_info") and record.exc_text:
            extra_message_dict["exc_info"] = record.exc_text
        if record.stack_info:
            extra_message_dict["stack_info"] = self.formatStack(
                record.stack_info
            )

        # is ordered to maintain order of fields in log output
        local_log_record = OrderedDict()  # type: Dict[str, Any]
        for field in self.required_fields:
            local_log_record[field] = record.__dict__.get(field)

        local_log_record["extra"] = extra_message_dict
        return json.dumps(list(local_log_record.values()))


def get_user_log_file() -> str:
    """Gets the correct user log_file storage location"""
    xdg_cache_home = os.environ.get("XDG_CACHE_HOME")
    if not xdg_cache_home:
        xdg_cache_home = os.path.join(os.path.expanduser("~"), ".cache")
    return os.path.join(
        xdg_cache_home,
        defaults.USER_CACHE_SUBDIR,
        defaults.DEFAULT_LOG_FILE_BASE_NAME + ".log",
    )


def get_user_or_root_log_file_path(log_file: str) -> str:
    """
    Gets the correct log_file path,
    adjusting for whether the user is root or not.
    """
    if util.we_are_currently_root():
        return log_file
    return get_user_log_file()


def setup_cli_logging(log_level: Union[str, int], log_file: str):
    """Setup logging to log_file

    If run as non-root then log_file is replaced with a user-specific log file.
    """
    # support lower-case log_level config value
    if isinstance(log_level, str):
        log_level = log_level.upper()

    log_file = get_user_or_root_log_file_path(log_file)

    logger = logging.getLogger(util.LOGGER_NAME)
    logger.setLevel(log_level)

    # Clear all handlers, so they are replaced for this logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []

    log_file_path = pathlib.Path(log_file)
    if not log_file_path.exists():
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        log_file_path.touch(mode=0o640)
    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(JsonArrayFormatter())
    file_handler.setLevel(log_level)
    file_handler.addFilter(RegexRedactionFilter())

    logger.addHandler(file_handler)


def setup_debug_console_logging(stream=None):
    """Also send every debug message to stream (stderr by default)."""
    console_handler = logging.StreamHandler(stream)
    console_handler.setFormatter(
        logging.Formatter(defaults.DEFAULT_LOG_FORMAT)
    )
    console_handler.setLevel(logging.DEBUG)
    console_handler.addFilter(RegexRedactionFilter())
    logger = logging.getLogger(util.LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.addHandler(console_handler)
