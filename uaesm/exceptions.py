from typing import Optional

from uaesm import messages


class ProcessExecutionError(IOError):
    def __init__(
        self,
        cmd: str,
        exit_code: Optional[int] = None,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        self.stdout = stdout
        self.stderr = stderr
        self.exit_code = exit_code
        if not exit_code:
            message = messages.SUBP_INVALID_COMMAND.format(cmd=cmd)
        else:
            message = messages.SUBP_COMMAND_FAILED.format(
                cmd=cmd, exit_code=exit_code, stderr=stderr
            )
        super().__init__(message)


class UbuntuAdvantageError(Exception):
    """
    Base class for all of our custom errors.
    The exit_code is the status the CLI exits with when the error is raised.
    """

    _msg = None  # type: messages.NamedMessage
    _formatted_msg = None  # type: messages.FormattedNamedMessage

    exit_code = 1

    def __init__(self, **kwargs) -> None:
        if self._formatted_msg is not None:
            self.named_msg = self._formatted_msg.format(
                **kwargs
            )  # type: messages.NamedMessage
        else:
            self.named_msg = self._msg

        self.additional_info = kwargs

        for key, value in kwargs.items():
            setattr(self, key, value)

    @property
    def msg(self):
        return self.named_msg.msg

    @property
    def msg_code(self):
        return self.named_msg.name

    def __str__(self):
        return self.named_msg.msg


class NonRootUserError(UbuntuAdvantageError):
    _msg = messages.E_NONROOT_USER
    exit_code = 2


###############################################################################
#                              TOKEN                                          #
###############################################################################


class InvalidTokenFormat(UbuntuAdvantageError):
    _msg = messages.E_INVALID_TOKEN_FORMAT
    exit_code = 3


class InvalidToken(UbuntuAdvantageError):
    _msg = messages.E_INVALID_TOKEN
    exit_code = 3


class TokenCheckFailed(UbuntuAdvantageError):
    _formatted_msg = messages.E_TOKEN_CHECK_FAILED
    exit_code = 3


###############################################################################
#                              SERVICE STATE                                  #
###############################################################################


class UnsupportedSeriesError(UbuntuAdvantageError):
    _formatted_msg = messages.E_UNSUPPORTED_SERIES
    exit_code = 4


class AlreadyEnabledError(UbuntuAdvantageError):
    _formatted_msg = messages.E_ALREADY_ENABLED
    exit_code = 6


class NotEnabledError(UbuntuAdvantageError):
    _formatted_msg = messages.E_NOT_ENABLED
    exit_code = 8


###############################################################################
#                              APT / FILES                                    #
###############################################################################


class DependencyInstallError(UbuntuAdvantageError):
    _formatted_msg = messages.E_DEPENDENCY_INSTALL_FAILED


class GPGKeyNotFound(UbuntuAdvantageError):
    _formatted_msg = messages.E_GPG_KEY_NOT_FOUND


class InvalidFileEncodingError(UbuntuAdvantageError):
    _formatted_msg = messages.E_INVALID_FILE_ENCODING


class ParsingErrorOnOSReleaseFile(UbuntuAdvantageError):
    _formatted_msg = messages.E_PARSING_ERROR_ON_OS_RELEASE


class MissingSeriesOnOSReleaseFile(UbuntuAdvantageError):
    _formatted_msg = messages.E_MISSING_SERIES_ON_OS_RELEASE


class InvalidConfigValue(UbuntuAdvantageError):
    _formatted_msg = messages.E_INVALID_CONFIG_VALUE


class InvalidConfigFile(UbuntuAdvantageError):
    _formatted_msg = messages.E_INVALID_CONFIG_FILE
