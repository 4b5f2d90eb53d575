import logging
import os
import shutil

from uaesm import defaults, exceptions, system, util

LOG = logging.getLogger(util.replace_top_level_logger_name(__name__))


def export_gpg_key(source_keyfile: str, destination_keyfile: str) -> None:
    """Install the keyring blob source_keyfile as destination_keyfile.

    :param source_keyfile: Path of the shipped keyring file.
    :param destination_keyfile: Path of the keyring file apt will trust.

    :raise GPGKeyNotFound: if source_keyfile does not exist.
    """
    LOG.debug(
        "Exporting GPG key %s to %s", source_keyfile, destination_keyfile
    )
    if not os.path.exists(source_keyfile):
        raise exceptions.GPGKeyNotFound(keyfile=source_keyfile)
    os.makedirs(os.path.dirname(destination_keyfile), exist_ok=True)
    shutil.copy(source_keyfile, destination_keyfile)
    os.chmod(destination_keyfile, defaults.WORLD_READABLE_MODE)


def remove_gpg_key(keyfile: str) -> None:
    """Remove a previously exported keyring file, if present."""
    system.ensure_file_absent(keyfile)
