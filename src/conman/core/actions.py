"""Maintenance actions offered by the command line and the GUI.

Each action reads one configuration file, applies a single change and
writes the file back.
"""

from datetime import datetime, timedelta
from typing import Optional

from ..config.schema import ProfileConfigFile
from ..config.security import decrypt_profile_password, encrypt_profile_password
from ..logging_config import get_logger
from . import bf2
from .con_document import ConValue
from .handler import ConHandler

logger = get_logger("actions")

DEMO_BOOKMARK_MAX_AGE = timedelta(days=7)


class InvalidProfileKeyError(ValueError):
    """Raised when no profile with the given key exists."""


def set_default_profile(handler: ConHandler, profile_key: str) -> None:
    """Make the given profile the default profile.

    Raises:
        InvalidProfileKeyError: If no profile with that key exists
    """
    if not handler.is_valid_profile_key(profile_key):
        raise InvalidProfileKeyError(f"given profile key is not valid: {profile_key}")

    global_con = handler.read_global_config()
    bf2.set_default_profile(global_con, profile_key)
    handler.write_config_file(global_con)
    logger.info(f"Set default profile to {profile_key}")


def get_profile_password(handler: ConHandler, profile_key: str) -> str:
    """Read and decrypt the password of a profile.

    The profile must also have a GameSpy nickname, so singleplayer profiles
    fail with MissingCredentialError even if they contain a password.

    Raises:
        MissingCredentialError: If the profile has no nickname or password
        DecryptionError: If the password cannot be decrypted
    """
    profile_con = handler.read_profile_config(profile_key, ProfileConfigFile.PROFILE)
    _, encrypted_password = bf2.get_encrypted_login(profile_con)
    return decrypt_profile_password(encrypted_password)


def set_profile_password(handler: ConHandler, profile_key: str, password: str) -> None:
    """Encrypt and store a new password for a profile.

    Raises:
        EncryptionError: If the password cannot be encrypted
    """
    profile_con = handler.read_profile_config(profile_key, ProfileConfigFile.PROFILE)
    encrypted_password = encrypt_profile_password(password)
    profile_con.set_value(bf2.PROFILE_CON_KEY_PASSWORD, ConValue(encrypted_password))
    handler.write_config_file(profile_con)
    logger.info(f"Updated password of profile {profile_key}")


def purge_server_history(handler: ConHandler, profile_key: str) -> None:
    general_con = handler.read_profile_config(profile_key, ProfileConfigFile.GENERAL)
    bf2.purge_server_history(general_con)
    handler.write_config_file(general_con)
    logger.info(f"Purged server history of profile {profile_key}")


def purge_server_favorites(handler: ConHandler, profile_key: str) -> None:
    general_con = handler.read_profile_config(profile_key, ProfileConfigFile.GENERAL)
    bf2.purge_server_favorites(general_con)
    handler.write_config_file(general_con)
    logger.info(f"Purged server favorites of profile {profile_key}")


def purge_old_demo_bookmarks(
    handler: ConHandler,
    profile_key: str,
    max_age: timedelta = DEMO_BOOKMARK_MAX_AGE,
    reference: Optional[datetime] = None,
) -> None:
    """Remove demo bookmarks older than max_age from a profile.

    A profile without a DemoBookmarks.con has nothing to purge, so a
    missing file is not an error.

    Args:
        handler: File handler
        profile_key: Key of the profile to clean up
        max_age: Maximum age of kept bookmarks
        reference: Point in time the age is calculated against, defaults
                   to the current local time (BF2 writes local timestamps)
    """
    try:
        demo_bookmarks_con = handler.read_profile_config(profile_key, ProfileConfigFile.DEMO_BOOKMARKS)
    except FileNotFoundError:
        logger.info(f"Profile {profile_key} has no demo bookmarks")
        return

    if reference is None:
        reference = datetime.now()

    bf2.purge_old_demo_bookmarks(demo_bookmarks_con, reference, max_age)
    handler.write_config_file(demo_bookmarks_con)
    logger.info(f"Purged demo bookmarks older than {max_age.days} days from profile {profile_key}")


def mark_all_voice_over_help_as_played(handler: ConHandler, profile_key: str) -> None:
    general_con = handler.read_profile_config(profile_key, ProfileConfigFile.GENERAL)
    bf2.mark_all_voice_over_help_as_played(general_con)
    handler.write_config_file(general_con)
    logger.info(f"Marked all voice over help lines as played for profile {profile_key}")


def purge_shader_cache(handler: ConHandler) -> None:
    removed = handler.purge_shader_cache()
    logger.info(f"Purged shader cache ({removed} entries)")


def purge_logo_cache(handler: ConHandler) -> None:
    removed = handler.purge_logo_cache()
    logger.info(f"Purged logo cache ({removed} entries)")
