"""Battlefield 2 specific operations on .con documents.

The functions taking a ConDocument only mutate or read that document; the
caller is responsible for reading and writing it (see actions). The
functions taking a ConHandler read the files they need themselves.
"""

import re
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from ..config.schema import Profile, ProfileType
from ..logging_config import get_logger
from .con_document import ConDocument, ConValue, KeyNotFoundError, unquote
from .help_lines import VOICE_OVER_HELP_LINES

if TYPE_CHECKING:
    from .handler import ConHandler

logger = get_logger("bf2")

DEFAULT_PROFILE_KEY = "Default"
# BF2 only uses 4 digit profile keys
PROFILE_KEY_MAX_LENGTH = 4

GLOBAL_CON_KEY_DEFAULT_PROFILE_REF = "GlobalSettings.setDefaultUser"

PROFILE_CON_KEY_NAME = "LocalProfile.setName"
PROFILE_CON_KEY_GAMESPY_NICK = "LocalProfile.setGamespyNick"
PROFILE_CON_KEY_EMAIL = "LocalProfile.setEmail"
PROFILE_CON_KEY_PASSWORD = "LocalProfile.setPassword"

GENERAL_CON_KEY_SERVER_HISTORY = "GeneralSettings.addServerHistory"
GENERAL_CON_KEY_FAVORITE_SERVER = "GeneralSettings.addFavouriteServer"
GENERAL_CON_KEY_VOICE_OVER_HELP_PLAYED = "GeneralSettings.setPlayedVOHelp"

DEMO_BOOKMARKS_CON_KEY_DEMO_BOOKMARK = "LocalProfile.addDemoBookmark"

DEMO_BOOKMARK_FIELD_COUNT = 4
DEMO_BOOKMARK_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Either a quoted string (which may contain spaces) or a run of non-space characters
_DEMO_BOOKMARK_FIELD_PATTERN = re.compile(r'".*?"|\S+')
# strptime accepts unpadded numbers, BF2 always writes them zero-padded
_DEMO_BOOKMARK_TIMESTAMP_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}")
_PROFILE_KEY_PATTERN = re.compile(r"[0-9]+")


class MissingCredentialError(ValueError):
    """Raised when a profile has no (or an empty) nickname or password."""


class ProfileReferenceError(ValueError):
    """Base class for problems with the default profile reference."""


class MissingReferenceError(ProfileReferenceError):
    """Raised when Global.con does not reference a default profile."""


class InvalidReferenceError(ProfileReferenceError):
    """Raised when the default profile reference is not a valid profile key."""


def is_valid_profile_key_format(profile_key: str) -> bool:
    """Check that a profile key consists of 1 to 4 digits."""
    return (
        _PROFILE_KEY_PATTERN.fullmatch(profile_key) is not None
        and len(profile_key) <= PROFILE_KEY_MAX_LENGTH
    )


def set_default_profile(global_con: ConDocument, profile_key: str) -> None:
    """Reference the given profile as default profile in Global.con."""
    global_con.set_value(GLOBAL_CON_KEY_DEFAULT_PROFILE_REF, ConValue.quoted(profile_key))


def get_default_profile_key(global_con: ConDocument) -> str:
    """Get the key of the default profile referenced in Global.con.

    Args:
        global_con: Parsed Global.con

    Returns:
        The default profile's key, e.g. "0001"

    Raises:
        MissingReferenceError: If Global.con does not contain the reference
        InvalidReferenceError: If the reference is not a 1-4 digit key
    """
    try:
        default_profile_ref = global_con.get_value(GLOBAL_CON_KEY_DEFAULT_PROFILE_REF)
    except KeyNotFoundError:
        raise MissingReferenceError(
            f"reference to default profile is missing from {global_con.path}"
        ) from None

    profile_key = default_profile_ref.as_string()
    if not is_valid_profile_key_format(profile_key):
        raise InvalidReferenceError(
            f"reference to default profile in {global_con.path} is not a valid profile key: {profile_key}"
        )

    return profile_key


def get_encrypted_login(profile_con: ConDocument) -> tuple[str, str]:
    """Extract the GameSpy nickname and encrypted password from Profile.con.

    Local (singleplayer) profiles contain the nickname key with an empty
    value, so a missing and an empty value are treated the same.

    Returns:
        Tuple of (nickname, encrypted_password)

    Raises:
        MissingCredentialError: If either value is missing or empty
    """
    nickname = _get_non_empty_string(profile_con, PROFILE_CON_KEY_GAMESPY_NICK)
    if not nickname:
        raise MissingCredentialError("gamespy nickname is missing/empty")

    encrypted_password = _get_non_empty_string(profile_con, PROFILE_CON_KEY_PASSWORD)
    if not encrypted_password:
        raise MissingCredentialError("encrypted password is missing/empty")

    return nickname, encrypted_password


def _get_non_empty_string(document: ConDocument, key: str) -> str:
    if not document.has_key(key):
        return ""
    return document.get_value(key).as_string()


def purge_server_history(general_con: ConDocument) -> None:
    """Remove all server history entries from General.con."""
    general_con.delete(GENERAL_CON_KEY_SERVER_HISTORY)


def purge_server_favorites(general_con: ConDocument) -> None:
    """Remove all favorite servers from General.con."""
    general_con.delete(GENERAL_CON_KEY_FAVORITE_SERVER)


def mark_all_voice_over_help_as_played(general_con: ConDocument) -> None:
    """Mark every voice over help line as played in General.con.

    Any previously recorded progress is replaced.
    """
    general_con.set_value(
        GENERAL_CON_KEY_VOICE_OVER_HELP_PLAYED,
        ConValue.quoted_from_list(VOICE_OVER_HELP_LINES),
    )


def parse_demo_bookmark_timestamp(bookmark: str) -> datetime | None:
    """Get the timestamp of a demo bookmark.

    A bookmark has the format
    ``"{server name}" "{map name}" "{download link}" "{timestamp}"``,
    where any field without spaces may be unquoted.

    Args:
        bookmark: A single raw bookmark value

    Returns:
        The (naive) timestamp, or None if the bookmark is malformed
    """
    fields = _DEMO_BOOKMARK_FIELD_PATTERN.findall(bookmark)
    if len(fields) != DEMO_BOOKMARK_FIELD_COUNT:
        return None

    timestamp = unquote(fields[3])
    if _DEMO_BOOKMARK_TIMESTAMP_PATTERN.fullmatch(timestamp) is None:
        return None

    try:
        return datetime.strptime(timestamp, DEMO_BOOKMARK_TIMESTAMP_FORMAT)
    except ValueError:
        # e.g. month 13
        return None


def purge_old_demo_bookmarks(
    demo_bookmarks_con: ConDocument,
    reference: datetime,
    max_age: timedelta,
) -> None:
    """Remove all demo bookmarks older than max_age, measured from reference.

    Malformed bookmarks are removed as well. If no bookmark is kept, the
    key is removed entirely. A missing key is not an error.

    Args:
        demo_bookmarks_con: Parsed DemoBookmarks.con
        reference: Point in time the age is calculated against. If it is
                   timezone aware, bookmark timestamps are taken as UTC.
        max_age: Maximum age of kept bookmarks (inclusive)
    """
    if not demo_bookmarks_con.has_key(DEMO_BOOKMARKS_CON_KEY_DEMO_BOOKMARK):
        return

    bookmarks = demo_bookmarks_con.get_value(DEMO_BOOKMARKS_CON_KEY_DEMO_BOOKMARK).as_raw_list()
    keepers = []
    for bookmark in bookmarks:
        timestamp = parse_demo_bookmark_timestamp(bookmark)
        if timestamp is None:
            logger.debug(f"Dropping malformed demo bookmark: {bookmark}")
            continue

        if reference.tzinfo is not None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)

        if reference - timestamp <= max_age:
            keepers.append(bookmark)

    logger.debug(f"Keeping {len(keepers)} of {len(bookmarks)} demo bookmarks")
    if keepers:
        demo_bookmarks_con.set_value(DEMO_BOOKMARKS_CON_KEY_DEMO_BOOKMARK, ConValue.from_list(keepers))
    else:
        demo_bookmarks_con.delete(DEMO_BOOKMARKS_CON_KEY_DEMO_BOOKMARK)


def get_profiles(handler: "ConHandler") -> list[Profile]:
    """Get all local profiles except the built-in default profile.

    Raises:
        KeyNotFoundError: If a Profile.con does not contain a profile name
        OSError: If a profile cannot be read
    """
    profiles = []
    for profile_key in handler.get_profile_keys():
        if profile_key == DEFAULT_PROFILE_KEY:
            continue

        profile_con = handler.read_profile_config(profile_key)
        profile_name = profile_con.get_value(PROFILE_CON_KEY_NAME)

        # Singleplayer profiles do not contain an email address
        profile_type = ProfileType.MULTIPLAYER
        if not profile_con.has_key(PROFILE_CON_KEY_EMAIL):
            profile_type = ProfileType.SINGLEPLAYER

        profiles.append(Profile(
            key=profile_key,
            name=profile_name.as_string(),
            type=profile_type,
        ))

    return profiles


def read_default_profile_key(handler: "ConHandler") -> str:
    """Read Global.con and get the default profile's key."""
    return get_default_profile_key(handler.read_global_config())


def profile_select_options(
    profiles: list[Profile],
    default_profile_key: str,
) -> tuple[list[str], int]:
    """Build the entries of a profile dropdown.

    Args:
        profiles: Available profiles
        default_profile_key: Key of the profile to preselect

    Returns:
        Tuple of (option labels, index of the default profile); the index
        is 0 if the default profile is not among the profiles
    """
    selected = 0
    options = []
    for i, profile in enumerate(profiles):
        if profile.key == default_profile_key:
            selected = i
        options.append(f"{profile.name} ({profile.key})")

    return options, selected
