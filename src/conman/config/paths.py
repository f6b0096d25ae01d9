"""Default paths for Battlefield 2 configuration files and conman itself"""

import ctypes
import os
import sys
from pathlib import Path

# SHGetFolderPathW arguments for the user's "My Documents" folder
_CSIDL_PERSONAL = 5
_SHGFP_TYPE_CURRENT = 0
_MAX_PATH = 260


def _default_config_dir() -> Path:
    if sys.platform == "win32":
        return Path(os.path.expandvars(r"%APPDATA%\conman"))
    return Path.home() / ".config" / "conman"


class GamePaths:
    """Names and locations used by Battlefield 2 and by conman.

    Battlefield 2 keeps all user configuration below the documents folder:

        Documents/
            Battlefield 2/
                LogoCache/
                mods/
                    bf2/
                        cache/
                Profiles/
                    Global.con
                    0001/
                        Profile.con
                        General.con
                        ...
    """

    BF2_DIR_NAME = "Battlefield 2"
    PROFILES_DIR_NAME = "Profiles"
    MODS_DIR_NAME = "mods"
    CACHE_DIR_NAME = "cache"
    LOGO_CACHE_DIR_NAME = "LogoCache"
    GLOBAL_CON_FILE_NAME = "Global.con"
    PROFILE_CON_FILE_NAME = "Profile.con"

    # Configuration file location
    CONFIG_DIR = _default_config_dir()
    CONFIG_FILE = CONFIG_DIR / "configuration.xml"
    LOG_FILE = CONFIG_DIR / "conman.log"

    @classmethod
    def documents_dir(cls) -> Path:
        """Resolve the current user's documents folder.

        Uses the shell folder API on Windows so redirected folders
        (e.g. OneDrive) are honoured.

        Returns:
            Path to the documents folder

        Raises:
            OSError: If Windows cannot resolve the folder
        """
        if sys.platform != "win32":
            return Path.home() / "Documents"

        buf = ctypes.create_unicode_buffer(_MAX_PATH)
        result = ctypes.windll.shell32.SHGetFolderPathW(
            None, _CSIDL_PERSONAL, None, _SHGFP_TYPE_CURRENT, buf
        )
        if result != 0:
            raise OSError(f"Failed to resolve documents folder (HRESULT {result:#x})")
        return Path(buf.value)

    @classmethod
    def expand_path(cls, path_str: str) -> Path:
        """Expand environment variables and ~ in a path string.

        Args:
            path_str: Path string potentially containing environment variables

        Returns:
            Path object with expanded variables
        """
        return Path(os.path.expandvars(path_str)).expanduser()
