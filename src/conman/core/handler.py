"""Read and write Battlefield 2 configuration files on disk.

ConHandler knows where Battlefield 2 keeps its files below the user's
documents folder. It reads and writes .con documents, enumerates profiles
and purges the game's cache folders.
"""

import glob
import shutil
from pathlib import Path
from typing import Optional, Union

from ..config.path_validator import validate_removal_path
from ..config.paths import GamePaths
from ..config.schema import ProfileConfigFile
from ..logging_config import get_logger
from .con_document import ConDocument

logger = get_logger("handler")


class ConHandler:
    """File access for Battlefield 2 configuration files.

    Layout below the base path (Documents/Battlefield 2):
        Profiles/Global.con          - global settings, reference to the default profile
        Profiles/<key>/Profile.con   - one folder per profile, e.g. 0001
        mods/<mod>/cache/<uuid>/     - shader cache (*.cfx)
        LogoCache/<server host>/     - cached server banner images
    """

    def __init__(self, documents_dir: Optional[Path] = None):
        """Initialize the handler.

        Args:
            documents_dir: Documents folder containing "Battlefield 2",
                           resolved from the OS when None
        """
        self._documents_dir = documents_dir

    @property
    def documents_dir(self) -> Path:
        if self._documents_dir is None:
            self._documents_dir = GamePaths.documents_dir()
        return self._documents_dir

    def build_base_path(self) -> Path:
        return self.documents_dir / GamePaths.BF2_DIR_NAME

    def build_profiles_folder_path(self) -> Path:
        return self.build_base_path() / GamePaths.PROFILES_DIR_NAME

    def build_global_config_path(self) -> Path:
        return self.build_profiles_folder_path() / GamePaths.GLOBAL_CON_FILE_NAME

    def build_profile_config_path(
        self,
        profile_key: str,
        config_file: ProfileConfigFile = ProfileConfigFile.PROFILE,
    ) -> Path:
        return self.build_profiles_folder_path() / profile_key / config_file.value

    def read_config_file(self, path: Union[Path, str]) -> ConDocument:
        """Read and parse a .con file.

        Raises:
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be read
        """
        path = Path(path)
        logger.debug(f"Reading {path}")
        return ConDocument.from_bytes(path, path.read_bytes())

    def write_config_file(self, document: ConDocument) -> None:
        """Serialize a document and write it back to its path.

        Raises:
            OSError: If the file cannot be written
        """
        logger.debug(f"Writing {document.path}")
        Path(document.path).write_bytes(document.to_bytes())

    def read_global_config(self) -> ConDocument:
        return self.read_config_file(self.build_global_config_path())

    def read_profile_config(
        self,
        profile_key: str,
        config_file: ProfileConfigFile = ProfileConfigFile.PROFILE,
    ) -> ConDocument:
        return self.read_config_file(self.build_profile_config_path(profile_key, config_file))

    def get_profile_keys(self) -> list[str]:
        """List the keys of all profiles.

        A profile is any folder in the profiles folder that contains a
        Profile.con file.

        Returns:
            Profile keys sorted by name

        Raises:
            FileNotFoundError: If the profiles folder does not exist
        """
        profiles_path = self.build_profiles_folder_path()

        profile_keys = []
        for entry in sorted(profiles_path.iterdir()):
            if entry.is_dir() and (entry / GamePaths.PROFILE_CON_FILE_NAME).is_file():
                profile_keys.append(entry.name)

        return profile_keys

    def is_valid_profile_key(self, profile_key: str) -> bool:
        """Check whether a profile with the given key exists."""
        return profile_key in self.get_profile_keys()

    def purge_shader_cache(self) -> int:
        """Delete the shader cache (.cfx) folders of all mods.

        Shader cache files are stored in mods/<mod>/cache/<uuid>/, so
        everything inside each mod's cache folder is removed.

        Returns:
            Number of removed cache entries
        """
        base_path = self.build_base_path()
        return self._glob_remove_all(
            base_path / GamePaths.MODS_DIR_NAME / "*" / GamePaths.CACHE_DIR_NAME / "*"
        )

    def purge_logo_cache(self) -> int:
        """Delete all cached server banner images.

        Returns:
            Number of removed cache entries
        """
        return self._glob_remove_all(self.build_base_path() / GamePaths.LOGO_CACHE_DIR_NAME / "*")

    def _glob_remove_all(self, pattern: Path) -> int:
        base_path = self.build_base_path()
        # Escape the base path so folder names with glob characters stay literal
        relative = pattern.relative_to(base_path)
        matches = [Path(match) for match in sorted(glob.glob(str(Path(glob.escape(str(base_path))) / relative)))]

        # Check every match before removing any, so a refused match leaves the cache intact
        for path in matches:
            validate_removal_path(path, base_path)

        for path in matches:
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink()
            logger.debug(f"Removed {path}")

        return len(matches)
