"""Configuration data models"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class ProfileConfigFile(Enum):
    """Configuration files stored in each Battlefield 2 profile folder"""
    AUDIO = "Audio.con"
    CONTROLS = "Controls.con"
    DEMO_BOOKMARKS = "DemoBookmarks.con"
    GENERAL = "General.con"
    HAPTIC = "Haptic.con"
    MAP_LIST = "mapList.con"
    PROFILE = "Profile.con"
    SERVER_SETTINGS = "ServerSettings.con"
    VIDEO = "Video.con"


class ProfileType(Enum):
    """Types of Battlefield 2 profiles"""
    MULTIPLAYER = "multiplayer"
    SINGLEPLAYER = "singleplayer"


@dataclass
class Profile:
    """A local Battlefield 2 profile"""
    key: str  # Folder name, e.g. "0001"
    name: str
    type: ProfileType

    @property
    def is_multiplayer(self) -> bool:
        return self.type == ProfileType.MULTIPLAYER


@dataclass
class Settings:
    """Application settings"""
    documents_dir: Optional[Path] = None  # None = resolve the user's documents folder
    demo_bookmark_max_age_days: int = 7
    confirm_actions: bool = True
