"""Configuration module.

This module provides paths, data models and settings storage for the application.

Submodules:
    manager: ConfigurationManager for loading/saving the XML settings file
    schema: Data classes and enums (Settings, Profile, ProfileType, ProfileConfigFile)
    paths: GamePaths with Battlefield 2 folder names and the conman config location
    security: DPAPI encryption/decryption of the Profile.con password
    path_validator: Path validation utilities to prevent dangerous file operations

The settings are stored as XML in %APPDATA%/conman/configuration.xml
(~/.config/conman on other platforms).
"""

from .schema import Profile, ProfileConfigFile, ProfileType, Settings
from .paths import GamePaths

__all__ = [
    "Profile",
    "ProfileConfigFile",
    "ProfileType",
    "Settings",
    "GamePaths",
]
