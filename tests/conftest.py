"""Shared fixtures: a fake documents folder with a Battlefield 2 profile layout."""

import logging
from pathlib import Path

import pytest

from conman.config.paths import GamePaths
from conman.core.handler import ConHandler


def write_con(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content.encode("utf-8"))
    return path


@pytest.fixture
def documents_dir(tmp_path):
    """Documents folder with a Global.con, two profiles and the built-in default profile."""
    documents = tmp_path / "Documents"
    profiles = documents / "Battlefield 2" / "Profiles"

    write_con(profiles / "Global.con", 'GlobalSettings.setDefaultUser "0001"\r\nGlobalSettings.setNamePrefix ""\r\n')

    write_con(profiles / "0001" / "Profile.con", (
        'LocalProfile.setName "mister249"\r\n'
        'LocalProfile.setNick "mister249"\r\n'
        'LocalProfile.setGamespyNick "mister249"\r\n'
        'LocalProfile.setEmail "mister249@example.com"\r\n'
        'LocalProfile.setPassword 01000000d08c9ddf\r\n'
    ))
    write_con(profiles / "0001" / "General.con", (
        'GeneralSettings.addServerHistory "1.2.3.4" 16567 "some-server" 0\r\n'
        'GeneralSettings.addServerHistory "5.6.7.8" 16567 "other-server" 0\r\n'
        'GeneralSettings.addFavouriteServer "1.2.3.4" 16567 "some-server" 0\r\n'
        'GeneralSettings.setPlayedVOHelp "HUD_HELP_A"\r\n'
        'GeneralSettings.setViewIntroMovie 0\r\n'
    ))

    write_con(profiles / "0002" / "Profile.con", (
        'LocalProfile.setName "offline"\r\n'
        'LocalProfile.setGamespyNick ""\r\n'
    ))

    write_con(profiles / "Default" / "Profile.con", 'LocalProfile.setName "Default"\r\n')

    # A folder without Profile.con is not a profile
    (profiles / "0003").mkdir()

    return documents


@pytest.fixture
def handler(documents_dir):
    return ConHandler(documents_dir)


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Redirect the conman config and log files into the temp directory."""
    config = tmp_path / "config"
    monkeypatch.setattr(GamePaths, "CONFIG_DIR", config)
    monkeypatch.setattr(GamePaths, "CONFIG_FILE", config / "configuration.xml")
    monkeypatch.setattr(GamePaths, "LOG_FILE", config / "conman.log")
    return config


@pytest.fixture(autouse=True)
def reset_logging():
    """Close the handlers setup_logging() attached so no test writes to another's files."""
    yield
    logger = logging.getLogger("conman")
    for log_handler in list(logger.handlers):
        log_handler.close()
        logger.removeHandler(log_handler)
