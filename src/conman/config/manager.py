"""Configuration management - load/save XML configuration"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional
from xml.dom import minidom

from .paths import GamePaths
from .schema import Settings
from ..logging_config import get_logger

logger = get_logger("config_manager")


class ConfigurationManager:
    """Manages application configuration persistence.

    Handles loading and saving the conman settings to XML format.
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or GamePaths.CONFIG_FILE
        self.settings: Optional[Settings] = None

    def load(self) -> Settings:
        """Load configuration from XML file.

        Returns:
            Settings object with loaded values

        Raises:
            FileNotFoundError: If config file doesn't exist
            ET.ParseError: If XML is malformed
            ValueError: If a numeric setting is malformed
        """
        logger.debug(f"Loading configuration from {self.config_path}")
        tree = ET.parse(self.config_path)
        root = tree.getroot()

        settings_elem = root.find("Settings")
        if settings_elem is not None:
            settings = Settings(
                documents_dir=self._parse_path(settings_elem, "DocumentsDir"),
                demo_bookmark_max_age_days=self._parse_int(settings_elem, "DemoBookmarkMaxAgeDays", 7),
                confirm_actions=self._parse_bool(settings_elem, "ConfirmActions", True),
            )
        else:
            # Missing Settings element - use all defaults
            settings = Settings()

        if settings.demo_bookmark_max_age_days < 0:
            raise ValueError(f"DemoBookmarkMaxAgeDays must not be negative: {settings.demo_bookmark_max_age_days}")

        self.settings = settings
        logger.debug(f"Configuration loaded: {settings}")
        return self.settings

    def load_or_default(self) -> Settings:
        """Load configuration, falling back to defaults.

        A missing or unreadable configuration file is not fatal; the
        defaults are used instead.

        Returns:
            Loaded or default Settings
        """
        if not self.config_path.exists():
            return self.create_default()

        try:
            return self.load()
        except (ET.ParseError, OSError, ValueError) as e:
            logger.warning(f"Could not load config, using defaults: {e}")
            return self.create_default()

    def save(self) -> None:
        """Save current configuration to XML file.

        Creates the configuration directory if it doesn't exist.
        """
        if self.settings is None:
            raise ValueError("No configuration to save")

        logger.debug(f"Saving configuration to {self.config_path}")
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        root = ET.Element("Conman", version="1.0")

        settings_elem = ET.SubElement(root, "Settings")
        ET.SubElement(settings_elem, "DocumentsDir").text = str(self.settings.documents_dir or "")
        ET.SubElement(settings_elem, "DemoBookmarkMaxAgeDays").text = str(self.settings.demo_bookmark_max_age_days)
        ET.SubElement(settings_elem, "ConfirmActions").text = str(self.settings.confirm_actions).lower()

        # Write pretty-printed XML
        xml_str = minidom.parseString(ET.tostring(root, encoding="unicode")).toprettyxml(indent="  ")
        # Remove extra blank lines that minidom adds
        lines = [line for line in xml_str.split('\n') if line.strip()]
        xml_str = '\n'.join(lines)

        self.config_path.write_text(xml_str, encoding="utf-8")

    def create_default(self) -> Settings:
        """Create a default configuration.

        Returns:
            New Settings with default values
        """
        self.settings = Settings()
        return self.settings

    # Helper methods for XML parsing
    @staticmethod
    def _parse_bool(parent: ET.Element, tag: str, default: bool = False) -> bool:
        """Parse a boolean value from child element."""
        elem = parent.find(tag)
        if elem is not None and elem.text:
            return elem.text.strip().lower() == "true"
        return default

    @staticmethod
    def _parse_int(parent: ET.Element, tag: str, default: int) -> int:
        """Parse an integer value from child element."""
        elem = parent.find(tag)
        if elem is not None and elem.text and elem.text.strip():
            return int(elem.text.strip())
        return default

    @staticmethod
    def _parse_path(parent: ET.Element, tag: str) -> Optional[Path]:
        """Parse a path value from child element."""
        elem = parent.find(tag)
        if elem is not None and elem.text and elem.text.strip():
            return GamePaths.expand_path(elem.text.strip())
        return None
