"""Main application entry point and orchestrator"""

import argparse
import sys
from datetime import timedelta
from functools import partial
from pathlib import Path
from typing import Callable, Optional

from . import __app_name__, __version__
from .config.manager import ConfigurationManager
from .config.schema import Profile, Settings
from .core import actions, bf2
from .core.handler import ConHandler
from .logging_config import get_logger, setup_logging

logger = get_logger("app")


class ConmanApp:
    """Application orchestrator.

    Loads settings, determines the available profiles and then either opens
    the GUI or runs the actions requested on the command line.
    """

    def __init__(self, documents_dir: Optional[Path] = None):
        self.config_manager = ConfigurationManager()
        self.settings = self._load_settings()
        if documents_dir is not None:
            self.settings.documents_dir = documents_dir

        self.handler = ConHandler(self.settings.documents_dir)
        self.profiles: list[Profile] = []
        self.default_profile_key = ""

    def _load_settings(self) -> Settings:
        if self.config_manager.config_path.exists():
            return self.config_manager.load_or_default()

        # Write the defaults on first run so they can be edited
        settings = self.config_manager.create_default()
        try:
            self.config_manager.save()
        except OSError as e:
            logger.warning(f"Could not write default configuration: {e}")
        return settings

    @property
    def demo_bookmark_max_age(self) -> timedelta:
        return timedelta(days=self.settings.demo_bookmark_max_age_days)

    def load_profiles(self) -> None:
        """Read the available profiles and the current default profile.

        Raises:
            OSError: If the profile folders cannot be read
            KeyNotFoundError: If a profile has no name
            ProfileReferenceError: If Global.con has no valid default profile reference
        """
        self.profiles = bf2.get_profiles(self.handler)
        self.default_profile_key = bf2.read_default_profile_key(self.handler)
        logger.debug(f"Found {len(self.profiles)} profiles, default profile is {self.default_profile_key}")

    def run_gui(self) -> None:
        """Open the main window and run the Tk main loop."""
        import customtkinter as ctk

        from .gui.main_window import MainWindow

        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        window = MainWindow(self.handler, self.profiles, self.default_profile_key, self.settings)
        window.mainloop()

    def run_cli(self, args: argparse.Namespace) -> int:
        """Run the actions requested on the command line.

        A failed action is logged and does not prevent the remaining ones.

        Returns:
            0 if every action succeeded, 1 otherwise
        """
        failed = False
        profile_key = self.default_profile_key

        if args.default_profile:
            if self._run_action(
                "set default profile",
                args.default_profile,
                partial(actions.set_default_profile, self.handler, args.default_profile),
            ):
                # Use new default profile from here on
                profile_key = args.default_profile
                self.default_profile_key = profile_key
            else:
                failed = True

        profile_actions = [
            (args.purge_server_history, "purge server history",
             partial(actions.purge_server_history, self.handler, profile_key)),
            (args.purge_server_favorites, "purge server favorites",
             partial(actions.purge_server_favorites, self.handler, profile_key)),
            (args.purge_demo_bookmarks, "purge old demo bookmarks",
             partial(actions.purge_old_demo_bookmarks, self.handler, profile_key, self.demo_bookmark_max_age)),
            (args.disable_help_voice_overs, "mark all voice over help lines as played",
             partial(actions.mark_all_voice_over_help_as_played, self.handler, profile_key)),
        ]
        for requested, description, action in profile_actions:
            if requested and not self._run_action(description, profile_key, action):
                failed = True

        global_actions = [
            (args.purge_shader_cache, "purge shader cache", partial(actions.purge_shader_cache, self.handler)),
            (args.purge_logo_cache, "purge logo cache", partial(actions.purge_logo_cache, self.handler)),
        ]
        for requested, description, action in global_actions:
            if requested and not self._run_action(description, None, action):
                failed = True

        return 1 if failed else 0

    @staticmethod
    def _run_action(description: str, profile_key: Optional[str], action: Callable[[], None]) -> bool:
        try:
            action()
        except Exception as e:
            if profile_key is not None:
                logger.error(f"Failed to {description} (profile {profile_key}): {e}")
            else:
                logger.error(f"Failed to {description}: {e}")
            return False
        return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bf2-conman",
        description="Manage Battlefield 2 profile configuration files.",
    )
    parser.add_argument("--version", action="version", version=f"{__app_name__} v{__version__}")
    parser.add_argument("--no-gui", action="store_true",
                        help="do not open/use the graphical user interface")
    parser.add_argument("--default-profile", metavar="KEY", default="",
                        help="set the given profile as the current default profile")
    parser.add_argument("--purge-server-history", action="store_true",
                        help="purge all server history entries from the current default profile's General.con")
    parser.add_argument("--purge-server-favorites", action="store_true",
                        help="purge all favorite servers from the current default profile's General.con")
    parser.add_argument("--purge-demo-bookmarks", action="store_true",
                        help="purge old demo bookmarks from the current default profile")
    parser.add_argument("--disable-help-voice-overs", action="store_true",
                        help="mark all help voice over lines as played for the current default profile")
    parser.add_argument("--purge-shader-cache", action="store_true",
                        help="delete the shader cache of all mods")
    parser.add_argument("--purge-logo-cache", action="store_true",
                        help="delete all cached server logos")
    parser.add_argument("--documents-dir", metavar="DIR", type=Path,
                        help="documents folder containing \"Battlefield 2\" (overrides the configuration)")
    parser.add_argument("--debug", action="store_true", help="log debug output to the console")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Application entry point."""
    args = build_parser().parse_args(argv)

    # Initialize logging first
    logger = setup_logging(debug=args.debug, console=args.no_gui)
    logger.info(f"Starting {__app_name__} v{__version__}")

    try:
        try:
            app = ConmanApp(documents_dir=args.documents_dir)
            app.load_profiles()
        except Exception as e:
            logger.exception("Failed to determine available profiles and current default profile")
            if not args.no_gui:
                _show_startup_error(e)
            return 1

        if args.no_gui:
            return app.run_cli(args)

        app.run_gui()
        return 0
    finally:
        logger.info(f"{__app_name__} shutting down")


def _show_startup_error(error: BaseException) -> None:
    """Show an error dialog if something goes wrong during startup."""
    import tkinter as tk
    from tkinter import messagebox

    root = tk.Tk()
    root.withdraw()
    messagebox.showerror(
        "Startup Error",
        f"Failed to start {__app_name__}:\n\n{error}"
    )
    root.destroy()


if __name__ == "__main__":
    sys.exit(main())
