"""Main application window with profile selection and maintenance actions."""

import tkinter as tk
from datetime import timedelta
from tkinter import messagebox
from typing import Callable, Optional

import customtkinter as ctk
from PIL import ImageTk

from .. import __app_name__, __version__
from ..assets.icon_generator import create_app_icon
from ..config.schema import Profile, Settings
from ..core import actions
from ..core.bf2 import profile_select_options
from ..core.handler import ConHandler
from ..logging_config import get_logger
from .password_dialog import PasswordDialog
from .styles import COLORS, FONTS, PADDING, WINDOW_SIZES

logger = get_logger("main_window")


class MainWindow(ctk.CTk):
    """Main application window.

    Layout (top to bottom):
    - Profile dropdown, preselecting the current default profile
    - "Profile actions" applied to the selected profile
    - "Global actions" applied to the game installation
    - Version footer
    """

    def __init__(
        self,
        handler: ConHandler,
        profiles: list[Profile],
        default_profile_key: str,
        settings: Settings,
    ):
        super().__init__()

        self.handler = handler
        self.profiles = profiles
        self.default_profile_key = default_profile_key
        self.settings = settings

        self.profile_options, selected = profile_select_options(profiles, default_profile_key)
        self.profile_var = ctk.StringVar(
            value=self.profile_options[selected] if self.profile_options else "No profiles found"
        )

        # Keeps the icon image alive, Tk only holds a weak reference
        self._icon_image: Optional[ImageTk.PhotoImage] = None

        # Window setup
        self.title(f"{__app_name__} v{__version__}")
        width, height = WINDOW_SIZES["main"]
        self.geometry(f"{width}x{height}")
        self.resizable(False, False)

        self._set_app_icon()
        self._create_ui()

    def _set_app_icon(self):
        try:
            self._icon_image = ImageTk.PhotoImage(create_app_icon(64))
            self.iconphoto(True, self._icon_image)
        except (OSError, tk.TclError) as e:
            logger.debug("Could not set app icon: %s", e)

    def _create_ui(self):
        """Create the window UI."""
        container = ctk.CTkFrame(self, fg_color="transparent")
        container.pack(fill="both", expand=True, padx=PADDING["large"], pady=PADDING["medium"])

        label = ctk.CTkLabel(container, text="Select profile", font=FONTS["body"])
        label.pack(anchor="w")

        self.profile_menu = ctk.CTkOptionMenu(
            container,
            values=self.profile_options or ["No profiles found"],
            variable=self.profile_var,
        )
        self.profile_menu.pack(fill="x", pady=(0, PADDING["medium"]))

        profile_section = self._create_section(container, "Profile actions")
        profile_buttons = [
            ("Set as default profile", self._on_set_default_profile),
            ("Purge server history", self._on_purge_server_history),
            ("Purge server favorites", self._on_purge_server_favorites),
            ("Purge old demo bookmarks", self._on_purge_demo_bookmarks),
            ("Disable help voice overs", self._on_disable_help_voice_overs),
            ("Edit password", self._on_edit_password),
        ]
        for text, command in profile_buttons:
            button = self._create_button(profile_section, text, command)
            if not self.profiles:
                button.configure(state="disabled")

        global_section = self._create_section(container, "Global actions")
        self._create_button(global_section, "Purge shader cache", self._on_purge_shader_cache, danger=True)
        self._create_button(global_section, "Purge logo cache", self._on_purge_logo_cache, danger=True)

        footer = ctk.CTkLabel(
            container,
            text=f"{__app_name__} v{__version__}",
            font=FONTS["small"],
            text_color=COLORS["muted"],
        )
        footer.pack(side="bottom")

    def _create_section(self, parent, title: str) -> ctk.CTkFrame:
        section = ctk.CTkFrame(parent)
        section.pack(fill="x", pady=(0, PADDING["medium"]))

        header = ctk.CTkLabel(section, text=title, font=FONTS["heading"])
        header.pack(anchor="w", padx=PADDING["medium"], pady=(PADDING["small"], 0))

        return section

    def _create_button(self, parent, text: str, command: Callable[[], None], danger: bool = False) -> ctk.CTkButton:
        button = ctk.CTkButton(
            parent,
            text=text,
            command=command,
            fg_color=COLORS["danger"] if danger else COLORS["primary"],
            hover_color=COLORS["danger_hover"] if danger else COLORS["primary_hover"],
        )
        button.pack(fill="x", padx=PADDING["medium"], pady=PADDING["small"])
        return button

    def _get_selected_profile(self) -> Optional[Profile]:
        try:
            index = self.profile_options.index(self.profile_var.get())
        except ValueError:
            return None
        return self.profiles[index]

    def _run_action(self, description: str, action: Callable[[], None], confirm: bool = False) -> bool:
        """Run an action and report the result in a message box.

        Args:
            description: What the action does, e.g. "purge server history"
            action: Callable performing the action
            confirm: If True (and confirmations are enabled), ask first

        Returns:
            True if the action succeeded
        """
        if confirm and self.settings.confirm_actions:
            if not messagebox.askyesno("Confirm", f"Do you really want to {description}?", parent=self):
                return False

        try:
            action()
        except Exception as e:
            logger.exception(f"Failed to {description}")
            messagebox.showerror("Error", f"Failed to {description}:\n\n{e}", parent=self)
            return False

        messagebox.showinfo("Success", f"Done: {description}", parent=self)
        return True

    def _on_set_default_profile(self):
        profile = self._get_selected_profile()
        if profile is None:
            return

        if self._run_action(
            f"set {profile.name} as default profile",
            lambda: actions.set_default_profile(self.handler, profile.key),
        ):
            self.default_profile_key = profile.key

    def _on_purge_server_history(self):
        profile = self._get_selected_profile()
        if profile is None:
            return

        self._run_action(
            f"purge server history of {profile.name}",
            lambda: actions.purge_server_history(self.handler, profile.key),
            confirm=True,
        )

    def _on_purge_server_favorites(self):
        profile = self._get_selected_profile()
        if profile is None:
            return

        self._run_action(
            f"purge server favorites of {profile.name}",
            lambda: actions.purge_server_favorites(self.handler, profile.key),
            confirm=True,
        )

    def _on_purge_demo_bookmarks(self):
        profile = self._get_selected_profile()
        if profile is None:
            return

        max_age = timedelta(days=self.settings.demo_bookmark_max_age_days)
        self._run_action(
            f"purge demo bookmarks older than {max_age.days} days from {profile.name}",
            lambda: actions.purge_old_demo_bookmarks(self.handler, profile.key, max_age),
            confirm=True,
        )

    def _on_disable_help_voice_overs(self):
        profile = self._get_selected_profile()
        if profile is None:
            return

        self._run_action(
            f"disable help voice overs for {profile.name}",
            lambda: actions.mark_all_voice_over_help_as_played(self.handler, profile.key),
        )

    def _on_edit_password(self):
        profile = self._get_selected_profile()
        if profile is None:
            return

        if not profile.is_multiplayer:
            messagebox.showinfo(
                "Edit password",
                f"{profile.name} is a singleplayer profile and has no password",
                parent=self,
            )
            return

        try:
            current_password = actions.get_profile_password(self.handler, profile.key)
        except Exception as e:
            logger.exception(f"Failed to read password of profile {profile.key}")
            messagebox.showerror("Error", f"Failed to read password:\n\n{e}", parent=self)
            return

        dialog = PasswordDialog(self, self.handler, profile, current_password)
        self.wait_window(dialog)

    def _on_purge_shader_cache(self):
        self._run_action(
            "purge the shader cache",
            lambda: actions.purge_shader_cache(self.handler),
            confirm=True,
        )

    def _on_purge_logo_cache(self):
        self._run_action(
            "purge the logo cache",
            lambda: actions.purge_logo_cache(self.handler),
            confirm=True,
        )
