"""Dialog for viewing and updating a profile's password"""

from tkinter import messagebox

import customtkinter as ctk

from ..config.schema import Profile
from ..core import actions
from ..core.handler import ConHandler
from ..logging_config import get_logger
from .styles import FONTS, PADDING, WINDOW_SIZES

logger = get_logger("password_dialog")


class PasswordDialog(ctk.CTkToplevel):
    """Modal dialog showing the decrypted password of a multiplayer profile.

    Saving encrypts the entered password and writes it to Profile.con.
    """

    def __init__(self, parent, handler: ConHandler, profile: Profile, current_password: str):
        """Initialize the password dialog.

        Args:
            parent: Parent window
            handler: File handler used to store the new password
            profile: The profile being edited
            current_password: Decrypted current password
        """
        super().__init__(parent)

        self.handler = handler
        self.profile = profile
        self.password_changed = False
        self.password_visible = False

        self.title(f"Edit password for {profile.name}")
        width, height = WINDOW_SIZES["password_dialog"]
        self.geometry(f"{width}x{height}")
        self.resizable(False, False)

        # Center on parent
        self.transient(parent)
        self.grab_set()

        self.password_var = ctk.StringVar(value=current_password)
        self._create_ui()

        self.focus_force()

    def _create_ui(self):
        container = ctk.CTkFrame(self, fg_color="transparent")
        container.pack(fill="both", expand=True, padx=PADDING["large"], pady=PADDING["large"])

        label = ctk.CTkLabel(container, text="Enter/update password", font=FONTS["body"])
        label.pack(anchor="w")

        entry_row = ctk.CTkFrame(container, fg_color="transparent")
        entry_row.pack(fill="x", pady=(PADDING["small"], PADDING["medium"]))

        self.password_entry = ctk.CTkEntry(entry_row, textvariable=self.password_var, show="*")
        self.password_entry.pack(side="left", fill="x", expand=True)

        self.toggle_button = ctk.CTkButton(
            entry_row, text="Show", width=60, command=self._toggle_visibility
        )
        self.toggle_button.pack(side="right", padx=(PADDING["small"], 0))

        button_frame = ctk.CTkFrame(container, fg_color="transparent")
        button_frame.pack(fill="x")

        cancel_btn = ctk.CTkButton(
            button_frame,
            text="Cancel",
            width=100,
            fg_color="transparent",
            border_width=1,
            text_color=("gray10", "gray90"),
            command=self.destroy,
        )
        cancel_btn.pack(side="left")

        save_btn = ctk.CTkButton(button_frame, text="Save", width=100, command=self._save_and_close)
        save_btn.pack(side="right")

    def _toggle_visibility(self):
        self.password_visible = not self.password_visible
        self.password_entry.configure(show="" if self.password_visible else "*")
        self.toggle_button.configure(text="Hide" if self.password_visible else "Show")

    def _save_and_close(self):
        """Store the password and close the dialog."""
        try:
            actions.set_profile_password(self.handler, self.profile.key, self.password_var.get())
        except Exception as e:
            logger.exception(f"Failed to update password of profile {self.profile.key}")
            messagebox.showerror("Error", f"Failed to update password:\n\n{e}", parent=self)
            return

        self.password_changed = True
        self.destroy()
