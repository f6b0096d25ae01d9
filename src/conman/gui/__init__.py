"""GUI module using CustomTkinter.

Components:
    MainWindow: Profile selection plus buttons for every profile and
                global maintenance action
    PasswordDialog: Shows and updates the password of a multiplayer profile

Submodules:
    styles: Theme constants (colors, fonts, padding, window sizes)
"""

from .main_window import MainWindow
from .password_dialog import PasswordDialog

__all__ = [
    "MainWindow",
    "PasswordDialog",
]
