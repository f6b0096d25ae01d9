"""Application assets.

The application icon is drawn with Pillow instead of being loaded from disk.

Submodules:
    icon_generator: create_app_icon() and a script to write the icon to disk
"""

from .icon_generator import create_app_icon

__all__ = [
    "create_app_icon",
]
