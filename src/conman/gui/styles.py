"""Theme and style constants for the GUI.

Constants:
    COLORS: Button and text colors
    FONTS: (family, size[, weight]) tuples
    PADDING: Spacing in pixels
    WINDOW_SIZES: (width, height) of each window
"""

COLORS = {
    "primary": "#3a4a2c",        # Profile actions (olive, matches the icon)
    "primary_hover": "#2a3620",
    "danger": "#b03a2e",         # Cache purges, which delete files
    "danger_hover": "#7f2a21",
    "muted": "#6c757d",          # Version footer
}

FONTS = {
    "heading": ("Segoe UI", 14, "bold"),
    "body": ("Segoe UI", 12),
    "small": ("Segoe UI", 10),
}

PADDING = {
    "small": 6,    # Between buttons
    "medium": 12,  # Between sections
    "large": 18,   # Window margins
}

# Both windows have a fixed size
WINDOW_SIZES = {
    "main": (320, 520),
    "password_dialog": (340, 180),
}
