"""BF2 conman - configuration manager for Battlefield 2 profiles.

This application provides:
    - Reading and writing of Refractor engine configuration files (.con)
    - Switching the default profile
    - Purging server history, favorite servers and old demo bookmarks
    - Disabling the in-game help voice overs
    - Viewing and updating the (DPAPI encrypted) profile password
    - Purging the shader and server logo caches

The application uses CustomTkinter for its GUI and can also run without it
from the command line.

Package Structure:
    app: Main application entry point, command line interface
    config: Paths, data models, settings storage and password encryption
    core: .con document model, Battlefield 2 operations, file handler, actions
    gui: User interface components (main window, password dialog)
    assets: Application icon

Quick Start:
    Run from command line::

        bf2-conman
        bf2-conman --no-gui --purge-server-history --disable-help-voice-overs

    Or programmatically::

        from conman.core import ConDocument
        doc = ConDocument.from_bytes("General.con", data)

Configuration:
    - Config file: %APPDATA%/conman/configuration.xml
    - Log file: %APPDATA%/conman/conman.log
"""

__version__ = "0.2.0"
__app_name__ = "BF2 conman"
