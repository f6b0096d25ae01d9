"""Core business logic module.

This module contains the .con document model and the Battlefield 2 specific
operations built on top of it.

Submodules:
    con_document: ConDocument/ConValue for parsing and writing .con files
    bf2: Battlefield 2 keys and transformations (default profile, server
         history, demo bookmarks, help voice overs, login details)
    help_lines: Catalog of voice over help line identifiers
    handler: ConHandler for reading/writing files below the documents folder
    actions: Read-modify-write maintenance actions used by CLI and GUI
"""

from .con_document import ConDocument, ConValue, KeyNotFoundError
from .handler import ConHandler

__all__ = [
    "ConDocument",
    "ConValue",
    "KeyNotFoundError",
    "ConHandler",
]
