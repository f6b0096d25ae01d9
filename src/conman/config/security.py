"""Encryption of the Battlefield 2 profile password.

Battlefield 2 stores the GameSpy password in Profile.con as the hex encoded
output of the Windows Data Protection API (DPAPI). DPAPI ties the data to the
current Windows user, so encrypted passwords can only be decrypted on the
machine and account that created them.
"""

import ctypes
import sys

from ..logging_config import get_logger

logger = get_logger("security")

# BF2 writes this description into every blob it creates
_DESCRIPTION = "This is the description string."
_CRYPTPROTECT_UI_FORBIDDEN = 0x1


class CredentialError(Exception):
    """Base class for profile password encryption errors."""


class EncryptionError(CredentialError):
    """Raised when a password cannot be encrypted."""


class DecryptionError(CredentialError):
    """Raised when a stored password cannot be decrypted."""


class _DataBlob(ctypes.Structure):
    _fields_ = [
        ("cbData", ctypes.c_uint32),
        ("pbData", ctypes.POINTER(ctypes.c_char)),
    ]


def _new_blob(data: bytes) -> tuple[_DataBlob, ctypes.Array]:
    # The buffer must outlive the API call, so hand it back to the caller
    buffer = ctypes.create_string_buffer(data, len(data))
    blob = _DataBlob(len(data), ctypes.cast(buffer, ctypes.POINTER(ctypes.c_char)))
    return blob, buffer


def _blob_to_bytes(blob: _DataBlob) -> bytes:
    data = ctypes.string_at(blob.pbData, blob.cbData)
    ctypes.windll.kernel32.LocalFree(blob.pbData)
    return data


def _protect(data: bytes) -> bytes:
    if sys.platform != "win32":
        raise EncryptionError("Profile password encryption requires Windows (DPAPI)")

    blob_in, _buffer = _new_blob(data)
    blob_out = _DataBlob()
    ok = ctypes.windll.crypt32.CryptProtectData(
        ctypes.byref(blob_in),
        _DESCRIPTION,
        None,
        None,
        None,
        _CRYPTPROTECT_UI_FORBIDDEN,
        ctypes.byref(blob_out),
    )
    if not ok:
        raise EncryptionError(f"CryptProtectData failed: {ctypes.WinError()}")
    return _blob_to_bytes(blob_out)


def _unprotect(data: bytes) -> bytes:
    if sys.platform != "win32":
        raise DecryptionError("Profile password decryption requires Windows (DPAPI)")

    blob_in, _buffer = _new_blob(data)
    blob_out = _DataBlob()
    description = ctypes.c_wchar_p()
    ok = ctypes.windll.crypt32.CryptUnprotectData(
        ctypes.byref(blob_in),
        ctypes.byref(description),
        None,
        None,
        None,
        _CRYPTPROTECT_UI_FORBIDDEN,
        ctypes.byref(blob_out),
    )
    if not ok:
        raise DecryptionError(f"CryptUnprotectData failed: {ctypes.WinError()}")
    ctypes.windll.kernel32.LocalFree(description)
    return _blob_to_bytes(blob_out)


def encrypt_profile_password(plain_text: str) -> str:
    """Encrypt a password the way Battlefield 2 stores it in Profile.con.

    Args:
        plain_text: The plain text password

    Returns:
        Hex encoded DPAPI blob

    Raises:
        EncryptionError: If DPAPI is unavailable or fails
    """
    # BF2 expects a terminating NUL character inside the encrypted data
    encrypted = _protect(f"{plain_text}\x00".encode("utf-8"))
    return encrypted.hex()


def decrypt_profile_password(encrypted_text: str) -> str:
    """Decrypt a password stored in Profile.con.

    Args:
        encrypted_text: Hex encoded DPAPI blob

    Returns:
        The plain text password with non-printable characters removed

    Raises:
        DecryptionError: If the value is not valid hex, DPAPI is unavailable
                         or decryption fails
    """
    try:
        data = bytes.fromhex(encrypted_text)
    except ValueError as e:
        raise DecryptionError(f"Encrypted password is not valid hex: {e}") from e

    decrypted = _unprotect(data)
    try:
        text = decrypted.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.error("Decrypted password is not valid UTF-8: %s", e)
        raise DecryptionError(f"Decrypted password is not valid UTF-8: {e}") from e

    return "".join(char for char in text if char.isprintable())
