"""
Password Encryption Tests - DPAPI hex blobs as stored in Profile.con.
"""

import sys

import pytest

from conman.config.security import (
    CredentialError,
    DecryptionError,
    EncryptionError,
    decrypt_profile_password,
    encrypt_profile_password,
)


class TestDecrypt:

    @pytest.mark.parametrize("value", ["not-hex", "0", "zz00"])
    def test_invalid_hex(self, value):
        with pytest.raises(DecryptionError, match="not valid hex"):
            decrypt_profile_password(value)

    def test_errors_share_base_class(self):
        assert issubclass(EncryptionError, CredentialError)
        assert issubclass(DecryptionError, CredentialError)


@pytest.mark.skipif(sys.platform == "win32", reason="DPAPI is available on Windows")
class TestWithoutDpapi:

    def test_encrypt(self):
        with pytest.raises(EncryptionError):
            encrypt_profile_password("secret")

    def test_decrypt(self):
        with pytest.raises(DecryptionError):
            decrypt_profile_password("01000000d08c9ddf")


@pytest.mark.skipif(sys.platform != "win32", reason="requires DPAPI")
class TestWithDpapi:

    def test_encrypt_returns_hex(self):
        encrypted = encrypt_profile_password("secret")
        assert bytes.fromhex(encrypted)
        assert encrypted == encrypted.lower()

    def test_round_trip(self):
        assert decrypt_profile_password(encrypt_profile_password("secret")) == "secret"

    def test_round_trip_empty(self):
        assert decrypt_profile_password(encrypt_profile_password("")) == ""
