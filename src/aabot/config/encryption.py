"""AES-256-GCM encryption for sensitive configuration fields.

Each stored value is ``hex(iv) + hex(ciphertext) + hex(tag)``.  The key is
derived from the record's salt and a process-wide identifier (by default the
tail of the database URL), so it can be recomputed but is not independently
random: losing the salt or changing the identifier makes the stored values
unreadable.
"""

from __future__ import annotations

import hashlib
import os
import secrets

import structlog
from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from aabot.config.settings import get_settings
from aabot.errors import ConfigurationError, DecryptionError

logger = structlog.get_logger()

IV_LENGTH = 16
TAG_LENGTH = 16
SALT_LENGTH = 64

_ROUND_TRIP_SAMPLE = "test-encryption-value"


class FieldCipher:
    """Encrypts and decrypts individual string fields under a per-record salt."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier or "default"

    def derive_key(self, salt: str) -> bytes:
        """Return the 256-bit key for *salt*."""
        if not salt:
            raise ConfigurationError("Encryption salt is required")
        passphrase = f"AABot-{salt}-{self.identifier}"
        return hashlib.sha256(passphrase.encode("utf-8")).digest()

    def encrypt(self, plaintext: str, salt: str) -> str:
        """Encrypt *plaintext*; the empty string stays empty."""
        if not plaintext:
            return ""
        key = self.derive_key(salt)
        iv = os.urandom(IV_LENGTH)
        # AESGCM appends the tag to the ciphertext
        sealed = AESGCM(key).encrypt(iv, plaintext.encode("utf-8"), None)
        return iv.hex() + sealed.hex()

    def decrypt(self, token: str, salt: str) -> str:
        """Decrypt *token* produced by :meth:`encrypt`.

        Raises:
            DecryptionError: If the token is malformed or its tag does not
                verify (tampered data, wrong salt, or wrong identifier).
        """
        if not token:
            return ""
        key = self.derive_key(salt)
        try:
            raw = bytes.fromhex(token)
        except ValueError as exc:
            raise DecryptionError("Stored value is not valid ciphertext") from exc
        if len(raw) < IV_LENGTH + TAG_LENGTH:
            raise DecryptionError("Stored value is too short to be ciphertext")

        iv, sealed = raw[:IV_LENGTH], raw[IV_LENGTH:]
        try:
            plaintext = AESGCM(key).decrypt(iv, sealed, None)
        except InvalidTag as exc:
            raise DecryptionError("Authentication tag mismatch") from exc
        return plaintext.decode("utf-8")

    @staticmethod
    def generate_salt() -> str:
        return secrets.token_hex(SALT_LENGTH)

    def test_round_trip(self, salt: str) -> bool:
        """Encrypt and decrypt a fixed sample value under *salt*."""
        try:
            token = self.encrypt(_ROUND_TRIP_SAMPLE, salt)
            return self.decrypt(token, salt) == _ROUND_TRIP_SAMPLE
        except ConfigurationError as exc:
            logger.warning("encryption_self_test_failed", error=str(exc))
            return False


def get_cipher() -> FieldCipher:
    """Return a cipher keyed by the configured process identifier."""
    return FieldCipher(get_settings().key_identifier)
