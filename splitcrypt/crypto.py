"""Optional encryption of file parts with ChaCha20 and a SHA-256 checksum."""

from __future__ import annotations

import base64
import binascii
import hashlib
import os
from abc import ABC, abstractmethod

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms

KEY_SIZE = 32
IV_SIZE = 12
HASH_SIZE = 32


class CryptoError(ValueError):
    """Raised when a key is unusable or encrypted data fails to verify."""


class CryptoProcessor(ABC):
    """Turns plain data into stored data and back."""

    @abstractmethod
    def encrypt(self, data: bytes) -> bytes:
        """Return the stored form of ``data``."""

    @abstractmethod
    def decrypt(self, data: bytes) -> bytes:
        """Return the plain form of stored ``data``."""


class NoEncryption(CryptoProcessor):
    """Passes data through unchanged."""

    def encrypt(self, data: bytes) -> bytes:
        return bytes(data)

    def decrypt(self, data: bytes) -> bytes:
        return bytes(data)


class ChachaEncryption(CryptoProcessor):
    """ChaCha20 with a random 12-byte IV prefix and a SHA-256 suffix of the plaintext."""

    def __init__(self, key: bytes) -> None:
        if len(key) != KEY_SIZE:
            raise CryptoError("Invalid key length")
        self._key = bytes(key)

    @classmethod
    def from_base64(cls, key_base64: str) -> "ChachaEncryption":
        """Build a processor from a standard base64 encoded 32-byte key."""
        try:
            key = base64.b64decode(key_base64, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise CryptoError(str(exc)) from exc
        return cls(key)

    def _transform(self, iv: bytes, data: bytes) -> bytes:
        # The block counter starts at zero and precedes the 12-byte nonce.
        nonce = bytes(4) + iv
        cipher = Cipher(algorithms.ChaCha20(self._key, nonce), mode=None)
        transformer = cipher.encryptor()
        return transformer.update(bytes(data)) + transformer.finalize()

    def encrypt(self, data: bytes) -> bytes:
        iv = os.urandom(IV_SIZE)
        digest = hashlib.sha256(data).digest()
        return iv + self._transform(iv, data) + digest

    def decrypt(self, data: bytes) -> bytes:
        if len(data) < IV_SIZE + HASH_SIZE:
            raise CryptoError("Encrypted data is too short")
        iv = data[:IV_SIZE]
        encrypted = data[IV_SIZE:len(data) - HASH_SIZE]
        decrypted = self._transform(iv, encrypted)
        if hashlib.sha256(decrypted).digest() != bytes(data[len(data) - HASH_SIZE:]):
            raise CryptoError("Invalid CRC")
        return decrypted


def build_crypto_processor(encryption_key: str | None) -> CryptoProcessor:
    """Return a ChaCha20 processor for a base64 key, or a pass-through one when no key is given."""
    if encryption_key is None:
        return NoEncryption()
    return ChachaEncryption.from_base64(encryption_key)