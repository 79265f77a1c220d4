"""Symmetric obfuscation of stored credentials with AES."""

from __future__ import annotations

import base64
import binascii
import enum
import os
from dataclasses import dataclass

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

AES_KEY = "coscli-secret"
AES_BLOCK_SIZE = 16


class AesMode(enum.IntEnum):
    """Block cipher modes supported by :class:`AesTool`."""

    ECB = 1
    CBC = 2


def _zero_pad(data: bytes) -> bytes:
    # Always appends between 1 and 16 zero bytes.
    count = AES_BLOCK_SIZE - len(data) % AES_BLOCK_SIZE
    return data + b"\x00" * count


def _zero_unpad(data: bytes) -> bytes:
    return data.rstrip(b"\x00")


@dataclass
class AesTool:
    """AES encryption with zero padding of both key and data."""

    key: bytes
    block_size: int = AES_BLOCK_SIZE
    mode: AesMode = AesMode.ECB

    def _algorithm(self) -> algorithms.AES:
        try:
            return algorithms.AES(_zero_pad(self.key))
        except ValueError as exc:
            raise ValueError(f"invalid AES key: {exc}") from exc

    def encrypt(self, src: bytes) -> bytes:
        """Encrypt ``src``; CBC output is prefixed with its random IV."""
        algorithm = self._algorithm()
        data = _zero_pad(src)
        if self.mode is AesMode.CBC:
            iv = os.urandom(AES_BLOCK_SIZE)
            encryptor = Cipher(algorithm, modes.CBC(iv)).encryptor()
            return iv + encryptor.update(data) + encryptor.finalize()
        encryptor = Cipher(algorithm, modes.ECB()).encryptor()
        return encryptor.update(data) + encryptor.finalize()

    def decrypt(self, src: bytes) -> bytes:
        """Decrypt ``src`` and strip trailing zero bytes."""
        algorithm = self._algorithm()
        if self.mode is AesMode.CBC:
            if len(src) < AES_BLOCK_SIZE:
                raise ValueError("ciphertext is shorter than the IV")
            iv, data = src[:AES_BLOCK_SIZE], src[AES_BLOCK_SIZE:]
            if len(data) % AES_BLOCK_SIZE:
                raise ValueError("ciphertext is not a multiple of the block size")
            decryptor = Cipher(algorithm, modes.CBC(iv)).decryptor()
        else:
            data = src
            if len(data) % AES_BLOCK_SIZE:
                raise ValueError("input not full blocks")
            decryptor = Cipher(algorithm, modes.ECB()).decryptor()
        plain = decryptor.update(data) + decryptor.finalize()
        return _zero_unpad(plain)


def _default_tool() -> AesTool:
    return AesTool(AES_KEY.encode(), AES_BLOCK_SIZE, AesMode.ECB)


def encrypt_secret(src: str) -> str:
    """Encrypt a secret and return it base64 encoded."""
    return base64.b64encode(_default_tool().encrypt(src.encode())).decode("ascii")


def decrypt_secret(encoded: str) -> str:
    """Decode and decrypt a value produced by :func:`encrypt_secret`."""
    try:
        raw = base64.b64decode(encoded, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 secret: {exc}") from exc
    return _default_tool().decrypt(raw).decode("utf-8", errors="replace")