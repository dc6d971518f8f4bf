"""
AES-256-CBC encryption of JSON payloads.

The value is serialised to compact JSON, PKCS7 padded, encrypted and returned
as standard base64 text. Key and IV are UTF-8 strings of 32 and 16 bytes.
"""

import base64
import binascii
import json
from typing import Any

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from meme_relay.shared import CryptoError, Logger

logger = Logger(__name__).get_logger()

KEY_SIZE = 32
IV_SIZE = 16
BLOCK_SIZE_BITS = algorithms.AES.block_size


def _cipher(key: str, iv: str) -> Cipher:
    key_bytes = key.encode("utf-8")
    iv_bytes = iv.encode("utf-8")

    if len(key_bytes) != KEY_SIZE:
        raise CryptoError(f"Key must be {KEY_SIZE} bytes, got {len(key_bytes)}")
    if len(iv_bytes) != IV_SIZE:
        raise CryptoError(f"IV must be {IV_SIZE} bytes, got {len(iv_bytes)}")

    return Cipher(algorithms.AES(key_bytes), modes.CBC(iv_bytes))


def encrypt_payload(value: Any, key: str, iv: str) -> str:
    cipher = _cipher(key, iv)
    plaintext = json.dumps(value, separators=(",", ":")).encode("utf-8")

    padder = padding.PKCS7(BLOCK_SIZE_BITS).padder()
    padded = padder.update(plaintext) + padder.finalize()

    encryptor = cipher.encryptor()
    ciphertext = encryptor.update(padded) + encryptor.finalize()

    logger.debug("Encrypted %s bytes of JSON", len(plaintext))
    return base64.b64encode(ciphertext).decode("ascii")


def decrypt_payload(token: str, key: str, iv: str) -> str:
    """Return the exact JSON text that ``encrypt_payload`` encrypted."""
    cipher = _cipher(key, iv)

    try:
        ciphertext = base64.b64decode(token, validate=True)
    except (binascii.Error, ValueError) as e:
        raise CryptoError("Encrypted payload is not valid base64") from e

    try:
        decryptor = cipher.decryptor()
        padded = decryptor.update(ciphertext) + decryptor.finalize()

        unpadder = padding.PKCS7(BLOCK_SIZE_BITS).unpadder()
        plaintext = unpadder.update(padded) + unpadder.finalize()
        return plaintext.decode("utf-8")
    except (ValueError, UnicodeDecodeError) as e:
        logger.warning("Failed to decrypt payload: %s", e)
        raise CryptoError("Encrypted payload could not be decrypted") from e


def decrypt_payload_json(token: str, key: str, iv: str) -> Any:
    text = decrypt_payload(token, key, iv)
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise CryptoError("Decrypted payload is not valid JSON") from e
