# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación de la clave AES-128 a partir de la passphrase.
# --------------------------------------------------------------
"""Funciones de derivación de claves para el cifrado de ficheros."""

import binascii

from cryptography.hazmat.primitives import hashes

from ficrypt.errors import InvalidEncoding

KEY_SIZE = 16


def derive_key(passphrase: str) -> bytes:
    """Deriva una clave de 128 bits usando SHA-256 sobre la passphrase.

    El digest se codifica en hexadecimal, se conservan los primeros 32
    caracteres y se decodifican de nuevo a bytes. No hay salt ni
    iteraciones: la misma passphrase produce siempre la misma clave.

    Args:
        passphrase (str): Passphrase introducida por el usuario.

    Returns:
        bytes: Clave simétrica de 16 bytes.

    Raises:
        InvalidEncoding: Si el prefijo hexadecimal no puede decodificarse.

    """

    digest = hashes.Hash(hashes.SHA256())
    digest.update(passphrase.encode("utf-8"))
    prefix = digest.finalize().hex()[: KEY_SIZE * 2]
    try:
        return binascii.unhexlify(prefix)
    except (binascii.Error, ValueError) as exc:
        raise InvalidEncoding(f"Prefijo hexadecimal inválido: {exc}") from exc
